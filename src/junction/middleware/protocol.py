"""Handler protocol and Next type alias.

A handler is any callable matching::

    def handler(req, res, next): ...
    async def handler(req, res, next): ...

No base class required. The executor checks the shape, not the lineage.

``next()`` returns an awaitable that runs the rest of the chain and
resolves to whatever the downstream handlers produce. Sync handlers may
simply ``return next()``; the executor awaits it for them.
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeAlias

# The continuation passed to every handler
Next: TypeAlias = Callable[[], Awaitable[Any]]


class Handler(Protocol):
    """Protocol for junction handlers.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(req, res, next):
            start = time.monotonic()
            result = await next()
            res.headers["X-Time"] = f"{time.monotonic() - start:.3f}"
            return result

        # Class middleware
        class RequireJSON:
            def __call__(self, req, res, next):
                if req.content_type != "application/json":
                    raise HTTPError(415)
                return next()
    """

    def __call__(self, req: Any, res: Any, next: Next) -> Any: ...
