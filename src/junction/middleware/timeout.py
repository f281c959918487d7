"""Per-handler deadlines.

The chain itself has no cancellation primitive: a handler that never
returns stalls its request. Wrap slow handlers to bound them::

    router.get("/report", timeout(2.5)(build_report))

The deadline also covers any downstream handlers the wrapped handler
awaits through ``next()``. On expiry ``TimeoutError`` is raised into the
chain like any other handler failure.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

import anyio

from junction._internal.invoke import invoke
from junction.middleware.protocol import Next


def timeout(seconds: float) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Return a decorator that fails a handler after *seconds*."""
    if seconds <= 0:
        msg = f"timeout must be positive, got {seconds!r}"
        raise ValueError(msg)

    def decorator(handler: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(handler)
        async def wrapper(req: Any, res: Any, next: Next) -> Any:
            with anyio.fail_after(seconds):
                return await invoke(handler, req, res, next)

        return wrapper

    return decorator
