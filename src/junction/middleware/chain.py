"""Chain executor — onion-style sequential handler invocation.

Each handler receives ``(req, res, next)``. Calling ``next()`` hands back
a ``Continuation``; awaiting it runs the following handlers and resolves
to the value the innermost non-delegating handler returned::

    async def outer(req, res, next):
        inner = await next()          # runs everything downstream
        return f"<{inner}>"

    def terminal(req, res, next):
        return "ok"

    await execute([outer, terminal], req, res)   # "<ok>"

Handlers run strictly one at a time, in order. Any exception fails the
whole chain: nothing after the raising handler runs, and every upstream
``await next()`` re-raises it.

Continuations are lazy. A sync handler that calls ``next()`` and keeps
going without returning it runs to completion first; the downstream
handlers run only after it returns.

Calling ``next()`` twice builds two continuations and runs the
downstream handlers twice. Awaiting one continuation twice raises
``RuntimeError``. Neither is guarded further.
"""

from collections.abc import Generator, Sequence
from typing import Any

from junction._internal.invoke import invoke


class Continuation:
    """Awaitable handle for "the rest of the chain".

    Nothing runs until it is awaited. A continuation a handler created
    but left unawaited is awaited by the executor once that handler
    returns, so downstream handlers still run and their errors surface.
    """

    __slots__ = ("_coro", "awaited")

    def __init__(self, coro: Any) -> None:
        self._coro = coro
        self.awaited = False

    def __await__(self) -> Generator[Any, None, Any]:
        self.awaited = True
        return self._coro.__await__()

    def close(self) -> None:
        """Discard an unawaited continuation without running it."""
        self._coro.close()


async def execute(handlers: Sequence[Any], req: Any, res: Any) -> Any:
    """Run *handlers* as one composed chain and return its result.

    An empty sequence resolves to ``None``.
    """
    if not handlers:
        return None
    return await _step(handlers, 0, req, res)


async def _step(handlers: Sequence[Any], index: int, req: Any, res: Any) -> Any:
    if index >= len(handlers):
        return None

    issued: list[Continuation] = []

    def next_() -> Continuation:
        continuation = Continuation(_step(handlers, index + 1, req, res))
        issued.append(continuation)
        return continuation

    try:
        result = await invoke(handlers[index], req, res, next_)
        for continuation in issued:
            if not continuation.awaited:
                await continuation
    except BaseException:
        for continuation in issued:
            if not continuation.awaited:
                continuation.close()
        raise
    return result
