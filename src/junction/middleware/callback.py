"""Adapter for error-first callback handlers.

Lets handlers written in the three-argument callback style run inside
a junction chain::

    def legacy_auth(req, res, done):
        if "authorization" not in req.headers:
            done(HTTPError(401))
        else:
            done()

    router.use(callback_wrapper(legacy_auth))

``done()`` continues the chain. ``done(err)`` with any truthy value
fails the wrapped handler with it; non-exception values are wrapped in
``JunctionError``. The wrapper waits until ``done`` is called, so a
callback invoked later from a scheduled task works too.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

import anyio

from junction._internal.invoke import invoke
from junction.errors import JunctionError
from junction.middleware.protocol import Next


def callback_wrapper(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap an error-first ``fn(req, res, done)`` as a chain handler."""

    @wraps(fn)
    async def wrapper(req: Any, res: Any, next: Next) -> Any:
        called = anyio.Event()
        failure: list[BaseException] = []

        def done(err: Any = None) -> None:
            if called.is_set():
                return
            if err:
                failure.append(err if isinstance(err, BaseException) else JunctionError(err))
            called.set()

        await invoke(fn, req, res, done)
        await called.wait()
        if failure:
            raise failure[0]
        return await next()

    return wrapper
