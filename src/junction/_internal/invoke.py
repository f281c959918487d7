"""Invoke helpers — call sync or async callables uniformly.

Handlers, error callbacks and no-match callbacks can all be ``def`` or
``async def``. Any code that calls one of them goes through this helper
so the sync/async check lives in exactly one place.

Usage::

    from junction._internal.invoke import invoke

    result = await invoke(on_error, exc, request, writer)
"""

import inspect
from typing import Any


async def invoke(fn: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *fn* and await the result if it is awaitable.

    Works with both sync and async callables::

        # sync — returns immediately
        def on_no_match(req, res):
            return Response("gone", status=410)

        # async — awaited automatically
        async def on_no_match(req, res):
            await audit(req)
            return Response("gone", status=410)
    """
    result = fn(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
