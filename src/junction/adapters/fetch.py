"""Fetch-style adapter — handlers return Response values.

Mirrors the Web ``Request -> Response`` model: the request goes in, the
value returned by the chain comes out. ``res`` is an arbitrary context
object the caller passes through (``None`` by default)::

    router = (
        create_fetch_router()
        .use(auth)
        .get("/items/:id", lambda req, ctx, next: Response(req.params["id"]))
    )
    respond = router.handler()
    response = await respond(Request.from_url("GET", "http://localhost/items/7"))
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace
from typing import Any

from junction._internal.invoke import invoke
from junction.adapters.base import BaseRouter
from junction.config import HandlerOptions
from junction.errors import HTTPError
from junction.http.request import Request
from junction.http.response import Response
from junction.middleware.chain import execute

logger = logging.getLogger("junction.server")


def default_on_error(exc: BaseException, request: Request, ctx: Any) -> Response:
    """Log *exc* and return a plain-text error Response."""
    if isinstance(exc, HTTPError):
        logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
        return Response(exc.detail or str(exc.status), status=exc.status, headers=exc.headers)
    logger.exception("500 %s %s", request.method, request.path, exc_info=exc)
    return Response("Internal Server Error", status=500)


def default_on_no_match(request: Request, ctx: Any) -> Response:
    return Response(f"Route {request.method} {request.path} not found", status=404)


class FetchRouter(BaseRouter):
    """Route table dispatching ``Request`` values to ``Response`` values."""

    __slots__ = ()

    async def run(self, request: Request, ctx: Any = None) -> Any:
        """Run the matching chain and return its result (``None`` if no route)."""
        found = self.router.find(request.method, request.path)
        if not found.handlers:
            return None
        request = self.prepare_request(request, found.params)
        return await execute(found.handlers, request, ctx)

    def handler(
        self, options: HandlerOptions | None = None, **overrides: Any
    ) -> Callable[..., Awaitable[Any]]:
        """Build ``async (request, ctx=None) -> Response``."""
        options = replace(options or HandlerOptions(), **overrides)
        on_error = options.on_error or default_on_error
        on_no_match = options.on_no_match or default_on_no_match

        async def respond(request: Request, ctx: Any = None) -> Any:
            found = self.router.find(request.method, request.path)
            request = self.prepare_request(request, found.params)
            try:
                if not found.handlers or found.middle_only:
                    return await invoke(on_no_match, request, ctx)
                return await execute(found.handlers, request, ctx)
            except Exception as exc:
                return await invoke(on_error, exc, request, ctx)

        return respond


def create_fetch_router(base: str = "/") -> FetchRouter:
    """Return a new, empty ``FetchRouter``."""
    return FetchRouter(base)
