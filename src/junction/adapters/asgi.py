"""ASGI adapter — serves a route table as an ASGI application.

Handlers receive ``(request, writer, next)``: a frozen ``Request`` with
route params attached and a mutable ``ResponseWriter``::

    async def hello(request, writer, next):
        await writer.end(f"hello {request.params['name']}")

    router = (
        create_router()
        .use(server_header)
        .get("/hello/:name", hello)
    )
    app = router.handler()          # run with any ASGI server

When no terminal route matches, ``on_no_match`` answers (404 by
default). Any exception escaping the chain goes to ``on_error`` (500
by default, or the ``HTTPError`` status).
"""

import logging
from dataclasses import replace
from typing import Any

from junction._internal.asgi import ASGIApp, Receive, Scope, Send
from junction._internal.invoke import invoke
from junction.adapters.base import BaseRouter
from junction.config import HandlerOptions
from junction.errors import HTTPError
from junction.http.request import Request
from junction.http.response import Response
from junction.middleware.chain import execute
from junction.server.writer import ResponseWriter

logger = logging.getLogger("junction.server")


async def default_on_error(exc: BaseException, request: Request, writer: ResponseWriter) -> None:
    """Log *exc* and answer with its HTTP status, or 500."""
    if isinstance(exc, HTTPError):
        logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
    else:
        logger.exception("500 %s %s", request.method, request.path, exc_info=exc)

    if writer.finished:
        return
    if writer.started:
        await writer.end()
        return

    if isinstance(exc, HTTPError):
        writer.status = exc.status
        writer.headers.update(exc.headers)
        await writer.end(exc.detail or str(exc.status))
    else:
        writer.status = 500
        await writer.end("Internal Server Error")


async def default_on_no_match(request: Request, writer: ResponseWriter) -> None:
    writer.status = 404
    await writer.end(f"Route {request.method} {request.path} not found")


async def _finish(writer: ResponseWriter, result: Any) -> None:
    """Make sure exactly one complete response goes out."""
    if writer.finished:
        return
    if isinstance(result, Response) and not writer.started:
        await writer.respond(result)
        return
    await writer.end()


async def _lifespan(receive: Receive, send: Send) -> None:
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return


class ASGIRouter(BaseRouter):
    """Route table exposed as an ASGI application."""

    __slots__ = ()

    async def run(self, request: Any, writer: Any) -> Any:
        """Run the matching chain for *request* and return its result.

        Returns ``None`` without running anything when no route matches.
        Exceptions propagate to the caller.
        """
        found = self.router.find(request.method, request.path)
        if not found.handlers:
            return None
        request = self.prepare_request(request, found.params)
        return await execute(found.handlers, request, writer)

    def handler(self, options: HandlerOptions | None = None, **overrides: Any) -> ASGIApp:
        """Build the ASGI callable.

        *overrides* are ``HandlerOptions`` fields given as keywords.
        """
        options = replace(options or HandlerOptions(), **overrides)
        on_error = options.on_error or default_on_error
        on_no_match = options.on_no_match or default_on_no_match

        async def app(scope: Scope, receive: Receive, send: Send) -> None:
            if scope["type"] == "lifespan":
                await _lifespan(receive, send)
                return
            if scope["type"] != "http":
                return

            request = Request.from_asgi(scope, receive)
            writer = ResponseWriter(send)
            found = self.router.find(request.method, request.path)
            request = self.prepare_request(request, found.params)

            try:
                if not found.handlers or found.middle_only:
                    result = await invoke(on_no_match, request, writer)
                else:
                    result = await execute(found.handlers, request, writer)
            except Exception as exc:
                result = await invoke(on_error, exc, request, writer)

            await _finish(writer, result)

        return app


def create_router(base: str = "/") -> ASGIRouter:
    """Return a new, empty ``ASGIRouter``."""
    return ASGIRouter(base)
