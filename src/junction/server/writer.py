"""Mutable response writer — the ``res`` object of the ASGI adapter.

Handlers set ``status`` and ``headers`` and then call ``end()`` (or
``write()`` repeatedly, then ``end()``)::

    async def hello(req, res, next):
        res.status = 201
        res.headers["X-Greeting"] = "hi"
        await res.end(f"hello {req.params['name']}")

A handler may instead return a ``Response``; the adapter sends it when
nothing was written yet.
"""

from junction._internal.asgi import Send
from junction.http.response import Response
from junction.server.sender import body_allowed, encode_headers, send_response


class ResponseWriter:
    """Streams one HTTP response through an ASGI ``send`` callable."""

    __slots__ = ("_send", "content_type", "finished", "headers", "started", "status")

    def __init__(self, send: Send) -> None:
        self._send = send
        self.status = 200
        self.content_type = "text/plain; charset=utf-8"
        self.headers: dict[str, str] = {}
        self.started = False
        self.finished = False

    async def _start(self, content_length: int | None = None) -> None:
        raw = encode_headers(self.content_type, tuple(self.headers.items()))
        if content_length is not None:
            raw.append((b"content-length", str(content_length).encode("latin-1")))
        await self._send({"type": "http.response.start", "status": self.status, "headers": raw})
        self.started = True

    async def write(self, chunk: str | bytes) -> None:
        """Send a body chunk, starting the response if needed."""
        if self.finished:
            msg = "Response already finished."
            raise RuntimeError(msg)
        if not self.started:
            await self._start()
        data = chunk.encode("utf-8") if isinstance(chunk, str) else chunk
        if data:
            await self._send({"type": "http.response.body", "body": data, "more_body": True})

    async def end(self, body: str | bytes = b"") -> None:
        """Send the final body chunk and close the response."""
        if self.finished:
            msg = "Response already finished."
            raise RuntimeError(msg)
        data = body.encode("utf-8") if isinstance(body, str) else body
        if not self.started:
            if not body_allowed(self.status):
                data = b""
            await self._start(content_length=len(data))
        await self._send({"type": "http.response.body", "body": data, "more_body": False})
        self.finished = True

    async def respond(self, response: Response) -> None:
        """Send a complete Response value.

        Headers already set on the writer are sent along with it.
        """
        if self.started or self.finished:
            msg = "Cannot send a Response after writing has started."
            raise RuntimeError(msg)
        if self.headers:
            response = response.with_headers(self.headers)
        await send_response(response, self._send)
        self.status = response.status
        self.started = True
        self.finished = True
