"""Junction exception hierarchy.

Shared across Router, the chain executor and the adapters so every
module raises and catches the same types.
"""


class JunctionError(Exception):
    """Base for all junction-specific errors."""


class ConfigurationError(JunctionError, ValueError):
    """Raised when a route registration is invalid.

    Always raised synchronously from ``add()``/``use()``, before the
    table is touched.
    """


class HTTPError(JunctionError):
    """An error that maps directly to an HTTP status code.

    Raised by handlers. The adapters' default error callback turns it
    into a response with the same status and detail.

    Not a frozen dataclass: context managers around a handler
    (``anyio.fail_after``, ``contextlib`` managers) set ``__traceback__``
    on the way out.
    """

    def __init__(
        self,
        status: int,
        detail: str = "",
        headers: tuple[tuple[str, str], ...] = (),
    ) -> None:
        super().__init__(status, detail)
        self.status = status
        self.detail = detail
        self.headers = headers

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — nothing can answer the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
