"""Shared registration surface for the adapters.

Each adapter owns a private ``Router`` and exposes verb helpers on top
of it. Adapters can be mounted into one another with ``use``.
"""

from typing import Any, Self

from junction.http.request import Request
from junction.routing.pattern import PathSpec
from junction.routing.route import ALL, FindResult
from junction.routing.router import Router, is_path_spec


class BaseRouter:
    """Verb helpers, mounting and request preparation."""

    __slots__ = ("router",)

    def __init__(self, base: str = "/") -> None:
        self.router = Router(base)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.router!r})"

    def _add(self, method: str, path: Any, *handlers: Any) -> Self:
        if not is_path_spec(path):
            handlers = (path, *handlers)
            path = "/"
        self.router.add(method, path, *handlers)
        return self

    def all(self, path: PathSpec | Any = "/", *handlers: Any) -> Self:
        return self._add(ALL, path, *handlers)

    def get(self, path: PathSpec | Any = "/", *handlers: Any) -> Self:
        return self._add("GET", path, *handlers)

    def head(self, path: PathSpec | Any = "/", *handlers: Any) -> Self:
        return self._add("HEAD", path, *handlers)

    def post(self, path: PathSpec | Any = "/", *handlers: Any) -> Self:
        return self._add("POST", path, *handlers)

    def put(self, path: PathSpec | Any = "/", *handlers: Any) -> Self:
        return self._add("PUT", path, *handlers)

    def patch(self, path: PathSpec | Any = "/", *handlers: Any) -> Self:
        return self._add("PATCH", path, *handlers)

    def delete(self, path: PathSpec | Any = "/", *handlers: Any) -> Self:
        return self._add("DELETE", path, *handlers)

    def use(self, path: PathSpec | Any = "/", *handlers: Any) -> Self:
        """Register middleware, mounting any adapter or ``Router`` given."""
        if not is_path_spec(path):
            handlers = (path, *handlers)
            path = "/"
        unwrapped = [h.router if isinstance(h, BaseRouter) else h for h in handlers]
        self.router.use(path, *unwrapped)
        return self

    def clone(self) -> Self:
        """Return an adapter of the same type with its own route list."""
        copy = type(self)()
        copy.router = self.router.clone()
        return copy

    def find(self, method: str, pathname: str) -> FindResult:
        return self.router.find(method, pathname)

    def prepare_request(self, req: Any, params: dict[str, str]) -> Any:
        """Attach resolved route *params* to *req*.

        ``Request`` values are copied; other objects get a ``params``
        attribute. Params already present on *req* win.
        """
        if isinstance(req, Request):
            return req.with_params(params)
        req.params = {**params, **(getattr(req, "params", None) or {})}
        return req
