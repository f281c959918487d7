"""Ordered route table with multi-match resolution.

Unlike a first-match router, ``find`` collects every route that matches
a request: global middleware, path-scoped middleware and the terminal
handlers all contribute, in registration order.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from junction.errors import ConfigurationError
from junction.routing.pattern import Pattern, PathSpec, join_paths
from junction.routing.route import ALL, METHODS, FindResult, Mount, Route


def is_path_spec(value: object) -> bool:
    """Whether *value* can be a route path rather than a handler."""
    return isinstance(value, str | re.Pattern | Pattern)


class Router:
    """An ordered route table.

    Usage::

        router = Router()
        router.use(logger_mw)
        router.add("GET", "/users/:id", show_user)
        match = router.find("GET", "/users/42")
        # match.handlers == (logger_mw, show_user)
        # match.params == {"id": "42"}

    Sub-tables are mounted with ``use``; the parent stores a rebased
    clone, so later changes to the original sub-table do not leak in.
    """

    __slots__ = ("base", "routes")

    def __init__(self, base: str = "/", routes: Iterable[Route] | None = None) -> None:
        self.base = base
        self.routes: list[Route] = list(routes) if routes is not None else []

    def __repr__(self) -> str:
        return f"Router(base={self.base!r}, routes={len(self.routes)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Router):
            return NotImplemented
        return self.base == other.base and self.routes == other.routes

    __hash__ = None  # type: ignore[assignment]

    # -- Registration --

    def add(self, method: str, path: PathSpec, *handlers: Any) -> Router:
        """Register a terminal route for *method* at *path*.

        ``method=""`` matches every verb.
        """
        method = _normalize_method(method)
        if not handlers:
            msg = f"add({method or 'ALL'!r}, {path!r}) requires at least one handler."
            raise ConfigurationError(msg)
        self.routes.append(Route.build(method, path, tuple(handlers), base=self.base))
        return self

    def use(self, path: Any = "/", *handlers: Any) -> Router:
        """Register middleware matching *path* as a prefix, for every method.

        *path* may be omitted. Any handler that is itself a ``Router`` is
        mounted: its routes become reachable under *path*.
        """
        if not is_path_spec(path):
            handlers = (path, *handlers)
            path = "/"
        if not handlers:
            msg = f"use({path!r}) requires at least one handler."
            raise ConfigurationError(msg)

        entries = [self._mount(path, h) if isinstance(h, Router) else h for h in handlers]
        self.routes.extend(self._flatten(path, entries))
        return self

    def _mount(self, path: PathSpec, router: Router) -> Mount:
        if not isinstance(path, str):
            msg = "Mounting a router to a non-literal base is not supported."
            raise ConfigurationError(msg)
        return Mount(path=path, router=router.clone(join_paths(self.base, path)))

    def _flatten(self, path: PathSpec, entries: list[Any]) -> list[Route]:
        """Expand mounts into their routes, grouping adjacent callables."""
        routes: list[Route] = []
        pending: list[Any] = []

        def flush() -> None:
            if pending:
                routes.append(
                    Route.build(ALL, path, tuple(pending), base=self.base, is_middleware=True)
                )
                pending.clear()

        for entry in entries:
            if isinstance(entry, Mount):
                flush()
                routes.extend(route.lift(entry.path) for route in entry.router.routes)
            else:
                pending.append(entry)
        flush()
        return routes

    def clone(self, base: str | None = None) -> Router:
        """Return a table with its own route list.

        Without *base* the new list holds the same ``Route`` objects. With
        a different *base*, every route is recompiled under it.
        """
        if base is None or base == self.base:
            return Router(self.base, self.routes)
        return Router(base, [route.rebase(base) for route in self.routes])

    # -- Resolution --

    def find(self, method: str, pathname: str) -> FindResult:
        """Collect every route matching *method* and *pathname*.

        Params merge left to right (last match wins). ``middle_only`` is
        True when no terminal route matched; the adapter answers 404 then.
        """
        method = method.upper()
        handlers: list[Any] = []
        params: dict[str, str] = {}
        middle_only = True

        for route in self.routes:
            if not route.accepts(method):
                continue
            result = route.pattern.test(pathname)
            if not result.matched:
                continue
            params.update(result.values)
            handlers.extend(route.handlers)
            if not route.is_middleware:
                middle_only = False

        return FindResult(handlers=tuple(handlers), params=params, middle_only=middle_only)


def _normalize_method(method: str) -> str:
    method = method.upper()
    if method not in METHODS and method not in (ALL, "ALL"):
        msg = f"Unsupported HTTP method {method!r}. Expected one of: {', '.join(sorted(METHODS))}."
        raise ConfigurationError(msg)
    return ALL if method == "ALL" else method
