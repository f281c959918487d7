"""Route, Mount and FindResult frozen dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from junction.routing.pattern import PathSpec, Pattern, prefix_path, rebase_pattern

if TYPE_CHECKING:
    from junction.middleware.protocol import Handler
    from junction.routing.router import Router

# The empty method matches every verb.
ALL = ""

METHODS: frozenset[str] = frozenset({"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"})


@dataclass(frozen=True, slots=True)
class Route:
    """A single registered binding.

    ``path`` is the path as registered, relative to the owning table's
    base. ``pattern`` is that path compiled under the base.
    """

    method: str
    path: PathSpec
    pattern: Pattern
    handlers: tuple[Handler, ...]
    is_middleware: bool = False

    @classmethod
    def build(
        cls,
        method: str,
        path: PathSpec,
        handlers: tuple[Handler, ...],
        *,
        base: str = "/",
        is_middleware: bool = False,
    ) -> Route:
        """Compile *path* under *base* and build the route."""
        return cls(
            method=method,
            path=path,
            pattern=rebase_pattern(path, base, loose=is_middleware),
            handlers=handlers,
            is_middleware=is_middleware,
        )

    def rebase(self, base: str) -> Route:
        """Return a copy whose pattern is recompiled under *base*."""
        return replace(self, pattern=rebase_pattern(self.path, base, loose=self.is_middleware))

    def lift(self, mount_path: str) -> Route:
        """Re-express ``path`` relative to the table this route is mounted into.

        The pattern is kept as is: a mounted route is already compiled under
        the parent's base joined with *mount_path*.
        """
        return replace(self, path=prefix_path(self.path, mount_path))

    def accepts(self, method: str) -> bool:
        """Whether this route may answer *method* (its path aside)."""
        if self.is_middleware or self.method == ALL or self.method == method:
            return True
        return method == "HEAD" and self.method == "GET"


@dataclass(frozen=True, slots=True)
class Mount:
    """A sub-table attached under ``path``.

    ``router`` is already a clone rebased under the full joined base, so
    the caller's own table is never aliased.
    """

    path: str
    router: Router


@dataclass(frozen=True, slots=True)
class FindResult:
    """Result of ``Router.find``."""

    handlers: tuple[Any, ...]
    params: dict[str, str]
    middle_only: bool
