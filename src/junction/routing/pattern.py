"""Path pattern compilation.

Turns a path specification into a ``Pattern`` — a compiled regex plus the
ordered capture names it extracts. Supported syntax::

    "/users"              literal
    "/users/:id"          named segment           -> {"id": ...}
    "/users/:id?"         optional named segment  (key omitted when absent)
    "/movies/:title.mp4"  named segment with a literal suffix
    "/files/*"            wildcard remainder      -> {"wild": ...}
    re.compile(...)       pre-built regex; named groups become params
    Pattern(...)          already compiled, returned unchanged

Every path compiles to a regex, literals included, so a pattern rebuilt
under a new base behaves exactly like one registered there directly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TypeAlias

from junction.errors import ConfigurationError

WILDCARD_KEY = "wild"


def join_paths(*parts: str) -> str:
    """Join path fragments with exactly one ``/`` between them.

    ``join_paths("/", "/foo")`` -> ``"/foo"``;
    ``join_paths("/api/", "v1/", "users")`` -> ``"/api/v1/users"``;
    ``join_paths("/")`` -> ``"/"``.
    """
    segments = [segment for part in parts for segment in part.split("/") if segment]
    return "/" + "/".join(segments)


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """Outcome of ``Pattern.test``."""

    matched: bool
    keys: tuple[str, ...] = ()
    values: dict[str, str] = field(default_factory=dict)


NO_MATCH = PatternMatch(matched=False)


@dataclass(frozen=True, slots=True)
class Pattern:
    """A compiled path matcher.

    ``keys`` lists positional capture names in declaration order. It is
    ``None`` for patterns built from a user-supplied regex, whose named
    groups are used instead.
    """

    source: str | re.Pattern[str]
    regex: re.Pattern[str]
    keys: tuple[str, ...] | None = ()
    loose: bool = False
    prefix: str = ""

    def test(self, path: str) -> PatternMatch:
        """Match *path* and extract its captures."""
        if self.prefix:
            path = _strip_prefix(path, self.prefix)
            if path is None:
                return NO_MATCH

        m = self.regex.search(path)
        if m is None:
            return NO_MATCH

        if self.keys is None:
            values = {k: v for k, v in m.groupdict().items() if v is not None}
            return PatternMatch(matched=True, keys=tuple(values), values=values)

        values = {}
        for key, value in zip(self.keys, m.groups(), strict=False):
            # Absent optional segments are omitted, never set to "".
            if value is not None:
                values[key] = value
        return PatternMatch(matched=True, keys=self.keys, values=values)


PathSpec: TypeAlias = str | re.Pattern[str] | Pattern


def _strip_prefix(path: str, prefix: str) -> str | None:
    """Remove a literal base from *path* at a segment boundary."""
    if prefix == "/":
        return path
    if not path.lower().startswith(prefix.lower()):
        return None
    rest = path[len(prefix) :]
    if rest and not rest.startswith("/"):
        return None
    return rest or "/"


def _compile_segments(spec: str) -> tuple[str, tuple[str, ...]]:
    keys: list[str] = []
    pattern = ""

    for segment in spec.split("/"):
        if not segment:
            continue

        if segment[0] == "*":
            keys.append(WILDCARD_KEY)
            pattern += "(?:/(.*))?" if segment[1:2] == "?" else "/(.*)"
        elif segment[0] == ":":
            optional = segment.find("?", 1)
            suffix = segment.find(".", 1)
            if optional != -1:
                end = optional
            elif suffix != -1:
                end = suffix
            else:
                end = len(segment)
            keys.append(segment[1:end])
            if optional != -1 and suffix == -1:
                pattern += "(?:/([^/]+?))?"
            else:
                pattern += "/([^/]+?)"
            if suffix != -1:
                pattern += ("?" if optional != -1 else "") + re.escape(segment[suffix:])
        else:
            pattern += "/" + re.escape(segment)

    return pattern, tuple(keys)


def compile_pattern(spec: PathSpec, *, loose: bool = False) -> Pattern:
    """Compile *spec* into a ``Pattern``.

    Strict patterns (``loose=False``) must consume the whole path, with an
    optional trailing slash. Loose patterns match a prefix ending at a
    segment boundary, so ``/api`` matches ``/api`` and ``/api/v1`` but not
    ``/apix``.
    """
    if isinstance(spec, Pattern):
        return spec
    if isinstance(spec, re.Pattern):
        return Pattern(source=spec, regex=spec, keys=None, loose=loose)

    body, keys = _compile_segments(spec)
    tail = r"(?=$|/)" if loose else r"/?$"
    regex = re.compile("^" + body + tail, re.IGNORECASE)
    return Pattern(source=spec, regex=regex, keys=keys, loose=loose)


def rebase_pattern(spec: PathSpec, base: str, *, loose: bool = False) -> Pattern:
    """Compile *spec* as if it had been registered under *base*.

    String paths are joined and recompiled. Regex patterns cannot be
    joined, so they are tested against the path with *base* stripped.
    That base must be literal: a regex route cannot sit under a mount
    path with ``:name`` or ``*`` segments.
    """
    if isinstance(spec, str):
        return compile_pattern(join_paths(base, spec), loose=loose)

    inner = spec if isinstance(spec, Pattern) else compile_pattern(spec, loose=loose)
    prefix = join_paths(base, inner.prefix)
    if any(segment[:1] in (":", "*") for segment in prefix.split("/")):
        msg = f"Regex and precompiled routes need a literal base, got {prefix!r}."
        raise ConfigurationError(msg)
    if prefix == "/":
        return inner
    return Pattern(
        source=inner.source,
        regex=inner.regex,
        keys=inner.keys,
        loose=inner.loose,
        prefix=prefix,
    )


def prefix_path(spec: PathSpec, prefix: str) -> PathSpec:
    """Return *spec* as seen from one level up, under *prefix*."""
    if isinstance(spec, str):
        return join_paths(prefix, spec)
    return rebase_pattern(spec, prefix)
