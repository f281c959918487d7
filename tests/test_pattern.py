"""Tests for junction.routing.pattern — path compilation and matching."""

import re

import pytest

from junction.errors import ConfigurationError
from junction.routing.pattern import (
    Pattern,
    compile_pattern,
    join_paths,
    prefix_path,
    rebase_pattern,
)


class TestJoinPaths:
    def test_root(self) -> None:
        assert join_paths("/") == "/"
        assert join_paths("/", "/") == "/"
        assert join_paths("") == "/"

    def test_single_separator(self) -> None:
        assert join_paths("/", "/foo") == "/foo"
        assert join_paths("/api/", "/v1/", "users") == "/api/v1/users"
        assert join_paths("foo", "bar") == "/foo/bar"

    def test_collapses_repeated_slashes(self) -> None:
        assert join_paths("//a//", "//b") == "/a/b"


class TestLiteral:
    def test_exact_match(self) -> None:
        p = compile_pattern("/users")
        result = p.test("/users")
        assert result.matched
        assert result.keys == ()
        assert result.values == {}

    def test_trailing_slash_allowed(self) -> None:
        assert compile_pattern("/users").test("/users/").matched

    def test_longer_path_rejected_when_strict(self) -> None:
        assert not compile_pattern("/users").test("/users/42").matched

    def test_case_insensitive(self) -> None:
        assert compile_pattern("/Users").test("/uSERS").matched

    def test_metacharacters_are_literal(self) -> None:
        p = compile_pattern("/a+b")
        assert p.test("/a+b").matched
        assert not p.test("/aab").matched

    def test_no_leading_slash(self) -> None:
        assert compile_pattern("bar").test("/bar").matched

    def test_root_pattern(self) -> None:
        p = compile_pattern("/")
        assert p.test("/").matched
        assert not p.test("/foo").matched


class TestNamedSegments:
    def test_single_param(self) -> None:
        result = compile_pattern("/foo/:hello").test("/foo/bar")
        assert result.matched
        assert result.keys == ("hello",)
        assert result.values == {"hello": "bar"}

    def test_multiple_params_in_order(self) -> None:
        result = compile_pattern("/users/:user/posts/:post").test("/users/1/posts/42")
        assert result.keys == ("user", "post")
        assert result.values == {"user": "1", "post": "42"}

    def test_param_does_not_cross_segments(self) -> None:
        assert not compile_pattern("/foo/:hello").test("/foo/bar/baz").matched

    def test_param_required(self) -> None:
        assert not compile_pattern("/foo/:hello").test("/foo").matched


class TestOptionalSegments:
    def test_present(self) -> None:
        result = compile_pattern("/foo/:title?").test("/foo/bar")
        assert result.values == {"title": "bar"}

    def test_absent_key_is_omitted(self) -> None:
        result = compile_pattern("/foo/:title?").test("/foo")
        assert result.matched
        assert result.keys == ("title",)
        assert "title" not in result.values


class TestSuffixSegments:
    def test_suffix(self) -> None:
        p = compile_pattern("/movies/:title.mp4")
        assert p.test("/movies/narnia.mp4").values == {"title": "narnia"}
        assert not p.test("/movies/narnia").matched
        assert not p.test("/movies").matched


class TestWildcard:
    def test_captures_remainder_as_wild(self) -> None:
        result = compile_pattern("/files/*").test("/files/docs/api/index.html")
        assert result.keys == ("wild",)
        assert result.values == {"wild": "docs/api/index.html"}

    def test_requires_a_segment(self) -> None:
        assert not compile_pattern("/files/*").test("/files").matched

    def test_optional_wildcard(self) -> None:
        p = compile_pattern("/files/*?")
        assert p.test("/files").matched
        assert p.test("/files/a/b").values == {"wild": "a/b"}


class TestLoose:
    def test_prefix_match(self) -> None:
        p = compile_pattern("/api", loose=True)
        assert p.test("/api").matched
        assert p.test("/api/foo").matched

    def test_segment_boundary(self) -> None:
        assert not compile_pattern("/api", loose=True).test("/apix").matched

    def test_root_matches_everything(self) -> None:
        p = compile_pattern("/", loose=True)
        assert p.test("/").matched
        assert p.test("/anything/at/all").matched

    def test_param_prefix(self) -> None:
        p = compile_pattern("api/:version", loose=True)
        assert not p.test("/api").matched
        assert p.test("/api/v1/users").values == {"version": "v1"}

    def test_optional_param_prefix(self) -> None:
        p = compile_pattern("api/:version?", loose=True)
        assert p.test("/api").matched
        assert p.test("/api/v1/users").values == {"version": "v1"}

    def test_suffix_prefix(self) -> None:
        p = compile_pattern("movies/:title.mp4", loose=True)
        assert not p.test("/movies/narnia").matched
        assert p.test("/movies/narnia.mp4/cast").values == {"title": "narnia"}


class TestRegex:
    def test_named_groups_become_values(self) -> None:
        p = compile_pattern(re.compile(r"^/foo/(?P<hello>\w+)/?$"))
        result = p.test("/foo/bar")
        assert result.matched
        assert p.keys is None
        assert result.values == {"hello": "bar"}

    def test_unnamed_groups_ignored(self) -> None:
        result = compile_pattern(re.compile(r"^/v(\d+)$")).test("/v2")
        assert result.matched
        assert result.values == {}

    def test_no_match(self) -> None:
        assert not compile_pattern(re.compile(r"^/foo$")).test("/bar").matched


class TestPassThrough:
    def test_pattern_returned_unchanged(self) -> None:
        p = compile_pattern("/x/:id")
        assert compile_pattern(p) is p

    def test_equal_sources_compile_equal(self) -> None:
        assert compile_pattern("/a/:b") == compile_pattern("/a/:b")


class TestRebase:
    def test_string_is_recompiled(self) -> None:
        p = rebase_pattern("/baz", "/bar")
        assert p.source == "/bar/baz"
        assert p.test("/bar/baz").matched
        assert not p.test("/baz").matched

    def test_rebased_literal_equals_direct_registration(self) -> None:
        assert rebase_pattern("/baz", "/bar") == compile_pattern("/bar/baz")

    def test_regex_tested_against_stripped_path(self) -> None:
        p = rebase_pattern(re.compile(r"^/item/(?P<id>\d+)$"), "/shop")
        assert p.test("/shop/item/7").values == {"id": "7"}
        assert not p.test("/item/7").matched
        assert not p.test("/shopx/item/7").matched

    def test_regex_rebase_composes(self) -> None:
        inner = prefix_path(re.compile(r"^/(?P<id>\d+)$"), "/b")
        assert isinstance(inner, Pattern)
        p = rebase_pattern(inner, "/a")
        assert p.prefix == "/a/b"
        assert p.test("/a/b/3").values == {"id": "3"}

    def test_regex_under_dynamic_base_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            rebase_pattern(re.compile(r"^/x$"), "/users/:id")
        with pytest.raises(ConfigurationError):
            rebase_pattern(re.compile(r"^/x$"), "/files/*")

    def test_root_base_is_identity_for_regex(self) -> None:
        inner = compile_pattern(re.compile(r"^/x$"))
        assert rebase_pattern(inner, "/") is inner


@pytest.mark.parametrize(
    ("spec", "path"),
    [
        ("/", "/"),
        ("/users/:id", "/users/alice"),
        ("/users/:id?", "/users"),
        ("/files/*", "/files/a"),
    ],
)
def test_compiled_patterns_match_expected_paths(spec: str, path: str) -> None:
    assert compile_pattern(spec).test(path).matched
