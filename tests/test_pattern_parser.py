"""Tests for waypost.routing.parsers.pattern — placeholder compilation and matching."""

import pytest

from waypost.errors import ConfigurationError
from waypost.routing.parsers.pattern import PatternParser, build_regex, compile_pattern
from waypost.routing.route import Route


@pytest.fixture
def parser() -> PatternParser:
    return PatternParser()


class TestBuildRegex:
    def test_required(self) -> None:
        assert build_regex("/users/{id}") == r"^/users/(?P<id>[^/]+)$"

    def test_constrained(self) -> None:
        assert build_regex(r"/users/{id:\d+}") == r"^/users/(?P<id>\d+)$"

    def test_optional_swallows_separator(self) -> None:
        assert build_regex("/blog/{year?}") == r"^/blog(?:/(?P<year>[^/]+))?$"

    def test_literals_escaped(self) -> None:
        assert build_regex("/articles/{slug}.html") == r"^/articles/(?P<slug>[^/]+)\.html$"

    def test_constraint_with_quantifier_braces(self) -> None:
        assert build_regex(r"/archive/{year:\d{4}}") == r"^/archive/(?P<year>\d{4})$"

    def test_invalid_name_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="does not compile"):
            compile_pattern("/users/{user-id}")


class TestSupports:
    def test_placeholder(self, parser: PatternParser) -> None:
        assert parser.supports(Route("/users/{id}", "h"))

    def test_literal(self, parser: PatternParser) -> None:
        assert not parser.supports(Route("/users", "h"))


class TestParse:
    @pytest.mark.parametrize(
        ("pattern", "uri", "expected"),
        [
            ("/users/{id}", "/users/1", {"id": "1"}),
            (
                "/users/{id}/posts/{slug}",
                "/users/1/posts/hello-world",
                {"id": "1", "slug": "hello-world"},
            ),
            (r"/users/{id:\d+}", "/users/123", {"id": "123"}),
            ("/blog/{year?}", "/blog/2024", {"year": "2024"}),
            ("/blog/{year?}", "/blog", {}),
            ("/blog/{year?}/{month?}", "/blog/2024", {"year": "2024"}),
            ("/blog/{year?}/{month?}", "/blog/2024/12", {"year": "2024", "month": "12"}),
            ("/blog/{year?}/{month?}", "/blog", {}),
            ("/users/{id}/posts/{slug?}", "/users/123/posts", {"id": "123"}),
            ("/users/{username:[a-z0-9_-]+}", "/users/john_doe-123", {"username": "john_doe-123"}),
            ("/users/{id}/", "/users/123/", {"id": "123"}),
            ("users/{id}", "users/123", {"id": "123"}),
            ("/articles/{slug}.html", "/articles/my-post.html", {"slug": "my-post"}),
        ],
    )
    def test_matches(
        self, parser: PatternParser, pattern: str, uri: str, expected: dict[str, str]
    ) -> None:
        match = parser.parse(uri, [Route(pattern, "h")])
        assert match is not None
        assert match.parameters == expected

    @pytest.mark.parametrize(
        ("pattern", "uri"),
        [
            (r"/users/{id:\d+}", "/users/abc"),
            ("/users/{username:[a-z0-9_-]+}", "/users/john@doe"),
            ("/users/{id}", "/users/1/extra"),
            ("/users/{id}", "/users/"),
            ("/users/{id}", "/prefix/users/1"),
        ],
    )
    def test_rejects(self, parser: PatternParser, pattern: str, uri: str) -> None:
        assert parser.parse(uri, [Route(pattern, "h")]) is None

    def test_default_constraint_excludes_slash(self, parser: PatternParser) -> None:
        assert parser.parse("/files/a/b", [Route("/files/{name}", "h")]) is None

    def test_custom_constraint_may_span_segments(self, parser: PatternParser) -> None:
        match = parser.parse("/files/a/b", [Route("/files/{path:.+}", "h")])
        assert match is not None
        assert match.parameters == {"path": "a/b"}

    def test_extracted_values_override_defaults(self, parser: PatternParser) -> None:
        route = Route("/blog/{year?}", "h", parameters={"year": "2020", "page": "1"})
        match = parser.parse("/blog/2024", [route])
        assert match is not None
        assert match.parameters == {"year": "2024", "page": "1"}

    def test_defaults_kept_when_optional_absent(self, parser: PatternParser) -> None:
        route = Route("/blog/{year?}", "h", parameters={"year": "2020"})
        match = parser.parse("/blog", [route])
        assert match is not None
        assert match.parameters == {"year": "2020"}

    def test_first_matching_route_wins(self, parser: PatternParser) -> None:
        routes = [Route("/{page}", "first", name="a"), Route("/{slug:[a-z]+}", "second")]
        match = parser.parse("/about", routes)
        assert match is not None
        assert match.handler == "first"
        assert match.name == "a"

    def test_skips_literal_routes(self, parser: PatternParser) -> None:
        assert parser.parse("/about", [Route("/about", "h")]) is None

    def test_trailing_newline_not_matched(self, parser: PatternParser) -> None:
        assert parser.parse("/users/1\n", [Route("/users/{id}", "h")]) is None
