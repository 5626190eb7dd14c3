"""Tests for waypost.cli — entrypoint, argument parsing, and subcommands."""

import sys
import types

import pytest

from waypost.cli import main
from waypost.cli._routes import handler_label
from waypost.cli._url import parse_params
from waypost.routing.parsers import ExactParser, PatternParser
from waypost.routing.router import Router


def _show(params: dict[str, str]) -> str:
    return "ok"


@pytest.fixture
def _fake_router_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with a waypost Router on sys.modules."""
    router = Router([ExactParser(), PatternParser()])
    router.add_route("/", "pages/index.md", name="home")
    router.add_route(r"/users/{id:\d+}", _show, name="user.show")
    router.add_route("/feed", {"target": "app.Feed", "action": "rss"})

    mod = types.ModuleType("_fake_waypost_cli")
    mod.router = router  # type: ignore[attr-defined]
    mod.empty = Router()  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_waypost_cli", mod)


class TestCLIHelp:
    @pytest.mark.parametrize(
        "argv",
        [["--help"], ["routes", "--help"], ["match", "--help"], ["url", "--help"]],
    )
    def test_help_exits_zero(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    @pytest.mark.parametrize("argv", [["routes"], ["match", "app:router"], ["url", "app:router"]])
    def test_missing_positional(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2

    def test_absolute_and_network_exclusive(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["url", "app:router", "home", "--absolute", "--network"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "waypost" in capsys.readouterr().out


@pytest.mark.usefixtures("_fake_router_module")
class TestRoutesCommand:
    def test_lists_routes(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_waypost_cli"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["PATTERN", "NAME", "HANDLER"]
        assert lines[2].split() == ["/", "home", "pages/index.md"]
        assert lines[3].split() == [r"/users/{id:\d+}", "user.show", "_show"]
        assert lines[4].split() == ["/feed", "-", "app.Feed::rss"]

    def test_empty_router(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_waypost_cli:empty"])
        assert "No routes registered." in capsys.readouterr().out

    def test_unresolvable_app(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_waypost_cli:missing"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


@pytest.mark.usefixtures("_fake_router_module")
class TestMatchCommand:
    def test_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "_fake_waypost_cli", "/users/42"])
        out = capsys.readouterr().out
        assert "handler:    _show" in out
        assert "name:       user.show" in out
        assert "  id = 42" in out

    def test_match_without_parameters(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "_fake_waypost_cli", "/"])
        assert "parameters: (none)" in capsys.readouterr().out

    def test_not_found(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "_fake_waypost_cli", "/users/abc"])
        assert exc_info.value.code == 1
        assert 'No route found for "/users/abc".' in capsys.readouterr().err


@pytest.mark.usefixtures("_fake_router_module")
class TestUrlCommand:
    def test_path(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["url", "_fake_waypost_cli", "user.show", "id=42"])
        assert capsys.readouterr().out.strip() == "/users/42"

    def test_absolute(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "url",
                "_fake_waypost_cli",
                "home",
                "--absolute",
                "--scheme",
                "https",
                "--host",
                "example.com",
                "--port",
                "8443",
                "--base-url",
                "/base",
            ]
        )
        assert capsys.readouterr().out.strip() == "https://example.com:8443/base/"

    def test_network(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["url", "_fake_waypost_cli", "home", "--network", "--host", "example.com"])
        assert capsys.readouterr().out.strip() == "//example.com/"

    def test_missing_parameter(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["url", "_fake_waypost_cli", "user.show"])
        assert exc_info.value.code == 1
        assert '"id"' in capsys.readouterr().err

    def test_unknown_route(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["url", "_fake_waypost_cli", "nope"])
        assert exc_info.value.code == 1


class TestHelpers:
    def test_parse_params(self) -> None:
        assert parse_params(["id=42", "q=a=b"]) == {"id": "42", "q": "a=b"}

    def test_parse_params_rejects_bare_words(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_params(["oops"])
        assert exc_info.value.code == 2

    def test_handler_label(self) -> None:
        assert handler_label("pages/a.md") == "pages/a.md"
        assert handler_label(_show) == "_show"
        assert handler_label({"target": "a.B", "action": "c"}) == "a.B::c"
        assert handler_label({"template": "x"}) == "{'template': 'x'}"
