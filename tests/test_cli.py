"""Tests for the httpcontract CLI."""

import json
import re

from typer.testing import CliRunner

from httpcontract import __version__
from httpcontract.cli import app
from httpcontract.http.factory import ENV_REQUEST_FACTORY, RequestFactoryRegistry
from httpcontract.transport.client import HttpxRequestFactory

# ANSI escape sequence pattern for stripping colors from output
ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

runner = CliRunner()


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


class TestCliVersion:
    """Tests for the --version flag."""

    def test_version_flag(self) -> None:
        """Ensure --version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout.strip() == __version__


class TestCliHelp:
    """Tests for CLI help output."""

    def test_help_lists_commands(self) -> None:
        """Ensure --help shows available commands."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        for command in ("negotiate", "factory", "build"):
            assert command in output


class TestNegotiateCommand:
    """Tests for the negotiate command."""

    def test_negotiate_headers(self) -> None:
        """Test resolving locale and charset from headers."""
        result = runner.invoke(
            app,
            [
                "negotiate",
                "-H",
                "Accept-Language: fr,en-US;q=0.8",
                "-H",
                "Content-Type: text/plain;charset=ISO-8859-1",
            ],
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["locale: fr", "charset: iso8859-1"]

    def test_negotiate_without_headers(self) -> None:
        """Test the defaults with no headers."""
        result = runner.invoke(app, ["negotiate", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"locale": None, "charset": "utf-8"}

    def test_negotiate_wildcard_with_default(self) -> None:
        """Test the --default-locale option."""
        result = runner.invoke(
            app, ["negotiate", "-H", "Accept-Language: *", "--default-locale", "nb-NO", "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["locale"] == "nb-NO"

    def test_negotiate_bad_charset_absorbed(self) -> None:
        """Test that an unsupported charset still succeeds with UTF-8."""
        result = runner.invoke(
            app, ["negotiate", "-H", "Content-Type: text/plain;charset=bogus-xyz", "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["charset"] == "utf-8"

    def test_negotiate_malformed_header_option(self) -> None:
        """Test a -H value without a colon."""
        result = runner.invoke(app, ["negotiate", "-H", "Accept-Language fr"])

        assert result.exit_code != 0


class TestFactoryCommand:
    """Tests for the factory command."""

    def test_no_factory(self, isolated_registry: RequestFactoryRegistry) -> None:
        """Test the configuration error exit."""
        result = runner.invoke(app, ["factory"])

        assert result.exit_code == 1
        assert "No HTTP client implementation found" in result.output

    def test_factory_from_environment(self) -> None:
        """Test reporting the factory selected through the environment."""
        result = runner.invoke(
            app,
            ["factory"],
            env={ENV_REQUEST_FACTORY: "httpcontract.transport.simple:SimpleHttpRequestFactory"},
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == "httpcontract.transport.simple:SimpleHttpRequestFactory"


class TestBuildCommand:
    """Tests for the build command."""

    def test_build_get(self, isolated_registry: RequestFactoryRegistry) -> None:
        """Test printing a GET request."""
        isolated_registry.register(HttpxRequestFactory())

        result = runner.invoke(
            app,
            ["build", "get", "/status", "--base-url", "https://api.example.com", "-H", "Accept: text/html"],
        )

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "GET https://api.example.com/status"
        assert "accept: text/html" in [line.lower() for line in lines]

    def test_build_keeps_cookie_header(self, isolated_registry: RequestFactoryRegistry) -> None:
        """Test that a Cookie header given with -H is printed."""
        isolated_registry.register(HttpxRequestFactory())

        result = runner.invoke(
            app, ["build", "GET", "https://api.example.com/me", "-H", "Cookie: sid=abc"]
        )

        assert result.exit_code == 0
        assert "cookie: sid=abc" in [line.lower() for line in result.stdout.splitlines()]

    def test_build_post_json(self, isolated_registry: RequestFactoryRegistry) -> None:
        """Test printing a POST request with a JSON body."""
        isolated_registry.register(HttpxRequestFactory())

        result = runner.invoke(
            app, ["build", "POST", "https://api.example.com/orders", "--body", '{"sku": "A-1"}']
        )

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "POST https://api.example.com/orders"
        assert "content-type: application/json" in [line.lower() for line in lines]
        assert lines[-1] == '{"sku": "A-1"}'

    def test_build_post_without_body(self, isolated_registry: RequestFactoryRegistry) -> None:
        """Test that POST without --body fails with the argument error."""
        isolated_registry.register(HttpxRequestFactory())

        result = runner.invoke(app, ["build", "POST", "/orders"])

        assert result.exit_code == 1
        assert "Argument [body] cannot be null" in result.output

    def test_build_without_factory(self, isolated_registry: RequestFactoryRegistry) -> None:
        """Test the configuration error exit."""
        result = runner.invoke(app, ["build", "GET", "/status"])

        assert result.exit_code == 1
        assert "No HTTP client implementation found" in result.output

    def test_build_unsupported_method(self, isolated_registry: RequestFactoryRegistry) -> None:
        """Test methods other than GET and POST."""
        isolated_registry.register(HttpxRequestFactory())

        result = runner.invoke(app, ["build", "DELETE", "/orders/1"])

        assert result.exit_code != 0
