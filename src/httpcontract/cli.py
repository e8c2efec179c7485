"""Command-line interface for httpcontract.

Example:
    >>> # From terminal:
    >>> # httpcontract --version
    >>> # httpcontract negotiate -H "Accept-Language: fr,en;q=0.8" -H "Content-Type: text/html; charset=latin-1"
    >>> # httpcontract factory
    >>> # httpcontract build POST /orders --body '{"sku": "A-1"}' --base-url https://api.example.com
"""

import json
from typing import Annotated, NoReturn, Optional

import typer

from httpcontract import __version__
from httpcontract.errors import HttpContractError
from httpcontract.http.factory import get_registry
from httpcontract.http.headers import CONTENT_TYPE
from httpcontract.http.negotiation import resolve_character_encoding, resolve_locale
from httpcontract.models.enums import HttpMethod
from httpcontract.transport.client import JSON_CONTENT_TYPE, to_httpx_request
from httpcontract.transport.simple import SimpleHttpRequest

app = typer.Typer(help="httpcontract CLI.")

HEADER_OPTION = typer.Option(
    None,
    "--header",
    "-H",
    help="Request header as 'Name: value'. Repeatable.",
)


def _version_callback(value: bool) -> None:
    """Print the version and exit when requested."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


VERSION_OPTION = typer.Option(
    False,
    "--version",
    help="Show httpcontract version and exit.",
    callback=_version_callback,
    is_eager=True,
)


def _parse_headers(raw_headers: Optional[list[str]]) -> list[tuple[str, str]]:
    headers: list[tuple[str, str]] = []
    for raw in raw_headers or []:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Header must look like 'Name: value': {raw!r}")
        headers.append((name.strip(), value.strip()))
    return headers


def _looks_like_json(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def _fail(exc: HttpContractError) -> NoReturn:
    typer.echo(f"Error: {exc.message}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def cli(version: bool = VERSION_OPTION) -> None:
    """httpcontract CLI entrypoint."""


@app.command("negotiate")
def negotiate(
    header: Optional[list[str]] = HEADER_OPTION,
    default_locale: Annotated[
        Optional[str],
        typer.Option("--default-locale", help="Tag used for '*' or empty Accept-Language."),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON.")] = False,
) -> None:
    """Resolve the locale and charset a request with these headers negotiates."""
    request = SimpleHttpRequest(HttpMethod.GET, "/", headers=_parse_headers(header))
    locale = resolve_locale(request, default_locale=default_locale)
    charset = resolve_character_encoding(request)
    locale_tag = locale.to_language_tag() if locale is not None else None

    if as_json:
        typer.echo(json.dumps({"locale": locale_tag, "charset": charset}))
        return
    typer.echo(f"locale: {locale_tag if locale_tag is not None else '-'}")
    typer.echo(f"charset: {charset}")


@app.command("factory")
def factory() -> None:
    """Show which request factory this process resolves."""
    try:
        resolved = get_registry().resolve()
    except HttpContractError as exc:
        _fail(exc)
    cls = type(resolved)
    typer.echo(f"{cls.__module__}:{cls.__qualname__}")


@app.command("build")
def build(
    method: Annotated[str, typer.Argument(help="GET or POST.")],
    uri: Annotated[str, typer.Argument(help="Request URI.")],
    body: Annotated[Optional[str], typer.Option("--body", help="POST body.")] = None,
    header: Optional[list[str]] = HEADER_OPTION,
    base_url: Annotated[
        Optional[str], typer.Option("--base-url", help="Base URL for relative URIs.")
    ] = None,
) -> None:
    """Build a request through the resolved factory and print it."""
    try:
        parsed = HttpMethod.parse(method)
    except ValueError as exc:
        raise typer.BadParameter(f"Unknown method: {method}") from exc

    try:
        if parsed is HttpMethod.GET:
            request = get_registry().get(uri)
        elif parsed is HttpMethod.POST:
            request = get_registry().post(uri, body)
        else:
            raise typer.BadParameter("Only GET and POST are supported")
    except HttpContractError as exc:
        _fail(exc)

    for name, value in _parse_headers(header):
        request.add_header(name, value)
    if body is not None and request.headers.find_first(CONTENT_TYPE) is None:
        if _looks_like_json(body):
            request.set_header(CONTENT_TYPE, JSON_CONTENT_TYPE)

    outbound = to_httpx_request(request, base_url=base_url)
    typer.echo(f"{outbound.method} {outbound.url}")
    for name, value in outbound.headers.multi_items():
        typer.echo(f"{name}: {value}")
    if outbound.content:
        typer.echo("")
        typer.echo(outbound.content.decode(request.character_encoding, errors="replace"))


def main() -> None:
    """Run the httpcontract CLI."""
    app()


if __name__ == "__main__":
    main()
