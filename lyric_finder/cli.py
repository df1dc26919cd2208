from __future__ import annotations

import typer

from lyric_finder.app import SearchSession
from lyric_finder.config import load_config
from lyric_finder.errors import ValidationError
from lyric_finder.logging_setup import setup_logging
from lyric_finder.sources.service import LyricLookup
from lyric_finder.sources.types import FetchError, Found, NotFound
from lyric_finder.web.server import create_app

EXIT_NOT_FOUND = 1
EXIT_INVALID = 2
EXIT_FETCH_ERROR = 3


app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.command()
def get(
    artist: str = typer.Argument(..., help="Artist name"),
    song: str = typer.Argument(..., help="Song title"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Print the lyrics of one song."""
    setup_logging(debug)
    cfg = load_config()
    lookup = LyricLookup.from_config(cfg)

    try:
        res = lookup.lookup(artist, song)
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_INVALID)

    if isinstance(res, Found):
        typer.echo(res.text)
    elif isinstance(res, NotFound):
        typer.echo("No lyrics found.", err=True)
        raise typer.Exit(code=EXIT_NOT_FOUND)
    elif isinstance(res, FetchError):
        typer.echo(f"Error: {res.message}", err=True)
        raise typer.Exit(code=EXIT_FETCH_ERROR)


@app.command()
def interactive(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Search repeatedly; leave the artist blank to quit, type #N to repeat a recent search.
    """
    setup_logging(debug)
    session = SearchSession.from_config(load_config())
    raise typer.Exit(code=session.run(lambda label: typer.prompt(label, default="", show_default=False)))


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", help="Bind port"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Run the JSON lyrics endpoint (GET /api/lyrics?artist=...&song=...)."""
    setup_logging(debug)
    cfg = load_config()
    web = create_app(cfg=cfg)
    web.run(
        host=host if host is not None else cfg.host,
        port=port if port is not None else cfg.port,
        debug=debug,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
