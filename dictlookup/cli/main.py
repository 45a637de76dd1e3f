"""Main CLI application entry point."""

import typer

from dictlookup.cli.commands import lookup
from dictlookup.config import settings

app = typer.Typer(
    name="dictlookup",
    help="Cambridge Dictionary lookups from the terminal",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup(
    log_level: str = typer.Option(
        None, "--log-level", help="Log level (defaults to LOG_LEVEL from the environment)"
    ),
) -> None:
    """Configure logging before any command runs."""
    from dictlookup.logging_config import setup_logging

    setup_logging(level=log_level)


# Register lookup command
app.command(name="lookup", help="Look up a word")(lookup.lookup)


@app.command(name="serve", help="Run the HTTP API")
def serve(
    host: str = typer.Option(settings.host, help="Bind address"),
    port: int = typer.Option(settings.port, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    import uvicorn

    uvicorn.run("dictlookup.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
