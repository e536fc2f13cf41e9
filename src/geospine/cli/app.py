"""
Root Typer application for the geospine CLI.
"""

from __future__ import annotations

import json

import typer
from typer import Typer

from geospine.cli.extract import extract
from geospine.cli.utils import console
from geospine.core.logging import LOG_LEVELS, configure_logging
from geospine.core.settings import get_settings
from geospine.framework.registry import list_processors

app = Typer(
    name="geospine",
    help="geospine - GeoJSON Feature ingest processing.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from geospine import __version__

        typer.echo(f"geospine {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Override GEOSPINE_LOG_LEVEL."),
) -> None:
    """geospine CLI - flatten GeoJSON Features for ingestion."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"{log_level!r} is not one of {', '.join(LOG_LEVELS)}", param_hint="'--log-level'"
        )
    settings = get_settings()
    configure_logging(level=log_level or settings.log_level, json_format=settings.json_logs)


app.command("extract")(extract)


@app.command("processors")
def processors(json_out: bool = typer.Option(False, "--json")) -> None:
    """List registered processor types."""
    names = list_processors()
    if json_out:
        typer.echo(json.dumps(names))
        return
    for name in names:
        console.print(name)


if __name__ == "__main__":
    app()
