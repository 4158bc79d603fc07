"""CLI entrypoint for the Open Dominion sim tools."""

from __future__ import annotations

from pathlib import Path

import typer

from od_tools.config import settings, validate_settings_on_startup
from od_tools.output import LogWriter
from od_tools.services import GameLogGenerator, SimWorkbook
from od_tools.utils.exceptions import ODToolsError
from od_tools.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(help="The Open Dominion game tools", no_args_is_help=True)


@app.callback()
def cli() -> None:
    """The Open Dominion game tools."""


@app.command()
def generate_log(
    sim: Path = typer.Option(
        ..., "--sim", "-s", metavar="FILE", help="Path to the sim file (e.g. sim.xlsm)."
    ),
    result: Path | None = typer.Option(
        None,
        "--result",
        "-r",
        metavar="FILE",
        help='Path to the result file. Prints to stdout if omitted or "std".',
    ),
    hour: int | None = typer.Option(
        None, "--hour", min=1, help="Process only this protection hour."
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override ODT_LOG_LEVEL for this run."
    ),
) -> None:
    """Generate a game log from a sim file."""
    configure_logging(log_level or settings.log_level_int)
    validate_settings_on_startup(settings)
    logger.info("Generating log for sim file", sim=sim, hour=hour or "all")

    try:
        generator = GameLogGenerator(SimWorkbook.open(sim), settings=settings)
        output = generator.execute(hour)
        written = LogWriter().write(output, result)
    except ODToolsError as e:
        if settings.debug:
            logger.exception("Log generation failed", error=e.to_dict())
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if not written.to_stdout:
        typer.echo(f"Successfully wrote result to {written.path}")


if __name__ == "__main__":
    app()
