"""Typer application entry point for crawltally CLI."""

from pathlib import Path

import typer

from crawltally.cli.commands import summary as summary_command
from crawltally.core.config import Settings
from crawltally.core.logger import get_logger

app = typer.Typer(no_args_is_help=True, name="crawltally")


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"
    ),
    log_file: Path | None = typer.Option(None, "--log-file"),
) -> None:
    """Crawl log statistics."""
    settings = Settings()
    level = log_level or settings.log_level
    try:
        get_logger("crawltally", log_level=level, log_file=log_file or settings.log_file)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


app.command(name="summary", help="Summarise crawl logs by status and MIME type")(
    summary_command.summary_command
)


if __name__ == "__main__":
    app()
