"""Summary command for crawl.log statistics.

Reads one or more Heritrix crawl logs in a single pass and reports record
counts and byte totals broken down by status code and MIME type, optionally
grouped by host or registered domain.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from crawltally.core.config import Settings
from crawltally.output.report import render_json, render_table
from crawltally.readers.crawl_log import CrawlLogReader, read_crawl_logs
from crawltally.summary.domains import TldextractDomainLookup
from crawltally.summary.engine import CrawlSummary

logger = logging.getLogger(__name__)


class GroupBy(str, Enum):
    """Grouping choices for the summary command."""

    NONE = "none"
    HOST = "host"
    REGISTERED_DOMAIN = "registered-domain"


class OutputFormat(str, Enum):
    """Report formats for the summary command."""

    JSON = "json"
    TABLE = "table"


def summary_command(
    files: list[Path] = typer.Argument(..., help="crawl.log files (.gz allowed)"),
    group_by: GroupBy | None = typer.Option(
        None, "-g", "--group-by", help="Group summary by host or registered domain"
    ),
    output_format: OutputFormat | None = typer.Option(
        None, "-f", "--format", help="Report format"
    ),
    output: Path | None = typer.Option(None, "-o", "--output"),
) -> None:
    """Summarise crawl logs by status code and MIME type.

    Args:
        files: Crawl logs to read, in order, as one stream of records.
        group_by: Grouping; defaults to the configured group_by.
        output_format: json or table; defaults to the configured format.
        output: Optional file for the report instead of stdout.
    """
    settings = Settings()
    grouping = group_by or GroupBy(settings.group_by)
    fmt = output_format or OutputFormat(settings.output_format)
    console = Console()
    err_console = Console(stderr=True)

    readers = [CrawlLogReader(path) for path in files]
    records = read_crawl_logs(readers)

    try:
        if grouping is GroupBy.HOST:
            result: CrawlSummary | dict[str, CrawlSummary] = CrawlSummary.by_host(
                records
            )
        elif grouping is GroupBy.REGISTERED_DOMAIN:
            lookup = TldextractDomainLookup(
                suffix_list_urls=settings.suffix_list_urls,
                cache_dir=settings.suffix_cache_dir,
                include_private_suffixes=settings.include_private_suffixes,
            )
            result = CrawlSummary.by_registered_domain(records, lookup)
        else:
            result = CrawlSummary.build(records)
    except OSError as e:
        logger.error("Failed reading crawl log: %s", e)
        err_console.print(f"[red]Failed reading crawl log: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    for reader in readers:
        if reader.skipped_lines:
            logger.warning(
                "%s: skipped %d of %d lines",
                reader.name,
                reader.skipped_lines,
                reader.lines_read,
            )

    if fmt is OutputFormat.TABLE:
        if output is None:
            render_table(console, result)
        else:
            with output.open("w", encoding="utf-8") as handle:
                render_table(Console(file=handle, width=120), result)
        return

    text = render_json(result)
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"Wrote summary to {output}")
