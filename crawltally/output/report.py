"""Report models and renderers for crawl summaries.

Pydantic models define the serialised shape of a summary; render_json and
render_table turn a CrawlSummary (or a grouped mapping of them) into JSON
text or rich tables.

Example:
    from crawltally.output.report import render_json

    print(render_json(CrawlSummary.build(records)))
"""

from collections.abc import Mapping
from datetime import datetime

from pydantic import BaseModel, RootModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from crawltally.summary.engine import CrawlSummary
from crawltally.summary.stats import Stats

NO_KEY_LABEL = "(none)"


class StatsReport(BaseModel):
    """Serialised Stats.

    Attributes:
        description: Label such as the status code reason phrase
        count: Number of records
        total_bytes: Sum of record sizes
        first_time: Earliest record timestamp
        last_time: Latest record timestamp
        mean_duration_ms: Mean fetch duration

    Example:
        >>> StatsReport(count=2, total_bytes=150).model_dump(exclude_none=True)
        {'count': 2, 'total_bytes': 150}
    """

    description: str | None = None
    count: int
    total_bytes: int
    first_time: datetime | None = None
    last_time: datetime | None = None
    mean_duration_ms: float | None = None


class SummaryReport(BaseModel):
    """Serialised CrawlSummary with maps ordered by key."""

    totals: StatsReport
    status_codes: dict[int, StatsReport]
    mime_types: dict[str, StatsReport]


class GroupedReport(RootModel[dict[str, SummaryReport]]):
    """Serialised group key -> CrawlSummary mapping, ordered by key."""


def _stats_report(stats: Stats) -> StatsReport:
    return StatsReport(
        description=stats.description,
        count=stats.count,
        total_bytes=stats.total_bytes,
        first_time=stats.first_time,
        last_time=stats.last_time,
        mean_duration_ms=stats.mean_duration_ms,
    )


def to_report(summary: CrawlSummary) -> SummaryReport:
    """Convert a summary into its report model."""
    return SummaryReport(
        totals=_stats_report(summary.totals),
        status_codes={
            code: _stats_report(summary.status_codes[code])
            for code in sorted(summary.status_codes)
        },
        mime_types={
            mime: _stats_report(summary.mime_types[mime])
            for mime in sorted(summary.mime_types)
        },
    )


def to_grouped_report(groups: Mapping[str, CrawlSummary]) -> GroupedReport:
    """Convert a grouped result into its report model."""
    return GroupedReport({key: to_report(groups[key]) for key in sorted(groups)})


def render_json(result: CrawlSummary | Mapping[str, CrawlSummary]) -> str:
    """Render a summary or grouped summaries as indented JSON.

    Fields that are None are omitted and datetimes are ISO-8601 strings.
    """
    if isinstance(result, CrawlSummary):
        report: BaseModel = to_report(result)
    else:
        report = to_grouped_report(result)
    return report.model_dump_json(indent=2, exclude_none=True)


def _stats_table(
    title: str, first_column: str, rows: Mapping, show_description: bool
) -> Table:
    table = Table(title=title)
    table.add_column(first_column)
    if show_description:
        table.add_column("Description")
    table.add_column("Count", justify="right")
    table.add_column("Bytes", justify="right")
    for key in sorted(rows):
        stats = rows[key]
        label = str(key) if key != "" else NO_KEY_LABEL
        cells = [escape(label)]
        if show_description:
            cells.append(escape(stats.description or "-"))
        cells += [f"{stats.count:,}", f"{stats.total_bytes:,}"]
        table.add_row(*cells)
    return table


def _print_summary(console: Console, summary: CrawlSummary, heading: str) -> None:
    totals = summary.totals
    console.print(
        f"[bold]{escape(heading)}[/bold] Total: {totals.count:,} records, "
        f"{totals.total_bytes:,} bytes"
    )
    if totals.count == 0:
        return
    console.print(
        _stats_table("Status Codes", "Code", summary.status_codes, show_description=True)
    )
    console.print(
        _stats_table("MIME Types", "MIME Type", summary.mime_types, show_description=False)
    )


def render_table(
    console: Console, result: CrawlSummary | Mapping[str, CrawlSummary]
) -> None:
    """Print a summary or grouped summaries as rich tables."""
    if isinstance(result, CrawlSummary):
        _print_summary(console, result, "Crawl")
        return
    if not result:
        console.print("No records found")
        return
    for key in sorted(result):
        _print_summary(console, result[key], key or NO_KEY_LABEL)
