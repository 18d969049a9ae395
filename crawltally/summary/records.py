"""Data model for one crawl log entry."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CrawlRecord:
    """One fetched resource as recorded in a Heritrix crawl.log.

    Only url, status_code, mime_type and size are needed for summaries; the
    remaining columns are carried so nothing in the log line is lost.

    Args:
        url: Fetched URI (may be unparseable, e.g. "dns:example.com")
        status_code: HTTP status or negative crawler fetch status
        mime_type: Raw MIME type column, possibly with parameters
        size: Content length in bytes, None when the log has "-"
        timestamp: Time the log entry was written
        hop_path: Discovery path from the seed (e.g. "LLE")
        via: URI this one was discovered from
        thread: Toe thread number (e.g. "#033")
        fetch_timestamp: Time the fetch began
        duration_ms: Fetch duration in milliseconds
        digest: Content digest (e.g. "sha1:...")
        source_tag: Seed the URI was derived from
        annotations: Extra crawler annotations
        extra: Trailing JSON column, verbatim
    """

    url: str
    status_code: int
    mime_type: str = ""
    size: int | None = None
    timestamp: datetime | None = None
    hop_path: str | None = None
    via: str | None = None
    thread: str | None = None
    fetch_timestamp: datetime | None = None
    duration_ms: int | None = None
    digest: str | None = None
    source_tag: str | None = None
    annotations: tuple[str, ...] = ()
    extra: str | None = None
