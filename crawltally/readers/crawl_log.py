"""Reader for Heritrix crawl.log files.

Each non-blank line of a crawl.log describes one fetched URI as
whitespace-separated columns:

    timestamp status size url hop-path via mime thread fetch digest source annotations [json]

for example::

    2011-06-21T14:03:44.384Z   200   2187 http://www.nla.gov.au/ - - text/html #033 20110621140344304+69 sha1:2ZQ... - -

A "-" in any column means the value is absent. Malformed lines are logged and
skipped; I/O errors propagate to the caller, with truncated or corrupt gzip
input surfacing as OSError.

Example:
    with CrawlLogReader("crawl.log.gz") as log:
        for record in log:
            print(record.status_code, record.url)
"""

import gzip
import itertools
import logging
import zlib
from collections.abc import Iterable, Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import TextIO

from crawltally.summary.records import CrawlRecord

logger = logging.getLogger(__name__)

# Columns up to and including the MIME type are required
MIN_COLUMNS = 7
# The optional JSON column is the 13th and may itself contain spaces
MAX_SPLIT = 12

_ABSENT = "-"


class CrawlLogParseError(ValueError):
    """Raised when a crawl.log line cannot be parsed."""

    pass


def _column(fields: list[str], index: int) -> str | None:
    if index >= len(fields) or fields[index] == _ABSENT:
        return None
    return fields[index]


def _parse_timestamp(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_fetch(value: str | None) -> tuple[datetime | None, int | None]:
    """Split "20110621140344304+69" into fetch start time and duration."""
    if value is None:
        return None, None
    start, _, duration = value.partition("+")
    try:
        begun = datetime.strptime(start[:14], "%Y%m%d%H%M%S").replace(
            tzinfo=timezone.utc
        )
        if len(start) > 14:
            begun += timedelta(milliseconds=int(start[14:17]))
        return begun, int(duration) if duration else None
    except ValueError:
        logger.debug("Ignoring unparseable fetch column %r", value)
        return None, None


def parse_line(line: str) -> CrawlRecord:
    """Parse one crawl.log line.

    Args:
        line: A single log line, with or without trailing newline

    Returns:
        Parsed record

    Raises:
        CrawlLogParseError: If required columns are missing or malformed
    """
    fields = line.split(maxsplit=MAX_SPLIT)
    if len(fields) < MIN_COLUMNS:
        raise CrawlLogParseError(
            f"expected at least {MIN_COLUMNS} columns, got {len(fields)}"
        )

    try:
        status_code = int(fields[1])
    except ValueError as e:
        raise CrawlLogParseError(f"invalid status code: {fields[1]!r}") from e

    size = None
    if fields[2] != _ABSENT:
        try:
            size = int(fields[2])
        except ValueError as e:
            raise CrawlLogParseError(f"invalid size: {fields[2]!r}") from e
        if size < 0:
            size = None

    timestamp = None
    if fields[0] != _ABSENT:
        try:
            timestamp = _parse_timestamp(fields[0])
        except ValueError as e:
            raise CrawlLogParseError(f"invalid timestamp: {fields[0]!r}") from e

    fetch_timestamp, duration_ms = _parse_fetch(_column(fields, 8))
    annotations = _column(fields, 11)

    return CrawlRecord(
        url=fields[3],
        status_code=status_code,
        mime_type=_column(fields, 6) or "",
        size=size,
        timestamp=timestamp,
        hop_path=_column(fields, 4),
        via=_column(fields, 5),
        thread=_column(fields, 7),
        fetch_timestamp=fetch_timestamp,
        duration_ms=duration_ms,
        digest=_column(fields, 9),
        source_tag=_column(fields, 10),
        annotations=tuple(annotations.split(",")) if annotations else (),
        extra=_column(fields, 12),
    )


class CrawlLogReader:
    """Forward-only iterator of records from a crawl.log.

    Accepts a path (plain text or gzip-compressed ".gz") or an already open
    text stream. A path is opened on __enter__ or at the start of iteration,
    and closed on __exit__ or when iteration started outside a with block
    ends. Streams passed in are never closed by the reader.

    Args:
        source: Path to the log, or an open text stream

    Attributes:
        name: Path or stream name, used in log messages
        lines_read: Non-blank lines seen so far
        skipped_lines: Lines skipped as malformed

    Example:
        reader = CrawlLogReader(Path("crawl.log"))
        summary = CrawlSummary.build(reader)
        print(reader.skipped_lines)
    """

    def __init__(self, source: str | Path | TextIO) -> None:
        if isinstance(source, (str, Path)):
            self._path: Path | None = Path(source)
            self._stream: TextIO | None = None
            self.name = str(source)
        else:
            self._path = None
            self._stream = source
            self.name = getattr(source, "name", "<stream>")
        self.lines_read = 0
        self.skipped_lines = 0

    def __enter__(self) -> "CrawlLogReader":
        self._ensure_open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying file if the reader opened it."""
        if self._path is not None and self._stream is not None:
            self._stream.close()
            self._stream = None

    def _ensure_open(self) -> TextIO:
        if self._stream is None:
            assert self._path is not None
            logger.debug("Opening crawl log %s", self._path)
            if self._path.suffix == ".gz":
                self._stream = gzip.open(
                    self._path, "rt", encoding="utf-8", errors="replace"
                )
            else:
                self._stream = self._path.open(encoding="utf-8", errors="replace")
        return self._stream

    def __iter__(self) -> Iterator[CrawlRecord]:
        opened_here = self._stream is None
        stream = self._ensure_open()
        try:
            for line_number, line in enumerate(stream, start=1):
                line = line.strip()
                if not line:
                    continue
                self.lines_read += 1
                try:
                    record = parse_line(line)
                except CrawlLogParseError as e:
                    self.skipped_lines += 1
                    logger.warning(
                        "%s:%d: skipping malformed line: %s",
                        self.name,
                        line_number,
                        e,
                    )
                    continue
                yield record
        except (EOFError, zlib.error) as e:
            # Truncated or corrupt gzip data
            raise OSError(f"{self.name}: damaged compressed input: {e}") from e
        finally:
            if opened_here:
                self.close()


def read_crawl_logs(
    sources: Iterable[str | Path | CrawlLogReader],
) -> Iterator[CrawlRecord]:
    """Chain several crawl logs into one forward-only record iterator.

    Paths are wrapped in a CrawlLogReader; readers are used as given, so a
    caller holding them can inspect their line counters afterwards. Each file
    is opened only when the previous one is exhausted.
    """
    return itertools.chain.from_iterable(
        source if isinstance(source, CrawlLogReader) else CrawlLogReader(source)
        for source in sources
    )
