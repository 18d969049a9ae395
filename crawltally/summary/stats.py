"""Running count and byte-total accumulator."""

from dataclasses import dataclass, field
from datetime import datetime

from crawltally.summary.records import CrawlRecord


@dataclass
class Stats:
    """Running aggregate over the records folded in with add().

    count and total_bytes start at zero and only grow. A record without a
    size is counted but adds no bytes.

    Attributes:
        description: Optional label fixed at creation (e.g. "Not Found")
        count: Number of records added
        total_bytes: Sum of record sizes
        first_time: Earliest record timestamp seen
        last_time: Latest record timestamp seen
        mean_duration_ms: Mean fetch duration over records that have one
        duration_samples: Number of records contributing to the mean
    """

    description: str | None = field(default=None)
    count: int = field(default=0, init=False)
    total_bytes: int = field(default=0, init=False)
    first_time: datetime | None = field(default=None, init=False)
    last_time: datetime | None = field(default=None, init=False)
    mean_duration_ms: float | None = field(default=None, init=False)
    duration_samples: int = field(default=0, init=False)

    def add(self, record: CrawlRecord) -> None:
        """Fold one record into the aggregate."""
        self.count += 1
        if record.size is not None and record.size > 0:
            self.total_bytes += record.size

        ts = record.timestamp
        if ts is not None:
            if self.first_time is None or ts < self.first_time:
                self.first_time = ts
            if self.last_time is None or ts > self.last_time:
                self.last_time = ts

        if record.duration_ms is not None:
            self.duration_samples += 1
            # mean_n = mean_(n-1) + (x - mean_(n-1)) / n
            previous = self.mean_duration_ms or 0.0
            self.mean_duration_ms = (
                previous + (record.duration_ms - previous) / self.duration_samples
            )
