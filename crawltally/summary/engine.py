"""Crawl summary engine.

A CrawlSummary folds a sequence of crawl records into three aggregates: a
grand total, one Stats per status code and one Stats per canonical MIME
type. Summaries can also be built per group, keyed by host or registered
domain.

Every entry point makes exactly one forward pass over its input, so a reader
streaming a large crawl.log is consumed without being buffered. Errors raised
by the input iterator propagate to the caller unchanged.

Example:
    with CrawlLogReader("crawl.log") as log:
        groups = CrawlSummary.by_registered_domain(log)
    print(groups["example.com"].totals.count)
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from crawltally.core.interfaces import DomainLookup
from crawltally.summary.canonical import canonicalize_mime_type, describe_status_code
from crawltally.summary.keys import (
    KeyFunction,
    host_key,
    make_registered_domain_key,
    registered_domain_key,
)
from crawltally.summary.records import CrawlRecord
from crawltally.summary.stats import Stats

logger = logging.getLogger(__name__)


class CrawlSummary:
    """Totals, status code and MIME type breakdown of a crawl.

    Created empty and populated only by build() or grouped_by(); the
    accessors return read-only views.
    """

    def __init__(self) -> None:
        self._totals = Stats()
        self._status_codes: dict[int, Stats] = {}
        self._mime_types: dict[str, Stats] = {}

    @classmethod
    def build(cls, records: Iterable[CrawlRecord]) -> "CrawlSummary":
        """Build a global crawl summary (not broken down).

        Args:
            records: Records to summarise, consumed once

        Returns:
            Populated summary; empty input gives zero totals and empty maps
        """
        summary = cls()
        for record in records:
            summary._add(record)
        logger.debug("Summarised %d records", summary._totals.count)
        return summary

    @classmethod
    def grouped_by(
        cls, records: Iterable[CrawlRecord], key_function: KeyFunction
    ) -> dict[str, "CrawlSummary"]:
        """Build one crawl summary per key produced by key_function.

        Args:
            records: Records to summarise, consumed once
            key_function: Total function mapping a record to its group key

        Returns:
            Mapping from group key to summary. Its keys are exactly the
            distinct values key_function returned.
        """
        groups: dict[str, CrawlSummary] = {}
        seen = 0
        for record in records:
            key = key_function(record)
            summary = groups.get(key)
            if summary is None:
                summary = groups[key] = cls()
            summary._add(record)
            seen += 1
        logger.debug("Summarised %d records into %d groups", seen, len(groups))
        return groups

    @classmethod
    def by_host(cls, records: Iterable[CrawlRecord]) -> dict[str, "CrawlSummary"]:
        """Group by URL host; records without a host share the "" group."""
        return cls.grouped_by(records, host_key)

    @classmethod
    def by_registered_domain(
        cls,
        records: Iterable[CrawlRecord],
        lookup: DomainLookup | None = None,
    ) -> dict[str, "CrawlSummary"]:
        """Group by registered domain; unresolvable hosts share the "" group.

        Args:
            records: Records to summarise, consumed once
            lookup: Public suffix lookup; the shared offline lookup by default
        """
        if lookup is None:
            return cls.grouped_by(records, registered_domain_key)
        return cls.grouped_by(records, make_registered_domain_key(lookup))

    def _add(self, record: CrawlRecord) -> None:
        mime_type = canonicalize_mime_type(record.mime_type)
        mime_stats = self._mime_types.get(mime_type)
        if mime_stats is None:
            mime_stats = self._mime_types[mime_type] = Stats()
        mime_stats.add(record)

        code = record.status_code
        status_stats = self._status_codes.get(code)
        if status_stats is None:
            status_stats = self._status_codes[code] = Stats(
                describe_status_code(code)
            )
        status_stats.add(record)

        self._totals.add(record)

    @property
    def totals(self) -> Stats:
        return self._totals

    @property
    def status_codes(self) -> Mapping[int, Stats]:
        return MappingProxyType(self._status_codes)

    @property
    def mime_types(self) -> Mapping[str, Stats]:
        return MappingProxyType(self._mime_types)
