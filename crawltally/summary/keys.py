"""Grouping key functions for crawl summaries.

Every key function takes a CrawlRecord and returns a string. They are total:
when a key cannot be derived (unparseable URL, no host, no public suffix
match) they return "", which groups the record into the catch-all bucket.
"""

from collections.abc import Callable
from urllib.parse import urlsplit

from crawltally.core.interfaces import DomainLookup
from crawltally.summary.domains import DomainLookupError, default_domain_lookup
from crawltally.summary.records import CrawlRecord

KeyFunction = Callable[[CrawlRecord], str]

CATCH_ALL_KEY = ""


def identity_key(record: CrawlRecord) -> str:
    """Same key for every record, i.e. no partitioning."""
    return CATCH_ALL_KEY


def host_key(record: CrawlRecord) -> str:
    """Host component of the record URL, or "" if there is none.

    The host is lower-cased with port and IPv6 brackets removed. URLs
    without an authority ("not a url", "dns:example.com") have no host.
    """
    try:
        return urlsplit(record.url).hostname or CATCH_ALL_KEY
    except ValueError:
        # urlsplit rejects e.g. unbalanced IPv6 brackets
        return CATCH_ALL_KEY


def registered_domain_key(
    record: CrawlRecord, lookup: DomainLookup | None = None
) -> str:
    """Registered domain of the record's host, or "" if it has none.

    Args:
        record: Record to key
        lookup: Public suffix lookup; the shared offline lookup by default

    Example:
        >>> registered_domain_key(CrawlRecord("http://www.nla.gov.au/", 200))
        'nla.gov.au'
    """
    host = host_key(record)
    if not host:
        return CATCH_ALL_KEY
    if lookup is None:
        lookup = default_domain_lookup()
    try:
        return lookup.registered_domain_of(host)
    except DomainLookupError:
        return CATCH_ALL_KEY


def make_registered_domain_key(lookup: DomainLookup) -> KeyFunction:
    """Bind a lookup into a single-argument key function."""

    def _key(record: CrawlRecord) -> str:
        return registered_domain_key(record, lookup)

    return _key
