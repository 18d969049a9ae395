"""Streaming aggregation of crawl log records."""

from crawltally.summary.canonical import canonicalize_mime_type, describe_status_code
from crawltally.summary.domains import (
    DomainLookupError,
    TldextractDomainLookup,
    default_domain_lookup,
)
from crawltally.summary.engine import CrawlSummary
from crawltally.summary.keys import (
    host_key,
    identity_key,
    make_registered_domain_key,
    registered_domain_key,
)
from crawltally.summary.records import CrawlRecord
from crawltally.summary.stats import Stats

__all__ = [
    "canonicalize_mime_type",
    "CrawlRecord",
    "CrawlSummary",
    "default_domain_lookup",
    "describe_status_code",
    "DomainLookupError",
    "host_key",
    "identity_key",
    "make_registered_domain_key",
    "registered_domain_key",
    "Stats",
    "TldextractDomainLookup",
]
