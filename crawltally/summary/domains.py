"""Registered-domain lookup backed by the Public Suffix List.

TldextractDomainLookup implements the DomainLookup protocol on top of
tldextract. By default it never touches the network: the suffix list snapshot
bundled with tldextract is used and no disk cache is written.
"""

import ipaddress
import logging
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path

import tldextract

logger = logging.getLogger(__name__)


class DomainLookupError(LookupError):
    """Raised when a host has no registered domain."""

    pass


class TldextractDomainLookup:
    """Reduce hostnames to registered domains using tldextract.

    Args:
        suffix_list_urls: Public suffix list URLs to fetch. Empty (the
            default) uses the bundled snapshot only.
        cache_dir: Directory for tldextract's fetched-list cache. None
            disables the disk cache.
        include_private_suffixes: Treat PSL private-section entries
            (e.g. "blogspot.com") as public suffixes.

    Example:
        >>> lookup = TldextractDomainLookup()
        >>> lookup.registered_domain_of("www.example.co.uk")
        'example.co.uk'
    """

    def __init__(
        self,
        suffix_list_urls: Sequence[str] = (),
        cache_dir: Path | None = None,
        include_private_suffixes: bool = True,
    ) -> None:
        self._extract = tldextract.TLDExtract(
            cache_dir=str(cache_dir) if cache_dir is not None else None,
            suffix_list_urls=tuple(suffix_list_urls),
            fallback_to_snapshot=True,
            include_psl_private_domains=include_private_suffixes,
        )

    def registered_domain_of(self, host: str) -> str:
        """Return the registered domain of host.

        Raises:
            DomainLookupError: For empty hosts, IP literals, hosts that are
                themselves a public suffix, and hosts with no known suffix.
        """
        if not host:
            raise DomainLookupError("empty host")
        try:
            ipaddress.ip_address(host)
        except ValueError:
            pass
        else:
            raise DomainLookupError(f"IP address has no registered domain: {host}")

        parts = self._extract(host.rstrip("."))
        if not parts.domain or not parts.suffix:
            raise DomainLookupError(f"no public suffix match: {host}")
        return f"{parts.domain}.{parts.suffix}"


@lru_cache(maxsize=1)
def default_domain_lookup() -> TldextractDomainLookup:
    """Shared offline lookup, built on first use."""
    logger.debug("Loading bundled public suffix list")
    return TldextractDomainLookup()
