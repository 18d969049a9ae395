"""Core protocol definitions for crawltally components.

This module provides canonical protocol definitions used across the codebase
for type checking and dependency injection.
"""

from typing import Protocol


class DomainLookup(Protocol):
    """Protocol for reducing a hostname to its registered domain.

    Implemented by TldextractDomainLookup and used by the registered-domain
    key function. Tests substitute a plain object with the same method.

    Methods required:
    - registered_domain_of: Returns the public-suffix-aware domain of a host
    """

    def registered_domain_of(self, host: str) -> str:
        """Return the registered ("pay-level") domain of a host.

        Args:
            host: Lower-case hostname, e.g. "www.example.co.uk"

        Returns:
            Registered domain, e.g. "example.co.uk"

        Raises:
            DomainLookupError: If the host has no registered domain (IP
                literal, bare public suffix, unknown suffix)
        """
        ...
