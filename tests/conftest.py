"""Shared pytest fixtures for unit and integration tests."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from crawltally.summary.records import CrawlRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def crawl_log_path() -> Path:
    """Path to the sample Heritrix crawl.log."""
    return FIXTURES_DIR / "crawl.log"


@pytest.fixture
def make_record() -> Callable[..., CrawlRecord]:
    """Factory for records with sensible defaults.

    Example:
        >>> record = make_record(url="http://example.com/", size=10)
    """

    def _make(
        url: str = "http://example.com/",
        status_code: int = 200,
        mime_type: str = "text/html",
        size: int | None = 0,
        **kwargs,
    ) -> CrawlRecord:
        return CrawlRecord(
            url=url,
            status_code=status_code,
            mime_type=mime_type,
            size=size,
            **kwargs,
        )

    return _make


@pytest.fixture
def scenario_records() -> list[CrawlRecord]:
    """Two example.com pages and one record with an unparseable URL."""
    return [
        CrawlRecord("http://a.example.com/x", 200, "text/html", 100),
        CrawlRecord("http://b.example.com/y", 200, "text/html", 50),
        CrawlRecord("not a url", 404, "", 0),
    ]


@pytest.fixture(autouse=True)
def reset_crawltally_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so they don't outlive CliRunner streams."""
    yield
    logger = logging.getLogger("crawltally")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
