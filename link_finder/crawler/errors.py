# link_finder/crawler/errors.py
"""Exceptions raised by the crawl engine."""
from __future__ import annotations


class CrawlError(Exception):
    """Base class for crawler errors."""


class InvalidSeedError(CrawlError, ValueError):
    """The start URL cannot be turned into a crawlable http(s) URL."""

    def __init__(self, url: object) -> None:
        super().__init__(f"Invalid URL: {url}")
        self.url = url


class RenderError(CrawlError):
    """A page failed to load or render; the crawl treats it as a leaf."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"Error loading page {url}: {reason}")
        self.url = url
        self.reason = reason
