# link_finder/crawler/__init__.py
"""Crawl engine: canonical URLs, robots policy, rendering and traversal."""
from link_finder.crawler.crawler import LinkCrawler, crawl_website
from link_finder.crawler.errors import CrawlError, InvalidSeedError, RenderError
from link_finder.crawler.models import CrawlResult, CrawlScope, CrawlState, RenderedPage

__all__ = [
    "LinkCrawler",
    "crawl_website",
    "CrawlError",
    "InvalidSeedError",
    "RenderError",
    "CrawlResult",
    "CrawlScope",
    "CrawlState",
    "RenderedPage",
]
