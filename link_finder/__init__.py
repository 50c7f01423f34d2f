# link_finder/__init__.py
"""
LinkFinder package initializer.
Defines package version and exposes the crawl entry points.
"""
__version__ = "1.0.0"

from link_finder.crawler import CrawlResult, InvalidSeedError, LinkCrawler, crawl_website

__all__ = ["__version__", "LinkCrawler", "CrawlResult", "InvalidSeedError", "crawl_website"]
