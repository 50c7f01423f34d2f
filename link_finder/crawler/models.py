# link_finder/crawler/models.py
"""
Data models for the LinkFinder crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set


@dataclass(frozen=True, slots=True)
class CrawlScope:
    """Base domain and depth limit, fixed for the lifetime of one crawl."""

    seed: str
    domain: str
    max_depth: int


@dataclass(slots=True)
class RenderedPage:
    """A page loaded by the renderer: requested URL, post-redirect URL and DOM."""

    url: str
    final_url: str
    content: str


@dataclass(slots=True)
class CrawlState:
    """Mutable sets owned by one crawl.

    ``visited`` holds URLs dispatched for rendering, ``found`` every URL the
    crawl reports (visited pages, discovered-but-unrendered links, sitemap
    entries). A URL enters ``visited`` at most once.
    """

    visited: Set[str] = field(default_factory=set)
    found: Set[str] = field(default_factory=set)

    def mark_visited(self, url: str) -> bool:
        """Add *url* to both sets; False if it had already been visited."""
        if url in self.visited:
            return False
        self.visited.add(url)
        self.found.add(url)
        return True


@dataclass(slots=True)
class CrawlResult:
    """Outcome of a finished crawl."""

    url: str
    links: List[str]
    visited: List[str]
    duration: float

    @property
    def total_links(self) -> int:
        return len(self.links)

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape of a successful crawl response."""
        return {
            "success": True,
            "url": self.url,
            "totalLinks": self.total_links,
            "crawlDuration": f"{self.duration:.2f}s",
            "links": list(self.links),
        }
