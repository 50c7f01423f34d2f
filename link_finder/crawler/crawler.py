# === FILE: link_finder/crawler/crawler.py ===
"""
Crawl orchestrator: robots/sitemap discovery followed by a depth-limited,
depth-first walk of the site through a headless browser.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Iterator, List, Optional, Tuple

from link_finder.config import CrawlerConfig
from link_finder.crawler.errors import InvalidSeedError, RenderError
from link_finder.crawler.fetcher import Fetcher
from link_finder.crawler.link_extractor import extract_links
from link_finder.crawler.models import CrawlResult, CrawlScope, CrawlState
from link_finder.crawler.renderer import PageRenderer, Renderer
from link_finder.crawler.robots import RobotsPolicy
from link_finder.logger import LOGGER_NAME
from link_finder.parser.robots_parser import discover
from link_finder.parser.sitemap_parser import ingest
from link_finder.utils import canonicalize, extract_domain, is_in_scope

__all__ = ("LinkCrawler", "crawl_website")

# (depth of the page, its pending links)
_Frame = Tuple[int, Iterator[str]]


class LinkCrawler:
    """Finds every same-domain URL reachable from *url* within ``max_depth`` hops.

    Usage::

        crawler = LinkCrawler("example.com", max_depth=2)
        links = await crawler.crawl()

    Only an unusable start URL is fatal (InvalidSeedError, raised here);
    fetch and render failures during the crawl are logged and skipped.
    """

    def __init__(
        self,
        url: str,
        config: Optional[CrawlerConfig] = None,
        *,
        max_depth: Optional[int] = None,
        fetcher: Optional[Fetcher] = None,
        renderer_factory: Optional[Callable[[CrawlerConfig], Renderer]] = None,
    ) -> None:
        self.config = config or CrawlerConfig()
        self.logger = logging.getLogger(LOGGER_NAME)
        self.url = url.strip() if isinstance(url, str) else url

        seed = canonicalize(self.url) if isinstance(self.url, str) else None
        if seed is None:
            raise InvalidSeedError(url)
        depth = self.config.max_depth if max_depth is None else max_depth
        if depth < 0:
            raise ValueError("max_depth must be >= 0")

        self.scope = CrawlScope(seed=seed, domain=extract_domain(seed), max_depth=depth)
        self._fetcher = fetcher
        self._renderer_factory = renderer_factory or PageRenderer

    async def crawl(self) -> List[str]:
        """Run the crawl and return the sorted list of found URLs."""
        return (await self.run()).links

    async def run(self) -> CrawlResult:
        self.logger.info("Starting crawl of %s (max depth: %d)", self.scope.seed, self.scope.max_depth)
        start = time.monotonic()
        state = CrawlState()

        fetcher = self._fetcher or Fetcher(self.config.user_agent)
        async with fetcher:
            policy = await self.discover(state, fetcher)

        renderer = self._renderer_factory(self.config)
        try:
            await self.traverse(state, policy, renderer)
        finally:
            await renderer.close()

        duration = time.monotonic() - start
        self.logger.info(
            "Finished %s: %d link(s), %d page(s) rendered in %.2f s",
            self.scope.seed, len(state.found), len(state.visited), duration,
        )
        return CrawlResult(
            url=self.url,
            links=sorted(state.found),
            visited=sorted(state.visited),
            duration=duration,
        )

    async def discover(self, state: CrawlState, fetcher: Fetcher) -> RobotsPolicy:
        """Load robots.txt and report every in-scope sitemap URL as found.

        Sitemap URLs are neither robots-checked nor rendered.
        """
        policy = await discover(self.scope, fetcher, self.config.robots_timeout)
        for sitemap_url in policy.sitemaps:
            state.found |= await ingest(sitemap_url, self.scope, fetcher, self.config.sitemap_timeout)
        return policy

    async def traverse(self, state: CrawlState, policy: RobotsPolicy, renderer: Renderer) -> None:
        """Depth-first walk from the seed.

        The stack holds at most ``max_depth + 1`` frames. A page's links are
        consumed in extraction order and each one is explored completely
        before the next sibling, the same order plain recursion would give.
        """
        stack: List[_Frame] = []
        frame = await self.visit(self.scope.seed, 0, state, policy, renderer)
        if frame is not None:
            stack.append(frame)

        while stack:
            depth, links = stack[-1]
            raw = next(links, None)
            if raw is None:
                stack.pop()
                continue
            link = canonicalize(raw)
            if not is_in_scope(link, self.scope):
                self.logger.debug("Out of scope: %s", raw)
                continue
            state.found.add(link)
            if depth < self.scope.max_depth:
                child = await self.visit(link, depth + 1, state, policy, renderer)
                if child is not None:
                    stack.append(child)

    async def visit(
        self,
        url: str,
        depth: int,
        state: CrawlState,
        policy: RobotsPolicy,
        renderer: Renderer,
    ) -> Optional[_Frame]:
        """Render one page; return its pending links, or None for a no-op or a leaf."""
        if depth > self.scope.max_depth:
            return None

        target = canonicalize(url, self.scope.seed)
        if target is None or not is_in_scope(target, self.scope):
            return None
        if not policy.allows(target, self.config.robots_agent):
            self.logger.info("Disallowed by robots.txt: %s", target)
            return None
        if not state.mark_visited(target):
            return None

        self.logger.info("Crawling [Depth %d]: %s", depth, target)

        try:
            page = await renderer.render(target)
        except RenderError as exc:
            self.logger.warning("%s", exc)
            return None

        base = target
        if page.final_url and page.final_url != target:
            final = canonicalize(page.final_url)
            if final is None or not is_in_scope(final, self.scope):
                self.logger.info("Redirected out of scope: %s -> %s", target, page.final_url)
                return None
            state.found.add(final)
            base = final

        return depth, extract_links(page.content, base, self.config.all_link_elements)


async def crawl_website(url: str, max_depth: int = 2, config: Optional[CrawlerConfig] = None) -> List[str]:
    """Crawl *url* and return the sorted list of links found."""
    return await LinkCrawler(url, config, max_depth=max_depth).crawl()
