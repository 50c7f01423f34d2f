# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Dict, List, Optional, Tuple, Union

import pytest
from aiohttp import web

from link_finder.config import CrawlerConfig
from link_finder.crawler.errors import RenderError
from link_finder.crawler.fetcher import FetchResult
from link_finder.crawler.models import RenderedPage

#: url -> html, or (final_url, html), or an exception to raise
PageEntry = Union[str, Tuple[str, str], Exception]


class FakeRenderer:
    """In-memory stand-in for PageRenderer: serves HTML from a dict."""

    def __init__(self, pages: Dict[str, PageEntry]) -> None:
        self.pages = pages
        self.rendered: List[str] = []
        self.close_calls = 0

    async def render(self, url: str) -> RenderedPage:
        self.rendered.append(url)
        entry = self.pages.get(url)
        if entry is None:
            raise RenderError(url, "net::ERR_NAME_NOT_RESOLVED")
        if isinstance(entry, Exception):
            raise entry
        if isinstance(entry, tuple):
            final_url, content = entry
            return RenderedPage(url=url, final_url=final_url, content=content)
        return RenderedPage(url=url, final_url=url, content=entry)

    async def close(self) -> None:
        self.close_calls += 1


class FakeFetcher:
    """In-memory stand-in for Fetcher: url -> body; unknown URLs fail."""

    def __init__(self, responses: Optional[Dict[str, str]] = None) -> None:
        self.responses = responses or {}
        self.requested: List[Tuple[str, float]] = []

    async def __aenter__(self) -> FakeFetcher:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str, timeout: float) -> Optional[FetchResult]:
        self.requested.append((url, timeout))
        body = self.responses.get(url)
        return None if body is None else FetchResult(200, body)


def links_page(*hrefs: str) -> str:
    """HTML page with one anchor per href."""
    anchors = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return f"<html><body>{anchors}</body></html>"


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def fast_config() -> CrawlerConfig:
    """Config with short timeouts and no settle delay."""
    return CrawlerConfig(
        max_depth=2,
        robots_timeout=1.0,
        sitemap_timeout=1.0,
        page_timeout=2.0,
        settle_delay=0,
    )


@pytest.fixture()
def make_renderer():
    """Factory: build a FakeRenderer and a renderer_factory returning it."""

    def _make(pages: Dict[str, PageEntry]):
        renderer = FakeRenderer(pages)
        return renderer, (lambda _config: renderer)

    return _make
