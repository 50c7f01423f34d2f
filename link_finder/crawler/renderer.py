# link_finder/crawler/renderer.py
"""
Headless-browser page renderer backed by Playwright.

One browser is launched lazily on the first render and shared by every page
of a crawl; :meth:`PageRenderer.close` releases it.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol

from playwright.async_api import Browser, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from link_finder.config import CrawlerConfig
from link_finder.crawler.errors import RenderError
from link_finder.crawler.models import RenderedPage
from link_finder.logger import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class Renderer(Protocol):
    """What the crawler needs from a rendering backend."""

    async def render(self, url: str) -> RenderedPage: ...

    async def close(self) -> None: ...


class PageRenderer:
    """Loads pages in headless Chromium and returns their DOM after scripts ran."""

    def __init__(self, config: CrawlerConfig) -> None:
        self.config = config
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._launch_lock = asyncio.Lock()

    async def __aenter__(self) -> PageRenderer:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def launched(self) -> bool:
        return self._browser is not None

    async def launch(self) -> Browser:
        """Start Playwright and Chromium once; later calls return the same browser."""
        async with self._launch_lock:
            if self._browser is None:
                self._playwright = await async_playwright().start()
                self._browser = await self._playwright.chromium.launch(
                    headless=self.config.headless,
                    args=list(self.config.browser_args),
                )
                logger.debug("Chromium launched (headless=%s)", self.config.headless)
        return self._browser

    async def render(self, url: str) -> RenderedPage:
        """Navigate to *url*, let dynamic content settle and capture the DOM.

        Raises RenderError on navigation timeout, crash or evaluation failure.
        """
        try:
            browser = await self.launch()
            page = await browser.new_page(user_agent=self.config.user_agent)
        except PlaywrightError as exc:
            raise RenderError(url, exc) from exc

        timeout_ms = self.config.page_timeout * 1000
        try:
            page.set_default_navigation_timeout(timeout_ms)
            await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
            if self.config.settle_delay:
                await page.wait_for_timeout(self.config.settle_delay * 1000)
            content = await page.content()
            return RenderedPage(url=url, final_url=page.url, content=content)
        except PlaywrightError as exc:
            raise RenderError(url, exc) from exc
        finally:
            try:
                await page.close()
            except PlaywrightError as exc:
                logger.debug("Closing page for %s failed: %s", url, exc)

    async def close(self) -> None:
        """Shut the browser and the Playwright driver down; safe to call twice."""
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None
        try:
            if browser is not None:
                await browser.close()
        finally:
            if playwright is not None:
                await playwright.stop()
