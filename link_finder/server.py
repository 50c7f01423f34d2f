# File: link_finder/server.py
"""link_finder.server: HTTP API around the crawler.

Routes
------
* ``POST /api/crawl`` – body ``{"url": "..."}``, returns the crawl result.
* ``GET /health``     – health check.
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from aiohttp import web

from link_finder.config import CrawlerConfig
from link_finder.crawler.crawler import LinkCrawler
from link_finder.crawler.errors import InvalidSeedError
from link_finder.crawler.models import CrawlResult
from link_finder.logger import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

CrawlFunc = Callable[[str, CrawlerConfig], Awaitable[CrawlResult]]

CONFIG_KEY = web.AppKey("config", CrawlerConfig)
CRAWL_KEY = web.AppKey("crawl", object)

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def run_crawl(url: str, config: CrawlerConfig) -> CrawlResult:
    return await LinkCrawler(url, config).run()


@web.middleware
async def cors_middleware(request: web.Request, handler) -> web.StreamResponse:
    if request.method == "OPTIONS":
        response: web.StreamResponse = web.Response(status=204)
    else:
        response = await handler(request)
    response.headers.update(_CORS_HEADERS)
    return response


async def handle_crawl(request: web.Request) -> web.Response:
    try:
        body = await request.json()
    except ValueError:
        body = None
    url = body.get("url") if isinstance(body, dict) else None

    if not isinstance(url, str) or not url.strip():
        return web.json_response(
            {"success": False, "error": "URL is required and must be a non-empty string"},
            status=400,
        )

    crawl: CrawlFunc = request.app[CRAWL_KEY]  # type: ignore[assignment]
    try:
        result = await crawl(url.strip(), request.app[CONFIG_KEY])
    except InvalidSeedError as exc:
        logger.warning("%s", exc)
        return web.json_response(
            {"success": False, "error": "Invalid URL", "message": str(exc)},
            status=400,
        )
    except Exception as exc:
        logger.exception("Crawl error for %s", url)
        return web.json_response(
            {"success": False, "error": "Failed to crawl website", "message": str(exc)},
            status=500,
        )
    return web.json_response(result.to_dict())


async def handle_health(_: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})


def create_app(config: Optional[CrawlerConfig] = None, crawl: Optional[CrawlFunc] = None) -> web.Application:
    """Build the aiohttp application; *crawl* replaces the real crawler (tests)."""
    app = web.Application(middlewares=[cors_middleware])
    app[CONFIG_KEY] = config or CrawlerConfig()
    app[CRAWL_KEY] = crawl or run_crawl
    app.router.add_post("/api/crawl", handle_crawl)
    app.router.add_get("/health", handle_health)
    return app


def serve(config: CrawlerConfig, host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Run the HTTP server until interrupted."""
    host = host or config.host
    port = config.port if port is None else port
    logger.info("Server running on port %d", port)
    web.run_app(create_app(config), host=host, port=port, print=None)
