# link_finder/crawler/fetcher.py
"""
Fetcher module: plain HTTP GET for robots.txt and sitemap documents.

Pages themselves go through the browser renderer; this fetcher only pulls
text resources, one attempt each, bounded by a per-request timeout.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from link_finder.logger import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


@dataclass(slots=True)
class FetchResult:
    """Status code and decoded body of a successful response."""

    status: int
    text: str


class Fetcher:
    """Thin wrapper over :class:`aiohttp.ClientSession` that never raises on I/O errors."""

    def __init__(self, user_agent: str, session: Optional[ClientSession] = None) -> None:
        self.user_agent = user_agent
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(
                headers={"User-Agent": self.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()
            self.session = None

    async def get(self, url: str, timeout: float) -> FetchResult | None:
        """
        GET *url* within *timeout* seconds.

        Returns FetchResult for 2xx responses, or None on network error,
        timeout or any other status.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url, timeout=ClientTimeout(total=timeout)) as resp:
                if not 200 <= resp.status < 300:
                    logger.warning("GET %s -> HTTP %s", url, resp.status)
                    return None
                text = await resp.text(errors="replace")
                return FetchResult(resp.status, text)
        except asyncio.TimeoutError:
            logger.warning("GET %s timed out after %.1f s", url, timeout)
        except (ClientError, UnicodeDecodeError) as exc:
            logger.warning("GET %s failed: %s", url, exc)
        return None
