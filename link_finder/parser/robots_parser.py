# File: link_finder/parser/robots_parser.py
"""link_finder.parser.robots_parser: загрузка robots.txt и поиск в нём sitemap-ссылок."""

from __future__ import annotations

import logging
import re
from typing import List

from link_finder.crawler.fetcher import Fetcher
from link_finder.crawler.models import CrawlScope
from link_finder.crawler.robots import RobotsPolicy, RobotsTxtRules
from link_finder.logger import LOGGER_NAME
from link_finder.utils import canonicalize, is_in_scope, origin_of

logger = logging.getLogger(LOGGER_NAME)

_SITEMAP_RE = re.compile(r"^\s*sitemap\s*:\s*(\S+)", re.IGNORECASE | re.MULTILINE)

ROBOTS_TIMEOUT = 5.0


def robots_url(scope: CrawlScope) -> str:
    """``{scheme}://{host}/robots.txt`` for the crawl's seed."""
    return f"{origin_of(scope.seed)}/robots.txt"


def extract_sitemaps(text: str, scope: CrawlScope) -> List[str]:
    """Return in-scope canonical sitemap URLs listed in robots.txt *text*, in file order.

    Args:
        text: содержимое robots.txt.
        scope: границы обхода; sitemap на чужих доменах отбрасываются.
    """
    sitemaps: List[str] = []
    base = robots_url(scope)
    for match in _SITEMAP_RE.finditer(text):
        url = canonicalize(match.group(1), base)
        if url and is_in_scope(url, scope) and url not in sitemaps:
            sitemaps.append(url)
        else:
            logger.debug("Skipping sitemap entry %r", match.group(1))
    return sitemaps


async def discover(scope: CrawlScope, fetcher: Fetcher, timeout: float = ROBOTS_TIMEOUT) -> RobotsPolicy:
    """Fetch robots.txt for *scope* and build the crawl's RobotsPolicy.

    Any fetch failure yields an allow-all policy without sitemaps.
    """
    url = robots_url(scope)
    result = await fetcher.get(url, timeout)
    if result is None:
        logger.info("Could not fetch robots.txt: %s", url)
        return RobotsPolicy()

    policy = RobotsPolicy(rules=RobotsTxtRules(result.text), sitemaps=extract_sitemaps(result.text, scope))
    logger.info("robots.txt loaded from %s (%d sitemap(s))", url, len(policy.sitemaps))
    return policy
