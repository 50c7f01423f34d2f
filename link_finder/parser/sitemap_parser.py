# File: link_finder/parser/sitemap_parser.py
"""link_finder.parser.sitemap_parser: разбор sitemap.xml и извлечение URL."""

from __future__ import annotations

import html
import logging
import re
from typing import List, Set

from lxml import etree

from link_finder.crawler.fetcher import Fetcher
from link_finder.crawler.models import CrawlScope
from link_finder.logger import LOGGER_NAME
from link_finder.utils import canonicalize, is_in_scope

logger = logging.getLogger(LOGGER_NAME)

_LOC_RE = re.compile(r"<loc>\s*(.*?)\s*</loc>", re.IGNORECASE | re.DOTALL)

SITEMAP_TIMEOUT = 10.0


def parse_sitemap(xml_content: str) -> List[str]:
    """Разбирает XML content sitemap и возвращает список URL из тегов <loc>.

    Сначала пробует lxml (в режиме recover), при неудаче регулярным выражением.
    Для мусора на входе возвращает пустой список.

    Пример:
    ```python
    from link_finder.parser.sitemap_parser import parse_sitemap

    with open('sitemap.xml', encoding='utf-8') as f:
        urls = parse_sitemap(f.read())
    ```
    """
    if not xml_content or not xml_content.strip():
        return []

    locs: List[str] = []
    try:
        parser = etree.XMLParser(ns_clean=True, recover=True, resolve_entities=False)
        root = etree.fromstring(xml_content.encode("utf-8"), parser=parser)
        if root is not None:
            locs = [loc.text.strip() for loc in root.iterfind(".//{*}loc") if loc.text and loc.text.strip()]
    except (etree.XMLSyntaxError, ValueError) as exc:
        logger.debug("lxml could not parse sitemap: %s", exc)

    if not locs:
        locs = [html.unescape(m) for m in _LOC_RE.findall(xml_content) if m]
    return locs


async def ingest(
    sitemap_url: str,
    scope: CrawlScope,
    fetcher: Fetcher,
    timeout: float = SITEMAP_TIMEOUT,
) -> Set[str]:
    """Fetch *sitemap_url* and return the canonical in-scope URLs it lists.

    A failed fetch or an unparseable body contributes nothing.
    """
    result = await fetcher.get(sitemap_url, timeout)
    if result is None:
        logger.warning("Could not parse sitemap %s", sitemap_url)
        return set()

    found: Set[str] = set()
    for raw in parse_sitemap(result.text):
        url = canonicalize(raw, sitemap_url)
        if url and is_in_scope(url, scope):
            found.add(url)
    logger.info("Sitemap %s: %d URL(s) in scope", sitemap_url, len(found))
    return found
