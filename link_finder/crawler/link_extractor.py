# link_finder/crawler/link_extractor.py
"""
Link extraction rules for LinkFinder.

The renderer hands over the serialized DOM of a loaded page; the rules below
pick every attribute that may point at another page of the site.
"""
from __future__ import annotations

import re
from typing import Iterator, Optional, Sequence, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from link_finder.utils import canonicalize

#: (CSS selector, attributes to read) in extraction order
EXTRACTION_RULES: Sequence[Tuple[str, Tuple[str, ...]]] = (
    ("a[href]", ("href",)),
    ("[data-href], [data-url], [data-link], [data-path]", ("data-href", "data-url", "data-link", "data-path")),
    ("form[action]", ("action",)),
    ("link[href]", ("href",)),
    ("area[href]", ("href",)),
    ("iframe[src]", ("src",)),
    ("base[href]", ("href",)),
)

#: rel values that make a <link> element a navigational one
LINK_RELATIONS = frozenset({"canonical", "alternate", "next", "prev"})

_REFRESH_URL_RE = re.compile(r"url\s*=\s*(.+)", re.IGNORECASE)


def _attr(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _is_navigational_link(tag: Tag) -> bool:
    rel = tag.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return any(r.lower() in LINK_RELATIONS for r in rel)


def _meta_refresh_target(content: str) -> Optional[str]:
    """Target of ``<meta http-equiv="refresh" content="5; url=/next">``."""
    match = _REFRESH_URL_RE.search(content)
    if not match:
        return None
    target = match.group(1).strip().strip("'\"").strip()
    return target or None


def iter_raw_hrefs(content: str, all_link_elements: bool = False) -> Iterator[str]:
    """Yield raw candidate hrefs from HTML *content*, rule by rule in document order."""
    soup = BeautifulSoup(content, "html.parser")

    for selector, attributes in EXTRACTION_RULES:
        for tag in soup.select(selector):
            if tag.name == "link" and not all_link_elements and not _is_navigational_link(tag):
                continue
            for name in attributes:
                value = _attr(tag, name)
                if value:
                    yield value

    for meta in soup.find_all("meta"):
        if not isinstance(meta, Tag):
            continue
        if (_attr(meta, "http-equiv") or "").lower() != "refresh":
            continue
        target = _meta_refresh_target(_attr(meta, "content") or "")
        if target:
            yield target


def extract_links(content: str, base_url: str, all_link_elements: bool = False) -> Iterator[str]:
    """
    Lazily yield canonical URLs referenced by a rendered page.

    Every candidate is resolved against *base_url*; rejected candidates
    (javascript:, mailto:, tel:, data:, bare fragments, malformed) are dropped
    and each URL is produced once per page. Scope filtering is left to the caller.
    """
    seen: set[str] = set()
    for raw in iter_raw_hrefs(content, all_link_elements):
        url = canonicalize(raw, base_url)
        if url is None or url in seen:
            continue
        seen.add(url)
        yield url
