# File: link_finder/utils.py
"""link_finder.utils: URL canonicalization and same-domain scope checks."""

from __future__ import annotations

import ipaddress
import re
from typing import TYPE_CHECKING, Optional, Sequence
from urllib.parse import urljoin, urlsplit, urlunsplit

from link_finder.logger import logger

if TYPE_CHECKING:
    from link_finder.crawler.models import CrawlScope

__all__: Sequence[str] = (
    "canonicalize",
    "is_in_scope",
    "extract_domain",
    "origin_of",
)

ALLOWED_SCHEMES = ("http", "https")

_REJECTED_PREFIXES = ("javascript:", "mailto:", "tel:", "data:")
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
_DEFAULT_PORTS = {"http": 80, "https": 443}
_HOST_RE = re.compile(r"^[a-z0-9_.-]+$")


def _bootstrap_scheme(raw: str) -> str:
    """Добавляет https:// к адресу без схемы (только для стартового URL)."""
    if raw.startswith("//"):
        return "https:" + raw
    if _SCHEME_RE.match(raw) and "://" in raw:
        return raw
    return "https://" + raw


def _valid_host(host: str) -> bool:
    """Hostname check: IP literal or DNS name (IDN labels are allowed)."""
    if ":" in host:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True
    try:
        ascii_host = host.encode("idna").decode("ascii")
    except UnicodeError:
        return False
    return bool(_HOST_RE.match(ascii_host))


def canonicalize(raw: Optional[str], base: Optional[str] = None) -> Optional[str]:
    """Resolve *raw* against *base* and return its canonical form, or ``None``.

    The canonical form is an absolute ``http``/``https`` URL with a lower-cased
    host, no default port, no fragment and no trailing slash on the path. A bare
    origin keeps its single ``/`` so ``https://ex.com`` and ``https://ex.com/``
    compare equal.

    ``None`` is returned for empty input, fragment-only references, the
    ``javascript:``, ``mailto:``, ``tel:`` and ``data:`` pseudo-schemes, any
    other non-HTTP scheme, a host that is not a valid DNS name or IP literal
    and anything :mod:`urllib.parse` cannot make sense of.
    Without a *base*, a scheme-less *raw* gets ``https://`` prepended.
    """
    if raw is None:
        return None
    raw = raw.strip()
    if not raw or raw.startswith("#") or raw.lower().startswith(_REJECTED_PREFIXES):
        return None

    try:
        absolute = urljoin(base, raw) if base else _bootstrap_scheme(raw)
        parts = urlsplit(absolute)
        scheme = parts.scheme.lower()
        host = parts.hostname
        port = parts.port
    except ValueError:
        logger.debug("Rejected malformed URL: %r (base=%r)", raw, base)
        return None

    if scheme not in ALLOWED_SCHEMES or not host:
        return None
    if not _valid_host(host):
        logger.debug("Rejected URL with invalid host: %r", raw)
        return None

    netloc = f"[{host}]" if ":" in host else host
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"
    if "@" in parts.netloc:
        netloc = parts.netloc.rsplit("@", 1)[0] + "@" + netloc

    path = parts.path.rstrip("/") or "/"

    return urlunsplit((scheme, netloc, path, parts.query, ""))


def extract_domain(url: str) -> str:
    """Возвращает hostname из URL (в нижнем регистре) без дополнительных проверок."""
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""


def origin_of(url: str) -> str:
    """``scheme://netloc`` part of *url*."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, "", "", ""))


def is_in_scope(url: Optional[str], scope: "CrawlScope") -> bool:
    """True iff *url* is http(s) and its host equals the scope's base domain exactly."""
    if not url:
        return False
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return False
    return parts.scheme in ALLOWED_SCHEMES and host == scope.domain
