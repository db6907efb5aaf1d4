"""
Link rewriting for transformed pages.

Every resolvable anchor is pointed back at the application as
/?_url=<encoded absolute URL> so that navigation stays inside the app.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from monoweb.fetch.utils import normalize_url, is_valid_url, build_internal_link

logger = logging.getLogger(__name__)

INVALID_BASE_WARNING = "Could not parse originalUrl to rewrite links."

@dataclass
class RewriteResult:
    html: str
    warning: Optional[str] = None
    rewritten: int = 0
    skipped: List[str] = field(default_factory=list)

def _is_navigable(href: str) -> bool:
    """Same-page fragments and javascript: pseudo-links are left as they are."""
    if not href:
        return False
    return not (href.startswith("#") or href.lower().startswith("javascript:"))

def resolve_href(href: str, base_url: str) -> str:
    """
    Resolve href against base_url.
    Raises ValueError when the result is not a usable URL (broken IPv6 host, http URL without a host).
    """
    absolute = urljoin(base_url, href)
    parsed = urlparse(absolute)
    if parsed.scheme in ("http", "https") and not parsed.hostname:
        raise ValueError(f"No host in resolved URL: {absolute!r}")
    return absolute

def rewrite_links(html: str, base_url: str) -> RewriteResult:
    """
    Rewrite all anchors in html into internal navigation links.

    An invalid base_url leaves the document untouched and sets a warning.
    Anchors that fail to resolve keep their original href.
    """
    base = normalize_url(base_url or "")
    if not is_valid_url(base):
        logger.error("REWRITE SKIPPED: invalid originalUrl %r", base_url)
        return RewriteResult(html=html, warning=INVALID_BASE_WARNING)

    logger.info("REWRITE links relative to %s", base)
    soup = BeautifulSoup(html, "html.parser")
    result = RewriteResult(html=html)

    for anchor in soup.find_all("a", href=True):
        href = anchor["href"].strip()
        if not _is_navigable(href):
            continue
        try:
            absolute = resolve_href(href, base)
        except ValueError as e:
            logger.warning("Could not process or resolve href %r: %s", href, e)
            result.skipped.append(href)
            continue
        anchor["href"] = build_internal_link(absolute)
        result.rewritten += 1

    result.html = str(soup)
    logger.info("REWRITE done: %d rewritten, %d unresolved", result.rewritten, len(result.skipped))
    return result
