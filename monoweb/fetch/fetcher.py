import logging
from typing import Optional

import httpx

from monoweb.core.config import settings
from monoweb.fetch.base import FetchResult, FetchError

logger = logging.getLogger(__name__)

async def fetch_page(url: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> FetchResult:
    """
    Fetch a page with a single GET request.

    The URL must already be normalized and validated. Non-2xx responses raise
    FetchError with the upstream status; transport failures (DNS, TLS,
    timeouts) raise FetchError with status 500. No retries.
    """
    headers = {
        "User-Agent": settings.USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.7",
    }

    logger.info("FETCH %s", url)
    try:
        async with httpx.AsyncClient(
            timeout=settings.REQUEST_TIMEOUT,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        ) as client:
            response = await client.get(url)
            body = response.text
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("FETCH FAILED for %s: %s", url, e)
        raise FetchError(500, "Failed to fetch URL", details=str(e) or type(e).__name__) from e

    if not response.is_success:
        logger.warning("FETCH UPSTREAM %s for %s", response.status_code, url)
        raise FetchError(response.status_code, f"Failed to fetch URL: {response.reason_phrase}")

    content_type = response.headers.get("content-type") or "unknown"
    logger.info("FETCH OK %s: %d characters, %s", url, len(body), content_type)

    return FetchResult(
        url=url,
        final_url=str(response.url),
        status=response.status_code,
        content_type=content_type,
        body=body,
    )
