import asyncio
import logging
from html import escape
from typing import Awaitable, Callable, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

RETRY_DELAY_SECONDS = 1.0

# Key last passed to genai.configure; the library keeps it process-wide
_configured_key: Optional[str] = None

class ConfigurationError(Exception):
    """Raised when the LLM provider is not configured (e.g. missing API key)."""

async def generate_with_retry(
    call: Callable[[str], Awaitable[str]],
    prompt: str,
    max_retries: int,
    delay: float = RETRY_DELAY_SECONDS,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> str:
    """
    Run one text-generation call with a bounded number of retries.

    Waits a constant `delay` between attempts (no exponential growth, no jitter)
    and re-raises the last error once `max_retries` retries are used up.
    Empty completions are returned as-is; the caller decides what they mean.
    """
    remaining = max(max_retries, 0)
    attempt = 0
    while True:
        attempt += 1
        try:
            logger.info("LLM ATTEMPT %d/%d", attempt, max_retries + 1)
            return await call(prompt)
        except Exception as e:
            if remaining <= 0:
                logger.error("LLM FAILED after %d attempts: %s", attempt, e)
                raise
            logger.warning("LLM ERROR, retrying in %.1fs... (%s)", delay, e)
            await sleep(delay)
            remaining -= 1

class GeminiGenerator:
    """Async Gemini completion call with an explicitly injected API key."""

    def __init__(self, api_key: str, model_name: str = "gemini-2.5-flash"):
        if not api_key:
            raise ConfigurationError("API key not configured")

        try:
            import google.generativeai as genai  # lazy import to allow tests without package
        except ImportError as e:
            raise ImportError("google-generativeai package is required to use Gemini client") from e

        global _configured_key
        if api_key != _configured_key:
            genai.configure(api_key=api_key)
            _configured_key = api_key
        self.model_name = model_name
        self.model = genai.GenerativeModel(model_name)

    async def __call__(self, prompt: str) -> str:
        response = await self.model.generate_content_async(prompt)
        return _response_text(response)

def _response_text(response) -> str:
    # .text raises ValueError when the candidate has no parts (e.g. a blocked prompt)
    try:
        return response.text or ""
    except ValueError as e:
        logger.warning("Gemini response has no text: %s", e)
        return ""

class MockGenerator:
    """Local stand-in for Gemini used when USE_MOCK is on."""

    def __init__(self, source_html: str):
        self.source_html = source_html

    async def __call__(self, prompt: str) -> str:
        return render_minimal_html(self.source_html)

def render_minimal_html(html: str) -> str:
    """Strip a page down to black-on-white text while keeping its structure and links."""
    soup = BeautifulSoup(html, "html.parser")
    for element in soup(["script", "style", "noscript", "img", "picture", "svg", "video", "iframe", "link"]):
        element.decompose()
    for tag in soup.find_all(True):
        for attr in ("style", "class", "id", "bgcolor", "color"):
            tag.attrs.pop(attr, None)

    body = soup.body or soup
    title = soup.title.get_text(strip=True) if soup.title else ""
    content = body.decode_contents() if soup.body else str(body)
    return (
        "<!DOCTYPE html>\n<html><head><meta charset=\"utf-8\">"
        f"<title>{escape(title)}</title>"
        "<style>body{background:#fff;color:#000;font-family:Georgia,serif;"
        "max-width:42rem;margin:2rem auto;line-height:1.6}a{color:#000}</style>"
        f"</head><body>{content}</body></html>"
    )

def make_generator(api_key: Optional[str], model_name: str, source_html: str, use_mock: bool = False):
    """Pick the generator for a request: the mock in development, Gemini otherwise."""
    if use_mock:
        return MockGenerator(source_html)
    return GeminiGenerator(api_key, model_name)
