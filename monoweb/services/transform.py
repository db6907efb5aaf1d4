import logging
from dataclasses import dataclass
from typing import Optional

from monoweb.core.config import Settings
from monoweb.llm.client import generate_with_retry
from monoweb.rewrite.links import rewrite_links

logger = logging.getLogger(__name__)

EMPTY_COMPLETION_WARNING = "AI returned empty content; showing the original page."

@dataclass
class TransformResult:
    html: str
    warning: Optional[str] = None

def build_prompt(html_content: str) -> str:
    return (
        "Take the following HTML content and create a minimalist black and white design:\n"
        "- Remove all images and unnecessary visual elements\n"
        "- Use only black (#000) and white (#fff) colors\n"
        "- Keep the core text content and structure\n"
        "- Simplify the layout and styling\n"
        "- Add clean typography and spacing\n"
        "- Ensure the output is valid HTML only, without any explanations\n"
        "- Ensure all links (<a> tags) have valid href attributes.\n"
        "Original HTML:\n\n"
        f"{html_content}\n\n"
        "Minimalist HTML:\n"
    )

def shrink_text(text: str, limit: int) -> str:
    if limit <= 0 or len(text) <= limit:
        return text
    return text[:limit]

def estimate_tokens(text: str) -> int:
    """Rough token estimate (about four characters per token)."""
    return (len(text) + 3) // 4

def strip_code_fences(content: str) -> str:
    """Remove a surrounding ```html ... ``` block that models like to add."""
    content = content.strip()
    if content.startswith("```"):
        first_newline = content.find("\n")
        content = content[first_newline + 1:] if first_newline != -1 else ""
    if content.endswith("```"):
        content = content[:-3]
    return content.strip()

async def transform_html(html_content: str, original_url: str, generator, settings: Settings) -> TransformResult:
    """
    Restyle a page through the LLM and point its links back at the app.

    1. Build the prompt (trimmed to LLM_MAX_INPUT_CHARS)
    2. Generate with bounded retries
    3. Empty completion -> original page plus a warning
    4. Rewrite links relative to original_url
    """
    body = shrink_text(html_content, settings.LLM_MAX_INPUT_CHARS)
    if len(body) < len(html_content):
        logger.info("HTML TRIMMED from %d to %d characters", len(html_content), len(body))
    prompt = build_prompt(body)
    logger.info("SENDING TO LLM: %d characters, ~%d tokens", len(prompt), estimate_tokens(prompt))

    completion = await generate_with_retry(
        generator,
        prompt,
        max_retries=settings.LLM_MAX_RETRIES,
        delay=settings.LLM_RETRY_DELAY_SECONDS,
    )
    modified = strip_code_fences(completion or "")

    if not modified:
        logger.warning("LLM returned empty content for %s", original_url)
        return TransformResult(html=html_content, warning=EMPTY_COMPLETION_WARNING)

    logger.info("LLM RESPONSE: %d characters", len(modified))
    rewritten = rewrite_links(modified, original_url)
    return TransformResult(html=rewritten.html, warning=rewritten.warning)
