import logging
from typing import Optional

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, JSONResponse

from monoweb.core.config import settings
from monoweb.fetch import fetcher
from monoweb.fetch.base import FetchError
from monoweb.fetch.utils import normalize_url, is_valid_url
from monoweb.llm import client as llm_client
from monoweb.schemas import DownloadResponse, TransformRequest, TransformResponse, ErrorResponse
from monoweb.services import transform
from monoweb.web.shell import INDEX_HTML

logger = logging.getLogger(__name__)

router = APIRouter()

def error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    payload = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))

@router.get("/", response_class=HTMLResponse)
async def index():
    """Page shell; reads ?_url= and drives download + transform from the browser"""
    return HTMLResponse(INDEX_HTML)

@router.get("/api/download", response_model=DownloadResponse)
async def download(url: Optional[str] = None):
    """
    Fetch a remote page.

    Returns the upstream status, content type and body text.
    """
    if not url:
        return error_response(status.HTTP_400_BAD_REQUEST, "URL parameter is required")

    target_url = normalize_url(url)
    if not is_valid_url(target_url):
        return error_response(status.HTTP_400_BAD_REQUEST, f"Invalid URL: {url}")

    try:
        result = await fetcher.fetch_page(target_url)
    except FetchError as e:
        return error_response(e.status_code, e.error, e.details)
    except Exception as e:
        logger.exception("Error fetching URL: %s", target_url)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch URL", str(e))

    return DownloadResponse(status=result.status, contentType=result.content_type, content=result.body)

@router.post("/api/transform", response_model=TransformResponse, response_model_exclude_none=True)
async def transform_page(request: TransformRequest):
    """
    Restyle fetched HTML as a minimalist black/white page.

    Links are rewritten to /?_url=<absolute URL> relative to originalUrl.
    """
    api_key = settings.provider_api_key()
    if not api_key and not settings.USE_MOCK:
        logger.error("GEMINI_API_KEY environment variable not set.")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "API key not configured")

    if not request.htmlContent or not request.originalUrl:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Missing htmlContent or originalUrl in request body",
        )

    try:
        generator = llm_client.make_generator(
            api_key,
            settings.GEMINI_MODEL,
            request.htmlContent,
            use_mock=settings.USE_MOCK,
        )
        result = await transform.transform_html(request.htmlContent, request.originalUrl, generator, settings)
    except llm_client.ConfigurationError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except Exception as e:
        logger.exception("Error processing request with Gemini")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(e) or "Internal server error during AI processing",
            type(e).__name__,
        )

    return TransformResponse(modifiedContent=result.html, warning=result.warning)

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Monoweb"}
