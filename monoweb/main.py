import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from monoweb.api.routes import router
from monoweb.core.config import settings

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Configure logging on startup.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting Monoweb (mock=%s, model=%s)", settings.USE_MOCK, settings.GEMINI_MODEL)

    yield

    logger.info("Shutting down Monoweb...")

app = FastAPI(
    title="Monoweb",
    description="Fetch web pages and re-render them as minimalist black and white HTML",
    version="1.0.0",
    lifespan=lifespan
)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 {error} like every other client error"""
    first = exc.errors()[0] if exc.errors() else {}
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid request: {message}"},
    )

# Include API routes
app.include_router(router)

@app.get("/api")
async def service_info():
    """Service info"""
    return {
        "service": "Monoweb",
        "version": "1.0.0",
        "endpoints": {
            "page": "GET /?_url=<url>",
            "download": "GET /api/download?url=<url>",
            "transform": "POST /api/transform",
            "health": "GET /health"
        }
    }
