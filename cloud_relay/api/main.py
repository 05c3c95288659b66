"""
FastAPI application relaying OCR and image-generation requests to cloud providers
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cloud_relay import __version__
from cloud_relay.core.config import settings
from cloud_relay.api.endpoints import health, images, ocr
from cloud_relay.api.middleware import BodySizeLimitMiddleware, log_requests
from cloud_relay.models.errors import ErrorCode, RelayError, create_error_response
from cloud_relay.utils.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    # Startup
    logger.info("Starting Cloud Relay API...")
    logger.info(f"Environment: {settings.app_env}")
    logger.info(f"Debug mode: {settings.app_debug}")
    logger.info(f"Max request body: {settings.max_body_size_mb}MB")

    # Missing credentials only fail on the first provider call
    for name in settings.missing_provider_settings:
        logger.warning(f"{name} is not set; requests to its provider will fail")

    yield

    # Shutdown
    logger.info("Shutting down Cloud Relay API...")


# Create FastAPI application
app = FastAPI(
    title="Cloud Relay API",
    description="Relays OCR requests to AWS Textract and image generation requests to OpenAI",
    version=__version__,
    lifespan=lifespan,
    debug=settings.app_debug
)

app.add_middleware(BodySizeLimitMiddleware, max_body_size=settings.max_body_size_bytes)
app.middleware("http")(log_requests)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    """Translate relay errors into their HTTP status and error body"""
    if exc.is_client_error:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    content, status_code = exc.to_response()
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are invalid input, not unprocessable entities"""
    logger.info(f"{request.method} {request.url.path} validation failed: {exc.errors()}")
    content, status_code = create_error_response(ErrorCode.INVALID_REQUEST)
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Keep framework errors (404, 405, ...) in the same error shape"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


# Custom exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    content, status_code = create_error_response(ErrorCode.INTERNAL_ERROR)
    if settings.app_debug:
        content["detail"] = str(exc)
    return JSONResponse(status_code=status_code, content=content)


# Include routers
app.include_router(ocr.router, tags=["OCR"])
app.include_router(images.router, tags=["Image Generation"])
app.include_router(health.router, prefix="/health", tags=["Health"])


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint"""
    return {
        "name": "Cloud Relay API",
        "version": __version__,
        "status": "operational",
        "documentation": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "cloud_relay.api.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_debug
    )
