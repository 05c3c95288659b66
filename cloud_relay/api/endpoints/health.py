"""
Health endpoint
"""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter

from cloud_relay import __version__
from cloud_relay.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=dict)
async def health_check():
    """
    Health check endpoint

    Reports whether provider credentials are configured; providers are never
    called from here.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "environment": settings.app_env,
        "services": {
            "ocr": "configured" if settings.textract_configured else "not_configured",
            "image_generation": "configured" if settings.openai_configured else "not_configured",
        }
    }
