"""
Provider service dependencies

Each service is built once and shared read-only across requests; tests swap
them through ``app.dependency_overrides``.
"""

from functools import lru_cache

from cloud_relay.services.image_service import OpenAIImageService
from cloud_relay.services.ocr_service import TextractOCRService


@lru_cache(maxsize=1)
def get_ocr_service() -> TextractOCRService:
    return TextractOCRService()


@lru_cache(maxsize=1)
def get_image_service() -> OpenAIImageService:
    return OpenAIImageService()
