"""
Image-generation relay endpoint backed by the OpenAI Images API
"""

import logging
from fastapi import APIRouter, Body, Depends

from cloud_relay.api.dependencies import get_image_service
from cloud_relay.models.relay_api import ImageGenerationRequest, ImageGenerationResponse, ErrorResponse
from cloud_relay.services.image_service import OpenAIImageService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/api/generate-image-openai",
    response_model=ImageGenerationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate_image_openai(
    request: ImageGenerationRequest = Body(...),
    image_service: OpenAIImageService = Depends(get_image_service),
):
    """
    Generate an image from a prompt using OpenAI

    Receives: { "prompt": "A descriptive text." }
    Returns: { "imageURL": "https://url.of.the.generated.image" }

    Model, image count, size and quality are fixed server-side.
    """
    image_url = image_service.generate_image(request.prompt)
    return ImageGenerationResponse(imageURL=image_url)
