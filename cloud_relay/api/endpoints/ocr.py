"""
OCR relay endpoint backed by AWS Textract
"""

import logging
from fastapi import APIRouter, Body, Depends

from cloud_relay.api.dependencies import get_ocr_service
from cloud_relay.models.relay_api import OCRRequest, OCRResponse, ErrorResponse
from cloud_relay.services.ocr_service import TextractOCRService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/api/ocr-aws",
    response_model=OCRResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def ocr_aws(
    request: OCRRequest = Body(...),
    ocr_service: TextractOCRService = Depends(get_ocr_service),
):
    """
    Extract text from a base64 image using AWS Textract

    Receives: { "imageBase64": "data:image/png;base64,..." }
    Returns: { "text": "The text extracted from the image." }

    Error Codes:
        - 400 Bad Request: No image provided
        - 500 Internal Server Error: Decoding or Textract failure
    """
    text = ocr_service.extract_text(request.imageBase64)
    return OCRResponse(text=text)
