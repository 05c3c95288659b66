import base64
import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Union

import boto3

from cloud_relay.core.config import settings
from cloud_relay.models.errors import ErrorCode, RelayError
from cloud_relay.models.relay_api import TextBlock
from cloud_relay.utils.logging import ProcessingTimer, log_with_context

logger = logging.getLogger(__name__)

DATA_URI_PATTERN = re.compile(r"^data:[^;,]+;base64,")
LINE_BLOCK_TYPE = "LINE"


def strip_data_uri(image_base64: str) -> str:
    """Remove a leading ``data:<type>;base64,`` marker if present."""
    return DATA_URI_PATTERN.sub("", image_base64, count=1)


def decode_image(image_base64: str) -> bytes:
    """Decode a (possibly data-URI prefixed) base64 string into raw bytes."""
    return base64.b64decode(strip_data_uri(image_base64))


def extract_line_text(blocks: Optional[Iterable[Union[TextBlock, Dict[str, Any]]]]) -> str:
    """
    Join the text of LINE blocks with single spaces, keeping provider order.

    Accepts raw Textract block dicts or TextBlock models.
    """
    if not blocks:
        return ""

    lines = []
    for block in blocks:
        if isinstance(block, dict):
            block = TextBlock.from_textract(block)
        if block.block_type == LINE_BLOCK_TYPE:
            lines.append(block.text or "")

    return " ".join(lines)


class TextractOCRService:
    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        # Credentials are only checked by boto3 here, on first use
        if self._client is None:
            self._client = boto3.client(
                "textract",
                region_name=settings.aws_region,
                aws_access_key_id=settings.aws_access_key_id,
                aws_secret_access_key=settings.aws_secret_access_key,
            )
        return self._client

    def detect_text(self, image_bytes: bytes) -> List[TextBlock]:
        """Send raw image bytes to Textract DetectDocumentText and return its blocks."""
        with ProcessingTimer("textract.detect_document_text", logger):
            response = self.client.detect_document_text(Document={"Bytes": image_bytes})

        blocks = response.get("Blocks") or []
        return [TextBlock.from_textract(block) for block in blocks]

    def extract_text(self, image_base64: Optional[str]) -> str:
        """
        Run the full OCR relay: validate, decode, detect, flatten.

        Args:
            image_base64: Base64 image, optionally a data URI

        Returns:
            LINE block texts joined by single spaces

        Raises:
            RelayError: INVALID_REQUEST when no image is given (the provider is
                not called), OCR_FAILED for any decode or provider failure
        """
        if not image_base64:
            raise RelayError(ErrorCode.INVALID_REQUEST, "No image provided.")

        try:
            image_bytes = decode_image(image_base64)
            blocks = self.detect_text(image_bytes)
            text = extract_line_text(blocks)
        except Exception as e:
            logger.error(f"Error in OCR relay: {e}", exc_info=True)
            raise RelayError(
                ErrorCode.OCR_FAILED,
                details={"error_type": type(e).__name__}
            ) from e

        log_with_context(
            logger,
            "INFO",
            "Text extracted successfully",
            bytes_received=len(image_bytes),
            line_count=sum(1 for block in blocks if block.block_type == LINE_BLOCK_TYPE),
        )
        return text
