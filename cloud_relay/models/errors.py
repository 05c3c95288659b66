"""
Error codes and messages for the relay endpoints
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(Enum):
    """Standard error codes for relay requests"""

    # Invalid input (4xx)
    INVALID_REQUEST = "INVALID_REQUEST"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # Processing failures (5xx)
    OCR_FAILED = "OCR_FAILED"
    IMAGE_GENERATION_FAILED = "IMAGE_GENERATION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Error messages mapping
ERROR_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.INVALID_REQUEST: "Invalid request format or parameters",
    ErrorCode.PAYLOAD_TOO_LARGE: "Request body exceeds the maximum allowed size",

    ErrorCode.OCR_FAILED: "Failed to process the image with AWS Textract",
    ErrorCode.IMAGE_GENERATION_FAILED: "Failed to generate the image with the OpenAI API",
    ErrorCode.INTERNAL_ERROR: "An internal error occurred while processing the request",
}


# HTTP status code mapping
ERROR_STATUS_CODES: Dict[ErrorCode, int] = {
    # 400 Bad Request
    ErrorCode.INVALID_REQUEST: 400,

    # 413 Payload Too Large
    ErrorCode.PAYLOAD_TOO_LARGE: 413,

    # 500 Internal Server Error
    ErrorCode.OCR_FAILED: 500,
    ErrorCode.IMAGE_GENERATION_FAILED: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


class RelayError(Exception):
    """
    Custom exception for relay request errors

    The message is what the caller sees; provider details belong in
    ``details`` and the server logs, never in the response body.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message or ERROR_MESSAGES.get(error_code, "An error occurred")
        self.details = details or {}
        self.status_code = ERROR_STATUS_CODES.get(error_code, 500)
        super().__init__(self.message)

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API response"""
        return {
            "error": self.message,
            "error_code": self.error_code.value,
        }

    def to_response(self) -> tuple[Dict[str, Any], int]:
        """Convert to API response format with status code"""
        return self.to_dict(), self.status_code


def create_error_response(
    error_code: ErrorCode,
    message: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> tuple[Dict[str, Any], int]:
    """
    Create standardized error response
    Returns: (response_dict, status_code)
    """
    error = RelayError(error_code, message, details)
    return error.to_response()
