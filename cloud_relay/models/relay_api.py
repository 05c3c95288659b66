"""
Relay API Request and Response Models
"""

from typing import Optional
from pydantic import BaseModel, Field


class OCRRequest(BaseModel):
    """OCR relay request"""
    imageBase64: Optional[str] = Field(
        None,
        description="Base64 encoded image, optionally prefixed with data:<mime>;base64,"
    )

    class Config:
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "imageBase64": "data:image/png;base64,<base64_encoded_content>"
            }
        }


class OCRResponse(BaseModel):
    """Text extracted from the image, LINE blocks joined by single spaces"""
    text: str


class ImageGenerationRequest(BaseModel):
    """Image-generation relay request"""
    prompt: Optional[str] = Field(None, description="Text description of the image to generate")

    class Config:
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "prompt": "A watercolor painting of a lighthouse at dawn"
            }
        }


class ImageGenerationResponse(BaseModel):
    """URL of the generated image"""
    imageURL: str


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint"""
    error: str
    error_code: Optional[str] = None


class TextBlock(BaseModel):
    """A single block from the text-detection provider"""
    block_type: str
    text: Optional[str] = None
    confidence: Optional[float] = None

    @classmethod
    def from_textract(cls, block: dict) -> "TextBlock":
        return cls(
            block_type=block.get("BlockType", ""),
            text=block.get("Text"),
            confidence=block.get("Confidence"),
        )
