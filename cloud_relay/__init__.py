"""Cloud relay API: OCR and image generation shims over third-party providers"""

__version__ = "1.0.0"
