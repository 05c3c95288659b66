"""
Global pytest fixtures and test utilities
Provides sample images, mock provider clients, and a test client
"""

import base64
import os
from unittest.mock import MagicMock, Mock

import pytest

# Settings are read once at import time, so test defaults go in before it
TEST_ENV = {
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test-access-key",
    "AWS_SECRET_ACCESS_KEY": "test-secret-key",
    "OPENAI_API_KEY": "test-openai-key",
    "APP_ENV": "testing",
    "LOG_LEVEL": "ERROR",  # Reduce log noise in tests
}
for key, value in TEST_ENV.items():
    os.environ.setdefault(key, value)

from fastapi.testclient import TestClient

from cloud_relay.api.dependencies import get_image_service, get_ocr_service
from cloud_relay.api.main import app
from cloud_relay.services.image_service import OpenAIImageService
from cloud_relay.services.ocr_service import TextractOCRService

# 1x1 pixel transparent PNG
PNG_DATA = b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01\x01\x00\x05\x00\x00\x00\x00IEND\xaeB`\x82'

GENERATED_IMAGE_URL = "https://images.example.com/generated/cat.png"


@pytest.fixture
def sample_png_image():
    """Create a minimal valid PNG image"""
    return PNG_DATA


@pytest.fixture
def sample_image_base64():
    """Create base64 encoded sample image"""
    return base64.b64encode(PNG_DATA).decode('utf-8')


@pytest.fixture
def sample_data_uri(sample_image_base64):
    """Sample image as a data URI, as browsers produce it"""
    return f"data:image/png;base64,{sample_image_base64}"


@pytest.fixture
def textract_blocks():
    """Textract DetectDocumentText blocks with a PAGE, LINEs and WORDs"""
    return [
        {"BlockType": "PAGE", "Id": "page-1"},
        {"BlockType": "LINE", "Text": "Hello", "Confidence": 99.1, "Id": "line-1"},
        {"BlockType": "WORD", "Text": "x", "Confidence": 98.0, "Id": "word-1"},
        {"BlockType": "LINE", "Text": "World", "Confidence": 97.4, "Id": "line-2"},
    ]


@pytest.fixture
def mock_textract_client(textract_blocks):
    """boto3 textract client double"""
    client = MagicMock()
    client.detect_document_text.return_value = {
        "DocumentMetadata": {"Pages": 1},
        "Blocks": textract_blocks,
    }
    return client


@pytest.fixture
def generated_image_url():
    return GENERATED_IMAGE_URL


@pytest.fixture
def mock_openai_client():
    """openai.OpenAI client double returning one generated image"""
    client = MagicMock()
    client.images.generate.return_value = Mock(data=[Mock(url=GENERATED_IMAGE_URL)])
    return client


@pytest.fixture
def ocr_service(mock_textract_client):
    return TextractOCRService(client=mock_textract_client)


@pytest.fixture
def image_service(mock_openai_client):
    return OpenAIImageService(client=mock_openai_client)


@pytest.fixture
def client(ocr_service, image_service):
    """Test client with provider services replaced by doubles"""
    app.dependency_overrides[get_ocr_service] = lambda: ocr_service
    app.dependency_overrides[get_image_service] = lambda: image_service
    yield TestClient(app)
    app.dependency_overrides.clear()

