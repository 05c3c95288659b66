import logging
from typing import Optional

from openai import OpenAI

from cloud_relay.core.config import settings
from cloud_relay.models.errors import ErrorCode, RelayError
from cloud_relay.utils.logging import ProcessingTimer

logger = logging.getLogger(__name__)

# Fixed for every request; callers can only choose the prompt
GENERATION_PARAMETERS = {
    "model": "dall-e-3",
    "n": 1,
    "size": "1024x1024",
    "quality": "standard",
}


class OpenAIImageService:
    def __init__(self, client: Optional[OpenAI] = None):
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=settings.openai_api_key)
        return self._client

    def generate_image(self, prompt: Optional[str]) -> str:
        """
        Generate a single image for the prompt and return its URL.

        Raises:
            RelayError: INVALID_REQUEST for an absent or blank prompt (the
                provider is not called), IMAGE_GENERATION_FAILED otherwise
        """
        if not prompt or not prompt.strip():
            raise RelayError(ErrorCode.INVALID_REQUEST, "No prompt provided.")

        logger.info(f'Generating image for prompt: "{prompt}"')

        try:
            with ProcessingTimer("openai.images.generate", logger):
                response = self.client.images.generate(prompt=prompt, **GENERATION_PARAMETERS)

            if not response.data or not response.data[0].url:
                raise ValueError("OpenAI returned no image URL")
            image_url = response.data[0].url
        except Exception as e:
            logger.error(f'Error in image generation relay for prompt "{prompt}": {e}', exc_info=True)
            raise RelayError(
                ErrorCode.IMAGE_GENERATION_FAILED,
                details={"error_type": type(e).__name__}
            ) from e

        logger.info(f"Image generated successfully: {image_url}")
        return image_url
