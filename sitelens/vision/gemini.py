"""GeminiVisionClient — Google Gemini multimodal backend."""
import logging

from google.genai import Client, types

from sitelens.constants import GEMINI_MODEL, MSG_PHOTO_REQUEST
from sitelens.image_data import EncodedImage
from sitelens.vision.client import VisionClient

logger = logging.getLogger(__name__)


class GeminiVisionClient(VisionClient):

    def __init__(self, api_key: str | None, model: str = GEMINI_MODEL) -> None:
        self._api_key = api_key
        self._model = model

    async def analyze(self, image: EncodedImage, prompt: str) -> str:
        image_part = types.Part.from_bytes(data=image.to_bytes(), mime_type=image.media_type)
        logger.debug(MSG_PHOTO_REQUEST, image.media_type, len(image.payload))
        # One SDK client per call, closed on exit.
        async with Client(api_key=self._api_key).aio as client:
            response = await client.models.generate_content(
                model=self._model,
                contents=[image_part, prompt],
            )
        return response.text or ""
