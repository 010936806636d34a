"""GeminiTranslationClient — Google Gemini text backend for interlinear translation."""
import logging

from google.genai import Client, types

from sitelens.constants import (
    GEMINI_MODEL,
    MSG_TRANSLATE_REQUEST,
    TRANSLATION_PROMPT_TEMPLATE,
    TRANSLATION_SYSTEM_INSTRUCTION,
)
from sitelens.translation.client import TranslationClient

logger = logging.getLogger(__name__)


def build_translation_prompt(text: str) -> str:
    return TRANSLATION_PROMPT_TEMPLATE % text


class GeminiTranslationClient(TranslationClient):

    def __init__(self, api_key: str | None, model: str = GEMINI_MODEL) -> None:
        self._api_key = api_key
        self._model = model

    async def translate(self, text: str) -> str:
        logger.debug(MSG_TRANSLATE_REQUEST, len(text))
        async with Client(api_key=self._api_key).aio as client:
            response = await client.models.generate_content(
                model=self._model,
                contents=build_translation_prompt(text),
                config=types.GenerateContentConfig(
                    system_instruction=TRANSLATION_SYSTEM_INSTRUCTION,
                ),
            )
        return response.text or ""
