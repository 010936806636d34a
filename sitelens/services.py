"""Photo analysis and bilingual translation adapters.

``analyze_photo`` / ``translate_text`` report what happened as an Outcome.
``analyze_construction_photo`` / ``translate_project_content`` are the public
string surface: they apply the fallbacks and never raise.
"""
import logging
from typing import Optional

from sitelens.config import Config
from sitelens.constants import (
    MSG_PHOTO_EMPTY,
    MSG_PHOTO_EMPTY_RESPONSE,
    MSG_PHOTO_ERROR,
    MSG_PHOTO_FAILED,
    MSG_PHOTO_MALFORMED,
    MSG_TRANSLATE_EMPTY_RESPONSE,
    MSG_TRANSLATE_ERROR,
    MSG_TRANSLATE_SKIPPED,
    PHOTO_ANALYSIS_PROMPT,
)
from sitelens.image_data import MalformedImageError, parse_encoded_image
from sitelens.outcome import Empty, Failure, Outcome, Success, resolve
from sitelens.translation.client import TranslationClient
from sitelens.translation.gemini import GeminiTranslationClient
from sitelens.vision.client import VisionClient
from sitelens.vision.gemini import GeminiVisionClient

logger = logging.getLogger(__name__)


def _vision_client(config: Optional[Config]) -> VisionClient:
    cfg = config or Config.from_env()
    return GeminiVisionClient(cfg.api_key, cfg.model)


def _translation_client(config: Optional[Config]) -> TranslationClient:
    cfg = config or Config.from_env()
    return GeminiTranslationClient(cfg.api_key, cfg.model)


def _describe(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}"


async def analyze_photo(
    base64_image: object,
    *,
    config: Optional[Config] = None,
    client: Optional[VisionClient] = None,
) -> Outcome:
    try:
        image = parse_encoded_image(base64_image)
    except MalformedImageError as exc:
        logger.warning(MSG_PHOTO_MALFORMED, exc)
        return Failure(reason=_describe(exc))

    try:
        vision = client or _vision_client(config)
        text = await vision.analyze(image, PHOTO_ANALYSIS_PROMPT)
    except Exception as exc:
        logger.exception(MSG_PHOTO_ERROR)
        return Failure(reason=_describe(exc))

    match text:
        case str() as t if t:
            return Success(text=t)
        case _:
            logger.warning(MSG_PHOTO_EMPTY_RESPONSE)
            return Empty()


async def translate_text(
    text: object,
    *,
    config: Optional[Config] = None,
    client: Optional[TranslationClient] = None,
) -> Outcome:
    match text:
        case str() as t if t.strip():
            pass
        case _:
            logger.debug(MSG_TRANSLATE_SKIPPED)
            return Empty()

    try:
        translator = client or _translation_client(config)
        translated = await translator.translate(t)
    except Exception as exc:
        logger.exception(MSG_TRANSLATE_ERROR)
        return Failure(reason=_describe(exc))

    match translated:
        case str() as result if result:
            return Success(text=result)
        case _:
            logger.warning(MSG_TRANSLATE_EMPTY_RESPONSE)
            return Empty()


async def analyze_construction_photo(
    base64_image: str,
    *,
    config: Optional[Config] = None,
    client: Optional[VisionClient] = None,
) -> str:
    outcome = await analyze_photo(base64_image, config=config, client=client)
    return resolve(outcome, empty=MSG_PHOTO_EMPTY, failure=MSG_PHOTO_FAILED)


async def translate_project_content(
    text: str,
    *,
    config: Optional[Config] = None,
    client: Optional[TranslationClient] = None,
) -> str:
    match text:
        case str() as t if t.strip():
            pass
        case _:
            return ""

    outcome = await translate_text(t, config=config, client=client)
    return resolve(outcome, empty=t, failure=t)
