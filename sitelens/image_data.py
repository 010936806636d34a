"""Encoded image input — raw base64 or a data URL (``data:<mime>;base64,<payload>``)."""
import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from sitelens.constants import (
    DATA_URL_PARAM_SEPARATOR,
    DATA_URL_SCHEME_SEPARATOR,
    DATA_URL_SEPARATOR,
    DATA_URL_TEMPLATE,
    DEFAULT_IMAGE_MIME_TYPE,
)


class MalformedImageError(ValueError):
    """Raised when an encoded image cannot be split into media type and payload."""


@dataclass(frozen=True)
class EncodedImage:
    media_type: str
    payload: str

    def to_bytes(self) -> bytes:
        """Decode the base64 payload. Raises binascii.Error on bad input."""
        return base64.b64decode(self.payload)


def _media_type_from_prefix(prefix: str) -> str:
    match prefix.partition(DATA_URL_PARAM_SEPARATOR):
        case (head, sep, _) if sep and DATA_URL_SCHEME_SEPARATOR in head:
            media_type = head.split(DATA_URL_SCHEME_SEPARATOR, 1)[1].strip()
            return media_type or DEFAULT_IMAGE_MIME_TYPE
        case _:
            return DEFAULT_IMAGE_MIME_TYPE


def parse_encoded_image(value: object) -> EncodedImage:
    """Split *value* into an EncodedImage.

    Everything after the first comma is the payload; a ``:...;`` segment in
    the prefix names the media type. Without a comma the whole string is the
    payload and the media type defaults to image/jpeg.
    """
    match value:
        case str() as s if s.strip():
            pass
        case str():
            raise MalformedImageError("encoded image is empty")
        case _:
            raise MalformedImageError(
                f"encoded image must be a string, got {type(value).__name__}"
            )

    match s.partition(DATA_URL_SEPARATOR):
        case (prefix, sep, payload) if sep:
            media_type = _media_type_from_prefix(prefix)
        case _:
            media_type, payload = DEFAULT_IMAGE_MIME_TYPE, s

    if not payload.strip():
        raise MalformedImageError("encoded image has no payload after the prefix")

    return EncodedImage(media_type=media_type, payload=payload)


def encode_image_file(path: str | Path) -> str:
    """Read an image file and return it as a base64 data URL."""
    file_path = Path(path)
    media_type = mimetypes.guess_type(file_path.name)[0] or DEFAULT_IMAGE_MIME_TYPE
    payload = base64.standard_b64encode(file_path.read_bytes()).decode()
    return DATA_URL_TEMPLATE % (media_type, payload)
