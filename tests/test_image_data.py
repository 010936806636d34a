"""Encoded image parsing and file encoding."""
import base64

import pytest

from sitelens.image_data import (
    EncodedImage,
    MalformedImageError,
    encode_image_file,
    parse_encoded_image,
)


def test_data_url_yields_media_type_and_payload():
    image = parse_encoded_image("data:image/png;base64,XYZ")

    assert image == EncodedImage(media_type="image/png", payload="XYZ")


@pytest.mark.parametrize("raw", ["XYZ", "/9j/4AAQSkZJRg==", "iVBORw0KGgo"])
def test_raw_base64_uses_default_media_type(raw):
    image = parse_encoded_image(raw)

    assert image.media_type == "image/jpeg"
    assert image.payload == raw


def test_payload_is_everything_after_first_comma():
    image = parse_encoded_image("data:image/webp;base64,AAA,BBB")

    assert image.media_type == "image/webp"
    assert image.payload == "AAA,BBB"


def test_prefix_without_semicolon_uses_default_media_type():
    image = parse_encoded_image("data:image/png,XYZ")

    assert image.media_type == "image/jpeg"
    assert image.payload == "XYZ"


def test_prefix_with_blank_media_type_uses_default():
    assert parse_encoded_image("data:;base64,XYZ").media_type == "image/jpeg"


@pytest.mark.parametrize("value", [None, 42, b"data", ["XYZ"]])
def test_non_string_is_malformed(value):
    with pytest.raises(MalformedImageError, match="must be a string"):
        parse_encoded_image(value)


@pytest.mark.parametrize("value", ["", "   "])
def test_empty_string_is_malformed(value):
    with pytest.raises(MalformedImageError, match="empty"):
        parse_encoded_image(value)


def test_prefix_without_payload_is_malformed():
    with pytest.raises(MalformedImageError, match="no payload"):
        parse_encoded_image("data:image/png;base64,")


def test_malformed_image_error_is_value_error():
    assert issubclass(MalformedImageError, ValueError)


def test_to_bytes_decodes_payload():
    payload = base64.b64encode(b"\x89PNG\r\n").decode()

    assert EncodedImage(media_type="image/png", payload=payload).to_bytes() == b"\x89PNG\r\n"


def test_encode_image_file_builds_data_url(tmp_path):
    path = tmp_path / "site.png"
    path.write_bytes(b"png-bytes")

    data_url = encode_image_file(path)

    image = parse_encoded_image(data_url)
    assert image.media_type == "image/png"
    assert image.to_bytes() == b"png-bytes"


def test_encode_image_file_unknown_extension_defaults_to_jpeg(tmp_path):
    path = tmp_path / "site.unknownext"
    path.write_bytes(b"raw")

    assert encode_image_file(path).startswith("data:image/jpeg;base64,")
