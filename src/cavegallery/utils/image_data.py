"""Decoding and checking of uploaded image payloads."""

import base64
import binascii
import io
import re

from PIL import Image, UnidentifiedImageError

from ..exceptions import ValidationException

# e.g. "data:image/png;base64,"
_DATA_URI_PREFIX = re.compile(r"^data:image/[\w.+-]+;base64,", re.IGNORECASE)


def decode_image_data(image_data: str) -> bytes:
    """
    Decode a base64 image payload.

    Args:
        image_data: Base64 text, optionally prefixed with a data URI header
            such as "data:image/png;base64,".

    Returns:
        The decoded image bytes.

    Raises:
        ValidationException: If the payload is empty or not valid base64.
    """
    encoded = _DATA_URI_PREFIX.sub("", image_data.strip(), count=1)
    # Browsers may wrap long data URIs
    encoded = "".join(encoded.split())
    if not encoded:
        raise ValidationException("Image data is required")

    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationException("Image data is not valid base64") from e

    if not data:
        raise ValidationException("Image data is required")
    return data


def verify_png(data: bytes) -> None:
    """
    Check that the payload is a PNG image.

    Raises:
        ValidationException: If Pillow cannot read it as a PNG.
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            image_format = image.format
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        raise ValidationException("Image data is not a readable image") from e

    if image_format != "PNG":
        raise ValidationException(f"Only PNG images are supported, got {image_format}")
