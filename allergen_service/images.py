"""Data-URL helpers for menu photos."""

import base64
import binascii
import mimetypes
import re
from dataclasses import dataclass
from pathlib import Path

from allergen_service.exceptions import ValidationError

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?:;[\w=.+-]+)*;base64,(?P<data>.*)$", re.DOTALL)


@dataclass(frozen=True)
class InlineImage:
    mime_type: str
    data: str  # base64, no data: prefix


def parse_data_url(data_url: str) -> InlineImage:
    """
    Split a ``data:image/...;base64,...`` URL into mime type and payload.
    Raises ValidationError for anything that is not a decodable base64 image.
    """
    match = _DATA_URL_RE.match(data_url.strip())
    if not match:
        raise ValidationError("Image must be a base64 data URL.")

    mime_type = match.group("mime").lower()
    if not mime_type.startswith("image/"):
        raise ValidationError(f"Unsupported content type: {mime_type}")

    payload = re.sub(r"\s+", "", match.group("data"))
    if not payload:
        raise ValidationError("Image data is empty.")
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("Image data is not valid base64.")

    return InlineImage(mime_type=mime_type, data=payload)


def encode_data_url(path) -> str:
    """Read an image file and return it as a data URL (blocking; run in a thread)."""
    path = Path(path)
    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        mime_type = "application/octet-stream"
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
