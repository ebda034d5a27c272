"""Image payloads stored inline as base64 data URIs.

Uploaded files are converted to ``data:<content-type>;base64,<payload>``
strings before they reach the persistence layer.
"""

import base64
import binascii
import mimetypes
import re
from dataclasses import dataclass
from pathlib import PurePath

ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif"})
ALLOWED_IMAGE_CONTENT_TYPES = frozenset({"image/jpeg", "image/png", "image/gif"})
MAX_PHOTO_BYTES = 5 * 1024 * 1024
MAX_IMAGE_BYTES = 1 * 1024 * 1024

_DATA_URI_PATTERN = re.compile(r"^data:(?P<content_type>image/[\w.+-]+);base64,(?P<payload>.+)$", re.DOTALL)


def build_data_uri(content_type: str, content: bytes) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


@dataclass(frozen=True, slots=True)
class DecodedImage:
    """Content type and raw bytes of a parsed data URI."""

    content_type: str
    content: bytes


def parse_data_uri(value: str) -> DecodedImage | None:
    """Decode a ``data:image/...;base64,...`` string.

    Returns:
        DecodedImage, or None if the string is not a valid base64 image URI.
    """
    match = _DATA_URI_PATTERN.match(value.strip())
    if match is None:
        return None
    try:
        content = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError):
        return None
    return DecodedImage(content_type=match.group("content_type").lower(), content=content)


@dataclass(frozen=True, slots=True, kw_only=True)
class ImageUpload:
    """File received from a multipart upload.

    Attributes:
        filename: Client-side file name (used for the extension check).
        content_type: Declared MIME type, may be empty.
        content: Raw file bytes.
    """

    filename: str
    content_type: str
    content: bytes

    @property
    def extension(self) -> str:
        return PurePath(self.filename).suffix.lower()

    @property
    def resolved_content_type(self) -> str:
        """Declared MIME type, or one guessed from the extension."""
        if self.content_type and self.content_type != "application/octet-stream":
            return self.content_type
        guessed, _ = mimetypes.guess_type(self.filename)
        return guessed or "application/octet-stream"

    def is_allowed_image(self) -> bool:
        return (
            bool(self.content)
            and len(self.content) <= MAX_IMAGE_BYTES
            and self.extension in ALLOWED_IMAGE_EXTENSIONS
        )

    def to_data_uri(self) -> str:
        return build_data_uri(self.resolved_content_type, self.content)
