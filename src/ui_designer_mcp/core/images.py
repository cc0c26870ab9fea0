"""Resolve image references passed to the design tools.

A reference can be an http(s) URL, a ``data:image/...;base64,`` URI, a path
to an image file, or raw base64. Every form resolves to bytes plus a MIME
type that can be sent to Gemini as an inline part.
"""

import base64
import binascii
import logging
import mimetypes
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

import httpx

from ui_designer_mcp.core.errors import ImageInputError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"
DOWNLOAD_TIMEOUT = 30.0

IMAGE_EXTENSIONS = (
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".webp",
    ".bmp",
    ".svg",
    ".tiff",
    ".ico",
)

_DATA_URI_RE = re.compile(r"^data:(image/[\w.+-]+);base64,(.+)$", re.DOTALL)
# Raw base64 may contain "/", so it is told apart from a path by alphabet
_BASE64_RE = re.compile(r"^[A-Za-z0-9+/\s]+={0,2}$")


@dataclass(frozen=True)
class ImageInput:
    """Decoded image ready to be sent inline.

    Attributes:
        data: Raw image bytes
        mime_type: MIME type sent alongside the bytes
        source: Which form the reference had (url, data_uri, file, base64)
    """

    data: bytes
    mime_type: str
    source: str


async def resolve_image(
    reference: str,
    *,
    base_dir: Optional[Union[str, Path]] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> ImageInput:
    """Turn an image reference into bytes and a MIME type.

    Args:
        reference: URL, data URI, file path or raw base64
        base_dir: Directory relative file paths are resolved against
        http_client: Client used for URL downloads (a temporary one otherwise)

    Raises:
        ImageInputError: If the reference cannot be read or decoded.
    """
    value = (reference or "").strip()
    if not value:
        raise ImageInputError("Image reference is empty", reference=reference)

    if value.startswith(("http://", "https://")):
        return await _download(value, http_client)
    if value.startswith("data:"):
        return _decode_data_uri(value)
    if _looks_like_path(value) and (
        _is_file(_resolve_path(value, base_dir)) or not _BASE64_RE.match(value)
    ):
        return _read_file(value, base_dir)
    return ImageInput(
        data=_decode_base64(value, reference=_preview(value)),
        mime_type=DEFAULT_MIME_TYPE,
        source="base64",
    )


def guess_image_mime_type(path: str) -> str:
    """Guess an image MIME type from a path; non-images map to image/jpeg."""
    guessed, _ = mimetypes.guess_type(path)
    if guessed and guessed.startswith("image/"):
        return guessed
    return DEFAULT_MIME_TYPE


def _looks_like_path(value: str) -> bool:
    if "/" in value or "\\" in value:
        return True
    return value.lower().endswith(IMAGE_EXTENSIONS)


async def _download(url: str, http_client: Optional[httpx.AsyncClient]) -> ImageInput:
    owns_client = http_client is None
    client = http_client or httpx.AsyncClient(
        timeout=DOWNLOAD_TIMEOUT, follow_redirects=True
    )
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise ImageInputError(
            f"Failed to download image: {url}. Error: {exc}", reference=url
        ) from exc
    finally:
        if owns_client:
            await client.aclose()

    content_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type.startswith("image/"):
        mime_type = content_type
    else:
        mime_type = guess_image_mime_type(urlparse(url).path)
    logger.debug("Downloaded image %s (%d bytes, %s)", url, len(response.content), mime_type)
    return ImageInput(data=response.content, mime_type=mime_type, source="url")


def _decode_data_uri(value: str) -> ImageInput:
    match = _DATA_URI_RE.match(value)
    if match is None:
        raise ImageInputError(
            "Unsupported data URI; expected data:image/<type>;base64,<data>",
            reference=_preview(value),
        )
    mime_type, payload = match.groups()
    return ImageInput(
        data=_decode_base64(payload, reference=_preview(value)),
        mime_type=mime_type.lower(),
        source="data_uri",
    )


def _resolve_path(value: str, base_dir: Optional[Union[str, Path]]) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir) / path
    return path


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        # e.g. ENAMETOOLONG for long base64 payloads
        return False


def _read_file(value: str, base_dir: Optional[Union[str, Path]]) -> ImageInput:
    path = _resolve_path(value, base_dir)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ImageInputError(
            f"Failed to read image file: {value}. Error: {exc}", reference=value
        ) from exc
    return ImageInput(data=data, mime_type=guess_image_mime_type(value), source="file")


def _decode_base64(payload: str, *, reference: str) -> bytes:
    compact = "".join(payload.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ImageInputError(
            "Image data is not a URL, file path, data URI or valid base64",
            reference=reference,
        ) from exc


def _preview(value: str, limit: int = 48) -> str:
    return value if len(value) <= limit else f"{value[:limit]}..."
