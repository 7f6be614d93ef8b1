"""Write metadata into PNG and JPEG images.

Handles format-specific differences:
- PNG: new ``tEXt`` chunks are spliced in right after the ``IHDR`` header,
  the position metadata readers look at first.  Every other byte of the
  file is copied unchanged.
- JPEG: the cached EXIF directory is written through the EXIF adapter.

Existing ``tEXt`` chunks are left in place, so injecting the same keyword
twice produces two chunks with that keyword.
"""

from __future__ import annotations

import logging
from typing import Iterable

from constants import JPEG_SOI
from errors import (
    AdapterFailureError,
    FormatMismatchError,
    InvalidFormatError,
    NoCachedMetadataError,
    UnsupportedFormatError,
)
from exif_adapter import ExifAdapter, ExifDirectory, get_default_adapter
from models import Metadata
from png_chunks import TextEntry, build_text_chunk, header_end_offset
from utils import ImageType, normalize_image_type

logger = logging.getLogger(__name__)


def inject_png_metadata(data: bytes, entries: Iterable[TextEntry]) -> bytes:
    """
    Insert ``tEXt`` chunks right after the PNG header chunk.

    Args:
        data: Full PNG file contents of the target image.
        entries: Keyword/text pairs to embed, in output order.

    Returns:
        A new buffer: header, new chunks, then the rest of the original file.

    Raises:
        InvalidFormatError: If the signature is wrong or the header is truncated.
        ValueError: If a keyword is not a valid PNG keyword.
    """
    header_end = header_end_offset(data)
    new_chunks = b"".join(build_text_chunk(keyword, text) for keyword, text in entries)

    output = bytes(data[:header_end]) + new_chunks + bytes(data[header_end:])
    logger.info("Inserted %d bytes of tEXt chunks after IHDR", len(new_chunks))
    return output


def inject_jpeg_metadata(
    data: bytes,
    exif: ExifDirectory,
    adapter: ExifAdapter | None = None,
) -> bytes:
    """
    Write an EXIF directory into a JPEG buffer.

    Args:
        data: Full JPEG file contents of the target image.
        exif: EXIF directory previously returned by the adapter.
        adapter: EXIF adapter, defaults to the piexif one.

    Raises:
        InvalidFormatError: If the buffer does not start with a JPEG SOI marker.
        AdapterFailureError: If the adapter fails to encode or insert.
    """
    if bytes(data[:2]) != JPEG_SOI:
        raise InvalidFormatError("Not a valid JPEG file (missing SOI marker)")

    adapter = adapter or get_default_adapter()
    try:
        output = adapter.encode(exif, data)
    except Exception as e:
        raise AdapterFailureError(f"Failed to write EXIF data: {e}") from e

    logger.info("Wrote EXIF directory into JPEG (%d bytes)", len(output))
    return output


def inject(
    data: bytes,
    declared_type: ImageType | str,
    cached: Metadata | None,
    adapter: ExifAdapter | None = None,
) -> bytes:
    """
    Inject cached metadata into an image buffer of the declared type.

    The declared type must match the variant of *cached*; this is checked
    before any byte is copied.

    Args:
        data: Full image file contents of the target.
        declared_type: ``png``, ``jpeg`` or ``webp`` (enum, name or MIME type).
        cached: Metadata from a previous extraction.
        adapter: EXIF adapter for the JPEG path.

    Returns:
        The new image bytes.

    Raises:
        UnsupportedFormatError: If the type is WebP or unknown.
        NoCachedMetadataError: If *cached* is None.
        FormatMismatchError: If *cached* belongs to the other image type.
        InvalidFormatError: If the target bytes are not of the declared type.
        AdapterFailureError: If EXIF writing fails.
    """
    image_type = normalize_image_type(declared_type)
    if image_type is ImageType.WEBP:
        raise UnsupportedFormatError("WEBP images are not supported")

    if cached is None:
        raise NoCachedMetadataError("No metadata cached; extract from a source image first")
    if cached.variant != image_type.variant:
        raise FormatMismatchError(cached.variant, image_type.variant)

    if image_type is ImageType.PNG:
        return inject_png_metadata(data, cached.entries)
    return inject_jpeg_metadata(data, cached.data, adapter)
