"""Read-only metadata extraction from PNG and JPEG images.

PNG metadata is read straight from the ``tEXt`` chunks; JPEG metadata is
the EXIF directory returned by the EXIF adapter.  Nothing here modifies
the input buffer.  An image without AI metadata yields ``None``, which is
a normal outcome rather than an error.
"""

from __future__ import annotations

import logging
from pathlib import Path

from constants import JPEG_SOI, RECOGNIZED_KEYWORDS
from errors import InvalidFormatError, UnsupportedFormatError
from exif_adapter import ExifAdapter, get_default_adapter, is_empty_exif
from models import JPG_VARIANT, PNG_VARIANT, Metadata
from png_chunks import TextEntry, read_text_chunks
from utils import ImageType, get_image_type, normalize_image_type

logger = logging.getLogger(__name__)


def extract_png_metadata(data: bytes) -> Metadata | None:
    """
    Extract AI text entries from a PNG buffer.

    Args:
        data: Full PNG file contents.

    Returns:
        PNG-variant metadata holding every ``parameters``, ``prompt`` and
        ``workflow`` entry in file order, or None if there are none.

    Raises:
        InvalidFormatError: If the PNG signature is wrong.
    """
    entries = tuple(
        entry for entry in read_text_chunks(data) if entry.keyword in RECOGNIZED_KEYWORDS
    )
    if not entries:
        return None
    return Metadata(PNG_VARIANT, entries)


def extract_jpeg_metadata(data: bytes, adapter: ExifAdapter | None = None) -> Metadata | None:
    """
    Extract the EXIF directory from a JPEG buffer.

    Unparsable or empty EXIF is reported as None; the decode error is
    logged and not propagated.

    Args:
        data: Full JPEG file contents.
        adapter: EXIF adapter, defaults to the piexif one.

    Returns:
        JPG-variant metadata or None.

    Raises:
        InvalidFormatError: If the buffer does not start with a JPEG SOI marker.
    """
    if bytes(data[:2]) != JPEG_SOI:
        raise InvalidFormatError("Not a valid JPEG file (missing SOI marker)")

    adapter = adapter or get_default_adapter()
    try:
        exif = adapter.decode(data)
    except Exception:
        logger.debug("EXIF decode failed, treating as no metadata", exc_info=True)
        return None

    if not exif or is_empty_exif(exif):
        return None
    return Metadata(JPG_VARIANT, exif)


def extract(
    data: bytes,
    declared_type: ImageType | str,
    adapter: ExifAdapter | None = None,
) -> Metadata | None:
    """
    Extract AI metadata from an image buffer of the declared type.

    Args:
        data: Full image file contents.
        declared_type: ``png``, ``jpeg`` or ``webp`` (enum, name or MIME type).
        adapter: EXIF adapter for the JPEG path.

    Returns:
        The extracted metadata, or None if the image carries none.

    Raises:
        InvalidFormatError: If the buffer does not carry the declared signature.
        UnsupportedFormatError: If the type is WebP or unknown.
    """
    image_type = normalize_image_type(declared_type)

    if image_type is ImageType.PNG:
        return extract_png_metadata(data)
    if image_type is ImageType.JPEG:
        return extract_jpeg_metadata(data, adapter)
    raise UnsupportedFormatError(f"{image_type.value.upper()} images are not supported")


def extract_file(source_path: Path, adapter: ExifAdapter | None = None) -> Metadata | None:
    """
    Extract AI metadata from an image file.

    Args:
        source_path: Path to the source image file.
        adapter: EXIF adapter for the JPEG path.

    Returns:
        Metadata tagged with the file name, or None.
    """
    source_path = Path(source_path)
    image_type = get_image_type(source_path)
    metadata = extract(source_path.read_bytes(), image_type, adapter)
    if metadata is None:
        return None
    return Metadata(metadata.variant, metadata.data, source_path.name)


def has_ai_metadata(image_path: Path) -> bool:
    """
    Check if an image contains recognized AI metadata.

    Args:
        image_path: Path to the image file.

    Returns:
        True if AI metadata is detected, False otherwise.
    """
    return extract_file(image_path) is not None


def get_metadata_summary(metadata: Metadata | None) -> str:
    """
    Get a human-readable summary of extracted metadata.

    Args:
        metadata: Result of an extraction, possibly None.

    Returns:
        Formatted string with one line per entry or IFD.
    """
    if metadata is None:
        return "No AI metadata found."

    lines = ["AI Image Metadata:"]
    lines.append("-" * 40)

    if metadata.source_name:
        lines.append(f"Source: {metadata.source_name}")

    if metadata.variant == PNG_VARIANT:
        for entry in metadata.entries:
            lines.append(_format_entry(entry))
    else:
        lines.append("EXIF Metadata:")
        for name, ifd in metadata.data.items():
            if name == "thumbnail":
                if ifd:
                    lines.append(f"  thumbnail: <binary data ({len(ifd)} bytes)>")
            elif ifd:
                lines.append(f"  {name}: {len(ifd)} tags")

    return "\n".join(lines)


def _format_entry(entry: TextEntry) -> str:
    text = entry.text
    if len(text) > 100:
        text = text[:100] + "..."
    return f"{entry.keyword}: {text}"
