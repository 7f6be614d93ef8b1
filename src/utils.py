"""Low-level utility helpers used across the metadata pipeline.

Only image-type detection lives here so that higher-level modules can
import without circular dependencies.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from constants import PIL_FORMATS, SUPPORTED_FORMATS, TYPE_ALIASES
from errors import UnsupportedFormatError

logger = logging.getLogger(__name__)


class ImageType(str, enum.Enum):
    """Declared type of an image handed to extract/inject."""

    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"

    @property
    def variant(self) -> str:
        """Metadata variant tag produced and accepted for this type."""
        return "jpg" if self is ImageType.JPEG else self.value


def normalize_image_type(declared: ImageType | str) -> ImageType:
    """
    Map a declared type to ``ImageType``.

    Accepts the enum itself, short names (``png``, ``jpg``, ``jpeg``,
    ``webp``) and MIME types (``image/png``...), case-insensitively.

    Raises:
        UnsupportedFormatError: If the name is not recognized.
    """
    if isinstance(declared, ImageType):
        return declared

    name = TYPE_ALIASES.get(str(declared).strip().lower().lstrip("."))
    if name is None:
        raise UnsupportedFormatError(f"Unsupported image type: {declared!r}")
    return ImageType(name)


def is_supported_format(file_path: Path) -> bool:
    """
    Check if the file format is supported.

    Args:
        file_path: Path to the image file.

    Returns:
        True if the format is supported, False otherwise.
    """
    return file_path.suffix.lower() in SUPPORTED_FORMATS


def get_image_type(file_path: Path) -> ImageType:
    """
    Detect the declared type of an image file.

    Pillow identifies the content first; the file suffix is used when
    Pillow cannot open the file or reports a format we do not map.

    Args:
        file_path: Path to the image file.

    Returns:
        The detected ``ImageType``.

    Raises:
        UnsupportedFormatError: If neither content nor suffix is recognized.
    """
    try:
        with Image.open(file_path) as img:
            detected = PIL_FORMATS.get(img.format or "")
    except (UnidentifiedImageError, OSError):
        logger.debug("Pillow could not identify %s, using suffix", file_path)
        detected = None

    if detected is not None:
        return ImageType(detected)
    return normalize_image_type(file_path.suffix)
