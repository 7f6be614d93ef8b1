"""Value types passed between extract, the cache and inject."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PNG_VARIANT = "png"
JPG_VARIANT = "jpg"


@dataclass(frozen=True)
class Metadata:
    """
    Metadata extracted from one image.

    ``variant`` is ``"png"`` with ``data`` a tuple of ``TextEntry``, or
    ``"jpg"`` with ``data`` an EXIF directory as produced by the EXIF
    adapter.
    """

    variant: str
    data: Any
    source_name: str | None = None

    @property
    def entries(self) -> tuple:
        """Text entries of a PNG variant; empty for JPEG."""
        return self.data if self.variant == PNG_VARIANT else ()


@dataclass(frozen=True)
class ProcessedImage:
    """Output bytes of an injection plus the suggested download name."""

    data: bytes
    filename: str
