"""Exception hierarchy for the extract/inject pipeline.

Every error raised on purpose by this package derives from
``MetadataError`` so callers can catch the whole family at once.
Format errors also derive from ``ValueError``; they describe bad input.
"""

from __future__ import annotations


class MetadataError(Exception):
    """Base class for all metadata pipeline errors."""


class InvalidFormatError(MetadataError, ValueError):
    """The bytes are not a PNG/JPEG stream (bad signature or truncated header)."""


class UnsupportedFormatError(MetadataError, ValueError):
    """The declared image type is known but not handled (WebP) or unknown."""


class FormatMismatchError(MetadataError):
    """Cached metadata belongs to a different image type than the target."""

    def __init__(self, cached_variant: str, target_type: str) -> None:
        super().__init__(
            f"Format mismatch: {cached_variant.upper()} metadata cannot be "
            f"injected into a {target_type.upper()} image"
        )
        self.cached_variant = cached_variant
        self.target_type = target_type


class NoCachedMetadataError(MetadataError):
    """Inject was requested before any metadata was extracted."""


class NoMetadataFoundError(MetadataError):
    """The source image carries no recognized AI metadata."""


class AdapterFailureError(MetadataError):
    """The EXIF adapter failed while writing into a JPEG."""
