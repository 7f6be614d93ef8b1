"""Single import point for exif-keeper.

The CLI and any embedding application import extract, inject, the
session object and the error types from here.  Internal modules can be
split or renamed without breaking those callers.

Internal modules:

- ``constants``    — signatures, keywords and format tables
- ``errors``       — exception hierarchy
- ``crc``          — PNG CRC-32
- ``png_chunks``   — chunk walking and building
- ``exif_adapter`` — EXIF capability (piexif)
- ``utils``        — image type detection
- ``models``       — Metadata / ProcessedImage values
- ``extractor``    — read metadata from images
- ``injector``     — write metadata into images
- ``cache``        — single-slot metadata cache
- ``cloner``       — high-level extract → inject pipeline
"""

__version__ = "0.1.0"

from cache import MetadataCache
from cloner import MetadataSession, restore_metadata
from constants import (
    JPEG_SOI,
    OUTPUT_PREFIX,
    PNG_SIGNATURE,
    RECOGNIZED_KEYWORDS,
    SUPPORTED_FORMATS,
    TEXT_CHUNK_TYPE,
)
from crc import crc32
from errors import (
    AdapterFailureError,
    FormatMismatchError,
    InvalidFormatError,
    MetadataError,
    NoCachedMetadataError,
    NoMetadataFoundError,
    UnsupportedFormatError,
)
from exif_adapter import ExifAdapter, PiexifAdapter
from extractor import (
    extract,
    extract_file,
    extract_jpeg_metadata,
    extract_png_metadata,
    get_metadata_summary,
    has_ai_metadata,
)
from injector import inject, inject_jpeg_metadata, inject_png_metadata
from models import Metadata, ProcessedImage
from png_chunks import PngChunk, TextEntry, iter_chunks, read_text_chunks
from utils import ImageType, get_image_type, is_supported_format, normalize_image_type

__all__ = [
    # Constants
    "SUPPORTED_FORMATS",
    "RECOGNIZED_KEYWORDS",
    "PNG_SIGNATURE",
    "JPEG_SOI",
    "TEXT_CHUNK_TYPE",
    "OUTPUT_PREFIX",
    # Errors
    "MetadataError",
    "InvalidFormatError",
    "UnsupportedFormatError",
    "FormatMismatchError",
    "NoCachedMetadataError",
    "NoMetadataFoundError",
    "AdapterFailureError",
    # Types
    "ImageType",
    "Metadata",
    "ProcessedImage",
    "PngChunk",
    "TextEntry",
    # Utils
    "is_supported_format",
    "get_image_type",
    "normalize_image_type",
    # PNG
    "crc32",
    "iter_chunks",
    "read_text_chunks",
    # EXIF
    "ExifAdapter",
    "PiexifAdapter",
    # Extractor
    "extract",
    "extract_file",
    "extract_png_metadata",
    "extract_jpeg_metadata",
    "has_ai_metadata",
    "get_metadata_summary",
    # Injector
    "inject",
    "inject_png_metadata",
    "inject_jpeg_metadata",
    # Cache / session
    "MetadataCache",
    "MetadataSession",
    "restore_metadata",
]
