"""Shared constants for PNG/JPEG parsing and AI metadata detection.

All modules reference these constants rather than hard-coding values,
so supporting a new metadata keyword requires updating only this file.
"""

# Supported image formats (file suffixes)
SUPPORTED_FORMATS = {".png", ".jpg", ".jpeg"}

# Keywords under which AI tools store generation data in tEXt chunks
RECOGNIZED_KEYWORDS = [
    "parameters",  # Stable Diffusion WebUI (AUTOMATIC1111, Forge, Reforge)
    "prompt",  # ComfyUI prompt graph
    "workflow",  # ComfyUI workflow JSON
]

# PNG signature
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# Chunk layout: length(4) + type(4) + data + crc(4)
CHUNK_OVERHEAD = 12

TEXT_CHUNK_TYPE = b"tEXt"

# PNG keywords are 1-79 Latin-1 bytes
MAX_KEYWORD_LENGTH = 79

# JPEG start-of-image marker
JPEG_SOI = b"\xff\xd8"

# Name prefix for restored images
OUTPUT_PREFIX = "fixed_"

# Declared type aliases: short names, suffixes and MIME types
TYPE_ALIASES = {
    "png": "png",
    "image/png": "png",
    "jpg": "jpeg",
    "jpeg": "jpeg",
    "image/jpeg": "jpeg",
    "image/jpg": "jpeg",
    "webp": "webp",
    "image/webp": "webp",
}

# Pillow format names
PIL_FORMATS = {
    "PNG": "png",
    "JPEG": "jpeg",
    "MPO": "jpeg",
    "WEBP": "webp",
}

# IFD keys of a piexif EXIF directory
EXIF_IFD_NAMES = ("0th", "Exif", "GPS", "Interop", "1st")
