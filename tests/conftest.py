"""Test configuration and fixtures."""

from __future__ import annotations

import struct
import tempfile
import zlib
from pathlib import Path
from typing import Generator

import piexif
import pytest
from PIL import Image

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def make_chunk(chunk_type: bytes, data: bytes) -> bytes:
    """Build a PNG chunk using zlib's CRC as an independent reference."""
    crc = zlib.crc32(chunk_type + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + chunk_type + data + struct.pack(">I", crc)


def make_png(*extra_chunks: bytes) -> bytes:
    """Build a 1x1 grayscale PNG; *extra_chunks* go between IHDR and IDAT."""
    ihdr = make_chunk(b"IHDR", struct.pack(">IIBBBBB", 1, 1, 8, 0, 0, 0, 0))
    idat = make_chunk(b"IDAT", zlib.compress(b"\x00\x00"))
    iend = make_chunk(b"IEND", b"")
    return PNG_SIGNATURE + ihdr + b"".join(extra_chunks) + idat + iend


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def minimal_png() -> bytes:
    """Signature + IHDR + IDAT + IEND, no text chunks."""
    return make_png()


@pytest.fixture
def sample_png(temp_dir: Path) -> Path:
    """Create a sample PNG image for testing."""
    img_path = temp_dir / "sample.png"
    img = Image.new("RGB", (100, 100), color="red")
    img.save(img_path, "PNG")
    return img_path


@pytest.fixture
def sample_jpg(temp_dir: Path) -> Path:
    """Create a sample JPG image for testing."""
    img_path = temp_dir / "sample.jpg"
    img = Image.new("RGB", (100, 100), color="blue")
    img.save(img_path, "JPEG")
    return img_path


@pytest.fixture
def sample_png_with_ai_metadata(temp_dir: Path) -> Path:
    """Create a PNG image with AI metadata (Stable Diffusion style)."""
    from PIL.PngImagePlugin import PngInfo

    img_path = temp_dir / "ai_sample.png"
    img = Image.new("RGB", (64, 64), color="green")

    metadata = PngInfo()
    metadata.add_text(
        "parameters",
        "A beautiful landscape, Steps: 30, Sampler: Euler a, CFG scale: 7.5, Seed: 12345, Size: 512x512",
    )
    metadata.add_text("Software", "Stable Diffusion WebUI")

    img.save(img_path, "PNG", pnginfo=metadata)
    return img_path


@pytest.fixture
def sample_png_with_standard_metadata(temp_dir: Path) -> Path:
    """Create a PNG image with standard metadata only."""
    from PIL.PngImagePlugin import PngInfo

    img_path = temp_dir / "standard_sample.png"
    img = Image.new("RGB", (100, 100), color="yellow")

    metadata = PngInfo()
    metadata.add_text("Author", "Test Author")
    metadata.add_text("Title", "Test Image")

    img.save(img_path, "PNG", pnginfo=metadata)
    return img_path


@pytest.fixture
def exif_dict() -> dict:
    """EXIF directory in piexif's layout."""
    return {
        "0th": {piexif.ImageIFD.Software: b"NovelAI"},
        "Exif": {piexif.ExifIFD.UserComment: b"ASCII\x00\x00\x00masterpiece, 1girl"},
        "GPS": {},
        "Interop": {},
        "1st": {},
        "thumbnail": None,
    }


@pytest.fixture
def sample_jpg_with_exif(temp_dir: Path, exif_dict: dict) -> Path:
    """Create a JPG image carrying EXIF data."""
    img_path = temp_dir / "exif_sample.jpg"
    img = Image.new("RGB", (64, 64), color="purple")
    img.save(img_path, "JPEG", exif=piexif.dump(exif_dict))
    return img_path


@pytest.fixture
def sample_webp(temp_dir: Path) -> Path:
    """Create a WebP image for rejection tests."""
    img_path = temp_dir / "sample.webp"
    img = Image.new("RGB", (32, 32), color="white")
    img.save(img_path, "WEBP")
    return img_path
