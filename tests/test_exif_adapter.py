"""Tests for exif_adapter module."""

from pathlib import Path

import piexif
import pytest

from exif_adapter import PiexifAdapter, get_default_adapter, is_empty_exif


class TestPiexifAdapterDecode:
    """Tests for PiexifAdapter.decode."""

    def test_decodes_jpeg(self, sample_jpg_with_exif: Path) -> None:
        exif = PiexifAdapter().decode(sample_jpg_with_exif.read_bytes())

        assert exif["0th"][piexif.ImageIFD.Software] == b"NovelAI"

    def test_refuses_path_bytes(self, sample_jpg_with_exif: Path) -> None:
        with pytest.raises(ValueError):
            PiexifAdapter().decode(str(sample_jpg_with_exif).encode())

    def test_refuses_raw_exif_block(self, exif_dict: dict) -> None:
        with pytest.raises(ValueError):
            PiexifAdapter().decode(piexif.dump(exif_dict))


class TestPiexifAdapterEncode:
    """Tests for PiexifAdapter.encode."""

    def test_writes_exif(self, sample_jpg: Path, exif_dict: dict) -> None:
        output = PiexifAdapter().encode(exif_dict, sample_jpg.read_bytes())

        assert output[:2] == b"\xff\xd8"
        assert piexif.load(output)["0th"][piexif.ImageIFD.Software] == b"NovelAI"


class TestIsEmptyExif:
    """Tests for is_empty_exif function."""

    def test_empty_directory(self) -> None:
        empty = {"0th": {}, "Exif": {}, "GPS": {}, "Interop": {}, "1st": {}, "thumbnail": None}

        assert is_empty_exif(empty) is True

    def test_directory_with_tags(self, exif_dict: dict) -> None:
        assert is_empty_exif(exif_dict) is False

    def test_thumbnail_only(self) -> None:
        assert is_empty_exif({"0th": {}, "thumbnail": b"\xff\xd8"}) is False


class TestGetDefaultAdapter:
    """Tests for get_default_adapter function."""

    def test_is_shared(self) -> None:
        assert get_default_adapter() is get_default_adapter()
        assert isinstance(get_default_adapter(), PiexifAdapter)
