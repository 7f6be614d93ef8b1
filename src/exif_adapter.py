"""EXIF read/write capability used by the JPEG path.

The extractor and injector only depend on the ``ExifAdapter`` protocol,
so the PNG code stays testable without ``piexif`` and tests can swap in
a fake.  ``PiexifAdapter`` is the default implementation.
"""

from __future__ import annotations

import io
from typing import Any, Protocol

import piexif

from constants import EXIF_IFD_NAMES, JPEG_SOI

ExifDirectory = dict[str, Any]


class ExifAdapter(Protocol):
    """Decode and encode EXIF directories."""

    def decode(self, data: bytes) -> ExifDirectory:
        """Return the EXIF directory of a JPEG; raise if it cannot be parsed."""
        ...

    def encode(self, exif: ExifDirectory, data: bytes) -> bytes:
        """Return a copy of JPEG *data* carrying *exif*."""
        ...


class PiexifAdapter:
    """``ExifAdapter`` backed by ``piexif`` load/dump/insert."""

    def decode(self, data: bytes) -> ExifDirectory:
        data = bytes(data)
        # piexif.load treats unrecognized bytes as a file name
        if data[:2] != JPEG_SOI:
            raise ValueError("EXIF decode expects JPEG data starting with SOI")
        return piexif.load(data)

    def encode(self, exif: ExifDirectory, data: bytes) -> bytes:
        exif_bytes = piexif.dump(exif)
        output = io.BytesIO()
        piexif.insert(exif_bytes, bytes(data), output)
        return output.getvalue()


def is_empty_exif(exif: ExifDirectory) -> bool:
    """True if no IFD holds a tag and there is no thumbnail."""
    if exif.get("thumbnail"):
        return False
    return not any(exif.get(name) for name in EXIF_IFD_NAMES)


_default_adapter: ExifAdapter | None = None


def get_default_adapter() -> ExifAdapter:
    """Return the shared ``PiexifAdapter`` instance."""
    global _default_adapter
    if _default_adapter is None:
        _default_adapter = PiexifAdapter()
    return _default_adapter
