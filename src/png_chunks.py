"""Low-level PNG chunk reading and writing on in-memory buffers.

A PNG stream is the 8-byte signature followed by chunks laid out as
``length(4, big-endian) | type(4) | data(length) | crc(4)``.  This module
walks that layout, decodes ``tEXt`` chunks and builds new ones.  It has
no third-party dependencies; the checksum comes from ``crc``.

Chunk CRCs are not verified while reading.  Chunks built here always
carry a freshly computed CRC.
"""

from __future__ import annotations

import logging
import struct
from typing import Iterator, NamedTuple

from constants import (
    CHUNK_OVERHEAD,
    MAX_KEYWORD_LENGTH,
    PNG_SIGNATURE,
    TEXT_CHUNK_TYPE,
)
from crc import chunk_crc
from errors import InvalidFormatError

logger = logging.getLogger(__name__)


class PngChunk(NamedTuple):
    """One chunk of a PNG stream; ``offset`` points at its length field."""

    offset: int
    length: int
    chunk_type: bytes
    data: bytes
    crc: int

    @property
    def size(self) -> int:
        return CHUNK_OVERHEAD + self.length


class TextEntry(NamedTuple):
    """A keyword/text pair stored in a ``tEXt`` chunk."""

    keyword: str
    text: str


def check_png_signature(data: bytes) -> None:
    """
    Verify that *data* starts with the PNG signature.

    Raises:
        InvalidFormatError: If the first 8 bytes do not match.
    """
    if bytes(data[:8]) != PNG_SIGNATURE:
        raise InvalidFormatError("Not a valid PNG file (signature mismatch)")


def iter_chunks(data: bytes) -> Iterator[PngChunk]:
    """
    Yield every chunk of a PNG buffer in file order.

    Walking stops at the end of the buffer.  A chunk whose header or body
    runs past the end is treated as a truncated tail and ends the walk.

    Args:
        data: Full PNG file contents.

    Raises:
        InvalidFormatError: If the signature is wrong.
    """
    check_png_signature(data)

    offset = len(PNG_SIGNATURE)
    end = len(data)
    while offset < end:
        if offset + 8 > end:
            logger.debug("Truncated chunk header at offset %d", offset)
            break

        length, chunk_type = struct.unpack(">I4s", data[offset : offset + 8])
        data_start = offset + 8
        data_end = data_start + length
        if data_end + 4 > end:
            logger.debug(
                "Chunk %r at offset %d runs past end of file", chunk_type, offset
            )
            break

        (crc,) = struct.unpack(">I", data[data_end : data_end + 4])
        yield PngChunk(offset, length, chunk_type, bytes(data[data_start:data_end]), crc)

        offset += CHUNK_OVERHEAD + length


def parse_text_chunk(chunk_data: bytes) -> TextEntry | None:
    """
    Split ``tEXt`` chunk data into keyword and text.

    The keyword is Latin-1 per the PNG specification.  The text is decoded
    as UTF-8 since that is what AI tools actually write.

    Returns:
        The entry, or None if the data has no NUL separator.
    """
    null_index = chunk_data.find(b"\x00")
    if null_index < 0:
        return None

    keyword = chunk_data[:null_index].decode("latin-1")
    text = chunk_data[null_index + 1 :].decode("utf-8", errors="replace")
    return TextEntry(keyword, text)


def read_text_chunks(data: bytes) -> list[TextEntry]:
    """Return every well-formed ``tEXt`` entry of a PNG buffer, in file order."""
    entries = []
    for chunk in iter_chunks(data):
        if chunk.chunk_type != TEXT_CHUNK_TYPE:
            continue
        entry = parse_text_chunk(chunk.data)
        if entry is None:
            logger.debug("Skipping tEXt chunk without separator at offset %d", chunk.offset)
            continue
        entries.append(entry)
    return entries


def header_end_offset(data: bytes) -> int:
    """
    Return the offset just past the first chunk (the ``IHDR`` header).

    The header chunk type itself is not re-validated.

    Raises:
        InvalidFormatError: If the signature is wrong or the buffer is
            shorter than the header chunk it declares.
    """
    check_png_signature(data)

    start = len(PNG_SIGNATURE)
    if len(data) < start + 8:
        raise InvalidFormatError("PNG file is truncated before the header chunk")

    (header_length,) = struct.unpack(">I", data[start : start + 4])
    header_end = start + CHUNK_OVERHEAD + header_length
    if header_end > len(data):
        raise InvalidFormatError("PNG header chunk runs past end of file")
    return header_end


def build_chunk(chunk_type: bytes, data: bytes) -> bytes:
    """Serialize a chunk: length, type, data and CRC over type + data."""
    return (
        struct.pack(">I", len(data))
        + chunk_type
        + data
        + struct.pack(">I", chunk_crc(chunk_type, data))
    )


def build_text_chunk(keyword: str, text: str) -> bytes:
    """
    Serialize a ``tEXt`` chunk holding ``keyword\\x00text``.

    Args:
        keyword: 1-79 character Latin-1 keyword without NUL.
        text: Text payload, stored UTF-8 encoded and uncompressed.

    Raises:
        ValueError: If the keyword breaks the PNG keyword rules.
    """
    if "\x00" in keyword:
        raise ValueError("tEXt keyword must not contain NUL")
    keyword_bytes = keyword.encode("latin-1")
    if not 1 <= len(keyword_bytes) <= MAX_KEYWORD_LENGTH:
        raise ValueError(
            f"tEXt keyword must be 1-{MAX_KEYWORD_LENGTH} bytes, got {len(keyword_bytes)}"
        )

    return build_chunk(TEXT_CHUNK_TYPE, keyword_bytes + b"\x00" + text.encode("utf-8"))
