"""CRC-32 as defined by the PNG specification (ISO 3309 / ITU-T V.42).

Table-driven implementation over the reflected polynomial ``0xEDB88320``.
Results are identical to ``zlib.crc32``.
"""

from __future__ import annotations

_POLYNOMIAL = 0xEDB88320


def _make_table() -> list[int]:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            if c & 1:
                c = _POLYNOMIAL ^ (c >> 1)
            else:
                c >>= 1
        table.append(c)
    return table


CRC_TABLE: list[int] = _make_table()


def crc32(data: bytes) -> int:
    """
    Compute the CRC-32 of a byte sequence.

    Args:
        data: Bytes to checksum.

    Returns:
        Unsigned 32-bit checksum.
    """
    c = 0xFFFFFFFF
    for byte in data:
        c = CRC_TABLE[(c ^ byte) & 0xFF] ^ (c >> 8)
    return c ^ 0xFFFFFFFF


def chunk_crc(chunk_type: bytes, data: bytes) -> int:
    """Return the CRC stored after a PNG chunk: computed over type + data."""
    return crc32(chunk_type + data)
