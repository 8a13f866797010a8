"""Minimal DDS container decoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass

DDS_MAGIC = b"DDS "
FORMAT_DXT1 = 0x31545844
_HEADER_SIZE = 128
_HEIGHT_OFFSET = 12
_WIDTH_OFFSET = 16
_SIZE_OFFSET = 20
_FOURCC_OFFSET = 84


class DdsError(ValueError):
    """Raised when DDS data cannot be decoded."""


@dataclass(frozen=True)
class DdsImage:
    """A DDS surface: its dimensions, compression code and raw block data."""

    width: int
    height: int
    four_cc: int
    data: bytes

    def is_dxt1(self) -> bool:
        """Return True when the surface is DXT1-compressed."""
        return self.four_cc == FORMAT_DXT1


def decode_dds(data: bytes) -> DdsImage:
    """Decode the header of a DDS file and extract its top-level surface data."""
    if data[:4] != DDS_MAGIC:
        raise DdsError("not a DDS file")
    if len(data) < _HEADER_SIZE:
        raise DdsError("data too short for a DDS header")
    height = struct.unpack_from("<I", data, _HEIGHT_OFFSET)[0]
    width = struct.unpack_from("<I", data, _WIDTH_OFFSET)[0]
    size = struct.unpack_from("<I", data, _SIZE_OFFSET)[0]
    four_cc = struct.unpack_from("<I", data, _FOURCC_OFFSET)[0]
    payload = data[_HEADER_SIZE:_HEADER_SIZE + size]
    if len(payload) < size:
        raise DdsError("surface data is truncated")
    return DdsImage(width, height, four_cc, payload)