"""Reading and writing of uncompressed 24-bit BMP images."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from meshkit.fileio import PathLike, load_file_content

BMP_SIGNATURE = 0x4D42
_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
HEADER_SIZE = _FILE_HEADER.size + _INFO_HEADER.size


class BmpError(ValueError):
    """Raised when BMP data cannot be decoded or encoded."""


@dataclass(frozen=True)
class BmpImage:
    """A decoded image with tightly packed RGB pixels."""

    width: int
    height: int
    pixels: bytes


def _swap_red_blue(pixels: bytes) -> bytes:
    swapped = bytearray(pixels)
    swapped[0::3], swapped[2::3] = swapped[2::3], swapped[0::3]
    return bytes(swapped)


def parse_bmp(data: bytes) -> BmpImage:
    """Decode BMP bytes into an RGB image.

    Pixel rows are read as one contiguous block of width * height * 3 bytes
    starting at the header's pixel offset; no row padding is assumed.
    """
    if len(data) < _FILE_HEADER.size:
        raise BmpError("data too short for a BMP file header")
    signature, _size, _r1, _r2, offset = _FILE_HEADER.unpack_from(data, 0)
    if signature != BMP_SIGNATURE:
        raise BmpError("not a BMP file")
    if len(data) < HEADER_SIZE:
        raise BmpError("data too short for a BMP info header")
    fields = _INFO_HEADER.unpack_from(data, _FILE_HEADER.size)
    width, height = fields[1], fields[2]
    if width < 0 or height < 0:
        raise BmpError(f"unsupported image size {width}x{height}")
    count = width * height * 3
    raw = data[offset:offset + count]
    if len(raw) < count:
        raise BmpError("pixel data is truncated")
    return BmpImage(width, height, _swap_red_blue(raw))


def load_bmp(path: PathLike) -> BmpImage:
    """Read and decode the BMP file at ``path``."""
    return parse_bmp(load_file_content(path))


def encode_bmp(pixels: bytes, width: int, height: int) -> bytes:
    """Encode tightly packed RGB pixels as a 24-bit BMP file."""
    if width < 0 or height < 0:
        raise BmpError(f"unsupported image size {width}x{height}")
    count = width * height * 3
    if len(pixels) != count:
        raise BmpError(f"expected {count} pixel bytes, got {len(pixels)}")
    file_header = _FILE_HEADER.pack(BMP_SIGNATURE, HEADER_SIZE + count, 0, 0, HEADER_SIZE)
    info_header = _INFO_HEADER.pack(_INFO_HEADER.size, width, height, 0, 24, 0, 0, 0, 0, 0, 0)
    return file_header + info_header + _swap_red_blue(bytes(pixels))


def save_bmp(path: PathLike, pixels: bytes, width: int, height: int) -> None:
    """Write RGB pixels to ``path`` as a 24-bit BMP file."""
    encoded = encode_bmp(pixels, width, height)
    with open(path, "wb") as handle:
        handle.write(encoded)


def invert_colors(pixels: bytes) -> bytes:
    """Return the colour-inverted copy of the given pixel bytes."""
    return bytes(255 - value for value in pixels)