"""Loading texture pixel data from BMP and DDS files."""

from __future__ import annotations

from typing import Union

from meshkit.bmp import BmpError, BmpImage, invert_colors, parse_bmp
from meshkit.dds import DDS_MAGIC, DdsError, DdsImage, decode_dds
from meshkit.fileio import PathLike, load_file_content


class TextureError(ValueError):
    """Raised when a file cannot be decoded as a texture."""


def load_texture_pixels(path: PathLike) -> Union[BmpImage, DdsImage]:
    """Decode a BMP or DDS file into its image, choosing by file signature."""
    content = load_file_content(path)
    try:
        if content[:2] == b"BM":
            return parse_bmp(content)
        if content[:4] == DDS_MAGIC:
            return decode_dds(content)
    except (BmpError, DdsError) as exc:
        raise TextureError(f"decode data failed: {exc}") from exc
    raise TextureError("decode data failed: unrecognised image format")


def load_inverted_pixels(path: PathLike) -> BmpImage:
    """Load a BMP file and return it with every colour channel inverted."""
    content = load_file_content(path)
    try:
        image = parse_bmp(content)
    except BmpError as exc:
        raise TextureError(f"decode data failed: {exc}") from exc
    return BmpImage(image.width, image.height, invert_colors(image.pixels))