import struct

import pytest

from meshkit.dds import DdsError, decode_dds


def make_dds(width, height, four_cc, payload):
    header = bytearray(128)
    header[0:4] = b"DDS "
    struct.pack_into("<I", header, 12, height)
    struct.pack_into("<I", header, 16, width)
    struct.pack_into("<I", header, 20, len(payload))
    header[84:88] = four_cc
    return bytes(header) + payload


def test_decode_fields():
    payload = bytes(range(16))
    image = decode_dds(make_dds(8, 4, b"DXT1", payload))
    assert image.width == 8
    assert image.height == 4
    assert image.data == payload


def test_dxt1_detected():
    image = decode_dds(make_dds(4, 4, b"DXT1", bytes(8)))
    assert image.is_dxt1() is True
    assert image.four_cc == 0x31545844


def test_other_format_not_dxt1():
    image = decode_dds(make_dds(4, 4, b"DXT5", bytes(16)))
    assert image.is_dxt1() is False


def test_trailing_bytes_ignored():
    payload = bytes([7] * 8)
    image = decode_dds(make_dds(4, 4, b"DXT1", payload) + b"extra")
    assert image.data == payload


def test_bad_magic_raises():
    data = b"XXXX" + make_dds(4, 4, b"DXT1", bytes(8))[4:]
    with pytest.raises(DdsError):
        decode_dds(data)


def test_short_header_raises():
    with pytest.raises(DdsError):
        decode_dds(b"DDS " + bytes(20))


def test_truncated_payload_raises():
    data = make_dds(4, 4, b"DXT1", bytes(8))
    with pytest.raises(DdsError):
        decode_dds(data[:-3])