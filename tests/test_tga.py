import struct

import pytest

from sprite2d.tga import (
    HEADER_SIZE,
    TgaError,
    TgaHeader,
    decode_targa,
    flip_rows,
    load_targa,
)


def make_header(image_type=2, width=2, height=2, bpp=24):
    return struct.pack(
        "<BBBHHBHHHHBB", 0, 0, image_type, 0, 0, 0, 0, 0, width, height, bpp, 0
    )


def test_pixels_start_after_eighteen_byte_header():
    header = make_header(width=1, height=1)
    assert len(header) == HEADER_SIZE == 18
    image = decode_targa(header + bytes([1, 2, 3]))
    assert image.pixels == bytes([1, 2, 3])


def test_header_one_byte_short_is_rejected():
    with pytest.raises(TgaError):
        TgaHeader.from_bytes(make_header()[: HEADER_SIZE - 1])


def test_header_fields_parsed():
    header = TgaHeader.from_bytes(make_header(image_type=10, width=5, height=7, bpp=32))
    assert header.image_type == 10
    assert header.width == 5
    assert header.height == 7
    assert header.bits_per_pixel == 32
    assert header.channels == 4


def test_header_too_short():
    with pytest.raises(TgaError):
        TgaHeader.from_bytes(b"\x00" * 10)


def test_decode_flips_rows():
    top = bytes([1, 2, 3, 4, 5, 6])
    bottom = bytes([7, 8, 9, 10, 11, 12])
    image = decode_targa(make_header() + top + bottom)
    assert image.width == 2
    assert image.height == 2
    assert image.channels == 3
    assert image.mode == "RGB"
    assert image.pixels == bottom + top


def test_decode_rgba_mode():
    pixels = bytes(range(4))
    image = decode_targa(make_header(width=1, height=1, bpp=32) + pixels)
    assert image.mode == "RGBA"
    assert image.pixels == pixels


def test_decode_unsupported_type():
    with pytest.raises(TgaError, match="Unsupported TGA format"):
        decode_targa(make_header(image_type=3) + b"\x00" * 12)


def test_decode_truncated():
    with pytest.raises(TgaError):
        decode_targa(make_header() + b"\x00" * 5)


def test_flip_rows_twice_is_identity():
    pixels = bytes(range(24))
    assert flip_rows(flip_rows(pixels, 2, 4, 3), 2, 4, 3) == pixels


def test_flip_rows_odd_height_keeps_middle():
    pixels = bytes([1, 2, 3])
    assert flip_rows(pixels, 1, 3, 1) == bytes([3, 2, 1])


def test_flip_rows_wrong_length():
    with pytest.raises(ValueError):
        flip_rows(b"\x00" * 5, 2, 2, 1)


def test_load_targa_reads_file(tmp_path):
    path = tmp_path / "image.tga"
    top = bytes([1, 2, 3, 4, 5, 6])
    bottom = bytes([7, 8, 9, 10, 11, 12])
    path.write_bytes(make_header() + top + bottom)
    assert load_targa(path).pixels == bottom + top


def test_load_targa_missing_file(tmp_path):
    with pytest.raises(TgaError, match="Error opening file"):
        load_targa(tmp_path / "missing.tga")