"""Reading uncompressed Targa (TGA) images into top-row-first pixel data."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Union

_HEADER_FORMAT = "<BBBHHBHHHHBB"
HEADER_SIZE = struct.calcsize(_HEADER_FORMAT)

SUPPORTED_IMAGE_TYPES = frozenset({2, 10})


class TgaError(Exception):
    """Raised when a Targa image cannot be opened or decoded."""


@dataclass(frozen=True)
class TgaHeader:
    """The fixed 18-byte header at the start of every Targa file."""

    id_length: int
    color_map_type: int
    image_type: int
    color_map_index: int
    color_map_length: int
    color_map_size: int
    x_origin: int
    y_origin: int
    width: int
    height: int
    bits_per_pixel: int
    image_descriptor: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "TgaHeader":
        """Parse a header from the first bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise TgaError(
                f"TGA header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(*struct.unpack_from(_HEADER_FORMAT, data))

    @property
    def channels(self) -> int:
        return self.bits_per_pixel // 8


@dataclass(frozen=True)
class TgaImage:
    """Decoded pixel data, stored with the first row at the top of the image."""

    width: int
    height: int
    channels: int
    pixels: bytes

    @property
    def mode(self) -> str:
        return "RGBA" if self.channels == 4 else "RGB"


def flip_rows(pixels: bytes, width: int, height: int, channels: int) -> bytes:
    """Return ``pixels`` with the order of its rows reversed."""
    stride = width * channels
    if len(pixels) != stride * height:
        raise ValueError(
            f"expected {stride * height} bytes of pixels, got {len(pixels)}"
        )
    rows = [pixels[start:start + stride] for start in range(0, len(pixels), stride)]
    return b"".join(reversed(rows))


def decode_targa(data: bytes) -> TgaImage:
    """Decode a Targa image of type 2 or 10 held in ``data``.

    Pixel data is read directly after the header and flipped vertically.
    """
    header = TgaHeader.from_bytes(data)
    if header.image_type not in SUPPORTED_IMAGE_TYPES:
        raise TgaError("Unsupported TGA format")

    channels = header.channels
    size = header.width * header.height * channels
    body = data[HEADER_SIZE:HEADER_SIZE + size]
    if len(body) < size:
        raise TgaError(
            f"TGA pixel data truncated: expected {size} bytes, got {len(body)}"
        )
    pixels = flip_rows(body, header.width, header.height, channels)
    return TgaImage(header.width, header.height, channels, pixels)


def load_targa(path: Union[str, "PathLike[str]"]) -> TgaImage:
    """Read and decode the Targa file at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise TgaError(f"Error opening file: {path}") from exc
    return decode_targa(data)