"""Loading 8-bit images and floating point HDR images from files."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Union

from PIL import Image as PILImage

from .pixelformat import PixelFormat

StrPath = Union[str, "PathLike[str]"]


class ColorSpace(Enum):
    SRGB = "sRGB"
    LINEAR = "Linear"


@dataclass
class Image:
    """Pixel data with its size, format and color space.

    HDR images hold little-endian 32-bit floats, three per pixel.
    """

    width: int
    height: int
    format: PixelFormat
    color_space: ColorSpace
    pixels: bytes


class ImageLoadError(Exception):
    """An image file could not be read or has an unsupported layout."""


_LDR_FORMATS = {
    "L": PixelFormat.U8_R,
    "RGB": PixelFormat.U8_RGB,
    "RGBA": PixelFormat.U8_RGBA,
}
_MAX_DIMENSION = 1 << 24
_LDR_GAMMA = 2.2


def _read_ldr(path: StrPath) -> tuple[str, int, int, bytes]:
    try:
        with PILImage.open(path) as img:
            img.load()
            mode = img.mode
            if mode == "1":
                img = img.convert("L")
            elif mode == "P":
                img = img.convert("RGBA" if "transparency" in img.info else "RGB")
            elif mode in ("LA", "PA"):
                raise ImageLoadError(f"unsupported number of components in {path}")
            elif mode not in _LDR_FORMATS:
                raise ImageLoadError(f"unsupported image mode {mode} in {path}")
            return img.mode, img.width, img.height, img.tobytes()
    except OSError as exc:
        raise ImageLoadError(f"Texture failed to load at path: {path}") from exc


def load_image(path: StrPath) -> Image:
    """Load an 8-bit grayscale, RGB or RGBA image as sRGB."""
    mode, width, height, data = _read_ldr(path)
    return Image(width, height, _LDR_FORMATS[mode], ColorSpace.SRGB, data)


class _Reader:
    def __init__(self, data: bytes, pos: int = 0) -> None:
        self.data = data
        self.pos = pos

    def take(self, n: int) -> bytes:
        end = self.pos + n
        if end > len(self.data):
            raise ImageLoadError("unexpected end of file")
        chunk = self.data[self.pos : end]
        self.pos = end
        return chunk

    def byte(self) -> int:
        return self.take(1)[0]

    def line(self) -> bytes:
        end = self.data.find(b"\n", self.pos)
        if end < 0:
            raise ImageLoadError("unexpected end of file")
        text = self.data[self.pos : end]
        self.pos = end + 1
        return text


def _rgbe(r: int, g: int, b: int, e: int) -> tuple[float, float, float]:
    if e == 0:
        return 0.0, 0.0, 0.0
    f = math.ldexp(1.0, e - (128 + 8))
    return r * f, g * f, b * f


def _decode_radiance(raw: bytes) -> tuple[int, int, list[float]]:
    reader = _Reader(raw)
    reader.line()  # magic
    valid = False
    while True:
        text = reader.line()
        if not text:
            break
        if text == b"FORMAT=32-bit_rle_rgbe":
            valid = True
    if not valid:
        raise ImageLoadError("unsupported format")

    match = re.match(rb"-Y +(\d+) +\+X +(\d+)", reader.line())
    if not match:
        raise ImageLoadError("unsupported data layout")
    height, width = int(match.group(1)), int(match.group(2))
    if not (0 < width <= _MAX_DIMENSION and 0 < height <= _MAX_DIMENSION):
        raise ImageLoadError("very large image")

    out = [0.0] * (width * height * 3)

    def put(index: int, rgbe: tuple[int, int, int, int]) -> None:
        out[index * 3 : index * 3 + 3] = _rgbe(*rgbe)

    def decode_flat() -> None:
        for index in range(width * height):
            put(index, tuple(reader.take(4)))

    if width < 8 or width >= 32768:
        decode_flat()
        return width, height, out

    for row in range(height):
        c1, c2, n = reader.take(3)
        if c1 != 2 or c2 != 2 or n & 0x80:
            # not run-length encoded: the whole image is stored flat
            reader.pos -= 3
            decode_flat()
            break
        if (n << 8) | reader.byte() != width:
            raise ImageLoadError("invalid decoded scanline length")
        channels = [bytearray(width) for _ in range(4)]
        for channel in channels:
            i = 0
            while i < width:
                count = reader.byte()
                if count > 128:
                    value = reader.byte()
                    count -= 128
                    if count > width - i:
                        raise ImageLoadError("corrupt")
                    channel[i : i + count] = bytes((value,)) * count
                else:
                    if count == 0 or count > width - i:
                        raise ImageLoadError("corrupt")
                    channel[i : i + count] = reader.take(count)
                i += count
        for column, rgbe in enumerate(zip(*channels)):
            put(row * width + column, rgbe)
    return width, height, out


def _ldr_to_linear(path: StrPath) -> tuple[int, int, list[float]]:
    mode, width, height, data = _read_ldr(path)
    if mode != "RGB":
        raise ImageLoadError(f"expected 3 components in {path}")
    return width, height, [(b / 255.0) ** _LDR_GAMMA for b in data]


def load_hdr(path: StrPath) -> Image:
    """Load an RGB image as linear floats with its rows flipped bottom-up.

    Radiance RGBE files are decoded directly; 8-bit RGB images are
    converted to linear with a 2.2 gamma.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise ImageLoadError(f"Texture failed to load at path: {path}") from exc

    if raw.startswith((b"#?RADIANCE\n", b"#?RGBE\n")):
        width, height, values = _decode_radiance(raw)
    else:
        width, height, values = _ldr_to_linear(path)

    row = width * 3
    flipped = [
        value
        for start in range(row * (height - 1), -1, -row)
        for value in values[start : start + row]
    ]
    pixels = struct.pack(f"<{len(flipped)}f", *flipped)
    return Image(width, height, PixelFormat.F16_RGB, ColorSpace.LINEAR, pixels)