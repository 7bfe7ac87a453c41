"""Pixel formats of image data."""

from enum import Enum


class PixelFormat(Enum):
    U8_RGBA = "u8_RGBA"
    U8_RGB = "u8_RGB"
    # grayscale
    U8_R = "u8_R"
    F16_RGB = "f16_RGB"
    F32_RGB = "f32_RGB"