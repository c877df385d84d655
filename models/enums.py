"""Pixel format and scan-line order enumerations."""

from enum import Enum
from typing import Optional

from utils.constants import (
    RGBA_BITS_PER_PIXEL,
    RGB_BITS_PER_PIXEL,
    RGB555_BITS_PER_PIXEL,
    YUV420_BITS_PER_PIXEL,
)


class PixelFormat(Enum):
    """Layout of one decoded pixel in a byte buffer."""
    
    INVALID = 'invalid'
    RGBA_R8G8B8A8 = 'rgba_r8g8b8a8'
    RGBA_B8G8R8A8 = 'rgba_b8g8r8a8'
    RGB_R8G8B8 = 'rgb_r8g8b8'
    RGB_B8G8R8 = 'rgb_b8g8r8'
    # 16-bit, top bit unused
    RGB_B5G5R5X1 = 'rgb_b5g5r5x1'
    RGB_R5G5B5X1 = 'rgb_r5g5b5x1'
    # JFIF colorimetry, Y, Cb, Cr byte order
    YCBCR_JPEG = 'ycbcr_jpeg'
    # Planar, four Y samples per Cb and Cr sample
    YUV_Y4CB1CR1 = 'yuv_y4cb1cr1'
    RGB_32_PALETTED = 'rgb_32_paletted'

    @property
    def bits_per_pixel(self) -> Optional[int]:
        """Bits per decoded pixel, None where the format does not fix it."""
        return _FORMAT_BITS_PER_PIXEL.get(self)


class ScanLineOrder(Enum):
    """Which end of the buffer holds the top row of the image."""
    
    BOTTOM_UP = 'bottom_up'
    TOP_DOWN = 'top_down'

    def flipped(self) -> 'ScanLineOrder':
        if self is ScanLineOrder.BOTTOM_UP:
            return ScanLineOrder.TOP_DOWN
        return ScanLineOrder.BOTTOM_UP


_FORMAT_BITS_PER_PIXEL = {
    PixelFormat.RGBA_R8G8B8A8: RGBA_BITS_PER_PIXEL,
    PixelFormat.RGBA_B8G8R8A8: RGBA_BITS_PER_PIXEL,
    PixelFormat.RGB_R8G8B8: RGB_BITS_PER_PIXEL,
    PixelFormat.RGB_B8G8R8: RGB_BITS_PER_PIXEL,
    PixelFormat.RGB_B5G5R5X1: RGB555_BITS_PER_PIXEL,
    PixelFormat.RGB_R5G5B5X1: RGB555_BITS_PER_PIXEL,
    PixelFormat.YCBCR_JPEG: RGB_BITS_PER_PIXEL,
    PixelFormat.YUV_Y4CB1CR1: YUV420_BITS_PER_PIXEL,
    PixelFormat.RGB_32_PALETTED: RGBA_BITS_PER_PIXEL,
}

# Formats a resize can produce
RGBA_FORMATS = (PixelFormat.RGBA_B8G8R8A8, PixelFormat.RGBA_R8G8B8A8)
