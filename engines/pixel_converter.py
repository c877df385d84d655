"""Pixel format conversion, vertical flip and packing adjustment."""

import logging
from abc import ABC, abstractmethod

import numpy as np

from models.enums import PixelFormat, ScanLineOrder
from models.image_metadata import ImageMetadata
from engines.color_space import ycbcr_to_rgb, split_555
from utils.constants import OPAQUE_ALPHA, RGBA_BITS_PER_PIXEL
from utils.errors import UnsupportedConversionError
from utils.packing import packed_row_byte_width, packed_row_count, unpacked_row_byte_width

logger = logging.getLogger(__name__)


def buffer_rows(data: bytes, row_width: int, row_count: int) -> np.ndarray:
    """View `data` as (row_count, row_width) bytes; trailing bytes are ignored."""
    needed = row_width * row_count
    raw = np.frombuffer(data, dtype=np.uint8)
    if raw.size < needed:
        raise ValueError(
            f"Buffer holds {raw.size} bytes, expected {needed} "
            f"({row_count} rows of {row_width} bytes)"
        )
    return raw[:needed].reshape(row_count, row_width)


class PixelConverter(ABC):
    """Strategy for the byte-level transforms of the pixel pipeline."""

    @abstractmethod
    def convert_data(
        self,
        data: bytes,
        source_format: PixelFormat,
        destination_format: PixelFormat,
        horizontal_packing: int,
        vertical_packing: int,
        source_width: int,
        source_height: int,
        decoded_bit_depth: int,
    ) -> bytes:
        """Convert `data` between formats; packing applies to input and output rows."""

    @abstractmethod
    def flip_vertical(self, data: bytes, metadata: ImageMetadata) -> bytes:
        """Reverse the row order using the packing described by `metadata`."""

    @abstractmethod
    def adjust_for_packing(
        self,
        data: bytes,
        metadata: ImageMetadata,
        dest_packing_horizontal: int,
        dest_packing_vertical: int,
    ) -> bytes:
        """Re-lay rows from the packing in `metadata` to the destination packing."""


class BasicPixelConverter(PixelConverter):
    """numpy implementation covering 24-bit RGB, RGB555 and JFIF YCbCr to RGBA32."""

    SOURCE_FORMATS = (
        PixelFormat.RGB_R8G8B8,
        PixelFormat.RGB_B8G8R8,
        PixelFormat.RGB_R5G5B5X1,
        PixelFormat.RGB_B5G5R5X1,
        PixelFormat.YCBCR_JPEG,
    )
    DESTINATION_FORMATS = (
        PixelFormat.RGBA_R8G8B8A8,
        PixelFormat.RGBA_B8G8R8A8,
    )

    def supports(self, source_format: PixelFormat, destination_format: PixelFormat) -> bool:
        return source_format in self.SOURCE_FORMATS and destination_format in self.DESTINATION_FORMATS

    def convert_data(self, data, source_format, destination_format, horizontal_packing,
                     vertical_packing, source_width, source_height, decoded_bit_depth):
        if not self.supports(source_format, destination_format):
            raise UnsupportedConversionError(source_format, destination_format)
        if decoded_bit_depth != source_format.bits_per_pixel:
            raise ValueError(
                f"{source_format.name} data must be {source_format.bits_per_pixel} bits per pixel, "
                f"got {decoded_bit_depth}"
            )
        
        logger.debug(
            "Converting %dx%d %s -> %s (packing %d/%d)",
            source_width, source_height, source_format.name, destination_format.name,
            horizontal_packing, vertical_packing,
        )
        
        row_count = packed_row_count(vertical_packing, source_height)
        src_row_width = packed_row_byte_width(decoded_bit_depth, horizontal_packing, source_width)
        dest_row_width = packed_row_byte_width(RGBA_BITS_PER_PIXEL, horizontal_packing, source_width)
        bytes_per_pixel = decoded_bit_depth // 8
        
        rows = buffer_rows(data, src_row_width, row_count)
        pixels = rows[:, :source_width * bytes_per_pixel].reshape(row_count, source_width, bytes_per_pixel)
        rgb = self._decode_rgb(pixels, source_format)
        
        rgba = np.empty((row_count, source_width, 4), dtype=np.uint8)
        if destination_format == PixelFormat.RGBA_B8G8R8A8:
            rgba[..., :3] = rgb[..., ::-1]
        else:
            rgba[..., :3] = rgb
        rgba[..., 3] = OPAQUE_ALPHA
        
        converted = np.zeros((row_count, dest_row_width), dtype=np.uint8)
        converted[:, :source_width * 4] = rgba.reshape(row_count, source_width * 4)
        return converted.tobytes()

    def _decode_rgb(self, pixels: np.ndarray, source_format: PixelFormat) -> np.ndarray:
        """Decode (rows, width, bytes) source pixels into R, G, B channels."""
        if source_format == PixelFormat.RGB_R8G8B8:
            return pixels
        if source_format == PixelFormat.RGB_B8G8R8:
            return pixels[..., ::-1]
        if source_format == PixelFormat.YCBCR_JPEG:
            return ycbcr_to_rgb(pixels)
        
        # Little-endian 16-bit words, top bit unused
        words = pixels[..., 0].astype(np.uint16) | (pixels[..., 1].astype(np.uint16) << 8)
        channels = split_555(words)
        if source_format == PixelFormat.RGB_B5G5R5X1:
            return channels[..., ::-1]
        return channels

    def flip_vertical(self, data, metadata):
        row_length = metadata.row_data_size
        rows = metadata.row_count
        logger.debug("Flipping %d rows of %d bytes", rows, row_length)
        return buffer_rows(data, row_length, rows)[::-1].tobytes()

    def adjust_for_packing(self, data, metadata, dest_packing_horizontal, dest_packing_vertical):
        bits = metadata.expanded_bits_per_pixel
        width, height = metadata.width, metadata.height
        
        dest_row_size = packed_row_byte_width(bits, dest_packing_horizontal, width)
        dest_row_count = packed_row_count(dest_packing_vertical, height)
        current_row_size = metadata.row_data_size
        current_row_count = metadata.row_count
        byte_width = unpacked_row_byte_width(bits, width)
        
        logger.debug(
            "Re-packing %d rows x %d bytes -> %d rows x %d bytes",
            current_row_count, current_row_size, dest_row_count, dest_row_size,
        )
        
        source = buffer_rows(data, current_row_size, current_row_count)
        packed = np.zeros((dest_row_count, dest_row_size), dtype=np.uint8)
        
        row_copy_count = min(current_row_count, dest_row_count)
        # Bottom-up data keeps its padding rows at the start of the buffer
        if metadata.order == ScanLineOrder.BOTTOM_UP:
            src_start = current_row_count - row_copy_count
            dest_start = dest_row_count - row_copy_count
        else:
            src_start = dest_start = 0
        
        packed[dest_start:dest_start + row_copy_count, :byte_width] = \
            source[src_start:src_start + row_copy_count, :byte_width]
        return packed.tobytes()
