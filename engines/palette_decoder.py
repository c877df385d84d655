"""Expansion of palette-indexed rows into raw palette colours."""

import logging

import numpy as np

from models.enums import ScanLineOrder
from models.image_metadata import ImageMetadata
from utils.bit_reader import BitReader
from utils.errors import PaletteIndexError
from utils.packing import packed_row_byte_width

logger = logging.getLogger(__name__)


def read_row_indices(data: bytes, offset: int, width: int, bits_per_index: int) -> np.ndarray:
    """Read `width` palette indices of `bits_per_index` bits starting at byte `offset`."""
    if bits_per_index == 8:
        row = np.frombuffer(data, dtype=np.uint8, count=width, offset=offset)
        return row.astype(np.intp)
    
    reader = BitReader(data, offset)
    return np.array(reader.read_many(bits_per_index, width), dtype=np.intp)


def decode_palette_row(data: bytes, metadata: ImageMetadata, row: int) -> bytes:
    """Decode one row; the result keeps the source's horizontal packing."""
    palette = metadata.palette
    src_row_size = metadata.native_row_data_size
    dest_row_size = packed_row_byte_width(palette.bits_per_pixel, metadata.horizontal_packing, metadata.width)
    
    indices = read_row_indices(data, row * src_row_size, metadata.width, metadata.bits_per_data_pixel)
    if indices.size and indices.max() >= len(palette):
        bad = int(indices[indices >= len(palette)][0])
        raise PaletteIndexError(bad, len(palette))
    
    decoded = np.zeros(dest_row_size, dtype=np.uint8)
    expanded = palette.lookup_table[indices].ravel()
    decoded[:expanded.size] = expanded
    return decoded.tobytes()


def decode_palette_data(data: bytes, metadata: ImageMetadata) -> bytes:
    """Replace every index with its palette colour, preserving row and height packing."""
    if metadata.palette is None:
        raise ValueError("Cannot decode palette data: metadata has no palette")
    
    logger.debug(
        "Decoding %dx%d image with %d-bit indices into %d-bit colours",
        metadata.width, metadata.height, metadata.bits_per_data_pixel, metadata.palette.bits_per_pixel,
    )
    
    row_size = metadata.row_data_size
    decoded = bytearray(row_size * metadata.row_count)
    # Bottom-up buffers keep their padding rows ahead of the image rows
    first_row = 0
    if metadata.order == ScanLineOrder.BOTTOM_UP:
        first_row = metadata.row_count - metadata.height
    for row in range(first_row, first_row + metadata.height):
        decoded[row * row_size:(row + 1) * row_size] = decode_palette_row(data, metadata, row)
    return bytes(decoded)
