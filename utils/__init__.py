"""Shared utilities."""

from .packing import unpacked_row_byte_width, packed_row_byte_width, packed_row_count
from .bit_reader import BitReader, BitWriter
from .constants import (
    RGBA_BITS_PER_PIXEL,
    RGB_BITS_PER_PIXEL,
    RGB555_BITS_PER_PIXEL,
    OPAQUE_ALPHA,
    PALETTE_INDEX_BITS,
)
from .metrics import compute_psnr, Timer
from .errors import UnsupportedConversionError, PaletteIndexError, SubImageBoundsError

__all__ = [
    'unpacked_row_byte_width',
    'packed_row_byte_width',
    'packed_row_count',
    'BitReader',
    'BitWriter',
    'RGBA_BITS_PER_PIXEL',
    'RGB_BITS_PER_PIXEL',
    'RGB555_BITS_PER_PIXEL',
    'OPAQUE_ALPHA',
    'PALETTE_INDEX_BITS',
    'compute_psnr',
    'Timer',
    'UnsupportedConversionError',
    'PaletteIndexError',
    'SubImageBoundsError',
]
