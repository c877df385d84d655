"""Image metadata describing the layout of a pixel buffer."""

from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Optional

from models.enums import PixelFormat, ScanLineOrder
from models.palette import Palette
from utils.constants import PALETTE_INDEX_BITS
from utils.packing import packed_row_byte_width, packed_row_count


@dataclass(frozen=True)
class ImageMetadata:
    """Shape, depth and layout of one pixel buffer.
    
    Metadata is immutable: changing format, order or packing means a new
    buffer with new metadata (see `replace`).
    """
    
    width: int
    height: int
    bits_per_data_pixel: int
    format: PixelFormat
    order: ScanLineOrder
    horizontal_packing: int = 0
    vertical_packing: int = 0
    origin_x: int = 0
    origin_y: int = 0
    aspect_ratio: Fraction = Fraction(1)
    palette: Optional[Palette] = None
    
    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Dimensions must be non-negative, got {self.width}x{self.height}")
        if self.horizontal_packing < 0 or self.vertical_packing < 0:
            raise ValueError(
                f"Packing must be non-negative, got ({self.horizontal_packing}, {self.vertical_packing})"
            )
        if self.bits_per_data_pixel <= 0:
            raise ValueError(f"Bits per data pixel must be positive, got {self.bits_per_data_pixel}")
        if self.palette is not None and self.bits_per_data_pixel not in PALETTE_INDEX_BITS:
            raise ValueError(
                f"Palette indices must be 1, 2, 4 or 8 bits wide, got {self.bits_per_data_pixel}"
            )

    @property
    def expanded_bits_per_pixel(self) -> int:
        """Bits per pixel after palette lookup, or as stored without a palette."""
        if self.palette is None:
            return self.bits_per_data_pixel
        return self.palette.bits_per_pixel

    @property
    def row_count(self) -> int:
        return packed_row_count(self.vertical_packing, self.height)

    @property
    def row_data_size(self) -> int:
        """Packed byte width of one row of expanded pixels."""
        return packed_row_byte_width(self.expanded_bits_per_pixel, self.horizontal_packing, self.width)

    @property
    def native_row_data_size(self) -> int:
        """Packed byte width of one row as stored (palette indices if paletted)."""
        return packed_row_byte_width(self.bits_per_data_pixel, self.horizontal_packing, self.width)

    def replace(self, **changes) -> 'ImageMetadata':
        return replace(self, **changes)

    def deep_clone(self) -> 'ImageMetadata':
        """Independent copy; the palette is shared, not copied."""
        return replace(self)
