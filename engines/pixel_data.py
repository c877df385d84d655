"""Owner of a native pixel buffer and the on-demand formatting pipeline."""

import logging
from fractions import Fraction
from typing import Optional, Tuple, Union

from models.enums import PixelFormat, ScanLineOrder
from models.image_metadata import ImageMetadata
from models.palette import Palette
from engines.palette_decoder import decode_palette_data
from engines.pixel_converter import PixelConverter
from engines.sub_image import extract_sub_image

logger = logging.getLogger(__name__)

BufferLike = Union[bytes, bytearray, memoryview]


class PixelData:
    """Pixel bytes exactly as read from a source, plus the metadata describing them.
    
    The native buffer is never modified; every request produces new bytes.
    Instances do not share mutable state, so separate instances can be
    formatted from separate threads.
    """

    def __init__(self, data: BufferLike, metadata: ImageMetadata):
        self._native_binary_data = None
        self.native_binary_data = data
        self.metadata = metadata

    @classmethod
    def create(
        cls,
        binary: BufferLike,
        *,
        width: int,
        height: int,
        bits_per_data_pixel: int,
        format: PixelFormat,
        order: ScanLineOrder,
        palette: Optional[Palette] = None,
        horizontal_packing: int = 0,
        vertical_packing: int = 0,
        origin_x: int = 0,
        origin_y: int = 0,
        aspect_ratio: Fraction = Fraction(1),
    ) -> 'PixelData':
        metadata = ImageMetadata(
            width=width,
            height=height,
            bits_per_data_pixel=bits_per_data_pixel,
            format=format,
            order=order,
            horizontal_packing=horizontal_packing,
            vertical_packing=vertical_packing,
            origin_x=origin_x,
            origin_y=origin_y,
            aspect_ratio=aspect_ratio,
            palette=palette,
        )
        return cls(binary, metadata)

    @property
    def native_binary_data(self) -> Optional[BufferLike]:
        return self._native_binary_data

    @native_binary_data.setter
    def native_binary_data(self, value: Optional[BufferLike]) -> None:
        if value is self._native_binary_data:
            return
        if isinstance(value, bytearray):
            # Take a private copy so callers cannot mutate the stored pixels
            value = bytes(value)
        self._release()
        self._native_binary_data = value

    @property
    def width(self) -> int:
        return self.metadata.width

    @property
    def height(self) -> int:
        return self.metadata.height

    @property
    def closed(self) -> bool:
        return self._native_binary_data is None

    def _release(self) -> None:
        if isinstance(self._native_binary_data, memoryview):
            self._native_binary_data.release()
        self._native_binary_data = None

    def close(self) -> None:
        """Release the native buffer."""
        self._release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _format(
        self,
        converter: PixelConverter,
        format: PixelFormat,
        order: ScanLineOrder,
        horizontal_packing: int,
        vertical_packing: int,
    ) -> Tuple[bytes, ImageMetadata]:
        if self.closed:
            raise ValueError("Pixel data has been closed")
        
        data = self._native_binary_data
        # Describes `data` as it stands after each stage
        current = self.metadata
        
        if current.palette is not None:
            data = decode_palette_data(data, current)
            current = current.replace(palette=None, bits_per_data_pixel=current.palette.bits_per_pixel)
        
        if current.order != order:
            data = converter.flip_vertical(data, current)
            current = current.replace(order=order)
        
        if current.horizontal_packing != 0 or current.vertical_packing != 0:
            data = converter.adjust_for_packing(data, current, 0, 0)
            current = current.replace(horizontal_packing=0, vertical_packing=0)
        
        if current.format != format:
            # Input is unpacked here; destination packing is applied below
            data = converter.convert_data(
                data, current.format, format, 0, 0,
                current.width, current.height, current.expanded_bits_per_pixel,
            )
            current = current.replace(format=format, bits_per_data_pixel=format.bits_per_pixel)
        
        if horizontal_packing != 0 or vertical_packing != 0:
            data = converter.adjust_for_packing(data, current, horizontal_packing, vertical_packing)
            current = current.replace(horizontal_packing=horizontal_packing, vertical_packing=vertical_packing)
        
        logger.debug(
            "Formatted %dx%d %s/%s -> %s/%s",
            current.width, current.height, self.metadata.format.name, self.metadata.order.name,
            format.name, order.name,
        )
        return bytes(data), current

    def get_pixel_data(
        self,
        converter: PixelConverter,
        format: PixelFormat,
        order: ScanLineOrder,
        horizontal_packing: int = 0,
        vertical_packing: int = 0,
    ) -> bytes:
        """Pixel bytes in the requested format, scan-line order and packing."""
        data, _ = self._format(converter, format, order, horizontal_packing, vertical_packing)
        return data

    def to_format(
        self,
        converter: PixelConverter,
        format: PixelFormat,
        order: ScanLineOrder,
        horizontal_packing: int = 0,
        vertical_packing: int = 0,
    ) -> 'PixelData':
        """Like get_pixel_data, wrapped in a new PixelData with matching metadata."""
        data, metadata = self._format(converter, format, order, horizontal_packing, vertical_packing)
        return PixelData(data, metadata)

    def get_sub_image(self, x: int, y: int, width: int, height: int) -> 'PixelData':
        """Copy a rectangle of the native data into a new PixelData with origin (0, 0)."""
        if self.closed:
            raise ValueError("Pixel data has been closed")
        data, metadata = extract_sub_image(self._native_binary_data, self.metadata, x, y, width, height)
        return PixelData(data, metadata)

    def clone(self) -> 'PixelData':
        """Independent copy of the buffer and metadata; the palette stays shared."""
        if self.closed:
            raise ValueError("Pixel data has been closed")
        return PixelData(bytes(self._native_binary_data), self.metadata.deep_clone())
