"""Colour palette for palette-indexed pixel data."""

from typing import List, Sequence

import numpy as np

from models.pixels import PixelBase
from utils.errors import PaletteIndexError


class Palette:
    """Ordered colour table plus a cache of each entry's raw bytes.
    
    Assigning `pixels` rebuilds the cache immediately, so the cache always
    matches the current colour list. Callers sharing a palette between
    threads must not replace `pixels` while another thread decodes with it.
    """

    def __init__(self, bits_per_pixel: int, pixels: Sequence[PixelBase]):
        if bits_per_pixel <= 0 or bits_per_pixel % 8 != 0:
            raise ValueError(f"Palette depth must be a positive multiple of 8, got {bits_per_pixel}")
        self.bits_per_pixel = bits_per_pixel
        self.pixels = pixels

    @property
    def pixels(self) -> List[PixelBase]:
        return self._pixels

    @pixels.setter
    def pixels(self, value: Sequence[PixelBase]) -> None:
        pixels = list(value)
        entry_size = self.bytes_per_entry
        pixel_data = [pixel.to_bytes() for pixel in pixels]
        for index, entry in enumerate(pixel_data):
            if len(entry) != entry_size:
                raise ValueError(
                    f"Palette entry {index} encodes to {len(entry)} bytes, "
                    f"expected {entry_size} for a {self.bits_per_pixel}-bit palette"
                )
        
        lookup = np.zeros((len(pixel_data), entry_size), dtype=np.uint8)
        for index, entry in enumerate(pixel_data):
            lookup[index] = np.frombuffer(entry, dtype=np.uint8)
        
        self._pixels = pixels
        self._pixel_data = pixel_data
        self._lookup = lookup

    @property
    def pixel_data(self) -> List[bytes]:
        """Cached raw bytes, one entry per colour."""
        return self._pixel_data

    @property
    def lookup_table(self) -> np.ndarray:
        """Cached raw bytes as a (colours, bytes_per_entry) uint8 array."""
        return self._lookup

    @property
    def bytes_per_entry(self) -> int:
        return self.bits_per_pixel // 8

    def __len__(self) -> int:
        return len(self._pixels)

    def byte_for(self, index: int) -> bytes:
        """Raw bytes for palette entry `index`."""
        if not 0 <= index < len(self._pixel_data):
            raise PaletteIndexError(index, len(self._pixel_data))
        return self._pixel_data[index]
