"""Palette colour entries."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class PixelBase(ABC):
    """A single colour that knows its raw byte encoding."""

    bits_per_pixel: int = 0

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Raw bytes of the pixel as written into a decoded buffer."""


@dataclass(frozen=True)
class RgbTriplet(PixelBase):
    """24-bit RGB colour, encoded in B, G, R order."""
    
    red: int
    green: int
    blue: int

    bits_per_pixel = 24

    def to_bytes(self) -> bytes:
        return bytes((self.blue, self.green, self.red))


@dataclass(frozen=True)
class RgbQuad(PixelBase):
    """32-bit RGBA colour, encoded in B, G, R, A order."""
    
    red: int
    green: int
    blue: int
    alpha: int = 255

    bits_per_pixel = 32

    def to_bytes(self) -> bytes:
        return bytes((self.blue, self.green, self.red, self.alpha))
