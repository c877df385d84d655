"""Data models for pixel layout, palettes and output requests."""

from .enums import PixelFormat, ScanLineOrder, RGBA_FORMATS
from .pixels import PixelBase, RgbTriplet, RgbQuad
from .palette import Palette
from .image_metadata import ImageMetadata
from .output_params import OutputParams
from .output_result import OutputResult

__all__ = [
    'PixelFormat',
    'ScanLineOrder',
    'RGBA_FORMATS',
    'PixelBase',
    'RgbTriplet',
    'RgbQuad',
    'Palette',
    'ImageMetadata',
    'OutputParams',
    'OutputResult',
]
