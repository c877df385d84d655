"""Pixel engines - pure computation on byte buffers and sample planes."""

from .color_space import ycbcr_to_rgb, rgb_to_ycbcr, expand_5_to_8, split_555
from .pixel_converter import PixelConverter, BasicPixelConverter
from .palette_decoder import decode_palette_data, decode_palette_row
from .sub_image import extract_sub_image, validate_sub_image
from .pixel_data import PixelData
from .resample import nearest_neighbor_resample, bilinear_resample_integer, bilinear_resample_float
from .scaling import resize_pixel_data
from .pipeline import render_output

__all__ = [
    'ycbcr_to_rgb',
    'rgb_to_ycbcr',
    'expand_5_to_8',
    'split_555',
    'PixelConverter',
    'BasicPixelConverter',
    'decode_palette_data',
    'decode_palette_row',
    'extract_sub_image',
    'validate_sub_image',
    'PixelData',
    'nearest_neighbor_resample',
    'bilinear_resample_integer',
    'bilinear_resample_float',
    'resize_pixel_data',
    'render_output',
]
