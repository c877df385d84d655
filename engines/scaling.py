"""Whole-image resize by resampling each channel plane."""

import logging

import numpy as np

from models.enums import PixelFormat, ScanLineOrder, RGBA_FORMATS
from engines.pixel_converter import PixelConverter
from engines.pixel_data import PixelData
from engines.resample import nearest_neighbor_resample, bilinear_resample_integer

logger = logging.getLogger(__name__)

RESAMPLERS = {
    'nearest': nearest_neighbor_resample,
    'bilinear': bilinear_resample_integer,
}


def resize_pixel_data(
    pixel_data: PixelData,
    converter: PixelConverter,
    target_width: int,
    target_height: int,
    method: str = 'bilinear',
    rgba_format: PixelFormat = PixelFormat.RGBA_B8G8R8A8,
) -> PixelData:
    """Resize to `target_width` x `target_height` as top-down, unpacked RGBA32.
    
    RGBA sources keep their byte order; anything else is converted to `rgba_format`.
    """
    if method not in RESAMPLERS:
        raise ValueError(f"Unknown resample method: {method}")
    resampler = RESAMPLERS[method]
    
    source_format = pixel_data.metadata.format
    if source_format in RGBA_FORMATS:
        rgba_format = source_format
    rgba = pixel_data.to_format(converter, rgba_format, ScanLineOrder.TOP_DOWN)
    w, h = rgba.width, rgba.height
    
    logger.debug("Resizing %dx%d -> %dx%d (%s)", w, h, target_width, target_height, method)
    
    pixels = np.frombuffer(rgba.native_binary_data, dtype=np.uint8).reshape(h, w, 4)
    channels = [
        resampler(pixels[..., c].ravel(), h, w, h, w, target_height, target_width)
        for c in range(4)
    ]
    resized = np.clip(np.stack(channels, axis=-1), 0, 255).astype(np.uint8)
    
    metadata = rgba.metadata.replace(width=target_width, height=target_height)
    return PixelData(resized.tobytes(), metadata)
