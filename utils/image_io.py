"""Image I/O using OpenCV."""

import logging

import cv2
import numpy as np

from models.enums import PixelFormat, ScanLineOrder
from engines.pixel_converter import PixelConverter, BasicPixelConverter
from engines.pixel_data import PixelData

logger = logging.getLogger(__name__)


def load_image(path: str) -> PixelData:
    """Load an image file as top-down, unpacked BGR24 pixel data."""
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    h, w = img.shape[:2]
    logger.debug("Loaded %s (%dx%d)", path, w, h)
    return PixelData.create(
        np.ascontiguousarray(img).tobytes(),
        width=w,
        height=h,
        bits_per_data_pixel=24,
        format=PixelFormat.RGB_B8G8R8,
        order=ScanLineOrder.TOP_DOWN,
    )


def to_bgra_array(pixel_data: PixelData, converter: PixelConverter = None) -> np.ndarray:
    """Pixel data as an (h, w, 4) BGRA uint8 array."""
    converter = converter or BasicPixelConverter()
    data = pixel_data.get_pixel_data(converter, PixelFormat.RGBA_B8G8R8A8, ScanLineOrder.TOP_DOWN)
    return np.frombuffer(data, dtype=np.uint8).reshape(pixel_data.height, pixel_data.width, 4)


def save_image(pixel_data: PixelData, path: str, converter: PixelConverter = None) -> None:
    """Save pixel data; the file keeps the alpha channel where the format supports it."""
    if not cv2.imwrite(path, to_bgra_array(pixel_data, converter)):
        raise ValueError(f"Could not save image to {path}")
