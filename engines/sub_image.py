"""Rectangular sub-image extraction from native pixel data."""

import logging
from typing import Tuple

import numpy as np

from models.enums import ScanLineOrder
from models.image_metadata import ImageMetadata
from engines.pixel_converter import buffer_rows
from utils.bit_reader import BitReader, BitWriter
from utils.errors import SubImageBoundsError

logger = logging.getLogger(__name__)


def validate_sub_image(metadata: ImageMetadata, x: int, y: int, width: int, height: int) -> None:
    """Raise SubImageBoundsError naming the first parameter that does not fit."""
    if x >= metadata.width:
        raise SubImageBoundsError(
            'x', f"Origin x ({x}) is not less than the source width ({metadata.width})"
        )
    if x < 0:
        raise SubImageBoundsError('x', f"Origin x ({x}) is less than 0")
    if y >= metadata.height:
        raise SubImageBoundsError(
            'y', f"Origin y ({y}) is not less than the source height ({metadata.height})"
        )
    if y < 0:
        raise SubImageBoundsError('y', f"Origin y ({y}) is less than 0")
    if width < 0:
        raise SubImageBoundsError('width', f"Width ({width}) is less than 0")
    if height < 0:
        raise SubImageBoundsError('height', f"Height ({height}) is less than 0")
    if x + width > metadata.width:
        raise SubImageBoundsError(
            'width',
            f"Width ({width}) from origin x ({x}) exceeds the source width ({metadata.width})",
        )
    if y + height > metadata.height:
        raise SubImageBoundsError(
            'height',
            f"Height ({height}) from origin y ({y}) exceeds the source height ({metadata.height})",
        )


def extract_sub_image(
    data: bytes,
    metadata: ImageMetadata,
    x: int,
    y: int,
    width: int,
    height: int,
) -> Tuple[bytes, ImageMetadata]:
    """Copy a rectangle of native rows; returns the new buffer and its metadata.
    
    The copy keeps the source's format, order, depth and palette. Origin and
    packing of the result are always zero.
    """
    validate_sub_image(metadata, x, y, width, height)
    
    bits = metadata.bits_per_data_pixel
    rows = buffer_rows(data, metadata.native_row_data_size, metadata.row_count)
    
    if metadata.order == ScanLineOrder.BOTTOM_UP:
        start_row = metadata.row_count - (y + height)
    else:
        start_row = y
    selected = rows[start_row:start_row + height]
    
    logger.debug("Extracting %dx%d at (%d, %d) from %dx%d", width, height, x, y, metadata.width, metadata.height)
    
    if bits % 8 == 0:
        start_byte = x * bits // 8
        end_byte = (x + width) * bits // 8
        output = np.ascontiguousarray(selected[:, start_byte:end_byte]).tobytes()
    else:
        start_bit = x * bits
        output = bytearray()
        for row in selected:
            reader = BitReader(row.tobytes(), start_bit // 8, start_bit % 8)
            writer = BitWriter()
            for value in reader.read_many(bits, width):
                writer.write(value, bits)
            output += writer.getvalue()
        output = bytes(output)
    
    sub_metadata = metadata.replace(
        width=width,
        height=height,
        horizontal_packing=0,
        vertical_packing=0,
        origin_x=0,
        origin_y=0,
    )
    return output, sub_metadata
