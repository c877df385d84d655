"""Tests for sub-image extraction."""

import numpy as np
import pytest
from models.enums import PixelFormat, ScanLineOrder
from models.palette import Palette
from models.pixels import RgbTriplet
from engines.pixel_converter import BasicPixelConverter
from utils.errors import SubImageBoundsError
from utils.test_images import indices_to_pixel_data, rgb_to_pixel_data


@pytest.fixture
def source_rgb():
    return np.arange(4 * 4 * 3, dtype=np.uint8).reshape(4, 4, 3)


def test_width_past_source_edge(source_rgb):
    pixel_data = rgb_to_pixel_data(source_rgb)
    with pytest.raises(SubImageBoundsError) as excinfo:
        pixel_data.get_sub_image(2, 0, 3, 2)
    assert excinfo.value.parameter == 'width'


@pytest.mark.parametrize("rect,parameter", [
    ((4, 0, 1, 1), 'x'),
    ((-1, 0, 1, 1), 'x'),
    ((0, 4, 1, 1), 'y'),
    ((0, -1, 1, 1), 'y'),
    ((0, 0, -1, 1), 'width'),
    ((0, 0, 1, -1), 'height'),
    ((3, 3, 2, 1), 'width'),
    ((3, 3, 1, 2), 'height'),
])
def test_each_violation_is_named(source_rgb, rect, parameter):
    pixel_data = rgb_to_pixel_data(source_rgb)
    with pytest.raises(SubImageBoundsError) as excinfo:
        pixel_data.get_sub_image(*rect)
    assert excinfo.value.parameter == parameter


def test_top_down_copy(source_rgb):
    pixel_data = rgb_to_pixel_data(source_rgb)
    sub = pixel_data.get_sub_image(1, 1, 2, 2)
    expected = np.ascontiguousarray(source_rgb[1:3, 1:3, ::-1]).tobytes()
    assert sub.native_binary_data == expected
    assert (sub.width, sub.height) == (2, 2)


@pytest.mark.parametrize("packing", [0, 4])
def test_bottom_up_matches_top_down(source_rgb, packing):
    converter = BasicPixelConverter()
    top_down = rgb_to_pixel_data(source_rgb, horizontal_packing=packing, vertical_packing=packing)
    bottom_up = rgb_to_pixel_data(
        source_rgb, order=ScanLineOrder.BOTTOM_UP,
        horizontal_packing=packing, vertical_packing=packing,
    )
    
    a = top_down.get_sub_image(0, 1, 3, 2)
    b = bottom_up.get_sub_image(0, 1, 3, 2)
    
    assert b.metadata.order == ScanLineOrder.BOTTOM_UP
    assert a.get_pixel_data(converter, PixelFormat.RGB_B8G8R8, ScanLineOrder.TOP_DOWN) == \
        b.get_pixel_data(converter, PixelFormat.RGB_B8G8R8, ScanLineOrder.TOP_DOWN)


def test_origin_reset_and_palette_shared():
    palette = Palette(24, [RgbTriplet(i, i, i) for i in range(4)])
    pixel_data = indices_to_pixel_data(np.zeros((3, 3), dtype=int), palette, bits_per_index=2)
    pixel_data.metadata = pixel_data.metadata.replace(origin_x=7, origin_y=9)
    
    sub = pixel_data.get_sub_image(1, 1, 2, 2)
    
    assert (sub.metadata.origin_x, sub.metadata.origin_y) == (0, 0)
    assert sub.metadata.palette is palette
    assert sub.metadata.bits_per_data_pixel == 2


def test_sub_byte_region_decodes_like_full_image():
    converter = BasicPixelConverter()
    colours = [RgbTriplet(i * 16, 255 - i * 16, i) for i in range(16)]
    indices = np.random.randint(0, 16, (4, 5))
    pixel_data = indices_to_pixel_data(indices, Palette(24, colours), bits_per_index=4)
    
    sub = pixel_data.get_sub_image(1, 1, 3, 2)
    decoded = sub.get_pixel_data(converter, PixelFormat.RGB_B8G8R8, ScanLineOrder.TOP_DOWN)
    
    assert decoded == b''.join(colours[i].to_bytes() for i in indices[1:3, 1:4].ravel())


def test_empty_rectangle(source_rgb):
    sub = rgb_to_pixel_data(source_rgb).get_sub_image(1, 1, 0, 0)
    assert sub.native_binary_data == b''
