"""End-to-end tests for render_output, resizing and image I/O."""

import numpy as np
import pytest
from models.enums import PixelFormat, ScanLineOrder
from models.output_params import OutputParams
from engines.pipeline import render_output
from engines.pixel_converter import BasicPixelConverter
from engines.scaling import resize_pixel_data
from utils.image_io import load_image, save_image, to_bgra_array
from utils.metrics import compute_psnr
from utils.test_images import (
    generate_colored_checkerboard,
    generate_gradient,
    generate_thin_stripes,
    rgb_to_pixel_data,
)


def test_render_without_resize():
    rgb = generate_gradient(4, 3)
    result = render_output(rgb_to_pixel_data(rgb, order=ScanLineOrder.BOTTOM_UP), OutputParams())
    
    assert (result.width, result.height) == (4, 3)
    assert result.format == PixelFormat.RGBA_B8G8R8A8
    out = np.frombuffer(result.data, dtype=np.uint8).reshape(3, 4, 4)
    assert np.array_equal(out[..., 2::-1], rgb)
    assert np.all(out[..., 3] == 255)
    assert result.resize_time_ms == 0.0
    assert result.format_time_ms >= 0.0


def test_render_with_resize():
    rgb = np.full((4, 4, 3), 90, dtype=np.uint8)
    params = OutputParams(format=PixelFormat.RGBA_R8G8B8A8, target_width=2, target_height=2)
    result = render_output(rgb_to_pixel_data(rgb), params)
    
    assert (result.width, result.height) == (2, 2)
    assert len(result.data) == 16
    assert result.data == bytes([90, 90, 90, 255]) * 4


def test_render_resize_with_packing():
    params = OutputParams(
        format=PixelFormat.RGBA_B8G8R8A8, order=ScanLineOrder.BOTTOM_UP,
        horizontal_packing=3, vertical_packing=2,
        target_width=5, target_height=3, resample_method='nearest',
    )
    result = render_output(rgb_to_pixel_data(generate_gradient(10, 6)), params)
    # 20-byte rows padded by 20 % 3, 3 rows padded by 3 % 2
    assert len(result.data) == 22 * 4


def test_checkerboard_downscale_quality():
    converter = BasicPixelConverter()
    pixel_data = rgb_to_pixel_data(generate_colored_checkerboard(32, 8))
    
    resized = resize_pixel_data(pixel_data, converter, 16, 16, 'bilinear')
    
    expected = generate_colored_checkerboard(16, 4)
    actual = to_bgra_array(resized, converter)[..., 2::-1]
    assert compute_psnr(expected, actual) == float('inf')


def test_resize_rejects_unknown_method():
    pixel_data = rgb_to_pixel_data(generate_gradient(4, 4))
    with pytest.raises(ValueError):
        resize_pixel_data(pixel_data, BasicPixelConverter(), 2, 2, 'bicubic')


@pytest.mark.parametrize("kwargs", [
    {"horizontal_packing": -1},
    {"target_width": 4},
    {"target_width": 0, "target_height": 4},
    {"resample_method": "bicubic"},
])
def test_output_params_validation(kwargs):
    with pytest.raises(ValueError):
        OutputParams(**kwargs)


def test_save_and_load_round_trip(tmp_path):
    rgb = generate_gradient(12, 7)
    path = str(tmp_path / "gradient.png")
    
    save_image(rgb_to_pixel_data(rgb, order=ScanLineOrder.BOTTOM_UP), path)
    loaded = load_image(path)
    
    assert (loaded.width, loaded.height) == (12, 7)
    assert loaded.metadata.format == PixelFormat.RGB_B8G8R8
    native = np.frombuffer(loaded.native_binary_data, dtype=np.uint8).reshape(7, 12, 3)
    assert np.array_equal(native[..., ::-1], rgb)


def test_load_missing_file(tmp_path):
    with pytest.raises(ValueError):
        load_image(str(tmp_path / "missing.png"))


def test_resize_requires_rgba_output():
    with pytest.raises(ValueError):
        OutputParams(format=PixelFormat.RGB_B8G8R8, target_width=2, target_height=2)
    
    # Without a resize the same format is served as-is
    result = render_output(rgb_to_pixel_data(generate_gradient(4, 4)), OutputParams(format=PixelFormat.RGB_B8G8R8))
    assert len(result.data) == 4 * 4 * 3


def test_thin_stripes_downscale():
    """Bilinear averages 2-pixel stripes; nearest aliases onto one stripe colour."""
    converter = BasicPixelConverter()
    pixel_data = rgb_to_pixel_data(generate_thin_stripes(16, 1))
    
    averaged = to_bgra_array(resize_pixel_data(pixel_data, converter, 8, 8, 'bilinear'), converter)
    aliased = to_bgra_array(resize_pixel_data(pixel_data, converter, 8, 8, 'nearest'), converter)
    
    assert np.all(averaged[..., 2::-1] == [130, 120, 130])
    assert np.all(aliased[..., 2::-1] == [200, 60, 60])
