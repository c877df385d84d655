"""Tests for the nearest-neighbour and weighted-overlap resamplers."""

import cv2
import numpy as np
import pytest
from engines.resample import (
    nearest_neighbor_resample,
    bilinear_resample_integer,
    bilinear_resample_float,
    overlap_weights,
)


def test_nearest_identity():
    plane = np.random.randint(0, 256, 35)
    out = nearest_neighbor_resample(plane, 5, 7, 5, 7, 5, 7)
    assert np.array_equal(out, plane)


def test_nearest_uses_padded_stride():
    data = [1, 2, 3, 0, 4, 5, 6, 0]
    out = nearest_neighbor_resample(data, 2, 3, 2, 4, 2, 3)
    assert out.tolist() == [1, 2, 3, 4, 5, 6]


def test_nearest_floors_toward_origin():
    out = nearest_neighbor_resample([1, 2], 1, 2, 1, 2, 1, 4)
    assert out.tolist() == [1, 1, 2, 2]
    out = nearest_neighbor_resample([1, 2, 3], 1, 3, 1, 3, 1, 2)
    assert out.tolist() == [1, 2]


def test_nearest_matches_opencv_for_integer_downscale():
    plane = np.random.randint(0, 256, (8, 12)).astype(np.uint8)
    ours = nearest_neighbor_resample(plane.ravel(), 8, 12, 8, 12, 4, 3).reshape(4, 3)
    reference = cv2.resize(plane, (3, 4), interpolation=cv2.INTER_NEAREST)
    assert np.array_equal(ours, reference)


@pytest.mark.parametrize("target", [(3, 11), (13, 2), (5, 7), (1, 1), (10, 14)])
def test_bilinear_conserves_constant(target):
    plane = np.full(5 * 7, 200)
    out = bilinear_resample_integer(plane, 5, 7, 5, 7, *target)
    assert out.shape == (target[0] * target[1],)
    assert np.all(out == 200)


def test_bilinear_identity():
    plane = np.random.randint(0, 256, 20)
    assert np.array_equal(bilinear_resample_integer(plane, 4, 5, 4, 5, 4, 5), plane)


def test_bilinear_upsample_duplicates():
    assert bilinear_resample_integer([10, 20], 1, 2, 1, 2, 1, 4).tolist() == [10, 10, 20, 20]


def test_bilinear_partial_overlap():
    # 3 -> 2: (0*1 + 30*0.5) / 1.5 and (30*0.5 + 60*1) / 1.5
    assert bilinear_resample_integer([0, 30, 60], 1, 3, 1, 3, 1, 2).tolist() == [10, 50]


def test_bilinear_vertical_pass():
    out = bilinear_resample_integer([0, 30, 60], 3, 1, 3, 1, 2, 1)
    assert out.tolist() == [10, 50]


def test_integer_variant_truncates():
    assert bilinear_resample_integer([0, 1], 1, 2, 1, 2, 1, 1).tolist() == [0]
    assert bilinear_resample_float([0, 1], 1, 2, 1, 2, 1, 1).tolist() == [0.5]


def test_bilinear_skips_padding():
    data = [10, 20, 99, 30, 40, 99]
    out = bilinear_resample_float(data, 2, 2, 2, 3, 1, 1)
    assert out.tolist() == [25.0]


@pytest.mark.parametrize("shape,target", [((8, 8), (4, 4)), ((9, 6), (3, 2)), ((12, 4), (4, 2))])
def test_bilinear_matches_opencv_area(shape, target):
    plane = np.random.rand(*shape).astype(np.float32) * 255
    ours = bilinear_resample_float(plane.ravel(), *shape, *shape, *target).reshape(target)
    reference = cv2.resize(plane, (target[1], target[0]), interpolation=cv2.INTER_AREA)
    assert np.allclose(ours, reference, atol=1e-3)


def test_weights_are_normalised():
    for actual, target in [(7, 3), (3, 7), (10, 3), (5, 5)]:
        weights = overlap_weights(actual, target)
        assert np.allclose(weights.sum(axis=1), 1.0)
        assert np.all(weights >= 0)


@pytest.mark.parametrize("resampler", [
    nearest_neighbor_resample, bilinear_resample_integer, bilinear_resample_float,
])
def test_zero_dimensions_rejected(resampler):
    with pytest.raises(ValueError):
        resampler([1, 2], 1, 2, 1, 2, 1, 0)
    with pytest.raises(ValueError):
        resampler([], 1, 0, 1, 0, 1, 1)
