"""Nearest-neighbour and weighted-overlap resampling of single sample planes.

Each function takes a flat row-major plane whose rows may be padded
(`padded_width` samples apart) and returns a flat array of
`target_height * target_width` samples. Call once per channel.
"""

import math

import numpy as np


def _check_dimensions(actual_height, actual_width, target_height, target_width):
    if min(actual_height, actual_width, target_height, target_width) <= 0:
        raise ValueError(
            f"Resample dimensions must be positive, got {actual_width}x{actual_height} "
            f"-> {target_width}x{target_height}"
        )


def _plane(data, actual_height, actual_width, padded_height, padded_width, dtype) -> np.ndarray:
    """The (actual_height, actual_width) region of a padded flat plane."""
    flat = np.asarray(data, dtype=dtype).ravel()
    return flat[:padded_height * padded_width].reshape(padded_height, padded_width)[:actual_height, :actual_width]


def nearest_neighbor_resample(
    data,
    actual_height: int,
    actual_width: int,
    padded_height: int,
    padded_width: int,
    target_height: int,
    target_width: int,
) -> np.ndarray:
    """Copy the source sample at (floor(ty*H/tH), floor(tx*W/tW)) for every target sample."""
    _check_dimensions(actual_height, actual_width, target_height, target_width)
    source = np.asarray(data).ravel()[:padded_height * padded_width].reshape(padded_height, padded_width)
    
    rows = (np.arange(target_height) * actual_height) // target_height
    cols = (np.arange(target_width) * actual_width) // target_width
    return source[rows[:, None], cols[None, :]].ravel()


def overlap_weights(actual: int, target: int) -> np.ndarray:
    """(target, actual) matrix of normalised box-overlap weights along one axis."""
    stride = actual / target
    weights = np.zeros((target, actual), dtype=np.float64)
    
    for index in range(target):
        start = index * stride
        end = start + stride
        left = math.floor(start)
        right = math.floor(end)
        end_weight = end - right
        
        # Window ends on a cell boundary or runs past the last sample
        if end_weight == 0.0 or end >= actual:
            right = min(right - 1, actual - 1)
            end_weight = 1.0
        
        if left >= right:
            weights[index, left] = 1.0
            continue
        
        weights[index, left] = 1.0 - (start - left)
        weights[index, left + 1:right] = 1.0
        weights[index, right] = end_weight
        weights[index] /= weights[index].sum()
    
    return weights


def _bilinear(plane: np.ndarray, target_height: int, target_width: int) -> np.ndarray:
    actual_height, actual_width = plane.shape
    
    # Horizontal pass: actual_height x target_width
    if actual_width == target_width:
        horizontal = plane
    else:
        horizontal = plane @ overlap_weights(actual_width, target_width).T
    
    # Vertical pass: target_height x target_width
    if actual_height == target_height:
        return horizontal
    return overlap_weights(actual_height, target_height) @ horizontal


def bilinear_resample_float(
    data,
    actual_height: int,
    actual_width: int,
    padded_height: int,
    padded_width: int,
    target_height: int,
    target_width: int,
) -> np.ndarray:
    """Weighted-overlap resample keeping floating-point samples."""
    _check_dimensions(actual_height, actual_width, target_height, target_width)
    plane = _plane(data, actual_height, actual_width, padded_height, padded_width, np.float64)
    return np.array(_bilinear(plane, target_height, target_width), dtype=np.float64).ravel()


def bilinear_resample_integer(
    data,
    actual_height: int,
    actual_width: int,
    padded_height: int,
    padded_width: int,
    target_height: int,
    target_width: int,
) -> np.ndarray:
    """Weighted-overlap resample with samples truncated to integers."""
    resampled = bilinear_resample_float(
        data, actual_height, actual_width, padded_height, padded_width, target_height, target_width
    )
    # Absorb float accumulation error so exact averages do not truncate one below
    return np.trunc(np.round(resampled, 9)).astype(np.int64)
