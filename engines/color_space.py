"""Colour space conversion and channel expansion."""

import numpy as np

from utils.constants import (
    JFIF_CR_TO_R,
    JFIF_CB_TO_G,
    JFIF_CR_TO_G,
    JFIF_CB_TO_B,
    JFIF_Y_WEIGHTS,
    JFIF_CB_WEIGHTS,
    JFIF_CR_WEIGHTS,
)


def clamp_to_byte(values: np.ndarray) -> np.ndarray:
    """Clamp to [0, 255], rounding in-range values half-to-even."""
    values = np.asarray(values, dtype=np.float64)
    out = np.rint(values)
    out[values <= 0] = 0
    out[values >= 255] = 255
    return out.astype(np.uint8)


def ycbcr_to_rgb(ycbcr: np.ndarray) -> np.ndarray:
    """JFIF YCbCr (full-range BT.601) to RGB bytes, channels on the last axis."""
    ycbcr = np.asarray(ycbcr, dtype=np.float64)
    Y, Cb, Cr = ycbcr[..., 0], ycbcr[..., 1] - 128.0, ycbcr[..., 2] - 128.0
    R = Y + JFIF_CR_TO_R * Cr
    G = Y - JFIF_CB_TO_G * Cb - JFIF_CR_TO_G * Cr
    B = Y + JFIF_CB_TO_B * Cb
    return clamp_to_byte(np.stack([R, G, B], axis=-1))


def rgb_to_ycbcr(rgb: np.ndarray) -> np.ndarray:
    """RGB to JFIF YCbCr bytes, channels on the last axis."""
    rgb = np.asarray(rgb, dtype=np.float64)
    R, G, B = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    Y = JFIF_Y_WEIGHTS[0] * R + JFIF_Y_WEIGHTS[1] * G + JFIF_Y_WEIGHTS[2] * B
    Cb = JFIF_CB_WEIGHTS[0] * R + JFIF_CB_WEIGHTS[1] * G + JFIF_CB_WEIGHTS[2] * B + 128.0
    Cr = JFIF_CR_WEIGHTS[0] * R + JFIF_CR_WEIGHTS[1] * G + JFIF_CR_WEIGHTS[2] * B + 128.0
    return clamp_to_byte(np.stack([Y, Cb, Cr], axis=-1))


def expand_5_to_8(values: np.ndarray) -> np.ndarray:
    """Widen 5-bit channels to 8 bits, replicating the top 3 bits into the low bits."""
    values = np.asarray(values, dtype=np.uint16) & 0x1F
    return ((values << 3) | ((values & 0x1C) >> 2)).astype(np.uint8)


def split_555(words: np.ndarray) -> np.ndarray:
    """Split Xaaaaabbbbbccccc words into 8-bit (low, middle, high) channels."""
    words = np.asarray(words, dtype=np.uint16)
    low = expand_5_to_8(words & 0x001F)
    middle = expand_5_to_8((words & 0x03E0) >> 5)
    high = expand_5_to_8((words & 0x7C00) >> 10)
    return np.stack([low, middle, high], axis=-1)
