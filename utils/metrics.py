"""Metrics: PSNR between sample planes, stage timing."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio


def compute_psnr(reference: np.ndarray, candidate: np.ndarray, data_range: float = 255) -> float:
    """PSNR in dB; identical inputs give +inf."""
    reference = np.asarray(reference, dtype=np.float64)
    candidate = np.asarray(candidate, dtype=np.float64)
    if np.array_equal(reference, candidate):
        return float('inf')
    return float(peak_signal_noise_ratio(reference, candidate, data_range=data_range))


class Timer:
    """Simple timer for format and resize runtime."""
    
    def __init__(self):
        self.format_time_ms = 0.0
        self.resize_time_ms = 0.0
    
    def measure_format(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.format_time_ms = (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_resize(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.resize_time_ms = (time.perf_counter() - start) * 1000.0
        return result
