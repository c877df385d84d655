"""Formatted output with timing."""

from dataclasses import dataclass

from models.enums import PixelFormat, ScanLineOrder


@dataclass
class OutputResult:
    """Pixel data delivered for one output request."""
    
    data: bytes
    width: int
    height: int
    format: PixelFormat
    order: ScanLineOrder
    horizontal_packing: int
    vertical_packing: int
    
    # Runtime
    format_time_ms: float = 0.0
    resize_time_ms: float = 0.0
