"""Output request parameters."""

from dataclasses import dataclass
from typing import Literal, Optional

from models.enums import PixelFormat, ScanLineOrder, RGBA_FORMATS


@dataclass
class OutputParams:
    """Layout and size a consumer wants pixel data delivered in."""
    
    format: PixelFormat = PixelFormat.RGBA_B8G8R8A8
    order: ScanLineOrder = ScanLineOrder.TOP_DOWN
    horizontal_packing: int = 0
    vertical_packing: int = 0
    target_width: Optional[int] = None
    target_height: Optional[int] = None
    resample_method: Literal['nearest', 'bilinear'] = 'bilinear'
    
    def __post_init__(self):
        if self.horizontal_packing < 0 or self.vertical_packing < 0:
            raise ValueError(
                f"Packing must be non-negative, got ({self.horizontal_packing}, {self.vertical_packing})"
            )
        if (self.target_width is None) != (self.target_height is None):
            raise ValueError("Target width and height must be given together")
        if self.target_width is not None and (self.target_width <= 0 or self.target_height <= 0):
            raise ValueError(f"Target size must be positive, got {self.target_width}x{self.target_height}")
        if self.target_width is not None and self.format not in RGBA_FORMATS:
            raise ValueError(f"Resized output must be RGBA32, got {self.format.name}")
        if self.resample_method not in ('nearest', 'bilinear'):
            raise ValueError(f"Unknown resample method: {self.resample_method}")

    @property
    def resizes(self) -> bool:
        return self.target_width is not None
