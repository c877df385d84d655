"""Output pipeline: format request, optional resize, timing."""

from typing import Optional

from models.output_params import OutputParams
from models.output_result import OutputResult
from engines.pixel_converter import PixelConverter, BasicPixelConverter
from engines.pixel_data import PixelData
from engines.scaling import resize_pixel_data
from utils.metrics import Timer


def render_output(
    pixel_data: PixelData,
    params: OutputParams,
    converter: Optional[PixelConverter] = None,
) -> OutputResult:
    """Deliver `pixel_data` in the layout and size described by `params`."""
    converter = converter or BasicPixelConverter()
    timer = Timer()
    source = pixel_data
    
    if params.resizes:
        source = timer.measure_resize(
            resize_pixel_data, pixel_data, converter,
            params.target_width, params.target_height, params.resample_method,
            params.format,
        )
    
    data = timer.measure_format(
        source.get_pixel_data, converter, params.format, params.order,
        params.horizontal_packing, params.vertical_packing,
    )
    
    return OutputResult(
        data=data,
        width=source.width,
        height=source.height,
        format=params.format,
        order=params.order,
        horizontal_packing=params.horizontal_packing,
        vertical_packing=params.vertical_packing,
        format_time_ms=timer.format_time_ms,
        resize_time_ms=timer.resize_time_ms,
    )
