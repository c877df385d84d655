"""
Pixel Engine
Palette decoding, pixel format conversion and resampling for game assets
"""

import logging
import sys


def parse_size(text: str) -> tuple[int, int]:
    """Parse 'WxH' into (width, height)."""
    width, _, height = text.lower().partition('x')
    return int(width), int(height)


def run_cli(args: list[str]) -> None:
    """Format an image and optionally resize it, reporting timing and PSNR."""
    import cv2
    import numpy as np
    from models.image_metadata import ImageMetadata
    from models.output_params import OutputParams
    from engines.pixel_data import PixelData
    from engines.pipeline import render_output
    from utils.image_io import load_image, save_image, to_bgra_array
    from utils.metrics import compute_psnr
    from utils.test_images import generate_colored_checkerboard, rgb_to_pixel_data
    
    if not args or args[0] == '--help':
        print("Usage: python main.py <image_path> [WxH] [nearest|bilinear]")
        print("       python main.py --synthetic [WxH] [nearest|bilinear]")
        sys.exit(0)
    
    if args[0] == '--synthetic':
        print("Generating test image...")
        pixel_data = rgb_to_pixel_data(generate_colored_checkerboard(256))
    else:
        print(f"Loading: {args[0]}")
        pixel_data = load_image(args[0])
    
    target = parse_size(args[1]) if len(args) > 1 else (None, None)
    method = args[2] if len(args) > 2 else 'bilinear'
    
    print(f"Image: {pixel_data.width}x{pixel_data.height}")
    
    params = OutputParams(
        target_width=target[0],
        target_height=target[1],
        resample_method=method,
    )
    result = render_output(pixel_data, params)
    
    print("\n=== Results ===")
    print(f"Output:    {result.width}x{result.height} {result.format.name}")
    print(f"Format:    {result.format_time_ms:.2f} ms")
    print(f"Resize:    {result.resize_time_ms:.2f} ms")
    
    if params.resizes:
        interp = cv2.INTER_NEAREST if method == 'nearest' else cv2.INTER_AREA
        reference = cv2.resize(to_bgra_array(pixel_data), (result.width, result.height), interpolation=interp)
        output = np.frombuffer(result.data, dtype=np.uint8).reshape(result.height, result.width, 4)
        print(f"PSNR vs OpenCV: {compute_psnr(reference, output):.2f} dB")
    
    save_image(
        PixelData(result.data, ImageMetadata(
            width=result.width,
            height=result.height,
            bits_per_data_pixel=32,
            format=result.format,
            order=result.order,
        )),
        "formatted.png",
    )
    print("\nSaved: formatted.png")


def main():
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')
    run_cli(sys.argv[1:])


if __name__ == '__main__':
    main()
