"""Row byte-width and row-count arithmetic for packed pixel buffers.

Packing adds the remainder of the unpacked size rather than rounding up to
the next multiple. Every row offset in the engines is derived from these
values, so the formulas must stay in sync with existing buffers.
"""


def unpacked_row_byte_width(bits_per_pixel: int, width: int) -> int:
    """Bytes needed for one row of `width` pixels, rounded up to whole bytes."""
    row_bits = bits_per_pixel * width
    return (row_bits // 8) + (1 if row_bits % 8 > 0 else 0)


def packed_row_byte_width(bits_per_pixel: int, packing: int, width: int) -> int:
    """Bytes per row once horizontal packing is applied (0 disables packing)."""
    row_size = unpacked_row_byte_width(bits_per_pixel, width)
    if packing > 0:
        row_size += row_size % packing
    return row_size


def packed_row_count(packing: int, height: int) -> int:
    """Number of rows stored once vertical packing is applied (0 disables packing)."""
    rows = height
    if packing > 0:
        rows += height % packing
    return rows
