"""Pixel layout constants and colorimetry coefficients."""

RGBA_BITS_PER_PIXEL = 32
RGB_BITS_PER_PIXEL = 24
RGB555_BITS_PER_PIXEL = 16
YUV420_BITS_PER_PIXEL = 12

OPAQUE_ALPHA = 255

# Palette index widths that can be decoded
PALETTE_INDEX_BITS = (1, 2, 4, 8)

# JFIF (full-range BT.601) YCbCr -> RGB
JFIF_CR_TO_R = 1.402
JFIF_CB_TO_G = 0.34414
JFIF_CR_TO_G = 0.71414
JFIF_CB_TO_B = 1.772

# JFIF RGB -> YCbCr
JFIF_Y_WEIGHTS = (0.299, 0.587, 0.114)
JFIF_CB_WEIGHTS = (-0.168736, -0.331264, 0.5)
JFIF_CR_WEIGHTS = (0.5, -0.418688, -0.081312)
