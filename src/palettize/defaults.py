"""Default values for quantization.

:created: 2026-10-19
"""

# Maximum number of palette colors when none is requested.
PALETTE_SIZE = 4

# Bayer matrix order when none is requested.
MATRIX_ORDER = 4

# A palette needs at least two colors, because dithering chooses between
# thresholds. Requested palette sizes below this are raised to this value.
MIN_PALETTE_SIZE = 2

# The only Bayer matrix orders with tables. Any other requested order falls back
# to FALLBACK_MATRIX_ORDER without complaint.
MATRIX_ORDERS = (2, 4, 8)
FALLBACK_MATRIX_ORDER = 8
