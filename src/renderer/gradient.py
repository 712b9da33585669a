# renderer/gradient.py

import numpy as np
from core.image import Image
from core.pixel import CHANNEL_MAX, Pixel

# Slightly above 256 so the far edge saturates at 255 without relying on
# an exact product of 256.
GRADIENT_FACTOR = 259.999


def channel_value(t: float, factor: float = GRADIENT_FACTOR) -> int:
    """
    Quantize t in [0, 1] to an 8-bit channel. The scaled value is truncated
    toward zero and saturated to 0..255 (NaN maps to 0).
    """
    with np.errstate(all="ignore"):
        scaled = np.float32(factor) * np.float32(t)
    if np.isnan(scaled):
        return 0
    return int(np.clip(scaled, 0, CHANNEL_MAX))


def _ramp(index: int, count: int) -> np.float32:
    if count <= 1:
        return np.float32(0.0)
    return np.float32(index) / np.float32(count - 1)


def generate_gradient_image(width=256, height=256, factor=GRADIENT_FACTOR):
    """
    Generate a two-axis colour ramp.
    Red grows down the rows, green grows across the columns, blue is 0.

    Args:
        width (int): Number of columns.
        height (int): Number of rows.
        factor (float): Scale applied to the [0, 1] ramp before quantizing.

    Returns:
        Image: A width x height image built cell by cell.
    """
    def shade(row, col):
        return Pixel(channel_value(_ramp(row, height), factor),
                     channel_value(_ramp(col, width), factor),
                     0)

    return Image.new_assign(width, height, shade)
