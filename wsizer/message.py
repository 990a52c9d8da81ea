"""
Size Notification Text

Formats the message flashed after a window has been resized.
"""

from __future__ import annotations
import math

NOMINAL_NUMERATOR = 16
RATIO_DENOMINATOR = 9
RATIO_TOLERANCE = 0.01


def ratio_numerator(width: int, height: int) -> float:
    """The N of an N:9 aspect ratio for the given size."""
    return RATIO_DENOMINATOR * width / height


def format_size_message(width: int, height: int, scale_factor: float = 1) -> str:
    """
    Describe a frame size in logical pixels.

    Logical sizes are rounded half up, so an odd device width at scale 2
    reports the larger logical pixel (1281 -> 641, not 640).

    When the host had to deviate from 16:9 (e.g. a terminal snapping to its
    cell grid) the actual ratio is appended.

    Args:
        width: Frame width in device pixels
        height: Frame height in device pixels
        scale_factor: Display scale factor

    Returns:
        Message such as ``"1600×900"`` or ``"1600×894 (16.11:9)"``
    """
    logical_width = _round_half_up(width / scale_factor)
    logical_height = _round_half_up(height / scale_factor)
    message = f"{logical_width}×{logical_height}"

    numerator = ratio_numerator(width, height)
    if abs(numerator - NOMINAL_NUMERATOR) > RATIO_TOLERANCE:
        message += f" ({numerator:.2f}:{RATIO_DENOMINATOR})"

    return message


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
