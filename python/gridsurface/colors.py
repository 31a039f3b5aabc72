"""Color helpers for face fills and outlines."""

from __future__ import annotations

import colorsys
from typing import Any, Sequence, Tuple, Union

Color = Tuple[float, float, float, float]
ColorLike = Union[Color, Tuple[float, float, float], Sequence[float], str]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0, 1.0)


def hex_to_rgba(hex_color: str, alpha: float = 1.0) -> Color:
    """Convert hex color to an RGBA tuple (0.0-1.0 range).

    Args:
        hex_color: Color in hex format, e.g. '#FF5500' or 'FF5500' or '#FF5500AA'
        alpha: Alpha value (0.0-1.0), used if hex doesn't include alpha

    Returns:
        Tuple of (R, G, B, A) values in 0.0-1.0 range

    Raises:
        ValueError: if hex color format is invalid
    """
    digits = hex_color.lstrip('#')
    try:
        if len(digits) == 6:
            r = int(digits[0:2], 16) / 255.0
            g = int(digits[2:4], 16) / 255.0
            b = int(digits[4:6], 16) / 255.0
            return (r, g, b, float(alpha))
        elif len(digits) == 8:
            r = int(digits[0:2], 16) / 255.0
            g = int(digits[2:4], 16) / 255.0
            b = int(digits[4:6], 16) / 255.0
            a = int(digits[6:8], 16) / 255.0
            return (r, g, b, a)
    except ValueError as e:
        raise ValueError(f"Invalid hex color: {hex_color}") from e
    raise ValueError(f"Invalid hex color: {hex_color}")


def hsv(hue: float, saturation: float, value: float, alpha: float = 1.0) -> Color:
    """Build a color from hue in degrees (wrapped into [0, 360)), saturation and value.

    Args:
        hue: Hue angle in degrees; any value is accepted and wrapped
        saturation: Saturation (0.0-1.0)
        value: Value/brightness (0.0-1.0)
        alpha: Alpha (0.0-1.0)

    Returns:
        Tuple of (R, G, B, A) values in 0.0-1.0 range
    """
    h = (float(hue) % 360.0) / 360.0
    r, g, b = colorsys.hsv_to_rgb(h, float(saturation), float(value))
    return (r, g, b, float(alpha))


def normalize_color(value: Any) -> Color:
    """Coerce a color-like value (hex string, RGB or RGBA sequence) into an RGBA tuple.

    Channels are clamped into [0, 1].
    """
    if isinstance(value, str):
        return hex_to_rgba(value)
    try:
        channels = [float(c) for c in value]
    except TypeError as e:
        raise ValueError(f"color must be a hex string or RGB/RGBA sequence, got {value!r}") from e
    if len(channels) == 3:
        channels.append(1.0)
    if len(channels) != 4:
        raise ValueError(f"color must have 3 or 4 channels, got {len(channels)}")
    # Out-of-range channels are clamped, as cairo does.
    r, g, b, a = (max(0.0, min(1.0, c)) for c in channels)
    return (r, g, b, a)
