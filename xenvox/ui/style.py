"""
Colors

Colors are RGBA tuples of floats in 0.0-1.0. No named themes, no cascading:
each drawable gets its palette from its config object.
"""

from __future__ import annotations
from typing import Tuple, Optional


# Color can be:
# - Tuple of 3-4 floats (RGB or RGBA, 0.0-1.0)
# - None (transparent)
Color = Optional[Tuple[float, ...]]
RGBA = Tuple[float, float, float, float]


def color_rgba(c: Color) -> RGBA:
    """Normalize color to RGBA tuple."""
    if c is None:
        return (0.0, 0.0, 0.0, 0.0)
    if len(c) == 3:
        return (c[0], c[1], c[2], 1.0)
    return (c[0], c[1], c[2], c[3])


def rgb(r: int, g: int, b: int) -> RGBA:
    """8-bit channels to an opaque RGBA color."""
    return (r / 255.0, g / 255.0, b / 255.0, 1.0)


def with_alpha(c: Color, alpha: float) -> RGBA:
    r, g, b, _ = color_rgba(c)
    return (r, g, b, alpha)


def hex_to_color(hex_str: str) -> RGBA:
    """Convert hex string to color. Supports #RGB, #RGBA, #RRGGBB, #RRGGBBAA."""
    h = hex_str.lstrip('#')
    if len(h) == 3:
        r, g, b = int(h[0], 16) / 15, int(h[1], 16) / 15, int(h[2], 16) / 15
        return (r, g, b, 1.0)
    elif len(h) == 4:
        r, g, b, a = int(h[0], 16) / 15, int(h[1], 16) / 15, int(h[2], 16) / 15, int(h[3], 16) / 15
        return (r, g, b, a)
    elif len(h) == 6:
        return rgb(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    elif len(h) == 8:
        r, g, b, _ = rgb(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
        return (r, g, b, int(h[6:8], 16) / 255)
    raise ValueError(f"Invalid hex color: {hex_str}")
