"""
UI System

Pixel-space drawing for the tuning views.

Components:
- style: RGBA colors and hex parsing
- draw: DrawBatch primitive recorder (the renderer surface)
- cursor: PitchCursor, the playing position
- renderer: GLRenderer, moderngl backend for DrawBatch
"""

from xenvox.ui.style import Color, RGBA, color_rgba, hex_to_color, rgb, with_alpha
from xenvox.ui.draw import (
    DrawBatch, DrawRect, DrawTriangle, ScreenSize, Vertex, triangle,
)
from xenvox.ui.cursor import PitchCursor

__all__ = [
    # Style
    "Color", "RGBA", "color_rgba", "hex_to_color", "rgb", "with_alpha",
    # Draw
    "DrawBatch", "DrawRect", "DrawTriangle", "ScreenSize", "Vertex", "triangle",
    # Cursor
    "PitchCursor",
]
