"""
PitchCursor - the horizontal playing position.

The stored position is never clamped: a pointer outside the window yields a
pitch below 0 or above the octave span, and that value is sent as-is.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING

from xenvox.ui.style import with_alpha

if TYPE_CHECKING:
    from xenvox.config import CursorConfig
    from xenvox.ui.draw import DrawBatch, ScreenSize


@dataclass
class PitchCursor:
    pos: float = 0.0

    def set_position(self, pos: float):
        self.pos = float(pos)

    def pitch(self, screen_width: float, octave_units: float = 12.0) -> float:
        """Pitch index: 0 at the left edge, octave_units at the right edge."""
        return octave_units * self.pos / screen_width

    def band(self, screen_size: 'ScreenSize', half_width_divisor: float = 240.0
             ) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        width, height = screen_size
        half = width / half_width_divisor
        return (self.pos - half, 0.0), (self.pos + half, height)

    def draw(self, screen_size: 'ScreenSize', sink: 'DrawBatch', config: 'CursorConfig'):
        a0, a1 = self.band(screen_size, config.half_width_divisor)
        sink.render_rect(a0, a1, with_alpha(config.color, config.alpha))
