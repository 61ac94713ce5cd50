# xenvox/tuning/grid.py
"""
EdoGrid - equal-division-of-the-octave reference ticks.

With more than one EDO a header band of height/24 sits at the top and
overlays every EDO's ticks; the rest of the height is split into one band per
EDO, stacked in list order. A single EDO gets the whole height.

Tick i of n is centered at width * i / n. Equal divisions are already evenly
spaced in log-frequency, so no log2 is involved here.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import GridConfig
    from ..ui.draw import DrawBatch, ScreenSize


@dataclass(frozen=True)
class BandLayout:
    """Vertical extents of the header and of each EDO band."""
    header: float
    bands: Tuple[Tuple[float, float], ...]  # (top, bottom) per EDO

    @property
    def band_height(self) -> float:
        if not self.bands:
            return 0.0
        top, bottom = self.bands[0]
        return bottom - top


class EdoGrid:
    """Ordered EDO division counts. Order drives band stacking and colors."""

    def __init__(self, edos: Sequence[int]):
        edos = tuple(int(e) for e in edos)
        for e in edos:
            if e <= 0:
                raise ValueError(f"EDO division counts must be positive, got {e}")
        self._edos = edos

    @property
    def edos(self) -> Tuple[int, ...]:
        return self._edos

    def __len__(self) -> int:
        return len(self._edos)

    def __eq__(self, other) -> bool:
        if not isinstance(other, EdoGrid):
            return NotImplemented
        return self._edos == other._edos

    def __repr__(self) -> str:
        return f"EdoGrid({list(self._edos)})"

    def layout(self, height: float, header_divisor: float = 24.0) -> BandLayout:
        if len(self._edos) > 1:
            header = height / header_divisor
        else:
            header = 0.0
        if not self._edos:
            return BandLayout(header=header, bands=())
        step = (height - header) / len(self._edos)
        bands = tuple(
            (header + e * step, header + (e + 1) * step)
            for e in range(len(self._edos))
        )
        return BandLayout(header=header, bands=bands)

    @staticmethod
    def tick_positions(bars: int, width: float) -> List[float]:
        step = width / bars
        return [i * step for i in range(bars)]

    def draw(self, screen_size: ScreenSize, sink: 'DrawBatch', config: 'GridConfig'):
        width, height = screen_size
        half = config.tick_width / 2.0
        layout = self.layout(height, config.header_divisor)

        if layout.header > 0.0:
            for e, bars in enumerate(self._edos):
                color = config.colors[e % 3]
                for x in self.tick_positions(bars, width):
                    sink.render_rect((x - half, 0.0), (x + half, layout.header), color)

        for e, (bars, (top, bottom)) in enumerate(zip(self._edos, layout.bands)):
            color = config.colors[e % 3]
            for x in self.tick_positions(bars, width):
                sink.render_rect((x - half, top), (x + half, bottom), color)
