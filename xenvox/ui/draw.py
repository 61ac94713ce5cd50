"""
Draw Batch

Records 2D primitives in pixel coordinates (origin top-left) for one frame.

DrawBatch is the renderer capability surface the tuning views draw into:
- clear(color)
- render_triangle(vertices)
- render_rect(a0, a1, color)

GLRenderer extends it with present()/notify_resize(). Tests use the batch
directly to inspect what was drawn.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple

from xenvox.ui.style import Color, RGBA, color_rgba


# =============================================================================
# Geometry
# =============================================================================

class ScreenSize(NamedTuple):
    """Window size in pixels."""
    width: float
    height: float


@dataclass(frozen=True)
class Vertex:
    pos: Tuple[float, float]
    color: RGBA


def triangle(center: Tuple[float, float], size: float, color: Color) -> Tuple[Vertex, Vertex, Vertex]:
    """Upward-pointing triangle glyph of edge `size` centered on `center`."""
    x, y = center
    half = size / 2.0
    c = color_rgba(color)
    return (
        Vertex((x, y - half), c),
        Vertex((x - half, y + half), c),
        Vertex((x + half, y + half), c),
    )


# =============================================================================
# Draw Commands
# =============================================================================

@dataclass(frozen=True)
class DrawTriangle:
    vertices: Tuple[Vertex, Vertex, Vertex]


@dataclass(frozen=True)
class DrawRect:
    """Axis-aligned filled rectangle between two corners."""
    a0: Tuple[float, float]
    a1: Tuple[float, float]
    color: RGBA

    @property
    def width(self) -> float:
        return abs(self.a1[0] - self.a0[0])

    @property
    def height(self) -> float:
        return abs(self.a1[1] - self.a0[1])

    @property
    def center_x(self) -> float:
        return (self.a0[0] + self.a1[0]) / 2.0


# =============================================================================
# Draw Batch
# =============================================================================

@dataclass
class DrawBatch:
    """Ordered primitives for one frame. Draw order is submission order."""
    triangles: List[DrawTriangle] = field(default_factory=list)
    rects: List[DrawRect] = field(default_factory=list)
    clear_color: Optional[RGBA] = None

    # Submission order across both kinds: ('t' | 'r', index)
    _order: List[Tuple[str, int]] = field(default_factory=list)

    def clear(self, color: Color):
        """Set the color the frame is cleared to before drawing."""
        self.clear_color = color_rgba(color)

    def render_triangle(self, vertices: Tuple[Vertex, Vertex, Vertex]):
        self._order.append(('t', len(self.triangles)))
        self.triangles.append(DrawTriangle(tuple(vertices)))

    def render_rect(self, a0: Tuple[float, float], a1: Tuple[float, float], color: Color):
        self._order.append(('r', len(self.rects)))
        self.rects.append(DrawRect(
            (float(a0[0]), float(a0[1])),
            (float(a1[0]), float(a1[1])),
            color_rgba(color),
        ))

    def commands(self):
        """Iterate primitives in submission order."""
        for kind, i in self._order:
            yield self.triangles[i] if kind == 't' else self.rects[i]

    def reset(self):
        """Drop all primitives, keep the clear color."""
        self.triangles.clear()
        self.rects.clear()
        self._order.clear()

    @property
    def total_vertices(self) -> int:
        """Vertices needed: 3 per triangle, 6 per rect (two triangles)."""
        return len(self.triangles) * 3 + len(self.rects) * 6
