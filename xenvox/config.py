# xenvox/config.py
"""
Configuration

Every layout constant, color, endpoint and timing value in one place.
Defaults are the stock XenVox layout, palette and endpoint.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from .ui.style import RGBA, hex_to_color


@dataclass
class TreeConfig:
    layers: int = 8                 # Layers added below the 3/2 root
    glyph_size: float = 8.0         # Triangle glyph edge, px
    vertical_scale: float = 0.90    # Fraction of height used by the tree
    vertical_offset: float = 0.05   # Top margin as a fraction of that span
    colors: Tuple[RGBA, RGBA] = (
        hex_to_color('#343d46'),
        hex_to_color('#bf616a'),
    )


@dataclass
class GridConfig:
    edos: Tuple[int, ...] = (12, 31, 53)
    tick_width: float = 2.0         # px
    header_divisor: float = 24.0    # Header band = height / header_divisor
    colors: Tuple[RGBA, RGBA, RGBA] = (
        hex_to_color('#4f5b66'),
        hex_to_color('#bf616a'),
        hex_to_color('#8fa1b3'),
    )


@dataclass
class CursorConfig:
    octave_units: float = 12.0      # Pitch index span of the full width
    half_width_divisor: float = 240.0
    color: RGBA = hex_to_color('#ebcb8b')
    alpha: float = 0.7


@dataclass
class OscConfig:
    """Fixed destination of note messages. Not changed while running."""
    host: str = '127.0.0.1'
    port: int = 3579
    channel: int = 1
    velocity: float = 0.5


@dataclass
class WindowConfig:
    title: str = 'XenVox'
    size: Tuple[int, int] = (960, 600)
    samples: int = 8
    vsync: bool = True
    gl_version: Tuple[int, int] = (3, 3)
    backend: str = 'pyglet'
    background: RGBA = hex_to_color('#eff1f5')


@dataclass
class LoopConfig:
    frame_interval: float = 0.010   # Sleep after each iteration, seconds


@dataclass
class AppConfig:
    tree: TreeConfig = field(default_factory=TreeConfig)
    grid: GridConfig = field(default_factory=GridConfig)
    cursor: CursorConfig = field(default_factory=CursorConfig)
    osc: OscConfig = field(default_factory=OscConfig)
    window: WindowConfig = field(default_factory=WindowConfig)
    loop: LoopConfig = field(default_factory=LoopConfig)

    def validate(self) -> 'AppConfig':
        """Raise ValueError on values the model cannot represent."""
        if self.tree.layers < 0:
            raise ValueError(f"Layer count must be >= 0, got {self.tree.layers}")
        if not self.grid.edos:
            raise ValueError("At least one EDO is required")
        for edo in self.grid.edos:
            if edo <= 0:
                raise ValueError(f"EDO division counts must be positive, got {edo}")
        w, h = self.window.size
        if w <= 0 or h <= 0:
            raise ValueError(f"Window size must be positive, got {w}x{h}")
        if self.loop.frame_interval < 0:
            raise ValueError("Frame interval must be >= 0")
        return self
