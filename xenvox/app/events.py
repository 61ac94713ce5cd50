"""
Input events and effects.

Events come from the window host, one per backend callback, in arrival
order. Effects are what the reducer asks the outside world to do; they are
executed by UpdateLoop and nowhere else.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..osc.messages import NoteMessage


# =============================================================================
# Input Events
# =============================================================================

@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class CursorMoved:
    x: float
    y: float = 0.0


@dataclass(frozen=True)
class PointerPress:
    button: Optional[int] = None


@dataclass(frozen=True)
class PointerRelease:
    button: Optional[int] = None


@dataclass(frozen=True)
class Resized:
    width: float
    height: float


@dataclass(frozen=True)
class Other:
    """Anything the model does not act on (keys, scroll, focus...)."""
    kind: str = ''


Event = Union[Closed, CursorMoved, PointerPress, PointerRelease, Resized, Other]


# =============================================================================
# Effects
# =============================================================================

@dataclass(frozen=True)
class Transmit:
    message: NoteMessage


@dataclass(frozen=True)
class ResizeTarget:
    size: Tuple[float, float]


@dataclass(frozen=True)
class Redraw:
    pass


@dataclass(frozen=True)
class Shutdown:
    pass


Effect = Union[Transmit, ResizeTarget, Redraw, Shutdown]
