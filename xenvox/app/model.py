# xenvox/app/model.py
"""
Model and reducer.

The Model is the single composite state: ratio tree, EDO grid, pitch cursor
and screen size. reduce() is the only place it changes. It never performs
I/O; note messages and render-target resizes come back as effects.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple, TYPE_CHECKING
import logging

from ..config import AppConfig
from ..tuning.grid import EdoGrid
from ..tuning.tree import RatioTree
from ..ui.cursor import PitchCursor
from ..ui.draw import ScreenSize
from .events import (
    Closed, CursorMoved, PointerPress, PointerRelease, Resized,
    Effect, Event, Redraw, ResizeTarget, Shutdown, Transmit,
)

if TYPE_CHECKING:
    from ..osc.dispatcher import MessageDispatcher
    from ..ui.draw import DrawBatch

logger = logging.getLogger(__name__)


@dataclass
class Model:
    tree: RatioTree
    grid: EdoGrid
    cursor: PitchCursor
    screen: ScreenSize
    config: AppConfig = field(default_factory=AppConfig)

    @classmethod
    def create(cls, config: AppConfig = None) -> Model:
        config = config or AppConfig()
        tree = RatioTree().set_layers_number(config.tree.layers)
        grid = EdoGrid(config.grid.edos)
        width, height = config.window.size
        return cls(
            tree=tree,
            grid=grid,
            cursor=PitchCursor(0.0),
            screen=ScreenSize(float(width), float(height)),
            config=config,
        )

    @property
    def pitch(self) -> float:
        return self.cursor.pitch(self.screen.width, self.config.cursor.octave_units)


def reduce(model: Model, event: Event, notes: 'MessageDispatcher') -> Tuple[Model, List[Effect]]:
    """
    Apply one input event.

    `notes` is only used to build messages; sending happens when the caller
    executes the returned Transmit effects.
    """
    if isinstance(event, Closed):
        return model, [Shutdown(), Redraw()]

    effects: List[Effect] = []

    if isinstance(event, CursorMoved):
        model.cursor.set_position(event.x)
    elif isinstance(event, PointerPress):
        if model.screen.width > 0:
            octave = model.config.cursor.octave_units
            effects.append(Transmit(notes.press(model.cursor, model.screen.width, octave)))
        else:
            # Minimised window: no axis to read a pitch from
            logger.debug("Press ignored, screen width is %s", model.screen.width)
    elif isinstance(event, PointerRelease):
        effects.append(Transmit(notes.release()))
    elif isinstance(event, Resized):
        model.screen = ScreenSize(float(event.width), float(event.height))
        effects.append(ResizeTarget(model.screen))

    # Every window event repaints, including ones with no state change
    effects.append(Redraw())
    return model, effects


def draw_model(model: Model, sink: 'DrawBatch'):
    """Grid first, tree over it, cursor on top."""
    config = model.config
    model.grid.draw(model.screen, sink, config.grid)
    model.tree.draw(model.screen, sink, config.tree)
    model.cursor.draw(model.screen, sink, config.cursor)
