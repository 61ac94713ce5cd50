# xenvox/app/loop.py
"""
UpdateLoop - single-threaded poll / reduce / redraw cycle.

Each iteration drains every queued input event in arrival order, reduces
them one by one against the Model, executes the resulting effects, then
redraws at most once. Sending a note is a blocking call made inline; a slow
send delays the rest of the iteration.
"""

from __future__ import annotations
from typing import Iterable, List, Protocol, Tuple, TYPE_CHECKING
import logging
import time

from .events import Effect, Event, Redraw, ResizeTarget, Shutdown, Transmit
from .model import Model, draw_model, reduce

if TYPE_CHECKING:
    from ..osc.dispatcher import MessageDispatcher
    from ..ui.draw import ScreenSize

logger = logging.getLogger(__name__)


class EventSource(Protocol):
    def poll(self) -> List[Event]: ...


class Renderer(Protocol):
    def clear(self, color) -> None: ...
    def render_triangle(self, vertices) -> None: ...
    def render_rect(self, a0, a1, color) -> None: ...
    def present(self, screen_size: 'ScreenSize') -> None: ...
    def notify_resize(self, size: Tuple[float, float]) -> None: ...


class UpdateLoop:
    """Owns the Model for the lifetime of the loop."""

    def __init__(self, model: Model, events: EventSource, renderer: Renderer,
                 dispatcher: 'MessageDispatcher'):
        self.model = model
        self.events = events
        self.renderer = renderer
        self.dispatcher = dispatcher

        self.running = True
        self.needs_redraw = True
        self.iterations = 0
        self.frames = 0

    def step(self, events: Iterable[Event]) -> bool:
        """
        Process one batch of events. False once the loop has shut down.

        Events queued after Closed are not applied; the frame is still
        repainted once before the loop ends.
        """
        for event in events:
            self.model, effects = reduce(self.model, event, self.dispatcher)
            self._execute(effects)
            if not self.running:
                break

        if self.needs_redraw:
            self.redraw()
        return self.running

    def _execute(self, effects: List[Effect]):
        """The I/O boundary: everything the reducer asked for happens here."""
        for effect in effects:
            if isinstance(effect, Transmit):
                self.dispatcher.send(effect.message)
            elif isinstance(effect, ResizeTarget):
                self.renderer.notify_resize(effect.size)
            elif isinstance(effect, Redraw):
                self.needs_redraw = True
            elif isinstance(effect, Shutdown):
                logger.info("Window closed, stopping loop")
                self.running = False

    def redraw(self):
        config = self.model.config
        self.renderer.clear(config.window.background)
        draw_model(self.model, self.renderer)
        self.renderer.present(self.model.screen)
        self.needs_redraw = False
        self.frames += 1

    def run(self) -> int:
        """Loop until a Closed event arrives. Returns the iteration count."""
        interval = self.model.config.loop.frame_interval
        logger.info(
            "Loop started: tree depth=%d, edos=%s, screen=%dx%d",
            self.model.tree.depth, list(self.model.grid.edos),
            self.model.screen.width, self.model.screen.height,
        )
        while self.running:
            self.iterations += 1
            if not self.step(self.events.poll()):
                break
            time.sleep(interval)
        logger.info("Loop finished after %d iterations, %d frames", self.iterations, self.frames)
        return self.iterations
