"""
MglwHost - moderngl-window backed event source and display.

The window library calls back into the host while buffers are swapped; the
host turns each callback into an input event on a FIFO queue. poll() shows
the last presented frame, swaps (which pumps the callbacks) and hands the
queued events to the loop in arrival order.
"""

from __future__ import annotations
from collections import deque
from typing import Deque, List, Optional, TYPE_CHECKING
import logging

import moderngl_window as mglw

from ..errors import StartupFailure
from ..ui.renderer import GLRenderer
from .events import Closed, CursorMoved, Event, Other, PointerPress, PointerRelease, Resized

if TYPE_CHECKING:
    from ..config import WindowConfig

logger = logging.getLogger(__name__)


class MglwHost:

    def __init__(self, window, renderer: Optional[GLRenderer] = None):
        self.window = window
        self.renderer = renderer
        self._queue: Deque[Event] = deque()
        self._closed_sent = False
        self._install_callbacks()

    @classmethod
    def create(cls, config: 'WindowConfig') -> MglwHost:
        """Open the window and build the GL renderer. Any failure is fatal."""
        try:
            window_cls = mglw.get_local_window_cls(config.backend)
            window = window_cls(
                title=config.title,
                size=config.size,
                gl_version=config.gl_version,
                vsync=config.vsync,
                samples=config.samples,
                resizable=True,
            )
            mglw.activate_context(window=window)
            renderer = GLRenderer(window.ctx, window.size, window.pixel_ratio)
            renderer.redisplay()
        except Exception as e:
            raise StartupFailure(f"Cannot create {config.backend} window: {e}") from e

        logger.info(
            "Window '%s' %dx%d (%s, GL %s)",
            config.title, *window.size, config.backend, window.ctx.info.get("GL_VERSION", "?"),
        )
        return cls(window, renderer)

    # -------------------------------------------------------------------------
    # Backend callbacks
    # -------------------------------------------------------------------------

    def _install_callbacks(self):
        w = self.window
        w.close_func = self._on_close
        w.resize_func = self._on_resize
        w.mouse_position_event_func = self._on_mouse_position
        w.mouse_drag_event_func = self._on_mouse_position
        w.mouse_press_event_func = self._on_mouse_press
        w.mouse_release_event_func = self._on_mouse_release
        w.mouse_scroll_event_func = self._on_other('scroll')
        w.key_event_func = self._on_other('key')
        w.unicode_char_entered_func = self._on_other('char')
        w.iconify_func = self._on_other('iconify')

    def _on_close(self):
        self._push_closed()

    def _on_resize(self, width: int, height: int):
        self._queue.append(Resized(float(width), float(height)))

    def _on_mouse_position(self, x: int, y: int, dx: int, dy: int):
        self._queue.append(CursorMoved(float(x), float(y)))

    def _on_mouse_press(self, x: int, y: int, button: int):
        self._queue.append(PointerPress(button))

    def _on_mouse_release(self, x: int, y: int, button: int):
        self._queue.append(PointerRelease(button))

    def _on_other(self, kind: str):
        def handler(*args, **kwargs):
            self._queue.append(Other(kind))
        return handler

    def _push_closed(self):
        if not self._closed_sent:
            self._closed_sent = True
            self._queue.append(Closed())

    # -------------------------------------------------------------------------
    # Event source
    # -------------------------------------------------------------------------

    def poll(self) -> List[Event]:
        if self.renderer is not None:
            self.renderer.redisplay()
        self.window.swap_buffers()

        if self.window.is_closing:
            self._push_closed()

        events = list(self._queue)
        self._queue.clear()
        return events

    def destroy(self):
        if self.renderer is not None:
            self.renderer.release()
        self.window.destroy()
