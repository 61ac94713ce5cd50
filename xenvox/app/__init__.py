from .events import (
    Closed, CursorMoved, PointerPress, PointerRelease, Resized, Other, Event,
    Transmit, ResizeTarget, Redraw, Shutdown, Effect,
)
from .model import Model, reduce, draw_model
from .loop import UpdateLoop

__all__ = [
    # Events
    'Closed', 'CursorMoved', 'PointerPress', 'PointerRelease', 'Resized', 'Other', 'Event',
    # Effects
    'Transmit', 'ResizeTarget', 'Redraw', 'Shutdown', 'Effect',
    # Model
    'Model', 'reduce', 'draw_model',
    # Loop
    'UpdateLoop',
]
