# xenvox/__init__.py
"""
XenVox - just-intonation pitch controller.

Core components:
- RatioTree: Stern-Brocot mediant tree over one octave
- EdoGrid: equal-division reference ticks
- PitchCursor: horizontal position to pitch index
- MessageDispatcher: note on/off as MiOSC datagrams
- Model / reduce / UpdateLoop: single-threaded event cycle
"""

from .core import Rational, mediant
from .tuning import RatioTree, RatioNode, EdoGrid, BandLayout
from .ui import PitchCursor, DrawBatch, ScreenSize
from .osc import MessageDispatcher, NoteOn, NoteOff
from .app import Model, reduce, draw_model, UpdateLoop
from .config import AppConfig
from .errors import XenvoxError, StartupFailure, TransportFailure

__version__ = '0.1.0'

__all__ = [
    # Core
    'Rational', 'mediant',
    # Tuning
    'RatioTree', 'RatioNode', 'EdoGrid', 'BandLayout',
    # UI
    'PitchCursor', 'DrawBatch', 'ScreenSize',
    # OSC
    'MessageDispatcher', 'NoteOn', 'NoteOff',
    # App
    'Model', 'reduce', 'draw_model', 'UpdateLoop',
    # Config / errors
    'AppConfig', 'XenvoxError', 'StartupFailure', 'TransportFailure',
]
