"""
OSC Module
==========

Note-on/note-off output to an external synthesizer over UDP, encoded as
MiOSC messages with python-osc.

Quick Start:
    from xenvox.config import OscConfig
    from xenvox.osc import MessageDispatcher
    from xenvox.ui import PitchCursor

    dispatcher = MessageDispatcher(OscConfig())
    dispatcher.send(dispatcher.press(PitchCursor(480.0), 960.0))
    dispatcher.send(dispatcher.release())

Dependencies:
    pip install python-osc
"""

from .messages import NoteOn, NoteOff, NoteMessage, from_osc, ADDRESS_NOTE_ON, ADDRESS_NOTE_OFF
from .dispatcher import MessageDispatcher, OscTransport

__all__ = [
    'NoteOn',
    'NoteOff',
    'NoteMessage',
    'from_osc',
    'ADDRESS_NOTE_ON',
    'ADDRESS_NOTE_OFF',
    'MessageDispatcher',
    'OscTransport',
]
