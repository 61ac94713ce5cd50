"""
Note messages in the MiOSC convention.

    /miosc/on  ,iff  channel pitch velocity
    /miosc/off ,i    channel

Pitch is a continuous index (12 per octave by default), not a MIDI note.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from pythonosc.osc_message import OscMessage
from pythonosc.osc_message_builder import OscMessageBuilder

ADDRESS_NOTE_ON = '/miosc/on'
ADDRESS_NOTE_OFF = '/miosc/off'


@dataclass(frozen=True)
class NoteOn:
    channel: int
    pitch: float
    velocity: float

    def to_osc(self) -> OscMessage:
        builder = OscMessageBuilder(address=ADDRESS_NOTE_ON)
        builder.add_arg(self.channel, OscMessageBuilder.ARG_TYPE_INT)
        builder.add_arg(self.pitch, OscMessageBuilder.ARG_TYPE_FLOAT)
        builder.add_arg(self.velocity, OscMessageBuilder.ARG_TYPE_FLOAT)
        return builder.build()


@dataclass(frozen=True)
class NoteOff:
    channel: int

    def to_osc(self) -> OscMessage:
        builder = OscMessageBuilder(address=ADDRESS_NOTE_OFF)
        builder.add_arg(self.channel, OscMessageBuilder.ARG_TYPE_INT)
        return builder.build()


NoteMessage = Union[NoteOn, NoteOff]


def from_osc(message: OscMessage) -> NoteMessage:
    """Decode a received MiOSC note message."""
    params = message.params
    if message.address == ADDRESS_NOTE_ON and len(params) == 3:
        return NoteOn(channel=params[0], pitch=params[1], velocity=params[2])
    if message.address == ADDRESS_NOTE_OFF and len(params) == 1:
        return NoteOff(channel=params[0])
    raise ValueError(f"Not a MiOSC note message: {message.address} {params}")
