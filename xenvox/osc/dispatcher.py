"""
MessageDispatcher - cursor transitions to OSC datagrams.

Building a message is pure: press() reads the cursor, release() reads
nothing. send() is the only I/O and goes through one long-lived UDP
endpoint. A failed datagram is logged and dropped; it is never retried.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING
import logging

from pythonosc.osc_message_builder import BuildError
from pythonosc.udp_client import UDPClient

from ..errors import StartupFailure, TransportFailure
from .messages import NoteMessage, NoteOff, NoteOn

if TYPE_CHECKING:
    from pythonosc.osc_message import OscMessage
    from ..config import OscConfig
    from ..ui.cursor import PitchCursor

logger = logging.getLogger(__name__)


class OscTransport:
    """One UDP endpoint reused for every datagram."""

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port
        try:
            self._client = UDPClient(host, port)
        except OSError as e:
            raise StartupFailure(f"Cannot open OSC endpoint to {host}:{port}: {e}") from e

    def send(self, message: 'OscMessage'):
        try:
            self._client.send(message)
        except OSError as e:
            raise TransportFailure(f"Send to {self.host}:{self.port} failed: {e}") from e


class MessageDispatcher:
    """
    Usage:
        dispatcher = MessageDispatcher(config.osc)

        msg = dispatcher.press(cursor, screen_width, octave_units)
        dispatcher.send(msg)
        dispatcher.send(dispatcher.release())
    """

    def __init__(self, config: 'OscConfig', transport=None):
        self.config = config
        if transport is None:
            transport = OscTransport(config.host, config.port)
            logger.info("OSC endpoint ready: %s:%d", config.host, config.port)
        self.transport = transport
        self.sent = 0
        self.dropped = 0
        self.last_sent: Optional[NoteMessage] = None

    def press(self, cursor: 'PitchCursor', screen_width: float,
              octave_units: float = 12.0) -> NoteOn:
        return NoteOn(
            channel=self.config.channel,
            pitch=cursor.pitch(screen_width, octave_units),
            velocity=self.config.velocity,
        )

    def release(self) -> NoteOff:
        return NoteOff(channel=self.config.channel)

    def send(self, message: NoteMessage) -> bool:
        """Encode and transmit one message. False if it was dropped."""
        try:
            try:
                packet = message.to_osc()
            except BuildError as e:
                raise TransportFailure(f"Cannot encode {message}: {e}") from e
            self.transport.send(packet)
        except TransportFailure as e:
            self.dropped += 1
            logger.warning("Dropped note message: %s", e)
            return False

        self.sent += 1
        self.last_sent = message
        logger.debug("Sent %s", message)
        return True
