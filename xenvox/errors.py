"""
Error taxonomy.

StartupFailure is fatal and never retried. TransportFailure covers a single
datagram and is logged and dropped by the dispatcher.
"""


class XenvoxError(Exception):
    """Base class for all xenvox errors."""


class StartupFailure(XenvoxError):
    """Window, GL context, shader or transport endpoint could not be created."""


class TransportFailure(XenvoxError):
    """A note message could not be encoded or sent."""
