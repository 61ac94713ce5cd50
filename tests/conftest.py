import pytest

from xenvox.config import AppConfig, OscConfig
from xenvox.osc.dispatcher import MessageDispatcher
from xenvox.ui.draw import DrawBatch


class RecordingTransport:
    """Stands in for the UDP endpoint; keeps every packet it was handed."""

    def __init__(self):
        self.packets = []

    def send(self, message):
        self.packets.append(message)


class RecordingRenderer(DrawBatch):
    """DrawBatch with the present/resize half of the renderer surface."""

    def __init__(self):
        super().__init__()
        self.frames = []
        self.resizes = []

    def present(self, screen_size):
        self.frames.append({
            "screen_size": tuple(screen_size),
            "triangles": len(self.triangles),
            "rects": len(self.rects),
            "clear": self.clear_color,
        })
        self.reset()

    def notify_resize(self, size):
        self.resizes.append(tuple(size))


class ScriptedEvents:
    """Hands out one pre-recorded batch per poll, then empty batches."""

    def __init__(self, batches):
        self.batches = list(batches)
        self.polls = 0

    def poll(self):
        self.polls += 1
        if self.batches:
            return list(self.batches.pop(0))
        return []


@pytest.fixture
def config():
    cfg = AppConfig()
    cfg.loop.frame_interval = 0.0
    return cfg


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def dispatcher(transport):
    return MessageDispatcher(OscConfig(), transport)


@pytest.fixture
def renderer():
    return RecordingRenderer()
