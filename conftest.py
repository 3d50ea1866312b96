import threading

import numpy as np
import pytest

from shared_state import SharedState

TWO_FACES = [(20, 30, 80, 80), (200, 120, 120, 100)]


class FakeDetector:
    def __init__(self, regions=()):
        self.regions = list(regions)
        self.calls = 0
        self.lock_held = []
        self.state = None

    def detect(self, gray):
        self.calls += 1
        assert gray.ndim == 2
        if self.state is not None:
            self.lock_held.append(self.state.lock.locked())
        return list(self.regions)


class FakeCapture:
    def __init__(self, frames):
        self.frames = list(frames)
        self.released = False

    def read(self):
        if not self.frames:
            return False, None
        return True, self.frames.pop(0)

    def isOpened(self):
        return True

    def release(self):
        self.released = True


class FakeDisplay:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.shown = []
        self.closed = []
        self.main_thread_shows = []

    def show(self, title, image):
        self.shown.append((title, image.copy()))
        self.main_thread_shows.append(threading.current_thread() is threading.main_thread())

    def wait_key(self, delay):
        return self.keys.pop(0) if self.keys else 255

    def close(self, title=None):
        self.closed.append(title)


def make_frame():
    frame = np.zeros((480, 640, 3), np.uint8)
    frame[:, :, 1] = np.arange(640, dtype=np.uint16) % 256
    return frame


@pytest.fixture
def state():
    return SharedState()


@pytest.fixture
def capture_dir(tmp_path):
    d = tmp_path / "images"
    d.mkdir()
    return d


@pytest.fixture
def display():
    return FakeDisplay()


@pytest.fixture
def frame():
    return make_frame()
