import os
import sys
import tempfile
from pathlib import Path

# Ensure repository root is on sys.path for module imports (app, dinorun)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless / test mode environment variables
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("DINORUN_TESTING", "1")
# Keep the settings singleton from writing into the working tree
os.environ.setdefault("DINORUN_SETTINGS_FILE", os.path.join(tempfile.mkdtemp(prefix="dinorun-"), "settings.json"))

import pytest  # noqa: E402


class RecordingRenderer:
    """Render port fake that records every command."""

    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def draw_image(self, image, x, y, width, height):
        self.calls.append(("image", image, x, y, width, height))

    def draw_text(self, text, x, y, size, color):
        self.calls.append(("text", text))

    def images(self):
        return [c[1] for c in self.calls if c[0] == "image"]

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]

    def reset(self):
        self.calls.clear()


class MemoryHighScores:
    def __init__(self, value=0):
        self.value = value
        self.writes = []

    def get_high_score(self):
        return self.value

    def set_high_score(self, value):
        self.writes.append(value)
        self.value = value


class FixedRNG:
    """Deterministic stand-in for RNGService: fixed interval, first catalog entry."""

    def __init__(self, interval=1000):
        self.interval = interval

    def randint(self, a, b):
        return max(a, min(b, self.interval))

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def high_scores():
    return MemoryHighScores()
