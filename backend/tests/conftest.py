import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from scorekeeper.scoring import bowling  # noqa: E402


@pytest.fixture
def frames():
    return bowling.new_frames()


@pytest.fixture
def bowl():
    """Roll every pin count in ``rolls`` through the engine, in order."""

    def _bowl(frames, rolls):
        for pins in rolls:
            bowling.roll(frames, pins)
        return frames

    return _bowl
