from __future__ import annotations

import pytest

from openmeasure import Circle, Registry, Square
from tests.helpers import RecordingChannel


@pytest.fixture
def registry() -> Registry:
    return Registry([Square(10), Circle(5)])


@pytest.fixture
def recording_channel() -> RecordingChannel:
    return RecordingChannel()
