"""Shared fixtures for Color Ambience tests."""

from __future__ import annotations

import pytest

from capture.region import Rectangle
from helpers import FakeScreenBounds


@pytest.fixture
def screen() -> FakeScreenBounds:
    return FakeScreenBounds(Rectangle(0, 0, 1920, 1080), Rectangle(-1920, 0, 3840, 1080))
