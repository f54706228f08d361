"""Shared fixtures for the wmm_sim test-suite."""

from __future__ import annotations

from typing import List, Tuple

import pytest

from wmm_sim.robots.rig import BaseDimensions, LinkLengths, Viewport
from wmm_sim.visualization.scene import SceneConfig


class RecordingSurface:
    """Drawing surface that records every call instead of drawing."""

    def __init__(self, width: int = 800, height: int = 300) -> None:
        self.width = width
        self.height = height
        self.calls: List[Tuple] = []

    @property
    def size(self):
        return self.width, self.height

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("fill_rect", x, y, width, height, color))

    def stroke_rect(self, x, y, width, height, color):
        self.calls.append(("stroke_rect", x, y, width, height, color))

    def fill_circle(self, center, radius, color):
        self.calls.append(("fill_circle", center, radius, color))

    def stroke_line(self, start, end, color):
        self.calls.append(("stroke_line", start, end, color))

    @property
    def kinds(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def links() -> LinkLengths:
    return LinkLengths(60.0, 80.0, 60.0)


@pytest.fixture
def base() -> BaseDimensions:
    return BaseDimensions(width=100.0, height=40.0, wheel_radius=10.0)


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(width=800.0, height=300.0, ground_offset=40.0)


@pytest.fixture
def scene_config() -> SceneConfig:
    return SceneConfig()


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()
