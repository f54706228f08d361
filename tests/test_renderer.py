import numpy as np
import pytest

from wmm_sim.robots.rig import BasePose
from wmm_sim.utils.constants import (
    COLOR_BACKGROUND,
    COLOR_BASE,
    COLOR_FINGER_1,
    COLOR_FINGER_2,
    COLOR_LINK_1,
    COLOR_LINK_2,
    COLOR_WHEEL,
)
from wmm_sim.visualization.renderer import SurfaceUnavailable, render_scene
from wmm_sim.visualization.scene import compose_scene
from wmm_sim.visualization.surfaces import NumpySurface, PygameSurface


@pytest.fixture
def scene(scene_config, viewport):
    return compose_scene(BasePose(350.0, 210.0), scene_config, viewport)


def test_render_order(recording_surface, scene):
    render_scene(recording_surface, scene)
    assert recording_surface.kinds == [
        "clear",
        "stroke_line",
        "fill_rect",
        "stroke_rect",
        "fill_circle",
        "fill_circle",
        "stroke_line",
        "stroke_line",
        "stroke_line",
        "stroke_line",
        "stroke_line",
    ]
    assert recording_surface.calls[0] == ("clear", COLOR_BACKGROUND)


def test_every_render_starts_from_a_clear(recording_surface, scene):
    render_scene(recording_surface, scene)
    render_scene(recording_surface, scene)
    assert recording_surface.kinds.count("clear") == 2
    assert recording_surface.kinds[11] == "clear"


def _pixel(surface, x, y):
    return tuple(int(c) for c in surface.canvas[y, x])


def test_numpy_surface_draws_rig(scene):
    surface = NumpySurface(800, 300)
    render_scene(surface, scene)
    assert surface.canvas.shape == (300, 800, 3)
    assert surface.canvas.dtype == np.uint8
    assert _pixel(surface, 5, 5) == COLOR_BACKGROUND
    assert _pixel(surface, 400, 230) == COLOR_BASE
    assert _pixel(surface, 360, 255) == COLOR_WHEEL
    assert _pixel(surface, 429, 180) == COLOR_LINK_1
    assert _pixel(surface, 470, 149) == COLOR_LINK_2
    assert _pixel(surface, 520, 209) == COLOR_FINGER_1
    assert _pixel(surface, 500, 209) == COLOR_FINGER_2
    assert _pixel(surface, 100, 259) == (0, 0, 0)


def test_numpy_surface_clips_offscreen_primitives():
    surface = NumpySurface(20, 10)
    surface.clear((1, 2, 3))
    surface.stroke_line((-50.0, -50.0), (-10.0, -5.0), (255, 0, 0))
    surface.fill_circle((100.0, 100.0), 5.0, (255, 0, 0))
    surface.fill_rect(30.0, 0.0, 10.0, 10.0, (255, 0, 0))
    assert (surface.canvas == (1, 2, 3)).all()


def test_numpy_surface_zero_length_line_is_a_dot():
    surface = NumpySurface(10, 10)
    surface.stroke_line((5.0, 5.0), (5.0, 5.0), (9, 9, 9))
    assert _pixel(surface, 5, 5) == (9, 9, 9) or _pixel(surface, 4, 4) == (9, 9, 9)
    assert _pixel(surface, 0, 0) == (0, 0, 0)


def test_unattached_pygame_surface_is_unavailable(scene):
    surface = PygameSurface()
    with pytest.raises(SurfaceUnavailable):
        surface.clear(COLOR_BACKGROUND)
    with pytest.raises(SurfaceUnavailable):
        render_scene(surface, scene)
