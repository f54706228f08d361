import math

import pytest

from wmm_sim.robots.rig import BasePose, JointAngles, LinkLengths, Viewport
from wmm_sim.utils.constants import (
    COLOR_FINGER_1,
    COLOR_FINGER_2,
    COLOR_LINK_1,
    COLOR_LINK_2,
    COLOR_LINK_3,
    COLOR_WHEEL,
)
from wmm_sim.visualization.scene import Circle, Rect, SceneConfig, Segment, compose_scene

REST = BasePose(350.0, 210.0)


def test_viewport_from_container_uses_eighty_percent(scene_config):
    vp = scene_config.viewport_for(1000.0)
    assert vp == Viewport(width=800.0, height=300.0, ground_offset=40.0)
    assert vp.ground_y == 260.0


def test_viewport_width_snaps_to_raster(scene_config, base):
    vp = scene_config.viewport_for(1001.0)
    assert vp.width == 801.0
    assert vp.size == (801, 300)
    assert vp.max_base_x(base) == vp.size[0] - base.width


@pytest.mark.parametrize(
    "angles, lengths",
    [
        ((math.pi / 2, 0.0, -math.pi / 2), (60.0, 80.0, 60.0)),
        ((0.0, 0.0, 0.0), (1.0, 1.0, 1.0)),
        ((10.0, -7.5, 100.0), (300.0, 0.5, 42.0)),
        ((-math.pi, 2 * math.pi, 3.3), (1e-3, 1e3, 5.0)),
    ],
)
def test_scene_is_total(viewport, angles, lengths):
    config = SceneConfig(joint_angles=JointAngles(*angles), link_lengths=LinkLengths(*lengths))
    scene = compose_scene(REST, config, viewport)
    assert len(scene.wheels) == 2 and all(isinstance(w, Circle) for w in scene.wheels)
    assert isinstance(scene.body, Rect)
    assert len(scene.links) == 3 and all(isinstance(s, Segment) for s in scene.links)
    assert len(scene.fingers) == 2 and all(isinstance(s, Segment) for s in scene.fingers)
    assert len(list(scene.primitives())) == 9


def test_links_form_a_chain(scene_config, viewport):
    scene = compose_scene(REST, scene_config, viewport)
    for link, following in zip(scene.links, scene.links[1:]):
        assert link.end == following.start
    assert scene.fingers[0].end == scene.end_effector
    assert scene.fingers[1].start == scene.end_effector


def test_default_rig_geometry(scene_config, viewport):
    scene = compose_scene(REST, scene_config, viewport)
    assert scene.body == Rect(350.0, 210.0, 100.0, 40.0, fill=(0, 0, 0), stroke=(0, 0, 0))
    assert [w.center for w in scene.wheels] == [(360.0, 250.0), (440.0, 250.0)]
    assert all(w.radius == 10.0 and w.fill == COLOR_WHEEL for w in scene.wheels)
    assert scene.links[0].start == (430.0, 210.0)
    assert scene.links[0].end == pytest.approx((430.0, 150.0))
    assert scene.links[1].end == pytest.approx((510.0, 150.0))
    assert scene.end_effector == pytest.approx((510.0, 210.0))
    assert scene.fingers[0].start == pytest.approx((525.0, 210.0))
    assert scene.fingers[1].end == pytest.approx((495.0, 210.0))
    assert scene.ground.start == (0.0, 260.0) and scene.ground.end == (800.0, 260.0)


def test_primitive_colours(scene_config, viewport):
    scene = compose_scene(REST, scene_config, viewport)
    assert [s.stroke for s in scene.links] == [COLOR_LINK_1, COLOR_LINK_2, COLOR_LINK_3]
    assert [s.stroke for s in scene.fingers] == [COLOR_FINGER_1, COLOR_FINGER_2]


def test_scene_follows_base_pose(scene_config, viewport):
    left = compose_scene(BasePose(0.0, 210.0), scene_config, viewport)
    right = compose_scene(BasePose(700.0, 210.0), scene_config, viewport)
    assert right.body.x - left.body.x == 700.0
    assert right.end_effector[0] - left.end_effector[0] == pytest.approx(700.0)
    assert right.end_effector[1] == pytest.approx(left.end_effector[1])
