import math

import pytest

from wmm_sim.utils.helpers import clamp, distance, polar_offset


@pytest.mark.parametrize("value, expected", [(-5.0, 0.0), (0.0, 0.0), (3.0, 3.0), (12.0, 10.0)])
def test_clamp(value, expected):
    assert clamp(value, 0.0, 10.0) == expected


def test_distance():
    assert distance((0.0, 0.0), (3.0, 4.0)) == 5.0


def test_polar_offset_frames():
    up = polar_offset((10.0, 10.0), 5.0, math.pi / 2)
    screen_up = polar_offset((10.0, 10.0), 5.0, math.pi / 2, y_down=True)
    assert up == pytest.approx((10.0, 15.0))
    assert screen_up == pytest.approx((10.0, 5.0))
