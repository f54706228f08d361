from wmm_sim.envs import WmmSimConfig
from wmm_sim.visualization.canvas import WmmCanvas
from wmm_sim.visualization.scene import SceneConfig
from wmm_sim.visualization.visualizer import WmmVisualizer


def _narrow_canvas():
    return WmmCanvas(config=SceneConfig(surface_height=200.0, width_fraction=0.5))


def test_window_sized_from_given_canvas():
    viewer = WmmVisualizer(cfg=WmmSimConfig(container_width=1000.0), canvas=_narrow_canvas())
    assert viewer._initial_window_size() == (500, 200)


def test_window_sized_from_cfg_without_canvas():
    viewer = WmmVisualizer(cfg=WmmSimConfig(container_width=1000.0))
    assert viewer._initial_window_size() == (800, 300)
    assert viewer.canvas.config == viewer.cfg.scene


def test_resize_uses_canvas_config(monkeypatch):
    viewer = WmmVisualizer(cfg=WmmSimConfig(), canvas=_narrow_canvas())
    opened = []
    monkeypatch.setattr(viewer, "_open_window", lambda w, h: opened.append((w, h)))
    viewer._on_resize(600)
    assert opened == [(600, 200)]
    assert viewer.canvas.viewport.width == 600.0
