import argparse

import numpy as np

import run_sim
from wmm_sim.envs import WmmSimConfig


def _args(**overrides):
    defaults = dict(
        mode="ik",
        container_width=1000.0,
        fps=30,
        click_x=None,
        target=[100.0, 50.0],
        output_dir="./sim_output",
        seed=0,
        log_level="WARNING",
    )
    defaults.update(overrides)
    return argparse.Namespace(**defaults)


def test_ik_mode_prints_angles(capsys):
    run_sim._run_ik(WmmSimConfig(), _args())
    out = capsys.readouterr().out
    assert "theta1=" in out
    assert "Forward check" in out


def test_ik_mode_reports_unreachable(capsys):
    run_sim._run_ik(WmmSimConfig(), _args(target=[500.0, 0.0]))
    assert "Unreachable" in capsys.readouterr().out


def test_render_mode_saves_frame(tmp_path):
    args = _args(mode="render", click_x=10.0, output_dir=str(tmp_path))
    run_sim._run_render(run_sim._build_config(args), args)
    frame = np.load(tmp_path / "frame.npy")
    assert frame.shape == (300, 800, 3)
