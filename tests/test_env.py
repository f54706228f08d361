import numpy as np
import pytest

from wmm_sim.envs import WmmSimConfig, WmmSimEnv


@pytest.fixture
def env():
    return WmmSimEnv(WmmSimConfig(episode_length=3))


def test_reset_returns_rest_pose(env):
    obs, info = env.reset(seed=0)
    assert obs["pixels"].shape == (300, 800, 3)
    assert obs["pixels"].dtype == np.uint8
    np.testing.assert_allclose(obs["agent_pos"], [350.0, 210.0, 510.0, 210.0], atol=1e-3)
    assert info["step"] == 0
    assert env.observation_space.contains(obs)


@pytest.mark.parametrize("click_x, base_x", [(10.0, 0.0), (790.0, 700.0), (400.0, 350.0)])
def test_step_clicks_base(env, click_x, base_x):
    env.reset()
    obs, reward, terminated, truncated, info = env.step(np.array([click_x], dtype=np.float32))
    assert obs["agent_pos"][0] == pytest.approx(base_x)
    assert obs["agent_pos"][1] == pytest.approx(210.0)
    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert info["base_pose"].x == pytest.approx(base_x)


def test_episode_truncates(env):
    env.reset()
    results = [env.step(np.array([100.0]))[3] for _ in range(3)]
    assert results == [False, False, True]


def test_reset_recentres_base(env):
    env.reset()
    env.step(np.array([10.0]))
    obs, _ = env.reset()
    assert obs["agent_pos"][0] == pytest.approx(350.0)


def test_state_only_observation():
    env = WmmSimEnv(WmmSimConfig(obs_type="agent_pos"))
    obs, _ = env.reset()
    assert set(obs) == {"agent_pos"}
    assert env.render().shape == (300, 800, 3)


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        WmmSimConfig(container_width=0)


def test_render_mode_comes_from_config():
    env = WmmSimEnv(WmmSimConfig(render_mode="rgb_array"))
    assert env.render_mode == "rgb_array"


def test_unsupported_render_mode_rejected():
    with pytest.raises(ValueError):
        WmmSimConfig(render_mode="human")


def test_config_seed_drives_np_random():
    first = WmmSimEnv(WmmSimConfig(seed=7))
    second = WmmSimEnv(WmmSimConfig(seed=7))
    first.reset()
    second.reset()
    assert first.np_random.random() == second.np_random.random()


def test_explicit_reset_seed_overrides_config():
    env = WmmSimEnv(WmmSimConfig(seed=7))
    other = WmmSimEnv(WmmSimConfig(seed=8))
    env.reset(seed=3)
    other.reset(seed=3)
    assert env.np_random.random() == other.np_random.random()
