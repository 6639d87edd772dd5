"""
Tests for the fixed-step trajectory driver.
"""

import numpy as np
import pytest
from move_towards.config import MoveTowardsConfiguration
from move_towards.interpolation import InterpolationMode
from move_towards.trajectory import TRAJECTORY_COLUMNS, compare_modes, simulate_trajectory


@pytest.fixture
def config():
    return MoveTowardsConfiguration(update_rate=0.1, acceleration=5.0)


class TestSimulateTrajectory:
    """Test single-mode trajectories."""

    def test_frame_layout(self, config):
        df = simulate_trajectory(0.0, 10.0, config, steps=40)

        assert list(df.columns) == TRAJECTORY_COLUMNS
        assert len(df) == 41
        assert all(df[col].dtype == np.float64 for col in TRAJECTORY_COLUMNS)
        assert df.iloc[0].tolist() == [0.0, 10.0, 0.0, 0.0]
        assert df["t"].iloc[-1] == pytest.approx(4.0)

    def test_physics_reaches_target(self, config):
        """Reference scenario through the driver."""
        df = simulate_trajectory(0.0, 10.0, config, steps=40)

        assert df["position"].max() <= 10.0
        assert df["position"].iloc[-1] == pytest.approx(10.0, abs=1e-3)
        assert df["velocity"].iloc[-1] == 0.0

    def test_physics_acceleration_bounded(self, config):
        df = simulate_trajectory(-3.0, 12.0, config, steps=80, velocity=-2.0)
        dv = np.abs(np.diff(df["velocity"].to_numpy()))
        assert np.all(dv <= config.acceleration * config.update_rate + 1e-9)

    def test_moving_target_column(self, config):
        """The target advances by rate * dt before every step."""
        df = simulate_trajectory(0.0, 1.0, config, steps=10, target_rate=0.5)
        expected = 1.0 + 0.05 * np.arange(11)
        np.testing.assert_allclose(df["target"].to_numpy(), expected)

    def test_rigidbody_stays_near_target(self):
        """Force mode with an Euler integrator ends close to the target."""
        config = MoveTowardsConfiguration(update_rate=0.02, acceleration=5.0, mode="rigidbody")
        df = simulate_trajectory(0.0, 10.0, config, steps=400)

        assert df["position"].iloc[-1] == pytest.approx(10.0, abs=0.05)
        assert abs(df["velocity"].iloc[-1]) < 0.5
        assert df["position"].max() < 10.05

    def test_zero_steps(self, config):
        df = simulate_trajectory(2.0, 5.0, config, steps=0)
        assert len(df) == 1

    def test_negative_steps_rejected(self, config):
        with pytest.raises(ValueError):
            simulate_trajectory(0.0, 1.0, config, steps=-1)


class TestCompareModes:
    """Test stacking of per-mode trajectories."""

    def test_all_modes(self, config):
        df = compare_modes(0.0, 10.0, config, steps=20)

        assert len(df) == len(InterpolationMode) * 21
        assert set(df["mode"]) == {mode.value for mode in InterpolationMode}

    def test_selected_modes(self, config):
        df = compare_modes(0.0, 10.0, config, steps=5, modes=["lerp", InterpolationMode.PHYSICS])

        assert list(df["mode"].unique()) == ["lerp", "physics"]
        physics = df[df["mode"] == "physics"]
        expected = simulate_trajectory(0.0, 10.0, config, steps=5)
        np.testing.assert_allclose(physics["position"].to_numpy(), expected["position"].to_numpy())

    def test_original_config_untouched(self, config):
        compare_modes(0.0, 10.0, config, steps=2, modes=["smooth_damp"])
        assert config.mode is InterpolationMode.PHYSICS
