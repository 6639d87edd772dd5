"""
Tests for the position-mode solver step.

Tests the bounded-acceleration move_towards function: convergence onto
stationary targets, the single-step arrival clamp, symmetry and tracking
of moving targets.
"""

import pytest
from move_towards.core import move_towards


def run_steps(position, target, velocity, acceleration, dt, steps):
    """Step repeatedly and return the list of (position, velocity) states."""
    states = [(position, velocity)]
    for _ in range(steps):
        position, velocity = move_towards(position, target, velocity, acceleration, dt)
        states.append((position, velocity))
    return states


class TestStationaryTarget:
    """Test convergence onto a target that does not move."""

    def test_reference_scenario(self):
        """0 -> 10 with a=5, dt=0.1 should settle within 40 steps."""
        states = run_steps(0.0, 10.0, 0.0, acceleration=5.0, dt=0.1, steps=40)
        position, velocity = states[-1]

        assert position == pytest.approx(10.0, abs=1e-3)
        assert velocity == 0.0
        assert max(p for p, _ in states) <= 10.0

    def test_first_step_accelerates(self):
        """Far from the target the whole step is spent accelerating."""
        result = move_towards(0.0, 10.0, 0.0, 5.0, 0.1)
        assert result.position == pytest.approx(0.025)
        assert result.velocity == pytest.approx(0.5)

    def test_negative_direction(self):
        """Approaching from above should never go below the target."""
        states = run_steps(10.0, -5.0, 0.0, acceleration=2.0, dt=0.05, steps=300)

        assert states[-1] == (-5.0, 0.0)
        assert min(p for p, _ in states) >= -5.0 - 1e-9

    def test_moving_away_turns_around(self):
        """Starting with velocity away from the target should brake, reverse and land."""
        states = run_steps(0.0, 10.0, -3.0, acceleration=5.0, dt=0.05, steps=200)

        assert min(p for p, _ in states) < 0.0
        assert max(p for p, _ in states) <= 10.0 + 1e-9
        assert states[-1] == (10.0, 0.0)

    def test_approach_with_reachable_speed(self):
        """Approaching fast, but slow enough to stop in time, should not overshoot."""
        # v^2 = 25 <= 2 * a * d = 100
        states = run_steps(0.0, 10.0, 5.0, acceleration=5.0, dt=0.02, steps=300)

        assert max(p for p, _ in states) <= 10.0 + 1e-9
        assert states[-1] == (10.0, 0.0)

    def test_acceleration_bound_respected(self):
        """Velocity should never change by more than a * dt in one step."""
        acceleration = 5.0
        dt = 0.1
        states = run_steps(0.0, 10.0, 0.0, acceleration, dt, steps=40)

        for (_, v0), (_, v1) in zip(states, states[1:]):
            assert abs(v1 - v0) <= acceleration * dt + 1e-9

    def test_overshoot_state_brakes_first(self):
        """Moving faster than the stopping speed should decelerate immediately."""
        # Stopping speed for d=1, a=5 is sqrt(10) ~ 3.16
        result = move_towards(0.0, 1.0, 4.0, 5.0, 0.1)
        assert result.velocity == pytest.approx(3.5)
        assert result.position == pytest.approx(0.375)


class TestSingleStepArrival:
    """Test the clamp used when the target is reached inside one step."""

    def test_clamps_to_target(self):
        """Arrival within dt should return the exact target and zero velocity."""
        # Arrival time is 2 * sqrt(0.01 / 5) ~ 0.089 s < dt
        result = move_towards(0.0, 0.01, 0.0, 5.0, 0.1)
        assert result.position == 0.01
        assert result.velocity == 0.0

    def test_clamps_when_moving(self):
        """A slow final approach should also land exactly."""
        result = move_towards(9.99, 10.0, 0.2, 5.0, 0.1)
        assert result == (10.0, 0.0)


class TestAtRest:
    """Test behaviour once the target has been reached."""

    def test_idempotent_at_rest(self):
        """Repeated calls at rest on the target should change nothing."""
        states = run_steps(3.0, 3.0, 0.0, acceleration=2.0, dt=0.02, steps=100)
        assert all(state == (3.0, 0.0) for state in states)

    def test_zero_everything(self):
        """Zero distance and zero velocity is a valid 'already arrived' input."""
        assert move_towards(0.0, 0.0, 0.0, 1.0, 1.0) == (0.0, 0.0)


class TestSymmetry:
    """Test odd symmetry about zero."""

    @pytest.mark.parametrize("distance", [0.01, 1.0, 10.0, 123.4])
    @pytest.mark.parametrize("dt", [0.02, 0.1, 0.5])
    def test_negated_target_negates_output(self, distance, dt):
        """Targets T and -T from rest should give exactly negated results."""
        pos_plus, vel_plus = move_towards(0.0, distance, 0.0, 5.0, dt)
        pos_minus, vel_minus = move_towards(0.0, -distance, 0.0, 5.0, dt)

        assert pos_minus == -pos_plus
        assert vel_minus == -vel_plus


class TestConsistency:
    """Test that returned velocity matches the returned positions."""

    @pytest.mark.parametrize(
        "current, target, velocity, dt",
        [
            (0.0, 100.0, 2.0, 0.1),   # accelerating for the whole step
            (0.0, 1.0, 0.0, 0.6),     # crosses the halfway time
            (0.0, 1.0, 4.0, 0.1),     # braking first (overshoot avoidance)
            (5.0, -20.0, 1.0, 0.25),  # target behind
        ],
    )
    def test_finite_difference_matches_velocity(self, current, target, velocity, dt):
        """(x(dt + h) - x(dt)) / h should approximate the returned velocity."""
        acceleration = 5.0
        h = 1e-4

        pos, vel = move_towards(current, target, velocity, acceleration, dt)
        pos_later, _ = move_towards(current, target, velocity, acceleration, dt + h)

        assert (pos_later - pos) / h == pytest.approx(vel, abs=acceleration * h * 2)


class TestMovingTarget:
    """Test tracking of a target that moves every step."""

    def test_constant_rate_bounded_lag(self):
        """A target moving at constant speed should be followed with bounded lag."""
        dt = 0.02
        speed = 2.0
        position, velocity, target = 0.0, 0.0, 0.0
        lags = []
        positions = []

        for _ in range(1000):
            target += speed * dt
            position, velocity = move_towards(position, target, velocity, 5.0, dt)
            lags.append(target - position)
            positions.append(position)

        assert max(abs(lag) for lag in lags[200:]) < 1.0
        average_speed = (positions[-1] - positions[499]) / (500 * dt)
        assert average_speed == pytest.approx(speed, abs=0.1)

    def test_target_jump_then_settles(self):
        """Changing a stationary target mid-flight should still settle on the new one."""
        states = run_steps(0.0, 10.0, 0.0, acceleration=5.0, dt=0.05, steps=20)
        position, velocity = states[-1]

        states = run_steps(position, -4.0, velocity, acceleration=5.0, dt=0.05, steps=300)
        assert states[-1] == (-4.0, 0.0)
