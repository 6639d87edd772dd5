"""Pure mathematical functions for bounded-acceleration move-towards.

This module contains stateless operations for:
- Constant-acceleration kinematics
- Position-mode stepping (returns the next position and velocity)
- Force-mode stepping (returns the acceleration to hand to a physics engine)

The solver works on one scalar axis. It holds no state: the caller stores
the velocity returned by one call and passes it to the next. Multi-axis
motion is composed by solving each axis independently.
"""

import math
from typing import NamedTuple, Tuple


class InvalidParameterError(ValueError):
    """Raised when a solver or driver parameter is outside its domain."""


class MoveResult(NamedTuple):
    """Position and velocity at the end of one step."""

    position: float
    velocity: float


def kinematic_velocity(initial_velocity: float, acceleration: float, time: float) -> float:
    """Velocity after accelerating for ``time`` (v = v0 + a*t)."""
    return initial_velocity + acceleration * time


def kinematic_displacement(
    position: float,
    velocity: float,
    acceleration: float,
    time: float,
) -> float:
    """Position after accelerating for ``time`` (x = x0 + v0*t + a*t²/2)."""
    return position + velocity * time + 0.5 * acceleration * time * time


def required_acceleration(distance: float, time: float) -> float:
    """Acceleration that covers ``distance`` in ``time``.

    Assumes the first half of ``time`` is spent accelerating and the second
    half braking at the same magnitude.

    Raises:
        InvalidParameterError: If ``time`` is not strictly positive.
    """
    if not time > 0:
        raise InvalidParameterError("time must be > 0")
    return 4.0 * distance / (time * time)


def _check_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(f"{name} must be > 0 and finite (got {value!r})")


def _solve_step(
    current: float,
    target: float,
    velocity: float,
    acceleration: float,
    dt: float,
) -> Tuple[float, float, bool]:
    """Advance one axis by ``dt`` along the two-phase profile.

    Returns ``(position, velocity, arrived)`` where ``arrived`` is True when
    the target is reached inside this step and the result was clamped to it.
    """
    _check_positive("acceleration", acceleration)
    _check_positive("dt", dt)

    # Minimum speed from which braking at full acceleration stops exactly
    # on the target. Moving faster than this means we must brake first.
    if target < current:
        c = -math.sqrt(2.0 * acceleration * (current - target))
    else:
        c = math.sqrt(2.0 * acceleration * (target - current))

    if velocity < c:
        a1 = acceleration
        vs = velocity
    else:
        a1 = -acceleration
        vs = -velocity

    # Clamped at zero: round-off can push an exactly-zero discriminant negative.
    root = math.sqrt(max(0.0, 0.5 * velocity * velocity + a1 * (target - current)))
    halfway_time = (root - vs) / acceleration

    if dt < halfway_time:
        # Position uses the velocity at the start of the step.
        position = kinematic_displacement(current, velocity, a1, dt)
        return position, kinematic_velocity(velocity, a1, dt), False

    # A full step of braking would carry us past the target, and a discrete
    # step cannot stop partway through.
    arrival_time = (2.0 * root - vs) / acceleration
    if arrival_time <= dt:
        return target, 0.0, True

    halfway_velocity = kinematic_velocity(velocity, a1, halfway_time)
    halfway_position = kinematic_displacement(current, velocity, a1, halfway_time)
    remaining = dt - halfway_time

    position = kinematic_displacement(halfway_position, halfway_velocity, -a1, remaining)
    return position, kinematic_velocity(halfway_velocity, -a1, remaining), False


def move_towards(
    current: float,
    target: float,
    velocity: float,
    acceleration: float,
    dt: float,
) -> MoveResult:
    """Move a value towards a target with bounded acceleration.

    Accelerates toward the target and brakes so that a stationary target is
    reached with zero velocity and never overshot. Moving targets are
    tracked; if the target moves so that the acceleration bound cannot stop
    in time, the value overshoots, stops, and comes back to land on it.

    Args:
        current: Current position.
        target: Target position. May change between calls.
        velocity: Velocity returned by the previous call (0.0 initially).
        acceleration: Maximum acceleration magnitude (> 0).
        dt: Time step to advance (> 0).

    Returns:
        MoveResult with the new position and the velocity to pass to the
        next call.

    Raises:
        InvalidParameterError: If ``acceleration`` or ``dt`` is not a finite
            positive number.

    Example:
        >>> position, velocity = 0.0, 0.0
        >>> for _ in range(40):
        ...     position, velocity = move_towards(position, 10.0, velocity, 5.0, 0.1)
        >>> position, velocity
        (10.0, 0.0)
    """
    position, new_velocity, _ = _solve_step(current, target, velocity, acceleration, dt)
    return MoveResult(position, new_velocity)


def move_towards_force(
    current: float,
    target: float,
    velocity: float,
    acceleration: float,
    dt: float,
) -> float:
    """Acceleration to apply for one step of an external integrator.

    Follows the same profile as :func:`move_towards`, but instead of a
    position it returns the average acceleration over the step,
    ``(v_new - velocity) / dt``. Velocity is owned by the integrator (e.g. a
    rigid-body simulator) and is not returned.

    When the target is reached inside the step, returns
    ``(target - current) / dt``, the value that covers the remaining distance
    in one step. This does not account for the integrator's own update
    order, so the landing is approximate.
    """
    _, new_velocity, arrived = _solve_step(current, target, velocity, acceleration, dt)
    if arrived:
        return (target - current) / dt
    return (new_velocity - velocity) / dt
