"""Interpolation modes for driving one axis toward a target.

Besides the bounded-acceleration solver, this module provides the stock
interpolators it is usually compared against, so that a driver can switch
between them at runtime:

- ``LERP``: exponential approach, a fixed fraction of the gap per second
- ``MOVE_TOWARDS``: constant speed, stops exactly on the target
- ``SMOOTH_DAMP``: critically damped spring
- ``PHYSICS``: bounded-acceleration position mode (:func:`core.move_towards`)
- ``RIGIDBODY``: bounded-acceleration force mode (:func:`core.move_towards_force`)
  fed through a rigid-body style integrator
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

from .core import InvalidParameterError, MoveResult, move_towards, move_towards_force

if TYPE_CHECKING:
    from .config import MoveTowardsConfiguration


class InterpolationMode(str, Enum):
    PHYSICS = "physics"
    LERP = "lerp"
    MOVE_TOWARDS = "move_towards"
    SMOOTH_DAMP = "smooth_damp"
    RIGIDBODY = "rigidbody"


def lerp(current: float, target: float, t: float) -> float:
    """Linear interpolation with ``t`` clamped to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return current + (target - current) * t


def move_towards_linear(current: float, target: float, max_delta: float) -> float:
    """Step at most ``max_delta`` toward ``target``, landing on it exactly."""
    delta = target - current
    if abs(delta) <= max_delta:
        return target
    return current + math.copysign(max_delta, delta)


def smooth_damp(
    current: float,
    target: float,
    velocity: float,
    smooth_time: float,
    dt: float,
    max_speed: float = math.inf,
) -> MoveResult:
    """Critically damped spring toward ``target``.

    Uses the cubic approximation of exp(-omega*dt) from Game Programming
    Gems 4, ch. 1.10. ``smooth_time`` is roughly the time to reach the
    target. The result never passes the target: if it would, the target is
    returned with zero velocity.

    Raises:
        InvalidParameterError: If ``dt`` is not a finite positive number.
    """
    if not math.isfinite(dt) or dt <= 0:
        raise InvalidParameterError(f"dt must be > 0 and finite (got {dt!r})")

    smooth_time = max(0.0001, smooth_time)
    omega = 2.0 / smooth_time

    x = omega * dt
    decay = 1.0 / (1.0 + x + 0.48 * x * x + 0.235 * x * x * x)

    original_target = target
    max_change = max_speed * smooth_time
    change = min(max(current - target, -max_change), max_change)
    target = current - change

    temp = (velocity + omega * change) * dt
    new_velocity = (velocity - omega * temp) * decay
    position = target + (change + temp) * decay

    # Passed the target
    if (original_target - current > 0.0) == (position > original_target):
        position = original_target
        new_velocity = 0.0

    return MoveResult(position, new_velocity)


def step_axis(
    mode: InterpolationMode,
    position: float,
    target: float,
    velocity: float,
    dt: float,
    config: MoveTowardsConfiguration,
) -> MoveResult:
    """Advance one axis by ``dt`` using ``mode``.

    For ``RIGIDBODY`` the acceleration from the force-mode solver is
    integrated with semi-implicit Euler (velocity first, then position), as
    a rigid-body engine would. ``LERP`` and ``MOVE_TOWARDS`` have no
    velocity state of their own; they report the average velocity of the
    step.
    """
    if mode == InterpolationMode.PHYSICS:
        return move_towards(position, target, velocity, config.acceleration, dt)

    if mode == InterpolationMode.RIGIDBODY:
        acc = move_towards_force(position, target, velocity, config.acceleration, dt)
        new_velocity = velocity + acc * dt
        return MoveResult(position + new_velocity * dt, new_velocity)

    if mode == InterpolationMode.SMOOTH_DAMP:
        return smooth_damp(position, target, velocity, config.smooth_damp_time, dt)

    if mode == InterpolationMode.LERP:
        new_position = lerp(position, target, config.lerp_speed * dt)
    elif mode == InterpolationMode.MOVE_TOWARDS:
        new_position = move_towards_linear(position, target, config.move_towards_speed * dt)
    else:
        raise ValueError(f"Unknown interpolation mode: {mode!r}")

    return MoveResult(new_position, (new_position - position) / dt)
