"""Bounded-acceleration move-towards.

This package contains the pure single-axis solver and the GrADyS-SIM NG
mobility handler built on top of it. It is intended to be imported by a
larger project.
"""

from .config import MoveTowardsConfiguration
from .handler import MoveTowardsMobilityHandler
from .core import (
    InvalidParameterError,
    MoveResult,
    kinematic_displacement,
    kinematic_velocity,
    move_towards,
    move_towards_force,
    required_acceleration,
)
from .interpolation import (
    InterpolationMode,
    lerp,
    move_towards_linear,
    smooth_damp,
    step_axis,
)
from .trajectory import compare_modes, simulate_trajectory

__version__ = "0.1.0"

__all__ = [
    "MoveTowardsConfiguration",
    "MoveTowardsMobilityHandler",
    "InterpolationMode",
    "InvalidParameterError",
    "MoveResult",
    "compare_modes",
    "kinematic_displacement",
    "kinematic_velocity",
    "lerp",
    "move_towards",
    "move_towards_force",
    "move_towards_linear",
    "required_acceleration",
    "simulate_trajectory",
    "smooth_damp",
    "step_axis",
]
