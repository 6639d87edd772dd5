"""Fixed-step single-axis trajectories.

Drives one axis toward a target with a given interpolation mode and records
the state after every step. Useful for comparing modes side by side and for
plotting (see ``plot_trajectory.py``).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .config import MoveTowardsConfiguration
from .interpolation import InterpolationMode, step_axis

TRAJECTORY_COLUMNS = ["t", "target", "position", "velocity"]


def simulate_trajectory(
    start: float,
    target: float,
    config: MoveTowardsConfiguration,
    steps: int,
    velocity: float = 0.0,
    target_rate: float = 0.0,
) -> pd.DataFrame:
    """Step one axis ``steps`` times with ``config.mode``.

    Row 0 holds the initial state. Before each step the target moves by
    ``target_rate * dt``, so a non-zero rate gives a moving target.
    """
    if steps < 0:
        raise ValueError("steps must be >= 0")

    dt = config.update_rate
    data = np.empty((steps + 1, len(TRAJECTORY_COLUMNS)), dtype=np.float64)
    position = start
    data[0] = (0.0, target, position, velocity)

    for i in range(1, steps + 1):
        target += target_rate * dt
        position, velocity = step_axis(config.mode, position, target, velocity, dt, config)
        data[i] = (i * dt, target, position, velocity)

    return pd.DataFrame(data, columns=TRAJECTORY_COLUMNS)


def compare_modes(
    start: float,
    target: float,
    config: MoveTowardsConfiguration,
    steps: int,
    modes: Optional[Iterable[InterpolationMode]] = None,
    target_rate: float = 0.0,
) -> pd.DataFrame:
    """Run :func:`simulate_trajectory` once per mode and stack the results.

    The returned frame has an extra ``mode`` column holding the mode value.
    """
    if modes is None:
        modes = list(InterpolationMode)

    frames = []
    for mode in modes:
        mode = InterpolationMode(mode)
        mode_config = replace(config, mode=mode)
        df = simulate_trajectory(start, target, mode_config, steps, target_rate=target_rate)
        df["mode"] = mode.value
        frames.append(df)

    return pd.concat(frames, ignore_index=True)
