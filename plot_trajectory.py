"""Plot single-axis trajectories of every interpolation mode.

Creates one figure with:
- position vs time (with the target as a dashed line)
- velocity vs time

Run:
    python plot_trajectory.py

Parameters come from config_param.py (PLOT_* and MT_* constants).
"""

from __future__ import annotations

import matplotlib.pyplot as plt

from config_param import (
    MT_ACCELERATION,
    MT_LERP_SPEED,
    MT_MOVE_TOWARDS_SPEED,
    MT_SMOOTH_DAMP_TIME,
    MT_UPDATE_RATE,
    PLOT_START,
    PLOT_STEPS,
    PLOT_TARGET,
    PLOT_TARGET_RATE,
)
from move_towards import MoveTowardsConfiguration, compare_modes


def main() -> int:
    config = MoveTowardsConfiguration(
        update_rate=MT_UPDATE_RATE,
        acceleration=MT_ACCELERATION,
        lerp_speed=MT_LERP_SPEED,
        move_towards_speed=MT_MOVE_TOWARDS_SPEED,
        smooth_damp_time=MT_SMOOTH_DAMP_TIME,
    )
    df = compare_modes(PLOT_START, PLOT_TARGET, config, PLOT_STEPS, target_rate=PLOT_TARGET_RATE)

    if df.empty:
        print("No rows to plot.")
        return 0

    fig, (ax_pos, ax_vel) = plt.subplots(2, 1, sharex=True, figsize=(10, 7))
    fig.suptitle(f"Move towards {PLOT_TARGET:g} (dt={config.update_rate}, a_max={config.acceleration})")

    first = df[df["mode"] == df["mode"].iloc[0]]
    ax_pos.plot(first["t"], first["target"], color="0.35", linestyle="--", linewidth=1.5, label="target")

    for mode, df_mode in df.groupby("mode", sort=False):
        ax_pos.plot(df_mode["t"], df_mode["position"], linewidth=1.2, label=mode)
        ax_vel.plot(df_mode["t"], df_mode["velocity"], linewidth=1.0, label=mode)

    ax_pos.set_ylabel("position")
    ax_pos.grid(True, alpha=0.3)
    ax_pos.legend(loc="best")

    ax_vel.axhline(0.0, color="k", linewidth=0.8, alpha=0.4)
    ax_vel.set_ylabel("velocity")
    ax_vel.set_xlabel("t (s)")
    ax_vel.grid(True, alpha=0.3)

    fig.tight_layout()
    plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
