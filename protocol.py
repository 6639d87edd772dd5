"""
Protocol demonstrating target-driven mobility using MoveTowardsMobilityHandler.

Uses direct method calls instead of standard GrADyS mobility commands.
"""

from gradysim.protocol.interface import IProtocol
from gradysim.protocol.messages.telemetry import Telemetry

import pandas as pd

from config_param import TARGET_CHANGE_PERIOD, TARGET_CHANGE_TIMER_STR, TARGET_WAYPOINTS


class TargetProtocol(IProtocol):
    """Protocol that walks a node through a list of targets."""

    def __init__(self):
        super().__init__()
        self.node_id = None
        self.initial_position = None
        self.target = None
        self.df = None
        self.mobility_handler = None

        self._targets = list(TARGET_WAYPOINTS)
        self._target_index = 0

    def initialize(self):
        """Initialize and set the first target."""
        self.node_id = self.provider.get_id()
        self._target_index = 0
        self.target = self._targets[self._target_index]

        handlers = getattr(self.provider, "handlers", {}) or {}
        self.mobility_handler = handlers.get("MoveTowardsMobilityHandler")

        if self.mobility_handler:
            self.mobility_handler.set_target(self.node_id, self.target)
            print(f"Node {self.node_id} initialized")
            print(f"Target: ({self.target[0]:.1f}, {self.target[1]:.1f}, {self.target[2]:.1f})")

            self.initial_position = self.mobility_handler.get_node_position(self.node_id)
            if self.initial_position is not None:
                print(f"Initial position: ({self.initial_position[0]:.1f}, {self.initial_position[1]:.1f}, {self.initial_position[2]:.1f})")

            self.df = pd.DataFrame(columns=[
                "t",
                "x", "y", "z",
                "vx", "vy", "vz",
                "tx", "ty", "tz",
            ])
            self._record_state()

            self.schedule_change_target_timer(TARGET_CHANGE_PERIOD)

    def schedule_change_target_timer(self, timeout: float):
        self.provider.schedule_timer(TARGET_CHANGE_TIMER_STR, self.provider.current_time() + timeout)

    def handle_timer(self, timer: str):
        """Advance to the next target; the last one is held."""
        if timer == TARGET_CHANGE_TIMER_STR:
            if self.mobility_handler:
                self._target_index = min(self._target_index + 1, len(self._targets) - 1)
                self.target = self._targets[self._target_index]
                self.mobility_handler.set_target(self.node_id, self.target)
            self.schedule_change_target_timer(TARGET_CHANGE_PERIOD)

    def handle_packet(self, message: str):
        pass

    def handle_telemetry(self, telemetry: Telemetry) -> None:
        """Collect time, position, velocity and target on telemetry."""
        if not self.mobility_handler or self.df is None:
            return
        self._record_state()

    def _record_state(self):
        pos = self.mobility_handler.get_node_position(self.node_id)
        vel = self.mobility_handler.get_node_velocity(self.node_id)
        if pos is None or vel is None:
            return
        t = self.provider.current_time()
        tgt = self.target or pos
        self.df.loc[len(self.df)] = [t, pos[0], pos[1], pos[2], vel[0], vel[1], vel[2], tgt[0], tgt[1], tgt[2]]

    def finish(self):
        """Print a summary and plot position against target for each axis."""
        if not (self.initial_position and self.mobility_handler):
            return

        final_position = self.mobility_handler.get_node_position(self.node_id)
        final_velocity = self.mobility_handler.get_node_velocity(self.node_id)
        if final_position is None:
            return

        ex = self.target[0] - final_position[0]
        ey = self.target[1] - final_position[1]
        ez = self.target[2] - final_position[2]
        error = (ex**2 + ey**2 + ez**2)**0.5

        print()
        print("=" * 60)
        print("SIMULATION RESULTS")
        print("=" * 60)
        print(f"Node {self.node_id}")
        print(f"  Initial position: ({self.initial_position[0]:.2f}, {self.initial_position[1]:.2f}, {self.initial_position[2]:.2f})")
        print(f"  Final position:   ({final_position[0]:.2f}, {final_position[1]:.2f}, {final_position[2]:.2f})")
        print(f"  Final target:     ({self.target[0]:.2f}, {self.target[1]:.2f}, {self.target[2]:.2f})")
        print(f"  Distance to target: {error:.4f} m")
        if final_velocity:
            final_speed = (final_velocity[0]**2 + final_velocity[1]**2 + final_velocity[2]**2)**0.5
            print(f"  Final speed:      {final_speed:.4f} m/s")
        print("=" * 60)

        if self.df is None or len(self.df) < 2:
            return

        try:
            import matplotlib.pyplot as plt
        except ImportError:
            print("matplotlib not available; skipping plots")
            return

        fig, axes = plt.subplots(3, 2, sharex=True, figsize=(12, 9))
        for row, axis in enumerate("xyz"):
            ax_pos, ax_vel = axes[row]
            line = ax_pos.plot(self.df["t"], self.df[axis], label=axis)[0]
            ax_pos.plot(
                self.df["t"],
                self.df[f"t{axis}"],
                label=f"{axis}_target",
                linestyle="--",
                drawstyle="steps-post",
                color=line.get_color(),
            )
            ax_pos.set_ylabel(f"{axis} (m)")
            ax_pos.grid(True)
            ax_pos.legend(loc="best")

            ax_vel.plot(self.df["t"], self.df[f"v{axis}"], color=line.get_color())
            ax_vel.set_ylabel(f"v{axis} (m/s)")
            ax_vel.grid(True)

        axes[-1][0].set_xlabel("time (s)")
        axes[-1][1].set_xlabel("time (s)")
        fig.suptitle(f"Node {self.node_id}: position and velocity vs time")
        plt.tight_layout(rect=(0, 0, 1, 0.96))
        plt.show()
