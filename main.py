"""Simple target-driven mobility example with visualization.

This script builds a GrADyS-SIM simulation with a single node moved by
MoveTowardsMobilityHandler. TargetProtocol sets the node's target in
initialize() and changes it periodically via a timer.

Initial node position is set in builder.add_node().
"""

import logging

# Suppress websockets handshake warnings
logging.getLogger('websockets').setLevel(logging.CRITICAL)

from gradysim.simulator.handler.communication import CommunicationHandler, CommunicationMedium
from gradysim.simulator.handler.timer import TimerHandler
from gradysim.simulator.handler.visualization import VisualizationHandler, VisualizationConfiguration
from gradysim.simulator.simulation import SimulationBuilder, SimulationConfiguration
from move_towards import InterpolationMode, MoveTowardsConfiguration, MoveTowardsMobilityHandler
from protocol import TargetProtocol
from config_param import (
    COMMUNICATION_DELAY,
    COMMUNICATION_FAILURE_RATE,
    COMMUNICATION_TRANSMISSION_RANGE,
    MT_ACCELERATION,
    MT_LERP_SPEED,
    MT_MOVE_TOWARDS_SPEED,
    MT_SEND_TELEMETRY,
    MT_SMOOTH_DAMP_TIME,
    MT_TELEMETRY_DECIMATION,
    MT_UPDATE_RATE,
    SIM_DEBUG,
    SIM_DURATION,
    SIM_REAL_TIME,
    TARGET_CHANGE_PERIOD,
    VIS_OPEN_BROWSER,
    VIS_UPDATE_RATE,
)


# ============================================================
# Mobility presets (choose by editing ONE variable)
#
# Profiles: Physics, Rigidbody, Lerp, MoveTowards, SmoothDamp, Custom
# - Physics and Rigidbody use the bounded-acceleration solver (position
#   mode and force mode respectively).
# - The others are the stock interpolators, for comparison.
# ============================================================

MOBILITY_PROFILE: str = "Physics"  # Choose mobility profile here


def _preset(mode: InterpolationMode) -> MoveTowardsConfiguration:
    return MoveTowardsConfiguration(
        update_rate=MT_UPDATE_RATE,
        acceleration=MT_ACCELERATION,
        mode=mode,
        lerp_speed=MT_LERP_SPEED,
        move_towards_speed=MT_MOVE_TOWARDS_SPEED,
        smooth_damp_time=MT_SMOOTH_DAMP_TIME,
        send_telemetry=MT_SEND_TELEMETRY,
        telemetry_decimation=MT_TELEMETRY_DECIMATION,
    )


CUSTOM_MOBILITY_CONFIG = MoveTowardsConfiguration(
    update_rate=0.01,        # Update every 0.01 seconds
    acceleration=2.5,        # Max acceleration: 2.5 m/s² per axis
    mode="physics",
    send_telemetry=True,     # Enable telemetry
    telemetry_decimation=1,  # Send telemetry every update
)


MOBILITY_PRESETS: dict[str, MoveTowardsConfiguration] = {
    "Physics": _preset(InterpolationMode.PHYSICS),
    "Rigidbody": _preset(InterpolationMode.RIGIDBODY),
    "Lerp": _preset(InterpolationMode.LERP),
    "MoveTowards": _preset(InterpolationMode.MOVE_TOWARDS),
    "SmoothDamp": _preset(InterpolationMode.SMOOTH_DAMP),
    "Custom": CUSTOM_MOBILITY_CONFIG,
}


def main():
    """Execute the move-towards mobility simulation."""

    builder = SimulationBuilder(
        SimulationConfiguration(
            duration=SIM_DURATION,
            debug=SIM_DEBUG,
            real_time=SIM_REAL_TIME
        )
    )

    medium = CommunicationMedium(
        transmission_range=COMMUNICATION_TRANSMISSION_RANGE,
        delay=COMMUNICATION_DELAY,
        failure_rate=COMMUNICATION_FAILURE_RATE
    )
    builder.add_handler(CommunicationHandler(medium))

    builder.add_handler(TimerHandler())

    # The protocol only sets targets. The handler owns each node's velocity
    # and steps x, y and z independently once per update_rate.
    profile = (MOBILITY_PROFILE or "").strip()
    mobility_config = MOBILITY_PRESETS.get(profile)
    if mobility_config is None:
        valid = ", ".join(sorted(MOBILITY_PRESETS.keys()))
        raise ValueError(f"Unknown MOBILITY_PROFILE={MOBILITY_PROFILE!r}. Valid options: {valid}")

    print(
        "Mobility preset: "
        f"{profile} "
        f"(mode={mobility_config.mode.value}, update_rate={mobility_config.update_rate}, "
        f"acceleration={mobility_config.acceleration})"
    )
    builder.add_handler(MoveTowardsMobilityHandler(mobility_config))

    vis_config = VisualizationConfiguration(
        open_browser=VIS_OPEN_BROWSER,
        update_rate=VIS_UPDATE_RATE
    )
    builder.add_handler(VisualizationHandler(vis_config))

    builder.add_node(TargetProtocol, (0, 0, 0))

    simulation = builder.build()
    print("=" * 60)
    print("Starting move-towards mobility simulation")
    print(f"Node target is set by TargetProtocol (and changes every {TARGET_CHANGE_PERIOD:g} seconds)")
    print("Starting position: (0, 0, 0)")
    print("=" * 60)
    try:
        simulation.start_simulation()
    except (BrokenPipeError, EOFError) as e:
        logging.getLogger(__name__).debug(f"Ignored visualization shutdown error: {e}")
    finally:
        print("=" * 60)
        print("Simulation completed!")
        print("=" * 60)


if __name__ == "__main__":
    main()
