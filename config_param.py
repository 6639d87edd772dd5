"""Centralized parameter/config constants for the demo scripts.

This module is the single source of truth for the parameters shared by
main.py, protocol.py and plot_trajectory.py.
"""

# --------------------------------------------------------------------------------------
# 1) Simulation framework (timing)
# --------------------------------------------------------------------------------------

SIM_DURATION: float = 60            # Simulation duration (seconds)
SIM_REAL_TIME: bool = True          # Run in real time to watch the movement
SIM_DEBUG: bool = False             # Enable simulator debug mode

# --------------------------------------------------------------------------------------
# 2) Communication + visualization (medium + UI)
# --------------------------------------------------------------------------------------

COMMUNICATION_TRANSMISSION_RANGE: float = 200  # Communication range (meters)
COMMUNICATION_DELAY: float = 0.0               # Communication delay (seconds)
COMMUNICATION_FAILURE_RATE: float = 0.0        # Packet loss probability [0.0, 1.0]

VIS_OPEN_BROWSER: bool = True       # Open the visualization in a browser
VIS_UPDATE_RATE: float = 0.1        # Visualization update period (seconds)

# --------------------------------------------------------------------------------------
# 3) Move-towards mobility model
# --------------------------------------------------------------------------------------

MT_UPDATE_RATE: float = 0.02        # Solver timestep (seconds)
MT_ACCELERATION: float = 5.0        # Max acceleration per axis (m/s²)
MT_LERP_SPEED: float = 2.0          # LERP: fraction of the gap closed per second
MT_MOVE_TOWARDS_SPEED: float = 5.0  # MOVE_TOWARDS: constant speed (m/s)
MT_SMOOTH_DAMP_TIME: float = 2.0    # SMOOTH_DAMP: approximate time to target (s)
MT_SEND_TELEMETRY: bool = True      # Enable telemetry
MT_TELEMETRY_DECIMATION: int = 1    # Send telemetry every update

# --------------------------------------------------------------------------------------
# 4) Target schedule (protocol)
# --------------------------------------------------------------------------------------

TARGET_CHANGE_TIMER_STR: str = "change_target_timer"
TARGET_CHANGE_PERIOD: float = 10.0  # seconds between target changes

# Visited in order; the last one is held until the end of the simulation.
TARGET_WAYPOINTS = [
    (25.0, 0.0, 10.0),
    (25.0, 25.0, 20.0),
    (-25.0, 25.0, 5.0),
    (-25.0, -25.0, 15.0),
    (0.0, 0.0, 0.0),
]

# --------------------------------------------------------------------------------------
# 5) Offline plotting (plot_trajectory.py)
# --------------------------------------------------------------------------------------

PLOT_START: float = 0.0
PLOT_TARGET: float = 10.0
PLOT_STEPS: int = 250
PLOT_TARGET_RATE: float = 0.0       # set > 0 to plot a moving target
