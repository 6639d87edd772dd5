"""
Configuration dataclass for the move-towards mobility handler.
"""

import math
from dataclasses import dataclass
from typing import Union

from .core import InvalidParameterError
from .interpolation import InterpolationMode


@dataclass
class MoveTowardsConfiguration:
    """
    Configuration parameters for the MoveTowardsMobilityHandler and the
    trajectory driver.

    Attributes:
        update_rate: Time interval (in seconds) between updates. This is the
            timestep handed to the solver. Typical: 0.01–0.05 s.
        acceleration: Maximum acceleration magnitude used by the PHYSICS and
            RIGIDBODY modes (units/s²).
        mode: Interpolation mode. Strings such as "smooth_damp" are accepted
            and converted to InterpolationMode.
        lerp_speed: Fraction of the remaining gap closed per second in LERP mode.
        move_towards_speed: Constant speed (units/s) in MOVE_TOWARDS mode.
        smooth_damp_time: Approximate time to reach the target in SMOOTH_DAMP mode.
        send_telemetry: If True, emit Telemetry messages after position updates.
        telemetry_decimation: Emit telemetry every N updates (default: 1).
    """
    update_rate: float
    acceleration: float = 5.0
    mode: Union[InterpolationMode, str] = InterpolationMode.PHYSICS
    lerp_speed: float = 2.0
    move_towards_speed: float = 5.0
    smooth_damp_time: float = 2.0
    send_telemetry: bool = True
    telemetry_decimation: int = 1

    def __post_init__(self):
        self.mode = InterpolationMode(self.mode)

        for name in ("update_rate", "acceleration", "lerp_speed", "move_towards_speed", "smooth_damp_time"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidParameterError(f"{name} must be > 0 and finite (got {value!r})")

        if self.telemetry_decimation < 1:
            raise InvalidParameterError("telemetry_decimation must be >= 1")
