"""
Target-driven mobility handler for GrADyS-SIM NG.

This handler moves each node toward a target position with one of the
interpolation modes, by default the bounded-acceleration solver. The x, y
and z axes are solved independently every update.
"""

import logging
from typing import Dict, Tuple

from gradysim.simulator.event import EventLoop
from gradysim.simulator.node import Node
from gradysim.simulator.handler.interface import INodeHandler
from gradysim.protocol.messages.telemetry import Telemetry

from .config import MoveTowardsConfiguration
from .interpolation import step_axis

Vector3 = Tuple[float, float, float]


class MoveTowardsMobilityHandler(INodeHandler):
    """
    Target-driven mobility handler for GrADyS-SIM NG.

    Nodes keep their own velocity state in this handler; protocols only set
    targets. With the default PHYSICS mode, a node accelerates toward its
    target with at most ``config.acceleration`` per axis and stops on it
    without overshoot.

    Usage:
        config = MoveTowardsConfiguration(update_rate=0.02, acceleration=5.0)
        handler = MoveTowardsMobilityHandler(config)

        # In your protocol:
        handler.set_target(node_id, (x, y, z))
    """

    def __init__(self, config: MoveTowardsConfiguration):
        self._config = config
        self._loop: EventLoop = None
        self._nodes: Dict[int, Node] = {}
        self._logger = logging.getLogger(__name__)

        self._velocity: Dict[int, Vector3] = {}
        self._target: Dict[int, Vector3] = {}
        self._settled: Dict[int, bool] = {}

        self._update_counter: Dict[int, int] = {}

    def get_label(self) -> str:
        return "MoveTowardsMobilityHandler"

    def register_node(self, node: Node):
        node_id = node.id
        self._nodes[node_id] = node
        self._velocity[node_id] = (0.0, 0.0, 0.0)
        self._target[node_id] = tuple(node.position)
        self._settled[node_id] = True
        self._update_counter[node_id] = 0

    def inject(self, event_loop: EventLoop):
        self._loop = event_loop

    def initialize(self):
        if self._nodes:
            self._loop.schedule_event(
                self._loop.current_time + self._config.update_rate,
                self._mobility_update,
            )

    def handle_timer(self, timer: str):
        pass

    def handle_packet(self, message: str):
        pass

    def finish(self):
        pass

    def finalize(self):
        pass

    def after_simulation_step(self, iteration: int, time: float):
        pass

    def set_target(self, node_id: int, target: Vector3) -> None:
        """Set the position node ``node_id`` should move to."""
        if node_id not in self._velocity:
            self._velocity[node_id] = (0.0, 0.0, 0.0)
            self._update_counter[node_id] = 0
        self._target[node_id] = tuple(target)
        self._settled[node_id] = False
        self._logger.debug("Node %s: new target %s", node_id, target)

    def get_node_target(self, node_id: int) -> Vector3 | None:
        return self._target.get(node_id)

    def get_node_velocity(self, node_id: int) -> Vector3 | None:
        return self._velocity.get(node_id)

    def get_node_position(self, node_id: int) -> Vector3 | None:
        node = self._nodes.get(node_id)
        return node.position if node is not None else None

    def _mobility_update(self):
        dt = self._config.update_rate
        mode = self._config.mode

        for node_id, node in self._nodes.items():
            target = self._target[node_id]
            velocity = self._velocity[node_id]

            axes = [
                step_axis(mode, p, t, v, dt, self._config)
                for p, t, v in zip(node.position, target, velocity)
            ]
            node.position = tuple(axis.position for axis in axes)
            self._velocity[node_id] = tuple(axis.velocity for axis in axes)

            if not self._settled[node_id] and self._is_settled(node_id):
                self._settled[node_id] = True
                self._logger.debug("Node %s: settled on target %s", node_id, target)

            self._update_counter[node_id] += 1
            if self._should_emit_telemetry(node_id):
                self._emit_telemetry(node)

        self._loop.schedule_event(
            self._loop.current_time + self._config.update_rate,
            self._mobility_update,
        )

    def _is_settled(self, node_id: int) -> bool:
        node = self._nodes[node_id]
        return (
            tuple(node.position) == self._target[node_id]
            and all(v == 0.0 for v in self._velocity[node_id])
        )

    def _should_emit_telemetry(self, node_id: int) -> bool:
        if not self._config.send_telemetry:
            return False

        count = self._update_counter[node_id]
        return (count % self._config.telemetry_decimation) == 0

    def _emit_telemetry(self, node: Node):
        telemetry = Telemetry(current_position=node.position)

        def send_telemetry():
            node.protocol_encapsulator.handle_telemetry(telemetry)

        self._loop.schedule_event(
            self._loop.current_time,
            send_telemetry,
            f"Node {node.id} handle_telemetry",
        )
