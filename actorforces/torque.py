"""Constant, impulse and damped torque application on a physics target."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .forces import DebugDrawer, PhysicsTarget
from .math3d import UP, Vec3

logger = logging.getLogger(__name__)


class TorqueMode(Enum):
    """Ways a TorqueApplier applies torque."""

    CONSTANT_TORQUE = "Constant Torque"
    IMPULSE_TORQUE = "Impulse Torque"
    DAMPED_TORQUE = "Damped Torque"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(eq=False)
class TorqueApplier:
    """Applies torque to a target each tick in the selected mode."""

    target: PhysicsTarget | None = None
    torque_mode: TorqueMode = TorqueMode.CONSTANT_TORQUE
    torque_axis: Vec3 = UP
    torque_magnitude: float = 1000.0
    damping_factor: float = 1.0
    ignore_mass: bool = False
    debug_drawer: DebugDrawer | None = None
    name: str = "TorqueApplier"
    impulse_applied: bool = field(default=False, init=False)

    def begin_play(self) -> None:
        """Check the target and make sure it simulates physics."""
        if self.target is None:
            logger.error("[%s] Target is not assigned!", self.name)
            return
        if not self.target.simulating_physics:
            logger.warning(
                "[%s] Target is not simulating physics. Enabling physics simulation.",
                self.name,
            )
            self.target.simulating_physics = True

    def tick(self, delta_time: float) -> None:
        """Apply torque for one frame and draw debug output."""
        if self.target is None or not self.target.simulating_physics:
            return
        self.apply_torque(delta_time)
        self.draw_debug()

    def apply_torque(self, delta_time: float) -> None:
        """Apply torque for the current mode to the target."""
        target = self.target
        if target is None:
            raise RuntimeError(f"[{self.name}] no target to apply torque to")
        axis = self.torque_axis.safe_normal()

        if self.torque_mode is TorqueMode.CONSTANT_TORQUE:
            target.add_torque(axis * self.torque_magnitude, self.ignore_mass)
        elif self.torque_mode is TorqueMode.IMPULSE_TORQUE:
            if not self.impulse_applied:
                target.add_angular_impulse(
                    axis * self.torque_magnitude, self.ignore_mass
                )
                self.impulse_applied = True
        elif self.torque_mode is TorqueMode.DAMPED_TORQUE:
            applied = axis * self.torque_magnitude
            along_axis = target.angular_velocity.dot(axis)
            damping = -axis * (along_axis * self.damping_factor)
            target.add_torque(applied + damping, self.ignore_mass)
        else:
            logger.warning("[%s] Unknown torque mode!", self.name)

    def draw_debug(self) -> None:
        """Draw the torque vector and the target's angular velocity."""
        drawer = self.debug_drawer
        if self.target is None or drawer is None or not drawer.enabled:
            return
        location = self.target.location
        torque_vector = self.torque_axis.safe_normal() * (
            self.torque_magnitude * 0.01
        )
        drawer.draw_line(location, location + torque_vector, "red", -1.0, 3.0)
        drawer.draw_string(location + torque_vector, "Torque", "red")

        angular_scaled = self.target.angular_velocity * 0.1
        drawer.draw_line(location, location + angular_scaled, "green", -1.0, 3.0)
        drawer.draw_string(location + angular_scaled, "Angular Velocity", "green")