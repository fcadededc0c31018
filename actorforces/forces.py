"""Continuous force, impulse and torque application on a physics target."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .math3d import FORWARD, UP, ZERO, Vec3

logger = logging.getLogger(__name__)

DEBUG_SCALE = 0.01


class ForceMode(Enum):
    """Ways an AcceleratedForceApplier applies force."""

    CONTINUOUS_FORCE = "Continuous Force"
    INSTANT_IMPULSE = "Instant Impulse"
    TORQUE_FORCE = "Torque Force"

    @property
    def display_name(self) -> str:
        return self.value


class ForceKind(Enum):
    """Kind of physical influence applied to a target."""

    FORCE = "force"
    IMPULSE = "impulse"
    TORQUE = "torque"
    ANGULAR_IMPULSE = "angular_impulse"


@dataclass(frozen=True)
class AppliedForce:
    """One application of a force-like quantity to a target."""

    kind: ForceKind
    vector: Vec3
    ignore_mass: bool


@dataclass(eq=False)
class PhysicsTarget:
    """A physics body that receives forces and records every application."""

    location: Vec3 = ZERO
    angular_velocity: Vec3 = ZERO
    simulating_physics: bool = False
    applied: list[AppliedForce] = field(default_factory=list)

    def add_force(self, force: Vec3, accel_change: bool = False) -> None:
        self.applied.append(AppliedForce(ForceKind.FORCE, force, accel_change))

    def add_impulse(self, impulse: Vec3, vel_change: bool = False) -> None:
        self.applied.append(AppliedForce(ForceKind.IMPULSE, impulse, vel_change))

    def add_torque(self, torque: Vec3, accel_change: bool = False) -> None:
        self.applied.append(AppliedForce(ForceKind.TORQUE, torque, accel_change))

    def add_angular_impulse(self, impulse: Vec3, vel_change: bool = False) -> None:
        self.applied.append(
            AppliedForce(ForceKind.ANGULAR_IMPULSE, impulse, vel_change)
        )

    def clear(self) -> None:
        self.applied.clear()


@dataclass(frozen=True)
class DebugLine:
    start: Vec3
    end: Vec3
    color: str
    duration: float
    thickness: float


@dataclass(frozen=True)
class DebugLabel:
    position: Vec3
    text: str
    color: str


class DebugDrawer:
    """Collects debug lines and labels; disabled drawers ignore all requests."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.lines: list[DebugLine] = []
        self.labels: list[DebugLabel] = []

    def draw_line(
        self,
        start: Vec3,
        end: Vec3,
        color: str,
        duration: float = -1.0,
        thickness: float = 0.0,
    ) -> None:
        if self.enabled:
            self.lines.append(DebugLine(start, end, color, duration, thickness))

    def draw_string(self, position: Vec3, text: str, color: str) -> None:
        if self.enabled:
            self.labels.append(DebugLabel(position, text, color))

    def clear(self) -> None:
        self.lines.clear()
        self.labels.clear()


@dataclass(eq=False)
class AcceleratedForceApplier:
    """Applies accelerating force, impulses or torque to a target every tick."""

    target: PhysicsTarget | None = None
    force_mode: ForceMode = ForceMode.CONTINUOUS_FORCE
    force_direction: Vec3 = FORWARD
    force_magnitude: float = 1000.0
    torque_axis: Vec3 = UP
    torque_magnitude: float = 500.0
    ignore_mass: bool = False
    debug_drawer: DebugDrawer | None = None
    name: str = "AcceleratedForceApplier"
    current_force_magnitude: float = field(default=0.0, init=False)

    def begin_play(self) -> None:
        """Check the target and make sure it simulates physics."""
        if self.target is None:
            logger.error(
                "[%s] Target not assigned! Physics forces won't apply.", self.name
            )
            return
        if not self.target.simulating_physics:
            logger.warning(
                "[%s] Target is not simulating physics! Enabling simulation.",
                self.name,
            )
            self.target.simulating_physics = True

    def tick(self, delta_time: float) -> None:
        """Apply forces for one frame and draw debug output."""
        if self.target is None or not self.target.simulating_physics:
            return
        self.apply_force(delta_time)
        self.draw_debug()

    def apply_force(self, delta_time: float) -> None:
        """Apply the force for the current mode to the target."""
        target = self.target
        if target is None:
            raise RuntimeError(f"[{self.name}] no target to apply force to")
        direction = self.force_direction.safe_normal()
        axis = self.torque_axis.safe_normal()

        if self.force_mode is ForceMode.CONTINUOUS_FORCE:
            grown = self.current_force_magnitude + self.force_magnitude * delta_time
            self.current_force_magnitude = min(
                max(grown, 0.0), self.force_magnitude * 10.0
            )
            target.add_force(
                direction * self.current_force_magnitude, self.ignore_mass
            )
        elif self.force_mode is ForceMode.INSTANT_IMPULSE:
            target.add_impulse(direction * self.force_magnitude, self.ignore_mass)
            self.current_force_magnitude = 0.0
        elif self.force_mode is ForceMode.TORQUE_FORCE:
            target.add_torque(axis * self.torque_magnitude, self.ignore_mass)
        else:
            logger.warning("[%s] Unknown force mode.", self.name)

    def draw_debug(self) -> None:
        """Draw a line and label showing the force being applied."""
        drawer = self.debug_drawer
        if self.target is None or drawer is None or not drawer.enabled:
            return
        origin = self.target.location

        if self.force_mode is ForceMode.CONTINUOUS_FORCE:
            end = origin + self.force_direction.safe_normal() * (
                self.current_force_magnitude * DEBUG_SCALE
            )
            color, duration = "blue", -1.0
        elif self.force_mode is ForceMode.INSTANT_IMPULSE:
            end = origin + self.force_direction.safe_normal() * (
                self.force_magnitude * DEBUG_SCALE
            )
            color, duration = "green", 1.0
        elif self.force_mode is ForceMode.TORQUE_FORCE:
            end = origin + self.torque_axis.safe_normal() * (
                self.torque_magnitude * DEBUG_SCALE
            )
            color, duration = "red", -1.0
        else:
            return
        drawer.draw_line(origin, end, color, duration, 3.0)
        drawer.draw_string(end, self.force_mode.display_name, color)