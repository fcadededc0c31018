"""A tutorial threshold that rises towards one with accelerating speed."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable

from .math3d import SMALL_NUMBER

logger = logging.getLogger(__name__)

PHASE_COUNT = 5


class Phase(IntEnum):
    """Tutorial phases, from the start to completion."""

    PHASE_0 = 0
    PHASE_1 = 1
    PHASE_2 = 2
    PHASE_3 = 3
    PHASE_4 = 4
    PHASE_5 = 5

    @property
    def display_name(self) -> str:
        return f"Phase {self.value}"


def finterp_to(current: float, target: float, delta_time: float, speed: float) -> float:
    """Move ``current`` towards ``target`` by a speed-scaled fraction of the gap."""
    if speed <= 0.0:
        return target
    distance = target - current
    if distance * distance < SMALL_NUMBER:
        return target
    alpha = min(max(delta_time * speed, 0.0), 1.0)
    return current + distance * alpha


@dataclass(eq=False)
class AcceleratingTutorialThreshold:
    """Threshold in [0, 1] whose interpolation speed grows every tick."""

    base_interp_speed: float = 0.1
    interp_acceleration: float = 0.3
    threshold: float = 0.0
    current_phase: Phase = Phase.PHASE_0
    current_interp_speed: float = field(init=False)
    previous_phase: Phase = field(init=False)
    _listeners: list[Callable[[Phase], None]] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.current_interp_speed = self.base_interp_speed
        self.previous_phase = self.current_phase

    def add_listener(self, callback: Callable[[Phase], None]) -> None:
        """Register a callback invoked with the new phase on every change."""
        self._listeners.append(callback)

    def tick(self, delta_time: float) -> None:
        """Accelerate, move the threshold towards one and update the phase."""
        self.current_interp_speed += self.interp_acceleration * delta_time
        self.threshold = finterp_to(
            self.threshold, 1.0, delta_time, self.current_interp_speed
        )
        self.update_phase()

    def update_phase(self) -> None:
        """Derive the phase from the threshold and notify listeners on change."""
        index = min(max(math.floor(self.threshold * PHASE_COUNT), 0), PHASE_COUNT)
        self.current_phase = Phase(index)
        if self.current_phase != self.previous_phase:
            for callback in self._listeners:
                callback(self.current_phase)
            logger.info("Tutorial phase changed: %d", int(self.current_phase))
            self.previous_phase = self.current_phase