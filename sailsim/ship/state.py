"""
Ship State Module
=================

Mutable per-vessel state: motion, persisted sail trim and control inputs.
"""

import copy
import math
from dataclasses import dataclass, field
from typing import List, Optional

from ..geometry import Vector2, bound_angle, find_angle
from .specs import ShipSpecification


@dataclass
class ShipState:
    """
    State of one vessel.

    The specification is validated on construction; a ShipState never holds
    an invalid design. Angle-valued fields are wrapped into [-pi, pi), and
    trim angles never exceed the limit set by their mainsheet.
    """
    spec: ShipSpecification = field(default_factory=ShipSpecification)

    # Indirectly controlled state
    location: Vector2 = field(default_factory=Vector2.zeros)
    velocity: Vector2 = field(default_factory=Vector2.zeros)
    rot_velocity: float = 0.0        # rad/s, counter-clockwise positive
    heading: float = 0.0             # rad
    trim_angles: Optional[List[float]] = None   # rad, one per sail, hull relative

    # Directly controlled state
    mainsheet_lengths: Optional[List[float]] = None   # m, one per sail
    rudder_angle: float = 0.0        # rad, hull relative

    def __post_init__(self):
        self.spec.require_valid()
        sail_count = len(self.spec.sails)

        if self.mainsheet_lengths is None:
            # Eased so the boom can swing 60° either side
            self.mainsheet_lengths = [sail.width for sail in self.spec.sails]
        self.mainsheet_lengths = list(self.mainsheet_lengths)
        if len(self.mainsheet_lengths) != sail_count:
            raise ValueError(
                f"Expected {sail_count} mainsheet lengths, got {len(self.mainsheet_lengths)}")

        if self.trim_angles is None:
            self.trim_angles = [0.0] * sail_count
        self.trim_angles = [bound_angle(a) for a in self.trim_angles]
        if len(self.trim_angles) != sail_count:
            raise ValueError(
                f"Expected {sail_count} trim angles, got {len(self.trim_angles)}")
        self._clamp_trim_angles()

        self.heading = bound_angle(self.heading)
        self.rudder_angle = bound_angle(self.rudder_angle)

    @property
    def mass(self) -> float:
        return self.spec.calculate_mass()

    @property
    def inverse_mass(self) -> float:
        return self.spec.inverse_mass

    @property
    def speed(self) -> float:
        return self.velocity.magnitude()

    def is_moving(self) -> bool:
        return self.velocity.magnitude() != 0.0 or self.rot_velocity != 0.0

    def set_controls(self, mainsheet_lengths: List[float], rudder_angle: float):
        """
        Apply new control inputs.

        Raises:
            ValueError: if the mainsheet list does not match the sail count
        """
        if len(mainsheet_lengths) != len(self.spec.sails):
            raise ValueError(
                f"Expected {len(self.spec.sails)} mainsheet lengths, "
                f"got {len(mainsheet_lengths)}")
        self.mainsheet_lengths = list(mainsheet_lengths)
        self.rudder_angle = bound_angle(rudder_angle)
        self._clamp_trim_angles()

    def _clamp_trim_angles(self):
        """Pull each sail in to the limit of its mainsheet, keeping its side."""
        for index, sail in enumerate(self.spec.sails):
            limit = find_angle(sail.width, sail.width, self.mainsheet_lengths[index])
            angle = self.trim_angles[index]
            if abs(angle) > limit:
                self.trim_angles[index] = math.copysign(limit, angle)

    def snapshot(self) -> 'ShipState':
        """Independent copy, safe to hand to readers."""
        return copy.deepcopy(self)

    def summary(self) -> dict:
        """JSON-friendly view of the state."""
        return {
            'location': self.location.to_tuple(),
            'velocity': self.velocity.to_tuple(),
            'speed': self.speed,
            'rot_velocity': self.rot_velocity,
            'heading': self.heading,
            'heading_deg': math.degrees(self.heading),
            'trim_angles': list(self.trim_angles),
            'mainsheet_lengths': list(self.mainsheet_lengths),
            'rudder_angle': self.rudder_angle,
        }
