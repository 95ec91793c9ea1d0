"""
Force Assembly Module
=====================

Builds the list of forces acting on one ship for one tick:
sails (lift + drag), keel halves, rudder and hull skin friction.

Relative flow vectors are multiplied by DELTA_TIME before entering the
force formula, and the integrator applies the resulting forces without a
further DELTA_TIME factor. HULL_FRICTION_COEFFICIENT, SAIL_AERO_CENTER and
the densities are tuned against exactly this scaling.
"""

import math
from typing import List, Tuple
import logging

from ..geometry import Vector2, bound
from ..physics.aerodynamics import Force, aero_force_vectors, force_magnitude
from ..physics.apparent_wind import apparent_wind, relative_water_flow
from .sail_trim import SailTrimController
from .specs import DENSITY_AIR, DENSITY_WATER
from .state import ShipState

logger = logging.getLogger(__name__)


DELTA_TIME = 1.0 / 30.0  # seconds per tick

# Chosen so top speed is roughly twice the wind speed
HULL_FRICTION_COEFFICIENT = 0.007

# Aerodynamic centre, as a fraction of sail width aft of the mast
SAIL_AERO_CENTER = 0.33


def angle_of_attack(chord_angle: float, flow: Vector2) -> float:
    """Angle between a chord line and the flow, in [0, pi)."""
    return bound(chord_angle - flow.to_angle(), 0.0, math.pi)


class ForceAssembly:
    """
    Computes the forces on a ship for the current wind.

    Sail trim angles on the state are updated as a side effect.
    """

    def __init__(self, state: ShipState, dt: float = DELTA_TIME):
        self.state = state
        self.dt = dt
        self._trim = SailTrimController(state)

    def compute(self, wind_angle: float, wind_speed: float) -> List[Force]:
        """
        All forces for this tick, in a fixed order and not aggregated.

        Args:
            wind_angle: Direction the true wind blows from (rad)
            wind_speed: True wind speed

        Returns:
            List of named forces with world-frame application points
        """
        forces: List[Force] = []
        state = self.state
        moving = state.is_moving()

        if wind_speed != 0.0 or moving:
            for index in range(len(state.spec.sails)):
                forces.extend(self.sail_forces(index, wind_angle, wind_speed))

        if moving:
            forces.extend(self.keel_forces())
            forces.extend(self.rudder_forces())
            forces.extend(self.hull_forces())

        return forces

    def _water_flow(self, offset: float) -> Vector2:
        state = self.state
        return relative_water_flow(
            state.velocity, state.rot_velocity, state.heading, offset).scale(self.dt)

    def _hull_point(self, offset: float) -> Vector2:
        return self.state.location + Vector2(offset, 0.0).rotate(self.state.heading)

    def sail_forces(self, index: int, wind_angle: float, wind_speed: float) -> List[Force]:
        state = self.state
        sail = state.spec.sails[index]

        wind = apparent_wind(
            state.velocity, state.rot_velocity, state.heading, sail.mast_offset,
            wind_angle, wind_speed
        ).scale(self.dt)
        wind_direction = wind.to_angle()
        sail_angle = self._trim.update(index, wind_direction)
        aoa = angle_of_attack(state.heading + sail_angle, wind)
        lift, drag = aero_force_vectors(aoa, sail.area, DENSITY_AIR, wind)

        center = (self._hull_point(sail.mast_offset)
                  + Vector2(-sail.width * SAIL_AERO_CENTER, 0.0).rotate(state.heading + sail_angle))
        return [
            Force(f"Sail {index} Lift", center, lift),
            Force(f"Sail {index} Drag", center, drag),
        ]

    def keel_segments(self) -> List[Tuple[str, float, float]]:
        """
        Keel split about the hull centre as (name, centre offset, length).

        Zero-length segments are omitted.
        """
        spec = self.state.spec
        if spec.keel_start_offset <= 0.0:
            fore_length, aft_length = 0.0, spec.keel_length
        else:
            aft_length = max(0.0, spec.keel_length - spec.keel_start_offset)
            fore_length = spec.keel_length - aft_length

        segments = []
        if fore_length > 0.0:
            segments.append(("Fore Keel", spec.keel_start_offset - fore_length * 0.5, fore_length))
        if aft_length > 0.0:
            keel_end_offset = spec.keel_start_offset - spec.keel_length
            segments.append(("Aft Keel", keel_end_offset + aft_length * 0.5, aft_length))
        return segments

    def keel_forces(self) -> List[Force]:
        state = self.state
        forces = []
        for name, center, length in self.keel_segments():
            flow = self._water_flow(center)
            aoa = angle_of_attack(state.heading, flow)
            lift, drag = aero_force_vectors(
                aoa, state.spec.keel_height * length, DENSITY_WATER, flow)
            point = self._hull_point(center)
            forces.append(Force(f"{name} Lift", point, lift))
            forces.append(Force(f"{name} Drag", point, drag))
        return forces

    def rudder_forces(self) -> List[Force]:
        state = self.state
        spec = state.spec
        stern = -spec.hull_length * 0.5
        flow = self._water_flow(stern)
        aoa = angle_of_attack(state.heading + state.rudder_angle, flow)
        lift, drag = aero_force_vectors(
            aoa, spec.rudder_height * spec.rudder_length, DENSITY_WATER, flow)
        point = self._hull_point(stern)
        return [
            Force("Rudder Lift", point, lift),
            Force("Rudder Drag", point, drag),
        ]

    def hull_forces(self) -> List[Force]:
        """Skin friction on the bow and stern halves of the hull."""
        spec = self.state.spec
        quarter = spec.hull_length * 0.25
        half = spec.hull_length * 0.5
        return [
            Force("Bow Drag", self._hull_point(half), self._friction(quarter)),
            Force("Stern Drag", self._hull_point(-half), self._friction(-quarter)),
        ]

    def _friction(self, lever_arm: float) -> Vector2:
        state = self.state
        spec = state.spec
        flow = self._water_flow(lever_arm)
        speed = flow.magnitude()
        if speed == 0.0:
            return Vector2.zeros()

        aoa = angle_of_attack(state.heading, flow)
        apparent_width = (abs(math.cos(aoa)) * spec.hull_width
                          + abs(math.sin(aoa)) * spec.hull_length * 0.5)
        wetted_area = spec.hull_depth * apparent_width
        magnitude = force_magnitude(HULL_FRICTION_COEFFICIENT, wetted_area, DENSITY_WATER, speed)
        return flow.unit().scale(magnitude)
