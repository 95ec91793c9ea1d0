"""
Instruments Module
==================

Force breakdown for a single hypothetical ship, for inspecting the model
outside a running simulation.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..geometry import Vector2, invert_angle
from ..physics.aerodynamics import Force
from ..physics.apparent_wind import apparent_wind_simple
from ..ship.forces import ForceAssembly
from ..ship.integrator import RigidBodyIntegrator
from ..ship.specs import ShipSpecification
from ..ship.state import ShipState

# Where the readout arrows are drawn, clear of a ship at the origin
WIND_READOUT_POINT = Vector2(0.0, 13.0)
ROTATION_READOUT_POINT = Vector2(13.0, 0.0)


@dataclass
class ForceReport:
    """
    Forces on a ship for one tick and the state they produce.

    before is the ship as it entered the tick, ahead of sail trim.
    """
    forces: List[Force]
    before: ShipState
    after: ShipState

    def to_dict(self) -> dict:
        return {
            'forces': [f.to_dict() for f in self.forces],
            'before': self.before.summary(),
            'after': self.after.summary(),
        }


def debug_ship_physics(wind_angle: float, wind_speed: float, velocity: Vector2,
                       rot_velocity: float, heading: float,
                       mainsheet_lengths: List[float], rudder_angle: float,
                       spec: Optional[ShipSpecification] = None) -> ForceReport:
    """
    Compute the forces on a ship at the origin and apply one tick.

    The force list starts with four readouts that are not forces on the hull:
    "Wind", "Velocity", "Apparent Wind" (translation only) and "Rotation".
    """
    ship = ShipState(
        spec=spec or ShipSpecification.default(),
        location=Vector2.zeros(),
        velocity=velocity,
        rot_velocity=rot_velocity,
        heading=heading,
        mainsheet_lengths=mainsheet_lengths,
        rudder_angle=rudder_angle,
    )

    before = ship.snapshot()
    forces = ForceAssembly(ship).compute(wind_angle, wind_speed)
    RigidBodyIntegrator(ship).apply(forces)

    readouts = [
        Force("Wind", WIND_READOUT_POINT,
              Vector2.from_angle(invert_angle(wind_angle)).scale(wind_speed)),
        Force("Velocity", WIND_READOUT_POINT, velocity),
        Force("Apparent Wind", WIND_READOUT_POINT,
              apparent_wind_simple(velocity, wind_angle, wind_speed)),
        Force("Rotation", ROTATION_READOUT_POINT, Vector2(0.0, rot_velocity)),
    ]
    return ForceReport(forces=readouts + forces, before=before, after=ship)
