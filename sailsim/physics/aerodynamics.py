"""
Aerodynamics Module
===================

Empirical lift/drag curves and the force formula shared by sails (in air)
and the keel and rudder (in water).

Coefficient curves approximate a thin airfoil with an exaggerated onset
slope, see:
https://aviation.stackexchange.com/questions/64490/is-there-a-simple-relationship-between-angle-of-attack-and-lift-coefficient
"""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..geometry import Vector2


@dataclass(frozen=True)
class Force:
    """A named force vector applied at a world-frame point."""
    name: str
    point: Vector2
    vector: Vector2

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'point': self.point.to_tuple(),
            'vector': self.vector.to_tuple(),
        }


def lift_coefficient(angle: float) -> float:
    """
    Lift coefficient for an angle of attack in [0, pi].

    Steep near 0 and pi (stall onset bands), sin(2a) elsewhere.
    """
    stall_onset = (0.0 < angle < math.pi / 8.0) or (7.0 * math.pi / 8.0 < angle < math.pi)
    # Both curves have period pi; measuring from pi keeps the value at pi exact
    if angle > math.pi / 2.0:
        angle -= math.pi
    if stall_onset:
        return 1.1 * math.sin(6.0 * angle)
    return math.sin(2.0 * angle)


def drag_coefficient(angle: float) -> float:
    """Drag coefficient, zero at 0 and pi and peaking at 2 for pi/2."""
    return 1.0 - math.cos(2.0 * angle)


def force_magnitude(coefficient: float, area: float, density: float, speed: float) -> float:
    """F = C * A * rho * v^2 / 2"""
    return coefficient * area * density * speed * speed * 0.5


def lift_force(angle: float, area: float, density: float, speed: float) -> float:
    return force_magnitude(lift_coefficient(angle), area, density, speed)


def drag_force(angle: float, area: float, density: float, speed: float) -> float:
    return force_magnitude(drag_coefficient(angle), area, density, speed)


def aero_force_vectors(angle_of_attack: float, area: float, density: float,
                       relative_flow: Vector2) -> Tuple[Vector2, Vector2]:
    """
    Lift and drag vectors for a foil in a relative flow.

    Drag acts along the flow. Lift acts perpendicular to it, always on the
    flow's right-hand side (flow rotated by -90 degrees); a negative lift
    coefficient puts it on the other side.

    Args:
        angle_of_attack: Angle between chord and flow, in [0, pi]
        area: Foil area (m²)
        density: Fluid density (kg/m³)
        relative_flow: Flow vector as seen by the foil

    Returns:
        (lift, drag) vectors. Both are zero for a zero flow.
    """
    speed = relative_flow.magnitude()
    if speed == 0.0:
        return Vector2.zeros(), Vector2.zeros()

    direction = relative_flow.unit()
    lift = direction.rotate(-math.pi / 2.0).scale(
        lift_force(angle_of_attack, area, density, speed))
    drag = direction.scale(drag_force(angle_of_attack, area, density, speed))
    return lift, drag


def coefficient_table(step_degrees: float = 1.0) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Sample both coefficient curves over [0, 180) degrees.

    Returns:
        (angles in radians, lift coefficients, drag coefficients)
    """
    angles = np.radians(np.arange(0.0, 180.0, step_degrees))
    cls = np.array([lift_coefficient(a) for a in angles])
    cds = np.array([drag_coefficient(a) for a in angles])
    return angles, cls, cds
