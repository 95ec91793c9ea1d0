"""
Rigid Body Integrator Module
============================

Applies a tick's forces to a ship's velocity, rotation and pose.

Rotation treats the ship as a point mass: torque is divided by the mass,
not by a moment of inertia.
"""

from typing import Iterable, List

from ..geometry import Vector2, bound_angle
from ..physics.aerodynamics import Force
from .forces import DELTA_TIME, ForceAssembly
from .state import ShipState


def torque_about(center: Vector2, force: Force) -> float:
    """
    Torque of a force about a point (counter-clockwise positive).

    The lever arm is rotated onto the x axis; only the force component
    perpendicular to it (the rotated y component) turns the ship.
    """
    offset = force.point - center
    angle = offset.to_angle()
    lever = offset.rotate(-angle)
    vector = force.vector.rotate(-angle)
    return vector.y * lever.magnitude()


class RigidBodyIntegrator:
    """Fixed-step integrator for a single ship."""

    def __init__(self, state: ShipState, dt: float = DELTA_TIME):
        self.state = state
        self.dt = dt

    def apply(self, forces: Iterable[Force]):
        """
        Advance the ship by one tick.

        Every force changes the linear velocity regardless of where it acts.
        Forces are not scaled by dt here, see forces.py.
        """
        state = self.state
        inverse_mass = state.inverse_mass

        for force in forces:
            state.velocity = state.velocity + force.vector.scale(inverse_mass)
            state.rot_velocity += torque_about(state.location, force) * inverse_mass

        state.location = state.location + state.velocity.scale(self.dt)
        state.heading = bound_angle(state.heading + state.rot_velocity * self.dt)


def update_ship(state: ShipState, wind_angle: float, wind_speed: float,
                dt: float = DELTA_TIME) -> List[Force]:
    """Compute this tick's forces, apply them, and return them."""
    forces = ForceAssembly(state, dt).compute(wind_angle, wind_speed)
    RigidBodyIntegrator(state, dt).apply(forces)
    return forces
