"""
Ship Module
===========

Ship design, per-vessel state, sail trim, force assembly and integration.
"""

from .specs import (
    SailSpec,
    ShipSpecification,
    ValidationResult,
    InvalidShipSpecification,
    DENSITY_AIR,
    DENSITY_WATER,
    DENSITY_WOOD,
    DENSITY_SAIL,
)
from .state import ShipState
from .sail_trim import SailTrimController, max_sail_angle, hull_relative_wind_angle, trim_angle
from .forces import ForceAssembly, DELTA_TIME, HULL_FRICTION_COEFFICIENT, SAIL_AERO_CENTER
from .integrator import RigidBodyIntegrator, torque_about, update_ship

__all__ = [
    'SailSpec', 'ShipSpecification', 'ValidationResult', 'InvalidShipSpecification',
    'DENSITY_AIR', 'DENSITY_WATER', 'DENSITY_WOOD', 'DENSITY_SAIL',
    'ShipState',
    'SailTrimController', 'max_sail_angle', 'hull_relative_wind_angle', 'trim_angle',
    'ForceAssembly', 'DELTA_TIME', 'HULL_FRICTION_COEFFICIENT', 'SAIL_AERO_CENTER',
    'RigidBodyIntegrator', 'torque_about', 'update_ship',
]
