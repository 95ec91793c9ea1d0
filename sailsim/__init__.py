"""
sailsim
=======

2D rigid-body simulation of sailing ships under sail, keel, rudder and
hull forces, stepped at a fixed interval.
"""

from .geometry import Vector2, bound, bound_angle, invert_angle, find_angle
from .ship import SailSpec, ShipSpecification, ShipState, InvalidShipSpecification
from .simulation import Simulation, SimSettings, SimConfig

__version__ = "0.1.0"

__all__ = [
    'Vector2', 'bound', 'bound_angle', 'invert_angle', 'find_angle',
    'SailSpec', 'ShipSpecification', 'ShipState', 'InvalidShipSpecification',
    'Simulation', 'SimSettings', 'SimConfig',
]
