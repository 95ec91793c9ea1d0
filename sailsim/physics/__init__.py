"""
Physics Module
==============

Fluid-force formulas and relative-flow computation shared by all hull parts.
"""

from .aerodynamics import (
    Force,
    lift_coefficient,
    drag_coefficient,
    force_magnitude,
    lift_force,
    drag_force,
    aero_force_vectors,
    coefficient_table,
)
from .apparent_wind import (
    true_wind,
    rotation_velocity,
    relative_water_flow,
    apparent_wind,
    apparent_wind_simple,
)

__all__ = [
    'Force',
    'lift_coefficient', 'drag_coefficient', 'force_magnitude',
    'lift_force', 'drag_force', 'aero_force_vectors', 'coefficient_table',
    'true_wind', 'rotation_velocity', 'relative_water_flow',
    'apparent_wind', 'apparent_wind_simple',
]
