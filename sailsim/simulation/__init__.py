"""
Simulation Module
=================

Fleet stepping under shared wind settings, plus single-ship force readouts.
"""

from .clock import Simulation, SimSettings, SimConfig, default_population, DELTA_TIME
from .instruments import ForceReport, debug_ship_physics

__all__ = [
    'Simulation', 'SimSettings', 'SimConfig', 'default_population', 'DELTA_TIME',
    'ForceReport', 'debug_ship_physics',
]
