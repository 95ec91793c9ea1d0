"""
Shared test fixtures for sailsim unit tests.
"""

import pytest

from sailsim.geometry import Vector2
from sailsim.ship.specs import SailSpec, ShipSpecification
from sailsim.ship.state import ShipState
from sailsim.simulation.clock import Simulation, SimConfig


@pytest.fixture
def default_spec():
    """Default single-sail ship design."""
    return ShipSpecification.default()


@pytest.fixture
def two_sail_spec():
    """Valid two-masted design."""
    return ShipSpecification(sails=[
        SailSpec(mast_offset=4.0, width=3.0, height=6.0),
        SailSpec(mast_offset=0.5, width=3.0, height=6.0),
    ])


@pytest.fixture
def ship(default_spec):
    """Stationary ship at the origin heading along +x."""
    return ShipState(spec=default_spec, location=Vector2(0.0, 0.0), heading=0.0)


@pytest.fixture
def moving_ship(default_spec):
    """Ship sailing along +x at 1 m/s with no rotation."""
    return ShipState(
        spec=default_spec,
        location=Vector2(0.0, 0.0),
        velocity=Vector2(1.0, 0.0),
        heading=0.0,
    )


@pytest.fixture
def simulation():
    """Simulation with the default fleet and a 5 m/s wind from angle 0."""
    return Simulation(SimConfig(wind_angle=0.0, wind_speed=5.0))


@pytest.fixture
def calm_simulation():
    """Simulation with the default fleet and no wind."""
    return Simulation(SimConfig(wind_angle=0.0, wind_speed=0.0))
