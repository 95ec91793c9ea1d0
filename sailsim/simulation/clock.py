"""
Simulation Clock
================

Steps a population of independent ships under shared wind settings.

The host application creates and owns a Simulation. Every public method
holds the simulation lock for its whole duration, so a reader never sees a
ship half way through a tick, and reads return copies.
"""

import math
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging

from ..geometry import Vector2, bound_angle
from ..ship.forces import DELTA_TIME
from ..ship.integrator import update_ship
from ..ship.specs import ShipSpecification
from ..ship.state import ShipState

logger = logging.getLogger(__name__)


@dataclass
class SimSettings:
    """Wind shared by every ship; changed only between ticks."""
    wind_angle: float = 0.0     # rad, direction the wind blows from
    wind_speed: float = 5.0     # m/s

    def to_dict(self) -> dict:
        return {'wind_angle': self.wind_angle, 'wind_speed': self.wind_speed}


@dataclass
class SimConfig:
    """Configuration for a new simulation."""
    wind_angle: float = 0.0
    wind_speed: float = 5.0

    # Hull centres of the default fleet; all start at rest heading west
    initial_positions: List[Tuple[float, float]] = field(
        default_factory=lambda: [(50.0, 25.0), (50.0, 50.0), (50.0, 75.0)]
    )
    initial_heading: float = math.pi


def default_population(config: Optional[SimConfig] = None) -> List[ShipState]:
    """The fleet restored by reset()."""
    config = config or SimConfig()
    return [
        ShipState(
            spec=ShipSpecification.default(),
            location=Vector2(x, y),
            heading=config.initial_heading,
        )
        for x, y in config.initial_positions
    ]


class Simulation:
    """
    Fixed-step simulation of a fleet of sailing ships.

    Ships do not interact; each is advanced from its own state and the
    shared wind settings.
    """

    def __init__(self, config: Optional[SimConfig] = None):
        self.config = config or SimConfig()
        self._lock = threading.Lock()
        self._settings = SimSettings(bound_angle(self.config.wind_angle), self.config.wind_speed)
        self._population: List[ShipState] = default_population(self.config)
        self._step = 0

    @property
    def step_count(self) -> int:
        with self._lock:
            return self._step

    def step(self) -> int:
        """
        Advance every ship by DELTA_TIME.

        Returns:
            Step counter after this tick
        """
        with self._lock:
            wind_angle = self._settings.wind_angle
            wind_speed = self._settings.wind_speed
            for index, ship in enumerate(self._population):
                forces = update_ship(ship, wind_angle, wind_speed, DELTA_TIME)
                logger.debug(
                    f"Step {self._step + 1} ship {index}: {len(forces)} forces, "
                    f"speed={ship.speed:.3f}, heading={math.degrees(ship.heading):.1f}°"
                )
            self._step += 1
            return self._step

    def reset(self):
        """Restore the default fleet and zero the step counter."""
        with self._lock:
            self._population = default_population(self.config)
            self._step = 0
        logger.info("Simulation reset")

    def get_settings(self) -> SimSettings:
        with self._lock:
            return SimSettings(self._settings.wind_angle, self._settings.wind_speed)

    def set_settings(self, wind_angle: float, wind_speed: float):
        """
        Change the wind for subsequent ticks.

        Raises:
            ValueError: for a negative wind speed
        """
        if wind_speed < 0.0:
            raise ValueError(f"Wind speed must not be negative, got {wind_speed}")
        with self._lock:
            self._settings = SimSettings(bound_angle(wind_angle), wind_speed)
        logger.info(
            f"Wind set to {math.degrees(bound_angle(wind_angle)):.1f}° at {wind_speed:.2f}"
        )

    def get_population(self) -> List[ShipState]:
        with self._lock:
            return [ship.snapshot() for ship in self._population]

    def set_population(self, population: List[ShipState]):
        """Replace the fleet; ships are copied so the caller keeps no handle."""
        with self._lock:
            self._population = [ship.snapshot() for ship in population]

    def get_ship(self, index: int) -> Optional[ShipState]:
        """Copy of one ship, or None if index is out of range."""
        with self._lock:
            if 0 <= index < len(self._population):
                return self._population[index].snapshot()
            return None

    def find_ship_near(self, point: Vector2) -> Optional[int]:
        """Index of the first ship whose hull centre is within half a hull length."""
        with self._lock:
            for index, ship in enumerate(self._population):
                if ship.location.dist(point) < ship.spec.hull_length / 2.0:
                    return index
            return None

    def set_ship_controls(self, index: int, mainsheet_lengths: List[float], rudder_angle: float):
        """
        Update one ship's controls. Out-of-range indices are ignored.

        Raises:
            ValueError: if the mainsheet list does not match the ship's sails
        """
        with self._lock:
            if not 0 <= index < len(self._population):
                logger.debug(f"Ignoring controls for missing ship {index}")
                return
            self._population[index].set_controls(mainsheet_lengths, rudder_angle)
