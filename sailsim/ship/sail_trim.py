"""
Sail Trim Module
================

Sets each sail's angle from the apparent wind and its mainsheet.

The mainsheet and the two equal sides of the sail (boom and the line from
boom end to mast, both taken as the sail width) form a triangle, so the
mainsheet length fixes the maximum boom angle.

A sail inside that angle luffs, pointing straight into the apparent wind.
Beyond it the sail is held taut at the limit and stays on its current side
until the wind moves round far enough to push it across.
"""

import math
import logging

from ..geometry import bound_angle, find_angle, invert_angle
from .state import ShipState

logger = logging.getLogger(__name__)


def max_sail_angle(sail_width: float, mainsheet_length: float) -> float:
    """Largest boom angle (rad) the mainsheet allows."""
    return find_angle(sail_width, sail_width, mainsheet_length)


def hull_relative_wind_angle(apparent_wind_angle: float, heading: float) -> float:
    """Direction the apparent wind comes from, relative to the bow."""
    return bound_angle(invert_angle(apparent_wind_angle) - heading)


def trim_angle(relative_wind: float, limit: float, previous: float) -> float:
    """
    Sail angle for a hull-relative wind direction.

    Args:
        relative_wind: Hull-relative apparent wind source angle
        limit: Maximum sail angle from the mainsheet
        previous: Sail angle from the previous tick

    Returns:
        New sail angle, never exceeding limit in magnitude
    """
    if abs(relative_wind) <= limit:
        return relative_wind
    return math.copysign(limit, bound_angle(relative_wind - previous))


class SailTrimController:
    """Per-ship trim law; the persisted angles live on ShipState.trim_angles."""

    def __init__(self, state: ShipState):
        self.state = state

    def max_angle(self, sail_index: int) -> float:
        sail = self.state.spec.sails[sail_index]
        return max_sail_angle(sail.width, self.state.mainsheet_lengths[sail_index])

    def update(self, sail_index: int, apparent_wind_angle: float) -> float:
        """
        Trim one sail and persist the result.

        Args:
            sail_index: Index into the ship's sail list
            apparent_wind_angle: World-frame angle of the apparent wind vector

        Returns:
            New hull-relative sail angle (rad)
        """
        previous = self.state.trim_angles[sail_index]
        relative_wind = hull_relative_wind_angle(apparent_wind_angle, self.state.heading)
        angle = trim_angle(relative_wind, self.max_angle(sail_index), previous)

        if angle * previous < 0.0:
            logger.debug(
                f"Sail {sail_index} crossed over: {math.degrees(previous):.1f}° → "
                f"{math.degrees(angle):.1f}°"
            )

        self.state.trim_angles[sail_index] = angle
        return angle
