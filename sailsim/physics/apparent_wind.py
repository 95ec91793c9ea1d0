"""
Apparent Wind Module
====================

Relative flow (air or water) seen at a point on a moving, rotating hull.

The rotation term is evaluated at a single longitudinal offset and treated
as uniform across the sail or appendage at that offset.
"""

import math

from ..geometry import Vector2, invert_angle


def true_wind(wind_angle: float, wind_speed: float) -> Vector2:
    """
    True wind velocity.

    Args:
        wind_angle: Direction the wind blows FROM (radians)
        wind_speed: Wind speed (m/s)
    """
    return Vector2.from_angle(invert_angle(wind_angle)).scale(wind_speed)


def rotation_velocity(rot_velocity: float, heading: float, offset: float) -> Vector2:
    """Velocity of a point offset along the hull axis due to rotation alone."""
    return Vector2(offset, 0.0).rotate(math.pi / 2.0).scale(rot_velocity).rotate(heading)


def relative_water_flow(velocity: Vector2, rot_velocity: float, heading: float,
                        offset: float) -> Vector2:
    """Still-water flow past a point offset along the hull axis."""
    return Vector2.zeros() - velocity - rotation_velocity(rot_velocity, heading, offset)


def apparent_wind(velocity: Vector2, rot_velocity: float, heading: float,
                  offset: float, wind_angle: float, wind_speed: float) -> Vector2:
    """
    Apparent wind at a point offset along the hull axis.

    Args:
        velocity: Hull linear velocity
        rot_velocity: Hull rotational velocity (rad/s)
        heading: Hull heading (radians)
        offset: Signed distance from the hull centre, bow positive
        wind_angle: Direction the wind blows from (radians)
        wind_speed: True wind speed

    Returns:
        Apparent wind vector
    """
    return true_wind(wind_angle, wind_speed) + relative_water_flow(
        velocity, rot_velocity, heading, offset)


def apparent_wind_simple(velocity: Vector2, wind_angle: float, wind_speed: float) -> Vector2:
    """Apparent wind from translation only, for instrument readouts."""
    return true_wind(wind_angle, wind_speed) - velocity
