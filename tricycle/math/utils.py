"""
Mathematical utility functions for tricycle odometry.
"""

import math
from .constants import PI, TWO_PI, EPSILON


def wrap_angle(angle):
    """
    Wrap angle to [-pi, pi) range.

    Uses the IEEE remainder, which is exact, so the result matches repeated
    add/subtract of 2*pi for typical magnitudes while still terminating for
    huge ones. Non-finite input yields NaN.

    Args:
        angle (float): Angle in radians

    Returns:
        float: Wrapped angle in [-pi, pi)
    """
    if not math.isfinite(angle):
        return math.nan

    wrapped = math.remainder(angle, TWO_PI)
    if wrapped >= PI:
        wrapped -= TWO_PI
    return wrapped


def angle_diff(start, end):
    """
    Shortest signed angular difference from start to end.

    Args:
        start (float): Start angle in radians
        end (float): End angle in radians

    Returns:
        float: end - start wrapped to (-pi, pi]
    """
    return -wrap_angle(start - end)


def near_zero(value, eps=EPSILON):
    """Check whether |value| is below machine epsilon."""
    return abs(value) < eps


def almost_equal(a, b, eps=EPSILON):
    """Check whether two floats differ by less than machine epsilon."""
    return abs(a - b) < eps


def degrees_to_radians(degrees):
    """Convert degrees to radians."""
    return degrees * PI / 180.0


def radians_to_degrees(radians):
    """Convert radians to degrees."""
    return radians * 180.0 / PI
