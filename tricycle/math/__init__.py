"""
Mathematical utilities for tricycle odometry calculations.
"""

from .utils import wrap_angle, angle_diff, near_zero, almost_equal
from .constants import *

__all__ = ["wrap_angle", "angle_diff", "near_zero", "almost_equal"]
