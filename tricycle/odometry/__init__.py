"""
Tricycle-drive odometry: pose state, robot geometry and the pose estimator.
"""

from .state import Pose, Position, Contour
from .geometry import GeometryConstants
from .tricycle import TricycleOdometry

__all__ = ["Pose", "Position", "Contour", "GeometryConstants", "TricycleOdometry"]
