"""
Tricycle-drive dead reckoning.

This package provides platform-independent implementations of:
- Tricycle odometry (pose estimation from steering and encoder ticks)
- A virtual gyroscope derived from the same inputs
- Recorded sample replay and result file output
- Angle math utilities
"""

__version__ = "1.0.0"
__author__ = "Tricycle Odometry Team"

from .odometry import TricycleOdometry, GeometryConstants, Pose, Position, Contour
from .sensors import VirtualGyroscope, GyroNoiseModel, Sample, read_samples
from .replay import RunContext, SampleReplayDriver, ResultWriter, PoseRecord
from .math import wrap_angle, angle_diff, near_zero

__all__ = [
    "TricycleOdometry",
    "GeometryConstants",
    "Pose",
    "Position",
    "Contour",
    "VirtualGyroscope",
    "GyroNoiseModel",
    "Sample",
    "read_samples",
    "RunContext",
    "SampleReplayDriver",
    "ResultWriter",
    "PoseRecord",
    "wrap_angle",
    "angle_diff",
    "near_zero",
]
