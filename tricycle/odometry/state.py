"""
Pose and footprint representation for the tricycle robot.
"""

import numpy as np
from dataclasses import dataclass


@dataclass
class Position:
    """2D point in the world frame (meters)."""

    x: float = 0.0
    y: float = 0.0

    @property
    def vector(self) -> np.ndarray:
        """Get position as [x, y] vector."""
        return np.array([self.x, self.y])

    def distance_to(self, other: 'Position') -> float:
        """Euclidean distance to another position."""
        return float(np.hypot(self.x - other.x, self.y - other.y))


@dataclass
class Pose:
    """
    Estimated robot pose in a fixed world frame.

    - x, y: Position of the robot center (rear axle midpoint) in meters
    - heading: Orientation in radians, kept in [-pi, pi)
    """

    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0

    @property
    def position(self) -> Position:
        """Get the pose's position component."""
        return Position(self.x, self.y)

    @property
    def pose_vector(self) -> np.ndarray:
        """Get pose as [x, y, heading] vector."""
        return np.array([self.x, self.y, self.heading])

    def copy(self) -> 'Pose':
        """Create a copy of the pose."""
        return Pose(x=self.x, y=self.y, heading=self.heading)

    def __str__(self) -> str:
        return f"Pose(pos=[{self.x:.3f}, {self.y:.3f}], heading={self.heading:.3f})"


@dataclass
class Contour:
    """Wheel contact points of the robot, used to draw its footprint."""

    front: Position
    left_rear: Position
    right_rear: Position

    def polygon(self, center: Position) -> list:
        """
        Closed footprint polygon starting and ending at the robot center.

        Returns:
            [center, left_rear, front, right_rear, center]
        """
        return [center, self.left_rear, self.front, self.right_rear, center]
