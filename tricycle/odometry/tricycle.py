"""
Dead-reckoning pose estimator for the tricycle-drive robot.
"""

import math
from typing import Optional, Dict, Any
from .state import Pose, Position, Contour
from .geometry import GeometryConstants
from ..math.constants import HALF_PI
from ..math.utils import wrap_angle, near_zero


class TricycleOdometry:
    """
    Integrates front wheel travel and an externally supplied angular
    velocity into a 2D pose.

    The heading is advanced with the angular velocity handed in by the
    caller (normally the virtual gyroscope), not with a turn rate derived
    from the steering angle. The gyro rate is treated as the more reliable
    signal.
    """

    def __init__(self, geometry: Optional[GeometryConstants] = None,
                 initial_pose: Optional[Pose] = None):
        """
        Initialize the estimator.

        Args:
            geometry: Robot geometry (defaults to the reference tricycle)
            initial_pose: Starting pose (defaults to the origin)
        """
        self.geometry = geometry or GeometryConstants()

        self._initial_pose = initial_pose.copy() if initial_pose else Pose()
        self._initial_pose.heading = wrap_angle(self._initial_pose.heading)

        self.pose = self._initial_pose.copy()
        self.prev_time = 0.0

        # Statistics
        self.estimate_count = 0

    @property
    def front_distance_per_tick(self) -> float:
        return self.geometry.distance_per_tick

    def estimate(self, time: float, steering_angle: float, encoder_ticks: int,
                 angular_velocity: float) -> Pose:
        """
        Advance the pose by one sample.

        The virtual gyroscope must already have been updated with this same
        sample, since angular_velocity is its current output.

        Args:
            time: Sample timestamp (s)
            steering_angle: Front wheel steering angle (rad)
            encoder_ticks: Front wheel encoder ticks since the previous sample
            angular_velocity: Rotation rate about the Z axis (rad/s)

        Returns:
            Copy of the new estimated pose (x, y in m, heading in rad)
        """
        dt = time - self.prev_time

        front_wheel_dist = encoder_ticks * self.geometry.distance_per_tick

        # Guard against divide by zero on repeated timestamps
        front_wheel_vel = 0.0
        if not near_zero(dt):
            front_wheel_vel = front_wheel_dist / dt

        self.pose.heading = wrap_angle(self.pose.heading + angular_velocity * dt)

        travel = front_wheel_vel * dt * math.cos(steering_angle)
        self.pose.x += travel * math.cos(self.pose.heading)
        self.pose.y += travel * math.sin(self.pose.heading)

        self.prev_time = time
        self.estimate_count += 1

        return self.pose.copy()

    def get_robot_pose(self) -> Pose:
        """Get a copy of the current pose."""
        return self.pose.copy()

    def get_contour(self) -> Contour:
        """
        Get the wheel contact points for the current pose.

        Returns:
            Contour with front wheel, left rear wheel and right rear wheel
        """
        x, y, heading = self.pose.x, self.pose.y, self.pose.heading
        half_track = self.geometry.dist_between_rear_wheels / 2.0
        wheelbase = self.geometry.dist_front_to_rear

        angle = HALF_PI - heading

        front = Position(x + wheelbase * math.cos(heading),
                         y + wheelbase * math.sin(heading))
        left_rear = Position(x - half_track * math.cos(angle),
                             y + half_track * math.sin(angle))
        right_rear = Position(x + half_track * math.cos(angle),
                              y - half_track * math.sin(angle))

        return Contour(front=front, left_rear=left_rear, right_rear=right_rear)

    def dist_to_ticks(self, distance: float, time_gap: float = 1.0) -> int:
        """
        Convert a front wheel distance to encoder ticks.

        time_gap is accepted for symmetry with a velocity based inverse model
        and is not used.
        """
        return math.floor(distance * self.geometry.ticks_per_revolution)

    def reset(self, initial_pose: Optional[Pose] = None):
        """Restore the initial (or a new) pose and clear the time base."""
        if initial_pose is not None:
            self._initial_pose = initial_pose.copy()
            self._initial_pose.heading = wrap_angle(self._initial_pose.heading)

        self.pose = self._initial_pose.copy()
        self.prev_time = 0.0
        self.estimate_count = 0

    def get_statistics(self) -> Dict[str, Any]:
        """Get estimator statistics."""
        return {
            'estimates': self.estimate_count,
            'prev_time': self.prev_time,
            'pose': self.pose.pose_vector.tolist(),
        }
