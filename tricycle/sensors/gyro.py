"""
Virtual gyroscope synthesized from steering angle and encoder ticks.

Modeling concept
----------------
Encoder ticks accumulate over the whole sampling interval, but the moment
the steering angle changed inside that interval is unknown:

         when did the steering angle change?
          (1)     (2)     (3)
           |       |       |
           V       V       V
    -----+-----------------+----->
       t_s(n)           t_s(n+1)

A change at (1) shapes almost the whole interval, a change at (3) barely
affects it. The gyro therefore uses the average of the previous and the
current steering angle, which is a known source of inaccuracy.
"""

import math
from typing import Optional, Dict, Any
from ..math.utils import wrap_angle, angle_diff, near_zero
from ..odometry.geometry import GeometryConstants


class VirtualGyroscope:
    """
    Simulated Z-axis gyroscope for the tricycle robot.

    Keeps a wrapped heading estimate of its own and exposes the angular
    velocity consumed by TricycleOdometry.estimate(). update() must be
    called for a sample before the odometry estimate for that sample.
    """

    def __init__(self, geometry: Optional[GeometryConstants] = None):
        """
        Initialize the virtual gyroscope.

        Args:
            geometry: Robot geometry (only wheel constants are read)
        """
        self.geometry = geometry or GeometryConstants()

        self.angular_velocity = 0.0   # rad/s
        self.angle = 0.0              # rad, wrapped to [-pi, pi)

        self.prev_time = 0.0
        self.prev_steering_angle = 0.0

        self.update_count = 0

    def update(self, time: float, steering_angle: float, encoder_ticks: int) -> None:
        """
        Update angle and angular velocity of the gyro.

        Args:
            time: Sample timestamp (s)
            steering_angle: Front wheel steering angle (rad)
            encoder_ticks: Front wheel encoder ticks since the previous sample
        """
        dt = time - self.prev_time

        half_arc = (encoder_ticks * self.geometry.distance_per_tick) / 2.0
        delta_angle = (half_arc / self.geometry.dist_front_to_rear) \
            * math.sin((self.prev_steering_angle + steering_angle) / 2.0)

        self.angular_velocity = angle_diff(self.angle, self.angle + delta_angle)
        if not near_zero(dt):
            self.angular_velocity /= dt

        self.angle = wrap_angle(self.angle + delta_angle)

        self.prev_time = time
        self.prev_steering_angle = steering_angle
        self.update_count += 1

    def get_angular_velocity(self) -> float:
        """Get the last computed angular velocity (rad/s)."""
        return self.angular_velocity

    def get_angle(self) -> float:
        """Get the integrated gyro angle (rad)."""
        return self.angle

    def reset(self):
        """Clear all integrated state."""
        self.angular_velocity = 0.0
        self.angle = 0.0
        self.prev_time = 0.0
        self.prev_steering_angle = 0.0
        self.update_count = 0

    def get_statistics(self) -> Dict[str, Any]:
        """Get gyro statistics."""
        return {
            'updates': self.update_count,
            'angle': self.angle,
            'angular_velocity': self.angular_velocity,
            'prev_time': self.prev_time,
        }
