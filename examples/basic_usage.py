#!/usr/bin/env python3
"""
Basic usage example of the tricycle odometry estimator.

This example drives a synthetic circle in memory, without any input or
result files, and compares the dead-reckoning estimate with the ideal
circle the commands describe.
"""

import sys
import os
import numpy as np

# Add core modules to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tricycle import GeometryConstants, RunContext, SampleReplayDriver, Sample, PoseRecord


def simulate_tricycle_drive(geometry, duration=30.0, dt=0.1,
                            speed=0.5, steering_angle=0.3):
    """
    Generate samples for a tricycle driving at constant speed and steering.

    Args:
        geometry: Robot geometry used to convert travel into encoder ticks
        duration: Simulation duration in seconds
        dt: Sample period in seconds
        speed: Front wheel speed in m/s
        steering_angle: Constant steering angle in radians

    Yields:
        Sample records, starting with a stationary sample at t=0
    """
    yield Sample(time=0.0, steering_angle=steering_angle, encoder_ticks=0)

    ticks_per_step = int(round(speed * dt / geometry.distance_per_tick))
    steps = int(round(duration / dt))
    for i in range(1, steps + 1):
        yield Sample(time=i * dt, steering_angle=steering_angle, encoder_ticks=ticks_per_step)


def print_status(record: PoseRecord):
    """Print current pose."""
    pose = record.pose
    print(f"Time: {record.time:.1f}s")
    print(f"  Position: [{pose.x:6.2f}, {pose.y:6.2f}] m")
    print(f"  Heading:  {pose.heading:6.3f} rad ({np.degrees(pose.heading):6.1f} deg)")
    print()


def main():
    """Main example function."""
    print("Tricycle Odometry - Basic Usage Example")
    print("=" * 50)

    geometry = GeometryConstants()
    context = RunContext.create(geometry)
    driver = SampleReplayDriver(context)

    print(f"Geometry: {geometry.to_dict()}")
    print(f"Distance per tick: {geometry.distance_per_tick:.7f} m")
    print()

    steering_angle = 0.3
    records = driver.run(simulate_tricycle_drive(geometry, steering_angle=steering_angle))

    for record in records[::50]:
        print_status(record)

    # Rear axle center moves on a circle of radius L / tan(steering)
    turn_radius = geometry.dist_front_to_rear / np.tan(steering_angle)
    final = records[-1].pose
    center = np.array([0.0, turn_radius])
    radial_error = abs(np.hypot(final.x - center[0], final.y - center[1]) - turn_radius)

    print("=== Final Statistics ===")
    print(f"Samples replayed: {context.odometry.get_statistics()['estimates']}")
    print(f"Final pose: {final}")
    print(f"Ideal turn radius: {turn_radius:.3f} m")
    print(f"Radial error: {radial_error:.3f} m")


if __name__ == "__main__":
    main()
