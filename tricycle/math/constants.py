"""
Mathematical constants and default robot geometry for tricycle odometry.
"""

import math
import numpy as np

# Mathematical constants
PI = math.pi
TWO_PI = 2 * math.pi
HALF_PI = math.pi / 2

# Smallest representable step around 1.0 for the float type in use
EPSILON = float(np.finfo(float).eps)

# Conversion factors
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Default tricycle geometry
FRONT_WHEEL_RADIUS_M = 0.2       # Front (steering/traction) wheel radius
DIST_FRONT_TO_REAR_M = 1.0       # Front wheel to rear axle (r)
DIST_BETWEEN_REAR_WHEELS_M = 0.75  # Rear track width (d), used for drawing
TICKS_PER_REVOLUTION = 512       # Front wheel encoder resolution

# Virtual gyro error parameters (disabled by default)
GYRO_NOISE_STDEV_DEG = 0.1       # Gaussian noise standard deviation (deg/s)
GYRO_DRIFT_DEG_PER_MINUTE = 0.3  # Unidirectional drift rate
