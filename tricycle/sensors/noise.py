"""
Optional error injection for the virtual gyroscope output.

The stage runs after VirtualGyroscope.update() and before the angular
velocity reaches the odometry estimator, so the deterministic gyro model
stays untouched and can be tested on its own. With both toggles off the
stage returns its input unchanged.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass, field
from typing import Optional, Union

from ..math.constants import GYRO_NOISE_STDEV_DEG, GYRO_DRIFT_DEG_PER_MINUTE, DEG_TO_RAD

DRIFT_DIRECTIONS = ("ccw", "cw")


@dataclass
class GyroNoiseModel:
    """Adds white noise and a constant unidirectional drift to a gyro rate.

    Parameters:
        apply_noise (bool): Add zero-mean gaussian noise.
        noise_stdev (float): Noise standard deviation (rad/s).
        apply_drift (bool): Add a constant drift rate.
        drift_direction (str): 'ccw' (positive) or 'cw' (negative).
        drift_rad_per_minute (float): Drift magnitude (rad/min).
        random_state (Optional[Union[int, np.random.Generator]]): Seed or
            generator for reproducibility. If None, a new default generator
            is created.
    """
    apply_noise: bool = False
    noise_stdev: float = GYRO_NOISE_STDEV_DEG * DEG_TO_RAD
    apply_drift: bool = False
    drift_direction: str = "ccw"
    drift_rad_per_minute: float = GYRO_DRIFT_DEG_PER_MINUTE * DEG_TO_RAD
    random_state: Optional[Union[int, np.random.Generator]] = field(default=None)

    def __post_init__(self):
        if self.drift_direction not in DRIFT_DIRECTIONS:
            raise ValueError(f"drift_direction must be one of {DRIFT_DIRECTIONS}, "
                             f"got {self.drift_direction!r}")
        if self.noise_stdev < 0:
            raise ValueError("noise_stdev must be non-negative")
        if isinstance(self.random_state, np.random.Generator):
            self.rng = self.random_state
        else:
            self.rng = np.random.default_rng(self.random_state)

    @property
    def enabled(self) -> bool:
        return self.apply_noise or self.apply_drift

    @property
    def drift_rate(self) -> float:
        """Signed drift in rad/s."""
        sign = 1.0 if self.drift_direction == "ccw" else -1.0
        return sign * self.drift_rad_per_minute / 60.0

    def apply(self, angular_velocity: float) -> float:
        """Return the angular velocity with the enabled errors added."""
        if self.apply_noise:
            angular_velocity += float(self.rng.normal(scale=self.noise_stdev))
        if self.apply_drift:
            angular_velocity += self.drift_rate
        return angular_velocity
