"""
Physical constants of a tricycle-drive robot.
"""

import math
import numbers
from dataclasses import dataclass, fields
from typing import Any, Dict
from ..math.constants import (
    FRONT_WHEEL_RADIUS_M,
    DIST_FRONT_TO_REAR_M,
    DIST_BETWEEN_REAR_WHEELS_M,
    TICKS_PER_REVOLUTION,
)


@dataclass(frozen=True)
class GeometryConstants:
    """
    Immutable wheel geometry shared by the odometry estimator and the
    virtual gyroscope.

    Attributes:
        front_wheel_radius: Front wheel radius (m)
        dist_front_to_rear: Distance from front wheel to rear axle (m)
        dist_between_rear_wheels: Rear track width (m)
        ticks_per_revolution: Front wheel encoder ticks per revolution
    """

    front_wheel_radius: float = FRONT_WHEEL_RADIUS_M
    dist_front_to_rear: float = DIST_FRONT_TO_REAR_M
    dist_between_rear_wheels: float = DIST_BETWEEN_REAR_WHEELS_M
    ticks_per_revolution: int = TICKS_PER_REVOLUTION

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            expected = numbers.Integral if f.name == "ticks_per_revolution" else numbers.Real
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ValueError(f"{f.name} must be a {expected.__name__.lower()} number, "
                                 f"got {value!r}")
            if not value > 0:
                raise ValueError(f"{f.name} must be strictly positive, got {value!r}")

    @property
    def front_wheel_circumference(self) -> float:
        """Circumference of the front wheel (m)."""
        return 2.0 * math.pi * self.front_wheel_radius

    @property
    def distance_per_tick(self) -> float:
        """Distance travelled by the front wheel per encoder tick (m/tick)."""
        return self.front_wheel_circumference / self.ticks_per_revolution

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> 'GeometryConstants':
        """Build from a configuration section, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in params.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
