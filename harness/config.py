"""
Configuration manager for the tricycle odometry test harness.
"""

import copy
import json
import os
from typing import Dict, Any, List, Optional

from tricycle.math.constants import (
    FRONT_WHEEL_RADIUS_M,
    DIST_FRONT_TO_REAR_M,
    DIST_BETWEEN_REAR_WHEELS_M,
    TICKS_PER_REVOLUTION,
    GYRO_NOISE_STDEV_DEG,
    GYRO_DRIFT_DEG_PER_MINUTE,
)


class Config:
    """Configuration manager for the test harness."""

    DEFAULT_CONFIG = {
        # Robot geometry
        "geometry": {
            "front_wheel_radius": FRONT_WHEEL_RADIUS_M,
            "dist_front_to_rear": DIST_FRONT_TO_REAR_M,
            "dist_between_rear_wheels": DIST_BETWEEN_REAR_WHEELS_M,
            "ticks_per_revolution": TICKS_PER_REVOLUTION
        },

        # Virtual gyro error injection
        "virtual_gyro": {
            "apply_noise": False,
            "noise_stdev_deg": GYRO_NOISE_STDEV_DEG,
            "apply_drift": False,
            "drift_direction": "ccw",
            "drift_deg_per_minute": GYRO_DRIFT_DEG_PER_MINUTE,
            "random_seed": None
        },

        # Input / output (None = bundled data directory)
        "data_dir": None,
        "output_dir": ".",
        "strict_input": False,

        # Plotting
        "enable_plot": True,
        "plot_range": None,  # {"x": [min, max], "y": [min, max]}

        "verbose": False
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to a JSON configuration file. If None, defaults
                are used. If the file does not exist it is created from the
                defaults.
        """
        self.config_file = config_file
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file is None:
            return

        if os.path.exists(config_file):
            self.load_config()
        else:
            print(f"Config file {config_file} not found, using defaults")
            self.save_config()

    def load_config(self) -> bool:
        """
        Merge the JSON file over the defaults.

        Keys that have no default are reported and skipped.

        Returns:
            True if the file was read and merged
        """
        try:
            with open(self.config_file, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            print(f"Failed to load config: {e}")
            return False

        if not isinstance(file_config, dict):
            print(f"Failed to load config: {self.config_file} must hold a JSON object")
            return False

        for key in self.update(file_config):
            print(f"Ignoring unknown config key '{key}'")

        print(f"Configuration loaded from {self.config_file}")
        return True

    def save_config(self) -> bool:
        """Write the current configuration as JSON. Returns True on success."""
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)
        except (OSError, TypeError) as e:
            print(f"Failed to save config: {e}")
            return False

        print(f"Configuration saved to {self.config_file}")
        return True

    def update(self, overrides: Dict[str, Any]) -> List[str]:
        """
        Merge a nested dictionary into the configuration.

        Returns:
            Dotted names of the keys that were skipped because they have no
            default
        """
        skipped = []
        self._merge_known(self.config, overrides, "", skipped)
        return skipped

    @classmethod
    def _merge_known(cls, base: Dict[str, Any], override: Dict[str, Any],
                     prefix: str, skipped: List[str]):
        for key, value in override.items():
            name = prefix + key
            if key not in base:
                skipped.append(name)
            elif isinstance(base[key], dict) and isinstance(value, dict):
                cls._merge_known(base[key], value, name + ".", skipped)
            else:
                base[key] = value

    def get(self, key: str, default=None):
        """Look up a dotted key such as 'geometry.front_wheel_radius'."""
        node = self.config
        for part in key.split('.'):
            try:
                node = node[part]
            except (KeyError, TypeError):
                return default
        return node

    def set(self, key: str, value: Any):
        """Set a dotted key. Raises KeyError if the key has no default."""
        section, _, name = key.rpartition('.')
        target = self.get(section) if section else self.config
        if not isinstance(target, dict) or name not in target:
            raise KeyError(key)
        target[name] = value

    # Property accessors for common configuration values
    @property
    def geometry(self) -> Dict[str, Any]:
        return self.config["geometry"]

    @property
    def virtual_gyro(self) -> Dict[str, Any]:
        return self.config["virtual_gyro"]

    @property
    def data_dir(self) -> Optional[str]:
        return self.config["data_dir"]

    @property
    def output_dir(self) -> str:
        return self.config["output_dir"]

    @property
    def strict_input(self) -> bool:
        return self.config["strict_input"]

    @property
    def enable_plot(self) -> bool:
        return self.config["enable_plot"]

    @property
    def plot_range(self) -> Optional[Dict[str, Any]]:
        return self.config["plot_range"]

    @property
    def verbose(self) -> bool:
        return self.config["verbose"]

    def print_config(self):
        """Print the effective configuration and where it came from."""
        source = self.config_file or "built-in defaults"
        print(f"=== Tricycle Odometry Configuration ({source}) ===")
        print(json.dumps(self.config, indent=2, sort_keys=True))
