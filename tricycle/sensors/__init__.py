"""
Sensor models and recorded sample input.
"""

from .gyro import VirtualGyroscope
from .noise import GyroNoiseModel
from .samples import Sample, SampleFormatError, read_samples, parse_sample_line

__all__ = ["VirtualGyroscope", "GyroNoiseModel", "Sample", "SampleFormatError",
           "read_samples", "parse_sample_line"]
