#!/usr/bin/env python3
"""
Unit tests for the virtual gyroscope, the gyro error stage and the sample
reader.
"""

import unittest
import math
import tempfile
import numpy as np
import sys
import os

# Add core modules to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tricycle.odometry import GeometryConstants
from tricycle.sensors import (VirtualGyroscope, GyroNoiseModel, Sample, SampleFormatError,
                              read_samples, parse_sample_line)
from tricycle.sensors.samples import parse_float_field, parse_int_field

DIST_PER_TICK = 2 * math.pi * 0.2 / 512


def expected_delta(ticks, prev_steer, steer, wheelbase=1.0):
    """Closed-form gyro angle increment."""
    return (ticks * DIST_PER_TICK / 2.0) / wheelbase * math.sin((prev_steer + steer) / 2.0)


class TestVirtualGyroscope(unittest.TestCase):
    """Test VirtualGyroscope class."""

    def setUp(self):
        """Set up test fixtures."""
        self.gyro = VirtualGyroscope()

    def test_initialization(self):
        self.assertEqual(self.gyro.get_angular_velocity(), 0.0)
        self.assertEqual(self.gyro.get_angle(), 0.0)
        self.assertEqual(self.gyro.prev_time, 0.0)
        self.assertEqual(self.gyro.prev_steering_angle, 0.0)

    def test_straight_drive(self):
        """Zero steering produces no rotation."""
        self.gyro.update(1.0, 0.0, 100)

        self.assertEqual(self.gyro.get_angular_velocity(), 0.0)
        self.assertEqual(self.gyro.get_angle(), 0.0)

    def test_first_update_averages_with_zero(self):
        """The previous steering angle starts at zero."""
        self.gyro.update(1.0, 0.1, 100)

        self.assertAlmostEqual(self.gyro.get_angular_velocity(),
                               expected_delta(100, 0.0, 0.1), places=12)

    def test_steering_angle_averaging(self):
        """Second update uses the mean of 0.1 and 0.3 rad."""
        self.gyro.update(1.0, 0.1, 100)
        first_angle = self.gyro.get_angle()
        self.gyro.update(2.0, 0.3, 100)

        delta = expected_delta(100, 0.1, 0.3)
        self.assertAlmostEqual(self.gyro.get_angular_velocity(), delta, places=12)
        self.assertAlmostEqual(self.gyro.get_angle(), first_angle + delta, places=12)

        # Neither raw steering angle alone gives the same increment
        self.assertNotAlmostEqual(self.gyro.get_angular_velocity(),
                                  expected_delta(100, 0.3, 0.3), places=6)
        self.assertNotAlmostEqual(self.gyro.get_angular_velocity(),
                                  expected_delta(100, 0.1, 0.1), places=6)

    def test_divides_by_time_step(self):
        """Angular velocity is the increment over dt."""
        self.gyro.update(0.5, 0.2, 100)

        self.assertAlmostEqual(self.gyro.get_angular_velocity(),
                               expected_delta(100, 0.0, 0.2) / 0.5, places=12)

    def test_zero_time_step_keeps_raw_delta(self):
        """With dt=0 the raw increment is reported."""
        self.gyro.update(0.0, 0.2, 100)

        self.assertAlmostEqual(self.gyro.get_angular_velocity(),
                               expected_delta(100, 0.0, 0.2), places=12)

    def test_angle_stays_wrapped(self):
        """Large accumulated rotation wraps into [-pi, pi)."""
        for i in range(1, 30):
            self.gyro.update(float(i), 1.5, 2000)
            angle = self.gyro.get_angle()
            self.assertGreaterEqual(angle, -math.pi)
            self.assertLess(angle, math.pi)

    def test_uses_geometry(self):
        """A longer wheelbase turns more slowly."""
        gyro = VirtualGyroscope(GeometryConstants(dist_front_to_rear=2.0))
        gyro.update(1.0, 0.2, 100)

        self.assertAlmostEqual(gyro.get_angular_velocity(),
                               expected_delta(100, 0.0, 0.2, wheelbase=2.0), places=12)

    def test_reset(self):
        self.gyro.update(1.0, 0.2, 100)
        self.gyro.reset()

        self.assertEqual(self.gyro.get_angle(), 0.0)
        self.assertEqual(self.gyro.get_angular_velocity(), 0.0)
        self.assertEqual(self.gyro.prev_steering_angle, 0.0)
        self.assertEqual(self.gyro.get_statistics()['updates'], 0)


class TestGyroNoiseModel(unittest.TestCase):
    """Test GyroNoiseModel class."""

    def test_disabled_is_identity(self):
        model = GyroNoiseModel()

        self.assertFalse(model.enabled)
        self.assertEqual(model.apply(0.3), 0.3)

    def test_drift_direction(self):
        """CCW drift is positive, CW drift negative."""
        rate = math.radians(0.3) / 60.0
        ccw = GyroNoiseModel(apply_drift=True, drift_direction="ccw")
        cw = GyroNoiseModel(apply_drift=True, drift_direction="cw")

        self.assertAlmostEqual(ccw.apply(0.0), rate, places=15)
        self.assertAlmostEqual(cw.apply(0.0), -rate, places=15)

    def test_invalid_direction(self):
        with self.assertRaises(ValueError):
            GyroNoiseModel(drift_direction="up")

    def test_noise_reproducible(self):
        """Same seed gives the same noise sequence."""
        a = GyroNoiseModel(apply_noise=True, random_state=42)
        b = GyroNoiseModel(apply_noise=True, random_state=np.random.default_rng(42))

        self.assertEqual([a.apply(0.0) for _ in range(10)],
                         [b.apply(0.0) for _ in range(10)])

    def test_noise_statistics(self):
        """Noise is zero mean with the configured deviation."""
        model = GyroNoiseModel(apply_noise=True, noise_stdev=0.01, random_state=0)
        values = np.array([model.apply(0.0) for _ in range(5000)])

        self.assertLess(abs(values.mean()), 1e-3)
        self.assertAlmostEqual(values.std(), 0.01, delta=1e-3)


class TestSampleParsing(unittest.TestCase):
    """Test sample line parsing."""

    def test_parse_line(self):
        sample = parse_sample_line("1.5,0.25,42\n")

        self.assertEqual(sample, Sample(time=1.5, steering_angle=0.25, encoder_ticks=42))
        self.assertEqual(sample.angular_velocity, 0.0)

    def test_comment_and_blank_lines(self):
        self.assertIsNone(parse_sample_line("# time, steering_angle, encoder_ticks"))
        self.assertIsNone(parse_sample_line("\n"))
        self.assertIsNone(parse_sample_line("   \r\n"))

    def test_windows_line_endings_and_extra_fields(self):
        sample = parse_sample_line("2.0,-0.1,7,0.05\r\n")

        self.assertEqual(sample, Sample(time=2.0, steering_angle=-0.1, encoder_ticks=7))

    def test_lenient_fields(self):
        """Malformed fields fall back to their numeric prefix or zero."""
        sample = parse_sample_line("abc,0.1,12.7")
        self.assertEqual(sample.time, 0.0)
        self.assertEqual(sample.steering_angle, 0.1)
        self.assertEqual(sample.encoder_ticks, 12)

        sample = parse_sample_line("2e-1,x,  7")
        self.assertAlmostEqual(sample.time, 0.2)
        self.assertEqual(sample.steering_angle, 0.0)
        self.assertEqual(sample.encoder_ticks, 7)

    def test_missing_fields(self):
        sample = parse_sample_line("3.0")

        self.assertEqual(sample, Sample(time=3.0, steering_angle=0.0, encoder_ticks=0))

    def test_prefix_parsers(self):
        self.assertEqual(parse_float_field(" -1.5xyz"), -1.5)
        self.assertEqual(parse_float_field(".5"), 0.5)
        self.assertEqual(parse_float_field(""), 0.0)
        self.assertEqual(parse_int_field("+12abc"), 12)
        self.assertEqual(parse_int_field("-3"), -3)
        self.assertEqual(parse_int_field("x1"), 0)

    def test_strict_mode(self):
        """Strict parsing reports the offending line."""
        with self.assertRaises(SampleFormatError) as ctx:
            parse_sample_line("1.0,abc,5", strict=True, line_number=3)

        self.assertIn("line 3", str(ctx.exception))
        self.assertIn("steering_angle", str(ctx.exception))
        self.assertEqual(ctx.exception.line_number, 3)

        with self.assertRaises(SampleFormatError):
            parse_sample_line("1.0,0.1,12.5", strict=True)
        with self.assertRaises(ValueError):
            parse_sample_line("1.0,0.1", strict=True)

        self.assertEqual(parse_sample_line(" 1.0, 0.1, 5", strict=True),
                         Sample(time=1.0, steering_angle=0.1, encoder_ticks=5))


class TestReadSamples(unittest.TestCase):
    """Test reading sample files."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "input.csv")

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, text):
        with open(self.path, 'w') as f:
            f.write(text)

    def test_read_in_order(self):
        self._write("# header\n0,0,0\n1,0.1,100\n\n# note\n2,0.2,90\n")

        samples = read_samples(self.path)

        self.assertEqual([s.time for s in samples], [0.0, 1.0, 2.0])
        self.assertEqual([s.encoder_ticks for s in samples], [0, 100, 90])

    def test_missing_file(self):
        with self.assertRaises(OSError):
            read_samples(os.path.join(self.tmpdir.name, "missing.csv"))

    def test_strict_line_number(self):
        self._write("# header\n0,0,0\n1,bad,100\n")

        with self.assertRaises(SampleFormatError) as ctx:
            read_samples(self.path, strict=True)
        self.assertEqual(ctx.exception.line_number, 3)

        self.assertEqual(len(read_samples(self.path)), 2)


if __name__ == '__main__':
    unittest.main()
