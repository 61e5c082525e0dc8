#!/usr/bin/env python3
"""
Offline test harness for tricycle odometry.

Reads a recorded test case ``NN_input.csv``, replays it through the virtual
gyroscope and the odometry estimator, writes ``NN_pose.txt`` and
``NN_contour.txt`` and optionally plots the trajectory.

Usage:
    python -m harness.main <test_case_num> [--no-plot] [--config FILE]
    python -m harness.main --show-config [--config FILE]
"""

import argparse
import os
import sys
from typing import List, Optional

from tricycle.odometry import GeometryConstants
from tricycle.sensors import GyroNoiseModel, SampleFormatError, read_samples
from tricycle.replay import RunContext, SampleReplayDriver, ResultWriter
from tricycle.math.utils import degrees_to_radians

from harness.config import Config

TEST_CASE_NUM = 4
DEFAULT_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


def build_noise_model(params: dict) -> Optional[GyroNoiseModel]:
    """Create the gyro error stage from the config section, or None if disabled."""
    if not (params.get("apply_noise") or params.get("apply_drift")):
        return None

    return GyroNoiseModel(
        apply_noise=bool(params.get("apply_noise")),
        noise_stdev=degrees_to_radians(params.get("noise_stdev_deg", 0.0)),
        apply_drift=bool(params.get("apply_drift")),
        drift_direction=params.get("drift_direction", "ccw"),
        drift_rad_per_minute=degrees_to_radians(params.get("drift_deg_per_minute", 0.0)),
        random_state=params.get("random_seed"),
    )


class TricycleTestRunner:
    """Runs one recorded test case end to end."""

    def __init__(self, config: Config):
        self.config = config
        self.data_dir = config.data_dir or DEFAULT_DATA_DIR
        self.output_dir = config.output_dir

        self.input_file = None
        self.pose_file = None
        self.contour_file = None

    def set_filenames(self, test_case: int):
        """Set input, pose and contour paths for a test case number."""
        prefix = f"{test_case:02d}"
        self.input_file = os.path.join(self.data_dir, f"{prefix}_input.csv")
        self.pose_file = os.path.join(self.output_dir, f"{prefix}_pose.txt")
        self.contour_file = os.path.join(self.output_dir, f"{prefix}_contour.txt")

    def create_context(self) -> RunContext:
        geometry = GeometryConstants.from_dict(self.config.geometry)
        noise = build_noise_model(self.config.virtual_gyro)
        return RunContext.create(geometry, noise=noise)

    def run(self, test_case: int) -> int:
        """
        Run a test case.

        Returns:
            0 on success, 1 if an input or output file failed or the
            configuration is invalid
        """
        self.set_filenames(test_case)

        try:
            samples = read_samples(self.input_file, strict=self.config.strict_input)
        except (OSError, SampleFormatError) as e:
            print(f"ERROR: Failed to read input file {self.input_file}: {e}")
            return 1

        print(f"Test case {test_case}: {len(samples)} samples read from {self.input_file}")

        try:
            context = self.create_context()
        except ValueError as e:
            print(f"ERROR: Invalid configuration: {e}")
            return 1

        if context.noise is not None:
            print("Virtual gyro error injection enabled "
                  f"(noise={context.noise.apply_noise}, drift={context.noise.apply_drift})")

        try:
            if self.output_dir:
                os.makedirs(self.output_dir, exist_ok=True)
            with ResultWriter(self.pose_file, self.contour_file) as writer:
                driver = SampleReplayDriver(context, sink=writer, verbose=self.config.verbose)
                records = driver.run(samples)
        except OSError as e:
            print(f"ERROR: Failed to write result files: {e}")
            return 1

        final_pose = records[-1].pose
        print(f"Final {final_pose}")
        print(f"Results written to {self.pose_file} and {self.contour_file}")

        if self.config.enable_plot:
            self.draw_plot()

        return 0

    def draw_plot(self):
        """Show the trajectory plot for the current result files."""
        from harness.plotter import plot_results

        plot_range = self.config.plot_range or {}
        plot_results(self.pose_file, self.contour_file,
                     x_range=plot_range.get("x"), y_range=plot_range.get("y"))


def show_usage(prog: str):
    """Print usage of this program."""
    print(f"Usage: {prog} <test_case_num>")
    print(f"Range of <test_case_num>: 1..{TEST_CASE_NUM}")


def parse_test_case(text: Optional[str]) -> Optional[int]:
    """Return the test case number, or None if missing or out of range."""
    if text is None:
        return None
    try:
        test_case = int(text)
    except ValueError:
        return None
    if test_case <= 0 or test_case > TEST_CASE_NUM:
        return None
    return test_case


class UsageError(Exception):
    """Command line arguments could not be parsed."""


class HarnessArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports bad arguments instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> HarnessArgumentParser:
    parser = HarnessArgumentParser(description="Tricycle odometry test harness")
    parser.add_argument('test_case', nargs='?', help=f'Test case number (1..{TEST_CASE_NUM})')
    parser.add_argument('--config', default=None, help='JSON configuration file')
    parser.add_argument('--data-dir', default=None, help='Directory holding NN_input.csv files')
    parser.add_argument('--output-dir', default=None, help='Directory for result files')
    parser.add_argument('--no-plot', action='store_true', help='Do not plot the result')
    parser.add_argument('--strict', action='store_true', help='Reject malformed input fields')
    parser.add_argument('--verbose', action='store_true', help='Print every sample and pose')
    parser.add_argument('--show-config', action='store_true',
                        help='Print the effective configuration and exit')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    parser = build_parser()

    # Usage errors are not failures
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"{parser.prog}: {e}")
        show_usage(parser.prog)
        return 0

    test_case = parse_test_case(args.test_case)
    if test_case is None and not args.show_config:
        show_usage(parser.prog)
        return 0

    config = Config(args.config)
    if args.data_dir is not None:
        config.set("data_dir", args.data_dir)
    if args.output_dir is not None:
        config.set("output_dir", args.output_dir)
    if args.no_plot:
        config.set("enable_plot", False)
    if args.strict:
        config.set("strict_input", True)
    if args.verbose:
        config.set("verbose", True)

    if args.show_config:
        config.print_config()
        return 0

    runner = TricycleTestRunner(config)
    return runner.run(test_case)


if __name__ == "__main__":
    sys.exit(main())
