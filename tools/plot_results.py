#!/usr/bin/env python3
"""
Re-plot pose and contour files written by the test harness.

Sample run command: python3 tools/plot_results.py 01_pose.txt 01_contour.txt
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from harness.plotter import plot_results


def main(argv):
    if len(argv) < 3:
        print("Usage: plot_results.py <pose_file> <contour_file> [output_image]")
        return 1

    pose_file, contour_file = argv[1], argv[2]
    save_path = argv[3] if len(argv) > 3 else None

    for path in (pose_file, contour_file):
        if not os.path.exists(path):
            print(f"ERROR: {path} not found")
            return 1

    plot_results(pose_file, contour_file, show=save_path is None, save_path=save_path)
    if save_path:
        print(f"Saved {save_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
