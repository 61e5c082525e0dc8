"""
Trajectory plot for pose and contour result files.

Draws the robot center trajectory as connected points and each recorded
footprint polygon as an unlabelled outline, with equal axis scaling.
"""

from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

PLOT_TITLE = "Trajectory of the Tricycle-Drive"


def load_pose_file(path: str) -> np.ndarray:
    """
    Read a pose result file.

    Returns:
        (N, 4) array of time, x, y, heading
    """
    return np.loadtxt(path, comments='#', ndmin=2)


def load_contour_file(path: str) -> List[np.ndarray]:
    """
    Read a contour result file.

    Returns:
        One (5, 2) polygon array per blank-line separated block
    """
    polygons = []
    block = []
    with open(path, 'r') as f:
        for line in f:
            line = line.strip()
            if line.startswith('#'):
                continue
            if not line:
                if block:
                    polygons.append(np.array(block, dtype=float))
                    block = []
                continue
            block.append([float(v) for v in line.split()])
    if block:
        polygons.append(np.array(block, dtype=float))
    return polygons


def plot_results(pose_path: str, contour_path: str,
                 x_range: Optional[Sequence[float]] = None,
                 y_range: Optional[Sequence[float]] = None,
                 show: bool = True,
                 save_path: Optional[str] = None):
    """
    Plot trajectory and robot footprints.

    Args:
        pose_path: Pose result file
        contour_path: Contour result file
        x_range: Optional (min, max) for the X axis
        y_range: Optional (min, max) for the Y axis
        show: Block on a plot window
        save_path: Also save the figure to this file

    Returns:
        The matplotlib figure
    """
    poses = load_pose_file(pose_path)
    polygons = load_contour_file(contour_path)

    fig, ax = plt.subplots(figsize=(8, 8))

    for polygon in polygons:
        ax.plot(polygon[:, 0], polygon[:, 1], 'k-', linewidth=1)

    ax.plot(poses[:, 1], poses[:, 2], 'b-o', markersize=4, label="pose")

    if x_range is not None:
        ax.set_xlim(*x_range)
    if y_range is not None:
        ax.set_ylim(*y_range)

    ax.set_xlabel("X (m)")
    ax.set_ylabel("Y (m)")
    ax.set_title(PLOT_TITLE)
    ax.grid(True)
    fixed_range = x_range is not None or y_range is not None
    ax.set_aspect('equal', adjustable='box' if fixed_range else 'datalim')
    ax.legend()
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path)
    if show:
        plt.show()

    return fig
