"""
Pose and contour result files.

Both files are row aligned: the i-th pose line and the i-th contour block
describe the same replay step. Values use fixed-point notation with six
decimals so the files plot directly with gnuplot or matplotlib.
"""

from typing import Optional, TextIO
from .driver import PoseRecord

POSE_HEADER = "#time\trobot_x\trobot_y\trobot_q\n"

CONTOUR_HEADER = (
    "#robot_x\trobot_y\t\n"
    "#LWheel_x\tLWheel_y\t\n"
    "#FWheel_x\tFWheel_y\t\n"
    "#RWheel_x\tRWheel_y\t\n"
    "#robot_x\trobot_y\n"
    "\n"
)


def format_pose_line(record: PoseRecord) -> str:
    pose = record.pose
    return f"{record.time:f}\t{pose.x:f}\t{pose.y:f}\t{pose.heading:f}\n"


def format_contour_block(record: PoseRecord) -> str:
    """Closed polygon center, left wheel, front wheel, right wheel, center."""
    lines = [f"{p.x:f}\t{p.y:f}\n" for p in record.contour.polygon(record.pose.position)]
    # Blank line separates polygons
    lines.append("\n")
    return "".join(lines)


class ResultWriter:
    """
    Writes pose records to a pose file and a contour file.

    Use as a context manager so both files are closed on every exit path.
    """

    def __init__(self, pose_path: str, contour_path: str):
        self.pose_path = pose_path
        self.contour_path = contour_path
        self._pose_file: Optional[TextIO] = None
        self._contour_file: Optional[TextIO] = None
        self.records_written = 0

    def open(self) -> 'ResultWriter':
        """Create both files and write their headers."""
        self._pose_file = open(self.pose_path, 'w')
        try:
            self._contour_file = open(self.contour_path, 'w')
        except OSError:
            self._pose_file.close()
            self._pose_file = None
            raise

        self._pose_file.write(POSE_HEADER)
        self._contour_file.write(CONTOUR_HEADER)
        return self

    def write(self, record: PoseRecord) -> None:
        if self._pose_file is None or self._contour_file is None:
            raise RuntimeError("ResultWriter is not open")

        self._pose_file.write(format_pose_line(record))
        self._contour_file.write(format_contour_block(record))
        self.records_written += 1

    def close(self):
        for f in (self._pose_file, self._contour_file):
            if f is not None:
                f.close()
        self._pose_file = None
        self._contour_file = None

    def __enter__(self) -> 'ResultWriter':
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
