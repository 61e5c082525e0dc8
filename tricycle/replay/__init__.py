"""
Sample replay: drives the estimators over recorded samples and writes the
resulting trajectory.
"""

from .driver import PoseRecord, RunContext, SampleReplayDriver
from .writer import ResultWriter

__all__ = ["PoseRecord", "RunContext", "SampleReplayDriver", "ResultWriter"]
