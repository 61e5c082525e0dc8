"""
Replays recorded samples through the virtual gyroscope and the odometry
estimator.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol

from ..odometry import GeometryConstants, Pose, Contour, TricycleOdometry
from ..sensors import VirtualGyroscope, GyroNoiseModel, Sample

INITIAL_RECORD_TIME = 0.0


@dataclass
class PoseRecord:
    """Pose and footprint emitted for one replay step."""

    time: float
    pose: Pose
    contour: Contour


class RecordSink(Protocol):
    def write(self, record: PoseRecord) -> None:
        ...


@dataclass
class RunContext:
    """
    Owns the single gyro and odometry instance of one run.

    Both estimators share the same geometry. The optional noise stage sits
    between them.
    """

    geometry: GeometryConstants
    odometry: TricycleOdometry
    gyro: VirtualGyroscope
    noise: Optional[GyroNoiseModel] = field(default=None)

    @classmethod
    def create(cls, geometry: Optional[GeometryConstants] = None,
               noise: Optional[GyroNoiseModel] = None,
               initial_pose: Optional[Pose] = None) -> 'RunContext':
        geometry = geometry or GeometryConstants()
        return cls(
            geometry=geometry,
            odometry=TricycleOdometry(geometry, initial_pose=initial_pose),
            gyro=VirtualGyroscope(geometry),
            noise=noise,
        )

    def current_record(self, time: float) -> PoseRecord:
        return PoseRecord(
            time=time,
            pose=self.odometry.get_robot_pose(),
            contour=self.odometry.get_contour(),
        )


class SampleReplayDriver:
    """
    Feeds samples through the estimators in the fixed order
    gyro update -> (noise) -> odometry estimate -> emit.
    """

    def __init__(self, context: RunContext, sink: Optional[RecordSink] = None,
                 verbose: bool = False):
        """
        Args:
            context: Estimators for this run
            sink: Consumer of pose records, e.g. a ResultWriter
            verbose: Print every sample and resulting pose
        """
        self.context = context
        self.sink = sink
        self.verbose = verbose
        self.records: List[PoseRecord] = []

    def _emit(self, record: PoseRecord):
        self.records.append(record)
        if self.sink is not None:
            self.sink.write(record)

    def step(self, sample: Sample) -> PoseRecord:
        """Process a single sample and emit its record."""
        ctx = self.context

        ctx.gyro.update(sample.time, sample.steering_angle, sample.encoder_ticks)

        angular_velocity = ctx.gyro.get_angular_velocity()
        if ctx.noise is not None:
            angular_velocity = ctx.noise.apply(angular_velocity)

        ctx.odometry.estimate(sample.time, sample.steering_angle,
                              sample.encoder_ticks, angular_velocity)

        record = ctx.current_record(sample.time)
        if self.verbose:
            print(f"time: {sample.time:.3f}, steering_angle: {sample.steering_angle:.3f}, "
                  f"encoder_ticks: {sample.encoder_ticks:03d}, "
                  f"angular_velocity: {angular_velocity:.3f} -> {record.pose}")
        self._emit(record)
        return record

    def run(self, samples: Iterable[Sample]) -> List[PoseRecord]:
        """
        Replay all samples.

        The pose before any sample is emitted first, at time 0, so record i
        of the output corresponds to the state after i samples.

        Returns:
            All records emitted by this call
        """
        start = len(self.records)
        self._emit(self.context.current_record(INITIAL_RECORD_TIME))

        for sample in samples:
            self.step(sample)

        return self.records[start:]
