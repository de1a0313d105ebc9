# mission_path/trajectory.py

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from drive_common.robot_model import Pose

@dataclass(frozen=True)
class TrajectoryPoint:
    x: float
    y: float
    angle: float
    left_wheel_x: float
    left_wheel_y: float
    right_wheel_x: float
    right_wheel_y: float
    segment_end: bool = False   # last point contributed by a move command

    @property
    def pose(self) -> Pose:
        return Pose(self.x, self.y, self.angle)

    def to_record(self) -> dict:
        return {
            'x': self.x,
            'y': self.y,
            'angle': self.angle,
            'segmentEnd': self.segment_end,
            'leftWheelX': self.left_wheel_x,
            'leftWheelY': self.left_wheel_y,
            'rightWheelX': self.right_wheel_x,
            'rightWheelY': self.right_wheel_y,
        }

@dataclass
class Trajectory:
    """
    Result of folding a program. valid=False means an invalid move stopped the
    calculation; points still holds everything computed before it.
    """
    points: List[TrajectoryPoint] = field(default_factory=list)
    valid: bool = True

    #--------------------------------------------------------------------------------
    @property
    def final_pose(self) -> Optional[Pose]:
        if not self.points:
            return None
        return self.points[-1].pose

    #--------------------------------------------------------------------------------
    def segment_end_indices(self) -> List[int]:
        return [i for i, point in enumerate(self.points) if point.segment_end]

    #--------------------------------------------------------------------------------
    def segments(self) -> List[Tuple[int, int]]:
        """
        (start_index, end_index) of every drawn move, both inclusive.
        A segment starts on the previous segment's end point (or the seed).
        """
        ranges = []
        start = 0
        for end in self.segment_end_indices():
            ranges.append((start, end))
            start = end
        return ranges

    #--------------------------------------------------------------------------------
    def to_record(self) -> dict:
        return {
            'points': [point.to_record() for point in self.points],
            'valid': self.valid,
        }
