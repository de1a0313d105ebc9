"""
Path calculation engine.

Folds a program of move/text commands into a trajectory of poses with wheel
traces. Every call is independent: no state is kept between calls, so one
calculator can be shared between threads.
"""
import logging
from typing import Dict, List, Optional, Sequence

from drive_common.geometry import clamp, heading_vector, wrap_to_180
from drive_common.logging import LogEvent, log_debug, log_info, log_warn
from drive_common.robot_model import Pose, RobotConfig
from mission_path.config.command_configs import MotionKind
from mission_path.config.path_configs import DEFAULT_PATH_POLICY, PathPolicy
from mission_path.planners.classifier import classify_motion, wheel_distances
from mission_path.planners.integrators import arc_poses, pivot_poses, step_count, straight_poses
from mission_path.planners.wheel_trace import project_wheels
from mission_path.program.commands import Command, MoveCommand, TextCommand
from mission_path.trajectory import Trajectory, TrajectoryPoint

SOURCE = 'PathCalculator'

class PathCalculator:

    def __init__(self, policy: PathPolicy = DEFAULT_PATH_POLICY, logger=None):
        self._policy = policy
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    #Getters:
    #--------------------------------------------------------------------------------
    def get_policy(self) -> PathPolicy:
        return self._policy

    #--------------------------------------------------------------------------------
    def compute_segment(
            self,
            start_pose: Pose,
            direction: float,
            degrees: float,
            config: RobotConfig,
    ) -> List[Pose]:
        """
        Sample the poses of a single move.

        Args:
            start_pose: pose before the move
            direction: steering in [-100, 100], assumed already validated
            degrees: faster wheel rotation, non-zero
            config: robot configuration
        Returns:
            poses from start_pose (inclusive) to the end of the move
        """
        poses, _ = self._sample_segment(start_pose, direction, degrees, config)
        return poses

    #--------------------------------------------------------------------------------
    def _sample_segment(self, start_pose, direction, degrees, config, last_event=None):
        policy = self._policy
        motion = wheel_distances(direction, degrees, config)
        kind = classify_motion(direction, motion, policy.zero_tolerance)

        if kind == MotionKind.STRAIGHT:
            steps = step_count(degrees, policy.straight_degrees_per_step, policy.min_steps)
            poses = straight_poses(start_pose, motion.average_cm, steps)
        elif kind == MotionKind.PIVOT:
            steps = step_count(degrees, policy.turn_degrees_per_step, policy.min_steps)
            poses = pivot_poses(start_pose, motion.delta_angle, steps)
        else:
            steps = step_count(degrees, policy.turn_degrees_per_step, policy.min_steps)
            poses = arc_poses(start_pose, motion.average_cm, motion.delta_angle, steps)

        if direction != 0 and kind == MotionKind.STRAIGHT:
            last_event = log_debug(
                self._logger,
                f"direction {direction:g} gave no heading change, integrating as straight",
                SOURCE,
                last_event,
            )
        return poses, last_event

    #--------------------------------------------------------------------------------
    def compute_trajectory(self, commands: Sequence[Command], config: RobotConfig) -> Trajectory:
        """
        Fold a whole program into a trajectory.

        Text commands are skipped. The first invalid move stops the calculation;
        the points computed so far are returned with valid=False.
        """
        if not commands:
            return Trajectory(points=[], valid=True)

        pose = config.start_pose
        points: List[TrajectoryPoint] = [project_wheels(pose, config.wheel_base)]
        last_event: Optional[LogEvent] = None

        for index, command in enumerate(commands):
            if not isinstance(command, MoveCommand):
                continue

            if not command.valid:
                log_warn(
                    self._logger,
                    f"invalid move at command {index} (direction={command.direction!r}, "
                    f"degrees={command.degrees!r}), path stops here",
                    SOURCE,
                    last_event,
                )
                return Trajectory(points=points, valid=False)

            poses, last_event = self._sample_segment(
                pose, command.direction, command.degrees, config, last_event
            )

            # First pose is the running pose, already in the list
            new_poses = poses[1:]
            for j, segment_pose in enumerate(new_poses):
                points.append(project_wheels(
                    segment_pose,
                    config.wheel_base,
                    segment_end=(j == len(new_poses) - 1),
                ))
            pose = poses[-1]

        log_info(
            self._logger,
            f"{len(points)} points, final pose x={pose.x:.1f} y={pose.y:.1f} "
            f"heading={wrap_to_180(pose.angle):.1f}",
            SOURCE,
            last_event,
        )
        return Trajectory(points=points, valid=True)

    #--------------------------------------------------------------------------------
    def pose_before_index(self, commands: Sequence[Command], index: int, config: RobotConfig) -> Pose:
        """
        Pose of the robot just before commands[index] runs, found by re-running
        the fold over the prefix. An invalid move in the prefix freezes the pose
        where compute_trajectory would have stopped.
        """
        index = clamp(index, 0, len(commands))
        pose = config.start_pose

        for command in commands[:index]:
            if not isinstance(command, MoveCommand):
                continue
            if not command.valid:
                break
            pose = self.compute_segment(pose, command.direction, command.degrees, config)[-1]
        return pose

    #--------------------------------------------------------------------------------
    def text_positions(self, commands: Sequence[Command], config: RobotConfig) -> Dict[int, Pose]:
        """
        Poses to annotate on text commands that ask for it, keyed by command index.
        Text commands after an invalid move are left out.
        """
        positions = {}
        pose = config.start_pose

        for index, command in enumerate(commands):
            if isinstance(command, TextCommand):
                if command.show_position:
                    positions[index] = pose
                continue
            if not command.valid:
                break
            pose = self.compute_segment(pose, command.direction, command.degrees, config)[-1]
        return positions

    #--------------------------------------------------------------------------------
    @staticmethod
    def straight_degrees_to_reach(start_pose: Pose, target_x: float, target_y: float, config: RobotConfig) -> int:
        """
        Wheel degrees a straight move needs so its endpoint lands as close as
        possible to the target. Used when an endpoint is dragged along its heading.
        """
        hx, hy = heading_vector(start_pose.angle)
        # Only the component along the heading can be reached without turning
        distance = (target_x - start_pose.x) * hx + (target_y - start_pose.y) * hy
        return int(round(distance / config.wheel_circumference * 360))

#--------------------------------------------------------------------------------
# Module level entry points, backed by a calculator with the default policy
_DEFAULT_CALCULATOR = PathCalculator()

def compute_trajectory(commands: Sequence[Command], config: RobotConfig) -> Trajectory:
    return _DEFAULT_CALCULATOR.compute_trajectory(commands, config)

#--------------------------------------------------------------------------------
def compute_segment(start_pose: Pose, direction: float, degrees: float, config: RobotConfig) -> List[Pose]:
    return _DEFAULT_CALCULATOR.compute_segment(start_pose, direction, degrees, config)

#--------------------------------------------------------------------------------
def pose_before_index(commands: Sequence[Command], index: int, config: RobotConfig) -> Pose:
    return _DEFAULT_CALCULATOR.pose_before_index(commands, index, config)

#--------------------------------------------------------------------------------
def text_positions(commands: Sequence[Command], config: RobotConfig) -> Dict[int, Pose]:
    return _DEFAULT_CALCULATOR.text_positions(commands, config)

#--------------------------------------------------------------------------------
straight_degrees_to_reach = PathCalculator.straight_degrees_to_reach
