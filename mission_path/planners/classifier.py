import math
from dataclasses import dataclass

from drive_common.geometry import is_near_zero
from drive_common.robot_model import RobotConfig
from mission_path.config.command_configs import MotionKind
from mission_path.config.path_configs import ZERO_TOLERANCE

@dataclass(frozen=True)
class WheelMotion:
    left_cm: float
    right_cm: float
    delta_angle: float   # heading change in degrees, positive = counter-clockwise (left)

    @property
    def average_cm(self) -> float:
        return (self.left_cm + self.right_cm) / 2

    @property
    def delta_radians(self) -> float:
        return math.radians(self.delta_angle)

#--------------------------------------------------------------------------------
def reduction_factor(direction: float) -> float:
    """
    Share of the faster wheel's rotation given to the slower wheel.
    Goes negative past |direction| = 50 (slower wheel reverses) and reaches -1
    at |direction| = 100, which is a pivot.
    """
    return (100 - abs(direction) * 2) / 100

#--------------------------------------------------------------------------------
def wheel_distances(direction: float, degrees: float, config: RobotConfig) -> WheelMotion:
    """
    Split a move command into per-wheel travel.

    degrees always describes the faster wheel. Turning right (direction > 0)
    the left wheel is the faster one, turning left the right wheel is.

    Args:
        direction: steering value in [-100, 100]
        degrees: faster wheel rotation in degrees, negative drives backwards
        config: robot configuration (wheel_circumference, wheel_base)
    Returns:
        WheelMotion with both distances in cm and the resulting heading change
    """
    if direction > 0:
        left_degrees = degrees
        right_degrees = degrees * reduction_factor(direction)
    elif direction < 0:
        right_degrees = degrees
        left_degrees = degrees * reduction_factor(direction)
    else:
        left_degrees = right_degrees = degrees

    left_cm = left_degrees / 360 * config.wheel_circumference
    right_cm = right_degrees / 360 * config.wheel_circumference
    delta_angle = math.degrees((right_cm - left_cm) / config.wheel_base)

    return WheelMotion(left_cm=left_cm, right_cm=right_cm, delta_angle=delta_angle)

#--------------------------------------------------------------------------------
def classify_motion(direction: float, motion: WheelMotion, tolerance: float = ZERO_TOLERANCE) -> MotionKind:
    """Pick the integration regime for already split wheel motion."""
    if direction == 0:
        return MotionKind.STRAIGHT
    # Degenerate arc, should not happen for direction != 0
    if is_near_zero(motion.delta_angle, tolerance):
        return MotionKind.STRAIGHT
    if is_near_zero(motion.left_cm + motion.right_cm, tolerance):
        return MotionKind.PIVOT
    return MotionKind.ARC

#--------------------------------------------------------------------------------
def classify_move(direction: float, degrees: float, config: RobotConfig, tolerance: float = ZERO_TOLERANCE) -> MotionKind:
    return classify_motion(direction, wheel_distances(direction, degrees, config), tolerance)
