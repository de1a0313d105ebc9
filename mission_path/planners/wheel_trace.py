from drive_common.geometry import heading_to_radians, transform_2d
from drive_common.robot_model import Pose
from mission_path.trajectory import TrajectoryPoint

#--------------------------------------------------------------------------------
def project_wheels(pose: Pose, wheel_base: float, segment_end: bool = False) -> TrajectoryPoint:
    """
    Ground contact points of both wheels for a pose. Display only, the wheel
    positions never feed back into the integrators.
    """
    theta = heading_to_radians(pose.angle)
    half_wheel_base = wheel_base / 2

    # Robot frame: x forward, y to the left
    left_x, left_y = transform_2d(pose.x, pose.y, theta, 0.0, half_wheel_base)
    right_x, right_y = transform_2d(pose.x, pose.y, theta, 0.0, -half_wheel_base)

    return TrajectoryPoint(
        x=pose.x,
        y=pose.y,
        angle=pose.angle,
        left_wheel_x=left_x,
        left_wheel_y=left_y,
        right_wheel_x=right_x,
        right_wheel_y=right_y,
        segment_end=segment_end,
    )
