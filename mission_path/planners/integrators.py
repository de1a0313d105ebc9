"""
Differential-drive integrators. Each returns the sampled poses of one move,
first pose equal to the start pose.
"""
import math
from typing import List

import numpy as np

from drive_common.geometry import heading_vector, left_normal
from drive_common.robot_model import Pose

#--------------------------------------------------------------------------------
def step_count(degrees: float, degrees_per_step: float, min_steps: int = 2) -> int:
    """Number of intervals used to sample a move of the given wheel rotation."""
    return max(min_steps, math.ceil(abs(degrees) / degrees_per_step))

#--------------------------------------------------------------------------------
def _sample_times(steps: int) -> np.ndarray:
    return np.linspace(0.0, 1.0, steps + 1)

#--------------------------------------------------------------------------------
def _to_poses(xs, ys, angles) -> List[Pose]:
    return [Pose(float(x), float(y), float(a)) for x, y, a in zip(xs, ys, angles)]

#--------------------------------------------------------------------------------
def straight_poses(start: Pose, distance_cm: float, steps: int) -> List[Pose]:
    """
    Straight line along the start heading. The heading never changes.
    Args:
        start: pose at the beginning of the move
        distance_cm: signed travel, negative drives backwards
        steps: number of intervals
    """
    t = _sample_times(steps)
    hx, hy = heading_vector(start.angle)
    traveled = distance_cm * t

    xs = start.x + traveled * hx
    ys = start.y + traveled * hy
    angles = np.full_like(t, start.angle)
    return _to_poses(xs, ys, angles)

#--------------------------------------------------------------------------------
def pivot_poses(start: Pose, delta_angle: float, steps: int) -> List[Pose]:
    """Turn in place, heading advances linearly by delta_angle degrees."""
    t = _sample_times(steps)
    xs = np.full_like(t, start.x)
    ys = np.full_like(t, start.y)
    angles = start.angle + delta_angle * t
    return _to_poses(xs, ys, angles)

#--------------------------------------------------------------------------------
def arc_poses(start: Pose, average_cm: float, delta_angle: float, steps: int) -> List[Pose]:
    """
    Circular arc around a fixed turn center.

    The signed radius average_cm / delta puts the center on the left normal of
    the start heading for forward left turns and backward right turns, and on
    the right normal otherwise. Positions are exact points on that circle.

    Args:
        start: pose at the beginning of the move
        average_cm: signed travel of the axle center
        delta_angle: heading change in degrees, must be non-zero
        steps: number of intervals
    """
    t = _sample_times(steps)
    delta_rad = math.radians(delta_angle)
    radius = average_cm / delta_rad

    hx, hy = heading_vector(start.angle)
    nx, ny = left_normal(start.angle)

    # Swept angle around the center
    phi = delta_rad * t
    forward = radius * np.sin(phi)
    sideways = radius * (1.0 - np.cos(phi))

    xs = start.x + forward * hx + sideways * nx
    ys = start.y + forward * hy + sideways * ny
    angles = start.angle + delta_angle * t
    return _to_poses(xs, ys, angles)

