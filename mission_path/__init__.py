from mission_path.planners.path_calculator import (
    PathCalculator,
    compute_segment,
    compute_trajectory,
    pose_before_index,
)

__all__ = ['PathCalculator', 'compute_segment', 'compute_trajectory', 'pose_before_index']
