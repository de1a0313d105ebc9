# mission_path/config/path_configs.py

from dataclasses import dataclass

# Steering range of a move command. 0 = straight, negative = left, positive = right.
DIRECTION_MIN = -100.0
DIRECTION_MAX = 100.0

# Guards against floating noise when picking an integration regime.
# Not a semantic threshold.
ZERO_TOLERANCE = 0.01

@dataclass(frozen=True)
class PathPolicy:
    straight_degrees_per_step: float = 10.0   # one sample per ~10 deg of wheel rotation
    turn_degrees_per_step: float = 5.0        # arcs and pivots are sampled twice as densely
    min_steps: int = 2
    zero_tolerance: float = ZERO_TOLERANCE

DEFAULT_PATH_POLICY = PathPolicy()
