import math

# Field headings are measured with 0 degrees pointing "up" (+Y), increasing
# counter-clockwise. Every trig conversion must go through heading_to_radians.
HEADING_OFFSET_DEG = 90.0

def heading_to_radians(angle_deg: float) -> float:
    """
    Convert a field heading into a standard math angle (radians from +X).
    Args:
        angle_deg: heading in degrees, 0 = up
    Returns:
        angle in radians, 0 = right
    """
    return math.radians(angle_deg + HEADING_OFFSET_DEG)
#--------------------------------------------------------------------------------
def heading_vector(angle_deg: float):
    """Unit vector pointing along the heading."""
    theta = heading_to_radians(angle_deg)
    return math.cos(theta), math.sin(theta)

#--------------------------------------------------------------------------------
def left_normal(angle_deg: float):
    """Unit vector pointing to the left of the heading."""
    hx, hy = heading_vector(angle_deg)
    return -hy, hx

#--------------------------------------------------------------------------------
def transform_2d(tx, ty, theta, x, y):
    # Rotation
    # [x']   [cosθ  -sinθ tx]   [x]
    # [y'] = [sinθ   cosθ ty] * [y]
    # [z']   [ 0      0    1]   [1]

    cos_t = math.cos(theta)
    sin_t = math.sin(theta)

    # Apply rotation + translation
    item_x = tx + cos_t * x - sin_t * y
    item_y = ty + sin_t * x + cos_t * y

    return item_x, item_y

#--------------------------------------------------------------------------------
def euclidean(a, b):
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])

#--------------------------------------------------------------------------------
def wrap_to_180(angle_deg: float) -> float:
    """Wrap a heading into [-180, 180). Only for display, the engine keeps headings unwrapped."""
    return (angle_deg + 180.0) % 360.0 - 180.0

#--------------------------------------------------------------------------------
def clamp(value, low, high):
    return max(low, min(high, value))

#--------------------------------------------------------------------------------
def is_near_zero(value: float, tolerance: float) -> bool:
    return abs(value) < tolerance
