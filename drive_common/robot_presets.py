""" Presets for robot configurations.  """

from drive_common.robot_model import RobotConfig

# Editor fallbacks when a form field is empty
DEFAULT_MODEL = RobotConfig()

# Stock competition robot, parked in the lower left launch area facing right
SPIKE_PRIME_MODEL = RobotConfig(
    length=16.5,
    width=15.0,
    wheel_offset=3.1,
    wheel_circumference=19.6,
    wheel_base=12.0,
    start_x=30.0,
    start_y=114.0,
    start_angle=270.0,
)

PRESETS = {
    'default': DEFAULT_MODEL,
    'spike_prime': SPIKE_PRIME_MODEL,
}
