# drive_common/robot_model.py
import math
from dataclasses import dataclass, asdict
from typing import Optional

# Below this the turn geometry degenerates (huge delta angles per wheel degree)
MIN_WHEEL_BASE_CM = 8.0

@dataclass(frozen=True)
class Pose:
    x: float = 0.0        # axle center, cm
    y: float = 0.0
    angle: float = 0.0    # heading, degrees, 0 = up, counter-clockwise positive

@dataclass(frozen=True)
class RobotConfig:
    length: float = 20.0               # outer footprint, cm
    width: float = 15.0
    wheel_offset: float = 5.0          # back edge to drive axle
    wheel_circumference: float = 17.6  # cm per wheel rotation
    wheel_base: float = 12.0           # left to right wheel contact points
    start_x: float = 30.0
    start_y: float = 30.0
    start_angle: float = 0.0
    image_url: str = ''

    @property
    def start_pose(self) -> Pose:
        return Pose(self.start_x, self.start_y, self.start_angle)

    #--------------------------------------------------------------------------------
    def validate(self) -> list:
        """
        Check the physical parameters. The path engine assumes a valid config
        and never calls this itself.
        Returns:
            list of error messages, empty if the config is usable
        """
        errors = []
        if not self.length > 0:
            errors.append('Robot length must be positive')
        if not self.width > 0:
            errors.append('Robot width must be positive')
        if not self.wheel_offset >= 0:
            errors.append('Wheel offset cannot be negative (tire overhang should be considered in robot length)')
        if not self.wheel_circumference > 0:
            errors.append('Wheel circumference must be positive')
        if not self.wheel_base > 0:
            errors.append('Wheel base must be positive')
        elif self.wheel_base < MIN_WHEEL_BASE_CM:
            errors.append(f'Wheel base must be at least {MIN_WHEEL_BASE_CM:g} cm')
        return errors

    #--------------------------------------------------------------------------------
    def is_valid(self) -> bool:
        return not self.validate()

    #--------------------------------------------------------------------------------
    @classmethod
    def from_record(cls, record: dict, defaults: Optional["RobotConfig"] = None) -> "RobotConfig":
        """
        Build a config from the camelCase record used by the editor and storage.
        Missing or unparsable values fall back to the defaults. Zero is also
        treated as missing for the physical dimensions, only start values may be 0.
        """
        base = defaults if defaults is not None else cls()
        record = record or {}

        def dimension(key, fallback):
            value = _to_float(record.get(key))
            return value if value else fallback

        def start_value(key, fallback):
            value = _to_float(record.get(key))
            return fallback if value is None else value

        return cls(
            length=dimension('length', base.length),
            width=dimension('width', base.width),
            wheel_offset=dimension('wheelOffset', base.wheel_offset),
            wheel_circumference=dimension('wheelCircumference', base.wheel_circumference),
            wheel_base=dimension('wheelBase', base.wheel_base),
            start_x=start_value('startX', base.start_x),
            start_y=start_value('startY', base.start_y),
            start_angle=start_value('startAngle', base.start_angle),
            image_url=str(record.get('imageUrl') or base.image_url),
        )

    #--------------------------------------------------------------------------------
    def to_record(self) -> dict:
        fields = asdict(self)
        return {
            'length': fields['length'],
            'width': fields['width'],
            'wheelOffset': fields['wheel_offset'],
            'wheelCircumference': fields['wheel_circumference'],
            'wheelBase': fields['wheel_base'],
            'imageUrl': fields['image_url'],
            'startX': fields['start_x'],
            'startY': fields['start_y'],
            'startAngle': fields['start_angle'],
        }

#--------------------------------------------------------------------------------
def _to_float(value) -> Optional[float]:
    """Parse a number from a record field, None if it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number
