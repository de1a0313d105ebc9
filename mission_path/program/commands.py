"""
Program commands as handed to the path engine.

Raw editor values (strings, empty fields) are coerced here, at the editing
boundary, so the engine only ever receives floats plus an explicit validity
flag.
"""
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from mission_path.config.command_configs import CommandType
from mission_path.config.path_configs import DIRECTION_MAX, DIRECTION_MIN


@dataclass(frozen=True)
class TextCommand:
    content: str = ''
    show_position: bool = False   # annotate the robot pose at this point of the program

    @property
    def type(self) -> CommandType:
        return CommandType.TEXT

    def to_record(self) -> dict:
        return {'type': self.type.value, 'content': self.content, 'showPosition': self.show_position}


@dataclass(frozen=True)
class MoveCommand:
    direction: float    # -100..100, 0 = straight, negative = left, positive = right
    degrees: float      # faster wheel rotation, sign = forward/backward
    valid: bool = True

    def __post_init__(self):
        # A flag passed as False stays False (fields coerced from garbage are stored as 0.0)
        object.__setattr__(self, 'valid', bool(self.valid) and is_valid_move(self.direction, self.degrees))

    @property
    def type(self) -> CommandType:
        return CommandType.MOVE

    def to_record(self) -> dict:
        return {
            'type': self.type.value,
            'direction': self.direction,
            'degrees': self.degrees,
            'valid': self.valid,
        }


Command = Union[TextCommand, MoveCommand]

#--------------------------------------------------------------------------------
def parse_number(value) -> Optional[float]:
    """Parse an editor field. Returns None for anything that is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number

#--------------------------------------------------------------------------------
def is_valid_move(direction, degrees) -> bool:
    """
    The single validity rule for move commands.
    Args:
        direction: steering value, must be numeric and within [-100, 100]
        degrees: wheel rotation, must be numeric and non-zero
    """
    direction = parse_number(direction)
    degrees = parse_number(degrees)
    if direction is None or degrees is None:
        return False
    if direction < DIRECTION_MIN or direction > DIRECTION_MAX:
        return False
    return degrees != 0

#--------------------------------------------------------------------------------
def make_move(direction, degrees) -> MoveCommand:
    """
    Build a move command from raw editor values.
    Unparsable fields are stored as 0.0 and mark the command invalid.
    """
    parsed_direction = parse_number(direction)
    parsed_degrees = parse_number(degrees)
    return MoveCommand(
        direction=0.0 if parsed_direction is None else parsed_direction,
        degrees=0.0 if parsed_degrees is None else parsed_degrees,
        valid=is_valid_move(direction, degrees),
    )

#--------------------------------------------------------------------------------
def program_from_records(records: Optional[Iterable[dict]]) -> List[Command]:
    """
    Load a program from the editor/storage record shape:
        {'type': 'text', 'content': ..., 'showPosition': ...}
        {'type': 'move', 'direction': ..., 'degrees': ...}
    Records of unknown type are dropped. Move validity is always recomputed,
    a stored 'valid' flag is ignored.
    """
    program: List[Command] = []
    for record in records or []:
        if not isinstance(record, dict):
            continue
        kind = record.get('type')
        if kind == CommandType.TEXT:
            program.append(TextCommand(
                content=str(record.get('content') or ''),
                show_position=bool(record.get('showPosition', False)),
            ))
        elif kind == CommandType.MOVE:
            program.append(make_move(record.get('direction'), record.get('degrees')))
    return program
