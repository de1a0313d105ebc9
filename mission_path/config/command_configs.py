from enum import Enum

class CommandType(str, Enum):
    TEXT = 'text'
    MOVE = 'move'

class MotionKind(str, Enum):
    """Integration regime picked for a move command."""
    STRAIGHT = 'straight'
    ARC = 'arc'
    PIVOT = 'pivot'
