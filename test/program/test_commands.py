import math

import pytest

from mission_path.config.command_configs import CommandType
from mission_path.program.commands import (
    MoveCommand,
    TextCommand,
    is_valid_move,
    make_move,
    parse_number,
    program_from_records,
)

@pytest.mark.parametrize('direction, degrees, expected', [
    (0, 360, True),
    ('30', '360', True),
    (-100, -1, True),
    (100, 0.5, True),
    (150, 360, False),
    (-100.0001, 90, False),
    (0, 0, False),
    ('abc', 10, False),
    (None, 10, False),
    (10, '', False),
    (True, 10, False),
    (math.nan, 10, False),
])
def test_is_valid_move(direction, degrees, expected):
    assert is_valid_move(direction, degrees) is expected

def test_parse_number():
    assert parse_number(' 12.5 ') == 12.5
    assert parse_number('1e2') == 100.0
    assert parse_number('inf') is None
    assert parse_number([]) is None

def test_make_move_coerces_editor_values():
    assert make_move('-25', '180') == MoveCommand(direction=-25.0, degrees=180.0, valid=True)
    assert make_move('abc', '90') == MoveCommand(direction=0.0, degrees=90.0, valid=False)
    assert make_move(120, 90).valid is False

def test_program_from_records():
    records = [
        {'type': 'text', 'content': 'Go', 'showPosition': True},
        {'type': 'move', 'direction': '10', 'degrees': '', 'valid': True},
        {'type': 'move', 'direction': 0, 'degrees': 360},
        {'type': 'wait', 'seconds': 2},
        'junk',
    ]
    program = program_from_records(records)

    assert program == [
        TextCommand(content='Go', show_position=True),
        MoveCommand(direction=10.0, degrees=0.0, valid=False),
        MoveCommand(direction=0.0, degrees=360.0, valid=True),
    ]
    assert program_from_records(None) == []

def test_records_round_trip():
    program = [TextCommand('note'), MoveCommand(-40.0, 200.0)]
    records = [command.to_record() for command in program]

    assert records[0]['type'] == CommandType.TEXT
    assert program_from_records(records) == program

@pytest.mark.parametrize('direction, degrees', [(150, 360), (-101, 90), (0, 0), (math.nan, 45)])
def test_move_command_rejects_invalid_values(direction, degrees):
    assert MoveCommand(direction, degrees).valid is False

def test_move_command_keeps_explicit_invalid_flag():
    assert MoveCommand(0.0, 90.0, valid=False).valid is False
    assert MoveCommand(-100, 5).valid is True
