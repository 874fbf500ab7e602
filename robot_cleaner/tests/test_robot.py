# robot_cleaner/tests/test_robot.py

from datetime import datetime, timezone

import pytest

from robot_cleaner.entities.robot import Robot
from robot_cleaner.utils.enums import Direction
from robot_cleaner.utils.types import Command, Coordinate

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST


@pytest.mark.parametrize(
    "start, moves, expected_cells",
    [
        ((0, 0), [(N, 4), (E, 2)], 7),
        # Backtrack over cells already cleaned
        ((0, 0), [(N, 4), (S, 2)], 5),
        # Backtrack and carry on past the start
        ((0, 0), [(N, 4), (S, 10)], 11),
        # Cross the first segment once
        ((0, 0), [(N, 4), (E, 4), (S, 2), (W, 10)], 20),
        ((5, 7), [(N, 4)], 5),
        # The starting cell is cleaned even with no commands
        ((0, 0), [], 1),
    ],
)
def test_execute_commands(start, moves, expected_cells):
    robot = Robot()
    report = robot.execute_commands(Coordinate(*start), [Command(d, s) for d, s in moves])

    assert report.result == expected_cells
    assert report.commands == len(moves)
    assert report.duration >= 0
    assert report.id is None


def test_robot_tracks_position():
    robot = Robot()
    robot.execute_commands(Coordinate(1, 1), [Command(N, 3), Command(W, 5)])
    assert robot.start_position == Coordinate(1, 1)
    assert robot.current_position == Coordinate(-4, 4)


def test_zero_step_commands_still_count_as_commands():
    report = Robot().execute_commands(Coordinate(0, 0), [Command(E, 0), Command(N, 0)])
    assert report.commands == 2
    assert report.result == 1


def test_accepts_generator_of_commands():
    commands = (Command(d, 3) for d in (N, E, S, W))
    report = Robot().execute_commands(Coordinate(0, 0), commands)
    assert report.commands == 4
    assert report.result == 12


def test_each_run_starts_a_fresh_path():
    robot = Robot()
    first = robot.execute_commands(Coordinate(0, 0), [Command(N, 4)])
    second = robot.execute_commands(Coordinate(0, 0), [Command(N, 4)])
    assert first.result == second.result == 5


def test_uses_injected_timer():
    calls = []

    def fake_timer(action):
        calls.append(action)
        action()
        return 1.5

    report = Robot(timer=fake_timer).execute_commands(Coordinate(0, 0), [Command(E, 2)])
    assert len(calls) == 1
    assert report.duration == 1.5
    assert report.result == 3


def test_report_timestamp_is_completion_time():
    before = datetime.now(timezone.utc)
    report = Robot().execute_commands(Coordinate(0, 0), [Command(S, 1)])
    after = datetime.now(timezone.utc)
    assert before <= report.timestamp <= after
