# IN THIS FILE: COORDINATE, COMMAND, SEGMENT, EXECUTION REPORT

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Tuple

from robot_cleaner.utils.enums import Direction


class InvalidSegmentError(ValueError):
    """Raised when a segment's start, end and direction disagree."""


@dataclass(frozen=True)
class Coordinate:
    """A single cell on the integer grid."""

    x: int
    y: int

    def moved(self, direction: Direction, steps: int) -> 'Coordinate':
        dx, dy = direction.delta()
        return Coordinate(self.x + dx * steps, self.y + dy * steps)

    def __repr__(self) -> str:
        return f"Coordinate(x={self.x}, y={self.y})"


@dataclass(frozen=True)
class Command:
    """
    The smallest unit of instruction to the robot:
    move `steps` cells in `direction`.
    """

    direction: Direction
    steps: int

    def __post_init__(self):
        if self.steps < 0:
            raise ValueError(f"Step count must be non-negative, got {self.steps}")


@dataclass(frozen=True)
class Segment:
    """
    A directed, axis-aligned run of cells from `start` to `end`.

    Direction decides traversal order, not coordinate order: a WEST segment
    has end.x < start.x. All span queries below are expressed in absolute
    order (low/high) so callers never need to care.
    """

    start: Coordinate
    end: Coordinate
    direction: Direction

    def __post_init__(self):
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        ux, uy = self.direction.delta()
        # Moving axis must match direction, fixed axis must not change
        if self.direction.is_horizontal():
            ok = dy == 0 and dx * ux >= 0
        else:
            ok = dx == 0 and dy * uy >= 0
        if not ok:
            raise InvalidSegmentError(
                f"{self.start} -> {self.end} is not a {self.direction.name} move"
            )

    @classmethod
    def from_command(cls, start: Coordinate, command: Command) -> 'Segment':
        return cls(start, start.moved(command.direction, command.steps), command.direction)

    @property
    def is_horizontal(self) -> bool:
        return self.direction.is_horizontal()

    @property
    def fixed(self) -> int:
        """Coordinate on the axis the segment does not move along (its bucket key)."""
        return self.start.y if self.is_horizontal else self.start.x

    @property
    def low(self) -> int:
        return min(self._from, self._to)

    @property
    def high(self) -> int:
        return max(self._from, self._to)

    @property
    def _from(self) -> int:
        return self.start.x if self.is_horizontal else self.start.y

    @property
    def _to(self) -> int:
        return self.end.x if self.is_horizontal else self.end.y

    def total_cells(self) -> int:
        """Cells entered by this move: start excluded, end included."""
        return self.high - self.low

    def covers(self, value: int) -> bool:
        """Closed span test along the moving axis."""
        return self.low <= value <= self.high

    def new_span(self) -> Optional[Tuple[int, int]]:
        """
        Closed interval (lo, hi) of the cells entered by this move, i.e. the
        span minus the start cell. None for a zero-length segment.
        """
        if self._from == self._to:
            return None
        if self._to > self._from:
            return self._from + 1, self._to
        return self._to, self._from - 1


def is_horizontal(direction: Direction) -> bool:
    return direction.is_horizontal()


def total_cells(segment: Segment) -> int:
    return segment.total_cells()


@dataclass(frozen=True)
class ExecutionReport:
    """
    Result of the robot executing a series of commands.

    `id` stays None until the report has been written to a store.
    """

    timestamp: datetime
    commands: int
    result: int
    duration: float
    id: Optional[int] = None

    def with_id(self, report_id: int) -> 'ExecutionReport':
        return replace(self, id=report_id)

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        data = {
            "timestamp": self.timestamp.isoformat(),
            "commands": self.commands,
            "result": self.result,
            "duration": self.duration,
        }
        if self.id is not None:
            data["id"] = self.id
        return data
