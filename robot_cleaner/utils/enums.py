# IN THIS FILE: DIRECTIONS
from enum import Enum
from typing import Tuple


class Direction(int, Enum):
    """
    Direction of a single robot move.
    Uses the compass numbering of the arena (even numbers, clockwise).
    NORTH/SOUTH move along y, EAST/WEST move along x.
    """
    NORTH = 0
    EAST = 2
    SOUTH = 4
    WEST = 6

    def __int__(self):
        return self.value

    def is_horizontal(self) -> bool:
        return self in (Direction.EAST, Direction.WEST)

    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy). NORTH is +y, EAST is +x."""
        return {
            Direction.NORTH: (0, 1),
            Direction.EAST:  (1, 0),
            Direction.SOUTH: (0, -1),
            Direction.WEST:  (-1, 0),
        }[self]

    @staticmethod
    def from_name(name: str) -> 'Direction':
        """
        Parse a direction name, case-insensitive.

        Examples:
            "north", "North", "NORTH", "n" -> Direction.NORTH
        """
        key = name.strip().upper()
        for d in Direction:
            if key == d.name or key == d.name[0]:
                return d
        raise ValueError(f"Unknown direction: {name!r}")
