# robot_cleaner/commands/generator.py
from typing import Iterable, Iterator

from robot_cleaner.utils.types import Command, Coordinate, Segment


class SegmentGenerator:
    """
    Turns a list of robot commands into the segments the robot drives.
    Each segment starts where the previous one ended.
    """

    def generate_segments(self, start: Coordinate, commands: Iterable[Command]) -> Iterator[Segment]:
        current = start
        for command in commands:
            segment = Segment.from_command(current, command)
            yield segment
            current = segment.end
