# IN THIS FILE: RUNNING A SERIES OF COMMANDS AND REPORTING ON IT

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from robot_cleaner.commands.generator import SegmentGenerator
from robot_cleaner.entities.path import Path
from robot_cleaner.utils.timer import measure_duration
from robot_cleaner.utils.types import Command, Coordinate, ExecutionReport

logger = logging.getLogger(__name__)


class Robot:
    """
    Drives a series of commands from a starting position and reports how
    many distinct cells were cleaned.

    Every call to execute_commands works on a fresh Path, so one Robot must
    still not be shared between concurrent requests.
    """

    def __init__(self, timer: Callable[[Callable[[], None]], float] = measure_duration):
        self.timer = timer
        self.generator = SegmentGenerator()
        self.start_position: Optional[Coordinate] = None
        self.current_position: Optional[Coordinate] = None
        self.path: Path = Path()

    def execute_commands(self, start: Coordinate, commands: Iterable[Command]) -> ExecutionReport:
        """
        Execute commands starting at `start`.

        Args:
            start: Where the robot is placed before the first command.
                   This cell is always counted as cleaned.
            commands: Moves to execute, in order

        Returns:
            ExecutionReport with the number of commands executed, the number
            of unique cells cleaned and the time taken (seconds)
        """
        command_list: List[Command] = list(commands)

        def run() -> None:
            self.start_position = start
            self.current_position = start
            self.path = Path()
            for segment in self.generator.generate_segments(start, command_list):
                self.path.add(segment)
                self.current_position = segment.end

        duration = self.timer(run)
        report = ExecutionReport(
            timestamp=datetime.now(timezone.utc),
            commands=len(command_list),
            result=self.path.unique_cells(),
            duration=duration,
        )
        logger.debug(
            "Executed %d commands from %s: %d unique cells in %.6fs",
            report.commands, start, report.result, report.duration,
        )
        return report
