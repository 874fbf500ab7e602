# IN THIS FILE: ELAPSED TIME MEASUREMENT

import time
from typing import Callable, Optional


class Timer:
    """
    Context manager measuring wall-clock seconds spent inside the block.
    `duration` is set on exit even if the block raises.
    """

    def __init__(self):
        self._start: Optional[float] = None
        self.duration: Optional[float] = None

    def __enter__(self) -> 'Timer':
        self._start = time.perf_counter()
        self.duration = None
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.duration = time.perf_counter() - self._start
        return False


def measure_duration(action: Callable[[], None]) -> float:
    """Run `action` and return how long it took, in seconds."""
    with Timer() as timer:
        action()
    return timer.duration
