# IN THIS FILE: PATH (RUNNING COUNT OF UNIQUE CELLS VISITED)

import bisect
from typing import Dict, List, Tuple

from robot_cleaner.utils.types import Segment

Interval = Tuple[int, int]


class Path:
    """
    Accumulates the segments a robot drives and keeps a running count of the
    distinct cells visited, without ever building the set of cells.

    Committed segments are bucketed by orientation and keyed by their fixed
    coordinate (y for horizontal, x for vertical). When a new segment is
    added, the cells it enters that were already visited are found by:
      - crossings with perpendicular segments (at most one cell each)
      - overlaps with collinear segments on the same row/column
    and the union of those is subtracted from the segment's length.
    """

    def __init__(self):
        self.horizontal: Dict[int, List[Segment]] = {}
        self.vertical: Dict[int, List[Segment]] = {}
        self.segments: List[Segment] = []
        # Sorted bucket keys, so crossings only scan keys inside the new span
        self._keys: Dict[bool, List[int]] = {True: [], False: []}
        self._unique_cells = 1  # starting cell

    def unique_cells(self) -> int:
        return self._unique_cells

    def add(self, segment: Segment) -> int:
        """
        Commit a segment and return how many new unique cells it added.
        A zero-length segment is a no-op.
        """
        span = segment.new_span()
        if span is None:
            return 0

        # Both passes run against previously committed segments only
        duplicates = self._intersections(segment, span) + self._overlaps(segment, span)
        new_cells = segment.total_cells() - _union_size(duplicates)

        self._commit(segment)
        self._unique_cells += new_cells
        return new_cells

    # -------------------------------------------------------------------------
    # Correction passes
    # -------------------------------------------------------------------------

    def _intersections(self, segment: Segment, span: Interval) -> List[Interval]:
        """Cells in `span` where a perpendicular segment crosses this one."""
        perpendicular = self.vertical if segment.is_horizontal else self.horizontal
        keys = self._keys[not segment.is_horizontal]
        lo, hi = span

        crossings = []
        for key in keys[bisect.bisect_left(keys, lo):bisect.bisect_right(keys, hi)]:
            if any(other.covers(segment.fixed) for other in perpendicular[key]):
                crossings.append((key, key))
        return crossings

    def _overlaps(self, segment: Segment, span: Interval) -> List[Interval]:
        """Parts of `span` already driven along the same row/column, either way."""
        parallel = self.horizontal if segment.is_horizontal else self.vertical
        lo, hi = span

        overlaps = []
        for other in parallel.get(segment.fixed, []):
            start, end = max(lo, other.low), min(hi, other.high)
            if start <= end:
                overlaps.append((start, end))
        return overlaps

    def _commit(self, segment: Segment) -> None:
        bucket = self.horizontal if segment.is_horizontal else self.vertical
        if segment.fixed not in bucket:
            bucket[segment.fixed] = []
            bisect.insort(self._keys[segment.is_horizontal], segment.fixed)
        bucket[segment.fixed].append(segment)
        self.segments.append(segment)


def _union_size(intervals: List[Interval]) -> int:
    """Number of integers covered by a list of closed intervals."""
    total = 0
    current_start, current_end = None, None
    for start, end in sorted(intervals):
        if current_end is not None and start <= current_end + 1:
            current_end = max(current_end, end)
            continue
        if current_end is not None:
            total += current_end - current_start + 1
        current_start, current_end = start, end
    if current_end is not None:
        total += current_end - current_start + 1
    return total
