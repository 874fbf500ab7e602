# robot_cleaner/tests/test_timer.py

import time

import pytest

from robot_cleaner.utils.timer import Timer, measure_duration


def test_measure_duration_runs_action():
    calls = []
    duration = measure_duration(lambda: calls.append(1))
    assert calls == [1]
    assert duration >= 0


def test_measure_duration_of_sleep():
    assert measure_duration(lambda: time.sleep(0.01)) >= 0.005


def test_timer_sets_duration_when_block_raises():
    timer = Timer()
    with pytest.raises(RuntimeError):
        with timer:
            raise RuntimeError("boom")
    assert timer.duration is not None
    assert timer.duration >= 0
