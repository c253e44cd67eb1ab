"""Wall-clock timing of a single call."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

__all__ = ["measure_execution_time"]


def measure_execution_time(func: Callable[..., Any], *args: Any, **kwargs: Any) -> float:
    """Call ``func(*args, **kwargs)`` and return the elapsed time in milliseconds.

    The time is measured with microsecond resolution.
    """
    start = time.perf_counter_ns()
    func(*args, **kwargs)
    elapsed_us = (time.perf_counter_ns() - start) // 1000
    return elapsed_us / 1000.0