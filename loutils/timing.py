"""Measure how long a callable takes to run."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


def duration(callback: Callable[[], Any]) -> float:
    """Run ``callback`` and return the elapsed time in seconds."""
    start = time.perf_counter()
    callback()
    return time.perf_counter() - start


def duration_with_result(callback: Callable[[], T]) -> tuple[T, float]:
    """Run ``callback`` and return its result with the elapsed time in seconds."""
    start = time.perf_counter()
    result = callback()
    return result, time.perf_counter() - start