"""Numeric helpers: ranges, clamping, sums, products and means."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def int_range(element_num: int) -> list[int]:
    """Return ``abs(element_num)`` integers from 0, counting down when negative."""
    step = -1 if element_num < 0 else 1
    return list(range(0, element_num, step))


def range_from(start: Any, element_num: int) -> list[Any]:
    """Return ``abs(element_num)`` numbers from ``start``, counting down when negative."""
    step = -1 if element_num < 0 else 1
    result = []
    value = start
    for _ in range(abs(element_num)):
        result.append(value)
        value += step
    return result


def range_with_steps(start: Any, end: Any, step: Any) -> list[Any]:
    """Return numbers from ``start`` up to, but not including, ``end`` by ``step``.

    A zero step, or a step pointing away from ``end``, gives an empty list.
    """
    if start == end or step == 0:
        return []
    result = []
    value = start
    if start < end:
        if step < 0:
            return []
        while value < end:
            result.append(value)
            value += step
        return result
    if step > 0:
        return []
    while value > end:
        result.append(value)
        value += step
    return result


def clamp(value: Any, lower: Any, upper: Any) -> Any:
    """Clamp ``value`` within the inclusive bounds ``lower`` and ``upper``."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def sum_values(collection: Iterable[Any]) -> Any:
    """Sum the values in a collection; an empty collection sums to 0."""
    return sum(collection, 0)


def sum_by(collection: Iterable[Any], iteratee: Callable[[Any], Any]) -> Any:
    """Sum the results of ``iteratee`` over a collection; empty gives 0."""
    return sum((iteratee(item) for item in collection), 0)


def product(collection: Iterable[Any] | None) -> Any:
    """Multiply the values in a collection; an empty or missing one gives 1."""
    if not collection:
        return 1
    return math.prod(collection)


def product_by(
    collection: Iterable[Any] | None, iteratee: Callable[[Any], Any]
) -> Any:
    """Multiply the results of ``iteratee`` over a collection; empty gives 1."""
    if not collection:
        return 1
    return math.prod(iteratee(item) for item in collection)


def _divide(total: Any, length: int) -> Any:
    """Divide, truncating toward zero when the total is an integer."""
    if isinstance(total, int):
        quotient = abs(total) // length
        return quotient if total >= 0 else -quotient
    return total / length


def mean(collection: Sequence[Any]) -> Any:
    """Return the mean of a collection; integers divide with truncation, empty gives 0."""
    if not collection:
        return 0
    return _divide(sum_values(collection), len(collection))


def mean_by(collection: Sequence[Any], iteratee: Callable[[Any], Any]) -> Any:
    """Return the mean of ``iteratee`` over a collection; empty gives 0."""
    if not collection:
        return 0
    return _divide(sum_by(collection, iteratee), len(collection))