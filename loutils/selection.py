"""Helpers that pick, drop, count and rearrange items of a list."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Sequence
from itertools import pairwise
from typing import Any


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def drop(collection: Sequence[Any], n: int) -> list[Any]:
    """Return a new list without the first ``n`` items."""
    _check_non_negative(n, "n")
    return list(collection[n:])


def drop_right(collection: Sequence[Any], n: int) -> list[Any]:
    """Return a new list without the last ``n`` items."""
    _check_non_negative(n, "n")
    if len(collection) <= n:
        return []
    return list(collection[: len(collection) - n])


def drop_while(
    collection: Sequence[Any], predicate: Callable[[Any], bool]
) -> list[Any]:
    """Drop items from the start while ``predicate`` holds."""
    start = next(
        (index for index, item in enumerate(collection) if not predicate(item)),
        len(collection),
    )
    return list(collection[start:])


def drop_right_while(
    collection: Sequence[Any], predicate: Callable[[Any], bool]
) -> list[Any]:
    """Drop items from the end while ``predicate`` holds."""
    end = next(
        (
            index + 1
            for index in reversed(range(len(collection)))
            if not predicate(collection[index])
        ),
        0,
    )
    return list(collection[:end])


def drop_by_index(collection: Sequence[Any], *indexes: int) -> list[Any]:
    """Return a new list without the items at ``indexes``.

    Negative indexes count back from the end; indexes out of range are ignored.
    """
    size = len(collection)
    doomed = {index + size if index < 0 else index for index in indexes}
    return [item for index, item in enumerate(collection) if index not in doomed]


def reject(
    collection: Iterable[Any], predicate: Callable[[Any, int], bool]
) -> list[Any]:
    """Return the items for which ``predicate(item, index)`` is false."""
    return [
        item for index, item in enumerate(collection) if not predicate(item, index)
    ]


def reject_map(
    collection: Iterable[Any], callback: Callable[[Any, int], tuple[Any, bool]]
) -> list[Any]:
    """Map and filter in one pass, keeping values whose flag is false."""
    result = []
    for index, item in enumerate(collection):
        value, flagged = callback(item, index)
        if not flagged:
            result.append(value)
    return result


def filter_reject(
    collection: Iterable[Any], predicate: Callable[[Any, int], bool]
) -> tuple[list[Any], list[Any]]:
    """Split the items into those ``predicate`` keeps and those it rejects."""
    kept: list[Any] = []
    rejected: list[Any] = []
    for index, item in enumerate(collection):
        (kept if predicate(item, index) else rejected).append(item)
    return kept, rejected


def count(collection: Iterable[Any], value: Any) -> int:
    """Count the items equal to ``value``."""
    return sum(1 for item in collection if item == value)


def count_by(collection: Iterable[Any], predicate: Callable[[Any], bool]) -> int:
    """Count the items for which ``predicate`` holds."""
    return sum(1 for item in collection if predicate(item))


def count_values(collection: Iterable[Hashable]) -> dict[Hashable, int]:
    """Count how often each distinct item occurs."""
    return dict(Counter(collection))


def count_values_by(
    collection: Iterable[Any], mapper: Callable[[Any], Hashable]
) -> dict[Hashable, int]:
    """Count how often each result of ``mapper`` occurs."""
    return dict(Counter(mapper(item) for item in collection))


def subset(collection: Sequence[Any], offset: int, length: int) -> list[Any]:
    """Return up to ``length`` items from ``offset``, never raising on overflow.

    A negative offset counts back from the end.
    """
    _check_non_negative(length, "length")
    size = len(collection)
    if offset < 0:
        offset = max(size + offset, 0)
    if offset > size:
        return []
    length = min(length, size - offset)
    return list(collection[offset : offset + length])


def slice_between(collection: Sequence[Any], start: int, end: int) -> list[Any]:
    """Return the items from ``start`` up to ``end``, clamping both to the list."""
    if start >= end:
        return []
    size = len(collection)
    start = min(max(start, 0), size)
    end = min(max(end, 0), size)
    return list(collection[start:end])


def replace(collection: Iterable[Any], old: Any, new: Any, n: int) -> list[Any]:
    """Return a copy with the first ``n`` items equal to ``old`` set to ``new``.

    A negative ``n`` replaces every occurrence.
    """
    result = []
    for item in collection:
        if item == old and n != 0:
            result.append(new)
            n -= 1
        else:
            result.append(item)
    return result


def replace_all(collection: Iterable[Any], old: Any, new: Any) -> list[Any]:
    """Return a copy with every item equal to ``old`` set to ``new``."""
    return replace(collection, old, new, -1)


def compact(collection: Iterable[Any]) -> list[Any]:
    """Return the items that are not empty or zero-like (falsy)."""
    return [item for item in collection if item]


def is_sorted(collection: Iterable[Any]) -> bool:
    """Tell whether the items are in non-decreasing order."""
    return all(left <= right for left, right in pairwise(collection))


def is_sorted_by_key(
    collection: Iterable[Any], iteratee: Callable[[Any], Any]
) -> bool:
    """Tell whether the keys of the items are in non-decreasing order."""
    return is_sorted(iteratee(item) for item in collection)


def splice(collection: Sequence[Any], index: int, *elements: Any) -> list[Any]:
    """Return a new list with ``elements`` inserted at ``index``.

    A negative index counts back from the end; indexes past either end put
    the elements at that end.
    """
    items = list(collection)
    size = len(items)
    if not elements:
        return items
    if index > size:
        return items + list(elements)
    if index < -size:
        return list(elements) + items
    if index < 0:
        index += size
    return items[:index] + list(elements) + items[index:]


def any_match(collection: Iterable[Any], predicate: Callable[[Any], bool]) -> bool:
    """Tell whether ``predicate`` holds for at least one item."""
    return any(predicate(item) for item in collection)


def all_match(collection: Iterable[Any], predicate: Callable[[Any], bool]) -> bool:
    """Tell whether ``predicate`` holds for every item."""
    return all(predicate(item) for item in collection)