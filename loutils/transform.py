"""Helpers that build new collections from lists: mapping, grouping, chunking."""

from __future__ import annotations

import copy
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any

from loutils import mutable


def filter_items(
    collection: Iterable[Any], predicate: Callable[[Any, int], bool]
) -> list[Any]:
    """Return the items for which ``predicate(item, index)`` is true."""
    return [item for index, item in enumerate(collection) if predicate(item, index)]


def map_items(
    collection: Iterable[Any], iteratee: Callable[[Any, int], Any]
) -> list[Any]:
    """Return ``iteratee(item, index)`` for every item."""
    return [iteratee(item, index) for index, item in enumerate(collection)]


def uniq_map(
    collection: Iterable[Any], iteratee: Callable[[Any, int], Hashable]
) -> list[Any]:
    """Map every item and keep only the first occurrence of each result."""
    seen: set[Hashable] = set()
    result = []
    for index, item in enumerate(collection):
        value = iteratee(item, index)
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def filter_map(
    collection: Iterable[Any], callback: Callable[[Any, int], tuple[Any, bool]]
) -> list[Any]:
    """Map and filter in one pass.

    ``callback(item, index)`` returns ``(value, keep)``; values with a true
    ``keep`` are collected.
    """
    result = []
    for index, item in enumerate(collection):
        value, keep = callback(item, index)
        if keep:
            result.append(value)
    return result


def flat_map(
    collection: Iterable[Any],
    iteratee: Callable[[Any, int], Iterable[Any] | None],
) -> list[Any]:
    """Map every item to a sequence and flatten them; ``None`` adds nothing."""
    result: list[Any] = []
    for index, item in enumerate(collection):
        result.extend(iteratee(item, index) or ())
    return result


def reduce(
    collection: Iterable[Any],
    accumulator: Callable[[Any, Any, int], Any],
    initial: Any,
) -> Any:
    """Fold the items from left to right with ``accumulator(agg, item, index)``."""
    for index, item in enumerate(collection):
        initial = accumulator(initial, item, index)
    return initial


def reduce_right(
    collection: Sequence[Any],
    accumulator: Callable[[Any, Any, int], Any],
    initial: Any,
) -> Any:
    """Fold the items from right to left with ``accumulator(agg, item, index)``."""
    for index in reversed(range(len(collection))):
        initial = accumulator(initial, collection[index], index)
    return initial


def for_each(collection: Iterable[Any], iteratee: Callable[[Any, int], Any]) -> None:
    """Call ``iteratee(item, index)`` for every item in order."""
    for index, item in enumerate(collection):
        iteratee(item, index)


def for_each_while(
    collection: Iterable[Any], iteratee: Callable[[Any, int], bool]
) -> None:
    """Call ``iteratee(item, index)`` in order until it returns false."""
    for index, item in enumerate(collection):
        if not iteratee(item, index):
            break


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")


def times(count: int, iteratee: Callable[[int], Any]) -> list[Any]:
    """Return the results of ``iteratee(index)`` for indexes 0 to ``count - 1``."""
    _check_count(count)
    return [iteratee(index) for index in range(count)]


def uniq(collection: Iterable[Hashable]) -> list[Any]:
    """Return the items without duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(collection))


def uniq_by(
    collection: Iterable[Any], iteratee: Callable[[Any], Hashable]
) -> list[Any]:
    """Return the items whose ``iteratee`` key has not been seen before."""
    seen: set[Hashable] = set()
    result = []
    for item in collection:
        key = iteratee(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def group_by(
    collection: Iterable[Any], iteratee: Callable[[Any], Hashable]
) -> dict[Hashable, list[Any]]:
    """Group the items into lists keyed by ``iteratee(item)``."""
    result: dict[Hashable, list[Any]] = {}
    for item in collection:
        result.setdefault(iteratee(item), []).append(item)
    return result


def group_by_map(
    collection: Iterable[Any], iteratee: Callable[[Any], tuple[Hashable, Any]]
) -> dict[Hashable, list[Any]]:
    """Group values by key, where ``iteratee(item)`` returns ``(key, value)``."""
    result: dict[Hashable, list[Any]] = {}
    for item in collection:
        key, value = iteratee(item)
        result.setdefault(key, []).append(value)
    return result


def chunk(collection: Sequence[Any], size: int) -> list[list[Any]]:
    """Split the items into lists of ``size``; the last may be shorter."""
    if size <= 0:
        raise ValueError("size must be greater than 0")
    return [list(collection[start : start + size]) for start in range(0, len(collection), size)]


def partition_by(
    collection: Iterable[Any], iteratee: Callable[[Any], Hashable]
) -> list[list[Any]]:
    """Split the items into groups, ordered by each key's first appearance."""
    return list(group_by(collection, iteratee).values())


def flatten(collection: Iterable[Iterable[Any] | None]) -> list[Any]:
    """Flatten one level of nesting."""
    return [item for inner in collection for item in (inner or ())]


def interleave(*collections: Sequence[Any] | None) -> list[Any]:
    """Take items round-robin from every collection until all are used up."""
    lists = [list(inner or ()) for inner in collections]
    longest = max((len(inner) for inner in lists), default=0)
    return [inner[index] for index in range(longest) for inner in lists if index < len(inner)]


def shuffle(collection: list[Any]) -> list[Any]:
    """Shuffle the list in place and return it."""
    mutable.shuffle(collection)
    return collection


def reverse(collection: list[Any]) -> list[Any]:
    """Reverse the list in place and return it."""
    mutable.reverse(collection)
    return collection


def fill(collection: Sequence[Any], initial: Any) -> list[Any]:
    """Return a new list as long as ``collection``, holding copies of ``initial``."""
    return [copy.deepcopy(initial) for _ in collection]


def repeat(count: int, initial: Any) -> list[Any]:
    """Return ``count`` copies of ``initial``."""
    _check_count(count)
    return [copy.deepcopy(initial) for _ in range(count)]


def repeat_by(count: int, callback: Callable[[int], Any]) -> list[Any]:
    """Return the results of ``callback(index)`` for ``count`` indexes."""
    _check_count(count)
    return [callback(index) for index in range(count)]


def key_by(
    collection: Iterable[Any], iteratee: Callable[[Any], Hashable]
) -> dict[Hashable, Any]:
    """Map ``iteratee(item)`` to the item; later items win on equal keys."""
    return {iteratee(item): item for item in collection}


def associate(
    collection: Iterable[Any], transform: Callable[[Any], tuple[Hashable, Any]]
) -> dict[Hashable, Any]:
    """Build a dict from the ``(key, value)`` pairs ``transform`` returns."""
    return dict(transform(item) for item in collection)


def slice_to_map(
    collection: Iterable[Any], transform: Callable[[Any], tuple[Hashable, Any]]
) -> dict[Hashable, Any]:
    """Same as :func:`associate`."""
    return associate(collection, transform)


def filter_slice_to_map(
    collection: Iterable[Any],
    transform: Callable[[Any], tuple[Hashable, Any, bool]],
) -> dict[Hashable, Any]:
    """Build a dict from ``(key, value, keep)`` triples, keeping those marked."""
    result: dict[Hashable, Any] = {}
    for item in collection:
        key, value, keep = transform(item)
        if keep:
            result[key] = value
    return result


def keyify(collection: Iterable[Hashable]) -> set[Any]:
    """Return the set of distinct items."""
    return set(collection)