"""Collection helpers whose callbacks run concurrently on threads."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any


def map_items(
    collection: Sequence[Any], iteratee: Callable[[Any, int], Any]
) -> list[Any]:
    """Apply ``iteratee(item, index)`` concurrently; results keep input order."""
    items = list(collection)
    if not items:
        return []
    with ThreadPoolExecutor() as executor:
        return list(executor.map(iteratee, items, range(len(items))))


def for_each(collection: Sequence[Any], iteratee: Callable[[Any, int], Any]) -> None:
    """Call ``iteratee(item, index)`` concurrently for every item and wait."""
    map_items(collection, iteratee)


def times(count: int, iteratee: Callable[[int], Any]) -> list[Any]:
    """Call ``iteratee(index)`` concurrently ``count`` times; results in index order."""
    if count <= 0:
        return []
    with ThreadPoolExecutor() as executor:
        return list(executor.map(iteratee, range(count)))


def group_by(
    collection: Sequence[Any], iteratee: Callable[[Any], Hashable]
) -> dict[Hashable, list[Any]]:
    """Group items by key; keys are computed concurrently, order within groups kept."""
    keys = map_items(collection, lambda item, _index: iteratee(item))
    result: dict[Hashable, list[Any]] = {}
    for key, item in zip(keys, collection):
        result.setdefault(key, []).append(item)
    return result


def partition_by(
    collection: Sequence[Any], iteratee: Callable[[Any], Hashable]
) -> list[list[Any]]:
    """Split items into groups by key, ordered by each key's first appearance."""
    return list(group_by(collection, iteratee).values())