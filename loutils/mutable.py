"""Helpers that change a list in place."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import Any


def filter_in_place(
    collection: list[Any], predicate: Callable[[Any], bool]
) -> list[Any]:
    """Keep only the items for which ``predicate`` holds; return the same list."""
    collection[:] = [item for item in collection if predicate(item)]
    return collection


def filter_in_place_indexed(
    collection: list[Any], predicate: Callable[[Any, int], bool]
) -> list[Any]:
    """Like :func:`filter_in_place`, passing each item's index as well."""
    collection[:] = [
        item for index, item in enumerate(collection) if predicate(item, index)
    ]
    return collection


def map_in_place(collection: list[Any], fn: Callable[[Any], Any]) -> None:
    """Replace every item with ``fn(item)``."""
    collection[:] = [fn(item) for item in collection]


def map_in_place_indexed(
    collection: list[Any], fn: Callable[[Any, int], Any]
) -> None:
    """Replace every item with ``fn(item, index)``."""
    collection[:] = [fn(item, index) for index, item in enumerate(collection)]


def shuffle(collection: list[Any]) -> None:
    """Shuffle the list in place (Fisher-Yates)."""
    random.shuffle(collection)


def reverse(collection: list[Any]) -> None:
    """Reverse the list in place."""
    collection.reverse()


def fill(collection: list[Any], initial: Any) -> None:
    """Set every item of the list to ``initial``."""
    collection[:] = [initial] * len(collection)