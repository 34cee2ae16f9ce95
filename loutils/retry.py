"""Retrying, debouncing, throttling and saga-style transactions."""

from __future__ import annotations

import itertools
import threading
import time
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any


def _start_timer(delay: float, callback: Callable[[], Any]) -> threading.Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class Debounce:
    """Run the callbacks once, ``duration`` seconds after the last call."""

    def __init__(self, duration: float, *callbacks: Callable[[], Any]) -> None:
        self._duration = duration
        self._callbacks = callbacks
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._done = False

    def _fire(self) -> None:
        for callback in self._callbacks:
            callback()

    def __call__(self) -> None:
        with self._lock:
            if self._done:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._timer = _start_timer(self._duration, self._fire)

    def cancel(self) -> None:
        """Stop any pending run and ignore all later calls."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._done = True


@dataclass
class _DebounceItem:
    lock: threading.Lock = field(default_factory=threading.Lock)
    timer: threading.Timer | None = None
    count: int = 0


class DebounceBy:
    """Debounce separately per key; callbacks get the key and the call count."""

    def __init__(
        self, duration: float, *callbacks: Callable[[Hashable, int], Any]
    ) -> None:
        self._duration = duration
        self._callbacks = callbacks
        self._lock = threading.Lock()
        self._items: dict[Hashable, _DebounceItem] = {}

    def __call__(self, key: Hashable) -> None:
        with self._lock:
            item = self._items.setdefault(key, _DebounceItem())

        def fire() -> None:
            with item.lock:
                count = item.count
                item.count = 0
            for callback in self._callbacks:
                callback(key, count)

        with item.lock:
            item.count += 1
            if item.timer is not None:
                item.timer.cancel()
            item.timer = _start_timer(self._duration, fire)

    def cancel(self, key: Hashable) -> None:
        """Stop the pending run for ``key`` and forget its count."""
        with self._lock:
            item = self._items.pop(key, None)
            if item is None:
                return
            with item.lock:
                if item.timer is not None:
                    item.timer.cancel()
                    item.timer = None


class ThrottleBy:
    """Run the callbacks at most ``count`` times per key in every interval."""

    def __init__(
        self,
        interval: float,
        *callbacks: Callable[[Hashable], Any],
        count: int = 1,
    ) -> None:
        self._interval = interval
        self._callbacks = callbacks
        self._limit = count if count > 0 else 1
        self._lock = threading.RLock()
        self._timer: threading.Timer | None = None
        self._counts: dict[Hashable, int] = {}

    def __call__(self, key: Hashable) -> None:
        with self._lock:
            seen = self._counts.get(key, 0)
            if seen < self._limit:
                self._counts[key] = seen + 1
                for callback in self._callbacks:
                    callback(key)
            if self._timer is None:
                self._timer = _start_timer(self._interval, self.reset)

    def reset(self) -> None:
        """Start a fresh interval, clearing every key's count."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._counts = {}
            self._timer = None


class Throttle:
    """Run the callbacks at most ``count`` times in every interval."""

    def __init__(
        self, interval: float, *callbacks: Callable[[], Any], count: int = 1
    ) -> None:
        wrapped = [self._ignore_key(callback) for callback in callbacks]
        self._throttle = ThrottleBy(interval, *wrapped, count=count)

    @staticmethod
    def _ignore_key(callback: Callable[[], Any]) -> Callable[[Hashable], Any]:
        return lambda _key: callback()

    def __call__(self) -> None:
        self._throttle(None)

    def reset(self) -> None:
        """Start a fresh interval."""
        self._throttle.reset()


_UNSET = object()


class TransactionError(Exception):
    """A failed transaction step, optionally carrying the state it left behind.

    A step raises it with ``state`` to report failure together with an updated
    state. :meth:`Transaction.process` raises it with the rolled-back state.
    """

    def __init__(self, message: str = "", *, state: Any = _UNSET) -> None:
        super().__init__(message)
        self.has_state = state is not _UNSET
        self.state = None if state is _UNSET else state


@dataclass
class _Step:
    execute: Callable[[Any], Any]
    on_rollback: Callable[[Any], Any]


class Transaction:
    """A chain of steps that is rolled back in reverse when one fails."""

    def __init__(self) -> None:
        self._steps: list[_Step] = []

    def then(
        self, execute: Callable[[Any], Any], on_rollback: Callable[[Any], Any]
    ) -> Transaction:
        """Add a step and its rollback; return the same transaction."""
        self._steps.append(_Step(execute, on_rollback))
        return self

    def process(self, state: Any) -> Any:
        """Run every step and return the final state.

        When a step raises, the rollbacks of the steps before it run in
        reverse order and a :class:`TransactionError` holding the rolled-back
        state is raised from the original exception.
        """
        failure: Exception | None = None
        completed = 0
        for step in self._steps:
            try:
                state = step.execute(state)
            except TransactionError as exc:
                failure = exc
                if exc.has_state:
                    state = exc.state
                break
            except Exception as exc:
                failure = exc
                break
            completed += 1

        if failure is None:
            return state

        for step in reversed(self._steps[:completed]):
            state = step.on_rollback(state)
        raise TransactionError(str(failure), state=state) from failure


def _indices(max_iteration: int) -> Iterable[int]:
    return itertools.count() if max_iteration <= 0 else range(max_iteration)


def _more_to_come(max_iteration: int, index: int) -> bool:
    return max_iteration <= 0 or index + 1 < max_iteration


def attempt(max_iteration: int, fn: Callable[[int], Any]) -> int:
    """Call ``fn(index)`` until it returns without raising.

    Returns the number of calls made. After ``max_iteration`` failures the
    last exception is raised; a value below 1 retries forever.
    """
    error: Exception | None = None
    for index in _indices(max_iteration):
        try:
            fn(index)
        except Exception as exc:
            error = exc
            continue
        return index + 1
    raise error  # type: ignore[misc]


def attempt_with_delay(
    max_iteration: int, delay: float, fn: Callable[[int, float], Any]
) -> tuple[int, float]:
    """Like :func:`attempt`, sleeping ``delay`` seconds between calls.

    ``fn`` gets the index and the seconds elapsed so far. Returns the number
    of calls and the total elapsed seconds.
    """
    start = time.monotonic()
    error: Exception | None = None
    for index in _indices(max_iteration):
        try:
            fn(index, time.monotonic() - start)
        except Exception as exc:
            error = exc
        else:
            return index + 1, time.monotonic() - start
        if _more_to_come(max_iteration, index):
            time.sleep(delay)
    raise error  # type: ignore[misc]


def attempt_while(
    max_iteration: int, fn: Callable[[int], tuple[Exception | None, bool]]
) -> int:
    """Call ``fn(index)``, which returns ``(error, should_continue)``.

    Stops on the first call without an error, or at once when
    ``should_continue`` is false, raising that call's error if it has one.
    Returns the number of calls; after ``max_iteration`` failures the last
    error is raised. A value below 1 retries forever.
    """
    error: Exception | None = None
    for index in _indices(max_iteration):
        error, should_continue = fn(index)
        if not should_continue or error is None:
            if error is not None:
                raise error
            return index + 1
    raise error  # type: ignore[misc]


def attempt_while_with_delay(
    max_iteration: int,
    delay: float,
    fn: Callable[[int, float], tuple[Exception | None, bool]],
) -> tuple[int, float]:
    """Like :func:`attempt_while`, sleeping ``delay`` seconds between calls.

    Returns the number of calls and the total elapsed seconds.
    """
    start = time.monotonic()
    error: Exception | None = None
    for index in _indices(max_iteration):
        error, should_continue = fn(index, time.monotonic() - start)
        if not should_continue or error is None:
            if error is not None:
                raise error
            return index + 1, time.monotonic() - start
        if _more_to_come(max_iteration, index):
            time.sleep(delay)
    raise error  # type: ignore[misc]