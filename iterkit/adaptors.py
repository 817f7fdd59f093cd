"""Assorted iterator adaptors: padding, positions, de-duplication,
repetition, shared iterators and error-aware processing."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from enum import Enum
from itertools import repeat
from operator import length_hint
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")

_END: Any = object()

__all__ = [
    "pad_using",
    "Position",
    "with_position",
    "unique",
    "unique_by",
    "repeat_n",
    "Tee",
    "tee",
    "RcIter",
    "rciter",
    "ProcessResults",
    "process_results",
]


def _pad_using(
    iterable: Iterable[T], min_len: int, filler: Callable[[int], T]
) -> Iterator[T]:
    pos = 0
    for item in iterable:
        yield item
        pos += 1
    while pos < min_len:
        yield filler(pos)
        pos += 1


def pad_using(
    iterable: Iterable[T], min_len: int, filler: Callable[[int], T]
) -> Iterator[T]:
    """Yield the items of ``iterable``, then ``filler(i)`` for each missing
    position ``i`` until at least ``min_len`` items have been produced."""
    if min_len < 0:
        raise ValueError(f"minimum length must not be negative, got {min_len}")
    return _pad_using(iterable, min_len, filler)


class Position(Enum):
    """Where an item stands within the items of an iterable."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"


def with_position(iterable: Iterable[T]) -> Iterator[tuple[Position, T]]:
    """Yield ``(position, item)`` pairs telling first, middle, last or only."""
    it = iter(iterable)
    current = next(it, _END)
    if current is _END:
        return
    first = True
    for following in it:
        yield (Position.FIRST if first else Position.MIDDLE), current
        first = False
        current = following
    yield (Position.ONLY if first else Position.LAST), current


def unique_by(iterable: Iterable[T], key: Callable[[T], Hashable]) -> Iterator[T]:
    """Yield each item whose ``key`` has not been seen before."""
    seen: set[Hashable] = set()
    for item in iterable:
        k = key(item)
        if k not in seen:
            seen.add(k)
            yield item


def unique(iterable: Iterable[T]) -> Iterator[T]:
    """Yield the first occurrence of each distinct (hashable) item."""
    seen: set[Any] = set()
    for item in iterable:
        if item not in seen:
            seen.add(item)
            yield item


def repeat_n(element: T, n: int) -> Iterator[T]:
    """Yield ``element`` exactly ``n`` times."""
    if n < 0:
        raise ValueError(f"repeat count must not be negative, got {n}")
    return repeat(element, n)


class _TeeBuffer(Generic[T]):
    __slots__ = ("backlog", "iterator", "owner")

    def __init__(self, iterator: Iterator[T]) -> None:
        self.backlog: deque[T] = deque()
        self.iterator = iterator
        # Which half should read from the backlog.
        self.owner = False


class Tee(Iterator[T]):
    """One of two iterators that both yield every item of a shared source."""

    def __init__(self, buffer: _TeeBuffer[T], ident: bool) -> None:
        self._buffer = buffer
        self._id = ident

    def __iter__(self) -> "Tee[T]":
        return self

    def __next__(self) -> T:
        buffer = self._buffer
        if buffer.owner == self._id and buffer.backlog:
            return buffer.backlog.popleft()
        item = next(buffer.iterator)
        buffer.backlog.append(item)
        buffer.owner = not self._id
        return item

    def __length_hint__(self) -> int:
        buffer = self._buffer
        hint = length_hint(buffer.iterator)
        if buffer.owner == self._id:
            hint += len(buffer.backlog)
        return hint


def tee(iterable: Iterable[T]) -> tuple[Tee[T], Tee[T]]:
    """Split ``iterable`` into two iterators that each yield all its items."""
    buffer: _TeeBuffer[T] = _TeeBuffer(iter(iterable))
    return Tee(buffer, True), Tee(buffer, False)


class _SharedIterator(Generic[T]):
    __slots__ = ("iterator", "busy")

    def __init__(self, iterator: Iterator[T]) -> None:
        self.iterator = iterator
        self.busy = False


class RcIter(Iterator[T]):
    """A handle on an iterator that its copies share.

    Copies made with :func:`copy.copy` all advance the same underlying
    iterator. Re-entering it from inside its own ``next`` raises
    ``RuntimeError``.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._shared: _SharedIterator[T] = _SharedIterator(iter(iterable))

    def __copy__(self) -> "RcIter[T]":
        other: RcIter[T] = RcIter.__new__(RcIter)
        other._shared = self._shared
        return other

    def __iter__(self) -> "RcIter[T]":
        return self

    def __next__(self) -> T:
        shared = self._shared
        if shared.busy:
            raise RuntimeError("shared iterator re-entered while advancing")
        shared.busy = True
        try:
            return next(shared.iterator)
        finally:
            shared.busy = False


def rciter(iterable: Iterable[T]) -> RcIter[T]:
    """Wrap ``iterable`` in a shareable :class:`RcIter`."""
    return RcIter(iterable)


class ProcessResults(Iterator[Any]):
    """Yields the items of an iterable until one of them is an exception.

    The exception is kept in :attr:`error` and the iterator ends there.
    """

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter: Optional[Iterator[Any]] = iter(iterable)
        self.error: Optional[BaseException] = None

    def __iter__(self) -> "ProcessResults":
        return self

    def __next__(self) -> Any:
        if self._iter is None:
            raise StopIteration
        item = next(self._iter, _END)
        if item is _END:
            self._iter = None
            raise StopIteration
        if isinstance(item, Exception):
            self.error = item
            self._iter = None
            raise StopIteration
        return item


def process_results(
    iterable: Iterable[Any], processor: Callable[[ProcessResults], R]
) -> R:
    """Run ``processor`` over the plain values of ``iterable``.

    Items that are exception instances count as errors: the values stop at
    the first one, and after ``processor`` returns that exception is raised.
    Otherwise the processor's result is returned.
    """
    adapted = ProcessResults(iterable)
    result = processor(adapted)
    if adapted.error is not None:
        raise adapted.error
    return result