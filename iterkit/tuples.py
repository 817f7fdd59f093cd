"""Grouping items into fixed-size tuples and sliding tuple windows."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import chain, cycle, islice
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["Tuples", "tuples", "tuple_windows", "circular_tuple_windows"]


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError(f"tuple size must be at least 1, got {n}")


class Tuples(Iterator[tuple]):
    """Yields consecutive, non-overlapping ``n``-tuples of an iterable's items.

    Items left over at the end, too few to fill a tuple, are kept and can be
    read back with :meth:`into_buffer`.
    """

    def __init__(self, iterable: Iterable[Any], n: int) -> None:
        _check_size(n)
        self._iter: Iterator[Any] = iter(iterable)
        self._n = n
        self._exhausted = False
        self._buffer: list[Any] = []

    def __iter__(self) -> "Tuples":
        return self

    def __next__(self) -> tuple:
        if self._exhausted:
            items: list[Any] = []
        else:
            items = list(islice(self._iter, self._n))
        if len(items) == self._n:
            return tuple(items)
        self._exhausted = True
        # Every incomplete pull replaces the leftovers with what it found.
        self._buffer = items
        raise StopIteration

    def into_buffer(self) -> Iterator[Any]:
        """Return an iterator over the leftover items that did not fill a tuple."""
        return iter(list(self._buffer))


def tuples(iterable: Iterable[Any], n: int) -> Tuples:
    """Group the items of ``iterable`` into ``n``-tuples."""
    return Tuples(iterable, n)


def _single_windows(it: Iterator[Any]) -> Iterator[tuple]:
    for item in it:
        yield (item,)


def _sliding(last: list[Any], it: Iterator[Any]) -> Iterator[tuple]:
    for item in it:
        del last[0]
        last.append(item)
        yield tuple(last)


def tuple_windows(iterable: Iterable[Any], n: int) -> Iterator[tuple]:
    """Yield every contiguous window of ``n`` items as a tuple.

    The first ``n - 1`` items are read as soon as this is called.
    """
    _check_size(n)
    it = iter(iterable)
    if n == 1:
        return _single_windows(it)
    first = next(it, _MISSING)
    if first is _MISSING:
        return iter(())
    # A duplicate first item lets every window, the first included, be
    # produced by shifting in one new item.
    last = list(islice(chain((first, first), it), n))
    if len(last) < n:
        return iter(())
    return _sliding(last, it)


_MISSING: Any = object()


def circular_tuple_windows(iterable: Iterable[Any], n: int) -> Iterator[tuple]:
    """Yield one window of ``n`` items starting at each item, wrapping round
    to the first items where a window runs past the end."""
    _check_size(n)
    items = list(iterable)
    return islice(tuple_windows(cycle(items), n), len(items))