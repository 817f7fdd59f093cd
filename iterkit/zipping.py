"""Zipping, merge-joining and unzipping of iterables."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")

_END: Any = object()

__all__ = [
    "Left",
    "Right",
    "Both",
    "EitherOrBoth",
    "merge_join_by",
    "zip_longest",
    "zip_eq",
    "multizip",
    "multiunzip",
]


@dataclass(frozen=True)
class Left(Generic[A]):
    """An item present only on the left side."""

    value: A


@dataclass(frozen=True)
class Right(Generic[B]):
    """An item present only on the right side."""

    value: B


@dataclass(frozen=True)
class Both(Generic[A, B]):
    """A pair of items, one from each side."""

    left: A
    right: B


EitherOrBoth = Union[Left[A], Right[B], Both[A, B]]


def _merge_join(
    left: Iterator[A], right: Iterator[B], cmp: Callable[[A, B], int]
) -> Iterator[EitherOrBoth]:
    a: Any = _END
    b: Any = _END
    while True:
        if a is _END:
            a = next(left, _END)
        if b is _END:
            b = next(right, _END)
        if a is _END:
            if b is not _END:
                yield Right(b)
                yield from (Right(item) for item in right)
            return
        if b is _END:
            yield Left(a)
            yield from (Left(item) for item in left)
            return
        order = cmp(a, b)
        if order < 0:
            yield Left(a)
            a = _END
        elif order > 0:
            yield Right(b)
            b = _END
        else:
            yield Both(a, b)
            a = b = _END


def merge_join_by(
    left: Iterable[A], right: Iterable[B], cmp: Callable[[A, B], int]
) -> Iterator[EitherOrBoth]:
    """Merge two ascending iterables, pairing up items that compare equal.

    ``cmp(l, r)`` returns a negative number when ``l`` comes first, a positive
    number when ``r`` comes first, and zero when they match.
    """
    return _merge_join(iter(left), iter(right), cmp)


def _zip_longest(a: Iterator[A], b: Iterator[B]) -> Iterator[EitherOrBoth]:
    while True:
        x = next(a, _END)
        y = next(b, _END)
        if x is _END:
            if y is not _END:
                yield Right(y)
                yield from (Right(item) for item in b)
            return
        if y is _END:
            yield Left(x)
            yield from (Left(item) for item in a)
            return
        yield Both(x, y)


def zip_longest(a: Iterable[A], b: Iterable[B]) -> Iterator[EitherOrBoth]:
    """Walk two iterables in step until both are exhausted.

    Yields :class:`Both` while both have items, then :class:`Left` or
    :class:`Right` for the rest of the longer one.
    """
    return _zip_longest(iter(a), iter(b))


def _zip_eq(a: Iterator[A], b: Iterator[B]) -> Iterator[tuple[A, B]]:
    while True:
        x = next(a, _END)
        y = next(b, _END)
        if x is _END and y is _END:
            return
        if x is _END or y is _END:
            raise ValueError("zip_eq reached end of one iterator before the other")
        yield x, y


def zip_eq(a: Iterable[A], b: Iterable[B]) -> Iterator[tuple[A, B]]:
    """Walk two iterables in step; raise ``ValueError`` if their lengths differ."""
    return _zip_eq(iter(a), iter(b))


def multizip(*args: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Walk any number of iterables in step, stopping at the shortest.

    The iterables are advanced in order, so those before the first exhausted
    one may have given up one more item.
    """
    return zip(*args)


def multiunzip(iterable: Iterable[Iterable[Any]]) -> tuple[list[Any], ...]:
    """Split an iterable of equal-length tuples into one list per column.

    An empty input, or one of empty tuples, gives an empty tuple.
    """
    columns: tuple[list[Any], ...] | None = None
    for row in iterable:
        values = tuple(row)
        if columns is None:
            columns = tuple([] for _ in values)
        elif len(values) != len(columns):
            raise ValueError(
                f"multiunzip expected rows of {len(columns)} items, got {len(values)}"
            )
        for column, value in zip(columns, values):
            column.append(value)
    return columns if columns is not None else ()