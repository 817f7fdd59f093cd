"""Minimum and maximum in one pass, k-permutations and power sets."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import astuple, dataclass
from enum import Enum, auto
from typing import Any, Generic, Optional, TypeVar, Union

from .sizehint import USIZE_MAX, SizeHint

T = TypeVar("T")

_END: Any = object()

__all__ = [
    "NoElements",
    "OneElement",
    "MinMax",
    "MinMaxResult",
    "minmax",
    "minmax_by_key",
    "minmax_by",
    "Permutations",
    "permutations",
    "powerset",
]


@dataclass(frozen=True)
class NoElements:
    """The iterable was empty."""

    def into_option(self) -> None:
        """Return ``None``: there is no minimum or maximum."""
        bounds = astuple(self)
        return (bounds[0], bounds[-1]) if bounds else None


@dataclass(frozen=True)
class OneElement(Generic[T]):
    """The iterable held exactly one item, both minimum and maximum."""

    value: T

    def into_option(self) -> tuple[T, T]:
        """Return the single item as both minimum and maximum."""
        return self.value, self.value


@dataclass(frozen=True)
class MinMax(Generic[T]):
    """The iterable held several items; ``min`` is not larger than ``max``."""

    min: T
    max: T

    def into_option(self) -> tuple[T, T]:
        """Return ``(min, max)``."""
        return self.min, self.max


MinMaxResult = Union[NoElements, OneElement[T], MinMax[T]]


def _minmax_impl(
    iterable: Iterable[T],
    key_for: Callable[[T], Any],
    lt: Callable[[T, T, Any, Any], bool],
) -> MinMaxResult:
    it = iter(iterable)
    x = next(it, _END)
    if x is _END:
        return NoElements()
    y = next(it, _END)
    if y is _END:
        return OneElement(x)
    xk, yk = key_for(x), key_for(y)
    if not lt(y, x, yk, xk):
        lo, hi, lo_key, hi_key = x, y, xk, yk
    else:
        lo, hi, lo_key, hi_key = y, x, yk, xk

    # Two items at a time: compare them with each other first, then the
    # smaller with the minimum and the larger with the maximum.
    while True:
        first = next(it, _END)
        if first is _END:
            break
        second = next(it, _END)
        first_key = key_for(first)
        if second is _END:
            if lt(first, lo, first_key, lo_key):
                lo = first
            elif not lt(first, hi, first_key, hi_key):
                hi = first
            break
        second_key = key_for(second)
        if not lt(second, first, second_key, first_key):
            small, small_key, big, big_key = first, first_key, second, second_key
        else:
            small, small_key, big, big_key = second, second_key, first, first_key
        if lt(small, lo, small_key, lo_key):
            lo, lo_key = small, small_key
        if not lt(big, hi, big_key, hi_key):
            hi, hi_key = big, big_key

    return MinMax(lo, hi)


def minmax(iterable: Iterable[T]) -> MinMaxResult:
    """Find the minimum and maximum in one pass.

    Of equal items the first is the minimum and the last the maximum.
    """
    return _minmax_impl(iterable, lambda _item: None, lambda a, b, _ka, _kb: a < b)


def minmax_by_key(iterable: Iterable[T], key: Callable[[T], Any]) -> MinMaxResult:
    """Find the items with the smallest and largest ``key`` in one pass."""
    return _minmax_impl(iterable, key, lambda _a, _b, ka, kb: ka < kb)


def minmax_by(iterable: Iterable[T], compare: Callable[[T, T], int]) -> MinMaxResult:
    """Find the minimum and maximum with a three-way ``compare`` function."""
    return _minmax_impl(
        iterable, lambda _item: None, lambda a, b, _ka, _kb: compare(a, b) < 0
    )


class _Phase(Enum):
    START_UNKNOWN = auto()
    ONGOING_UNKNOWN = auto()
    COMPLETE = auto()
    EMPTY = auto()
    DONE = auto()


@dataclass
class _CompleteState:
    """Index state over a pool whose length ``n`` is known."""

    n: int
    k: int
    indices: Optional[list[int]] = None
    cycles: Optional[list[int]] = None

    def advance(self) -> None:
        if self.indices is None or self.cycles is None:
            self.indices = list(range(self.n))
            self.cycles = list(range(self.n - 1, self.n - self.k - 1, -1))
            return
        indices, cycles = self.indices, self.cycles
        n = len(indices)
        for i in reversed(range(len(cycles))):
            if cycles[i] == 0:
                cycles[i] = n - i - 1
                indices.append(indices.pop(i))
            else:
                j = n - cycles[i]
                indices[i], indices[j] = indices[j], indices[i]
                cycles[i] -= 1
                return
        self.indices = None
        self.cycles = None

    def remaining(self) -> int:
        if self.indices is None or self.cycles is None:
            return 0 if self.n < self.k else math.perm(self.n, self.k)
        count = 0
        for i, cycle in enumerate(self.cycles):
            count = count * (len(self.indices) - i) + cycle
        return count


class Permutations(Iterator[list]):
    """Iterator over the ``k``-permutations of an iterable's items.

    Items are read lazily, so the first permutations are available before
    the source is exhausted.
    """

    def __init__(self, iterable: Iterable[T], k: int) -> None:
        if k < 0:
            raise ValueError(f"permutation length must not be negative, got {k}")
        self._source: Iterator[T] = iter(iterable)
        self._pool: list[T] = []
        self._k = k
        self._min_n = 0
        self._complete: Optional[_CompleteState] = None
        if k == 0:
            self._phase = _Phase.COMPLETE
            self._complete = _CompleteState(0, 0)
            return
        while len(self._pool) < k and self._pull():
            pass
        self._phase = _Phase.START_UNKNOWN if len(self._pool) >= k else _Phase.EMPTY

    def _pull(self) -> bool:
        item = next(self._source, _END)
        if item is _END:
            self._source = iter(())
            return False
        self._pool.append(item)
        return True

    def _advance(self) -> None:
        if self._phase is _Phase.START_UNKNOWN:
            self._phase = _Phase.ONGOING_UNKNOWN
            self._min_n = self._k
        elif self._phase is _Phase.ONGOING_UNKNOWN:
            if self._pull():
                self._min_n += 1
            else:
                n, k = self._min_n, self._k
                complete = _CompleteState(n, k)
                for _ in range(n - k + 2):
                    complete.advance()
                self._complete = complete
                self._phase = _Phase.COMPLETE
        elif self._phase is _Phase.COMPLETE and self._complete is not None:
            self._complete.advance()

    def __iter__(self) -> "Permutations":
        return self

    def __next__(self) -> list:
        self._advance()
        if self._phase is _Phase.ONGOING_UNKNOWN:
            return self._pool[: self._k - 1] + [self._pool[self._min_n - 1]]
        if self._phase is _Phase.COMPLETE and self._complete is not None:
            indices, cycles = self._complete.indices, self._complete.cycles
            if indices is None or cycles is None:
                self._phase = _Phase.DONE
                raise StopIteration
            return [self._pool[i] for i in indices[: len(cycles)]]
        raise StopIteration

    def _known_total(self) -> int:
        n = len(self._pool) + sum(1 for _ in self._source)
        total = _CompleteState(n, self._k).remaining()
        if total > USIZE_MAX:
            raise OverflowError("permutation count does not fit in 64 bits")
        return total

    def count(self) -> int:
        """Consume the iterator and return how many permutations were left."""
        phase = self._phase
        if phase is _Phase.START_UNKNOWN:
            result = self._known_total()
        elif phase is _Phase.ONGOING_UNKNOWN:
            result = self._known_total() - (self._min_n - self._k + 1)
        elif phase is _Phase.COMPLETE and self._complete is not None:
            result = self._complete.remaining()
            if result > USIZE_MAX:
                raise OverflowError("permutation count does not fit in 64 bits")
        else:
            result = 0
        self._phase = _Phase.DONE
        return result

    def size_hint(self) -> SizeHint:
        """Return bounds on the number of permutations still to come."""
        if self._phase in (_Phase.START_UNKNOWN, _Phase.ONGOING_UNKNOWN):
            return 0, None
        if self._phase is _Phase.COMPLETE and self._complete is not None:
            remaining = self._complete.remaining()
            if remaining > USIZE_MAX:
                return USIZE_MAX, None
            return remaining, remaining
        return 0, 0


def permutations(iterable: Iterable[T], k: int) -> Permutations:
    """Return an iterator over all ``k``-permutations of ``iterable``'s items."""
    return Permutations(iterable, k)


def _combinations(pool: list[T], pull: Callable[[], bool], k: int) -> Iterator[list[T]]:
    while len(pool) < k and pull():
        pass
    if k > len(pool):
        return
    indices = list(range(k))
    yield [pool[i] for i in indices]
    if not indices:
        return
    while True:
        i = k - 1
        if indices[i] == len(pool) - 1:
            pull()
        while indices[i] == i + len(pool) - k:
            if i == 0:
                return
            i -= 1
        indices[i] += 1
        for j in range(i + 1, k):
            indices[j] = indices[j - 1] + 1
        yield [pool[i] for i in indices]


def powerset(iterable: Iterable[T]) -> Iterator[list[T]]:
    """Yield every subset of ``iterable``'s items as a list, smallest first.

    Subsets of one size come in the order of the items' positions.
    """
    source = iter(iterable)
    pool: list[T] = []

    def pull() -> bool:
        item = next(source, _END)
        if item is _END:
            return False
        pool.append(item)
        return True

    def generate() -> Iterator[list[T]]:
        size = 0
        while True:
            yield from _combinations(pool, pull, size)
            if size < len(pool) or size == 0:
                size += 1
            else:
                return

    return generate()