"""Iterators that produce items from functions rather than from another iterator."""

from __future__ import annotations

import warnings
from collections.abc import Callable, Iterator
from typing import Any, Generic, Optional, TypeVar

A = TypeVar("A")
S = TypeVar("S")

__all__ = ["Unfold", "repeat_call", "unfold", "iterate"]


def _repeat_call(function: Callable[[], A]) -> Iterator[A]:
    while True:
        yield function()


def repeat_call(function: Callable[[], A]) -> Iterator[A]:
    """Yield ``function()`` forever.

    Deprecated: use ``iter(function, sentinel)`` or a generator instead.
    """
    warnings.warn(
        "repeat_call is deprecated; use a generator instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return _repeat_call(function)


class Unfold(Iterator[A], Generic[S, A]):
    """An iterator driven by a state and a step function.

    ``f(state)`` returns ``None`` to stop, or ``(item, new_state)``.
    The current state is kept in the public attribute :attr:`state`.
    """

    def __init__(
        self, initial_state: S, f: Callable[[S], Optional[tuple[A, S]]]
    ) -> None:
        self.state = initial_state
        self._f = f

    def __iter__(self) -> "Unfold[S, A]":
        return self

    def __next__(self) -> A:
        result = self._f(self.state)
        if result is None:
            raise StopIteration
        item, self.state = result
        return item

    def __repr__(self) -> str:
        return f"Unfold(state={self.state!r})"


def unfold(
    initial_state: S, f: Callable[[S], Optional[tuple[A, S]]]
) -> Unfold[S, A]:
    """Build an iterator from ``initial_state`` and a step function ``f``."""
    return Unfold(initial_state, f)


def _iterate(state: S, f: Callable[[S], S]) -> Iterator[S]:
    while True:
        following = f(state)
        yield state
        state = following


def iterate(initial_value: S, f: Callable[[S], S]) -> Iterator[S]:
    """Yield ``initial_value``, ``f(initial_value)``, ``f(f(initial_value))``, ...

    Each next value is computed before the current one is yielded.
    """
    return _iterate(initial_value, f)