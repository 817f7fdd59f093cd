"""Iterators that can look ahead, or take items back, without losing them."""

from __future__ import annotations

from abc import abstractmethod
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from operator import length_hint
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

_NOTHING: Any = object()

__all__ = [
    "PeekingNext",
    "PutBackN",
    "MultiPeek",
    "PeekNth",
    "put_back_n",
    "multipeek",
    "peek_nth",
    "peeking_take_while",
]


class _Fuse(Generic[T]):
    """Pulls from an iterator and never touches it again once exhausted."""

    __slots__ = ("_it",)

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it: Optional[Iterator[T]] = iter(iterable)

    def pull(self) -> Any:
        if self._it is None:
            return _NOTHING
        try:
            return next(self._it)
        except StopIteration:
            self._it = None
            return _NOTHING

    def hint(self) -> int:
        return 0 if self._it is None else length_hint(self._it)


class PeekingNext(Iterator, Generic[T]):
    """An iterator that can hand out its next item only if it is accepted."""

    @abstractmethod
    def peeking_next(self, accept: Callable[[T], bool]) -> Optional[T]:
        """Return the next item if ``accept`` approves it, else ``None``.

        A rejected item stays in place.
        """

    def _next_if(self, accept: Callable[[T], bool]) -> Any:
        item = self.peeking_next(accept)
        return _NOTHING if item is None else item


class _Lookahead(PeekingNext[T]):
    """Base for adaptors that track exhaustion exactly."""

    def __iter__(self) -> "_Lookahead[T]":
        return self

    @abstractmethod
    def _next_if(self, accept: Callable[[T], bool]) -> Any:
        ...


class PutBackN(_Lookahead[T]):
    """An iterator in front of which any number of items can be put back."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._top: list[T] = []
        self._iter = iter(iterable)

    def put_back(self, x: T) -> None:
        """Put ``x`` in front; the most recently put back item comes first."""
        self._top.append(x)

    def __next__(self) -> T:
        if self._top:
            return self._top.pop()
        return next(self._iter)

    def __length_hint__(self) -> int:
        return len(self._top) + length_hint(self._iter)

    def _next_if(self, accept: Callable[[T], bool]) -> Any:
        try:
            item = next(self)
        except StopIteration:
            return _NOTHING
        if not accept(item):
            self.put_back(item)
            return _NOTHING
        return item

    def peeking_next(self, accept: Callable[[T], bool]) -> Optional[T]:
        """Return the next item if ``accept`` approves it, else ``None``."""
        item = self._next_if(accept)
        return None if item is _NOTHING else item


class MultiPeek(_Lookahead[T]):
    """An iterator whose ``peek`` moves a cursor further ahead on each call.

    The cursor is reset by ``next`` and by :meth:`reset_peek`.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter: _Fuse[T] = _Fuse(iterable)
        self._buf: deque[T] = deque()
        self._index = 0

    def reset_peek(self) -> None:
        """Move the peeking cursor back to the next item."""
        self._index = 0

    def _peek(self) -> Any:
        if self._index < len(self._buf):
            item = self._buf[self._index]
        else:
            item = self._iter.pull()
            if item is _NOTHING:
                return _NOTHING
            self._buf.append(item)
        self._index += 1
        return item

    def peek(self, default: Any = None) -> Any:
        """Return the item under the cursor and advance the cursor."""
        item = self._peek()
        return default if item is _NOTHING else item

    def _take(self) -> Any:
        self._index = 0
        if self._buf:
            return self._buf.popleft()
        return self._iter.pull()

    def __next__(self) -> T:
        item = self._take()
        if item is _NOTHING:
            raise StopIteration
        return item

    def __length_hint__(self) -> int:
        return len(self._buf) + self._iter.hint()

    def _next_if(self, accept: Callable[[T], bool]) -> Any:
        if not self._buf:
            item = self._peek()
            if item is not _NOTHING and not accept(item):
                return _NOTHING
        elif not accept(self._buf[0]):
            return _NOTHING
        return self._take()

    def peeking_next(self, accept: Callable[[T], bool]) -> Optional[T]:
        """Return the next item if ``accept`` approves it, else ``None``."""
        item = self._next_if(accept)
        return None if item is _NOTHING else item


class PeekNth(_Lookahead[T]):
    """An iterator that can look any number of items ahead.

    Repeated peeks return the same item until ``next`` is called.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter: _Fuse[T] = _Fuse(iterable)
        self._buf: deque[T] = deque()

    def _peek_nth(self, n: int) -> Any:
        if n < 0:
            raise ValueError(f"peek position must not be negative, got {n}")
        while len(self._buf) <= n:
            item = self._iter.pull()
            if item is _NOTHING:
                return _NOTHING
            self._buf.append(item)
        return self._buf[n]

    def peek_nth(self, n: int, default: Any = None) -> Any:
        """Return the item ``n`` places ahead without advancing."""
        item = self._peek_nth(n)
        return default if item is _NOTHING else item

    def peek(self, default: Any = None) -> Any:
        """Return the next item without advancing."""
        return self.peek_nth(0, default)

    def _take(self) -> Any:
        if self._buf:
            return self._buf.popleft()
        return self._iter.pull()

    def __next__(self) -> T:
        item = self._take()
        if item is _NOTHING:
            raise StopIteration
        return item

    def __length_hint__(self) -> int:
        return len(self._buf) + self._iter.hint()

    def _next_if(self, accept: Callable[[T], bool]) -> Any:
        item = self._peek_nth(0)
        if item is _NOTHING or not accept(item):
            return _NOTHING
        return self._take()

    def peeking_next(self, accept: Callable[[T], bool]) -> Optional[T]:
        """Return the next item if ``accept`` approves it, else ``None``."""
        item = self._next_if(accept)
        return None if item is _NOTHING else item


def put_back_n(iterable: Iterable[T]) -> PutBackN[T]:
    """Wrap ``iterable`` so that items can be put back in front of it."""
    return PutBackN(iterable)


def multipeek(iterable: Iterable[T]) -> MultiPeek[T]:
    """Wrap ``iterable`` so that several items can be peeked at in turn."""
    return MultiPeek(iterable)


def peek_nth(iterable: Iterable[T]) -> PeekNth[T]:
    """Wrap ``iterable`` so that any item ahead can be peeked at."""
    return PeekNth(iterable)


def _take_while(iterator: PeekingNext[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    while True:
        item = iterator._next_if(predicate)
        if item is _NOTHING:
            return
        yield item


def peeking_take_while(
    iterator: PeekingNext[T], predicate: Callable[[T], bool]
) -> Iterator[T]:
    """Yield items while ``predicate`` holds, leaving the first failing item
    in ``iterator``."""
    if not isinstance(iterator, PeekingNext):
        raise TypeError(
            f"peeking_take_while needs a PeekingNext iterator, got {type(iterator).__name__}"
        )
    return _take_while(iterator, predicate)