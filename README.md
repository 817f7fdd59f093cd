# iterkit

Iterator adaptors and helpers for Python that go beyond `itertools`. They cover
lookahead, put-back, merge-joins, strict zipping, one-pass min/max, lazy permutations,
power sets and fixed-size tuples. It is pure Python and has no dependencies.

## Modules

### `iterkit.peeking`

- `put_back_n(iterable)` returns a `PutBackN`. Its `put_back(x)` puts items in front of
  the iterator, and the item put back most recently comes out first.
- `multipeek(iterable)` returns a `MultiPeek`. Each `peek(default=None)` looks one item
  further ahead. `next()` and `reset_peek()` move the cursor back to the next item.
- `peek_nth(iterable)` returns a `PeekNth`. `peek_nth(n, default=None)` looks `n` items
  ahead without advancing, and `peek(default=None)` is `peek_nth(0)`. A negative `n`
  raises `ValueError`.
- `PeekingNext` is the base class of the three adaptors above. Its
  `peeking_next(accept)` returns the next item if `accept` approves it. Otherwise it
  returns `None` and leaves the item in place.
- `peeking_take_while(iterator, predicate)` yields items while `predicate` holds. The
  first item that fails stays in `iterator`. It raises `TypeError` if `iterator` is
  not a `PeekingNext`.

### `iterkit.zipping`

- `merge_join_by(left, right, cmp)` merges two ascending iterables. `cmp(l, r)`
  returns a negative number, zero or a positive number. The result is a stream of
  `Left(value)`, `Right(value)` and `Both(left, right)`.
- `zip_longest(a, b)` yields `Both` while both inputs have items. After that it yields
  `Left` or `Right` for the rest of the longer input.
- `zip_eq(a, b)` yields pairs and raises `ValueError` if one input ends before the
  other.
- `multizip(*iterables)` walks any number of iterables in step and stops at the
  shortest.
- `multiunzip(rows)` splits equal-length rows into a tuple of lists, one list per
  column. Rows of different lengths raise `ValueError`. An empty input gives `()`.

### `iterkit.combinatorics`

- `minmax(iterable)`, `minmax_by_key(iterable, key)` and `minmax_by(iterable, compare)`
  find the minimum and maximum in one pass. Among equal items, the first is the minimum
  and the last is the maximum. Each returns one of the following:
  - `NoElements()`
  - `OneElement(value)`
  - `MinMax(min, max)`

  The `into_option()` method gives `None` for `NoElements` and `(min, max)` otherwise.
- `permutations(iterable, k)` returns a `Permutations` iterator over the
  `k`-permutations, as lists. It reads the source lazily. `count()` consumes the
  iterator and returns how many permutations were left. `size_hint()` returns bounds
  on that number. A negative `k` raises `ValueError`.
- `powerset(iterable)` yields every subset as a list, smallest subsets first.

### `iterkit.sources`

- `repeat_call(function)` yields `function()` forever. It is deprecated and emits a
  `DeprecationWarning`.
- `unfold(initial_state, f)` returns an `Unfold`. On each step, `f(state)` returns
  either `None` to stop or `(item, new_state)`. The current state is kept in the
  `state` attribute.
- `iterate(initial_value, f)` yields `x`, `f(x)`, `f(f(x))` and so on.

### `iterkit.adaptors`

- `pad_using(iterable, min_len, filler)` yields the items, then `filler(i)` for each
  missing position `i` until `min_len` items have been produced.
- `with_position(iterable)` yields `(position, item)` pairs. The position is a
  `Position` value: `FIRST`, `MIDDLE`, `LAST` or `ONLY`.
- `unique(iterable)` and `unique_by(iterable, key)` yield the first occurrence of each
  distinct item or key.
- `repeat_n(element, n)` yields `element` exactly `n` times.
- `tee(iterable)` returns two `Tee` iterators that each yield every item of the source.
- `rciter(iterable)` returns an `RcIter`. Copies made with `copy.copy` advance the same
  underlying iterator. Re-entering it from inside its own `next` raises `RuntimeError`.
- `process_results(iterable, processor)` works with items that may be exception
  instances. It passes `processor` a `ProcessResults` iterator of the plain values,
  which stops at the first exception and keeps it in `error`. After `processor`
  returns, `process_results` raises that exception if there was one. Otherwise it
  returns the processor's result.

### `iterkit.tuples`

- `tuples(iterable, n)` returns a `Tuples` iterator of consecutive `n`-tuples. After
  it ends, `into_buffer()` iterates over the items left over that did not fill a
  tuple.
- `tuple_windows(iterable, n)` yields every contiguous window of `n` items.
- `circular_tuple_windows(iterable, n)` yields one window starting at each item. A
  window that runs past the end wraps round to the first items.
- In all three, `n` below 1 raises `ValueError`.

### `iterkit.sizehint`

Arithmetic on `(lower, upper)` length bounds. Lower bounds saturate at `USIZE_MAX`, and
an upper bound is `None` when it is unknown. The functions are `add`, `add_scalar`,
`sub_scalar`, `mul`, `mul_scalar`, `pow_scalar_base`, `hint_max` and `hint_min`.

## Examples

```python
from iterkit.zipping import merge_join_by

pairs = list(merge_join_by([1, 3, 4, 6], [2, 3, 4, 5],
                           lambda a, b: (a > b) - (a < b)))
# [Left(value=1), Right(value=2), Both(left=3, right=3),
#  Both(left=4, right=4), Right(value=5), Left(value=6)]
```

```python
from iterkit.peeking import peek_nth

it = peek_nth([1, 2, 3])
it.peek_nth(1)   # 2
next(it)         # 1
```

```python
from iterkit.combinatorics import minmax

minmax([3, 1, 4, 1, 5]).into_option()   # (1, 5)
```

```python
from iterkit.combinatorics import powerset

list(powerset(range(3)))
# [[], [0], [1], [2], [0, 1], [0, 2], [1, 2], [0, 1, 2]]
```

```python
from iterkit.tuples import tuple_windows

list(tuple_windows(range(5), 3))
# [(0, 1, 2), (1, 2, 3), (2, 3, 4)]
```

## What it does not do

iterkit is a library only. It has no command-line tool. It does not add methods to
Python's built-in iterators: every adaptor is a function that you import from its
module.

## Tests

The tests are in `tests/` and use pytest and hypothesis. Both are listed in the `test`
extra.