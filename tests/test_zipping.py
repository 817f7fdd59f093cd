import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.zipping import (
    Both,
    Left,
    Right,
    merge_join_by,
    multiunzip,
    multizip,
    zip_eq,
    zip_longest,
)


def ordering(left, right):
    return (left > right) - (left < right)


class _Restarting:
    """An iterator that ends once and then yields again."""

    def __init__(self, first, second):
        self._parts = [iter(first), None, iter(second)]

    def __iter__(self):
        return self

    def __next__(self):
        while self._parts:
            current = self._parts[0]
            if current is None:
                self._parts.pop(0)
                raise StopIteration
            try:
                return next(current)
            except StopIteration:
                self._parts.pop(0)
        raise StopIteration


# merge_join_by


def test_merge_join_empty():
    assert list(merge_join_by([], [], ordering)) == []


def test_merge_join_left_only():
    assert list(merge_join_by([1, 2, 3], [], ordering)) == [Left(1), Left(2), Left(3)]


def test_merge_join_right_only():
    assert list(merge_join_by([], [1, 2, 3], ordering)) == [
        Right(1),
        Right(2),
        Right(3),
    ]


def test_merge_join_first_left_then_right():
    assert list(merge_join_by([1, 2, 3], [4, 5, 6], ordering)) == [
        Left(1),
        Left(2),
        Left(3),
        Right(4),
        Right(5),
        Right(6),
    ]


def test_merge_join_first_right_then_left():
    assert list(merge_join_by([4, 5, 6], [1, 2, 3], ordering)) == [
        Right(1),
        Right(2),
        Right(3),
        Left(4),
        Left(5),
        Left(6),
    ]


def test_merge_join_interspersed():
    assert list(merge_join_by([1, 3, 5], [2, 4, 6], ordering)) == [
        Left(1),
        Right(2),
        Left(3),
        Right(4),
        Left(5),
        Right(6),
    ]


def test_merge_join_overlapping():
    assert list(merge_join_by([1, 3, 4, 6], [2, 3, 4, 5], ordering)) == [
        Left(1),
        Right(2),
        Both(3, 3),
        Both(4, 4),
        Right(5),
        Left(6),
    ]


def test_merge_join_uses_custom_comparison():
    left = ["b", "d"]
    right = [("a", 1), ("b", 2)]
    result = list(merge_join_by(left, right, lambda l, r: ordering(l, r[0])))
    assert result == [Right(("a", 1)), Both("b", ("b", 2)), Left("d")]


@given(
    st.lists(st.integers(min_value=0, max_value=50)),
    st.lists(st.integers(min_value=0, max_value=50)),
)
def test_merge_join_keeps_every_item_in_order(left, right):
    left.sort()
    right.sort()
    result = list(merge_join_by(left, right, ordering))
    lefts = [
        item.value if isinstance(item, Left) else item.left
        for item in result
        if isinstance(item, (Left, Both))
    ]
    rights = [
        item.value if isinstance(item, Right) else item.right
        for item in result
        if isinstance(item, (Right, Both))
    ]
    assert lefts == left
    assert rights == right
    keys = [item.left if isinstance(item, Both) else item.value for item in result]
    assert keys == sorted(keys)
    assert all(item.left == item.right for item in result if isinstance(item, Both))


# zip_longest


def test_zip_longest_left_longer():
    assert list(zip_longest([1, 2, 3], "ab")) == [
        Both(1, "a"),
        Both(2, "b"),
        Left(3),
    ]


def test_zip_longest_right_longer():
    assert list(zip_longest([1], "abc")) == [Both(1, "a"), Right("b"), Right("c")]


def test_zip_longest_empty():
    assert list(zip_longest([], [])) == []


def test_zip_longest_is_fused():
    flaky = _Restarting([1], [9, 9])
    assert list(zip_longest(flaky, [10, 20, 30])) == [
        Both(1, 10),
        Right(20),
        Right(30),
    ]


# zip_eq


def test_zip_eq_equal_lengths():
    data = [1, 2, 3, 4, 5]
    assert list(zip_eq(data[:-1], data[1:])) == [(1, 2), (2, 3), (3, 4), (4, 5)]


def test_zip_eq_left_shorter_raises():
    with pytest.raises(ValueError):
        list(zip_eq([1, 2], [1, 2, 3]))


def test_zip_eq_right_shorter_raises():
    it = zip_eq([1, 2, 3], [1, 2])
    assert next(it) == (1, 1)
    assert next(it) == (2, 2)
    with pytest.raises(ValueError):
        next(it)


# multizip


def test_multizip_three():
    result = list(multizip(range(3), range(2), range(2)))
    assert result == [(0, 0, 0), (1, 1, 1)]


def test_multizip_with_empty_member():
    assert list(multizip(range(3), range(2), range(2), [])) == []


def test_multizip_single():
    assert list(multizip(range(2, 3))) == [(2,)]


def test_multizip_five_with_empty():
    xs = []
    assert list(multizip(range(3), range(2), iter(xs), xs, list(xs))) == []


def test_multizip_pairs_sequences():
    results = [index * 10 + value for index, value in multizip(range(10), [3, 7, 9, 6])]
    assert results == [3, 17, 29, 36]


# multiunzip


def test_multiunzip_three_columns():
    assert multiunzip([(0, 1, 2), (3, 4, 5), (6, 7, 8)]) == (
        [0, 3, 6],
        [1, 4, 7],
        [2, 5, 8],
    )


def test_multiunzip_empty_tuples():
    assert multiunzip([(), (), ()]) == ()


def test_multiunzip_twelve_columns():
    row = tuple(range(12))
    assert multiunzip([row]) == tuple([value] for value in range(12))


def test_multiunzip_example():
    a, b, c = multiunzip([(1, 2, 3), (4, 5, 6), (7, 8, 9)])
    assert a == [1, 4, 7]
    assert b == [2, 5, 8]
    assert c == [3, 6, 9]


def test_multiunzip_ragged_rows_raise():
    with pytest.raises(ValueError):
        multiunzip([(1, 2), (3,)])


@given(st.lists(st.tuples(st.integers(), st.text(), st.booleans()), min_size=1))
def test_multiunzip_inverts_multizip(rows):
    columns = multiunzip(rows)
    assert list(multizip(*columns)) == rows