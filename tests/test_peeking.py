from operator import length_hint

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.peeking import (
    MultiPeek,
    PeekingNext,
    PeekNth,
    PutBackN,
    multipeek,
    peek_nth,
    peeking_take_while,
    put_back_n,
)


class _Counter(PeekingNext):
    def __init__(self, stop):
        self.n = 0
        self.stop = stop

    def __next__(self):
        if self.n >= self.stop:
            raise StopIteration
        value = self.n
        self.n += 1
        return value

    def peeking_next(self, accept):
        if self.n < self.stop and accept(self.n):
            return next(self)
        return None


def test_put_back_n():
    xs = [0, 1, 1, 1, 2, 1, 3, 3]
    pb = put_back_n(xs)
    next(pb)
    next(pb)
    pb.put_back(1)
    pb.put_back(0)
    assert list(pb) == xs


def test_put_back_n_doc_example():
    it = put_back_n(range(1, 5))
    next(it)
    it.put_back(1)
    it.put_back(0)
    assert list(it) == list(range(5))


def test_put_back_n_peeking_next():
    pb = put_back_n([1, 2])
    assert pb.peeking_next(lambda x: x > 1) is None
    assert pb.peeking_next(lambda x: x == 1) == 1
    assert list(pb) == [2]
    assert pb.peeking_next(lambda x: True) is None


def test_put_back_n_length_hint():
    pb = put_back_n([1, 2, 3])
    pb.put_back(0)
    assert length_hint(pb) == 4


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_put_back_n_round_trip(prefix, rest):
    pb = put_back_n(rest)
    for x in reversed(prefix):
        pb.put_back(x)
    assert list(pb) == prefix + rest


def test_multipeek():
    nums = [1, 2, 3, 4, 5]
    assert list(multipeek(nums)) == nums

    mp = multipeek(nums)
    assert mp.peek() == 1
    assert next(mp) == 1
    assert mp.peek() == 2
    assert mp.peek() == 3
    assert next(mp) == 2
    assert mp.peek() == 3
    assert mp.peek() == 4
    assert mp.peek() == 5
    assert mp.peek() is None
    assert next(mp) == 3
    assert next(mp) == 4
    assert mp.peek() == 5
    assert mp.peek() is None
    assert next(mp) == 5
    assert next(mp, None) is None
    assert mp.peek() is None


def test_multipeek_reset():
    mp = multipeek([1, 2, 3, 4])
    assert mp.peek() == 1
    assert next(mp) == 1
    assert mp.peek() == 2
    assert mp.peek() == 3
    mp.reset_peek()
    assert mp.peek() == 2
    assert next(mp) == 2


def test_multipeek_peeking_next():
    mp = multipeek([1, 2, 3, 4, 5, 6, 7])
    assert mp.peeking_next(lambda x: x != 0) == 1
    assert next(mp) == 2
    assert mp.peek() == 3
    assert mp.peek() == 4
    assert mp.peeking_next(lambda x: x == 3) == 3
    assert mp.peek() == 4
    assert mp.peeking_next(lambda x: x != 4) is None
    assert mp.peeking_next(lambda x: x == 4) == 4
    assert mp.peek() == 5
    assert mp.peek() == 6
    assert mp.peeking_next(lambda x: x != 5) is None
    assert mp.peek() == 7
    assert mp.peeking_next(lambda x: x == 5) == 5
    assert mp.peeking_next(lambda x: x == 6) == 6
    assert mp.peek() == 7
    assert mp.peek() is None
    assert next(mp) == 7
    assert mp.peek() is None


def test_multipeek_peek_default_and_length_hint():
    mp = multipeek([1, 2, 3])
    mp.peek()
    mp.peek()
    assert length_hint(mp) == 3
    assert multipeek([]).peek("none") == "none"


def test_peek_nth():
    nums = [1, 2, 3, 4, 5]
    assert list(peek_nth(nums)) == nums

    it = peek_nth(nums)
    assert it.peek_nth(0) == 1
    assert it.peek_nth(0) == 1
    assert next(it) == 1

    assert it.peek_nth(0) == 2
    assert it.peek_nth(1) == 3
    assert next(it) == 2

    assert it.peek_nth(0) == 3
    assert it.peek_nth(1) == 4
    assert it.peek_nth(2) == 5
    assert it.peek_nth(3) is None

    assert next(it) == 3
    assert next(it) == 4

    assert it.peek_nth(0) == 5
    assert it.peek_nth(1) is None
    assert next(it) == 5
    assert next(it, None) is None

    assert it.peek_nth(0) is None
    assert it.peek_nth(1) is None


def test_peek_nth_doc_example():
    it = peek_nth([1, 2, 3])
    assert it.peek_nth(0) == 1
    assert next(it) == 1
    assert it.peek_nth(0) == 2
    assert it.peek_nth(1) == 3
    assert next(it) == 2
    assert it.peek_nth(1) is None


def test_peek_nth_peeking_next():
    it = peek_nth([1, 2, 3, 4, 5, 6, 7])

    assert it.peeking_next(lambda x: x != 0) == 1
    assert next(it) == 2

    assert it.peek_nth(0) == 3
    assert it.peek_nth(1) == 4
    assert it.peeking_next(lambda x: x == 3) == 3
    assert it.peek() == 4

    assert it.peeking_next(lambda x: x != 4) is None
    assert it.peeking_next(lambda x: x == 4) == 4
    assert it.peek_nth(0) == 5
    assert it.peek_nth(1) == 6

    assert it.peeking_next(lambda x: x != 5) is None
    assert it.peek() == 5

    assert it.peeking_next(lambda x: x == 5) == 5
    assert it.peeking_next(lambda x: x == 6) == 6
    assert it.peek_nth(0) == 7
    assert it.peek_nth(1) is None
    assert next(it) == 7
    assert it.peek() is None


def test_peek_nth_negative_position():
    with pytest.raises(ValueError):
        peek_nth([1]).peek_nth(-1)


def test_peek_nth_default_and_length_hint():
    it = peek_nth([1, 2, 3])
    assert it.peek_nth(5, "end") == "end"
    assert length_hint(it) == 3


def test_peeking_take_while_leaves_rejected_item():
    pb = put_back_n([1, 2, 3, 4, 1])
    assert list(peeking_take_while(pb, lambda x: x < 3)) == [1, 2]
    assert next(pb) == 3

    mp = multipeek([1, 2, 3, 4])
    assert list(peeking_take_while(mp, lambda x: x < 3)) == [1, 2]
    assert list(mp) == [3, 4]

    pn = peek_nth([5, 6, 7])
    assert list(peeking_take_while(pn, lambda x: x != 6)) == [5]
    assert list(pn) == [6, 7]


def test_peeking_take_while_handles_none_items():
    pn = peek_nth([None, None, 1])
    assert list(peeking_take_while(pn, lambda x: x is None)) == [None, None]
    assert next(pn) == 1


def test_peeking_take_while_custom_peeking_next():
    counter = _Counter(10)
    assert list(peeking_take_while(counter, lambda x: x < 3)) == [0, 1, 2]
    assert next(counter) == 3


def test_peeking_take_while_requires_peeking_next():
    with pytest.raises(TypeError):
        peeking_take_while(iter([1, 2]), lambda x: True)


def test_peeking_next_is_abstract():
    with pytest.raises(TypeError):
        PeekingNext()


@given(st.lists(st.integers()), st.integers())
def test_take_while_then_rest_is_whole(xs, bound):
    for wrapper in (PutBackN, MultiPeek, PeekNth):
        it = wrapper(xs)
        taken = list(peeking_take_while(it, lambda x: x < bound))
        assert taken + list(it) == xs
        assert all(x < bound for x in taken)