import pytest

from circulist.cons import ConsList


def test_from_iterable():
    lst = ConsList.from_iterable([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3
    assert lst.head == 1
    assert list(lst.tail) == [2, 3]


def test_cons_shares_tail():
    base = ConsList.from_iterable([2, 3])
    a = base.cons(1)
    b = base.cons(0)
    assert a.tail is base
    assert b.tail is base
    assert list(base) == [2, 3]


def test_empty():
    assert len(ConsList.EMPTY) == 0
    assert not ConsList.EMPTY
    assert ConsList.from_iterable([]) is ConsList.EMPTY
    with pytest.raises(IndexError):
        ConsList.EMPTY.head
    with pytest.raises(IndexError):
        ConsList.EMPTY.tail


def test_at():
    lst = ConsList.from_iterable("abc")
    assert lst.at(0) == "a"
    assert lst.at(2) == "c"
    assert lst.at(3) is None
    assert lst.at(-1) is None


def test_reversed():
    assert list(ConsList.from_iterable([1, 2, 3]).reversed()) == [3, 2, 1]
    assert ConsList.EMPTY.reversed() is ConsList.EMPTY


def test_drop_and_replace_last():
    lst = ConsList.from_iterable([1, 2, 3])
    assert list(lst.drop_last()) == [1, 2]
    assert list(lst.replace_last(9)) == [1, 2, 9]
    assert ConsList.from_iterable([1]).drop_last() is ConsList.EMPTY
    assert ConsList.EMPTY.drop_last() is ConsList.EMPTY
    assert ConsList.EMPTY.replace_last(1) is ConsList.EMPTY


def test_equality():
    assert ConsList.from_iterable([1, 2]) == ConsList.from_iterable([1, 2])
    assert ConsList.from_iterable([1, 2]) != ConsList.from_iterable([2, 1])
    assert ConsList.from_iterable([1]) != [1]
    assert repr(ConsList.from_iterable([1])) == "ConsList([1])"
