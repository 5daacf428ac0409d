"""
Immutable singly linked list (a persistent stack).

Both halves of a circular cursor are kept in this form: prepending,
reading the head and dropping the head are O(1) and never copy, so
a cursor and every cursor derived from it can share their tails.
"""
from itertools import islice
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class ConsList(Generic[T]):
    __slots__ = ("_head", "_tail", "_size")

    EMPTY: "ConsList"

    def __init__(self, head=None, tail: Optional["ConsList[T]"] = None):
        self._head = head
        self._tail = tail
        self._size = 0 if tail is None else len(tail) + 1

    @staticmethod
    def from_iterable(items: Iterable[T]) -> "ConsList[T]":
        """
        Builds a list which iterates in the same order as `items`.
        :param items: source values
        :return: new cons list
        """
        res = ConsList.EMPTY
        for item in reversed(list(items)):
            res = res.cons(item)
        return res

    def cons(self, value: T) -> "ConsList[T]":
        return ConsList(value, self)

    @property
    def head(self) -> T:
        if not self._size:
            raise IndexError("head of empty list")
        return self._head

    @property
    def tail(self) -> "ConsList[T]":
        if not self._size:
            raise IndexError("tail of empty list")
        return self._tail

    def at(self, index: int) -> Optional[T]:
        """
        Walks `index` nodes from the head.
        :return: value at `index`, or None if index is out of range.
        """
        if index < 0 or index >= self._size:
            return None
        node = self
        for _ in range(index):
            node = node._tail
        return node._head

    def reversed(self) -> "ConsList[T]":
        res = ConsList.EMPTY
        for v in self:
            res = res.cons(v)
        return res

    def drop_last(self) -> "ConsList[T]":
        if self._size <= 1:
            return ConsList.EMPTY
        return ConsList.from_iterable(islice(self, self._size - 1))

    def replace_last(self, value: T) -> "ConsList[T]":
        if not self._size:
            return self
        return ConsList.from_iterable([*islice(self, self._size - 1), value])

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        node = self
        while node._size:
            yield node._head
            node = node._tail

    def __eq__(self, other: Any):
        if not isinstance(other, ConsList):
            return NotImplemented
        if self._size != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __repr__(self):
        return f"ConsList({list(self)!r})"


ConsList.EMPTY = ConsList()
