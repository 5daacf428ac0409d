"""
Circular sequence with a movable cursor.

The sequence is kept as a zipper of two immutable halves:
 * `visited` - items the cursor already passed, nearest first;
 * `remaining` - the cursor item followed by the items ahead of it.

Thus neighbours in both directions are always heads of the halves,
and single steps are O(1) (amortized: crossing the end of the sequence
reverses one of the halves). All operations return a new cursor,
the original one is never changed.

Example:
```
c = init([1, 2, 3, 4, 5])
c.value()                      # 1
c.next().value()               # 2
c.prev().prev().value()        # 4
c.next(3).remove().to_list()   # [1, 2, 3, 5]
```
"""
import itertools
import logging
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from circulist.cons import ConsList
from circulist.settings import CursorSettings, get_settings

LOG = logging.getLogger(__name__)

T = TypeVar("T")


class CircularCursor(Generic[T]):
    __slots__ = ("_visited", "_remaining", "_settings")

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        settings: Optional[CursorSettings] = None,
    ):
        self._visited: ConsList[T] = ConsList.EMPTY
        self._remaining: ConsList[T] = ConsList.from_iterable(
            () if items is None else items
        )
        self._settings = settings

    def _derive(self, visited: ConsList[T], remaining: ConsList[T]) -> "CircularCursor[T]":
        res = CircularCursor.__new__(CircularCursor)
        res._visited = visited
        res._remaining = remaining
        res._settings = self._settings
        return res

    @property
    def visited(self) -> ConsList[T]:
        return self._visited

    @property
    def remaining(self) -> ConsList[T]:
        return self._remaining

    @property
    def settings(self) -> CursorSettings:
        return self._settings if self._settings is not None else get_settings()

    # Stepping

    def _step_forward(self) -> "CircularCursor[T]":
        visited, remaining = self._visited, self._remaining
        if not remaining:
            if not visited:
                return self
            # Crossed the end, start over from the first item.
            forward = visited.reversed()
            LOG.debug(f"Wrapping forward over {len(forward)} items")
            return self._derive(ConsList.EMPTY.cons(forward.head), forward.tail)
        return self._derive(visited.cons(remaining.head), remaining.tail)

    def _step_backward(self) -> "CircularCursor[T]":
        visited, remaining = self._visited, self._remaining
        if not visited:
            if not remaining:
                return self
            LOG.debug(f"Wrapping backward over {len(remaining)} items")
            visited, remaining = remaining.reversed(), ConsList.EMPTY
        return self._derive(visited.tail, remaining.cons(visited.head))

    def _jump_to(self, target_offset: int) -> "CircularCursor[T]":
        items = self.to_list()
        LOG.debug(f"Rebuilding cursor of {len(items)} items at offset {target_offset}")
        return self._derive(
            ConsList.from_iterable(reversed(items[:target_offset])),
            ConsList.from_iterable(items[target_offset:]),
        )

    def _use_fast_stepping(self, n: int) -> bool:
        return self.settings.fast_stepping and n > len(self)

    def next(self, n: int = 1) -> "CircularCursor[T]":
        """
        Moves cursor `n` items forward, wrapping around the end.
        Negative `n` moves backward.
        """
        if n < 0:
            return self.prev(-n)
        if n == 0 or self.empty():
            return self

        if self._use_fast_stepping(n):
            length, offset = len(self), self.offset()
            # Once past the end, forward offsets cycle through 1..length.
            return self._jump_to((n - (length - offset) - 1) % length + 1)

        res = self
        for _ in range(n):
            res = res._step_forward()
        return res

    def prev(self, n: int = 1) -> "CircularCursor[T]":
        """
        Moves cursor `n` items backward, wrapping around the start.
        Negative `n` moves forward.
        """
        if n < 0:
            return self.next(-n)
        if n == 0 or self.empty():
            return self

        if self._use_fast_stepping(n):
            length, offset = len(self), self.offset()
            # Once past the start, backward offsets cycle through 0..length-1.
            return self._jump_to(length - 1 - (n - offset - 1) % length)

        res = self
        for _ in range(n):
            res = res._step_backward()
        return res

    # Lookup

    def value(self, offset: int = 0) -> Optional[T]:
        """
        Returns item located `offset` steps away from the cursor
        without moving it. Offsets wrap around in both directions,
        so `c.value(k) == c.next(k).value()` for any k.
        :param offset: relative position, may be negative or exceed length.
        :return: the item, or None if the cursor is empty.
        """
        length = len(self)
        if not length:
            return None

        n_visited = len(self._visited)
        offset = (offset + n_visited) % length - n_visited

        if offset < 0:
            return self._visited.at(-offset - 1)
        return self._remaining.at(offset)

    def _ring(self) -> List[T]:
        """Items in forward order starting from the cursor."""
        return [*self._remaining, *self._visited.reversed()]

    def _slice(self, s: slice) -> List[T]:
        """
        We treat the ring as infinite concatenation of items starting from
        the cursor, e.g. `[1,2] => [1,2,1,2,1,2...]`, and apply the slice
        to that sequence.

        Each occurrence of the items is a slot. If `start` and `stop` fall
        into same slot we just slice the ring, otherwise we slice
        `head + body + tail`, where
           * `head = ring[start mod n:]`
           * `tail = ring[:stop mod n]`
           * `body = ring * (stop_slot - start_slot - 1)`
        """
        n = len(self)
        start = 0 if s.start is None else s.start
        stop = n if s.stop is None else s.stop
        step = 1 if s.step is None else s.step

        if step <= 0:
            raise ValueError("Only positive slice steps are supported")
        if stop < start:
            raise ValueError("Slice stop should not precede its start")
        if not n:
            return []

        ring = self._ring()

        head_slot = start // n
        tail_slot = stop // n

        start_mod = start % n
        stop_mod = stop % n

        if head_slot == tail_slot:
            return ring[start_mod:stop_mod:step]

        head = ring[start_mod:]
        tail = ring[:stop_mod]

        num_inners = tail_slot - head_slot - 1
        body = itertools.chain.from_iterable(itertools.repeat(ring, num_inners))

        return list(itertools.islice(itertools.chain(head, body, tail), None, None, step))

    def __getitem__(self, offset_or_slice: Union[int, slice]):
        """
        `c[k]` is `c.value(k)`.
        `c[a:b:step]` lists items at relative offsets a, a+step, ... below b.
        """
        if isinstance(offset_or_slice, slice):
            return self._slice(offset_or_slice)
        if isinstance(offset_or_slice, int):
            return self.value(offset_or_slice)
        raise TypeError(
            f"Cursor indices must be integers or slices, not {type(offset_or_slice).__name__}"
        )

    # State

    def __len__(self):
        return len(self._visited) + len(self._remaining)

    def empty(self) -> bool:
        return not self._visited and not self._remaining

    def offset(self) -> int:
        """
        Number of forward steps since `init` or `reset`,
        derived from the number of visited items.
        """
        return len(self._visited)

    def done(self) -> bool:
        """True when a forward sweep has reached the starting point again."""
        return not self._remaining

    def reset(self) -> "CircularCursor[T]":
        """
        Moves cursor back to the first item, so offset drops to 0.
        Note, it rebuilds whole structure, which is O(length).
        """
        LOG.debug(f"Resetting cursor of {len(self)} items at offset {self.offset()}")
        return CircularCursor(self.to_list(), self._settings)

    # Mutation

    def remove(self) -> "CircularCursor[T]":
        """
        Removes item at the cursor, cursor moves to the next item.
        """
        if not self._remaining:
            if not self._visited:
                return self
            # Cursor has wrapped, it points at the first item,
            # which is the farthest visited one.
            return self._derive(self._visited.drop_last(), ConsList.EMPTY)
        return self._derive(self._visited, self._remaining.tail)

    def insert(self, value: T) -> "CircularCursor[T]":
        """
        Inserts item right before the cursor.
        Cursor keeps pointing at the same item.
        """
        return self._derive(self._visited.cons(value), self._remaining)

    def replace(self, value: T) -> "CircularCursor[T]":
        if not self._remaining:
            if not self._visited:
                return self
            return self._derive(self._visited.replace_last(value), ConsList.EMPTY)
        return self._derive(self._visited, self._remaining.tail.cons(value))

    def to_list(self) -> List[T]:
        """Items in their original order, regardless of cursor position."""
        return [*self._visited.reversed(), *self._remaining]

    # Protocols

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __bool__(self):
        return not self.empty()

    def _key(self):
        length = len(self)
        return self.to_list(), (self.offset() % length if length else 0)

    def __eq__(self, other: Any):
        """
        Cursors are equal when they hold same items in same order,
        and point at same position. Position is compared modulo length,
        so a cursor which made a full lap equals the one it started from.
        """
        if not isinstance(other, CircularCursor):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        items, position = self._key()
        return hash((tuple(items), position))

    def __repr__(self):
        return (
            f"CircularCursor(visited={list(self._visited)!r}, "
            f"remaining={list(self._remaining)!r})"
        )


def init(
    items: Optional[Iterable[T]] = None,
    settings: Optional[CursorSettings] = None,
) -> CircularCursor[T]:
    """
    Creates circular cursor pointing at the first of given items.
    E.g. init([1, 2, 3]).prev().value() is 3
    :param items: source items, they are copied, order is preserved.
    :param settings: optional settings, process-wide defaults are used otherwise.
    :return: new cursor
    """
    return CircularCursor(items, settings)
