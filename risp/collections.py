"""Persistent collections used by the interpreter."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")

# A node is either None (the empty list) or a (value, next_node) pair.
_Node = Optional[Tuple[object, object]]


class CollectionError(IndexError):
    """Raised when an index lies outside a collection."""

    def __init__(self, value: int) -> None:
        super().__init__(f"index out of bounds: {value}")
        self.value = value


class RispList(Generic[T]):
    """An immutable singly linked list whose tails are shared between lists."""

    __slots__ = ("_head", "_length")

    def __init__(self, items: Iterable[T] = ()) -> None:
        head: _Node = None
        length = 0
        for item in reversed(list(items)):
            head = (item, head)
            length += 1
        self._head = head
        self._length = length

    @classmethod
    def _from_node(cls, head: _Node, length: int) -> "RispList[T]":
        result = cls.__new__(cls)
        result._head = head
        result._length = length
        return result

    @classmethod
    def empty(cls) -> "RispList[T]":
        """Return the empty list."""
        return cls._from_node(None, 0)

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> "RispList[T]":
        """Build a list holding ``items`` in their order."""
        return cls(items)

    def cons(self, head: T) -> "RispList[T]":
        """Return a new list with ``head`` in front of this one."""
        return self._from_node((head, self._head), self._length + 1)

    def first(self) -> Optional[T]:
        """Return the first element, or None when the list is empty."""
        if self._head is None:
            return None
        return self._head[0]  # type: ignore[return-value]

    def last(self) -> Optional[T]:
        """Return the last element, or None when the list is empty."""
        result: Optional[T] = None
        for result in self:
            pass
        return result

    def rest(self) -> "RispList[T]":
        """Return the list without its first element; empty stays empty."""
        if self._head is None:
            return self.empty()
        return self._from_node(self._head[1], self._length - 1)  # type: ignore[arg-type]

    def is_empty(self) -> bool:
        return self._length == 0

    def nth(self, idx: int) -> T:
        """Return the element at ``idx``; raise CollectionError when out of range."""
        if idx < 0 or idx >= self._length:
            raise CollectionError(idx)
        for position, value in enumerate(self):
            if position == idx:
                return value
        raise CollectionError(idx)

    def get(self, idx: int) -> T:
        """Same as :meth:`nth`."""
        return self.nth(idx)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            value, node = node
            yield value  # type: ignore[misc]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RispList):
            return NotImplemented
        if self._length != other._length:
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "(" + " ".join(str(v) for v in self) + ")"

    def __repr__(self) -> str:
        return "(" + " ".join(repr(v) for v in self) + ")"