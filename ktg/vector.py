"""A dynamic array with explicit capacity and doubling growth."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class Vector:
    """Sequence container that keeps track of reserved capacity.

    Positions are non-negative integer indices. ``len(v)`` is the number of
    stored elements and :meth:`capacity` the number of reserved slots, which
    is always at least the size.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        self._capacity = len(self._items)

    @classmethod
    def filled(cls, count: int, value: Any = None) -> "Vector":
        """Return a vector holding ``count`` copies of ``value``."""
        if count < 0:
            raise ValueError("count must not be negative")
        return cls([value] * count)

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"

    # -- internals ---------------------------------------------------------

    def _reallocate(self, new_capacity: int) -> None:
        self._capacity = new_capacity

    def _grow_for_one(self) -> None:
        if len(self._items) >= self._capacity:
            self._reallocate(1 if self._capacity == 0 else self._capacity * 2)

    def _check_pos(self, pos: int, message: str) -> None:
        if pos < 0 or pos >= len(self._items):
            raise IndexError(message)

    # -- element access ----------------------------------------------------

    def at(self, pos: int) -> Any:
        """Return the element at ``pos``, raising IndexError when out of range."""
        self._check_pos(pos, "vector::at")
        return self._items[pos]

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("vector::front on empty vector")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("vector::back on empty vector")
        return self._items[-1]

    def __getitem__(self, pos: int) -> Any:
        self._check_pos(pos, "vector index out of range")
        return self._items[pos]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._check_pos(pos, "vector index out of range")
        self._items[pos] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __copy__(self) -> "Vector":
        return Vector(self._items)

    # -- capacity ----------------------------------------------------------

    def empty(self) -> bool:
        """Return True when no elements are stored."""
        return not self._items

    def capacity(self) -> int:
        """Return the number of reserved slots."""
        return self._capacity

    def reserve(self, new_capacity: int) -> None:
        """Raise the capacity to exactly ``new_capacity`` if it is larger."""
        if new_capacity < 0:
            raise ValueError("capacity must not be negative")
        if new_capacity > self._capacity:
            self._reallocate(new_capacity)

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current size."""
        if len(self._items) < self._capacity:
            self._reallocate(len(self._items))

    # -- modifiers ---------------------------------------------------------

    def clear(self) -> None:
        """Remove all elements, keeping the capacity."""
        self._items.clear()

    def insert(self, pos: int, value: Any) -> int:
        """Insert ``value`` before ``pos`` and return the index of the new element."""
        if pos < 0 or pos > len(self._items):
            raise IndexError("vector::insert position out of range")
        self._grow_for_one()
        self._items.insert(pos, value)
        return pos

    def erase(self, first: int, last: Optional[int] = None) -> int:
        """Remove the element at ``first``, or the range ``[first, last)``.

        Returns ``first``, the index of the element that followed the removed ones.
        """
        size = len(self._items)
        if last is None:
            if first < 0 or first >= size:
                raise IndexError("vector::erase position out of range")
            del self._items[first]
            return first
        if first < 0 or last > size or first > last:
            raise IndexError("vector::erase range out of range")
        del self._items[first:last]
        return first

    def push_back(self, value: Any) -> None:
        """Append ``value``, doubling the capacity when it is full."""
        self._grow_for_one()
        self._items.append(value)

    def pop_back(self) -> None:
        """Remove the last element; does nothing when empty."""
        if self._items:
            self._items.pop()

    def resize(self, new_size: int, value: Any = None) -> None:
        """Shrink to ``new_size`` elements or extend with copies of ``value``."""
        if new_size < 0:
            raise ValueError("size must not be negative")
        size = len(self._items)
        if new_size > size:
            if new_size > self._capacity:
                self._reallocate(new_size)
            self._items.extend([value] * (new_size - size))
        elif new_size < size:
            del self._items[new_size:]

    def swap(self, other: "Vector") -> None:
        """Exchange contents and capacity with ``other``."""
        if other is self:
            return
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity