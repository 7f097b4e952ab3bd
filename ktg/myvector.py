"""A growable array that tracks its own capacity with doubling growth."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, Optional


class MyVector:
    """Sequence container with explicit capacity management.

    Positions are plain integer indices; ``len(v)`` is the number of stored
    elements and :meth:`capacity` the number of slots currently reserved.
    Negative indices are rejected rather than counted from the end.
    """

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._capacity = 0

    def __repr__(self) -> str:
        return f"MyVector({self._items!r}, capacity={self._capacity})"

    # -- capacity handling -------------------------------------------------

    def _grow_to(self, needed: int) -> None:
        """Double the capacity (starting from 1) until it holds ``needed``."""
        while self._capacity < needed:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise IndexError("out of range")

    # -- element access ----------------------------------------------------

    def at(self, index: int) -> Any:
        """Return the element at ``index``, raising IndexError when out of range."""
        self._check_index(index)
        return self._items[index]

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("size element is zero")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("size element is zero")
        return self._items[-1]

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self._items))

    # -- modifiers ---------------------------------------------------------

    def push_back(self, value: Any) -> None:
        """Append ``value``, doubling the capacity when it is full."""
        if len(self._items) >= self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2
        self._items.append(value)

    def pop_back(self) -> None:
        """Remove the last element; does nothing when empty."""
        if self._items:
            self._items.pop()

    def assign(self, n: int, value: Any) -> None:
        """Replace the contents with ``n`` copies of ``value``."""
        if n < 0:
            raise ValueError("count must not be negative")
        if self._capacity < n:
            self._capacity = 0
            self._grow_to(n)
        self._items = [value] * n

    def swap(self, other: "MyVector") -> None:
        """Exchange contents and capacity with ``other``."""
        if other is self:
            return
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    def empty(self) -> bool:
        """Return True when no elements are stored."""
        return not self._items

    def capacity(self) -> int:
        """Return the number of reserved slots."""
        return self._capacity

    def resize(self, n: int, value: Any = None) -> None:
        """Shrink to ``n`` elements or extend with copies of ``value``."""
        if n < 0:
            raise ValueError("size must not be negative")
        size = len(self._items)
        if n < size:
            del self._items[n:]
            return
        self._grow_to(n)
        self._items.extend([value] * (n - size))

    def reserve(self, n: int) -> None:
        """Make sure at least ``n`` slots are reserved."""
        if self._capacity > n:
            return
        self._grow_to(n)

    def clear(self) -> None:
        """Remove all elements, keeping the capacity."""
        self._items.clear()

    def insert(self, pos: int, value: Any, count: int = 1) -> int:
        """Insert ``count`` copies of ``value`` before ``pos``; return ``pos``."""
        if pos < 0 or pos > len(self._items):
            raise IndexError("out of range")
        if count < 0:
            raise ValueError("count must not be negative")
        self._grow_to(len(self._items) + count)
        self._items[pos:pos] = [value] * count
        return pos

    def erase(self, first: int, last: Optional[int] = None) -> int:
        """Remove the element at ``first``, or the range ``[first, last)``.

        Returns the index following the removed elements, which is ``first``.
        """
        size = len(self._items)
        if last is None:
            if first < 0 or first >= size:
                raise IndexError("out of range")
            del self._items[first]
            return first
        if first < 0 or last > size or first > last:
            raise IndexError("out of range")
        del self._items[first:last]
        return first

    def display(self) -> None:
        """Print size, capacity and the elements to standard output."""
        print(f"size = {len(self._items)} capacity = {self._capacity}")
        print("".join(f"{item} " for item in self._items))


def _print_items(items: Iterable[Any]) -> None:
    print("".join(f"{item} " for item in items))


def main(argv: Optional[list[str]] = None) -> int:
    """Fill a vector with 0..9, print it, erase [2, 5) and print it again."""
    vec = MyVector()
    for i in range(10):
        vec.push_back(i)
    _print_items(vec)
    vec.erase(2, 5)
    _print_items(vec)
    return 0


if __name__ == "__main__":
    sys.exit(main())