"""Bounded list and queue of keyed elements."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional

from arboles.nodes import Element

DEFAULT_CAPACITY = 100


class ContainerFullError(OverflowError):
    """Raised when an element is added to a container that is already full."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"container is full (capacity {capacity})")
        self.capacity = capacity


class BoundedList:
    """Ordered list of elements with a fixed capacity and 1-based positions."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: List[Element] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def _check_room(self) -> None:
        if self.is_full():
            raise ContainerFullError(self.capacity)

    def append(self, element: Element) -> None:
        """Add ``element`` at the end."""
        self._check_room()
        self._items.append(element)

    def remove_key(self, key: int) -> bool:
        """Remove every element with ``key``; True if any was removed."""
        kept = [item for item in self._items if item.key != key]
        removed = len(kept) != len(self._items)
        self._items = kept
        return removed

    def find(self, key: int) -> Optional[Element]:
        """The first element with ``key``, or None."""
        return next((item for item in self._items if item.key == key), None)

    def insert(self, element: Element, position: int) -> bool:
        """Insert at 1-based ``position``.

        A position past the end appends the element instead and returns False.
        """
        self._check_room()
        if position < 1:
            raise IndexError(f"position out of range: {position}")
        if position > len(self._items):
            self._items.append(element)
            return False
        self._items.insert(position - 1, element)
        return True

    def delete_at(self, position: int) -> Element:
        """Remove and return the element at 1-based ``position``."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position out of range: {position}")
        return self._items.pop(position - 1)

    def get(self, position: int) -> Element:
        """The element at 1-based ``position``."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position out of range: {position}")
        return self._items[position - 1]

    def render(self) -> str:
        """The keys in order, as the list is shown to the user."""
        return "Contenido de la lista: " + "".join(f"{item.key} " for item in self._items)


class BoundedQueue:
    """First-in first-out queue of elements with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: Deque[Element] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        """Elements from front to back, without removing them."""
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def enqueue(self, element: Element) -> None:
        """Add ``element`` at the back."""
        if self.is_full():
            raise ContainerFullError(self.capacity)
        self._items.append(element)

    def dequeue(self) -> Element:
        """Remove and return the front element."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> Element:
        """The front element, left in place."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]