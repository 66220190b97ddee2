"""A first-in, first-out queue built on a doubly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False, repr=False)
class QueueNode:
    """One node of a queue."""

    data: Any
    next: Optional["QueueNode"] = None
    prev: Optional["QueueNode"] = None


class Queue:
    """A FIFO queue holding arbitrary data."""

    def __init__(self) -> None:
        self._head: Optional[QueueNode] = None
        self._tail: Optional[QueueNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield items from the front of the queue to the back."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        """Yield items from the back of the queue to the front."""
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"

    def first_node(self) -> Optional[QueueNode]:
        """The front node, or None if empty."""
        return self._head

    def last_node(self) -> Optional[QueueNode]:
        """The back node, or None if empty."""
        return self._tail

    def push(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""
        node = QueueNode(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
            node.prev = self._tail
        self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if self._head is None:
            raise IndexError("pop from empty queue")
        node = self._head
        if node.next is None:
            self._head = self._tail = None
        else:
            self._head = node.next
            self._head.prev = None
        self._size -= 1
        return node.data