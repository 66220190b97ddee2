"""A doubly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False, repr=False)
class DoublyLinkedListNode:
    """One node of a doubly linked list."""

    data: Any
    next: Optional["DoublyLinkedListNode"] = None
    prev: Optional["DoublyLinkedListNode"] = None


class DoublyLinkedList:
    """A doubly linked list holding arbitrary data."""

    def __init__(self) -> None:
        self._head: Optional[DoublyLinkedListNode] = None
        self._tail: Optional[DoublyLinkedListNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def first_node(self) -> Optional[DoublyLinkedListNode]:
        """The head node, or None if empty."""
        return self._head

    def last_node(self) -> Optional[DoublyLinkedListNode]:
        """The tail node, or None if empty."""
        return self._tail

    def _node_at(self, idx: int) -> DoublyLinkedListNode:
        """Walk to position ``idx`` from whichever end is nearer."""
        if idx <= self._size // 2:
            node = self._head
            for _ in range(idx):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - idx):
                node = node.prev
        return node

    def append(self, data: Any) -> None:
        """Add ``data`` at the end."""
        self.insert(data, -1)

    def insert(self, data: Any, idx: int) -> None:
        """Insert ``data`` so that it ends up at position ``idx``.

        Negative indices count from the tail, with -1 meaning after the
        last node; indices past the end append.
        """
        size = self._size
        if idx < -1 and idx <= -size:
            raise IndexError(f"index {idx} out of range")
        if idx < 0:
            idx = size + idx + 1

        node = DoublyLinkedListNode(data)
        if size == 0:
            self._head = self._tail = node
        elif idx == 0:
            node.next = self._head
            self._head.prev = node
            self._head = node
        elif idx >= size:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        else:
            prev = self._node_at(idx - 1)
            node.prev = prev
            node.next = prev.next
            prev.next.prev = node
            prev.next = node
        self._size += 1

    def remove(self, idx: int) -> Any:
        """Remove the node at ``idx`` and return its data.

        Negative indices count from the tail; an index past the end
        removes the last node.
        """
        size = self._size
        if size == 0:
            raise IndexError("remove from empty list")
        if idx < 0 and -idx >= size:
            raise IndexError(f"index {idx} out of range")
        if idx < 0:
            idx += size

        if size == 1:
            node = self._head
            self._head = self._tail = None
        elif idx == 0:
            node = self._head
            self._head = node.next
            self._head.prev = None
        elif idx >= size - 1:
            node = self._tail
            self._tail = node.prev
            self._tail.next = None
        else:
            node = self._node_at(idx)
            node.prev.next = node.next
            node.next.prev = node.prev
        self._size -= 1
        return node.data