"""A singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False, repr=False)
class LinkedListNode:
    """One node of a singly linked list."""

    data: Any
    next: Optional["LinkedListNode"] = None


class LinkedList:
    """A singly linked list holding arbitrary data."""

    def __init__(self) -> None:
        self._head: Optional[LinkedListNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def first_node(self) -> Optional[LinkedListNode]:
        """The head node, or None if the list is empty."""
        return self._head if self._size else None

    def append(self, data: Any) -> None:
        """Add ``data`` at the end."""
        self.insert(data, self._size + 1)

    def insert(self, data: Any, idx: int) -> None:
        """Insert ``data`` at position ``idx``; past the end appends."""
        if idx < 0:
            raise IndexError("index must be non-negative")
        node = LinkedListNode(data)
        if self._head is None or idx == 0:
            node.next = self._head
            self._head = node
        else:
            prev = self._head
            for _ in range(idx - 1):
                if prev.next is None:
                    break
                prev = prev.next
            node.next = prev.next
            prev.next = node
        self._size += 1

    def remove(self, idx: int) -> Any:
        """Remove the node at ``idx`` and return its data."""
        if not 0 <= idx < self._size:
            raise IndexError(f"index {idx} out of range")
        assert self._head is not None
        if idx == 0:
            node = self._head
            self._head = node.next
        else:
            prev = self._head
            for _ in range(idx - 1):
                prev = prev.next
            node = prev.next
            prev.next = node.next
        self._size -= 1
        return node.data