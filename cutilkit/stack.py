"""A last-in, first-out stack built on a singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False, repr=False)
class StackNode:
    """One node of a stack."""

    data: Any
    next: Optional["StackNode"] = None


class Stack:
    """A LIFO stack holding arbitrary data."""

    def __init__(self) -> None:
        self._head: Optional[StackNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield items from the top of the stack down."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"

    def first_node(self) -> Optional[StackNode]:
        """The top node, or None if empty."""
        return self._head

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        self._head = StackNode(data, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._head is None:
            raise IndexError("pop from empty stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data