"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node that follows it."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list, built from Node links starting at head."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        if items is not None:
            for item in items:
                self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Insert value at the front; return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def push_back(self, value: Any) -> Node:
        """Append value at the end; return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], object]] = None) -> None:
        """Empty the list, passing each value to delete first when one is given."""
        node = self.head
        self.head = None
        while node is not None:
            if delete is not None:
                delete(node.value)
            following = node.next
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call func on every value, front to back."""
        for node in self._nodes():
            func(node.value)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], object]] = None,
    ) -> "LinkedList":
        """Return a new list of func applied to every value.

        If func raises, the values already produced are passed to delete
        (when given) and the error propagates.
        """
        if func is None:
            raise TypeError("func must be callable")
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for node in self._nodes():
                new = Node(func(node.value))
                if tail is None:
                    result.head = new
                else:
                    tail.next = new
                tail = new
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"