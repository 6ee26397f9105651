"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that hands each value to a deleter when cleared."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Put ``content`` at the front of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def append(self, content: Any) -> Node:
        """Put ``content`` at the end of the list and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        return self._tail

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every value, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list of ``f(value)`` for every value.

        If ``f`` raises, the values mapped so far are handed to ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Deleter = None) -> None:
        """Hand every value to ``delete``, front to back, and empty the list."""
        node = self.head
        self.head = None
        self._tail = None
        while node is not None:
            if delete is not None:
                delete(node.content)
            following = node.next
            node.next = None
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"