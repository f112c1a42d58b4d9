"""A singly linked list with front and back insertion and clean-up callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass(slots=True)
class Node:
    """One cell of a linked list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list of arbitrary contents."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or None when the list is empty."""
        return self._head

    def add_front(self, content: Any) -> Node:
        """Insert content at the front of the list and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> Node:
        """Append content at the end of the list and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call f on the content of every node, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list holding f(content) for every content.

        If f raises, delete is called on every result built so far before the
        exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node, pass its content to delete, and return it."""
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each content to delete, front to back."""
        while self._head is not None:
            self.pop_front(delete)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"