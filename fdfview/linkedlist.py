"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional


@dataclass
class Node:
    """One list cell holding a value and a link to the next cell."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list that supports front and back insertion."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the front and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def push_back(self, value: Any) -> Node:
        """Append ``value`` at the end and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, passing each non-None value to ``delete``.

        Values are released from the last node back to the first.
        """
        nodes: List[Node] = list(self._nodes())
        self.head = None
        if delete is None:
            return
        for node in reversed(nodes):
            if node.content is not None:
                delete(node.content)

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every value that is not None, front to back."""
        for node in self._nodes():
            if node.content is not None:
                func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None],
    ) -> "LinkedList":
        """A new list of ``func(value)`` for every value.

        If ``func`` returns None for any value, the values produced so far
        are released with ``delete`` and ValueError is raised.
        """
        result = LinkedList()
        for value in self:
            mapped = func(value)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"mapping produced no value for {value!r}")
            result.push_back(mapped)
        return result