"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list built from Node links."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Empty the list, passing each content to ``delete`` first when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None

    def iterate(self, f: Callable[[Any], None] | None) -> None:
        """Call ``f`` on every content in order."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any] | None = None,
        delete: Callable[[Any], None] | None = None,
    ) -> "LinkedList":
        """Return a new list of ``f(content)`` for each content.

        Without ``f`` the contents are carried over as they are. If ``f``
        raises, the contents mapped so far are passed to ``delete`` and the
        error propagates.
        """
        result = LinkedList()
        for content in self:
            try:
                mapped = content if f is None else f(content)
            except Exception:
                result.clear(delete)
                raise
            result.push_back(mapped)
        return result