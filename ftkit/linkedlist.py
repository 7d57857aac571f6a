"""A doubly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell with links to its neighbours."""

    content: Any
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list supporting the usual add, map and filter operations."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    def add_back(self, content: Any) -> Node:
        """Append ``content`` and return its node."""
        node = Node(content, prev=self._tail)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def add_front(self, content: Any) -> Node:
        """Prepend ``content`` and return its node."""
        node = Node(content, next=self.head)
        if self.head is None:
            self._tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1
        return node

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = node.prev = None
            node = following
        self.head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content from front to back."""
        for content in self:
            func(content)

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        return self._tail

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``func(content)`` for every content."""
        return LinkedList(func(content) for content in self)

    def remove_if(
        self,
        value: Any,
        cond: Callable[[Any, Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> int:
        """Unlink every node for which ``cond(value, content)`` is true.

        Each removed content is passed to ``delete`` first. Returns the number
        of nodes removed.
        """
        removed = 0
        node = self.head
        while node is not None:
            following = node.next
            if cond(value, node.content):
                if delete is not None:
                    delete(node.content)
                self._unlink(node)
                removed += 1
            node = following
        return removed

    def _unlink(self, node: Node) -> None:
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __len__(self) -> int:
        return self._size