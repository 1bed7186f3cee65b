"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node(Generic[T]):
    content: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that grows at either end and shrinks from the front."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def add_front(self, content: T) -> None:
        """Insert ``content`` before the first element."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_back(self, content: T) -> None:
        """Append ``content`` after the last element."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> T:
        """The content of the last element."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def pop_front(self, delete: Optional[Callable[[T], Any]] = None) -> T:
        """Remove the first element, pass its content to ``delete`` and return it."""
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every element, passing each content to ``delete`` in order."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            if delete is not None:
                delete(node.content)
            node = node.next

    def iterate(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """A new list of ``func(content)`` for every element.

        If ``func`` fails, the contents already produced are passed to
        ``delete`` and the error propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result