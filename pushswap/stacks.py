"""The two integer stacks and the operations that rearrange them.

A stack is a list whose first element is its top. Every operation that
succeeds writes its name, followed by a newline, to the stream.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import List, Optional, TextIO

from pushswap.output import printf


class StackError(Exception):
    """An operation needs more elements than the stack holds."""


class Stacks:
    """Stacks ``a`` and ``b`` with the swap, push and rotate operations."""

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        stream: Optional[TextIO] = None,
    ) -> None:
        self.a: List[int] = list(a)
        self.b: List[int] = list(b)
        self.stream = stream

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={self.a!r}, b={self.b!r})"

    def _emit(self, name: str) -> None:
        printf(name + "\n", stream=self.stream)

    def _swap(self, values: List[int], name: str) -> None:
        if len(values) < 2:
            raise StackError(f"{name} needs at least two elements")
        values[0], values[1] = values[1], values[0]
        self._emit(name)

    def _push(self, source: List[int], target: List[int], name: str) -> None:
        if not source:
            raise StackError(f"{name} needs a non-empty source stack")
        target.insert(0, source.pop(0))
        self._emit(name)

    def _rotate(self, values: List[int], name: str) -> None:
        if len(values) < 2:
            raise StackError(f"{name} needs at least two elements")
        values.append(values.pop(0))
        self._emit(name)

    def _reverse_rotate(self, values: List[int], name: str) -> None:
        if len(values) < 2:
            raise StackError(f"{name} needs at least two elements")
        values.insert(0, values.pop())
        self._emit(name)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        self._swap(self.a, "sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        self._swap(self.b, "sb")

    def ss(self) -> None:
        """``sa`` then ``sb``; stops at the first that fails."""
        self.sa()
        self.sb()
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.b, self.a, "pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.a, self.b, "pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a, "ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b, "rb")

    def rr(self) -> None:
        """``ra`` then ``rb``; stops at the first that fails."""
        self.ra()
        self.rb()
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a, "rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b, "rrb")

    def rrr(self) -> None:
        """``rra`` then ``rrb``; stops at the first that fails."""
        self.rra()
        self.rrb()
        self._emit("rrr")


def insert_index(values: Sequence[int], n: int) -> int:
    """The position in ``values`` before which ``n`` should be placed.

    The first position whose predecessor is smaller than ``n`` and whose
    element is larger is chosen. Failing that, a value larger than the last
    element goes at the end, and anything else at the start.
    """
    if not values:
        return 0
    for index, (current, following) in enumerate(zip(values, values[1:])):
        if current < n < following:
            return index + 1
    return len(values) if values[-1] < n else 0


def format_stack(values: Sequence[int]) -> str:
    """The elements joined by ``--`` and ended by a newline; empty for no elements."""
    if not values:
        return ""
    return "--".join(str(value) for value in values) + "\n"