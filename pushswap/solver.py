"""Cost-driven insertion of stack ``b`` back into stack ``a``."""

from __future__ import annotations

import argparse
from collections import Counter
from typing import List, Optional, Sequence, TextIO

from pushswap.output import printf, put_str
from pushswap.stacks import Stacks, format_stack, insert_index

_NO_MOVES = 999999
_DEMO_A = (89, 104, 94, 52, 105)
_DEMO_B = (1,)


def rotation_cost(size: int, pos: int) -> int:
    """Rotations needed to bring position ``pos`` to the top of a stack of ``size``."""
    if pos > size // 2:
        return size - pos
    return pos


def total_moves(stacks: Stacks, pos: int) -> int:
    """Estimated moves to insert the element at ``pos`` of ``b`` into ``a``.

    The size of ``b`` is counted from ``pos`` to its bottom. Rotations in the
    same direction are shared, so their larger count is used; otherwise the
    counts add up.
    """
    element = stacks.b[pos]
    size_a = len(stacks.a)
    size_b = len(stacks.b) - pos
    pos_a = insert_index(stacks.a, element)
    count_a = rotation_cost(size_a, pos_a)
    count_b = rotation_cost(size_b, pos)
    upper_b = pos < size_b // 2
    upper_a = pos_a < size_a // 2
    if upper_a == upper_b:
        return max(count_a, count_b)
    return count_a + count_b


def best_element(stacks: Stacks) -> int:
    """Position in ``b`` of the first element with the fewest estimated moves.

    Each cost and then the chosen position are written to the stacks' stream.
    """
    best_index = 0
    min_moves = _NO_MOVES
    for pos in range(len(stacks.b)):
        moves = total_moves(stacks, pos)
        printf("%d\n", moves, stream=stacks.stream)
        if moves < min_moves:
            min_moves = moves
            best_index = pos
    printf("%d\n", best_index, stream=stacks.stream)
    return best_index


def _rotate_to(size: int, pos: int, forward, backward) -> None:
    if pos == 0:
        return
    if pos >= size // 2:
        for _ in range(size - pos):
            backward()
    else:
        for _ in range(pos):
            forward()


def rotate_a_to(stacks: Stacks, pos: int) -> None:
    """Rotate ``a`` so that position ``pos`` comes to the top."""
    _rotate_to(len(stacks.a), pos, stacks.ra, stacks.rra)


def rotate_b_to(stacks: Stacks, index: int) -> None:
    """Rotate ``b`` so that position ``index`` comes to the top."""
    _rotate_to(len(stacks.b), index, stacks.rb, stacks.rrb)


def movement(stacks: Stacks, index: int) -> None:
    """Bring element ``index`` of ``b`` to its place in ``a`` and push it there."""
    if not 0 <= index < len(stacks.b):
        raise IndexError(f"no element {index} in stack b of size {len(stacks.b)}")
    pos_a = insert_index(stacks.a, stacks.b[index])
    rotate_b_to(stacks, index)
    rotate_a_to(stacks, pos_a)
    stacks.pa()


def _show(stacks: Stacks, heading: str, stream: Optional[TextIO]) -> None:
    printf(heading + "\nA: ", stream=stream)
    put_str(format_stack(stacks.a), stream)
    printf("\nB: ", stream=stream)
    put_str(format_stack(stacks.b), stream)
    printf("\n", stream=stream)


def push_all(stacks: Stacks, stream: Optional[TextIO] = None) -> None:
    """Move every element of ``b`` into ``a``, cheapest first, showing each step."""
    while stacks.b:
        index = best_element(stacks)
        _show(stacks, "Before movement:", stream)
        movement(stacks, index)
        _show(stacks, "After movement:", stream)


def push_all_but_two(stacks: Stacks) -> None:
    """Push elements from ``a`` to ``b`` until ``a`` holds at most two."""
    while len(stacks.a) > 2:
        stacks.pb()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the solver on the built-in example stacks."""
    parser = argparse.ArgumentParser(
        prog="pushswap",
        description="Move a fixed example from stack a to b and back again.",
    )
    parser.parse_args(argv)
    stacks = Stacks(_DEMO_A, _DEMO_B)
    printf("Before\n")
    put_str(format_stack(stacks.a))
    printf("\n")
    put_str(format_stack(stacks.b))
    printf("After\n")
    push_all_but_two(stacks)
    push_all(stacks)
    put_str(format_stack(stacks.a))
    printf("\n")
    put_str(format_stack(stacks.b))
    return 0


def _same_elements(first: List[int], second: List[int]) -> bool:
    return Counter(first) == Counter(second)