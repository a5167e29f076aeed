"""Produce a sequence of stack operations that sorts the given numbers."""

from __future__ import annotations

import sys
from itertools import islice
from typing import Iterable, Sequence

from .parsing import ParseError, parse_args
from .stacks import PushSwapStacks, Which, is_sorted


def find_pivots(values: Sequence[int], for_b: bool) -> tuple[int, int]:
    """Return the two pivots that split ``values`` into thirds.

    For stack a the first pivot is the upper one and the second the lower
    one; for stack b the order is reversed.
    """
    ordered = sorted(values)
    third = len(ordered) // 3
    lower = ordered[third]
    upper = ordered[third * 2]
    return (lower, upper) if for_b else (upper, lower)


def _sort_three(stacks: PushSwapStacks) -> None:
    while not is_sorted(stacks.a):
        if stacks.a[0] > stacks.a[-1]:
            stacks.rotate(Which.A)
        else:
            stacks.swap(Which.A)


def _split_off_two(stacks: PushSwapStacks) -> None:
    largest = max(stacks.a)
    while len(stacks.b) != 2:
        if stacks.a[0] < largest:
            stacks.push_b()
        else:
            stacks.rotate(Which.A)
    if stacks.a[0] == largest:
        stacks.rotate(Which.A)
    else:
        while stacks.a[-1] != largest:
            stacks.reverse_rotate(Which.A)
    if stacks.a[0] > stacks.a[1]:
        stacks.swap(Which.A)
    if stacks.b[0] > stacks.b[1]:
        stacks.swap(Which.B)


def _merge_back(stacks: PushSwapStacks) -> None:
    while stacks.b:
        top = stacks.b[0]
        if top < stacks.a[0]:
            stacks.push_a()
        elif stacks.a[0] < top < stacks.a[1]:
            stacks.rotate(Which.A)
            stacks.push_a()
        else:
            stacks.rotate(Which.A)
    while not is_sorted(stacks.a):
        stacks.rotate(Which.A)


def _sort_four_five(stacks: PushSwapStacks) -> None:
    _split_off_two(stacks)
    _merge_back(stacks)


def _restore(stacks: PushSwapStacks, rotated_a: int, rotated_b: int) -> None:
    """Undo the rotations made while partitioning, sharing moves where possible."""
    while rotated_a or rotated_b:
        if rotated_a and rotated_b and len(stacks.a) > 2 and len(stacks.b) > 2:
            stacks.reverse_rotate(Which.BOTH)
            rotated_a -= 1
            rotated_b -= 1
        elif rotated_a:
            stacks.reverse_rotate(Which.A)
            rotated_a -= 1
        else:
            stacks.reverse_rotate(Which.B)
            rotated_b -= 1


def _sort_top_of_a(stacks: PushSwapStacks, count: int) -> None:
    if count < 3:
        if len(stacks.a) >= 2 and stacks.a[0] > stacks.a[1]:
            stacks.swap(Which.A)
        return
    upper, lower = find_pivots(list(islice(stacks.a, count)), False)
    rotated_a = rotated_b = pushed = 0
    for _ in range(count):
        if len(stacks.a) <= 1:
            break
        if stacks.a[0] >= upper:
            stacks.rotate(Which.A)
            rotated_a += 1
        else:
            stacks.push_b()
            pushed += 1
            if stacks.b[0] >= lower:
                stacks.rotate(Which.B)
                rotated_b += 1
    _restore(stacks, rotated_a, rotated_b)
    _sort_top_of_a(stacks, rotated_a)
    _sort_top_of_b(stacks, rotated_b)
    _sort_top_of_b(stacks, pushed - rotated_b)


def _sort_top_of_b(stacks: PushSwapStacks, count: int) -> None:
    if count < 3:
        if not stacks.b:
            return
        if len(stacks.b) >= 2 and stacks.b[0] < stacks.b[1]:
            stacks.swap(Which.B)
        for _ in range(count):
            stacks.push_a()
        return
    lower, upper = find_pivots(list(islice(stacks.b, count)), True)
    rotated_a = rotated_b = pushed = 0
    for _ in range(count):
        if not stacks.b:
            break
        if stacks.b[0] <= lower:
            stacks.rotate(Which.B)
            rotated_b += 1
        else:
            stacks.push_a()
            pushed += 1
            if stacks.b and stacks.a[0] < upper:
                stacks.rotate(Which.A)
                rotated_a += 1
    _sort_top_of_a(stacks, pushed - rotated_a)
    _restore(stacks, rotated_a, rotated_b)
    _sort_top_of_a(stacks, rotated_a)
    _sort_top_of_b(stacks, rotated_b)


def sort_operations(numbers: Iterable[int]) -> list[str]:
    """Return the operations that sort ``numbers`` into stack a, smallest on top."""
    stacks = PushSwapStacks(numbers)
    if is_sorted(stacks.a):
        return []
    size = len(stacks.a)
    if size == 3:
        _sort_three(stacks)
    elif size in (4, 5):
        _sort_four_five(stacks)
    else:
        _sort_top_of_a(stacks, size)
    return list(stacks.operations)


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_args(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{op}\n" for op in sort_operations(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())