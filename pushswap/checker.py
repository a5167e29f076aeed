"""Check that a list of operations read from standard input sorts the numbers."""

from __future__ import annotations

import sys
from collections import deque
from typing import Callable, Iterable, Iterator, Sequence, TextIO

from .parsing import ParseError, parse_args
from .stacks import is_sorted


class InstructionError(ValueError):
    """Raised for a line that is not a known instruction."""

    def __init__(self, line: str) -> None:
        super().__init__(f"invalid instruction: {line!r}")
        self.line = line


# Instructions that are recognised but leave both stacks as they are.
_IGNORED = frozenset({"ss", "rr"})


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int], step: int) -> None:
    if len(stack) >= 2:
        stack.rotate(step)


def _push(source: deque[int], target: deque[int]) -> None:
    if source:
        target.appendleft(source.popleft())


def _actions(a: deque[int], b: deque[int]) -> dict[str, Callable[[], None]]:
    def rrr() -> None:
        _rotate(a, 1)
        _rotate(b, 1)

    return {
        "sa": lambda: _swap(a),
        "sb": lambda: _swap(b),
        "ra": lambda: _rotate(a, -1),
        "rb": lambda: _rotate(b, -1),
        "rra": lambda: _rotate(a, 1),
        "rrb": lambda: _rotate(b, 1),
        "rrr": rrr,
        "pb": lambda: _push(a, b),
        "pa": lambda: _push(b, a),
    }


def apply_instruction(a: deque[int], b: deque[int], line: str) -> None:
    """Apply one instruction to stacks ``a`` and ``b`` (top at index 0) in place."""
    if " " in line:
        raise InstructionError(line)
    if line in _IGNORED:
        return
    action = _actions(a, b).get(line)
    if action is None:
        raise InstructionError(line)
    action()


def check(numbers: Iterable[int], lines: Iterable[str]) -> bool:
    """Return True when the instructions leave a sorted and b empty."""
    a: deque[int] = deque(numbers)
    b: deque[int] = deque()
    for line in lines:
        apply_instruction(a, b, line)
    return is_sorted(a) and not b


def _complete_lines(stream: TextIO) -> Iterator[str]:
    """Yield the newline-terminated lines; a final unterminated one is ignored."""
    for line in stream:
        if line.endswith("\n"):
            yield line[:-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_args(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 0
    if not args:
        return 0
    try:
        ok = check(numbers, _complete_lines(sys.stdin))
    except InstructionError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if ok else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())