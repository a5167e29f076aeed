# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of instructions. The package provides two commands:

- `push-swap` prints a sequence of instructions that sorts its arguments.
- `push-swap-checker` reads instructions from standard input, applies them
  to its arguments and reports `OK` or `KO`.

## Installation

```
pip install .
```

## The instructions

Stack `a` starts with the numbers in the order given, first number on top;
stack `b` starts empty.

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb` | swap the top two items of `a`, or of `b` |
| `pa`, `pb` | move the top item of `b` onto `a`, or of `a` onto `b` |
| `ra`, `rb` | rotate `a` or `b`: the top item goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate `a`, `b`, or both: the bottom item comes to the top |

An instruction that would have no effect (swapping or rotating a stack with
fewer than two items, pushing from an empty stack) is skipped.

`push-swap` only ever prints the instructions in the table above. The
checker also accepts `ss` and `rr`, but treats them as instructions that
leave both stacks unchanged.

## Usage

Numbers may be given as separate arguments or as one argument separated by
spaces:

```
push-swap 3 2 1
push-swap "5 1 4 2 3"
```

Each instruction is printed on its own line. Input that is already sorted
prints nothing.

Feed the result to the checker to verify it:

```
push-swap 5 1 4 2 3 | push-swap-checker 5 1 4 2 3
```

The checker reads one instruction per line and prints `OK` when stack `a`
ends up sorted in ascending order and stack `b` is empty, and `KO`
otherwise. A last line without a terminating newline is not applied. With no
arguments the checker prints nothing and reads nothing.

Arguments must be integers in the 32-bit signed range, written with an
optional leading `-` and digits only, with no duplicates. Any invalid
argument, or a line given to the checker that contains a space or is not a
known instruction, prints `Error` on standard error. Both commands exit with
status 0 in every case.

## Library use

```python
from pushswap.sorter import sort_operations
from pushswap.checker import check
from pushswap.parsing import parse_args

numbers = parse_args(["5 1 4 2 3"])
ops = sort_operations(numbers)
assert check(numbers, ops)
```

- `pushswap.parsing`: `parse_args(args)` validates the arguments and returns
  the numbers, raising `ParseError` on bad input; `atoi(text)` and
  `split_words(text)` are the helpers it uses.
- `pushswap.stacks`: `PushSwapStacks(numbers)` holds the deques `a` and `b`
  (top at index 0) and has `swap`, `rotate` and `reverse_rotate` (each taking
  a `Which` member: `A`, `B` or `BOTH` for the rotations) plus `push_a` and
  `push_b`. Every operation that changes a stack is appended to its
  `operations` list. `is_sorted(values)` tells whether values never decrease.
- `pushswap.sorter`: `sort_operations(numbers)` returns the instruction list;
  `find_pivots(values, for_b)` gives the two values that split a list into
  thirds.
- `pushswap.checker`: `check(numbers, lines)` returns `True` or `False`;
  `apply_instruction(a, b, line)` applies a single instruction to two deques
  in place and raises `InstructionError` for an unknown one.

## Running the tests

```
pip install .[test]
pytest
```