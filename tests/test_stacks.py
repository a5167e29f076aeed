import pytest

from pushswap.stacks import PushSwapStacks, Which, is_sorted


def test_is_sorted_true():
    assert is_sorted([1, 2, 3]) is True


def test_is_sorted_false():
    assert is_sorted([2, 1, 3]) is False


def test_is_sorted_single():
    assert is_sorted([7]) is True


def test_new_stacks():
    stacks = PushSwapStacks([3, 1, 2])
    assert list(stacks.a) == [3, 1, 2]
    assert list(stacks.b) == []
    assert stacks.operations == []


def test_swap_a():
    stacks = PushSwapStacks([1, 2, 3])
    stacks.swap(Which.A)
    assert list(stacks.a) == [2, 1, 3]
    assert stacks.operations == ["sa"]


def test_swap_b_after_pushes():
    stacks = PushSwapStacks([1, 2, 3])
    stacks.push_b()
    stacks.push_b()
    stacks.swap(Which.B)
    assert list(stacks.b) == [1, 2]
    assert stacks.operations == ["pb", "pb", "sb"]


def test_swap_single_element_is_skipped():
    stacks = PushSwapStacks([5])
    stacks.swap(Which.A)
    assert list(stacks.a) == [5]
    assert stacks.operations == []


def test_swap_both_rejected():
    stacks = PushSwapStacks([1, 2])
    with pytest.raises(ValueError):
        stacks.swap(Which.BOTH)


def test_rotate_a():
    stacks = PushSwapStacks([1, 2, 3])
    stacks.rotate(Which.A)
    assert list(stacks.a) == [2, 3, 1]
    assert stacks.operations == ["ra"]


def test_reverse_rotate_a():
    stacks = PushSwapStacks([1, 2, 3])
    stacks.reverse_rotate(Which.A)
    assert list(stacks.a) == [3, 1, 2]
    assert stacks.operations == ["rra"]


def test_rotate_then_reverse_is_identity():
    stacks = PushSwapStacks([4, 8, 1, 6])
    stacks.rotate(Which.A)
    stacks.reverse_rotate(Which.A)
    assert list(stacks.a) == [4, 8, 1, 6]
    assert stacks.operations == ["ra", "rra"]


def test_rotate_both():
    stacks = PushSwapStacks([1, 2, 3, 4])
    stacks.push_b()
    stacks.push_b()
    stacks.rotate(Which.BOTH)
    assert list(stacks.a) == [4, 3]
    assert list(stacks.b) == [1, 2]
    assert stacks.operations[-1] == "rr"


def test_reverse_rotate_both():
    stacks = PushSwapStacks([1, 2, 3, 4])
    stacks.push_b()
    stacks.push_b()
    stacks.reverse_rotate(Which.BOTH)
    assert list(stacks.a) == [4, 3]
    assert list(stacks.b) == [1, 2]
    assert stacks.operations[-1] == "rrr"


def test_rotate_both_needs_two_in_each():
    stacks = PushSwapStacks([1, 2, 3])
    stacks.push_b()
    stacks.rotate(Which.BOTH)
    assert list(stacks.a) == [2, 3]
    assert stacks.operations == ["pb"]


def test_rotate_empty_b_is_skipped():
    stacks = PushSwapStacks([1, 2])
    stacks.rotate(Which.B)
    stacks.reverse_rotate(Which.B)
    assert stacks.operations == []


def test_push_b_and_back():
    stacks = PushSwapStacks([1, 2, 3])
    stacks.push_b()
    assert list(stacks.a) == [2, 3]
    assert list(stacks.b) == [1]
    stacks.push_a()
    assert list(stacks.a) == [1, 2, 3]
    assert list(stacks.b) == []
    assert stacks.operations == ["pb", "pa"]


def test_push_from_empty_is_skipped():
    stacks = PushSwapStacks([1])
    stacks.push_a()
    assert stacks.operations == []
    stacks.push_b()
    stacks.push_b()
    assert stacks.operations == ["pb"]
    assert list(stacks.b) == [1]


def test_operations_preserve_values():
    numbers = [9, -3, 4, 0, 12]
    stacks = PushSwapStacks(numbers)
    stacks.push_b()
    stacks.push_b()
    stacks.rotate(Which.BOTH)
    stacks.swap(Which.A)
    stacks.reverse_rotate(Which.B)
    stacks.push_a()
    assert sorted(list(stacks.a) + list(stacks.b)) == sorted(numbers)