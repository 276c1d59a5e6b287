import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Instruction, Stacks, is_sorted

int_lists = st.lists(st.integers(-1000, 1000), min_size=2, max_size=20)


def test_sa_swaps_top_two():
    values = [5, 7, 9, 11]
    s = Stacks(values)
    s.sa()
    assert s.a[:2] == values[1::-1]
    assert s.a[2:] == values[2:]


@given(int_lists)
def test_sa_twice_is_identity(values):
    s = Stacks(values)
    s.sa()
    s.sa()
    assert s.a == values


def test_ra_moves_top_to_bottom():
    values = [4, 8, 15, 16]
    s = Stacks(values)
    s.ra()
    assert s.a == values[1:] + values[:1]


def test_rra_moves_bottom_to_top():
    values = [4, 8, 15, 16]
    s = Stacks(values)
    s.rra()
    assert s.a == values[-1:] + values[:-1]


@given(int_lists)
def test_ra_and_rra_are_inverse(values):
    s = Stacks(values)
    s.ra()
    s.rra()
    assert s.a == values


def test_pb_moves_top_to_b():
    values = [3, 1, 2]
    s = Stacks(values)
    s.pb()
    assert s.a == values[1:]
    assert s.b == values[:1]


@given(int_lists)
def test_pb_then_pa_is_identity(values):
    s = Stacks(values)
    s.pb()
    s.pa()
    assert s.a == values
    assert s.b == []


def test_pushing_all_reverses_order():
    values = [1, 2, 3, 4]
    s = Stacks(values)
    for _ in values:
        s.pb()
    assert s.a == []
    assert s.b == values[::-1]


def test_double_instructions_act_on_both():
    values = [10, 20, 30, 40, 50, 60]
    s = Stacks(values)
    s.pb()
    s.pb()
    s.pb()
    b_before = list(s.b)
    a_before = list(s.a)
    s.rr()
    assert s.a == a_before[1:] + a_before[:1]
    assert s.b == b_before[1:] + b_before[:1]
    s.rrr()
    assert s.a == a_before
    assert s.b == b_before
    s.ss()
    assert s.a[:2] == a_before[1::-1]
    assert s.b[:2] == b_before[1::-1]


def test_sb_rb_rrb_act_on_b_only():
    values = [1, 2, 3, 4, 5]
    s = Stacks(values)
    s.pb()
    s.pb()
    s.pb()
    a_before = list(s.a)
    b_before = list(s.b)
    s.sb()
    s.rb()
    s.rrb()
    s.sb()
    assert s.a == a_before
    assert s.b == b_before


def test_instructions_on_too_small_stacks_do_nothing():
    values = [42]
    s = Stacks(values)
    s.pa()
    s.sa()
    s.ra()
    s.rra()
    s.sb()
    s.rb()
    s.rrb()
    assert s.a == values
    assert s.b == []


def test_apply_accepts_name_and_instruction():
    values = [9, 3, 6, 1]
    by_name = Stacks(values)
    by_enum = Stacks(values)
    by_method = Stacks(values)
    by_name.apply("rra")
    by_enum.apply(Instruction.RRA)
    by_method.rra()
    assert by_name.a == by_enum.a == by_method.a


def test_apply_rejects_unknown_name():
    s = Stacks([1, 2])
    with pytest.raises(ValueError):
        s.apply("rx")


@given(int_lists, st.lists(st.sampled_from(list(Instruction)), max_size=40))
def test_instructions_preserve_values(values, instructions):
    s = Stacks(values)
    for instruction in instructions:
        s.apply(instruction)
    assert sorted(s.a + s.b) == sorted(values)


@given(st.sets(st.integers(-10**6, 10**6)))
def test_is_sorted_on_sorted_unique_values(values):
    assert is_sorted(sorted(values)) is True


def test_is_sorted_rejects_unsorted_and_equal():
    assert is_sorted([3, 1, 2]) is False
    assert is_sorted([1, 1]) is False
    assert is_sorted([7]) is True