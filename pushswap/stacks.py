"""The two stacks and the eleven instructions that act on them."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Instruction(str, Enum):
    """An instruction that moves values between or within the stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when the values are in strictly increasing order."""
    items = list(values)
    return all(left < right for left, right in zip(items, items[1:]))


def _swap_top(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


def _push(source: list[int], target: list[int]) -> None:
    if source:
        target.insert(0, source.pop(0))


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each list is the top.

    Instructions that have nothing to act on leave the stacks unchanged.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def sa(self) -> None:
        """Swap the two top values of stack a."""
        _swap_top(self.a)

    def sb(self) -> None:
        """Swap the two top values of stack b."""
        _swap_top(self.b)

    def ss(self) -> None:
        """Do sa and sb together."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.b, self.a)

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.a, self.b)

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        _rotate(self.a)

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        _rotate(self.b)

    def rr(self) -> None:
        """Do ra and rb together."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        _reverse_rotate(self.a)

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        _reverse_rotate(self.b)

    def rrr(self) -> None:
        """Do rra and rrb together."""
        self.rra()
        self.rrb()

    def apply(self, instruction: Instruction | str) -> None:
        """Carry out one instruction, given as an Instruction or its name.

        Raises ValueError for a name that is not an instruction.
        """
        getattr(self, Instruction(instruction).value)()