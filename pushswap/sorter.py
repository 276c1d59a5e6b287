"""Sorting stack a with the fewest instructions the strategy can find."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import parse_args
from .search import cheapest, closest_smaller_target, position, rotation_cost
from .stacks import Instruction, Stacks, is_sorted


class Sorter:
    """Sorts a set of values and records every instruction it uses."""

    def __init__(self, values: Iterable[int]) -> None:
        self.stacks = Stacks(values)
        self.instructions: list[Instruction] = []

    @property
    def a(self) -> list[int]:
        return self.stacks.a

    @property
    def b(self) -> list[int]:
        return self.stacks.b

    def _do(self, *instructions: Instruction) -> None:
        for instruction in instructions:
            self.stacks.apply(instruction)
            self.instructions.append(instruction)

    def run(self) -> list[Instruction]:
        """Sort stack a and return the instructions used so far."""
        if self.a and not is_sorted(self.a):
            size = len(self.a)
            if size <= 3:
                self.small()
            elif size < 6:
                self.medium()
            else:
                self.large()
        return list(self.instructions)

    def small(self) -> None:
        """Sort a stack a of at most three values.

        Raises ValueError when no rule applies, as with repeated values.
        """
        a = self.a
        while not is_sorted(a):
            low = position(a, min(a))
            high = position(a, max(a))
            if (low, high) in ((1, 2), (0, 1), (2, 0)):
                self._do(Instruction.SA)
            elif low == 2 and high == 1:
                self._do(Instruction.RRA)
            elif high == 0 and low == 1:
                self._do(Instruction.RA)
            else:
                raise ValueError(f"no rule sorts stack a: {a!r}")

    def medium(self) -> None:
        """Push all but three values to b, then sort them back in."""
        while len(self.a) > 3:
            self._do(Instruction.PB)
        self.end_sort()

    def large(self) -> None:
        """Push all but three values to b, sinking those above the median."""
        median = sorted(self.a)[len(self.a) // 2]
        while len(self.a) > 3:
            self._do(Instruction.PB)
            if len(self.b) >= 2 and self.b[0] > median:
                self._do(Instruction.RB)
        self.end_sort()

    def _push_costs(self) -> list[int]:
        a, b = self.a, self.b
        return [
            rotation_cost(a, closest_smaller_target(a, value)) + rotation_cost(b, index)
            for index, value in enumerate(b)
        ]

    def end_sort(self) -> None:
        """Sort the rest of a, push b back in cheapest order, bring the minimum up."""
        self.small()
        a, b = self.a, self.b
        if b:
            highest = max(b)
            if position(b, highest) != 0:
                self.put_first_b(highest)
        while b:
            chosen = b[cheapest(self._push_costs())]
            target = a[closest_smaller_target(a, chosen)]
            self.put_both_first(target, chosen)
            self._do(Instruction.PA)
        if a:
            lowest = min(a)
            if position(a, lowest) != 0:
                self.put_first_a(lowest)

    def put_first_a(self, value: int) -> None:
        """Rotate a until ``value`` is on top."""
        a = self.a
        while (index := position(a, value)) != 0:
            self._do(Instruction.RRA if index >= len(a) // 2 else Instruction.RA)

    def put_first_b(self, value: int) -> None:
        """Rotate b until ``value`` is on top."""
        b = self.b
        while (index := position(b, value)) != 0:
            self._do(Instruction.RRB if index >= len(b) // 2 else Instruction.RB)

    def put_both_first(self, value_a: int, value_b: int) -> None:
        """Bring ``value_a`` to the top of a and ``value_b`` to the top of b.

        Both stacks are turned together while their directions agree.
        """
        a, b = self.a, self.b
        while position(a, value_a) != 0 and position(b, value_b) != 0:
            index_a, half_a = position(a, value_a), len(a) // 2
            index_b, half_b = position(b, value_b), len(b) // 2
            if index_a >= half_a and index_b >= half_b:
                self._do(Instruction.RRR)
            elif index_a <= half_a and index_b <= half_b:
                self._do(Instruction.RR)
            else:
                self.put_first_a(value_a)
                self.put_first_b(value_b)
        self.put_first_a(value_a)
        self.put_first_b(value_b)


def sort_values(values: Iterable[int]) -> list[Instruction]:
    """Return the instructions that sort the values."""
    return Sorter(values).run()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the instructions that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        instructions = sort_values(parse_args(args))
    except ValueError:
        sys.stderr.write("Error\n")
        return 1
    for instruction in instructions:
        print(instruction.value)
    return 0