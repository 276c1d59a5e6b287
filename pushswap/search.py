"""Finding values in a stack and pricing the rotations that bring them up."""

from __future__ import annotations

from collections.abc import Sequence


def position(stack: Sequence[int], value: int) -> int:
    """Return the index of ``value`` in the stack, counted from the top.

    Raises ValueError when the value is not in the stack.
    """
    return stack.index(value)


def rotation_cost(stack: Sequence[int], index: int) -> int:
    """Return how many rotations bring the value at ``index`` to the top.

    Values in the upper half are rotated up, the others are reverse-rotated
    down past the bottom, and only that direction is counted.
    """
    size = len(stack)
    if not 0 <= index < size:
        raise IndexError(f"index {index} outside a stack of {size}")
    if index == 0:
        return 0
    if index >= size // 2:
        return size - index
    return index


def _after(stack: Sequence[int], anchor: int) -> int:
    return (stack.index(anchor) + 1) % len(stack)


def closest_smaller_target(stack: Sequence[int], value: int) -> int:
    """Return the index that must be on top before ``value`` is pushed on.

    That is the element just below the largest value smaller than ``value``,
    or just below the maximum when nothing is smaller, wrapping to the top.
    Raises ValueError for an empty stack.
    """
    smaller = [item for item in stack if item < value]
    anchor = max(smaller) if smaller else max(stack)
    return _after(stack, anchor)


def closest_bigger_target(stack: Sequence[int], value: int) -> int:
    """Return the index just below the smallest value bigger than ``value``.

    Falls back to the minimum when nothing is bigger, wrapping to the top.
    Raises ValueError for an empty stack.
    """
    bigger = [item for item in stack if item > value]
    anchor = min(bigger) if bigger else min(stack)
    return _after(stack, anchor)


def cheapest(costs: Sequence[int]) -> int:
    """Return the index of the first smallest cost.

    Raises ValueError when there are no costs.
    """
    if not costs:
        raise ValueError("no costs to choose from")
    return min(enumerate(costs), key=lambda pair: pair[1])[0]