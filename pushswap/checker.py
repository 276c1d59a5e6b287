"""Checking that a list of instructions sorts the given numbers."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence

from .parsing import ParseError, parse_args
from .stacks import Instruction, Stacks, is_sorted

_ALLOWED = re.compile(r"[a-z\n]*")
_NAMES = frozenset(instruction.value for instruction in Instruction)


class InstructionError(ValueError):
    """Raised when the instruction text is not a valid list of instructions."""


def validate_instruction_text(text: str | None) -> None:
    """Check the raw instruction text.

    The text must be present and non-empty, hold only lower-case letters and
    newlines, and never two newlines in a row. Raises InstructionError
    otherwise.
    """
    if not text:
        raise InstructionError("no instructions were read")
    if not _ALLOWED.fullmatch(text):
        raise InstructionError("instructions hold characters other than a-z")
    if "\n\n" in text:
        raise InstructionError("empty line between instructions")


def parse_instructions(text: str | None) -> list[Instruction]:
    """Return the instructions of a newline-separated text, in order.

    Raises InstructionError when the text is invalid or names an unknown
    instruction.
    """
    validate_instruction_text(text)
    words = [word for word in text.split("\n") if word]
    unknown = [word for word in words if word not in _NAMES]
    if unknown:
        raise InstructionError(f"unknown instruction: {unknown[0]!r}")
    return [Instruction(word) for word in words]


def run_checker(
    values: Iterable[int], instructions: Iterable[Instruction | str]
) -> bool:
    """Apply the instructions to the values and tell whether stack a is sorted.

    Only stack a is judged; an empty stack a is never counted as sorted.
    """
    stacks = Stacks(values)
    for instruction in instructions:
        stacks.apply(instruction)
    return bool(stacks.a) and is_sorted(stacks.a)


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
        instructions = parse_instructions(sys.stdin.read())
    except (ParseError, InstructionError):
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if run_checker(values, instructions) else "KO\n")
    return 0