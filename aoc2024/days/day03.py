"""Day 3: summing multiplications in corrupted memory."""

import re

from ..day import Part

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION = re.compile(r"(?:mul\((\d+),(\d+)\))|(?:do\(\))|(?:don't\(\))")


def solve(text: str, part) -> str:
    """Sum of all products, honouring do() and don't() in part two."""
    if part == Part.ONE:
        return str(sum(int(a) * int(b) for a, b in _MUL.findall(text)))

    total = 0
    enabled = True
    for match in _INSTRUCTION.finditer(text):
        if match.group(0) == "do()":
            enabled = True
        elif match.group(0) == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return str(total)