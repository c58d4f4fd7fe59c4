"""Day 13: pressing claw machine buttons to win prizes."""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice

from ..day import Part

PRICE_A = 3
PRICE_B = 1
PART_TWO_OFFSET = 10000000000000

_BUTTON_A = re.compile(r"Button A: X\+(\d+), Y\+(\d+)")
_BUTTON_B = re.compile(r"Button B: X\+(\d+), Y\+(\d+)")
_PRIZE = re.compile(r"Prize: X=(\d+), Y=(\d+)")


@dataclass(frozen=True)
class _Machine:
    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int


def _pair(pattern: re.Pattern, line: str) -> tuple[int, int]:
    match = pattern.search(line)
    if match is None:
        raise ValueError(f"Malformed line: {line!r}")
    return int(match.group(1)), int(match.group(2))


def _machines(text: str) -> Iterator[_Machine]:
    lines = iter(text.splitlines())
    while chunk := list(islice(lines, 4)):
        if len(chunk) < 3:
            raise ValueError("Incomplete machine description")
        ax, ay = _pair(_BUTTON_A, chunk[0])
        bx, by = _pair(_BUTTON_B, chunk[1])
        px, py = _pair(_PRIZE, chunk[2])
        yield _Machine(ax, ay, bx, by, px, py)


def _cheapest_search(machine: _Machine) -> int | None:
    costs = []
    for a in range(machine.py // machine.ay + 1):
        remainder = machine.py - a * machine.ay
        if remainder % machine.by:
            continue
        b = remainder // machine.by
        if a * machine.ax + b * machine.bx == machine.px:
            costs.append(a * PRICE_A + b * PRICE_B)
    return min(costs, default=None)


def _cheapest_exact(machine: _Machine) -> int | None:
    # Cramer's rule; only whole, non-negative press counts win.
    px = machine.px + PART_TWO_OFFSET
    py = machine.py + PART_TWO_OFFSET
    det = machine.ax * machine.by - machine.bx * machine.ay
    if det == 0:
        return None
    a_numerator = px * machine.by - machine.bx * py
    b_numerator = machine.ax * py - px * machine.ay
    if a_numerator % det or b_numerator % det:
        return None
    a, b = a_numerator // det, b_numerator // det
    if a < 0 or b < 0:
        return None
    return a * PRICE_A + b * PRICE_B


def solve(text: str, part) -> str:
    """Fewest tokens needed to win every winnable prize."""
    cheapest = _cheapest_search if part == Part.ONE else _cheapest_exact
    costs = (cheapest(machine) for machine in _machines(text))
    return str(sum(cost for cost in costs if cost is not None))