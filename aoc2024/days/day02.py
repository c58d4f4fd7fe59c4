"""Day 2: counting safe reactor reports."""

from itertools import pairwise

from ..day import Part


def _is_safe(levels: list[int]) -> bool:
    increasing = levels[0] < levels[1]
    for a, b in pairwise(levels):
        if (a > b) if increasing else (a < b):
            return False
        if not 1 <= abs(a - b) <= 3:
            return False
    return True


def _is_safe_dampened(levels: list[int]) -> bool:
    return _is_safe(levels) or any(
        _is_safe(levels[:i] + levels[i + 1:]) for i in range(len(levels))
    )


def solve(text: str, part) -> str:
    """Number of safe reports, tolerating one bad level in part two."""
    reports = [[int(n) for n in line.split(" ")] for line in text.splitlines()]
    check = _is_safe if part == Part.ONE else _is_safe_dampened
    return str(sum(1 for levels in reports if check(levels)))