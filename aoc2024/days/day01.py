"""Day 1: comparing two lists of location ids."""

from collections import Counter

from ..day import Part


def _parse(text: str) -> tuple[list[int], list[int]]:
    left, right = [], []
    for line in text.splitlines():
        first, second = line.split("   ", 1)
        left.append(int(first))
        right.append(int(second))
    return left, right


def solve(text: str, part) -> str:
    """Total distance of the sorted lists (part one) or their similarity score (part two)."""
    left, right = _parse(text)
    if part == Part.ONE:
        return str(sum(abs(a - b) for a, b in zip(sorted(left), sorted(right))))
    counts = Counter(right)
    return str(sum(value * counts[value] for value in left))