"""Day 11: stones that change every time you blink."""

from collections import Counter

from ..day import Part

PART_ONE_BLINKS = 25
PART_TWO_BLINKS = 75


def _blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def _count_after(stones: list[int], blinks: int) -> int:
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, number in counts.items():
            for successor in _blink(stone):
                following[successor] += number
        counts = following
    return sum(counts.values())


def solve(text: str, part) -> str:
    """Number of stones after 25 (part one) or 75 (part two) blinks."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("No stones given")
    stones = [int(value) for value in lines[0].split(" ")]
    blinks = PART_ONE_BLINKS if part == Part.ONE else PART_TWO_BLINKS
    return str(_count_after(stones, blinks))