"""Day 8: antinodes of resonant antenna pairs."""

from collections import defaultdict
from collections.abc import Iterator
from itertools import permutations

from ..day import Part

Position = tuple[int, int]


def _ray(start: Position, step: Position, rows: int, cols: int) -> Iterator[Position]:
    """Points start + k*step for k = 1, 2, ... while inside the map."""
    row, col = start
    while True:
        row += step[0]
        col += step[1]
        if not (0 <= row < rows and 0 <= col < cols):
            return
        yield row, col


def _show(lines: list[str], antinodes: set[Position]) -> None:
    for row, line in enumerate(lines):
        print("".join("#" if (row, col) in antinodes else ch for col, ch in enumerate(line)))


def solve(text: str, part) -> str:
    """Number of map tiles holding an antinode."""
    lines = text.splitlines()
    rows = len(lines)
    cols = len(lines[0]) if lines else 0

    antennas: dict[str, list[Position]] = defaultdict(list)
    for row, line in enumerate(lines):
        for col, char in enumerate(line[:cols]):
            if char != ".":
                antennas[char].append((row, col))

    antinodes: set[Position] = set()
    for positions in antennas.values():
        for center, other in permutations(positions, 2):
            step = (center[0] - other[0], center[1] - other[1])
            ray = _ray(center, step, rows, cols)
            if part == Part.ONE:
                antinodes.update(next(ray, None) for _ in (0,) if True)
                antinodes.discard(None)
            else:
                antinodes.update(ray)
                antinodes.add(center)

    _show(lines, antinodes)
    return str(len(antinodes))