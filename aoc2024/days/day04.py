"""Day 4: word search for XMAS."""

from ..day import Part

_DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))
_WORDS = ("XMAS", "SAMX")
_CROSS = {"M", "S"}


def _grid(text: str) -> dict[tuple[int, int], str]:
    return {
        (row, col): char
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
    }


def _count_words(grid: dict[tuple[int, int], str]) -> int:
    count = 0
    for row, col in grid:
        for d_row, d_col in _DIRECTIONS:
            word = "".join(
                grid.get((row + d_row * k, col + d_col * k), ".") for k in range(4)
            )
            if word in _WORDS:
                count += 1
    return count


def _count_crosses(grid: dict[tuple[int, int], str]) -> int:
    count = 0
    for (row, col), char in grid.items():
        if char != "A":
            continue
        diagonal = {grid.get((row + 1, col + 1)), grid.get((row - 1, col - 1))}
        anti_diagonal = {grid.get((row + 1, col - 1)), grid.get((row - 1, col + 1))}
        if diagonal == _CROSS and anti_diagonal == _CROSS:
            count += 1
    return count


def solve(text: str, part) -> str:
    """Count XMAS in every direction (part one) or crossed MAS shapes (part two)."""
    grid = _grid(text)
    return str(_count_words(grid) if part == Part.ONE else _count_crosses(grid))