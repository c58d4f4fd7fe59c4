"""Day 10: hiking trails on a topographic map."""

from ..day import Part

Position = tuple[int, int]

_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _parse(text: str) -> dict[Position, int]:
    return {
        (row, col): int(char)
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
        if char != "."
    }


def _uphill(grid: dict[Position, int], position: Position) -> list[Position]:
    height = grid[position] + 1
    row, col = position
    return [
        (row + d_row, col + d_col)
        for d_row, d_col in _STEPS
        if grid.get((row + d_row, col + d_col)) == height
    ]


def _summits(
    grid: dict[Position, int], position: Position, memo: dict[Position, frozenset[Position]]
) -> frozenset[Position]:
    """The height-9 tiles reachable from a position by climbing one step at a time."""
    if position not in memo:
        if grid[position] == 9:
            memo[position] = frozenset({position})
        else:
            memo[position] = frozenset().union(
                *(_summits(grid, nxt, memo) for nxt in _uphill(grid, position))
            )
    return memo[position]


def _trails(grid: dict[Position, int], position: Position, memo: dict[Position, int]) -> int:
    """The number of distinct hiking trails from a position to any height-9 tile."""
    if position not in memo:
        if grid[position] == 9:
            memo[position] = 1
        else:
            memo[position] = sum(_trails(grid, nxt, memo) for nxt in _uphill(grid, position))
    return memo[position]


def solve(text: str, part) -> str:
    """Sum of trailhead scores (part one) or trailhead ratings (part two)."""
    grid = _parse(text)
    trailheads = [position for position, height in grid.items() if height == 0]
    if part == Part.ONE:
        summit_memo: dict[Position, frozenset[Position]] = {}
        return str(sum(len(_summits(grid, head, summit_memo)) for head in trailheads))
    trail_memo: dict[Position, int] = {}
    return str(sum(_trails(grid, head, trail_memo) for head in trailheads))