"""Day 12: fencing garden regions."""

from collections.abc import Iterator

from ..day import Part

Position = tuple[int, int]

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _regions(text: str) -> Iterator[set[Position]]:
    grid = {
        (row, col): char
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
    }
    seen: set[Position] = set()
    for origin, plant in grid.items():
        if origin in seen:
            continue
        region = {origin}
        seen.add(origin)
        stack = [origin]
        while stack:
            row, col = stack.pop()
            for d_row, d_col in _STEPS:
                neighbour = (row + d_row, col + d_col)
                if neighbour not in seen and grid.get(neighbour) == plant:
                    seen.add(neighbour)
                    region.add(neighbour)
                    stack.append(neighbour)
        yield region


def _perimeter(region: set[Position]) -> int:
    return sum(
        1
        for row, col in region
        for d_row, d_col in _STEPS
        if (row + d_row, col + d_col) not in region
    )


def _sides(region: set[Position]) -> int:
    """Count fence edges that start a side; the rest continue one."""
    count = 0
    for row, col in region:
        for d_row, d_col in _STEPS:
            if (row + d_row, col + d_col) in region:
                continue
            # Horizontal edges continue from the left, vertical ones from above.
            previous = (row - abs(d_col), col - abs(d_row))
            continues = (
                previous in region
                and (previous[0] + d_row, previous[1] + d_col) not in region
            )
            if not continues:
                count += 1
    return count


def solve(text: str, part) -> str:
    """Total fence price: area times perimeter (part one) or times sides (part two)."""
    measure = _perimeter if part == Part.ONE else _sides
    return str(sum(len(region) * measure(region) for region in _regions(text)))