"""Day 18: escaping a memory grid while bytes keep falling."""

from collections import deque
from collections.abc import Sequence

from ..day import Part

Position = tuple[int, int]

GRID_SIZE = 71
START_POS: Position = (0, 0)
DEST_POS: Position = (70, 70)
FALLEN_BYTES = 1024

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def find_path(start: Position, dest: Position, blocked: Sequence[Sequence[bool]]) -> list[Position]:
    """A shortest path of (x, y) steps from start to dest, excluding start; empty if none.

    ``blocked[y][x]`` is true for corrupted cells.
    """
    height = len(blocked)
    width = len(blocked[0])
    parents: dict[Position, Position | None] = {start: None}
    queue = deque([start])
    while queue:
        position = queue.popleft()
        if position == dest:
            path = []
            while position != start:
                path.append(position)
                position = parents[position]
            return path[::-1]
        x, y = position
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if (nx, ny) in parents or blocked[ny][nx]:
                continue
            parents[(nx, ny)] = position
            queue.append((nx, ny))
    return []


def _parse(text: str) -> list[Position]:
    bytes_ = []
    for line in text.splitlines():
        x, y = line.split(",", 1)
        bytes_.append((int(x), int(y)))
    return bytes_


def _show(blocked: list[list[bool]], path: list[Position]) -> None:
    on_path = set(path)
    for y, row in enumerate(blocked):
        print(
            "".join(
                "O" if (x, y) in on_path else ("#" if cell else ".")
                for x, cell in enumerate(row)
            )
        )


def solve(text: str, part) -> str:
    """Steps to the exit after 1024 bytes (part one) or the first byte that cuts it off."""
    bytes_ = _parse(text)
    blocked = [[False] * GRID_SIZE for _ in range(GRID_SIZE)]
    for x, y in bytes_[:FALLEN_BYTES]:
        blocked[y][x] = True

    if part == Part.ONE:
        path = find_path(START_POS, DEST_POS, blocked)
        _show(blocked, path)
        return str(len(path))

    last = (0, 0)
    remaining = iter(bytes_[FALLEN_BYTES:])
    while find_path(START_POS, DEST_POS, blocked):
        try:
            last = next(remaining)
        except StopIteration:
            raise ValueError("The exit never gets cut off") from None
        blocked[last[1]][last[0]] = True
    return f"{last[0]},{last[1]}"