"""Day 6: a patrolling guard in a lab full of obstacles."""

from dataclasses import dataclass

from ..day import Part

_HEADINGS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_TURN_RIGHT = {(-1, 0): (0, 1), (0, 1): (1, 0), (1, 0): (0, -1), (0, -1): (-1, 0)}

Position = tuple[int, int]


@dataclass(frozen=True)
class _Lab:
    rows: int
    cols: int
    obstacles: frozenset[Position]
    open_cells: tuple[Position, ...]
    start: Position
    heading: Position

    @property
    def step_limit(self) -> int:
        # The lab is surrounded by a one-tile border; the walk never takes
        # more steps than that padded area holds.
        return (self.rows + 2) * (self.cols + 2)

    def inside(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols


def _parse(text: str) -> _Lab:
    lines = text.splitlines()
    if not lines:
        raise ValueError("Empty lab map")
    obstacles = set()
    open_cells = []
    start = None
    heading = None
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char == "#":
                obstacles.add((row, col))
                continue
            if char in _HEADINGS:
                start, heading = (row, col), _HEADINGS[char]
            elif char != ".":
                raise ValueError(f"Invalid tile {char!r}")
            open_cells.append((row, col))
    if start is None or heading is None:
        raise ValueError("No guard on the map")
    return _Lab(len(lines), len(lines[0]), frozenset(obstacles), tuple(open_cells), start, heading)


def _patrol(lab: _Lab, extra: Position | None = None) -> tuple[dict[Position, set], bool]:
    """Walk the guard; return the headings seen on each tile and whether it loops."""
    obstacles = lab.obstacles
    # An obstacle placed where the guard stands is trampled at once.
    if extra is not None and extra != lab.start:
        obstacles = obstacles | {extra}

    seen: dict[Position, set] = {}
    position, heading = lab.start, lab.heading
    for _ in range(lab.step_limit):
        headings = seen.setdefault(position, set())
        if heading in headings:
            return seen, True
        headings.add(heading)
        ahead = (position[0] + heading[0], position[1] + heading[1])
        if not lab.inside(ahead):
            break
        if ahead in obstacles:
            heading = _TURN_RIGHT[heading]
        else:
            position = ahead
    return seen, False


def solve(text: str, part) -> str:
    """Tiles the guard visits (part one) or obstacle spots that trap it in a loop (part two)."""
    lab = _parse(text)
    if part == Part.ONE:
        visited, _ = _patrol(lab)
        return str(len(visited))
    return str(sum(1 for cell in lab.open_cells if _patrol(lab, cell)[1]))