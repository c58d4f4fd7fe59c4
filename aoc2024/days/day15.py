"""Day 15: a robot pushing boxes around a warehouse."""

from dataclasses import dataclass

from ..day import Part

Position = tuple[int, int]

_MOVES = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}
_WIDE = {"#": "##", "O": "[]", ".": "..", "@": "@."}


def _shift(position: Position, move: Position) -> Position:
    return position[0] + move[0], position[1] + move[1]


@dataclass
class _Warehouse:
    walls: set[Position]
    # Every cell a box covers, mapped to the box's leftmost cell.
    boxes: dict[Position, Position]
    box_width: int
    robot: Position

    def _cells(self, origin: Position) -> list[Position]:
        row, col = origin
        return [(row, col + k) for k in range(self.box_width)]

    def _pushed_boxes(self, ahead: Position, move: Position) -> set[Position] | None:
        """The boxes a step would push, or None if something hits a wall."""
        pushed: set[Position] = set()
        stack = [ahead]
        while stack:
            cell = stack.pop()
            if cell in self.walls:
                return None
            origin = self.boxes.get(cell)
            if origin is None or origin in pushed:
                continue
            pushed.add(origin)
            stack.extend(_shift(part, move) for part in self._cells(origin))
        return pushed

    def step(self, move: Position) -> None:
        ahead = _shift(self.robot, move)
        pushed = self._pushed_boxes(ahead, move)
        if pushed is None:
            return
        moved = [(cell, origin) for origin in pushed for cell in self._cells(origin)]
        for cell, _ in moved:
            del self.boxes[cell]
        for cell, origin in moved:
            self.boxes[_shift(cell, move)] = _shift(origin, move)
        self.robot = ahead

    def gps_sum(self) -> int:
        return sum(100 * row + col for row, col in set(self.boxes.values()))


def _widen(line: str) -> str:
    try:
        return "".join(_WIDE[char] for char in line)
    except KeyError as error:
        raise ValueError(f"Invalid tile {error.args[0]!r}") from None


def _parse(text: str, part) -> tuple[_Warehouse, list[Position]]:
    lines = iter(text.splitlines())
    map_lines = []
    for line in lines:
        if not line:
            break
        map_lines.append(_widen(line) if part == Part.TWO else line)

    walls: set[Position] = set()
    boxes: dict[Position, Position] = {}
    robot = None
    for row, line in enumerate(map_lines):
        for col, char in enumerate(line):
            if char == "#":
                walls.add((row, col))
            elif char == "O":
                boxes[(row, col)] = (row, col)
            elif char == "[":
                boxes[(row, col)] = (row, col)
                boxes[(row, col + 1)] = (row, col)
            elif char == "@":
                robot = (row, col)
            elif char not in ".]":
                raise ValueError(f"Invalid tile {char!r}")
    if robot is None:
        raise ValueError("No robot on the map")

    moves = []
    for line in lines:
        for char in line:
            if char not in _MOVES:
                raise ValueError(f"Invalid direction {char!r}")
            moves.append(_MOVES[char])

    width = 2 if part == Part.TWO else 1
    return _Warehouse(walls, boxes, width, robot), moves


def solve(text: str, part) -> str:
    """Sum of box GPS coordinates after the robot's moves, on a normal or widened map."""
    warehouse, moves = _parse(text, part)
    for move in moves:
        warehouse.step(move)
    return str(warehouse.gps_sum())