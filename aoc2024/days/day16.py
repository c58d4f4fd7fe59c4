"""Day 16: the cheapest routes through the reindeer maze."""

import heapq
from collections import defaultdict

from ..day import Part

Position = tuple[int, int]
State = tuple[Position, Position]

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_EAST = (0, 1)
_STEP_COST = 1
_TURN_COST = 1000


def _parse(lines: list[str]) -> tuple[set[Position], Position, Position]:
    open_cells: set[Position] = set()
    start = end = None
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char == "#":
                continue
            if char == "S":
                start = (row, col)
            elif char == "E":
                end = (row, col)
            elif char != ".":
                raise ValueError(f"Invalid tile {char!r}")
            open_cells.add((row, col))
    if start is None or end is None:
        raise ValueError("Maze needs a start and an end")
    return open_cells, start, end


def _best_routes(open_cells: set[Position], start: Position, end: Position) -> tuple[int, set[Position]]:
    """Lowest score from start to end and every tile on some route with that score."""
    origin: State = (start, _EAST)
    dist: dict[State, int] = {origin: 0}
    preds: dict[State, list[State]] = defaultdict(list)
    heap = [(0, start, _EAST)]
    while heap:
        cost, position, heading = heapq.heappop(heap)
        if cost > dist[(position, heading)]:
            continue
        for step in _STEPS:
            if step == (-heading[0], -heading[1]):
                continue
            ahead = (position[0] + step[0], position[1] + step[1])
            if ahead not in open_cells:
                continue
            new_cost = cost + _STEP_COST + (0 if step == heading else _TURN_COST)
            state = (ahead, step)
            known = dist.get(state)
            if known is None or new_cost < known:
                dist[state] = new_cost
                preds[state] = [(position, heading)]
                heapq.heappush(heap, (new_cost, ahead, step))
            elif new_cost == known:
                preds[state].append((position, heading))

    finals = [state for state in dist if state[0] == end]
    if not finals:
        raise ValueError("No route from start to end")
    best = min(dist[state] for state in finals)

    on_route = {state for state in finals if dist[state] == best}
    stack = list(on_route)
    while stack:
        for previous in preds[stack.pop()]:
            if previous not in on_route:
                on_route.add(previous)
                stack.append(previous)
    return best, {position for position, _ in on_route}


def _show(lines: list[str], tiles: set[Position]) -> None:
    for row, line in enumerate(lines):
        print(
            "".join(
                "O" if (row, col) in tiles else ("#" if char == "#" else ".")
                for col, char in enumerate(line)
            )
        )


def solve(text: str, part) -> str:
    """Lowest score (part one) or number of tiles on any best route (part two)."""
    lines = text.splitlines()
    open_cells, start, end = _parse(lines)
    best, tiles = _best_routes(open_cells, start, end)
    _show(lines, tiles)
    return str(best if part == Part.ONE else len(tiles))