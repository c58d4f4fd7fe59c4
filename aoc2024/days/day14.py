"""Day 14: security robots wandering a bathroom."""

import re
from dataclasses import dataclass

from ..day import Part

WIDTH = 101
HEIGHT = 103
SIMULATION_TIME = 100

_ROBOT = re.compile(r"p=(\d+),(\d+) v=(-?\d+),(-?\d+)")


@dataclass(frozen=True)
class _Robot:
    x: int
    y: int
    vx: int
    vy: int

    def position_at(self, seconds: int) -> tuple[int, int]:
        return (self.x + self.vx * seconds) % WIDTH, (self.y + self.vy * seconds) % HEIGHT


def _parse(text: str) -> list[_Robot]:
    robots = []
    for line in text.splitlines():
        match = _ROBOT.search(line)
        if match is None:
            raise ValueError(f"Malformed robot: {line!r}")
        robots.append(_Robot(*(int(value) for value in match.groups())))
    return robots


def _safety_factor(robots: list[_Robot]) -> int:
    quadrants = [0, 0, 0, 0]
    mid_x, mid_y = WIDTH // 2, HEIGHT // 2
    for robot in robots:
        x, y = robot.position_at(SIMULATION_TIME)
        if x == mid_x or y == mid_y:
            continue
        quadrants[2 * (x > mid_x) + (y > mid_y)] += 1
    product = 1
    for count in quadrants:
        product *= count
    return product


def _first_distinct_second(robots: list[_Robot]) -> int:
    # Positions repeat after WIDTH * HEIGHT seconds, so looking further is futile.
    for second in range(1, WIDTH * HEIGHT + 1):
        positions = {robot.position_at(second) for robot in robots}
        if len(positions) == len(robots):
            return second
    raise ValueError("Robots never all stand on distinct tiles")


def solve(text: str, part) -> str:
    """Safety factor after 100 seconds (part one) or the first second with no shared tile."""
    robots = _parse(text)
    if part == Part.ONE:
        return str(_safety_factor(robots))
    return str(_first_distinct_second(robots))