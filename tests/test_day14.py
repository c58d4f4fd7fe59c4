import pytest

from aoc2024.day import Part
from aoc2024.days.day14 import solve

CORNERS = [
    "p=0,0 v=0,0",
    "p=100,0 v=0,0",
    "p=0,102 v=0,0",
    "p=100,102 v=0,0",
]


def _robots(*lines: str) -> str:
    return "\n".join(lines)


def test_one_robot_per_quadrant():
    assert solve(_robots(*CORNERS), Part.ONE) == "1"


def test_two_robots_in_one_quadrant():
    assert solve(_robots(*CORNERS, "p=1,1 v=0,0"), Part.ONE) == "2"


def test_robots_on_middle_lines_are_ignored():
    with_middle = _robots(*CORNERS, "p=50,10 v=0,0", "p=10,51 v=0,0")
    assert solve(with_middle, Part.ONE) == solve(_robots(*CORNERS), Part.ONE)


def test_negative_velocity_wraps_around():
    moving = _robots("p=0,0 v=-1,-1", *CORNERS[1:])
    parked = _robots("p=1,3 v=0,0", *CORNERS[1:])
    assert solve(moving, Part.ONE) == solve(parked, Part.ONE)


def test_empty_quadrant_gives_zero_factor():
    assert solve(_robots(*CORNERS[:3]), Part.ONE) == solve(_robots(CORNERS[0]), Part.ONE)


def test_distinct_robots_separate_at_first_second():
    assert solve(_robots(*CORNERS), Part.TWO) == "1"


def test_robots_that_separate_later():
    # Same velocity keeps them together; a different one separates them.
    together = _robots("p=5,5 v=1,0", "p=5,5 v=1,0", "p=5,5 v=2,0")
    with pytest.raises(ValueError):
        solve(together, Part.TWO)


def test_stacked_stationary_robots_never_separate():
    with pytest.raises(ValueError):
        solve(_robots("p=3,4 v=0,0", "p=3,4 v=0,0"), Part.TWO)


def test_malformed_robot_raises():
    with pytest.raises(ValueError):
        solve("p=1,2 velocity", Part.ONE)