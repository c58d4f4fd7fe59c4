import pytest

from aoc2024.day import Part
from aoc2024.days.day06 import solve

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

_ROTATED_HEADING = {"^": ">", ">": "v", "v": "<", "<": "^"}


def _rotate_clockwise(text: str) -> str:
    lines = text.splitlines()
    height = len(lines)
    rotated = []
    for new_row in range(len(lines[0])):
        chars = (lines[height - 1 - c][new_row] for c in range(height))
        rotated.append("".join(_ROTATED_HEADING.get(ch, ch) for ch in chars))
    return "\n".join(rotated) + "\n"


def test_example_part_one():
    assert solve(EXAMPLE, Part.ONE) == "41"


def test_example_part_two():
    assert solve(EXAMPLE, Part.TWO) == "6"


@pytest.mark.parametrize("part", [Part.ONE, Part.TWO])
def test_rotation_does_not_change_answer(part):
    rotated = _rotate_clockwise(EXAMPLE)
    assert solve(rotated, part) == solve(EXAMPLE, part)


def test_visited_tiles_bounded_by_open_cells():
    open_cells = sum(EXAMPLE.count(ch) for ch in ".^")
    assert 1 <= int(solve(EXAMPLE, Part.ONE)) <= open_cells


def test_trapped_guard_stops():
    trapped = ".#..\n.^.#\n#...\n..#.\n"
    assert solve(trapped, Part.ONE) == "4"


def test_invalid_tile_raises():
    with pytest.raises(ValueError):
        solve("..x\n.^.\n", Part.ONE)


def test_missing_guard_raises():
    with pytest.raises(ValueError):
        solve("...\n.#.\n", Part.ONE)