import pytest

from aoc2024.day import Part
from aoc2024.days.day04 import solve

EXAMPLE = (
    "MMMSXXMASM\n"
    "MSAMXMSMSA\n"
    "AMXSXMAAMM\n"
    "MSAMASMSMX\n"
    "XMASAMXAMM\n"
    "XXAMMXXAMA\n"
    "SMSMSASXSS\n"
    "SAXAMASAAA\n"
    "MAMMMXMMMM\n"
    "MXMXAXMASX\n"
)


def _transpose(text):
    return "\n".join("".join(column) for column in zip(*text.splitlines()))


def _mirror(text):
    return "\n".join(line[::-1] for line in text.splitlines())


def test_part_one_example():
    assert solve(EXAMPLE, Part.ONE) == "18"


def test_part_two_example():
    assert solve(EXAMPLE, Part.TWO) == "9"


@pytest.mark.parametrize("part", [Part.ONE, Part.TWO])
def test_transpose_invariant(part):
    assert solve(_transpose(EXAMPLE), part) == solve(EXAMPLE, part)


@pytest.mark.parametrize("part", [Part.ONE, Part.TWO])
def test_mirror_invariant(part):
    assert solve(_mirror(EXAMPLE), part) == solve(EXAMPLE, part)