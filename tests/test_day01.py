import pytest

from aoc2024.day import Part
from aoc2024.days.day01 import solve

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def _swap(text):
    return "".join(
        "   ".join(reversed(line.split("   "))) + "\n" for line in text.splitlines()
    )


def test_part_one_example():
    assert solve(EXAMPLE, Part.ONE) == "11"


def test_part_two_example():
    assert solve(EXAMPLE, Part.TWO) == "31"


def test_part_one_symmetric_in_columns():
    assert solve(_swap(EXAMPLE), Part.ONE) == solve(EXAMPLE, Part.ONE)


def test_identical_columns_have_no_distance():
    assert solve("5   5\n7   7\n", Part.ONE) == "0"


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        solve("1 2\n", Part.ONE)