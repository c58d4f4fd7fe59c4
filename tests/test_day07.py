import pytest

from aoc2024.day import Part
from aoc2024.days.day07 import solve

EXAMPLE = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_example_part_one():
    assert solve(EXAMPLE, Part.ONE) == "3749"


def test_example_part_two():
    assert solve(EXAMPLE, Part.TWO) == "11387"


def test_every_part_one_equation_holds_in_part_two():
    for line in EXAMPLE.splitlines():
        if solve(line, Part.ONE) != solve("", Part.ONE):
            assert solve(line, Part.TWO) == solve(line, Part.ONE)


def test_concatenation_only_in_part_two():
    assert solve("156: 15 6", Part.ONE) == solve("", Part.ONE)
    assert solve("156: 15 6", Part.TWO) == "156"


def test_concatenation_with_zero():
    assert solve("100: 10 0", Part.TWO) == "100"


def test_early_match_counts_only_in_part_one():
    assert solve("5: 5 3", Part.ONE) == "5"
    assert solve("5: 5 3", Part.TWO) == solve("", Part.TWO)


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        solve("abc", Part.ONE)