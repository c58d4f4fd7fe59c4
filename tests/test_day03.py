from aoc2024.day import Part
from aoc2024.days.day03 import solve

EXAMPLE_ONE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_TWO = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part_one_example():
    assert solve(EXAMPLE_ONE, Part.ONE) == "161"


def test_part_two_example():
    assert solve(EXAMPLE_TWO, Part.TWO) == "48"


def test_disabled_multiplication_ignored():
    assert solve("don't()mul(2,3)", Part.TWO) == "0"


def test_part_two_without_toggles_matches_part_one():
    assert solve(EXAMPLE_ONE, Part.TWO) == solve(EXAMPLE_ONE, Part.ONE)


def test_do_reenables():
    assert solve("don't()mul(2,3)do()mul(4,5)", Part.TWO) == solve("mul(4,5)", Part.ONE)