import pytest

from aoc2024.day import Part
from aoc2024.days.day09 import solve

EXAMPLE = "2333133121414131402\n"


def test_example_part_one():
    assert solve(EXAMPLE, Part.ONE) == "1928"


def test_example_part_two():
    assert solve(EXAMPLE, Part.TWO) == "2858"


@pytest.mark.parametrize("part", [Part.ONE, Part.TWO])
def test_trailing_free_space_changes_nothing(part):
    assert solve(EXAMPLE.strip() + "9", part) == solve(EXAMPLE, part)


@pytest.mark.parametrize("part", [Part.ONE, Part.TWO])
def test_trailing_newline_is_ignored(part):
    assert solve(EXAMPLE.strip(), part) == solve(EXAMPLE, part)


def test_without_free_space_both_parts_agree():
    packed = "90807"
    assert solve(packed, Part.ONE) == solve(packed, Part.TWO)


def test_multiple_lines_raise():
    with pytest.raises(ValueError):
        solve("123\n456\n", Part.ONE)


def test_empty_input_raises():
    with pytest.raises(ValueError):
        solve("", Part.TWO)


def test_non_digit_raises():
    with pytest.raises(ValueError):
        solve("12a4", Part.ONE)