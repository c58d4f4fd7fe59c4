import pytest

from aoc2024.day import Day, Part


def test_day_from_number():
    assert Day(1) is Day.DAY1
    assert Day(25) is Day.DAY25


def test_day_to_number():
    day = Day(17)
    assert day is Day.DAY17
    assert int(day) == 17


def test_days_are_consecutive():
    numbers = [int(Day(number)) for number in range(1, 26)]
    assert numbers == list(range(1, 26))
    assert [int(day) for day in Day] == numbers


@pytest.mark.parametrize("number", [0, 26, 255])
def test_invalid_day_rejected(number):
    with pytest.raises(ValueError):
        Day(number)


def test_part_levels():
    assert int(Part.ONE) == 1
    assert int(Part.TWO) == 2
    assert Part(2) is Part.TWO


def test_invalid_part_rejected():
    with pytest.raises(ValueError):
        Part(3)