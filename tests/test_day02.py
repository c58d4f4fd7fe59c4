import pytest

from aoc2024.day import Part
from aoc2024.days.day02 import solve

EXAMPLE = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9\n"


def _reverse_reports(text):
    return "\n".join(" ".join(reversed(line.split(" "))) for line in text.splitlines())


def test_part_one_example():
    assert solve(EXAMPLE, Part.ONE) == "2"


def test_part_two_example():
    assert solve(EXAMPLE, Part.TWO) == "4"


@pytest.mark.parametrize("part", [Part.ONE, Part.TWO])
def test_reversed_reports_keep_count(part):
    assert solve(_reverse_reports(EXAMPLE), part) == solve(EXAMPLE, part)


def test_dampener_never_lowers_count():
    assert int(solve(EXAMPLE, Part.TWO)) >= int(solve(EXAMPLE, Part.ONE))


def test_non_numeric_level_raises():
    with pytest.raises(ValueError):
        solve("1 two 3\n", Part.ONE)