"""Dispatch from a puzzle day to its solver."""

from collections.abc import Callable

from .day import Day
from .days import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
)

Solver = Callable[[str, object], str]


class UnsolvedDayError(NotImplementedError):
    """The requested day has no solver yet."""


_SOLVERS: dict[Day, Solver] = {
    Day.DAY1: day01.solve,
    Day.DAY2: day02.solve,
    Day.DAY3: day03.solve,
    Day.DAY4: day04.solve,
    Day.DAY5: day05.solve,
    Day.DAY6: day06.solve,
    Day.DAY7: day07.solve,
    Day.DAY8: day08.solve,
    Day.DAY9: day09.solve,
    Day.DAY10: day10.solve,
    Day.DAY11: day11.solve,
    Day.DAY12: day12.solve,
    Day.DAY13: day13.solve,
    Day.DAY14: day14.solve,
    Day.DAY15: day15.solve,
    Day.DAY16: day16.solve,
    Day.DAY17: day17.solve,
    Day.DAY18: day18.solve,
}


def run_day(day, text: str, part) -> str:
    """Solve one part of a day's puzzle for the given input text.

    Raises ValueError for a number that is not a day of the event and
    UnsolvedDayError for a day without a solver.
    """
    day = Day(day)
    try:
        solver = _SOLVERS[day]
    except KeyError:
        raise UnsolvedDayError(f"Day {int(day)} is not solved yet") from None
    return solver(text, part)