"""Day 7: restoring operators in calibration equations."""

from ..day import Part


def _parse(text: str) -> list[tuple[int, list[int]]]:
    equations = []
    for line in text.splitlines():
        target, numbers = line.split(": ", 1)
        equations.append((int(target), [int(n) for n in numbers.split(" ")]))
    return equations


def _solvable(target: int, value: int, numbers: list[int], index: int) -> bool:
    # Matching the target early counts, even with numbers left over.
    if value == target:
        return True
    if value > target or index == len(numbers):
        return False
    number = numbers[index]
    return _solvable(target, value * number, numbers, index + 1) or _solvable(
        target, value + number, numbers, index + 1
    )


def _solvable_with_concat(target: int, value: int, numbers: list[int], index: int) -> bool:
    if value == target and index == len(numbers):
        return True
    if value > target or index >= len(numbers):
        return False
    number = numbers[index]
    return (
        _solvable_with_concat(target, value * number, numbers, index + 1)
        or _solvable_with_concat(target, value + number, numbers, index + 1)
        or _solvable_with_concat(target, int(f"{value}{number}"), numbers, index + 1)
    )


def solve(text: str, part) -> str:
    """Sum of the targets that some choice of operators can reach."""
    check = _solvable if part == Part.ONE else _solvable_with_concat
    return str(
        sum(target for target, numbers in _parse(text) if check(target, numbers[0], numbers, 1))
    )