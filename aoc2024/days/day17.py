"""Day 17: a three-bit computer and the value that makes it print itself."""

import heapq
import re
from collections.abc import Callable, Sequence

from ..day import Part

_PROGRAM = re.compile(
    r"Register A: (\d+)\nRegister B: (\d+)\nRegister C: (\d+)\n\nProgram: ([\d,]+)"
)


def _combo(operand: int, a: int, b: int, c: int) -> int:
    if operand <= 3:
        return operand
    if operand == 4:
        return a
    if operand == 5:
        return b
    if operand == 6:
        return c
    if operand == 7:
        raise ValueError("Combo operand 7 is reserved")
    raise ValueError(f"Invalid operand {operand}")


def run_program(
    a: int,
    b: int,
    c: int,
    program: Sequence[int],
    should_stop: Callable[[int], bool] | None = None,
) -> list[int]:
    """Run the program and return its output.

    ``should_stop`` sees each output value after it is recorded; returning True halts.
    """
    output: list[int] = []
    ip = 0
    while ip < len(program):
        opcode, operand = program[ip], program[ip + 1]
        if opcode == 0:
            a >>= _combo(operand, a, b, c)
        elif opcode == 1:
            b ^= operand
        elif opcode == 2:
            b = _combo(operand, a, b, c) % 8
        elif opcode == 3:
            if a != 0:
                ip = operand
                continue
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            value = _combo(operand, a, b, c) % 8
            output.append(value)
            if should_stop is not None and should_stop(value):
                break
        elif opcode == 6:
            b = a >> _combo(operand, a, b, c)
        elif opcode == 7:
            c = a >> _combo(operand, a, b, c)
        else:
            raise ValueError(f"Invalid opcode {opcode}")
        ip += 2
    return output


def _parse(text: str) -> tuple[int, int, int, list[int]]:
    match = _PROGRAM.search(text)
    if match is None:
        raise ValueError("Malformed program description")
    a, b, c = (int(match.group(i)) for i in (1, 2, 3))
    program = [int(value) for value in match.group(4).split(",")]
    return a, b, c, program


def _matching_outputs(a: int, b: int, c: int, program: list[int], start: int) -> int:
    """How many leading outputs equal the program from index ``start`` on."""
    expected = iter(program[start:])
    matched = 0

    def stop(value: int) -> bool:
        nonlocal matched
        if next(expected, None) == value:
            matched += 1
            return False
        return True

    run_program(a, b, c, program, stop)
    return matched


def _self_reproducing(b: int, c: int, program: list[int]) -> int:
    # Build register A three bits at a time, matching the program from its end.
    heap = [(0, 0)]
    while heap:
        negative_len, base = heapq.heappop(heap)
        current = -negative_len
        print(f"current a: {base:#o}")
        for offset in range(8):
            candidate = (base << 3) | offset
            matched = _matching_outputs(candidate, b, c, program, len(program) - current - 1)
            if matched == current + 1:
                if matched == len(program):
                    return candidate
                heapq.heappush(heap, (-matched, candidate))
    raise ValueError("No value of register A makes the program print itself")


def solve(text: str, part) -> str:
    """The program's output (part one) or the lowest A that outputs the program (part two)."""
    a, b, c, program = _parse(text)
    if part == Part.ONE:
        return ",".join(str(value) for value in run_program(a, b, c, program))
    return str(_self_reproducing(b, c, program))