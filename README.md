# aoc2024

Solutions for the 2024 Advent of Code puzzles (days 1 to 18), with helpers
that fetch puzzle inputs, pull the worked example and its answer out of a
puzzle page, cache both as files, and submit answers to the site.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Solving a puzzle

Every day lives in `aoc2024.days` as a module (`day01` to `day18`) with a
`solve(text, part)` function. It takes the puzzle input as a string and a
`Part` from `aoc2024.day`, and returns the answer as a string:

```python
from aoc2024.day import Part
from aoc2024.days import day01

text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
print(day01.solve(text, Part.ONE))  # 11
```

`aoc2024.registry.run_day(day, text, part)` picks the solver for a day. `day`
may be a `Day` member or its number. A number outside 1 to 25 raises
`ValueError`; days 19 to 25 have no solver and raise `UnsolvedDayError`.

A few solvers print a picture of the map they worked on (days 8, 16 and 18),
and day 17 part two prints its search progress.

## Inputs and examples

`aoc2024.inputs.Input` holds an input `text` and its known `solution`, if any.

- `Input.load(day, part, debug=False, resources=None, client=None)` reads the
  input from the cache directory (`resources` in the working directory unless
  another is given). With `debug=True` it loads the puzzle's example instead.
  What is missing is downloaded with `client` (a new `AocClient` if none is
  given) and written to the cache:
  - real input: `day_<day>_<part>_src.txt`, plus an empty
    `day_<day>_<part>_sol.txt` — write the accepted answer into it to have it
    available later;
  - example: `day_<day>_<part>_dbg.txt` and `day_<day>_<part>_dbg_sol.txt`.
- `Input.custom(source, solution)` builds an input directly.
- `extract_example(html, part)` returns the example input and example answer
  from a puzzle page, raising `ExampleNotFoundError` if it finds none.

## Talking to the site

`aoc2024.api.AocClient(session_cookie=None)` wraps an authenticated session.
Without an argument it takes the cookie from the `AOC_SESSION_COOKIE`
environment variable (see `session_from_env()`), which you set to the value of
the `session` cookie from your browser:

```
export AOC_SESSION_COOKIE=placeholder
```

- `get_input(day)` downloads your puzzle input.
- `get_page(day)` downloads the puzzle description page.
- `submit_solution(day, part, solution)` posts an answer and returns a
  `SolutionResult`: `CORRECT`, `INCORRECT`, `RATE_LIMITED` or
  `ALREADY_COMPLETED`. A page that says none of these raises
  `UnexpectedResponseError`; `classify_response(html)` does this reading on
  its own.

HTTP errors are raised by `requests`.

## What is not included

The package has no command-line program. Checking a day against its example,
timing the real run and submitting the answer are done by calling the
functions above from your own code.