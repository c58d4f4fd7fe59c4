"""Day 5: ordering rules for print queue updates."""

from collections import defaultdict
from itertools import pairwise

from ..day import Part


def _parse(text: str) -> tuple[dict[str, set[str]], list[list[str]]]:
    rules: dict[str, set[str]] = defaultdict(set)
    lines = iter(text.splitlines())
    for line in lines:
        if not line:
            break
        before, after = line.split("|", 1)
        rules[after].add(before)
    updates = [line.split(",") for line in lines]
    return dict(rules), updates


def _is_ordered(update: list[str], rules: dict[str, set[str]]) -> bool:
    index = {page: i for i, page in enumerate(update)}
    return all(
        index.get(dep, -1) < i
        for i, page in enumerate(update)
        for dep in rules.get(page, ())
    )


def _topological_order(rules: dict[str, set[str]], pages: list[str]) -> list[str]:
    wanted = set(pages)
    pending = {page: rules[page] & wanted for page in pages if page in rules}
    order = [page for page in pages if page not in pending]
    placed = set(order)
    while pending:
        page = next((p for p, deps in pending.items() if deps <= placed), None)
        if page is None:
            raise ValueError("Ordering rules are cyclic")
        if page not in placed:
            order.append(page)
            placed.add(page)
        del pending[page]
    return order


def _middle(pages: list[str], length: int) -> int:
    return int(pages[length // 2])


def solve(text: str, part) -> str:
    """Sum of middle pages of correct updates, or of incorrect ones once reordered."""
    rules, updates = _parse(text)
    if part == Part.ONE:
        return str(
            sum(_middle(update, len(update)) for update in updates if _is_ordered(update, rules))
        )

    total = 0
    for update in updates:
        order = _topological_order(rules, update)
        if any(order.index(a) > order.index(b) for a, b in pairwise(update)):
            reordered = [page for page in order if page in update]
            total += _middle(reordered, len(update))
    return str(total)