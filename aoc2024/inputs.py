"""Puzzle inputs and example inputs, cached as files in a resources directory."""

from dataclasses import dataclass
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from .api import AocClient
from .day import Part

DEFAULT_RESOURCES = Path("resources")


class ExampleNotFoundError(Exception):
    """The puzzle page holds no recognisable example or example answer."""


def _text(node) -> str:
    return node.get_text() if isinstance(node, Tag) else str(node)


def _holds_code(node) -> bool:
    return isinstance(node, Tag) and (node.name == "code" or node.find("code") is not None)


def _is_example_lead(text: str) -> bool:
    return "example" in text and ":" in text


def extract_example(html: str, part) -> tuple[str, str]:
    """Return the example input and the example answer of a puzzle page."""
    articles = BeautifulSoup(html, "html.parser").find_all("article")
    if not articles:
        raise ExampleNotFoundError("Page holds no puzzle description")

    children = list(articles[0].children)
    source = next(
        (
            _text(child)
            for lead, child in zip(children, children[2:])
            if _holds_code(child) and _is_example_lead(_text(lead))
        ),
        None,
    )
    if source is None:
        raise ExampleNotFoundError("Couldn't find example source")

    article = articles[0] if part == Part.ONE or len(articles) == 1 else articles[1]
    for code in reversed(article.find_all("code")):
        emphasis = code.find("em")
        if emphasis is not None:
            return source, emphasis.get_text().strip()
    raise ExampleNotFoundError("Couldn't find example solution")


def _read(path: Path) -> str:
    return path.read_bytes().decode("utf-8")


def _write(path: Path, text: str) -> None:
    path.write_bytes(text.encode("utf-8"))


@dataclass(frozen=True)
class Input:
    """A puzzle input together with its known answer, if any."""

    text: str
    solution: str | None = None

    @classmethod
    def custom(cls, source: str, solution: str) -> "Input":
        """Build an input from text and answer given directly."""
        return cls(source, solution)

    @classmethod
    def load(cls, day, part, debug=False, resources=None, client=None) -> "Input":
        """Load the example (debug) or real input, downloading and caching it if needed."""
        directory = Path(resources) if resources is not None else DEFAULT_RESOURCES
        stem = f"day_{int(day)}_{int(part)}"
        if debug:
            return cls._load_example(day, part, directory, stem, client)
        return cls._load_puzzle(day, directory, stem, client)

    @classmethod
    def _load_puzzle(cls, day, directory: Path, stem: str, client) -> "Input":
        source_path = directory / f"{stem}_src.txt"
        solution_path = directory / f"{stem}_sol.txt"
        if source_path.exists():
            return cls(_read(source_path), _read(solution_path).strip())

        source = (client or AocClient()).get_input(day)
        directory.mkdir(parents=True, exist_ok=True)
        _write(source_path, source)
        _write(solution_path, "")
        return cls(source, None)

    @classmethod
    def _load_example(cls, day, part, directory: Path, stem: str, client) -> "Input":
        source_path = directory / f"{stem}_dbg.txt"
        solution_path = directory / f"{stem}_dbg_sol.txt"
        if source_path.exists():
            return cls(_read(source_path), _read(solution_path).strip())

        html = (client or AocClient()).get_page(day)
        source, solution = extract_example(html, part)
        print(f"Found example:\n{source}")
        print(f"Found example solution: {solution}")
        directory.mkdir(parents=True, exist_ok=True)
        _write(source_path, source)
        _write(solution_path, solution)
        return cls(source, solution)