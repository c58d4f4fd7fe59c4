"""Client for the puzzle website: inputs, pages and answer submission."""

import os
from enum import Enum, auto

import requests
from bs4 import BeautifulSoup

BASE_URL = "https://adventofcode.com/2024"
SESSION_ENV_VAR = "AOC_SESSION_COOKIE"


class SolutionResult(Enum):
    """The site's verdict on a submitted answer."""

    CORRECT = auto()
    INCORRECT = auto()
    RATE_LIMITED = auto()
    ALREADY_COMPLETED = auto()


class UnexpectedResponseError(Exception):
    """The answer page did not say what happened to the answer."""


_VERDICTS = (
    ("That's the right answer", SolutionResult.CORRECT),
    ("That's not the right answer", SolutionResult.INCORRECT),
    ("You gave an answer too recently", SolutionResult.RATE_LIMITED),
    ("You don't seem to be solving the right level.", SolutionResult.ALREADY_COMPLETED),
)


def session_from_env() -> str:
    """Return the session cookie from the environment."""
    try:
        return os.environ[SESSION_ENV_VAR]
    except KeyError:
        raise RuntimeError(f"{SESSION_ENV_VAR} environment variable not set") from None


def classify_response(html: str) -> SolutionResult:
    """Read the verdict out of the page returned after submitting an answer."""
    article = BeautifulSoup(html, "html.parser").find("article")
    if article is None:
        raise UnexpectedResponseError("Response holds no article")
    text = article.get_text()
    for phrase, result in _VERDICTS:
        if phrase in text:
            return result
    raise UnexpectedResponseError(f"Unexpected response: {text}")


class AocClient:
    """An authenticated session with the puzzle website."""

    def __init__(self, session_cookie: str | None = None):
        cookie = session_cookie if session_cookie is not None else session_from_env()
        self.http = requests.Session()
        self.http.headers["Cookie"] = f"session={cookie}"

    @staticmethod
    def _day_url(day) -> str:
        return f"{BASE_URL}/day/{int(day)}"

    def _fetch(self, url: str) -> str:
        response = self.http.get(url)
        response.raise_for_status()
        return response.text

    def get_input(self, day) -> str:
        """Download the personal puzzle input of a day."""
        return self._fetch(f"{self._day_url(day)}/input")

    def get_page(self, day) -> str:
        """Download the description page of a day."""
        return self._fetch(self._day_url(day))

    def submit_solution(self, day, part, solution: str) -> SolutionResult:
        """Submit an answer and return the site's verdict."""
        response = self.http.post(
            f"{self._day_url(day)}/answer",
            data={"level": str(int(part)), "answer": solution},
        )
        response.raise_for_status()
        return classify_response(response.text)