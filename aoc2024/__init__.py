"""Advent of Code 2024 solutions, with input caching and a client for the puzzle site."""

__version__ = "0.1.0"