from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from wordgrid.dictionary import Dictionary
from wordgrid.grid import Grid

logger = logging.getLogger("wordgrid")


class LoadError(ValueError):
    """Input file contents could not be turned into a board or word list."""


def parse_word_list(lines: Iterable[str], min_length: int = 1) -> list[str]:
    words = []
    for line in lines:
        word = line.strip()
        if word and len(word) >= min_length:
            words.append(word)
    return words


def load_word_list(path: str | Path, min_length: int = 1) -> Dictionary:
    with open(path, "r", encoding="utf-8") as f:
        words = parse_word_list(f, min_length)
    dictionary = Dictionary(words)
    logger.info("Loaded %d words from %s (min_length=%d)", len(dictionary), path, min_length)
    return dictionary


def parse_board(text: str) -> Grid:
    """Parse comma-separated rows, one per line. A blank line is an empty row."""
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    rows: list[list[str]] = []
    for y, line in enumerate(lines):
        if not line.strip():
            rows.append([])
            continue
        row = [token.strip() for token in line.split(",")]
        for x, letter in enumerate(row):
            if not letter:
                raise LoadError(f"empty cell at row {y}, column {x}")
        rows.append(row)

    if not rows:
        raise LoadError("board has no rows")
    return Grid(rows)


def load_board(path: str | Path) -> Grid:
    with open(path, "r", encoding="utf-8") as f:
        grid = parse_board(f.read())
    logger.info("Loaded board from %s: %d rows, %d cells", path, grid.height, len(grid))
    return grid


def write_results(path: str | Path, words: list[str]):
    with open(path, "w", encoding="utf-8") as f:
        for word in words:
            f.write(f"{word}\n")
    logger.info("Wrote %d words to %s", len(words), path)
