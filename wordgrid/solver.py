from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator

from wordgrid.dictionary import Dictionary, TrieNode
from wordgrid.grid import Grid, Position

logger = logging.getLogger("wordgrid")

# (cell, trie node reached through it, neighbors still to try)
Frame = tuple[Position, TrieNode, Iterator[Position]]


def _enter(dictionary: Dictionary, grid: Grid, pos: Position, node: TrieNode, letters: list[str]) -> Frame | None:
    letter = grid.letter_at(pos)
    child = dictionary.descend(node, letter)
    if child is None:
        return None

    if child.is_word:
        word = "".join(letters) + letter
        already_found, exists = dictionary.exact_match(word)
        if exists and not already_found:
            dictionary.mark_found(word)

    # only marked once the frame is certain to reach the stack
    grid.mark_used(pos)
    letters.append(letter)
    return pos, child, iter(grid.neighbors(pos))


def scan_from_position(dictionary: Dictionary, grid: Grid, pos: Position, letters: str = ""):
    """Extend ``letters`` through ``pos`` and every unused neighbor, marking words found.

    Depth-first on an explicit stack, so path length is not limited by the
    interpreter's recursion limit. Every cell marked used is unmarked before
    returning. ``grid`` must not be shared with another in-flight search.
    """
    node = dictionary.descend(dictionary.root, letters)
    if node is None:
        return

    path_letters = [letters] if letters else []
    stack: list[Frame] = []
    try:
        frame = _enter(dictionary, grid, pos, node, path_letters)
        if frame is not None:
            stack.append(frame)

        while stack:
            current, node, pending = stack[-1]
            n = next(pending, None)
            if n is None:
                stack.pop()
                path_letters.pop()
                grid.mark_unused(current)
                continue
            frame = _enter(dictionary, grid, n, node, path_letters)
            if frame is not None:
                stack.append(frame)
    finally:
        for current, _, _ in stack:
            grid.mark_unused(current)


def _scan_start(dictionary: Dictionary, grid: Grid, start: Position):
    # every task walks its own copy so used flags never leak between paths
    scan_from_position(dictionary, grid.copy(), start, "")


def find_words(
    dictionary: Dictionary,
    grid: Grid,
    parallel: bool = True,
    max_workers: int | None = None,
) -> list[str]:
    """Search from every cell of ``grid`` and return the words found, in word-list order.

    With ``parallel`` each start cell runs as its own task on a thread pool;
    otherwise the starts run one after another on the shared grid. Both give
    the same set of words.
    """
    starts = list(grid.positions())
    logger.debug("Searching %d start cells (parallel=%s)", len(starts), parallel)

    if parallel and starts:
        with ThreadPoolExecutor(max_workers=max_workers or None) as executor:
            futures = [executor.submit(_scan_start, dictionary, grid, start) for start in starts]
            for future in futures:
                future.result()
    else:
        for start in starts:
            scan_from_position(dictionary, grid, start, "")

    return dictionary.found_words()


def _trace(grid: Grid, word: str, start: Position) -> list[Position] | None:
    frames: list[tuple[Position, str, Iterator[Position]]] = []

    def enter(pos: Position, prefix: str) -> bool:
        prefix += grid.letter_at(pos)
        if not word.startswith(prefix):
            return False
        grid.mark_used(pos)
        frames.append((pos, prefix, iter(grid.neighbors(pos))))
        return True

    try:
        if not enter(start, ""):
            return None
        while frames:
            pos, prefix, pending = frames[-1]
            if prefix == word:
                return [f[0] for f in frames]
            n = next(pending, None)
            if n is None:
                frames.pop()
                grid.mark_unused(pos)
            else:
                enter(n, prefix)
        return None
    finally:
        for pos, _, _ in frames:
            grid.mark_unused(pos)


def find_path(grid: Grid, word: str) -> list[Position] | None:
    """Return one path of adjacent, distinct cells spelling ``word``, or None.

    Starts are tried row by row, so the path begins at the topmost-leftmost
    cell that can start the word.
    """
    if not word:
        return None
    grid = grid.copy()
    for start in grid.positions():
        path = _trace(grid, word, start)
        if path:
            return path
    return None


def word_positions(grid: Grid, words: list[str]) -> dict[str, Position]:
    """Map each word to the cell its path starts from."""
    positions: dict[str, Position] = {}
    for word in words:
        path = find_path(grid, word)
        if path:
            positions[word] = path[0]
    return positions
