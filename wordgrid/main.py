"""
Word grid solver.

Usage:
    wordgrid <output_path> [--board board.txt] [--words words.txt]

Examples:
    wordgrid found.txt
    wordgrid found.txt --board puzzles/5x5.txt --min-length 4
    wordgrid found.txt --sequential -v

This will:
  1. Load the word list and the comma-separated board
  2. Search every path of adjacent cells for dictionary words
  3. Write the found words to <output_path>, longest first
  4. Print the word count and the point total
"""
import argparse
import logging
import sys

from wordgrid.loader import LoadError, load_board, load_word_list, write_results
from wordgrid.metrics import StageTimer
from wordgrid.scoring import sort_by_length, total_points
from wordgrid.settings import settings
from wordgrid.solver import find_words

logger = logging.getLogger("wordgrid")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find dictionary words on a letter grid")
    parser.add_argument("output", help="File to write the found words to")
    parser.add_argument("--board", default=str(settings.BOARD_PATH),
                        help=f"Board file, one comma-separated row per line (default: {settings.BOARD_PATH})")
    parser.add_argument("--words", default=str(settings.WORD_LIST_PATH),
                        help=f"Word list, one word per line (default: {settings.WORD_LIST_PATH})")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Ignore dictionary words shorter than this (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--sequential", action="store_true", default=not settings.PARALLEL,
                        help="Search start cells one after another instead of on a thread pool")
    parser.add_argument("--workers", type=int, default=settings.MAX_WORKERS,
                        help="Thread pool size for the parallel search (default: executor default)")
    parser.add_argument("-v", "--verbose", action="store_true", default=settings.DEBUG,
                        help="Log debug output")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # checked after parsing so settings defaults are covered too
    if args.workers < 0:
        parser.error(f"--workers must not be negative (got {args.workers})")
    if args.min_length < 0:
        parser.error(f"--min-length must not be negative (got {args.min_length})")

    level = logging.DEBUG if args.verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    timer = StageTimer()

    # Inputs are fully loaded before the output file is touched
    try:
        with timer.stage("load_words", "words") as st:
            dictionary = load_word_list(args.words, args.min_length)
            st.count = len(dictionary)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to load words from %s: %s", args.words, e)
        print(f"Failed to load words: {e}")
        return 1

    try:
        with timer.stage("load_board", "cells") as st:
            grid = load_board(args.board)
            st.count = len(grid)
    except (OSError, UnicodeDecodeError, LoadError) as e:
        logger.error("Failed to load board from %s: %s", args.board, e)
        print(f"Failed to load board: {e}")
        return 1

    with timer.stage("solve", "words") as st:
        found = find_words(dictionary, grid, parallel=not args.sequential, max_workers=args.workers)
        st.count = len(found)

    words = sort_by_length(found)
    points = total_points(words)

    try:
        with timer.stage("write", "lines") as st:
            write_results(args.output, words)
            st.count = len(words)
    except OSError as e:
        logger.error("Failed to write output file %s: %s", args.output, e)
        print(f"Failed to create output file: {e}")
        return 1

    print(f"Found {len(words)} words worth a total of {points} points!")
    if args.verbose:
        print("Stages:")
        print(timer.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
