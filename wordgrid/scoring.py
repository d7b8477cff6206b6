MIN_SCORING_LENGTH = 4
LONG_WORD_LENGTH = 8
LONG_WORD_POINTS = 11


def word_points(word: str) -> int:
    """Points for one word: 1 for four letters, +1 per extra letter, 11 from eight up."""
    length = len(word)
    if length >= LONG_WORD_LENGTH:
        return LONG_WORD_POINTS
    if length < MIN_SCORING_LENGTH:
        return 0
    return 1 + length - MIN_SCORING_LENGTH


def total_points(words: list[str]) -> int:
    return sum(word_points(w) for w in words)


def sort_by_length(words: list[str]) -> list[str]:
    # sorted() is stable, ties keep their incoming order
    return sorted(words, key=len, reverse=True)
