"""Typing ergonomics score for words (hand alternation, home row)."""

from functools import lru_cache

from engine.models import WordEntry

# QWERTY touch typing assignment
LEFT_HAND_LETTERS = frozenset("qwertasdfgzxcvb")
RIGHT_HAND_LETTERS = frozenset("yuiophjklnm")
HOME_ROW_LETTERS = frozenset("asdfghjkl")

ALTERNATION_REWARD = 2
HOME_ROW_REWARD = 1


def _hand(letter: str) -> str | None:
    if letter in LEFT_HAND_LETTERS:
        return "left"
    if letter in RIGHT_HAND_LETTERS:
        return "right"
    return None


@lru_cache(maxsize=4096)
def flow_score(word: str) -> int:
    """Score a word for smooth typing rhythm.

    Each adjacent letter pair typed by alternating hands earns
    ALTERNATION_REWARD, each home row letter earns HOME_ROW_REWARD.
    Characters outside a-z (digits, punctuation) score nothing and
    break no pairs of their own.

    Args:
        word: Word to score (case insensitive)

    Returns:
        Non-negative score, 0 for an empty string
    """
    letters = word.lower()
    score = sum(HOME_ROW_REWARD for letter in letters if letter in HOME_ROW_LETTERS)

    for first, second in zip(letters, letters[1:]):
        first_hand = _hand(first)
        second_hand = _hand(second)
        if first_hand and second_hand and first_hand != second_hand:
            score += ALTERNATION_REWARD

    return score


def score_word(word: str) -> WordEntry:
    """Build a WordEntry carrying the word's length and flow score."""
    return WordEntry(word=word, length=len(word), flow_score=flow_score(word))


__all__ = [
    "HOME_ROW_LETTERS",
    "LEFT_HAND_LETTERS",
    "RIGHT_HAND_LETTERS",
    "flow_score",
    "score_word",
]
