"""Practice text generation for all test modes."""

import logging
import math
import random
from typing import Optional

from engine.flow_scorer import flow_score
from engine.models import GenerationRequest, TestMode
from engine.word_bank import DEFAULT_WORD_BANK, SentenceKind, WordBank, WordLength

log = logging.getLogger("cheetahtype.text_generator")

FALLBACK_CUSTOM_TEXT = (
    "The quick brown fox jumps over the lazy dog. "
    "All good men must come to the aid of their country."
)
MAX_QUOTES = 20
ZEN_MULTIPLIER = 2

# Length category for each step of the repeating rhythm
FLOW_PATTERN: tuple[WordLength, ...] = (
    WordLength.SHORT,
    WordLength.MEDIUM,
    WordLength.SHORT,
    WordLength.SHORT,
    WordLength.MEDIUM,
    WordLength.LONGER,
)

BUCKET_FALLBACKS: dict[WordLength, tuple[WordLength, ...]] = {
    WordLength.SHORT: (WordLength.SHORT, WordLength.MEDIUM, WordLength.LONGER),
    WordLength.MEDIUM: (WordLength.MEDIUM, WordLength.SHORT, WordLength.LONGER),
    WordLength.LONGER: (WordLength.LONGER, WordLength.MEDIUM, WordLength.SHORT),
}


def count_words(text: str) -> int:
    """Count space separated words, 0 for blank text."""
    return len(text.split()) if text.strip() else 0


class TextGenerator:
    """Generates practice text long enough for an uninterrupted test."""

    def __init__(
        self,
        word_bank: WordBank = DEFAULT_WORD_BANK,
        rng: Optional[random.Random] = None,
    ):
        """Initialize text generator.

        Args:
            word_bank: Source of words and sentence pools
            rng: Random generator (a fresh unseeded one by default)
        """
        self.word_bank = word_bank
        self.rng = rng or random.Random()

    def generate(self, request: GenerationRequest) -> str:
        """Generate practice text for a request.

        Args:
            request: Mode, requested count and optional custom text

        Returns:
            Space joined text of at least request.minimum_word_count words
        """
        minimum = request.minimum_word_count
        mode = request.mode

        if mode == TestMode.PUNCTUATION:
            sentences = self.generate_sentences(SentenceKind.PUNCTUATION, minimum)
        elif mode == TestMode.NUMBERS:
            sentences = self.generate_sentences(SentenceKind.NUMBERS, minimum)
        elif mode == TestMode.QUOTE:
            sentences = self.generate_quotes(minimum)
        elif mode == TestMode.CUSTOM:
            return self.repeat_custom_text(request.custom_text, minimum)
        elif mode == TestMode.ZEN:
            return " ".join(self.generate_flow_words(minimum * ZEN_MULTIPLIER))
        else:
            return " ".join(
                self.generate_flow_words(max(minimum, request.target_count))
            )

        if not sentences:
            log.warning(f"Sentence pool for '{mode.value}' is empty, using word flow")
            return " ".join(self.generate_flow_words(minimum))

        text = " ".join(sentences)
        log.debug(f"Generated {count_words(text)} words for mode '{mode.value}'")
        return text

    def _shuffled(self, items) -> list:
        items = list(items)
        self.rng.shuffle(items)
        return items

    def generate_sentences(self, kind: SentenceKind, minimum: int) -> list[str]:
        """Concatenate shuffled passes over a sentence pool.

        Args:
            kind: Sentence pool to draw from
            minimum: Minimum total word count

        Returns:
            List of sentences, empty if the pool is empty
        """
        pool = self.word_bank.sentence_pool(kind)
        if not pool:
            return []

        sentences: list[str] = []
        total = 0
        while total < minimum:
            batch = self._shuffled(pool)
            sentences.extend(batch)
            total += sum(count_words(sentence) for sentence in batch)
        return sentences

    def generate_quotes(self, minimum: int) -> list[str]:
        """Select up to MAX_QUOTES distinct quotes, then pad with shuffled passes."""
        pool = self.word_bank.sentence_pool(SentenceKind.QUOTES)
        if not pool:
            return []

        quotes = self.rng.sample(pool, min(MAX_QUOTES, len(pool)))
        total = sum(count_words(quote) for quote in quotes)
        while total < minimum:
            batch = self._shuffled(pool)
            quotes.extend(batch)
            total += sum(count_words(quote) for quote in batch)
        return quotes

    def repeat_custom_text(self, custom_text: Optional[str], minimum: int) -> str:
        """Repeat custom text, word order untouched, up to the minimum word count."""
        if not custom_text or not custom_text.strip():
            log.warning("Custom text is empty, using fallback sentence")
            custom_text = FALLBACK_CUSTOM_TEXT

        words = custom_text.split()
        repeats = max(1, math.ceil(minimum / len(words)))
        return " ".join(words * repeats)

    def _sorted_bucket(self, length: WordLength) -> list[str]:
        # Shuffle first so that equal scores keep a random order
        return sorted(
            self._shuffled(self.word_bank.words_by_length(length)),
            key=flow_score,
            reverse=True,
        )

    def generate_flow_words(self, count: int) -> list[str]:
        """Build a word sequence following the short/medium/longer rhythm.

        Args:
            count: Number of words to produce

        Returns:
            List of exactly count words
        """
        buckets = {length: self._sorted_bucket(length) for length in WordLength}
        if not any(buckets.values()):
            log.warning("Word bank is empty, repeating fallback sentence")
            return self.repeat_custom_text(None, count).split()[:count]

        positions = {length: 0 for length in WordLength}
        words: list[str] = []
        for i in range(count):
            wanted = FLOW_PATTERN[i % len(FLOW_PATTERN)]
            length = next(
                candidate
                for candidate in BUCKET_FALLBACKS[wanted]
                if buckets[candidate]
            )
            bucket = buckets[length]
            words.append(bucket[positions[length] % len(bucket)])
            positions[length] += 1

        return words


def generate_text(
    request: GenerationRequest, rng: Optional[random.Random] = None
) -> str:
    """Generate practice text with the default word bank."""
    return TextGenerator(rng=rng).generate(request)


__all__ = [
    "FALLBACK_CUSTOM_TEXT",
    "FLOW_PATTERN",
    "TextGenerator",
    "count_words",
    "generate_text",
]
