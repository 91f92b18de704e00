"""Tests for TextGenerator."""

import random

import pytest

from engine.flow_scorer import flow_score
from engine.models import GenerationRequest, TestMode
from engine.text_generator import (
    FALLBACK_CUSTOM_TEXT,
    FLOW_PATTERN,
    TextGenerator,
    count_words,
    generate_text,
)
from engine.word_bank import (
    NUMBER_SENTENCES,
    PUNCTUATION_SENTENCES,
    QUOTES,
    SentenceKind,
    WordBank,
    classify_length,
)


def seeded_generator(seed: int = 7, **kwargs) -> TextGenerator:
    return TextGenerator(rng=random.Random(seed), **kwargs)


class TestMinimumLength:
    """Every mode produces at least max(5000, 10 * target_count) words."""

    @pytest.mark.parametrize("mode", list(TestMode))
    def test_small_request(self, mode, rng):
        request = GenerationRequest(mode=mode, target_count=10, custom_text="one two three")
        text = TextGenerator(rng=rng).generate(request)
        assert count_words(text) >= 5000

    @pytest.mark.parametrize("mode", [TestMode.PUNCTUATION, TestMode.QUOTE, TestMode.CUSTOM])
    def test_large_request(self, mode, rng):
        """Test that 10x the requested count wins over the 5000 floor."""
        request = GenerationRequest(mode=mode, target_count=700)
        text = TextGenerator(rng=rng).generate(request)
        assert count_words(text) >= 7000

    def test_minimum_word_count_property(self):
        assert GenerationRequest(target_count=10).minimum_word_count == 5000
        assert GenerationRequest(target_count=600).minimum_word_count == 6000


class TestSentenceModes:
    """Test punctuation, numbers and quote modes."""

    def test_punctuation_chunks_come_from_pool(self):
        """Punctuation text is built only from punctuation pool sentences."""
        request = GenerationRequest(mode=TestMode.PUNCTUATION, target_count=10)
        text = seeded_generator(3).generate(request)
        sentences = seeded_generator(3).generate_sentences(SentenceKind.PUNCTUATION, 5000)

        assert text == " ".join(sentences)
        assert all(sentence in PUNCTUATION_SENTENCES for sentence in sentences)
        assert count_words(text) >= 5000

    def test_numbers_chunks_come_from_pool(self):
        sentences = seeded_generator().generate_sentences(SentenceKind.NUMBERS, 5000)
        assert all(sentence in NUMBER_SENTENCES for sentence in sentences)

    def test_each_pass_is_a_permutation(self):
        """Every full pass over the pool uses each sentence exactly once."""
        pool_size = len(PUNCTUATION_SENTENCES)
        sentences = seeded_generator().generate_sentences(SentenceKind.PUNCTUATION, 5000)
        assert len(sentences) % pool_size == 0
        for start in range(0, len(sentences), pool_size):
            assert sorted(sentences[start:start + pool_size]) == sorted(PUNCTUATION_SENTENCES)

    def test_quotes_start_with_distinct_selection(self):
        """The first 20 quotes are drawn without replacement."""
        quotes = seeded_generator().generate_quotes(5000)
        first = quotes[:20]
        assert len(set(first)) == 20
        assert all(quote in QUOTES for quote in quotes)

    def test_empty_pool_falls_back_to_flow_words(self):
        """A bank without sentences still produces enough text."""
        bank = WordBank(punctuation=[], numbers=[], quotes=[])
        generator = seeded_generator(word_bank=bank)
        for mode in (TestMode.PUNCTUATION, TestMode.NUMBERS, TestMode.QUOTE):
            text = generator.generate(GenerationRequest(mode=mode, target_count=10))
            assert count_words(text) >= 5000


class TestCustomMode:
    """Test custom text repetition."""

    def test_repeats_text_in_order(self):
        request = GenerationRequest(
            mode=TestMode.CUSTOM, target_count=10, custom_text="alpha beta gamma"
        )
        words = generate_text(request).split(" ")
        assert words[:6] == ["alpha", "beta", "gamma", "alpha", "beta", "gamma"]
        assert len(words) >= 5000
        assert len(words) % 3 == 0

    def test_deterministic(self):
        request = GenerationRequest(
            mode=TestMode.CUSTOM, target_count=10, custom_text="the same text"
        )
        assert generate_text(request) == generate_text(request)

    @pytest.mark.parametrize("custom_text", [None, "", "   "])
    def test_empty_uses_fallback(self, custom_text):
        request = GenerationRequest(
            mode=TestMode.CUSTOM, target_count=10, custom_text=custom_text
        )
        text = generate_text(request)
        assert text.startswith(FALLBACK_CUSTOM_TEXT)
        assert count_words(text) >= 5000


class TestFlowGeneration:
    """Test flow based generation for time, words and zen modes."""

    def test_pattern_and_wraparound(self):
        """Test the 6-step rhythm over a tiny bank.

        short bucket sorted by score: 'to' (2) before 'a' (1).
        """
        bank = WordBank(words=["a", "to", "word", "keyboard"])
        words = seeded_generator(word_bank=bank).generate_flow_words(12)
        assert words[:6] == ["to", "word", "a", "to", "word", "keyboard"]
        assert words[6:12] == ["a", "word", "to", "a", "word", "keyboard"]

    def test_pattern_lengths_with_default_bank(self):
        words = seeded_generator().generate_flow_words(60)
        categories = [classify_length(word) for word in words]
        expected = [FLOW_PATTERN[i % len(FLOW_PATTERN)] for i in range(60)]
        assert categories == expected

    def test_empty_bucket_falls_back(self):
        """Missing short words are replaced by medium words."""
        bank = WordBank(words=["word", "keyboard"])
        words = seeded_generator(word_bank=bank).generate_flow_words(6)
        assert words == ["word", "word", "word", "word", "word", "keyboard"]

    def test_only_longer_words(self):
        bank = WordBank(words=["keyboard"])
        assert seeded_generator(word_bank=bank).generate_flow_words(3) == ["keyboard"] * 3

    def test_bucket_sorted_by_descending_score(self):
        """With a single bucket the output walks it in score order."""
        short_words = ["a", "to", "it", "of", "we", "ask", "fix", "zoo"]
        bank = WordBank(words=short_words)
        words = seeded_generator(word_bank=bank).generate_flow_words(len(short_words))
        scores = [flow_score(word) for word in words]
        assert scores == sorted(scores, reverse=True)
        assert sorted(words) == sorted(short_words)

    def test_empty_bank_uses_fallback_sentence(self):
        bank = WordBank(words=[])
        words = seeded_generator(word_bank=bank).generate_flow_words(50)
        assert len(words) == 50
        assert words[:3] == FALLBACK_CUSTOM_TEXT.split()[:3]

    def test_time_mode_word_count(self):
        request = GenerationRequest(mode=TestMode.TIME, target_count=25)
        assert count_words(seeded_generator().generate(request)) == 5000

    def test_zen_doubles_minimum(self):
        request = GenerationRequest(mode=TestMode.ZEN, target_count=25)
        assert count_words(seeded_generator().generate(request)) == 10000

    def test_unknown_mode_uses_flow_generation(self):
        request = GenerationRequest(mode="banana", target_count=10)
        assert request.mode == TestMode.TIME
        assert count_words(seeded_generator().generate(request)) == 5000

    def test_words_are_space_joined(self):
        text = seeded_generator().generate(GenerationRequest(target_count=10))
        assert "  " not in text
        assert not text.startswith(" ")
        assert not text.endswith(" ")

    def test_randomized_between_calls(self):
        """Different seeds give different ties order."""
        request = GenerationRequest(mode=TestMode.TIME, target_count=10)
        first = TextGenerator(rng=random.Random(1)).generate(request)
        second = TextGenerator(rng=random.Random(2)).generate(request)
        assert first != second
