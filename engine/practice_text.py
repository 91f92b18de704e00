"""Practice text focused on a single weak character."""

import logging
import math
import random
from enum import Enum
from typing import Optional

log = logging.getLogger("cheetahtype.practice_text")


class FocusIntensity(str, Enum):
    """How strongly practice text concentrates on the target character."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


INTENSITY_FREQUENCY: dict[FocusIntensity, float] = {
    FocusIntensity.LOW: 0.15,
    FocusIntensity.MEDIUM: 0.25,
    FocusIntensity.HIGH: 0.4,
}

MAX_DIFFICULTY = 5

# Word pools by difficulty level (1 = easiest)
DIFFICULTY_WORDS: dict[int, tuple[str, ...]] = {
    1: (
        "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
        "her", "was", "one", "our", "out", "day", "get", "has", "him", "his",
        "how", "man", "new", "now", "old", "see", "two", "way", "who", "boy",
        "did", "its", "let", "put", "say", "she", "too", "use",
    ),
    2: (
        "that", "with", "have", "this", "will", "your", "from", "they", "know",
        "want", "been", "good", "much", "some", "time", "very", "when", "come",
        "here", "just", "like", "long", "make", "many", "over", "such", "take",
        "than", "them", "well", "were",
    ),
    3: (
        "there", "would", "their", "could", "other", "after", "first", "never",
        "these", "think", "where", "being", "every", "great", "might", "shall",
        "still", "those", "under", "while", "again", "place", "right", "years",
        "before", "should", "through",
    ),
    4: (
        "people", "before", "should", "through", "another", "between", "thought",
        "nothing", "without", "because", "something", "important", "different",
        "following", "government", "information", "development", "performance",
        "understanding",
    ),
    5: (
        "character", "practice", "strength", "challenge", "difficulty",
        "improvement", "technology", "generation", "communication",
        "organization", "responsibility", "administration", "recommendation",
        "transformation", "comprehensive",
    ),
}

CHARACTER_WORDS: dict[str, tuple[str, ...]] = {
    "s": ("see", "said", "just", "such", "also", "still", "some", "same", "seem", "since"),
    "t": ("the", "that", "time", "take", "tell", "think", "than", "them", "this", "turn"),
    "r": ("are", "right", "rather", "really", "return", "read", "remember", "reason", "result", "recent"),
    "n": ("and", "not", "now", "new", "never", "need", "next", "name", "number", "nothing"),
    "l": ("like", "long", "look", "let", "line", "little", "last", "left", "level", "live"),
    "e": ("every", "even", "each", "early", "end", "enough", "example", "experience", "ever", "else"),
    "a": ("and", "are", "all", "any", "about", "after", "also", "again", "always", "another"),
    "o": ("of", "or", "on", "one", "only", "other", "over", "own", "open", "old"),
    "i": ("is", "in", "it", "if", "into", "its", "idea", "important", "include", "interest"),
}

CHARACTER_PARAGRAPHS: dict[str, str] = {
    "a": "Amazing animals appear after April rain. Anna arranges apples and avocados at an autumn market.",
    "b": "Big brown bears bring bright berries before breakfast. Brave boys build bridges between busy buildings.",
    "c": "Curious cats catch colorful creatures carefully. Cool coffee comes with crispy cookies.",
    "d": "Dedicated doctors deliver detailed diagnoses during difficult days. Dancing dolphins dive deep at dawn.",
    "e": "Energetic elephants exercise every evening. Expert engineers examine experimental equipment.",
    "f": "Funny frogs find fresh fruit for a fantastic feast. Friendly farmers finish feeding before February.",
    "g": "Great green gardens grow golden grapes gradually. Good guests grab gifts from generous grandparents.",
    "h": "Happy horses hurry home through heavy hail. Honest hunters hide behind huge hills.",
    "i": "Intelligent individuals imagine inspiring ideas. Impressive insects inhabit isolated islands.",
    "j": "Joyful jaguars jump through the jungle in January. Jolly judges judge jury cases justly in June.",
    "k": "Kind kings keep keys in the kitchen. Keen kids kick kites and keep kittens kindly.",
    "l": "Large lions live lazily in late July. Little lambs leap lightly through lovely lavender fields.",
    "m": "Mighty mountains make magnificent memories. Many mammals migrate many miles monthly.",
    "n": "Nine nightingales sing near northern neighborhoods. Nervous nurses need new equipment now.",
    "o": "Older owls observe outdoor objects on October mornings. Organized operations offer opportunities.",
    "p": "Purple parrots pick precious pearls from pink petals. Patient people practice piano properly.",
    "q": "Quiet queens question quality quickly. Quirky quail queue quietly near quaint quarters.",
    "r": "Rapid rivers run roughly through rocky regions. Red roses require regular care.",
    "s": "Silent snakes slide slowly through sunny spaces. Strong students study serious subjects.",
    "t": "Tall trees tower throughout temperate territories. Technical teams test technologies thoroughly.",
    "u": "Unusual unicorns unite under umbrellas. University students understand unique subjects.",
    "v": "Various vehicles visit vast valleys. Valuable vintage violins create vivid vibrations.",
    "w": "Wild wolves wander widely through wooded wilderness. Wise wizards weave wonderful spells.",
    "x": "Expert boxers exhibit excellent boxing. Complex explanations examine experimental exercises.",
    "y": "Young yellow dogs play joyfully yesterday. Yearly visits yield youthful memories.",
    "z": "Zealous zebras zigzag through amazing zoo zones. Puzzling mazes amaze dozens of visitors.",
}

COMMON_MISTAKES_TEXT = (
    "The their there they're through though thought three thirty thirteen. "
    "Weather whether where were we're when while which why what who whom whose."
)


def character_frequency(text: str, character: str) -> float:
    """Share of characters in text equal to character (case insensitive).

    Returns:
        Frequency between 0.0 and 1.0, 0.0 for empty text
    """
    if not text or not character:
        return 0.0
    target = character.lower()
    return sum(1 for c in text if c.lower() == target) / len(text)


def _character_words(target_char: str, count: int, rng: random.Random) -> list[str]:
    """Build short drill words around the target character."""
    char = target_char.lower()
    patterns = [
        char + "at", char + "ed", char + "er", char + "ly", char + "ing",
        "a" + char, "e" + char, "i" + char, "o" + char, "u" + char,
        char + "a", char + "e", char + "i", char + "o", char + "u",
    ]
    specific = CHARACTER_WORDS.get(char, ())

    words = []
    for _ in range(count):
        if specific and rng.random() > 0.5:
            words.append(rng.choice(specific))
        else:
            words.append(rng.choice(patterns))
    return words


def generate_practice_text(
    target_char: str,
    difficulty_level: int = 1,
    word_count: int = 50,
    focus_intensity: FocusIntensity | str = FocusIntensity.MEDIUM,
    rng: Optional[random.Random] = None,
) -> str:
    """Generate practice text with a raised frequency of one character.

    Words are drawn from difficulty tiers up to difficulty_level + 1.
    Words containing the target are preferred while its frequency is
    below the intensity target. If the result still falls short of 80%
    of the target frequency, drill words are spliced in.

    Args:
        target_char: Character to practice
        difficulty_level: 1 (easy) to 5 (hard), clamped
        word_count: Number of words to select
        focus_intensity: low, medium or high (unknown values use medium)
        rng: Random generator

    Returns:
        Space joined practice text
    """
    rng = rng or random.Random()
    if not target_char:
        log.warning("No target character given, using 'e'")
        target_char = "e"
    char = target_char[0].lower()

    try:
        intensity = FocusIntensity(focus_intensity)
    except ValueError:
        log.warning(f"Unknown focus intensity {focus_intensity!r}, using medium")
        intensity = FocusIntensity.MEDIUM
    target_frequency = INTENSITY_FREQUENCY[intensity]

    level = min(max(1, difficulty_level), MAX_DIFFICULTY)
    max_tier = min(level + 1, MAX_DIFFICULTY)
    word_count = max(1, word_count)

    words: list[str] = []
    total_chars = 0
    target_chars = 0
    current_frequency = 0.0
    attempts = 0
    while len(words) < word_count and attempts < word_count * 3:
        attempts += 1
        word = rng.choice(DIFFICULTY_WORDS[rng.randint(1, max_tier)])
        hits = word.lower().count(char)

        if current_frequency < target_frequency:
            accept = hits > 0 or rng.random() > 0.7
        else:
            accept = hits == 0 or rng.random() > 0.8

        if accept:
            total_chars += len(word) + (1 if words else 0)
            target_chars += hits
            words.append(word)
            current_frequency = target_chars / total_chars

    if current_frequency < target_frequency * 0.8:
        drill = _character_words(char, max(1, math.ceil(word_count * 0.2)), rng)
        split = int(len(words) * 0.8)
        words = words[:split] + drill + words[split:]

    text = " ".join(words)
    log.debug(
        f"Practice text for '{char}': {len(words)} words, "
        f"frequency {character_frequency(text, char):.2%}"
    )
    return text


def character_practice_text(character: str, difficulty: str = "medium") -> str:
    """Get the fixed practice paragraph for a letter.

    Args:
        character: Letter to practice (unknown characters use 'a')
        difficulty: 'easy' returns the first half, 'hard' appends
            commonly confused words

    Returns:
        Practice paragraph
    """
    base = CHARACTER_PARAGRAPHS.get(character.lower()[:1], CHARACTER_PARAGRAPHS["a"])
    if difficulty == "easy":
        words = base.split(" ")
        return " ".join(words[: math.ceil(len(words) / 2)])
    if difficulty == "hard":
        return f"{base} {COMMON_MISTAKES_TEXT}"
    return base


__all__ = [
    "FocusIntensity",
    "character_frequency",
    "character_practice_text",
    "generate_practice_text",
]
