"""Static word and sentence pools that seed text generation."""

import logging
from enum import Enum

log = logging.getLogger("cheetahtype.word_bank")


class WordLength(str, Enum):
    """Word length category."""

    SHORT = "short"  # 3 characters or fewer
    MEDIUM = "medium"  # 4 to 6 characters
    LONGER = "longer"  # more than 6 characters


class SentenceKind(str, Enum):
    """Fixed sentence pool identifier."""

    PUNCTUATION = "punctuation"
    NUMBERS = "numbers"
    QUOTES = "quotes"


SHORT_WORD_MAX = 3
MEDIUM_WORD_MAX = 6

COMMON_WORDS: tuple[str, ...] = (
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "it",
    "for", "not", "on", "with", "he", "as", "you", "do", "at", "this",
    "but", "his", "by", "from", "they", "we", "say", "her", "she", "or",
    "an", "will", "my", "one", "all", "would", "there", "their", "what", "so",
    "up", "out", "if", "about", "who", "get", "which", "go", "me", "when",
    "make", "can", "like", "time", "no", "just", "him", "know", "take", "people",
    "into", "year", "your", "good", "some", "could", "them", "see", "other", "than",
    "then", "now", "look", "only", "come", "its", "over", "think", "also", "back",
    "after", "use", "two", "how", "our", "work", "first", "well", "way", "even",
    "new", "want", "because", "any", "these", "give", "day", "most", "us", "is",
    "world", "life", "hand", "part", "eye", "place", "case", "point", "government", "company",
    "number", "group", "problem", "fact", "money", "issue", "area", "family", "example", "while",
    "state", "something", "nothing", "course", "school", "still", "learn", "plant", "cover", "food",
    "water", "friend", "call", "minute", "find", "word", "drive", "carry", "done", "talk",
    "house", "home", "side", "own", "read", "play", "spell", "add", "much", "must",
    "land", "here", "big", "act", "why", "ask", "men", "went", "light", "kind",
    "need", "try", "name", "help", "line", "turn", "again", "air", "boy", "follow",
    "stop", "came", "river", "car", "feet", "care", "book", "idea", "city", "build",
    "self", "earth", "left", "late", "run", "form", "end", "same", "too", "does",
    "tell", "song", "mile", "body", "dog", "whole", "hear", "answer", "room", "between",
    "type", "test", "sentence", "paragraph", "article", "story", "novel", "essay", "report", "letter",
    "message", "note", "document", "file", "folder", "computer", "keyboard", "mouse", "monitor", "printer",
    "speaker", "camera", "phone", "tablet", "laptop", "desktop", "server", "network", "internet", "cheetah",
    "long", "thing", "great", "little", "right", "old", "did", "change", "off", "picture",
    "animal", "mother", "near", "father", "head", "stand", "page", "should", "country", "found",
    "grow", "study", "sun", "four", "keep", "never", "last", "let", "thought", "tree",
    "cross", "farm", "hard", "start", "might", "saw", "far", "sea", "draw", "press",
    "close", "night", "real", "few", "north", "open", "seem", "together", "next", "white",
    "children", "got", "walk", "begin", "took", "mountain", "once", "base", "horse", "cut",
    "sure", "watch", "color", "face", "wood", "main", "enough", "plain", "girl", "usual",
    "young", "ready", "above", "ever", "red", "list", "though", "feel", "bird", "soon",
    "direct", "leave", "measure", "door", "product", "black", "short", "class", "wind", "question",
    "happen", "complete", "ship", "half", "rock", "order", "fire", "south", "piece", "told",
    "knew", "pass", "since", "top", "king", "space", "heard", "best", "hour", "better",
    "during", "hundred", "five", "remember", "step", "early", "hold", "west", "ground", "interest",
    "reach", "fast", "sing", "listen", "six", "table", "travel", "less", "morning", "ten",
    "simple", "several", "toward", "lay", "against", "pattern", "slow", "center", "love", "person",
    "serve", "appear", "road", "map", "rain", "rule", "pull", "cold", "notice", "voice",
    "unit", "power", "town", "fine", "certain", "fly", "fall", "lead", "cry", "dark",
    "machine", "wait", "plan", "figure", "star", "box", "field", "rest", "correct", "able",
    "beauty", "stood", "contain", "front", "teach", "week", "final", "gave", "green", "quick",
    "develop", "ocean", "warm", "free", "strong", "special", "mind", "behind", "clear", "tail",
    "produce", "street", "inch", "multiply", "stay", "wheel", "full", "force", "blue", "object",
    "decide", "surface", "deep", "moon", "island", "foot", "system", "busy", "record", "boat",
    "common", "gold", "possible", "plane", "dry", "wonder", "laugh", "thousand", "ago", "ran",
    "check", "game", "shape", "hot", "miss", "brought", "heat", "snow", "bring", "yes",
    "distant", "fill", "east", "paint", "language", "among", "ball", "yet", "wave", "drop",
    "heart", "present", "heavy", "dance", "engine", "position", "arm", "wide", "sail", "material",
    "size", "vary", "settle", "speak", "weight", "general", "ice", "matter", "circle", "pair",
    "include", "divide", "felt", "perhaps", "pick", "sudden", "count", "square", "reason", "length",
    "art", "subject", "region", "energy", "hunt", "bed", "brother", "egg", "ride", "cell",
    "believe", "forest", "sit", "race", "window", "store", "summer", "train", "sleep", "prove",
    "leg", "exercise", "wall", "catch", "wish", "sky", "board", "joy", "winter", "written",
    "wild", "kept", "glass", "grass", "job", "edge", "sign", "visit", "past", "soft",
    "fun", "bright", "weather", "month", "million", "bear", "finish", "happy", "hope", "flower",
    "strange", "gone", "jump", "baby", "eight", "village", "meet", "root", "buy", "raise",
    "solve", "metal", "whether", "push", "seven", "third", "held", "hair", "describe", "cook",
    "floor", "either", "result", "burn", "hill", "safe", "cat", "century", "consider", "law",
    "bit", "coast", "copy", "phrase", "silent", "tall", "sand", "soil", "roll", "finger",
    "industry", "value", "fight", "beat", "natural", "view", "sense", "else", "quite", "middle",
    "lake", "moment", "scale", "loud", "spring", "observe", "child", "straight", "nation", "milk",
    "speed", "method", "pay", "age", "section", "dress", "cloud", "surprise", "quiet", "stone",
    "tiny", "climb", "bad", "oil", "blood", "touch", "grew", "mix", "team", "wire",
    "cost", "lost", "brown", "wear", "garden", "equal", "sent", "choose", "fit", "flow",
    "fair", "bank", "collect", "save", "control", "gentle", "woman", "captain", "practice", "separate",
    "difficult", "doctor", "please", "protect", "noon", "whose", "locate", "ring", "character", "insect",
    "period", "indicate", "radio", "spoke", "atom", "human", "history", "effect", "electric", "expect",
    "modern", "element", "hit", "student", "corner", "party", "supply", "bone", "imagine", "provide",
    "agree", "capital", "chair", "danger", "fruit", "rich", "thick", "process", "operate", "guess",
    "sharp", "wing", "create", "wash", "rather", "crowd", "corn", "compare", "poem", "string",
    "bell", "depend", "tube", "famous", "dollar", "stream", "fear", "sight", "thin", "planet",
    "hurry", "chief", "clock", "mine", "tie", "enter", "major", "fresh", "search", "send",
    "yellow", "allow", "print", "spot", "desert", "suit", "current", "lift", "rose", "continue",
    "block", "chart", "hat", "sell", "success", "event", "deal", "swim", "term", "opposite",
    "shoe", "shoulder", "spread", "arrange", "camp", "invent", "cotton", "born", "determine", "nine",
    "truck", "noise", "level", "chance", "gather", "shop", "stretch", "throw", "shine", "property",
    "column", "select", "wrong", "gray", "repeat", "require", "broad", "prepare", "salt", "nose",
    "claim", "continent", "oxygen", "sugar", "pretty", "skill", "season", "solution", "magnet", "silver",
    "thank", "branch", "match", "afraid", "huge", "sister", "steel", "discuss", "forward", "similar",
    "guide", "experience", "score", "apple", "pitch", "coat", "card", "band", "rope", "slip",
    "win", "dream", "evening", "condition", "feed", "tool", "total", "basic", "smell", "valley",
    "double", "seat", "arrive", "master", "track", "parent", "shore", "sheet", "favor", "connect",
    "post", "spend", "glad", "original", "share", "station", "bread", "charge", "proper", "offer",
    "instant", "market", "degree", "dear", "reply", "drink", "occur", "support", "speech", "nature",
    "range", "steam", "motion", "path", "liquid", "log", "teeth", "shell", "neck", "small",
    "high", "low", "hello", "sorry", "eat", "wake", "write", "smile", "put", "down",
    "under", "today", "tomorrow", "always", "often", "maybe", "easy", "weak", "empty", "clean",
    "calm", "brave", "honest", "patient", "funny", "smart", "wise", "lucky", "useful", "helpful",
)

PUNCTUATION_SENTENCES: tuple[str, ...] = (
    "Don't forget to bring your lunch!",
    "What's the weather like today?",
    "The cat's toy is under the table.",
    "Hey! Watch where you're going!",
    "She said, 'I'll be there soon.'",
    "Is this the right way? I'm not sure.",
    "Stop, look, and listen!",
    "The meeting starts at 9:30 a.m.",
    "Please bring: cups, plates, and napkins.",
    "Wow! That's amazing!",
    'He asked, "Why did you do that?"',
    'The sign reads, "No parking at any time."',
    "We need to consider options A, B, and C.",
    "I can't believe it's already Friday!",
    "Do you know where the post office is?",
    "That's great news! Congratulations!",
    "The movie was good; however, the book was better.",
    "Pack the following items: shirts, socks, and shoes.",
    "Wait, did you hear that noise?",
    "My flight leaves at 6:45 p.m.",
    "Remember: practice makes perfect!",
    "There are three categories: beginner, intermediate, and advanced.",
    'She whispered, "This is our secret; don\'t tell anyone."',
    "Can you believe it? We won the championship!",
    "The restaurant (which was highly recommended) was actually quite disappointing.",
    "First, preheat the oven; then, prepare the ingredients.",
    "The museum is closed on Mondays, but it's open on weekends (10:00 a.m. to 6:00 p.m.).",
    "I'm not sure what to do; perhaps you have some ideas?",
    '"Come quickly," she texted, "there\'s something you need to see!"',
    "The instructions say: 'Do not open until Christmas.'",
    "I've heard that song before; it's one of my favorites!",
    "There are several reasons: time, money, and logistics.",
    "Wait! Don't touch that, it's hot!",
    "The conference will be held in Paris, France; Rome, Italy; and Madrid, Spain.",
    "Would you prefer tea, coffee, or hot chocolate?",
    '"I can\'t believe you did that!" she exclaimed.',
    "The forecast predicts rain (70% chance) for tomorrow's picnic.",
    "The package, delivered yesterday, contained all the supplies we ordered.",
    "Have you tried the new restaurant downtown? It's amazing!",
    "Please reply with 'yes,' 'no,' or 'maybe' by tomorrow.",
)

NUMBER_SENTENCES: tuple[str, ...] = (
    "42 is the answer to everything",
    "There are 365 days in a year",
    "The temperature is 25°C outside",
    "I have 99 problems but typing isn't one",
    "It costs $19.99 plus tax",
    "Room 101 is down the hall",
    "Call 555-0123 for more information",
    "The year is 2025 according to the calendar",
    "Chapter 7, page 123 contains the answer",
    "The final score was 3-2",
    "My address is 1234 Oak Street",
    "The sale offers 50% off all items",
    "We need 4 volunteers for the project",
    "The meeting will take 90 minutes",
    "Highway 66 is closed for repairs",
    "The child is 8 years old today",
    "The recipe requires 2 cups of flour",
    "The password must contain at least 1 number",
    "The shop is open from 9:00 to 17:00",
    "The population has increased by 12.5%",
    "The class has 25 students, including 12 boys and 13 girls",
    "I need to buy 3 pounds of apples, 2 pounds of oranges, and 1 pound of grapes",
    "The distance between the two cities is approximately 345.7 miles",
    "Our company has grown by 27% in the last quarter of 2023",
    "The building has 42 floors with 8 apartments on each floor",
    "My new camera cost $599.99 and came with a 2-year warranty",
    "The average adult needs 7-9 hours of sleep per night",
    "The concert tickets are $85 for general admission and $150 for VIP passes",
    "We expect around 300-500 attendees at the conference next week",
    "The recipe will yield 24 cookies at 120 calories each",
    "The property tax rate increased by 0.25% this year",
    "In 2022, the company hired 157 new employees across 6 departments",
    "The museum's collection includes over 10,000 artifacts from the 18th century",
    "Flight AC254 departs at 15:45 from Terminal 3, Gate 27",
    "The laptop weighs 3.2 pounds and measures 13.5 inches diagonally",
    "On average, Americans consume 68 quarts of popcorn per person annually",
    "The Earth is approximately 93,000,000 miles from the Sun",
    "The 2024 budget includes a 5.7% increase for education funding",
    "I need to memorize 50 vocabulary words for tomorrow's test",
    "The marathon record is 2 hours, 1 minute, and 9 seconds",
)

QUOTES: tuple[str, ...] = (
    "Success is not final, failure is not fatal: it is the courage to continue that counts.",
    "The only way to do great work is to love what you do.",
    "Life is what happens when you're busy making other plans.",
    "In three words I can sum up everything I've learned about life: it goes on.",
    "The future belongs to those who believe in the beauty of their dreams.",
    "Be yourself; everyone else is already taken.",
    "Whether you think you can or you think you can't, you're right.",
    "Two things are infinite: the universe and human stupidity; and I'm not sure about the universe.",
    "The question isn't who is going to let me; it's who is going to stop me.",
    "The only impossible journey is the one you never begin.",
    "Yesterday is history, tomorrow is a mystery, today is a gift. That's why we call it 'The Present'.",
    "The best time to plant a tree was 20 years ago. The second best time is now.",
    "You miss 100% of the shots you don't take.",
    "It does not matter how slowly you go as long as you do not stop.",
    "The way to get started is to quit talking and begin doing.",
    "Do not wait to strike till the iron is hot; but make it hot by striking.",
    "Success seems to be connected with action. Successful people keep moving.",
    "Life is short, and it is up to you to make it sweet.",
    "Believe you can and you're halfway there.",
    "If you want to lift yourself up, lift up someone else.",
    "The greatest glory in living lies not in never falling, but in rising every time we fall.",
    "Your time is limited, so don't waste it living someone else's life.",
    "If life were predictable it would cease to be life, and be without flavor.",
    "If you look at what you have in life, you'll always have more. If you look at what you don't have in life, you'll never have enough.",
    "If you set your goals ridiculously high and it's a failure, you will fail above everyone else's success.",
    "Spread love everywhere you go. Let no one ever come to you without leaving happier.",
    "When you reach the end of your rope, tie a knot in it and hang on.",
    "Always remember that you are absolutely unique. Just like everyone else.",
    "Don't judge each day by the harvest you reap but by the seeds that you plant.",
    "Tell me and I forget. Teach me and I remember. Involve me and I learn.",
    "The best and most beautiful things in the world cannot be seen or even touched; they must be felt with the heart.",
    "It is during our darkest moments that we must focus to see the light.",
    "Whoever is happy will make others happy too.",
    "Do not go where the path may lead, go instead where there is no path and leave a trail.",
    "You will face many defeats in life, but never let yourself be defeated.",
    "In the end, it's not the years in your life that count. It's the life in your years.",
    "Never let the fear of striking out keep you from playing the game.",
    "Life is either a daring adventure or nothing at all.",
    "Many of life's failures are people who did not realize how close they were to success when they gave up.",
    "The purpose of our lives is to be happy.",
)


def classify_length(word: str) -> WordLength:
    """Return the length category of a word."""
    if len(word) <= SHORT_WORD_MAX:
        return WordLength.SHORT
    if len(word) <= MEDIUM_WORD_MAX:
        return WordLength.MEDIUM
    return WordLength.LONGER


class WordBank:
    """Read-only categorized word lists and sentence pools.

    The default instance is built from the module level pools. Tests and
    callers may pass their own words to exercise sparse vocabularies.
    """

    def __init__(
        self,
        words: tuple[str, ...] | list[str] = COMMON_WORDS,
        punctuation: tuple[str, ...] | list[str] = PUNCTUATION_SENTENCES,
        numbers: tuple[str, ...] | list[str] = NUMBER_SENTENCES,
        quotes: tuple[str, ...] | list[str] = QUOTES,
    ):
        buckets: dict[WordLength, list[str]] = {length: [] for length in WordLength}
        for word in words:
            if word:
                buckets[classify_length(word)].append(word)
        self._buckets: dict[WordLength, tuple[str, ...]] = {
            length: tuple(bucket) for length, bucket in buckets.items()
        }
        self._pools: dict[SentenceKind, tuple[str, ...]] = {
            SentenceKind.PUNCTUATION: tuple(punctuation),
            SentenceKind.NUMBERS: tuple(numbers),
            SentenceKind.QUOTES: tuple(quotes),
        }

    def words_by_length(self, category: WordLength | str) -> tuple[str, ...]:
        """Get the words of a length category.

        Args:
            category: WordLength or its string value

        Returns:
            Tuple of words, empty for an unknown category
        """
        try:
            return self._buckets[WordLength(category)]
        except ValueError:
            log.warning(f"Unknown word length category: {category!r}")
            return ()

    def sentence_pool(self, kind: SentenceKind | str) -> tuple[str, ...]:
        """Get a fixed sentence pool.

        Args:
            kind: SentenceKind or its string value

        Returns:
            Tuple of sentences, empty for an unknown kind
        """
        try:
            return self._pools[SentenceKind(kind)]
        except ValueError:
            log.warning(f"Unknown sentence pool: {kind!r}")
            return ()


DEFAULT_WORD_BANK = WordBank()


__all__ = [
    "COMMON_WORDS",
    "DEFAULT_WORD_BANK",
    "NUMBER_SENTENCES",
    "PUNCTUATION_SENTENCES",
    "QUOTES",
    "SentenceKind",
    "WordBank",
    "WordLength",
    "classify_length",
]
