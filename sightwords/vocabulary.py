"""
Static word tables used to classify OCR tokens.

All tables are module-level constants loaded once at import time:
- frozensets where only membership matters
- tuples where enumeration order decides which rule wins

Order-sensitive tables (EXTENDED_WORDS, CONCAT_PREFIXES, CONCAT_SUFFIXES,
INAPPROPRIATE_PATTERNS) must stay tuples; reordering them changes which
decomposition or pattern is reported for a token.
"""

from __future__ import annotations

import re

# =============================================================================
# RECOGNITION ARTIFACTS
# =============================================================================

# Two-letter fragments that OCR emits on its own (digraphs, doubled letters)
OCR_ARTIFACTS = frozenset(
    {
        "wh",
        "th",
        "ch",
        "sh",
        "ph",
        "qu",
        "ck",
        "ng",
        "st",
        "nd",
        "rd",
        "ll",
        "ss",
        "ff",
        "tt",
        "pp",
        "mm",
        "nn",
        "bb",
        "dd",
        "gg",
        "rr",
        "vv",
        "aa",
        "ee",
        "ii",
        "oo",
        "uu",
        "yy",
    }
)

# Tokens produced when OCR drops the first letter of a common word
TRUNCATED_WORDS = frozenset(
    {
        "uch",
        "ave",
        "ere",
        "ell",
        "ith",
        "ome",
        "ook",
        "ake",
        "ive",
        "ind",
        "ent",
        "ood",
        "ery",
        "rom",
        "ork",
        "lay",
        "ide",
        "ong",
        "ight",
        "ime",
        "ead",
        "rite",
        "alk",
        "ump",
        "ink",
        "eel",
        "old",
        "ew",
        "ast",
        "ext",
        "ould",
        "ater",
        "eople",
        "irst",
        "umber",
        "ther",
        "ord",
    }
)

# Character-substitution misreads (rn/m, b/h, c/e, n/u, vv/w, l/I) of common
# words; the corrector repairs the frequent ones before validation, these
# catch the rest when a token is validated on its own.
OCR_SUBSTITUTION_ERRORS = frozenset(
    {
        "tbe",
        "lhe",
        "tlie",
        "tbis",
        "tbat",
        "tben",
        "tbey",
        "wbat",
        "wben",
        "wbo",
        "wbere",
        "bcing",
        "heing",
        "bccn",
        "thcir",
        "wonld",
        "conld",
        "shonld",
        "rnake",
        "rnade",
        "rnany",
        "rnay",
        "rny",
        "frorn",
        "sorne",
        "cornc",
        "corne",
        "tirne",
        "narne",
        "horne",
        "rnorning",
        "jnst",
        "abont",
        "ont",
        "vvhat",
        "vvith",
        "vvas",
        "vvere",
        "vvill",
        "vve",
        "lt",
        "ln",
        "ls",
        "lf",
        "witli",
        "tliis",
        "tliat",
        "gradc",
    }
)

# =============================================================================
# AGE-APPROPRIATENESS FILTER
# =============================================================================

INAPPROPRIATE_WORDS = frozenset(
    {
        # Common expletives and variations
        "damn",
        "dammit",
        "hell",
        "heck",
        "crap",
        "shit",
        "piss",
        "fuck",
        "fucking",
        "fucker",
        "bitch",
        "ass",
        "asshole",
        "bastard",
        "dick",
        "cock",
        "pussy",
        "cunt",
        "whore",
        "slut",
        # Misspellings and masked variations
        "fuk",
        "fuq",
        "fck",
        "shyt",
        "sh*t",
        "f*ck",
        "f**k",
        "f***",
        "a**",
        "a***",
        "b***h",
        "d**n",
        "h**l",
        "c**p",
        "p**s",
        "d**k",
        "c**k",
        "p**y",
        "c**t",
        "w**e",
        "s**t",
        # Common OCR misreads
        "fukc",
        "fuking",
        "fukin",
        "fuked",
        "fukd",
        "shytty",
        "assh",
        "bitchy",
        "bitchin",
        "hellish",
        "crapola",
        # First letter + asterisk
        "f*",
        "s*",
        "a*",
        "b*",
        "c*",
        "d*",
        "h*",
        "p*",
        "w*",
    }
)

# Prefix patterns, checked in order after the exact-term lookup.
# These over-match ("hello", "assist") and under-match creative spellings;
# kept as-is because the list is a product decision.
INAPPROPRIATE_PATTERNS = (
    re.compile(r"^f[u*]ck"),
    re.compile(r"^sh[i*]t"),
    re.compile(r"^a[s*]s"),
    re.compile(r"^b[i*]tch"),
    re.compile(r"^d[a*]mn"),
    re.compile(r"^h[e*]ll"),
    re.compile(r"^c[r*]ap"),
    re.compile(r"^p[i*]ss"),
    re.compile(r"^d[i*]ck"),
    re.compile(r"^c[o*]ck"),
    re.compile(r"^p[u*]ssy"),
    re.compile(r"^c[u*]nt"),
    re.compile(r"^w[h*]ore"),
    re.compile(r"^s[l*]ut"),
)

# =============================================================================
# CONCATENATION DICTIONARIES
# =============================================================================

# Short function words and everyday verbs/adjectives
COMMON_WORDS = (
    "the",
    "and",
    "or",
    "but",
    "in",
    "on",
    "at",
    "to",
    "for",
    "of",
    "with",
    "by",
    "a",
    "an",
    "is",
    "it",
    "he",
    "she",
    "we",
    "me",
    "my",
    "you",
    "your",
    "they",
    "will",
    "can",
    "has",
    "had",
    "was",
    "were",
    "be",
    "been",
    "have",
    "do",
    "does",
    "did",
    "go",
    "goes",
    "went",
    "come",
    "came",
    "see",
    "saw",
    "say",
    "said",
    "get",
    "got",
    "make",
    "made",
    "take",
    "took",
    "give",
    "gave",
    "find",
    "found",
    "look",
    "looked",
    "like",
    "liked",
    "want",
    "wanted",
    "need",
    "needed",
    "play",
    "played",
    "work",
    "worked",
    "help",
    "helped",
    "tell",
    "told",
    "ask",
    "asked",
    "know",
    "knew",
    "think",
    "thought",
    "feel",
    "felt",
    "good",
    "bad",
    "big",
    "small",
    "new",
    "old",
    "long",
    "short",
    "high",
    "low",
    "first",
    "last",
    "next",
    "then",
    "now",
    "here",
    "there",
    "where",
    "when",
    "why",
    "how",
    "what",
    "who",
    "which",
    "this",
    "that",
    "these",
    "those",
)

# Extended vocabulary for concatenation detection: common words followed by
# classroom nouns and verbs. De-duplicated keeping first occurrence, since
# enumeration order is the tie-break between competing decompositions.
EXTENDED_WORDS = tuple(
    dict.fromkeys(
        COMMON_WORDS
        + (
            "test",
            "check",
            "try",
            "use",
            "see",
            "look",
            "read",
            "write",
            "draw",
            "paint",
            "sing",
            "dance",
            "run",
            "walk",
            "jump",
            "play",
            "eat",
            "drink",
            "sleep",
            "wake",
            "open",
            "close",
            "start",
            "stop",
            "begin",
            "end",
            "finish",
            "break",
            "fix",
            "build",
            "clean",
            "wash",
            "cook",
            "bake",
            "buy",
            "sell",
            "give",
            "take",
            "bring",
            "carry",
            "push",
            "pull",
            "lift",
            "drop",
            "catch",
            "throw",
            "hit",
            "kick",
            "touch",
            "hold",
            "let",
            "put",
            "set",
            "get",
            "find",
            "lose",
            "keep",
            "save",
            "spend",
            "cost",
            "time",
            "day",
            "night",
            "morning",
            "evening",
            "week",
            "month",
            "year",
            "hour",
            "minute",
            "book",
            "page",
            "story",
            "word",
            "letter",
            "number",
            "name",
            "friend",
            "family",
            "home",
            "school",
            "teacher",
            "student",
            "class",
            "room",
            "door",
            "window",
            "floor",
            "wall",
            "ceiling",
            "table",
            "chair",
            "bed",
            "desk",
            "box",
            "bag",
            "cup",
            "plate",
            "fork",
            "spoon",
            "car",
            "bus",
            "train",
            "plane",
            "bike",
            "boat",
            "road",
            "street",
            "house",
            "tree",
            "sun",
            "moon",
            "star",
            "cloud",
            "rain",
            "snow",
            "wind",
            "hot",
            "cold",
            "warm",
            "red",
            "blue",
            "green",
            "yellow",
            "black",
            "white",
            "brown",
            "pink",
            "purple",
            "orange",
        )
    )
)

# Curated verb-like prefixes for the final concatenation pass
CONCAT_PREFIXES = (
    "will",
    "can",
    "has",
    "had",
    "was",
    "were",
    "have",
    "do",
    "did",
    "go",
    "come",
    "see",
    "get",
    "make",
    "take",
    "give",
    "find",
    "look",
    "like",
    "want",
    "need",
    "play",
    "work",
    "help",
    "tell",
    "ask",
    "know",
    "think",
    "feel",
    "good",
    "bad",
    "big",
    "small",
    "new",
    "old",
    "long",
    "short",
    "high",
    "low",
    "first",
    "last",
    "next",
    "then",
    "now",
    "here",
    "there",
    "where",
    "when",
    "why",
    "how",
    "what",
    "who",
    "which",
    "this",
    "that",
    "these",
    "those",
)

# Curated suffixes paired with CONCAT_PREFIXES
CONCAT_SUFFIXES = (
    "test",
    "check",
    "try",
    "use",
    "see",
    "look",
    "read",
    "write",
    "draw",
    "paint",
    "sing",
    "dance",
    "run",
    "walk",
    "jump",
    "play",
    "eat",
    "drink",
    "sleep",
    "wake",
    "open",
    "close",
    "start",
    "stop",
    "begin",
    "end",
    "finish",
    "break",
    "fix",
    "build",
    "clean",
    "wash",
    "cook",
    "bake",
    "buy",
    "sell",
    "give",
    "take",
    "bring",
    "carry",
    "push",
    "pull",
    "lift",
    "drop",
    "catch",
    "throw",
    "hit",
    "kick",
    "touch",
    "hold",
    "let",
    "put",
    "set",
    "get",
    "find",
    "lose",
    "keep",
    "save",
    "spend",
    "cost",
    "time",
    "day",
    "night",
    "morning",
    "evening",
    "week",
    "month",
    "year",
    "hour",
    "minute",
    "book",
    "page",
    "story",
    "word",
    "letter",
    "number",
    "name",
    "friend",
    "family",
    "home",
    "school",
    "teacher",
    "student",
    "class",
    "room",
    "door",
    "window",
    "floor",
    "wall",
    "ceiling",
    "table",
    "chair",
    "bed",
    "desk",
    "box",
    "bag",
    "cup",
    "plate",
    "fork",
    "spoon",
    "car",
    "bus",
    "train",
    "plane",
    "bike",
    "boat",
    "road",
    "street",
    "house",
    "tree",
    "sun",
    "moon",
    "star",
    "cloud",
    "rain",
    "snow",
    "wind",
    "hot",
    "cold",
    "warm",
)

# =============================================================================
# SIGHT WORDS
# =============================================================================

# Known-good sight words; accepted without the generic heuristic
SIGHT_WORDS = frozenset(
    {
        "a",
        "about",
        "all",
        "am",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "been",
        "but",
        "by",
        "call",
        "can",
        "come",
        "could",
        "day",
        "did",
        "do",
        "down",
        "each",
        "find",
        "first",
        "for",
        "from",
        "get",
        "go",
        "had",
        "has",
        "have",
        "he",
        "her",
        "here",
        "him",
        "his",
        "how",
        "if",
        "in",
        "into",
        "is",
        "it",
        "its",
        "just",
        "know",
        "like",
        "long",
        "look",
        "made",
        "make",
        "many",
        "may",
        "more",
        "my",
        "no",
        "not",
        "now",
        "number",
        "of",
        "on",
        "one",
        "or",
        "other",
        "out",
        "part",
        "people",
        "said",
        "see",
        "she",
        "so",
        "some",
        "than",
        "that",
        "the",
        "their",
        "them",
        "then",
        "there",
        "these",
        "they",
        "this",
        "time",
        "to",
        "two",
        "up",
        "use",
        "was",
        "water",
        "way",
        "we",
        "were",
        "what",
        "when",
        "which",
        "who",
        "will",
        "with",
        "word",
        "would",
        "write",
        "you",
        "your",
        "yesterday",
        "today",
        "tomorrow",
        "morning",
        "afternoon",
        "evening",
        "night",
    }
)

# Single letters that are words on their own; exempt from the vowel rules
SINGLE_LETTER_WORDS = frozenset({"a", "i", "o"})

# =============================================================================
# DENYLISTS
# =============================================================================

# Function words and worksheet instructions ("Your child should know these
# sight words by the end of grade 1") removed from the final list
STOP_WORDS = frozenset(
    {
        "the",
        "and",
        "or",
        "but",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
        "your",
        "child",
        "should",
        "know",
        "sight",
        "word",
        "list",
        "end",
        "grade",
    }
)

# Color names (worksheets print words in colored boxes with labels)
COLOR_WORDS = frozenset(
    {
        "red",
        "blue",
        "green",
        "yellow",
        "black",
        "white",
        "brown",
        "pink",
        "purple",
        "orange",
    }
)

# =============================================================================
# FALLBACK WORD LIST
# =============================================================================

# Used when neither the example document nor the bundled CSV can be read
FALLBACK_WORDS = (
    "after",
    "again",
    "an",
    "any",
    "ask",
    "as",
    "by",
    "could",
    "every",
    "fly",
    "from",
    "give",
    "going",
    "had",
    "has",
    "her",
    "him",
    "his",
    "how",
    "just",
    "know",
    "let",
    "live",
    "may",
    "of",
    "old",
    "once",
    "open",
    "over",
    "put",
    "round",
    "some",
    "stop",
    "take",
    "thank",
    "them",
    "then",
    "think",
    "walk",
    "were",
    "when",
)
