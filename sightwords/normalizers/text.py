"""
Tokenization of raw extracted text.

Two entry points:
- normalize_text: the extraction path, feeding the word validator
- parse_manual_words: the manual-entry path, which skips validation
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_MIN_LENGTH = 2
DEFAULT_MAX_LENGTH = 10

# Manual entry accepts shorter words than the extraction path
MANUAL_MAX_LENGTH = 8

_WHITESPACE = re.compile(r"\s+")
_NON_LETTER = re.compile(r"[^a-z]")
_MANUAL_SEPARATORS = re.compile(r"[\s,]+")
_LETTERS_ONLY = re.compile(r"^[a-z]+$")


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize_text(
    text: str | None,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> list[str]:
    """
    Split raw text into lowercase letter-only tokens.

    Each whitespace-separated piece has every non-ASCII-letter character
    removed (so "don't" becomes "dont" and "3rd" becomes "rd"). Pieces
    whose cleaned length falls outside the bounds are dropped.

    Args:
        text: Raw text from OCR or document extraction.
        min_length: Shortest token kept.
        max_length: Longest token kept.

    Returns:
        Tokens in source order, duplicates included.

    Example:
        >>> normalize_text("The cat, the DOG!")
        ['the', 'cat', 'the', 'dog']
    """
    if not text or not isinstance(text, str):
        return []

    tokens = []
    for piece in _WHITESPACE.split(text.lower()):
        token = _NON_LETTER.sub("", piece)
        if min_length <= len(token) <= max_length:
            tokens.append(token)

    logger.debug("Normalized %d chars into %d tokens", len(text), len(tokens))
    return tokens


def parse_manual_words(
    text: str | None,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = MANUAL_MAX_LENGTH,
) -> list[str]:
    """
    Parse a typed word list.

    Words are separated by whitespace, commas or newlines. Unlike
    normalize_text, pieces containing anything other than letters are
    discarded rather than cleaned, and the result is deduplicated.

    Args:
        text: Free text typed by the user.
        min_length: Shortest word kept.
        max_length: Longest word kept.

    Returns:
        Unique lowercase words in first-occurrence order.
    """
    if not text or not isinstance(text, str):
        return []

    words: dict[str, None] = {}
    for piece in _MANUAL_SEPARATORS.split(text.strip()):
        word = piece.strip().lower()
        if not min_length <= len(word) <= max_length:
            continue
        if _LETTERS_ONLY.match(word):
            words.setdefault(word, None)

    return list(words)
