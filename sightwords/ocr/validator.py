"""
Sight-word validation for OCR tokens.

Each token goes through a fixed sequence of checks. The first failing
check decides the rejection reason; a token on the sight-word allowlist
is accepted as soon as it is reached, before the generic heuristic.

Check order:
1. Length
2. Known OCR artifacts (digraphs, doubled letters)
3. Age-appropriateness (exact terms, then prefix patterns)
4. Two words fused together
5. Truncated words (first letter dropped)
6. Character-substitution misreads
7. Repeated characters and unpronounceable letter runs
8. Sight-word allowlist (accept)
9. Vowel and consonant present
10. Accept

The heuristics are deliberately permissive; this is a filter for OCR
noise on worksheets, not a spellchecker.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from sightwords.models import ReasonCode, ValidationVerdict
from sightwords.normalizers.text import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH
from sightwords.ocr.concatenation import ConcatenationDetector
from sightwords.vocabulary import (
    CONCAT_PREFIXES,
    CONCAT_SUFFIXES,
    EXTENDED_WORDS,
    INAPPROPRIATE_PATTERNS,
    INAPPROPRIATE_WORDS,
    OCR_ARTIFACTS,
    OCR_SUBSTITUTION_ERRORS,
    SIGHT_WORDS,
    SINGLE_LETTER_WORDS,
    TRUNCATED_WORDS,
)

logger = logging.getLogger(__name__)


# =============================================================================
# LETTER PATTERNS
# =============================================================================

# "y" counts as a vowel for the consonant classes so that words like
# "fly", "my" and "gym" are not treated as consonant-only.
VOWELS = "aeiou"
CONSONANTS = "bcdfghjklmnpqrstvwxz"

REPEATED_CHARS = re.compile(r"(.)\1{2,}")

# Checked in order; ALL_VOWELS is the only one with exceptions
VOWEL_RUN = re.compile(rf"[{VOWELS}]{{4,}}")
CONSONANT_RUN = re.compile(rf"[{CONSONANTS}]{{5,}}")
ALL_CONSONANTS = re.compile(rf"^[{CONSONANTS}]+$")
ALL_VOWELS = re.compile(rf"^[{VOWELS}]+$")

UNLIKELY_PATTERNS = (VOWEL_RUN, CONSONANT_RUN, ALL_CONSONANTS, ALL_VOWELS)

HAS_VOWEL = re.compile(rf"[{VOWELS}y]")
HAS_CONSONANT = re.compile(rf"[{CONSONANTS}]")


# =============================================================================
# VALIDATOR
# =============================================================================


def _reject(reason: ReasonCode, parts: tuple[str, str] | None = None) -> ValidationVerdict:
    return ValidationVerdict(is_valid=False, reason=reason, parts=parts)


def _accept(reason: ReasonCode) -> ValidationVerdict:
    return ValidationVerdict(is_valid=True, reason=reason)


class WordValidator:
    """
    Classifies a token as a plausible sight word or OCR noise.

    Single letters skip the minimum-length check so that the vowel rules
    can tell the real one-letter words ("a", "i", "o") apart from noise.

    Attributes:
        min_length: Shortest acceptable token (single letters excepted).
        max_length: Longest acceptable token.
        detector: Concatenation detector used by check 4.

    Example:
        >>> validator = WordValidator()
        >>> validator.validate("yesterday")
        ValidationVerdict(is_valid=True, reason=<ReasonCode.KNOWN_SIGHT_WORD: ...>, parts=None)
        >>> validator.validate("willtest").describe()
        'concatenated_words (will+test)'
    """

    def __init__(
        self,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
        dictionary: Iterable[str] = EXTENDED_WORDS,
        sight_words: Iterable[str] = SIGHT_WORDS,
    ):
        """
        Initialize the validator.

        Args:
            min_length: Shortest acceptable token.
            max_length: Longest acceptable token.
            dictionary: Common words for concatenation detection, in
                tie-break order.
            sight_words: Allowlist accepted without the generic heuristic.
        """
        self.min_length = min_length
        self.max_length = max_length
        self.detector = ConcatenationDetector(dictionary, CONCAT_PREFIXES, CONCAT_SUFFIXES)
        self.sight_words = frozenset(sight_words)

    def validate(self, token: str) -> ValidationVerdict:
        """
        Validate a single token.

        Args:
            token: Candidate word; lowercased before checking.

        Returns:
            ValidationVerdict carrying exactly one ReasonCode.
        """
        word = (token or "").lower()
        verdict = self._classify(word)
        logger.debug(
            "'%s': %s (%s)", word, "PASS" if verdict.is_valid else "FAIL", verdict.describe()
        )
        return verdict

    def _classify(self, word: str) -> ValidationVerdict:
        # 1. Length
        if not self._length_ok(word):
            return _reject(ReasonCode.LENGTH)

        # 2. Recognition artifacts
        if word in OCR_ARTIFACTS:
            return _reject(ReasonCode.OCR_ARTIFACT)

        # 3. Age-appropriateness
        if word in INAPPROPRIATE_WORDS:
            return _reject(ReasonCode.INAPPROPRIATE_CONTENT)
        for pattern in INAPPROPRIATE_PATTERNS:
            if pattern.search(word):
                return _reject(ReasonCode.INAPPROPRIATE_PATTERN)

        # 4. Fused words
        concatenation = self.detector.detect(word)
        if concatenation.is_concatenated:
            return _reject(ReasonCode.CONCATENATED_WORDS, concatenation.parts)

        # 5. Dropped first letter
        if word in TRUNCATED_WORDS:
            return _reject(ReasonCode.TRUNCATED_WORD)

        # 6. Character-substitution misreads
        if word in OCR_SUBSTITUTION_ERRORS:
            return _reject(ReasonCode.OCR_SUBSTITUTION_ERROR)

        # 7. Letter patterns
        if REPEATED_CHARS.search(word):
            return _reject(ReasonCode.REPEATED_CHARS)
        for pattern in UNLIKELY_PATTERNS:
            if pattern.search(word):
                if pattern is ALL_VOWELS and word in SINGLE_LETTER_WORDS:
                    continue
                return _reject(ReasonCode.UNLIKELY_PATTERN)

        # 8. Allowlist
        if word in self.sight_words:
            return _accept(ReasonCode.KNOWN_SIGHT_WORD)

        # 9. Generic heuristic
        if word not in SINGLE_LETTER_WORDS and not (
            HAS_VOWEL.search(word) and HAS_CONSONANT.search(word)
        ):
            return _reject(ReasonCode.MISSING_VOWEL_OR_CONSONANT)

        # 10. Fallback acceptance
        if self.min_length <= len(word) <= self.max_length or word in SINGLE_LETTER_WORDS:
            return _accept(ReasonCode.PASSED_VALIDATION)

        # Unreachable while check 1 holds; kept as a defined terminal state
        return _reject(ReasonCode.FAILED_FINAL_CHECK)

    def _length_ok(self, word: str) -> bool:
        if len(word) > self.max_length:
            return False
        return len(word) >= self.min_length or len(word) == 1

    def is_valid(self, token: str) -> bool:
        """Shortcut for ``validate(token).is_valid``."""
        return self.validate(token).is_valid


_default_validator = WordValidator()


def validate_word(token: str) -> ValidationVerdict:
    """
    Validate a token with the default tables and length bounds.

    Args:
        token: Candidate word.

    Returns:
        ValidationVerdict for the token.
    """
    return _default_validator.validate(token)
