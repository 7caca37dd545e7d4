"""
Detection of two words fused into one token.

Text recognition often drops the space between adjacent words
("willtest", "canuse"). The detector checks a token against a small
ordered dictionary of common words in three stages:
1. Exact fusion of two dictionary words
2. Dictionary prefix followed by (the start of) another dictionary word
3. Curated verb-like prefixes followed by curated suffixes

The first stage that matches wins. Within a stage, dictionary enumeration
order decides which decomposition is reported.

Performance: the exact-fusion stage is O(n²) in dictionary size per token.
That is fine for a dictionary of a few hundred words; a prefix trie would
be faster for larger dictionaries but must reproduce the same
first-match-in-order result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sightwords.models import ConcatenationResult
from sightwords.vocabulary import CONCAT_PREFIXES, CONCAT_SUFFIXES, EXTENDED_WORDS

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Minimum length of a dictionary word used as a prefix in stage 2
MIN_PREFIX_LENGTH = 3

# Minimum length of the second word matched against the remainder in stage 2
MIN_SECOND_WORD_LENGTH = 2

# Stage 3 requires the token to be longer than prefix + this many chars
CURATED_MIN_EXTRA_LENGTH = 2

NOT_CONCATENATED = ConcatenationResult(is_concatenated=False)


# =============================================================================
# CONCATENATION DETECTOR
# =============================================================================


class ConcatenationDetector:
    """
    Decides whether a token is two dictionary words run together.

    Attributes:
        dictionary: Ordered, de-duplicated tuple of common short words.
        prefixes: Curated prefixes for the final pass.
        suffixes: Curated suffixes for the final pass.

    Example:
        >>> detector = ConcatenationDetector()
        >>> detector.detect("willtest")
        ConcatenationResult(is_concatenated=True, parts=('will', 'test'))
        >>> detector.detect("cat").is_concatenated
        False
    """

    def __init__(
        self,
        dictionary: Iterable[str] = EXTENDED_WORDS,
        prefixes: Iterable[str] = CONCAT_PREFIXES,
        suffixes: Iterable[str] = CONCAT_SUFFIXES,
    ):
        """
        Initialize the detector.

        Args:
            dictionary: Common words, in tie-break order. Duplicates are
                dropped keeping the first occurrence.
            prefixes: Curated prefixes for the final pass.
            suffixes: Curated suffixes for the final pass.
        """
        self.dictionary = tuple(dict.fromkeys(dictionary))
        self.prefixes = tuple(prefixes)
        self.suffixes = tuple(suffixes)

    def detect(self, token: str) -> ConcatenationResult:
        """
        Check a token for a two-word fusion.

        Args:
            token: Lowercase token.

        Returns:
            ConcatenationResult with the two parts of the first match,
            or a negative result.
        """
        for stage in (self._exact_fusion, self._prefix_remainder, self._curated_patterns):
            result = stage(token)
            if result.is_concatenated:
                logger.debug(
                    "%r is concatenated (%s) via %s",
                    token,
                    "+".join(result.parts),
                    stage.__name__,
                )
                return result
        return NOT_CONCATENATED

    def _exact_fusion(self, token: str) -> ConcatenationResult:
        """Token equals dictionary[i] + dictionary[j] for some i < j."""
        words = self.dictionary
        for i, first in enumerate(words):
            if not token.startswith(first):
                continue
            for second in words[i + 1 :]:
                if first + second == token:
                    return ConcatenationResult(is_concatenated=True, parts=(first, second))
        return NOT_CONCATENATED

    def _prefix_remainder(self, token: str) -> ConcatenationResult:
        """A dictionary word prefixes the token and the rest begins another."""
        for first in self.dictionary:
            if len(first) < MIN_PREFIX_LENGTH or not token.startswith(first):
                continue
            remainder = token[len(first) :]
            for second in self.dictionary:
                if len(second) >= MIN_SECOND_WORD_LENGTH and remainder.startswith(second):
                    return ConcatenationResult(is_concatenated=True, parts=(first, second))
        return NOT_CONCATENATED

    def _curated_patterns(self, token: str) -> ConcatenationResult:
        """Curated prefix followed by a curated suffix."""
        for prefix in self.prefixes:
            if not token.startswith(prefix):
                continue
            if len(token) <= len(prefix) + CURATED_MIN_EXTRA_LENGTH:
                continue
            remainder = token[len(prefix) :]
            for suffix in self.suffixes:
                if remainder.startswith(suffix):
                    return ConcatenationResult(is_concatenated=True, parts=(prefix, suffix))
        return NOT_CONCATENATED


_default_detector = ConcatenationDetector()


def detect_concatenation(token: str) -> ConcatenationResult:
    """
    Check a token against the default dictionary.

    Args:
        token: Lowercase token.

    Returns:
        ConcatenationResult for the token.
    """
    return _default_detector.detect(token)
