"""
Word extraction pipeline.

Turns a blob of extracted text into a clean sight-word list:
1. Recognition-confidence filter (only when OCR output is supplied)
2. Ordered correction of known misreads
3. Tokenization
4. Per-token validation
5. Partition into valid / invalid, order preserved
6. Denylist and color-word removal
7. Deduplication, first occurrence wins

The pipeline holds only configuration; every call works on its own data,
so one instance can be shared freely.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sightwords.config import ExtractionOptions
from sightwords.models import (
    CorrectionRule,
    ExtractionDiagnostics,
    ExtractionResult,
    InvalidWord,
    OCRResult,
    WordEntry,
)
from sightwords.normalizers.correction import CORRECTION_RULES, apply_corrections
from sightwords.normalizers.text import normalize_text
from sightwords.ocr.confidence import filter_by_confidence
from sightwords.ocr.validator import WordValidator
from sightwords.vocabulary import COLOR_WORDS

logger = logging.getLogger(__name__)


# =============================================================================
# EXTRACTION PIPELINE
# =============================================================================


class ExtractionPipeline:
    """
    Extracts sight words from raw text.

    Attributes:
        options: Length bounds, denylist and confidence threshold.
        rules: Ordered correction table.
        validator: WordValidator built from the options.

    Example:
        >>> pipeline = ExtractionPipeline()
        >>> pipeline.process("cat dog the and fly").words
        ['cat', 'dog', 'fly']
    """

    def __init__(
        self,
        options: ExtractionOptions | None = None,
        rules: Iterable[CorrectionRule] = CORRECTION_RULES,
    ):
        self.options = options or ExtractionOptions()
        self.rules = tuple(rules)
        self.validator = WordValidator(
            min_length=self.options.min_word_length,
            max_length=self.options.max_word_length,
        )

        excluded = set(self.options.denylist)
        if self.options.exclude_colors:
            excluded |= COLOR_WORDS
        self.excluded = frozenset(excluded)

    def process(
        self,
        text: str | None = "",
        ocr_result: OCRResult | None = None,
        min_confidence: float | None = None,
    ) -> ExtractionResult:
        """
        Run the full pipeline.

        Args:
            text: Raw extracted text. Ignored when ocr_result is given.
            ocr_result: OCR output with confidences, filtered before
                extraction.
            min_confidence: Overrides options.min_confidence for the
                confidence filter.

        Returns:
            ExtractionResult with the final words and diagnostics.
        """
        if ocr_result is not None:
            threshold = self.options.min_confidence if min_confidence is None else min_confidence
            text = filter_by_confidence(ocr_result, threshold, self.rules)

        if not text:
            return ExtractionResult()

        corrected = apply_corrections(text, self.rules)
        tokens = normalize_text(
            corrected,
            min_length=self.options.min_word_length,
            max_length=self.options.max_word_length,
        )
        logger.debug("Initial word list: %s", tokens)

        entries = self.classify(tokens)

        valid_words = [entry.word for entry in entries if entry.is_valid]
        invalid_words = [
            InvalidWord(word=entry.word, reason=entry.reason, parts=entry.parts)
            for entry in entries
            if not entry.is_valid
        ]
        logger.debug("Valid words: %s", valid_words)
        logger.debug("Invalid words: %s", [item.to_dict() for item in invalid_words])

        words = self.finalize(valid_words)
        logger.debug("Final word list: %s", words)

        return ExtractionResult(
            words=words,
            diagnostics=ExtractionDiagnostics(
                valid_words=valid_words,
                invalid_words=invalid_words,
                total_processed=len(tokens),
            ),
        )

    def classify(self, tokens: Iterable[str]) -> list[WordEntry]:
        """Validate each token, in order."""
        entries = []
        for token in tokens:
            verdict = self.validator.validate(token)
            entries.append(
                WordEntry(
                    word=token,
                    is_valid=verdict.is_valid,
                    reason=verdict.reason,
                    parts=verdict.parts,
                )
            )
        return entries

    def finalize(self, valid_words: Iterable[str]) -> list[str]:
        """Drop denylisted words and duplicates, keeping first occurrences."""
        words: dict[str, None] = {}
        for word in valid_words:
            if word in self.excluded:
                continue
            words.setdefault(word, None)
        return list(words)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def extract_words(
    text: str | None,
    options: ExtractionOptions | None = None,
) -> ExtractionResult:
    """
    Extract sight words from text with a one-off pipeline.

    Args:
        text: Raw extracted text.
        options: Extraction options (defaults if omitted).

    Returns:
        ExtractionResult for the text.
    """
    return ExtractionPipeline(options).process(text)
