"""
Data models for sightwords.

These models describe the outcome of word extraction: per-token verdicts,
the diagnostic report and the final word list handed to the flashcard UI
and to persistence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ReasonCode(str, Enum):
    """Why the validator accepted or rejected a token.

    Closed set: every verdict carries exactly one of these.
    """

    LENGTH = "length"
    OCR_ARTIFACT = "ocr_artifact"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    INAPPROPRIATE_PATTERN = "inappropriate_pattern"
    CONCATENATED_WORDS = "concatenated_words"
    TRUNCATED_WORD = "truncated_word"
    OCR_SUBSTITUTION_ERROR = "ocr_substitution_error"
    REPEATED_CHARS = "repeated_chars"
    UNLIKELY_PATTERN = "unlikely_pattern"
    MISSING_VOWEL_OR_CONSONANT = "missing_vowel_or_consonant"
    KNOWN_SIGHT_WORD = "known_sight_word"
    PASSED_VALIDATION = "passed_validation"
    FAILED_FINAL_CHECK = "failed_final_check"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationVerdict:
    """Outcome of validating a single token."""

    is_valid: bool
    reason: ReasonCode
    parts: tuple[str, str] | None = None  # Only set for concatenated_words

    def describe(self) -> str:
        """Human-readable reason, e.g. ``concatenated_words (will+test)``."""
        if self.parts:
            return f"{self.reason.value} ({'+'.join(self.parts)})"
        return self.reason.value


@dataclass(frozen=True)
class ConcatenationResult:
    """Whether a token is two dictionary words fused together."""

    is_concatenated: bool
    parts: tuple[str, str] | None = None


@dataclass(frozen=True)
class CorrectionRule:
    """A whole-word substitution that repairs a recognition artifact."""

    error_pattern: str
    correction: str


@dataclass(frozen=True)
class WordEntry:
    """Diagnostic record for one token seen by the pipeline."""

    word: str
    is_valid: bool
    reason: ReasonCode
    parts: tuple[str, str] | None = None


@dataclass(frozen=True)
class InvalidWord:
    """A rejected token and the reason it was rejected."""

    word: str
    reason: ReasonCode
    parts: tuple[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {"word": self.word, "reason": self.reason.value}
        if self.parts:
            data["parts"] = list(self.parts)
        return data


@dataclass
class ExtractionDiagnostics:
    """Sanity report for an extraction run (display only)."""

    valid_words: list[str] = field(default_factory=list)
    invalid_words: list[InvalidWord] = field(default_factory=list)
    total_processed: int = 0

    def reason_counts(self) -> dict[str, int]:
        """Count rejected tokens per reason code."""
        counts: dict[str, int] = {}
        for item in self.invalid_words:
            counts[item.reason.value] = counts.get(item.reason.value, 0) + 1
        return counts


@dataclass
class ExtractionResult:
    """
    Final output of the extraction pipeline.

    ``words`` is the only field downstream consumers need; ``diagnostics``
    explains what was filtered out and why.

    Example:
        >>> from sightwords import extract_words
        >>> result = extract_words("cat dog the and fly")
        >>> result.words
        ['cat', 'dog', 'fly']
    """

    words: list[str] = field(default_factory=list)
    diagnostics: ExtractionDiagnostics = field(default_factory=ExtractionDiagnostics)

    @property
    def is_empty(self) -> bool:
        """True when nothing usable was extracted."""
        return not self.words

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary using the camelCase keys the web client expects.
        """
        return {
            "words": list(self.words),
            "diagnostics": {
                "validWords": list(self.diagnostics.valid_words),
                "invalidWords": [item.to_dict() for item in self.diagnostics.invalid_words],
                "totalProcessed": self.diagnostics.total_processed,
            },
        }


@dataclass(frozen=True)
class OCRWord:
    """A recognized word with its engine confidence (0-100)."""

    text: str
    confidence: float


@dataclass
class OCRResult:
    """Output of the OCR engine for one image."""

    text: str
    overall_confidence: float
    words: list[OCRWord] | None = None
