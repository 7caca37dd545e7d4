"""
Text normalizers applied before word validation.

- correct_text: ordered whole-word repair of recognition errors
- normalize_text: tokenization for the extraction pipeline
- parse_manual_words: tokenization for typed word lists
"""

from sightwords.normalizers.correction import (
    CORRECTION_RULES,
    CorrectionResult,
    apply_corrections,
    correct_text,
)
from sightwords.normalizers.text import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    MANUAL_MAX_LENGTH,
    normalize_text,
    parse_manual_words,
)

__all__ = [
    # Correction
    "CORRECTION_RULES",
    "CorrectionResult",
    "apply_corrections",
    "correct_text",
    # Tokenization
    "DEFAULT_MIN_LENGTH",
    "DEFAULT_MAX_LENGTH",
    "MANUAL_MAX_LENGTH",
    "normalize_text",
    "parse_manual_words",
]
