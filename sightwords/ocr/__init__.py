"""
Word extraction from noisy OCR text.

This module turns recognized text into a clean sight-word list using:
- Recognition-confidence filtering of engine output
- Ordered correction of common misreads
- Rule-based validation of each token
- Detection of two words fused into one

Example:
    >>> from sightwords.ocr import ExtractionPipeline
    >>> pipeline = ExtractionPipeline()
    >>> result = pipeline.process("willtest cat tbe")
    >>> result.words
    ['cat']
    >>> [item.reason.value for item in result.diagnostics.invalid_words]
    ['concatenated_words']
"""

from sightwords.ocr.concatenation import ConcatenationDetector, detect_concatenation
from sightwords.ocr.confidence import DEFAULT_MIN_CONFIDENCE, filter_by_confidence
from sightwords.ocr.engine import TesseractEngine, detect_capability
from sightwords.ocr.pipeline import ExtractionPipeline, extract_words
from sightwords.ocr.validator import WordValidator, validate_word

__all__ = [
    # Pipeline
    "ExtractionPipeline",
    "extract_words",
    # Validation
    "WordValidator",
    "validate_word",
    # Concatenation
    "ConcatenationDetector",
    "detect_concatenation",
    # Confidence
    "DEFAULT_MIN_CONFIDENCE",
    "filter_by_confidence",
    # Engine
    "TesseractEngine",
    "detect_capability",
]
