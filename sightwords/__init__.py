"""
sightwords: Build sight-word flashcard lists from worksheets.

This library turns noisy document text (OCR output from scanned PDFs,
Word documents, bundled word lists) into a clean, age-appropriate,
deduplicated list of short words for early-reading practice.

Example:
    >>> import sightwords
    >>> result = sightwords.extract_words("cat dog the and fly")
    >>> result.words
    ['cat', 'dog', 'fly']

    >>> # From a document, with OCR for scanned pages
    >>> result = sightwords.extract_from_file("worksheet.pdf")
    >>> for item in result.diagnostics.invalid_words:
    ...     print(item.word, item.reason)
"""

from sightwords.config import ExtractionOptions, OCRConfig, SightWordsConfig
from sightwords.convert import (
    WordListLoad,
    detect_format,
    extract_from_file,
    extract_text,
    load_word_list,
    supported_formats,
)
from sightwords.exceptions import (
    ConfigurationError,
    EmptyWordListError,
    ExtractionError,
    SightWordsError,
    UnsupportedFormatError,
)
from sightwords.models import (
    ConcatenationResult,
    CorrectionRule,
    ExtractionDiagnostics,
    ExtractionResult,
    InvalidWord,
    OCRResult,
    OCRWord,
    ReasonCode,
    ValidationVerdict,
    WordEntry,
)
from sightwords.normalizers import (
    CORRECTION_RULES,
    correct_text,
    normalize_text,
    parse_manual_words,
)
from sightwords.ocr import (
    ConcatenationDetector,
    ExtractionPipeline,
    WordValidator,
    detect_concatenation,
    extract_words,
    filter_by_confidence,
    validate_word,
)
from sightwords.session import (
    JsonWordListStore,
    WordListSession,
    WordListStore,
    build_student_url,
)

__version__ = "0.1.0"
__all__ = [
    # Main API
    "extract_words",
    "extract_from_file",
    "extract_text",
    "load_word_list",
    "detect_format",
    "supported_formats",
    # Configuration
    "ExtractionOptions",
    "OCRConfig",
    "SightWordsConfig",
    # Pipeline components
    "ExtractionPipeline",
    "WordValidator",
    "validate_word",
    "ConcatenationDetector",
    "detect_concatenation",
    "filter_by_confidence",
    "CORRECTION_RULES",
    "correct_text",
    "normalize_text",
    "parse_manual_words",
    # Models
    "ReasonCode",
    "ValidationVerdict",
    "ConcatenationResult",
    "CorrectionRule",
    "WordEntry",
    "InvalidWord",
    "ExtractionDiagnostics",
    "ExtractionResult",
    "OCRWord",
    "OCRResult",
    "WordListLoad",
    # Session
    "WordListSession",
    "WordListStore",
    "JsonWordListStore",
    "build_student_url",
    # Exceptions
    "SightWordsError",
    "ConfigurationError",
    "UnsupportedFormatError",
    "ExtractionError",
    "EmptyWordListError",
]
