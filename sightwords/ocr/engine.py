"""
OCR engine adapter and host capability detection.

Recognition itself is delegated to Tesseract through pytesseract. This
module only turns its word-level output into an OCRResult, and picks
engine parameters (render scale, page limit, confidence threshold) based
on how much CPU and memory the host has.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

import psutil

from sightwords.models import OCRResult, OCRWord

if TYPE_CHECKING:
    from PIL import Image

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Hosts at or above both limits are treated as capable
MIN_CAPABLE_CPUS = 4
MIN_CAPABLE_MEMORY_BYTES = 4 * 1024**3

# Tesseract reports -1 for layout rows that carry no word
NO_CONFIDENCE = -1.0


# =============================================================================
# CAPABILITY DETECTION
# =============================================================================


def detect_capability() -> Literal["capable", "constrained"]:
    """
    Classify the host as capable or constrained.

    Returns:
        "capable" when the host has enough CPUs and memory, else
        "constrained".
    """
    cpus = os.cpu_count() or 1
    memory = psutil.virtual_memory().total

    capability: Literal["capable", "constrained"] = (
        "capable"
        if cpus >= MIN_CAPABLE_CPUS and memory >= MIN_CAPABLE_MEMORY_BYTES
        else "constrained"
    )
    logger.debug(
        "Host has %d CPUs and %.1f GiB memory: %s", cpus, memory / 1024**3, capability
    )
    return capability


# =============================================================================
# TESSERACT ENGINE
# =============================================================================


def _check_tesseract_available() -> bool:
    """Check if Tesseract is installed and usable."""
    try:
        import pytesseract
    except ImportError:
        logger.debug("pytesseract not installed")
        return False

    try:
        pytesseract.get_tesseract_version()
        return True
    except pytesseract.TesseractNotFoundError:
        logger.debug("Tesseract binary not found")
        return False


@dataclass
class TesseractEngine:
    """
    Recognizes text in page images with Tesseract.

    Attributes:
        language: Tesseract language code.

    Example:
        >>> engine = TesseractEngine()
        >>> if engine.is_available:
        ...     result = engine.recognize(image)
        ...     print(result.overall_confidence, result.text)
    """

    language: str = "eng"
    _available: bool | None = field(default=None, repr=False)

    @property
    def is_available(self) -> bool:
        """Whether Tesseract can be used (checked once)."""
        if self._available is None:
            self._available = _check_tesseract_available()
        return self._available

    def recognize(self, image: Image.Image) -> OCRResult:
        """
        Recognize one image.

        Args:
            image: Page image.

        Returns:
            OCRResult with per-word confidences and their mean as the
            overall confidence.
        """
        import pytesseract

        data = pytesseract.image_to_data(
            image, lang=self.language, output_type=pytesseract.Output.DICT
        )
        return self.parse_data(data)

    @staticmethod
    def parse_data(data: dict[str, list]) -> OCRResult:
        """
        Build an OCRResult from pytesseract's image_to_data dictionary.

        Rows with empty text or a confidence of -1 are not words.
        """
        words = []
        for text, conf in zip(data.get("text", []), data.get("conf", [])):
            text = str(text).strip()
            confidence = float(conf)
            if not text or confidence <= NO_CONFIDENCE:
                continue
            words.append(OCRWord(text=text, confidence=confidence))

        overall = sum(w.confidence for w in words) / len(words) if words else 0.0
        return OCRResult(
            text=" ".join(w.text for w in words),
            overall_confidence=overall,
            words=words,
        )
