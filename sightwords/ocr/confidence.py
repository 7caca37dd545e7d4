"""
Recognition-confidence pre-filter.

Runs on OCR engine output before word extraction. It only judges how
sure the engine was, never whether a word is a plausible sight word.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sightwords.models import CorrectionRule, OCRResult
from sightwords.normalizers.correction import CORRECTION_RULES, apply_corrections

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONFIDENCE = 60.0


def filter_by_confidence(
    result: OCRResult | None,
    threshold: float = DEFAULT_MIN_CONFIDENCE,
    rules: Iterable[CorrectionRule] = CORRECTION_RULES,
) -> str:
    """
    Keep only confidently recognized text.

    - Overall confidence below the threshold: nothing is kept.
    - Per-word confidences available: words at or above the threshold
      are kept, joined by single spaces.
    - Otherwise the full text passes through.

    The correction table is applied to whatever is kept.

    Args:
        result: OCR output for one image.
        threshold: Minimum confidence (0-100).
        rules: Ordered correction table.

    Returns:
        Filtered, corrected text ("" when nothing survives).
    """
    if result is None:
        return ""

    if result.overall_confidence < threshold:
        logger.info(
            "Discarding OCR output: confidence %.1f below threshold %.1f",
            result.overall_confidence,
            threshold,
        )
        return ""

    if result.words is not None:
        kept = [word.text for word in result.words if word.confidence >= threshold]
        logger.debug(
            "Kept %d of %d words at confidence >= %.1f", len(kept), len(result.words), threshold
        )
        text = " ".join(kept)
    else:
        text = result.text

    return apply_corrections(text, rules)
