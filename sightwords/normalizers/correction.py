"""
Rule-based repair of common recognition errors.

The rule table is applied in order, once. Later rules see the output of
earlier ones, but a replacement is never re-scanned by an earlier rule.
Specific multi-letter misreads therefore come first and the general
single-character substitutions last: if "c" -> "e" style rules ran first,
whole-word fixes like "gradc" -> "grade" would never get a chance to match.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from sightwords.models import CorrectionRule

logger = logging.getLogger(__name__)


# =============================================================================
# CORRECTION TABLE
# =============================================================================

# Order matters: keep this a tuple.
CORRECTION_RULES: tuple[CorrectionRule, ...] = (
    # Worksheet headers ("Grade 1 sight words")
    CorrectionRule("gradc", "grade"),
    CorrectionRule("rnorning", "morning"),
    # b/h, l/t and c/e confusions in very common words
    CorrectionRule("tbe", "the"),
    CorrectionRule("tlie", "the"),
    CorrectionRule("lhe", "the"),
    CorrectionRule("tbat", "that"),
    CorrectionRule("tliat", "that"),
    CorrectionRule("tbis", "this"),
    CorrectionRule("tliis", "this"),
    CorrectionRule("tbey", "they"),
    CorrectionRule("tben", "then"),
    CorrectionRule("wbat", "what"),
    CorrectionRule("wben", "when"),
    CorrectionRule("wbere", "where"),
    CorrectionRule("witli", "with"),
    CorrectionRule("bccn", "been"),
    CorrectionRule("thcir", "their"),
    # u/n confusions
    CorrectionRule("wonld", "would"),
    CorrectionRule("conld", "could"),
    CorrectionRule("shonld", "should"),
    CorrectionRule("abont", "about"),
    CorrectionRule("jnst", "just"),
    # rn/m confusions
    CorrectionRule("rnake", "make"),
    CorrectionRule("rnade", "made"),
    CorrectionRule("rnany", "many"),
    CorrectionRule("frorn", "from"),
    CorrectionRule("sorne", "some"),
    CorrectionRule("tirne", "time"),
    # vv/w confusions
    CorrectionRule("vvhat", "what"),
    CorrectionRule("vvith", "with"),
    CorrectionRule("vvas", "was"),
    CorrectionRule("vvere", "were"),
    CorrectionRule("vvill", "will"),
    CorrectionRule("vve", "we"),
    # Digit/letter confusions inside short words
    CorrectionRule("0ne", "one"),
    CorrectionRule("tw0", "two"),
    CorrectionRule("l1ke", "like"),
    CorrectionRule("0f", "of"),
    CorrectionRule("0n", "on"),
    CorrectionRule("0r", "or"),
    CorrectionRule("t0", "to"),
    CorrectionRule("g0", "go"),
    CorrectionRule("n0", "no"),
    CorrectionRule("s0", "so"),
    CorrectionRule("d0", "do"),
    CorrectionRule("1t", "it"),
    CorrectionRule("1s", "is"),
    CorrectionRule("1n", "in"),
    CorrectionRule("1f", "if"),
    # Dropped first letter where the intended word is unambiguous
    CorrectionRule("eople", "people"),
    CorrectionRule("umber", "number"),
    CorrectionRule("irst", "first"),
    # General single-character substitutions
    CorrectionRule("1", "I"),
    CorrectionRule("l", "I"),
    CorrectionRule("0", "o"),
)


# =============================================================================
# CORRECTION
# =============================================================================


@dataclass
class CorrectionResult:
    """Result of applying the correction table."""

    original_text: str
    corrected_text: str
    changes_made: list[tuple[str, str]] = field(default_factory=list)  # (original, corrected)

    @property
    def change_count(self) -> int:
        """Number of corrections made."""
        return len(self.changes_made)

    @property
    def was_modified(self) -> bool:
        """Whether any changes were made."""
        return self.original_text != self.corrected_text


def _match_case(match: re.Match[str], replacement: str) -> str:
    """Capitalize the replacement when the matched text was capitalized."""
    if match.group()[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def correct_text(
    text: str | None,
    rules: Iterable[CorrectionRule] = CORRECTION_RULES,
) -> CorrectionResult:
    """
    Apply whole-word corrections in table order.

    Matching is case-insensitive and bounded by word boundaries, so "tbe"
    is corrected but "tbeory" is not.

    Args:
        text: Raw text.
        rules: Ordered correction table.

    Returns:
        CorrectionResult with corrected text and the changes made.

    Example:
        >>> correct_text("Gradc 1 sight words").corrected_text
        'Grade I sight words'
    """
    if not text:
        return CorrectionResult(original_text=text or "", corrected_text=text or "")

    changes: list[tuple[str, str]] = []
    result = text

    for rule in rules:
        pattern = re.compile(rf"\b{re.escape(rule.error_pattern)}\b", re.IGNORECASE)

        def _replace(match: re.Match[str], correction: str = rule.correction) -> str:
            replacement = _match_case(match, correction)
            changes.append((match.group(), replacement))
            return replacement

        result = pattern.sub(_replace, result)

    if changes:
        logger.debug("Applied %d corrections: %s", len(changes), changes)

    return CorrectionResult(original_text=text, corrected_text=result, changes_made=changes)


def apply_corrections(
    text: str | None,
    rules: Iterable[CorrectionRule] = CORRECTION_RULES,
) -> str:
    """Return only the corrected text."""
    return correct_text(text, rules).corrected_text
