"""
Configuration for sight-word extraction.

All options have sensible defaults. Create a config only if you need to
customize behavior.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from sightwords.vocabulary import STOP_WORDS

Capability = Literal["auto", "capable", "constrained"]


@dataclass
class ExtractionOptions:
    """
    Options for the extraction pipeline.

    Example:
        >>> options = ExtractionOptions(exclude_colors=False)
        >>> extract_words("red fish blue fish", options).words
        ['red', 'fish', 'blue']
    """

    # Token length bounds (applied by both the normalizer and the validator)
    min_word_length: int = 2
    max_word_length: int = 10

    # Words removed from the final list even though they are valid
    denylist: frozenset[str] = STOP_WORDS
    exclude_colors: bool = True

    # Applied when OCR output with confidences is passed to the pipeline
    min_confidence: float = 60.0

    def __post_init__(self):
        """Validate configuration."""
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be >= 1, got {self.min_word_length}")
        if self.max_word_length < self.min_word_length:
            raise ValueError(
                f"max_word_length must be >= min_word_length, "
                f"got {self.max_word_length} < {self.min_word_length}"
            )
        if not 0.0 <= self.min_confidence <= 100.0:
            raise ValueError(
                f"min_confidence must be between 0 and 100, got {self.min_confidence}"
            )
        self.denylist = frozenset(self.denylist)


@dataclass
class OCRConfig:
    """
    Parameters handed to the OCR engine.

    Capable machines render pages at a higher scale and demand more
    confidence; constrained machines render smaller, accept lower
    confidence and only process the first few pages.

    Example:
        >>> config = OCRConfig(capability="constrained")
        >>> config.effective_confidence()
        40.0
    """

    language: str = "eng"
    capability: Capability = "auto"

    capable_confidence: float = 60.0
    constrained_confidence: float = 40.0

    capable_render_scale: float = 2.0
    constrained_render_scale: float = 1.5

    # None = all pages
    capable_max_pages: int | None = None
    constrained_max_pages: int | None = 3

    # Detected capability, probed once per config
    _detected: Literal["capable", "constrained"] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Validate configuration."""
        valid_capabilities = ("auto", "capable", "constrained")
        if self.capability not in valid_capabilities:
            raise ValueError(
                f"capability must be one of {valid_capabilities}, got {self.capability!r}"
            )
        for name in ("capable_confidence", "constrained_confidence"):
            value = getattr(self, name)
            if not 0.0 <= value <= 100.0:
                raise ValueError(f"{name} must be between 0 and 100, got {value}")
        for name in ("capable_render_scale", "constrained_render_scale"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    def resolve_capability(self) -> Literal["capable", "constrained"]:
        """Return the configured capability, detecting it once when set to "auto"."""
        if self.capability != "auto":
            return self.capability

        from sightwords.ocr.engine import detect_capability

        if self._detected is None:
            self._detected = detect_capability()
        return self._detected

    def effective_confidence(self) -> float:
        """Confidence threshold for the resolved capability."""
        if self.resolve_capability() == "capable":
            return self.capable_confidence
        return self.constrained_confidence

    def effective_render_scale(self) -> float:
        """Page render scale for the resolved capability."""
        if self.resolve_capability() == "capable":
            return self.capable_render_scale
        return self.constrained_render_scale

    def effective_max_pages(self) -> int | None:
        """Page limit for the resolved capability."""
        if self.resolve_capability() == "capable":
            return self.capable_max_pages
        return self.constrained_max_pages


@dataclass
class SightWordsConfig:
    """
    Top-level configuration.

    Example:
        >>> config = SightWordsConfig(ocr=OCRConfig(capability="capable"))
        >>> result = sightwords.extract_from_file("worksheet.pdf", config)
    """

    extraction: ExtractionOptions = field(default_factory=ExtractionOptions)
    ocr: OCRConfig = field(default_factory=OCRConfig)

    # Typed word lists use a tighter bound than extracted ones
    manual_max_length: int = 8

    def __post_init__(self):
        """Validate configuration."""
        if self.manual_max_length < 2:
            raise ValueError(f"manual_max_length must be >= 2, got {self.manual_max_length}")
