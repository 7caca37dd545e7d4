"""Tests for the extraction pipeline and the confidence filter."""

import pytest

from sightwords import ExtractionOptions, extract_words
from sightwords.models import ExtractionResult, OCRResult, OCRWord, ReasonCode
from sightwords.ocr.confidence import filter_by_confidence
from sightwords.ocr.pipeline import ExtractionPipeline
from sightwords.vocabulary import COLOR_WORDS, STOP_WORDS

SAMPLE_TEXT = """
Sight Word List - Gradc 1
Look at the big red ball and the little dog run fast.
willtest tbe shit wh dog LOOK
"""


# =============================================================================
# SCENARIO TESTS
# =============================================================================


class TestExtractionScenarios:
    """End-to-end behavior on small inputs."""

    @pytest.fixture
    def pipeline(self):
        """Create a pipeline with default options."""
        return ExtractionPipeline()

    def test_stop_words_removed(self, pipeline):
        """Function words are valid but denylisted."""
        result = pipeline.process("cat dog the and fly")
        assert result.words == ["cat", "dog", "fly"]
        assert result.diagnostics.valid_words == ["cat", "dog", "the", "and", "fly"]
        assert result.diagnostics.total_processed == 5

    def test_concatenations_rejected(self, pipeline):
        """Fused words never reach the final list."""
        result = pipeline.process("willtest cantest hastest")
        assert result.words == []
        assert [item.reason for item in result.diagnostics.invalid_words] == [
            ReasonCode.CONCATENATED_WORDS
        ] * 3
        assert [item.parts for item in result.diagnostics.invalid_words] == [
            ("will", "test"),
            ("can", "test"),
            ("has", "test"),
        ]

    def test_corrected_header_word_is_valid_then_denylisted(self, pipeline):
        """'gradc' becomes 'grade', validates, and is dropped as instructional."""
        result = pipeline.process("Gradc 1 sight words")
        assert "grade" in result.diagnostics.valid_words
        assert "gradc" not in result.diagnostics.valid_words
        assert "grade" not in result.words
        assert result.words == ["words"]

    def test_empty_input(self, pipeline):
        """Empty text yields an empty result."""
        result = pipeline.process("")
        assert result == ExtractionResult()
        assert result.to_dict() == {
            "words": [],
            "diagnostics": {"validWords": [], "invalidWords": [], "totalProcessed": 0},
        }

    @pytest.mark.parametrize("text", [None, "   ", "123 !!! -- 4"])
    def test_degenerate_input_never_raises(self, pipeline, text):
        """Input with no letters gives no words."""
        assert pipeline.process(text).words == []

    def test_realistic_worksheet(self, pipeline):
        """Headers, colors, noise and duplicates are all filtered."""
        result = pipeline.process(SAMPLE_TEXT)
        assert result.words == ["look", "big", "ball", "little", "dog", "run", "fast"]

        rejected = {item.word: item.reason for item in result.diagnostics.invalid_words}
        assert rejected == {
            "willtest": ReasonCode.CONCATENATED_WORDS,
            "shit": ReasonCode.INAPPROPRIATE_CONTENT,
            "wh": ReasonCode.OCR_ARTIFACT,
        }

    def test_duplicates_keep_first_occurrence(self, pipeline):
        """The final list is unique; diagnostics keep every occurrence."""
        result = pipeline.process("cat dog cat fly dog")
        assert result.words == ["cat", "dog", "fly"]
        assert result.diagnostics.valid_words == ["cat", "dog", "cat", "fly", "dog"]


# =============================================================================
# OPTIONS TESTS
# =============================================================================


class TestExtractionOptions:
    """Tests for configurable denylists and bounds."""

    def test_colors_removed_by_default(self):
        """Color labels are dropped."""
        assert extract_words("red fish blue fish").words == ["fish"]

    def test_colors_kept_when_disabled(self):
        """Color removal can be turned off."""
        options = ExtractionOptions(exclude_colors=False)
        assert extract_words("red fish blue fish", options).words == ["red", "fish", "blue"]

    def test_custom_denylist(self):
        """The stop-word list can be replaced."""
        options = ExtractionOptions(denylist=frozenset({"cat"}))
        assert extract_words("the cat dog", options).words == ["the", "dog"]

    def test_max_length(self):
        """Longer tokens are dropped before validation."""
        options = ExtractionOptions(max_word_length=4)
        result = extract_words("jump little", options)
        assert result.words == ["jump"]
        assert result.diagnostics.total_processed == 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_word_length": 0},
            {"min_word_length": 5, "max_word_length": 4},
            {"min_confidence": 101.0},
            {"min_confidence": -1.0},
        ],
    )
    def test_invalid_options(self, kwargs):
        """Inconsistent options are rejected."""
        with pytest.raises(ValueError):
            ExtractionOptions(**kwargs)


# =============================================================================
# PROPERTY TESTS
# =============================================================================


class TestExtractionProperties:
    """Invariants that hold for any input."""

    TEXTS = [
        SAMPLE_TEXT,
        "cat dog the and fly",
        "The quick brown fox jumps over the lazy dog again and again",
        "a i o u b y zzz queueing strngth into today people",
        "Your child should know these sight words by the end of grade one",
    ]

    @pytest.mark.parametrize("text", TEXTS)
    def test_idempotent(self, text):
        """Re-extracting the output gives the same words."""
        first = extract_words(text)
        second = extract_words(" ".join(first.words))
        assert second.words == first.words

    @pytest.mark.parametrize("text", TEXTS)
    def test_deterministic(self, text):
        """Two runs give identical results."""
        assert extract_words(text) == extract_words(text)

    @pytest.mark.parametrize("text", TEXTS)
    def test_output_invariants(self, text):
        """Length, denylist, uniqueness and subset invariants."""
        result = extract_words(text)
        assert all(2 <= len(word) <= 10 for word in result.words)
        assert not set(result.words) & (STOP_WORDS | COLOR_WORDS)
        assert len(result.words) == len(set(result.words))
        assert set(result.words) <= set(result.diagnostics.valid_words)

    @pytest.mark.parametrize("text", TEXTS)
    def test_every_rejection_has_a_reason(self, text):
        """Rejected tokens always carry a rejection reason code."""
        accepting = {ReasonCode.KNOWN_SIGHT_WORD, ReasonCode.PASSED_VALIDATION}
        result = extract_words(text)
        for item in result.diagnostics.invalid_words:
            assert isinstance(item.reason, ReasonCode)
            assert item.reason not in accepting

    @pytest.mark.parametrize("text", TEXTS)
    def test_every_token_accounted_for(self, text):
        """Each token is either valid or invalid."""
        diagnostics = extract_words(text).diagnostics
        assert diagnostics.total_processed == len(diagnostics.valid_words) + len(
            diagnostics.invalid_words
        )


# =============================================================================
# CONFIDENCE FILTER TESTS
# =============================================================================


def _ocr(overall: float, words: list[tuple[str, float]] | None = None, text: str = ""):
    ocr_words = [OCRWord(text=t, confidence=c) for t, c in words] if words is not None else None
    if ocr_words and not text:
        text = " ".join(w.text for w in ocr_words)
    return OCRResult(text=text, overall_confidence=overall, words=ocr_words)


class TestConfidenceFilter:
    """Tests for filter_by_confidence."""

    def test_low_overall_confidence_discards_everything(self):
        """Nothing survives a low-confidence page."""
        result = _ocr(30.0, [("cat", 95.0)])
        assert filter_by_confidence(result, 60.0) == ""

    def test_per_word_filtering(self):
        """Only words at or above the threshold are kept."""
        result = _ocr(80.0, [("cat", 95.0), ("dog", 30.0), ("fly", 60.0)])
        assert filter_by_confidence(result, 60.0) == "cat fly"

    def test_full_text_without_word_confidences(self):
        """Without per-word data the text passes through."""
        result = _ocr(80.0, text="cat dog\nfly")
        assert filter_by_confidence(result, 60.0) == "cat dog\nfly"

    def test_corrections_applied(self):
        """Kept text is corrected."""
        result = _ocr(80.0, [("tbe", 90.0), ("gradc", 90.0)])
        assert filter_by_confidence(result, 60.0) == "the grade"

    def test_none_result(self):
        """Missing OCR output yields empty text."""
        assert filter_by_confidence(None) == ""

    def test_pipeline_uses_option_threshold(self):
        """The pipeline filters OCR output before extraction."""
        result = _ocr(80.0, [("cat", 95.0), ("dog", 30.0), ("fly", 70.0)])
        pipeline = ExtractionPipeline()
        assert pipeline.process(ocr_result=result).words == ["cat", "fly"]

    def test_pipeline_threshold_override(self):
        """A per-call threshold replaces the configured one."""
        result = _ocr(95.0, [("cat", 95.0), ("dog", 30.0), ("fly", 70.0)])
        pipeline = ExtractionPipeline(ExtractionOptions(min_confidence=90.0))
        assert pipeline.process(ocr_result=result).words == ["cat"]
        assert pipeline.process(ocr_result=result, min_confidence=20.0).words == [
            "cat",
            "dog",
            "fly",
        ]

    def test_pipeline_low_confidence_page(self):
        """A discarded page gives an empty result."""
        result = _ocr(10.0, [("cat", 95.0)])
        assert ExtractionPipeline().process(ocr_result=result) == ExtractionResult()
