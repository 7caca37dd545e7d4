"""Tests for the OCR engine adapter, capability detection and OCR config."""

from types import SimpleNamespace

import pytest

from sightwords.config import OCRConfig
from sightwords.ocr.engine import TesseractEngine, detect_capability

GIB = 1024**3


@pytest.fixture
def host(monkeypatch):
    """Fake the host's CPU count and memory."""

    def _set(cpus: int, memory_gib: float):
        monkeypatch.setattr("sightwords.ocr.engine.os.cpu_count", lambda: cpus)
        monkeypatch.setattr(
            "sightwords.ocr.engine.psutil.virtual_memory",
            lambda: SimpleNamespace(total=int(memory_gib * GIB)),
        )

    return _set


class TestDetectCapability:
    """Tests for detect_capability."""

    def test_capable_host(self, host):
        """Enough CPUs and memory."""
        host(8, 16)
        assert detect_capability() == "capable"

    def test_few_cpus(self, host):
        """Too few CPUs."""
        host(2, 16)
        assert detect_capability() == "constrained"

    def test_little_memory(self, host):
        """Too little memory."""
        host(8, 2)
        assert detect_capability() == "constrained"


class TestOCRConfig:
    """Tests for capability-dependent OCR parameters."""

    def test_capable_parameters(self):
        """Capable hosts render larger and demand more confidence."""
        config = OCRConfig(capability="capable")
        assert config.effective_confidence() == 60.0
        assert config.effective_render_scale() == 2.0
        assert config.effective_max_pages() is None

    def test_constrained_parameters(self):
        """Constrained hosts render smaller and read fewer pages."""
        config = OCRConfig(capability="constrained")
        assert config.effective_confidence() == 40.0
        assert config.effective_render_scale() == 1.5
        assert config.effective_max_pages() == 3

    def test_auto_detects(self, host):
        """'auto' asks the host."""
        host(1, 1)
        assert OCRConfig().resolve_capability() == "constrained"
        host(16, 32)
        assert OCRConfig().resolve_capability() == "capable"

    def test_detection_runs_once(self, monkeypatch):
        """The host is probed once per config, not once per parameter."""
        calls = []

        def fake_detect():
            calls.append(1)
            return "constrained"

        monkeypatch.setattr("sightwords.ocr.engine.detect_capability", fake_detect)
        config = OCRConfig()
        assert config.effective_confidence() == 40.0
        assert config.effective_render_scale() == 1.5
        assert config.effective_max_pages() == 3
        assert len(calls) == 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"capability": "fast"},
            {"capable_confidence": 150.0},
            {"constrained_render_scale": 0},
        ],
    )
    def test_invalid_config(self, kwargs):
        """Invalid values are rejected."""
        with pytest.raises(ValueError):
            OCRConfig(**kwargs)


class TestTesseractEngine:
    """Tests for TesseractEngine."""

    def test_parse_data(self):
        """Layout rows and empty text are skipped; confidences averaged."""
        data = {
            "text": ["", "cat", "dog", " ", "fly"],
            "conf": [-1, 95, "80.5", -1, 60.0],
        }
        result = TesseractEngine.parse_data(data)
        assert result.text == "cat dog fly"
        assert [(w.text, w.confidence) for w in result.words] == [
            ("cat", 95.0),
            ("dog", 80.5),
            ("fly", 60.0),
        ]
        assert result.overall_confidence == pytest.approx(78.5)

    def test_parse_empty_data(self):
        """No words gives zero confidence."""
        result = TesseractEngine.parse_data({"text": [], "conf": []})
        assert result.text == ""
        assert result.words == []
        assert result.overall_confidence == 0.0

    def test_availability_is_cached(self, monkeypatch):
        """The Tesseract check runs once."""
        calls = []

        def fake_check():
            calls.append(1)
            return False

        monkeypatch.setattr("sightwords.ocr.engine._check_tesseract_available", fake_check)
        engine = TesseractEngine()
        assert engine.is_available is False
        assert engine.is_available is False
        assert len(calls) == 1

    def test_recognize_uses_pytesseract(self, monkeypatch):
        """recognize passes the language and parses the output."""
        pytesseract = pytest.importorskip("pytesseract")
        captured = {}

        def fake_image_to_data(image, lang, output_type):
            captured["lang"] = lang
            return {"text": ["cat"], "conf": [90]}

        monkeypatch.setattr(pytesseract, "image_to_data", fake_image_to_data)
        result = TesseractEngine(language="fra").recognize(object())
        assert captured["lang"] == "fra"
        assert result.text == "cat"
        assert result.overall_confidence == 90.0
