"""
Document-to-word-list orchestrator.

Wires the document readers, the OCR engine and the extraction pipeline:
- PDF: render each page, OCR it, filter by confidence, then extract
- DOCX: read the raw text, then extract
- Startup word list: example document, then bundled CSV, then a built-in
  fallback list

Pages are recognized strictly one after another; a page that fails is
logged and skipped, and extraction runs on whatever text was collected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Protocol

from sightwords.config import SightWordsConfig
from sightwords.exceptions import ExtractionError, UnsupportedFormatError
from sightwords.models import ExtractionResult, OCRResult
from sightwords.ocr.confidence import filter_by_confidence
from sightwords.ocr.engine import TesseractEngine
from sightwords.ocr.pipeline import ExtractionPipeline
from sightwords.readers.docx_reader import extract_docx_text
from sightwords.readers.pdf_reader import PDFReader
from sightwords.readers.word_source import load_csv_words
from sightwords.vocabulary import FALLBACK_WORDS

if TYPE_CHECKING:
    from PIL import Image

logger = logging.getLogger(__name__)


class OCRBackend(Protocol):
    """What the orchestrator needs from an OCR engine."""

    @property
    def is_available(self) -> bool: ...

    def recognize(self, image: Image.Image) -> OCRResult: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Format Detection
# ═══════════════════════════════════════════════════════════════════════════════


def detect_format(path: str | Path) -> str:
    """
    Detect document format from file extension and magic bytes.

    Args:
        path: Path to document file

    Returns:
        Format string: "pdf" or "docx"

    Raises:
        UnsupportedFormatError: If format cannot be detected or isn't supported
    """
    path = Path(path)

    ext_map = {".pdf": "pdf", ".docx": "docx"}
    ext = path.suffix.lower()
    if ext in ext_map:
        return ext_map[ext]

    # Try magic bytes for PDF
    try:
        with open(path, "rb") as f:
            header = f.read(8)
            if header.startswith(b"%PDF"):
                return "pdf"
    except OSError:
        pass

    raise UnsupportedFormatError(
        f"Cannot detect format for: {path}. Supported: {', '.join(supported_formats())}"
    )


def supported_formats() -> list[str]:
    """Return list of currently supported input formats."""
    return ["pdf", "docx"]


# ═══════════════════════════════════════════════════════════════════════════════
# Text Collection
# ═══════════════════════════════════════════════════════════════════════════════


def _ocr_pdf_text(path: Path, config: SightWordsConfig, engine: OCRBackend) -> str:
    """OCR a PDF page by page and join the confidently recognized text."""
    reader = PDFReader(
        scale=config.ocr.effective_render_scale(),
        max_pages=config.ocr.effective_max_pages(),
    )
    threshold = config.ocr.effective_confidence()

    page_texts = []
    for page_idx, image in reader.render_pages(path):
        try:
            result = engine.recognize(image)
        except Exception as e:
            logger.warning("OCR failed for page %d of %s: %s", page_idx, path.name, e)
            continue

        text = filter_by_confidence(result, threshold)
        logger.debug(
            "Page %d: confidence %.1f, %d chars kept",
            page_idx,
            result.overall_confidence,
            len(text),
        )
        if text:
            page_texts.append(text)

    return " ".join(page_texts).strip()


def extract_text(
    path: str | Path,
    config: SightWordsConfig | None = None,
    engine: OCRBackend | None = None,
) -> str:
    """
    Collect raw text from a document.

    Args:
        path: Path to PDF or DOCX file.
        config: Configuration (defaults if omitted).
        engine: OCR engine for PDFs (Tesseract if omitted). When it is not
            available the PDF's embedded text layer is used instead.

    Returns:
        Raw text, possibly empty.

    Raises:
        UnsupportedFormatError: If the format is not supported.
        ExtractionError: If the document cannot be read.
    """
    config = config or SightWordsConfig()
    path = Path(path)
    fmt = detect_format(path)

    try:
        if fmt == "docx":
            return extract_docx_text(path)

        engine = engine if engine is not None else TesseractEngine(language=config.ocr.language)
        if engine.is_available:
            logger.info("Running OCR on %s", path.name)
            return _ocr_pdf_text(path, config, engine)

        logger.warning("No OCR engine available; using embedded text of %s", path.name)
        return PDFReader(max_pages=config.ocr.effective_max_pages()).extract_text(path)
    except (FileNotFoundError, ValueError) as e:
        raise ExtractionError(f"Failed to read {path}: {e}") from e


def extract_from_file(
    path: str | Path,
    config: SightWordsConfig | None = None,
    engine: OCRBackend | None = None,
) -> ExtractionResult:
    """
    Extract a sight-word list from a document.

    Args:
        path: Path to PDF or DOCX file.
        config: Configuration (defaults if omitted).
        engine: OCR engine for PDFs.

    Returns:
        ExtractionResult; empty when the document has no usable text.

    Raises:
        UnsupportedFormatError: If the format is not supported.
        ExtractionError: If the document cannot be read.
    """
    config = config or SightWordsConfig()
    text = extract_text(path, config, engine)

    if not text.strip():
        logger.info("No text found in %s", Path(path).name)
        return ExtractionResult()

    result = ExtractionPipeline(config.extraction).process(text)
    logger.info(
        "Extracted %d words from %s (%d tokens, %d rejected)",
        len(result.words),
        Path(path).name,
        result.diagnostics.total_processed,
        len(result.diagnostics.invalid_words),
    )
    return result


# ═══════════════════════════════════════════════════════════════════════════════
# Startup Word List
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass
class WordListLoad:
    """A word list and where it came from."""

    words: list[str] = field(default_factory=list)
    source: Literal["document", "csv", "fallback"] = "fallback"


def load_word_list(
    example_document: str | Path | None = None,
    csv_path: str | Path | None = None,
    config: SightWordsConfig | None = None,
    engine: OCRBackend | None = None,
) -> WordListLoad:
    """
    Load the flashcard word list.

    Tries the example document, then the CSV file, then the built-in
    fallback list. Failures are logged; this never raises.

    Args:
        example_document: PDF or DOCX to extract words from.
        csv_path: CSV file with one word per line.
        config: Configuration (defaults if omitted).
        engine: OCR engine for PDFs.

    Returns:
        WordListLoad with the words and their source.
    """
    if example_document is not None:
        try:
            result = extract_from_file(example_document, config, engine)
            if result.words:
                logger.info("Loaded %d words from %s", len(result.words), example_document)
                return WordListLoad(words=result.words, source="document")
            logger.warning("No valid words extracted from %s", example_document)
        except Exception as e:
            logger.warning("Failed to load words from %s: %s", example_document, e)

    if csv_path is not None:
        try:
            words = load_csv_words(csv_path)
            if words:
                logger.info("Loaded %d words from %s", len(words), csv_path)
                return WordListLoad(words=words, source="csv")
            logger.warning("No words found in %s", csv_path)
        except Exception as e:
            logger.warning("Failed to load words from %s: %s", csv_path, e)

    logger.info("Using fallback word list")
    return WordListLoad(words=list(FALLBACK_WORDS), source="fallback")
