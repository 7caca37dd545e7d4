"""
PDF reading using PyMuPDF (fitz).

Two ways to get words out of a PDF:
- render_pages: rasterize pages for OCR (worksheets are usually scans or
  text drawn as shapes)
- extract_text: read the embedded text layer, used when no OCR engine is
  available
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import fitz  # PyMuPDF
from PIL import Image

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

DEFAULT_RENDER_SCALE = 2.0


class PDFReader:
    """Reads PDFs for word extraction.

    Usage:
        reader = PDFReader(scale=2.0, max_pages=3)
        for index, image in reader.render_pages("/path/to/worksheet.pdf"):
            ...
    """

    def __init__(
        self,
        *,
        scale: float = DEFAULT_RENDER_SCALE,
        max_pages: int | None = None,
    ):
        """Initialize the PDF reader.

        Args:
            scale: Render zoom factor (1.0 = 72 dpi).
            max_pages: Only read the first N pages (None = all).
        """
        self.scale = scale
        self.max_pages = max_pages

    def _open(self, path: str | Path) -> fitz.Document:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"PDF not found: {path}")

        try:
            return fitz.open(path)
        except Exception as e:
            raise ValueError(f"Failed to open PDF: {e}") from e

    def _page_count(self, doc: fitz.Document) -> int:
        if self.max_pages is None:
            return len(doc)
        return min(len(doc), self.max_pages)

    def render_pages(self, path: str | Path) -> Iterator[tuple[int, Image.Image]]:
        """Render pages to images, one at a time.

        Pages are yielded lazily so that only one rendered page is held in
        memory while the caller runs OCR on it.

        Args:
            path: Path to PDF file.

        Yields:
            (page_index, image) tuples.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If file is not a valid PDF.
        """
        doc = self._open(path)
        try:
            matrix = fitz.Matrix(self.scale, self.scale)
            for page_idx in range(self._page_count(doc)):
                pix = doc[page_idx].get_pixmap(matrix=matrix)
                logger.debug("Rendered page %d at %dx%d", page_idx, pix.width, pix.height)
                yield page_idx, Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
        finally:
            doc.close()

    def extract_text(self, path: str | Path) -> str:
        """Read the embedded text layer.

        Args:
            path: Path to PDF file.

        Returns:
            Page texts joined by blank lines ("" for image-only PDFs).

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If file is not a valid PDF.
        """
        doc = self._open(path)
        try:
            parts = []
            for page_idx in range(self._page_count(doc)):
                text = doc[page_idx].get_text("text")
                if text.strip():
                    parts.append(text)
            return "\n\n".join(parts)
        finally:
            doc.close()
