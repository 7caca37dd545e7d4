"""DOCX text extraction using python-docx."""

from __future__ import annotations

import logging
from pathlib import Path

import docx

logger = logging.getLogger(__name__)


def extract_docx_text(path: str | Path) -> str:
    """
    Extract raw text from a Word document.

    Word lists are often laid out in tables, so table cells are read as
    well as body paragraphs.

    Args:
        path: Path to .docx file.

    Returns:
        Non-empty paragraph and cell texts joined by newlines.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If file is not a valid DOCX document.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"DOCX not found: {path}")

    try:
        document = docx.Document(str(path))
    except Exception as e:
        raise ValueError(f"Failed to open DOCX: {e}") from e

    parts = [para.text for para in document.paragraphs if para.text.strip()]
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                if cell.text.strip():
                    parts.append(cell.text)

    logger.info("Extracted %d text blocks from %s", len(parts), path.name)
    return "\n".join(parts)
