"""
Pytest configuration and fixtures for sightwords tests.
"""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def sample_config():
    """Return a config that never probes the host."""
    from sightwords import OCRConfig, SightWordsConfig

    return SightWordsConfig(ocr=OCRConfig(capability="capable"))


@pytest.fixture
def make_pdf(tmp_path):
    """Factory writing a PDF with one text page per argument."""
    import fitz

    def _make(*page_texts: str, name: str = "worksheet.pdf") -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for text in page_texts:
            page = doc.new_page()
            page.insert_text((72, 72), text, fontsize=14)
        doc.save(path)
        doc.close()
        return path

    return _make


@pytest.fixture
def make_docx(tmp_path):
    """Factory writing a DOCX with the given paragraphs and an optional table row."""
    import docx

    def _make(
        *paragraphs: str, table_row: tuple[str, ...] = (), name: str = "worksheet.docx"
    ) -> Path:
        path = tmp_path / name
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        if table_row:
            table = document.add_table(rows=1, cols=len(table_row))
            for cell, text in zip(table.rows[0].cells, table_row):
                cell.text = text
        document.save(str(path))
        return path

    return _make
