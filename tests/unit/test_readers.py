"""Tests for PDF, DOCX and CSV readers."""

import pytest
from PIL import Image

from sightwords.readers import PDFReader, extract_docx_text, load_csv_words

# =============================================================================
# PDF READER TESTS
# =============================================================================


class TestPDFReader:
    """Tests for PDFReader."""

    def test_extract_text(self, make_pdf):
        """The embedded text layer is read."""
        path = make_pdf("cat dog fly", "run jump")
        text = PDFReader().extract_text(path)
        assert "cat dog fly" in text
        assert "run jump" in text

    def test_render_pages(self, make_pdf):
        """Each page is rendered to an RGB image at the given scale."""
        path = make_pdf("cat", "dog")
        pages = list(PDFReader(scale=1.0).render_pages(path))

        assert [index for index, _ in pages] == [0, 1]
        image = pages[0][1]
        assert isinstance(image, Image.Image)
        assert image.mode == "RGB"
        assert image.size == (595, 842)

    def test_render_scale(self, make_pdf):
        """Scale multiplies the page size."""
        path = make_pdf("cat")
        (_, image), = PDFReader(scale=2.0).render_pages(path)
        assert image.size == (1190, 1684)

    def test_max_pages(self, make_pdf):
        """Only the first pages are read."""
        path = make_pdf("cat", "dog", "fly")
        reader = PDFReader(scale=0.5, max_pages=2)
        assert len(list(reader.render_pages(path))) == 2
        assert "fly" not in reader.extract_text(path)

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            PDFReader().extract_text(tmp_path / "missing.pdf")

    def test_invalid_file(self, tmp_path):
        """A non-PDF raises ValueError."""
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"this is not a pdf")
        with pytest.raises(ValueError):
            PDFReader().extract_text(path)


# =============================================================================
# DOCX READER TESTS
# =============================================================================


class TestDocxReader:
    """Tests for extract_docx_text."""

    def test_paragraphs_and_tables(self, make_docx):
        """Paragraph and table cell text are both extracted."""
        path = make_docx("Sight words", "", "cat dog", table_row=("fly", "run"))
        text = extract_docx_text(path)
        assert text.split("\n") == ["Sight words", "cat dog", "fly", "run"]

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            extract_docx_text(tmp_path / "missing.docx")

    def test_invalid_file(self, tmp_path):
        """A non-DOCX raises ValueError."""
        path = tmp_path / "broken.docx"
        path.write_bytes(b"not a zip archive")
        with pytest.raises(ValueError):
            extract_docx_text(path)


# =============================================================================
# CSV WORD SOURCE TESTS
# =============================================================================


class TestLoadCsvWords:
    """Tests for load_csv_words."""

    def test_one_word_per_line(self, tmp_path):
        """Blank lines are skipped and words trimmed."""
        path = tmp_path / "words.csv"
        path.write_text("after\n\n again \nany,extra\n")
        assert load_csv_words(path) == ["after", "again", "any"]

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_csv_words(tmp_path / "words.csv")
