"""Document and word-list reading.

PDFs are read with PyMuPDF, Word documents with python-docx.
"""

from sightwords.readers.docx_reader import extract_docx_text
from sightwords.readers.pdf_reader import DEFAULT_RENDER_SCALE, PDFReader
from sightwords.readers.word_source import load_csv_words

__all__ = [
    # Classes
    "PDFReader",
    # Functions
    "extract_docx_text",
    "load_csv_words",
    # Constants
    "DEFAULT_RENDER_SCALE",
]
