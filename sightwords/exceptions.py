"""
Exception classes for sightwords.

All sightwords exceptions inherit from SightWordsError, making it easy to
catch all library errors. The extraction core never raises for bad text;
these come from document reading, persistence and the CLI.

Example:
    >>> try:
    ...     result = sightwords.extract_from_file("notes.txt")
    ... except sightwords.UnsupportedFormatError as e:
    ...     print(f"Format not supported: {e}")
    ... except sightwords.SightWordsError as e:
    ...     print(f"sightwords error: {e}")
"""


class SightWordsError(Exception):
    """
    Base exception for all sightwords errors.

    Catch this to handle any sightwords-specific error.
    """

    pass


class UnsupportedFormatError(SightWordsError):
    """
    Raised when document format is not supported.

    Example:
        >>> sightwords.extract_from_file("notes.txt")
        UnsupportedFormatError: Cannot detect format for: notes.txt. Supported: pdf, docx
    """

    pass


class ExtractionError(SightWordsError):
    """
    Raised when a document cannot be read at all.

    Failures on individual pages are logged and skipped instead.
    """

    pass


class EmptyWordListError(SightWordsError):
    """Raised when saving a word list that has no words."""

    pass


class ConfigurationError(SightWordsError):
    """
    Raised for invalid configuration given on the command line.

    Example:
        >>> sightwords extract worksheet.pdf --min-confidence 150
        ConfigurationError: min_confidence must be between 0 and 100, got 150.0
    """

    pass
