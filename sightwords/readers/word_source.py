"""Bundled word lists: one word per line in a CSV file."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_csv_words(path: str | Path) -> list[str]:
    """
    Load a word list from a CSV file.

    The first column of each row is the word; blank rows are skipped.
    Words are trimmed but otherwise used as written.

    Args:
        path: Path to CSV file.

    Returns:
        Words in file order.

    Raises:
        FileNotFoundError: If file doesn't exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    words = []
    with open(path, newline="", encoding="utf-8") as f:
        for row in csv.reader(f):
            if row and row[0].strip():
                words.append(row[0].strip())

    logger.debug("Loaded %d words from %s", len(words), path)
    return words
