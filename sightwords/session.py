"""
Word-list state and persistence.

WordListSession holds the current flashcard list and a pending preview.
Handlers receive the session explicitly; there is no module-level list.

Saved lists are plain JSON documents:
    {"words": [...], "createdAt": "...", "createdBy": "...", "version": "1.0"}
Students open a list through ``{base_url}/index.html?id={list_id}``.
"""

from __future__ import annotations

import json
import logging
import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from sightwords.exceptions import EmptyWordListError, SightWordsError
from sightwords.models import ExtractionResult
from sightwords.normalizers.text import MANUAL_MAX_LENGTH, parse_manual_words

logger = logging.getLogger(__name__)

FORMAT_VERSION = "1.0"

# Ids are uuid4 hex strings
_LIST_ID = re.compile(r"[0-9a-f]{32}")


# =============================================================================
# PERSISTENCE
# =============================================================================


class WordListStore(Protocol):
    """Storage for saved word lists."""

    def save(self, words: list[str]) -> str:
        """Persist a list and return its id."""
        ...

    def load(self, list_id: str) -> list[str]:
        """Return the words of a saved list."""
        ...


class JsonWordListStore:
    """
    Stores each word list as a JSON file named after its id.

    Example:
        >>> store = JsonWordListStore("lists/")
        >>> list_id = store.save(["cat", "dog"])
        >>> store.load(list_id)
        ['cat', 'dog']
    """

    def __init__(self, directory: str | Path, created_by: str = "anonymous"):
        self.directory = Path(directory)
        self.created_by = created_by

    def _path(self, list_id: str) -> Path:
        if not isinstance(list_id, str) or not _LIST_ID.fullmatch(list_id):
            raise SightWordsError(f"Invalid word list id: {list_id!r}")
        return self.directory / f"{list_id}.json"

    def save(self, words: list[str]) -> str:
        """
        Save a word list.

        Raises:
            EmptyWordListError: If there are no words to save.
        """
        if not words:
            raise EmptyWordListError("No words to save")

        list_id = uuid.uuid4().hex
        data = {
            "words": list(words),
            "createdAt": datetime.now(timezone.utc).isoformat(),
            "createdBy": self.created_by,
            "version": FORMAT_VERSION,
        }

        self.directory.mkdir(parents=True, exist_ok=True)
        with open(self._path(list_id), "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        logger.info("Saved %d words as %s", len(words), list_id)
        return list_id

    def load(self, list_id: str) -> list[str]:
        """
        Load a saved word list.

        Raises:
            SightWordsError: If the id is malformed or the list is missing or unreadable.
        """
        path = self._path(list_id)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise SightWordsError(f"Word list not found: {list_id}") from e
        except json.JSONDecodeError as e:
            raise SightWordsError(f"Word list {list_id} is corrupt: {e}") from e

        return list(data.get("words", []))


def build_student_url(base_url: str, list_id: str) -> str:
    """Link that opens a saved list in the student flashcard page."""
    return f"{base_url.rstrip('/')}/index.html?id={list_id}"


# =============================================================================
# SESSION STATE
# =============================================================================


@dataclass
class WordListSession:
    """
    Current word list plus an optional pending preview.

    Extracted words are shown as a preview first; accepting merges them
    into the list, cancelling discards them.

    Example:
        >>> session = WordListSession(words=["cat"])
        >>> session.preview(["dog", "cat"])
        >>> session.accept_preview()
        ['cat', 'dog']
    """

    words: list[str] = field(default_factory=list)
    pending: list[str] | None = None
    manual_max_length: int = MANUAL_MAX_LENGTH

    @property
    def has_preview(self) -> bool:
        """Whether a preview is waiting to be accepted or cancelled."""
        return self.pending is not None

    def preview(self, source: ExtractionResult | list[str]) -> None:
        """Stage extracted words for review."""
        words = source.words if isinstance(source, ExtractionResult) else source
        self.pending = list(words)

    def cancel_preview(self) -> None:
        """Discard the pending preview."""
        self.pending = None

    def accept_preview(self) -> list[str]:
        """
        Merge the preview into the list.

        Existing words keep their order; new words follow in preview order.

        Returns:
            The updated word list.
        """
        if self.pending is not None:
            self.words = list(dict.fromkeys(self.words + self.pending))
            self.pending = None
        return self.words

    def replace(self, words: list[str]) -> None:
        """Replace the whole list."""
        self.words = list(dict.fromkeys(words))
        self.pending = None

    def add_manual(self, text: str) -> list[str]:
        """
        Add typed words to the list.

        Returns:
            The words that were not already in the list.
        """
        parsed = parse_manual_words(text, max_length=self.manual_max_length)
        added = [word for word in parsed if word not in self.words]
        self.words.extend(added)
        return added

    def save(self, store: WordListStore) -> str:
        """
        Persist the current list.

        Raises:
            EmptyWordListError: If the list is empty.
        """
        if not self.words:
            raise EmptyWordListError("No words to save. Upload a file or add words manually.")
        return store.save(self.words)
