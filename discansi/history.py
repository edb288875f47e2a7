"""Linear undo/redo history over whole document revisions."""

import logging
from enum import Enum
from typing import Optional

from .constants import FormatterConstants
from .model import Document

logger = logging.getLogger(__name__)


class HistoryState(Enum):
    EMPTY = "empty"
    INTERIOR = "interior"
    BOUNDARY = "boundary"


class History:
    """Revisions in edit order plus a cursor on the one being shown.

    Recording after an undo discards the undone revisions; there is no
    branching. Once ``max_entries`` revisions are held the oldest is dropped.
    """

    def __init__(self, initial: Optional[Document] = None,
                 max_entries: int = FormatterConstants.DEFAULT_HISTORY_LIMIT):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._entries: list[Document] = []
        self._cursor = -1
        self._max_entries = max_entries
        if initial is not None:
            self.record(initial)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> Optional[Document]:
        if not self._entries:
            return None
        return self._entries[self._cursor]

    @property
    def state(self) -> HistoryState:
        if not self._entries:
            return HistoryState.EMPTY
        if 0 < self._cursor < len(self._entries) - 1:
            return HistoryState.INTERIOR
        return HistoryState.BOUNDARY

    def clear(self):
        self._entries.clear()
        self._cursor = -1

    def record(self, document: Document):
        """Append a revision after the cursor, dropping any redo entries."""
        discarded = len(self._entries) - self._cursor - 1
        if discarded:
            logger.debug(f"Discarding {discarded} redo entries")
            del self._entries[self._cursor + 1:]
        self._entries.append(document)
        # Cap history
        if len(self._entries) > self._max_entries:
            self._entries.pop(0)
        self._cursor = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return 0 <= self._cursor < len(self._entries) - 1

    def undo(self) -> Optional[Document]:
        """Step back one revision; at the first entry nothing moves."""
        if self.can_undo():
            self._cursor -= 1
        return self.current

    def redo(self) -> Optional[Document]:
        """Step forward one revision; at the last entry nothing moves."""
        if self.can_redo():
            self._cursor += 1
        return self.current
