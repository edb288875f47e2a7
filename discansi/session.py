"""Editing session: the current document and its history.

A session is created by whatever front end hosts the formatter and is
discarded with it. Each operation that produces a new revision records it;
rejected selections leave both the document and the history alone.
"""

import logging
from typing import Optional

from .applicator import apply_style, replace_text, reset_all
from .clipboard import ClipboardError, ClipboardManager
from .constants import FormatterConstants
from .encoder import encode
from .export import default_export_path, export_text
from .history import History
from .model import Document

logger = logging.getLogger(__name__)


class FormatterSession:
    """Owns one document and its undo/redo history.

    Clipboard and file failures are reported through the return value and
    ``status_message`` rather than raised, so the user interface can show
    them.
    """

    def __init__(self, document: Optional[Document] = None,
                 max_entries: int = FormatterConstants.DEFAULT_HISTORY_LIMIT,
                 export_directory: Optional[str] = None):
        if document is None:
            document = Document.from_text("")
        self.history = History(document, max_entries=max_entries)
        self.export_directory = export_directory
        self.status_message = ""

    @property
    def document(self) -> Document:
        return self.history.current

    @property
    def text(self) -> str:
        return self.document.text

    def _commit(self, document: Document) -> bool:
        if document is self.document:
            return False
        self.history.record(document)
        return True

    def apply_style(self, start: int, end: int, code: int) -> bool:
        """Style ``[start, end)``. Returns False when the selection was ignored."""
        return self._commit(apply_style(self.document, start, end, code))

    def reset_all(self) -> bool:
        return self._commit(reset_all(self.document))

    def replace_text(self, start: int, end: int, text: str) -> bool:
        return self._commit(replace_text(self.document, start, end, text))

    def load_text(self, text: str) -> None:
        """Start over from plain text, forgetting all history."""
        self.history.clear()
        self.history.record(Document.from_text(text))

    def undo(self) -> Document:
        return self.history.undo()

    def redo(self) -> Document:
        return self.history.redo()

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def encode(self) -> str:
        return encode(self.document)

    def copy_to_clipboard(self) -> bool:
        """Copy the encoded block to the system clipboard."""
        try:
            ClipboardManager.copy_text(self.encode())
        except ClipboardError:
            self.status_message = FormatterConstants.COPY_FAILED_MESSAGE
            return False
        self.status_message = FormatterConstants.COPIED_MESSAGE
        return True

    def export(self, path: Optional[str] = None) -> bool:
        """Write the encoded block to ``path`` (default: the export file)."""
        if path is None:
            path = default_export_path(self.export_directory)
        try:
            export_text(path, self.encode())
        except OSError as e:
            logger.warning(f"Could not export to {path}: {e}")
            self.status_message = FormatterConstants.EXPORT_FAILED_MESSAGE.format(
                e.strerror or e
            )
            return False
        self.status_message = FormatterConstants.EXPORTED_MESSAGE.format(path)
        return True
