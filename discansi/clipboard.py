"""System clipboard integration for the encoded block."""

import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """Raised when no clipboard mechanism accepted the text."""


class ClipboardManager:
    """Copies encoded text to the system clipboard.

    The escape characters must survive the round trip, so only plain text
    is offered; the chat client interprets the fenced block itself.
    """

    @staticmethod
    def copy_text(text: str) -> None:
        """Copy text to the system clipboard.

        Args:
            text: Text to copy, typically a fenced ansi block

        Raises:
            ClipboardError: If the platform has no usable clipboard
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning(f"Could not copy to clipboard: {e}")
            raise ClipboardError(str(e)) from e
