"""Sample content shown when the formatter starts without a file."""

from .applicator import apply_style
from .model import Document

WELCOME_TEXT = "Welcome to Rebane's Discord Colored Text Generator!"


def _styled(document: Document, word: str, code: int) -> Document:
    start = document.text.index(word)
    return apply_style(document, start, start + len(word), code)


def welcome_document() -> Document:
    """Build the welcome message with a few styles applied."""
    document = Document.from_text(WELCOME_TEXT)
    document = _styled(document, "Rebane", 33)
    document = _styled(document, "Discord", 45)
    document = _styled(document, "Discord", 37)

    # One foreground color per letter
    start = document.text.index("Colored")
    for i, code in enumerate(range(31, 38)):
        document = apply_style(document, start + i, start + i + 1, code)
    return document
