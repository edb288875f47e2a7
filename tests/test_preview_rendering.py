"""Tests pinning how the encoded stream renders in the live preview.

Every sequence starts with a decoration parameter and an unset decoration
is written as 0, which a terminal treats as a full reset. Entering a nested
span therefore keeps only the span's own color, and re-asserting two colors
after a close keeps only the last one.
"""

from rich.console import Console
from rich.text import Text as RichText

from discansi.applicator import apply_style
from discansi.encoder import encode_stream
from discansi.model import Document
from discansi.samples import WELCOME_TEXT, welcome_document


def render(document):
    rendered = RichText.from_ansi(encode_stream(document))
    assert rendered.plain == document.text
    return rendered


def style_at(rendered, offset):
    return rendered.get_style_at_offset(Console(), offset)


def test_single_color():
    rendered = render(welcome_document())
    style = style_at(rendered, WELCOME_TEXT.index("Rebane"))
    assert style.color.number == 3
    assert style.bgcolor is None
    assert not style.bold


def test_nested_foreground_drops_enclosing_background():
    rendered = render(welcome_document())
    style = style_at(rendered, WELCOME_TEXT.index("Discord"))
    assert style.color.number == 7
    assert style.bgcolor is None


def test_restoring_two_colors_keeps_the_last():
    doc = apply_style(Document.from_text("abc"), 0, 3, 45)
    doc = apply_style(doc, 0, 3, 31)
    doc = apply_style(doc, 1, 2, 1)
    rendered = render(doc)
    inner = style_at(rendered, 1)
    assert inner.bold
    assert inner.color.number == 1
    after = style_at(rendered, 2)
    assert after.color is None
    assert after.bgcolor.number == 5
    assert not after.bold


def test_decoration_restored_after_nested_color():
    doc = apply_style(Document.from_text("abcd"), 0, 4, 1)
    doc = apply_style(doc, 1, 2, 31)
    rendered = render(doc)
    assert style_at(rendered, 1).color.number == 1
    after = style_at(rendered, 2)
    assert after.bold
    assert after.color is None
