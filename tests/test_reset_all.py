"""Tests for clearing all styles."""

from discansi.applicator import apply_style, reset_all
from discansi.model import Document, LineBreak, Text


def _styled():
    doc = Document.from_text("ab\ncdef")
    doc = apply_style(doc, 0, 4, 45)
    return apply_style(doc, 1, 6, 1)


def test_reset_all_drops_spans():
    doc = reset_all(_styled())
    assert list(doc.spans()) == []
    assert doc.root.children == (Text("ab"), LineBreak(), Text("cdef"))


def test_reset_all_is_idempotent():
    once = reset_all(_styled())
    twice = reset_all(once)
    assert once == twice


def test_reset_all_always_new_revision():
    doc = Document.from_text("plain")
    assert reset_all(doc) is not doc
    assert reset_all(doc) == doc
