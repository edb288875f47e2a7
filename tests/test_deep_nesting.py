"""Tests for documents nested deeper than the interpreter's call stack."""

import re

import pytest

from discansi.applicator import apply_style, replace_text, reset_all
from discansi.encoder import encode, encode_stream
from discansi.history import History
from discansi.model import Document, Span, Text

DEPTH = 2000  # Twice the default recursion limit

ESCAPES = re.compile(r"\x1b\[[0-9;]*m")


def nested(depth, text):
    """Wrap text in alternating foreground and bold spans, innermost red."""
    node = Text(text)
    for i in range(depth):
        node = Span(1 if i % 2 else 31, (node,))
    return node


def deep_document(text="xyz"):
    return Document(Span(None, (Text("ab"), nested(DEPTH, text), Text("cd"))))


@pytest.fixture
def deep():
    return deep_document()


def test_length_and_text(deep):
    assert len(deep) == 7
    assert deep.text == "abxyzcd"


def test_structural_equality(deep):
    assert deep == deep_document()
    assert deep != deep_document("xyZ")
    assert hash(deep.root) == hash(deep_document().root)


def test_spans_walk(deep):
    spans = list(deep.spans())
    assert len(spans) == DEPTH
    assert spans[0][:2] == (2, 5)
    assert spans[-1] == (2, 5, Span(31, (Text("xyz"),)))


def test_encode(deep):
    stream = encode_stream(deep)
    assert stream.startswith("ab\x1b[1m")
    assert "\x1b[1;31mxyz\x1b[0m\x1b[1;31m" in stream
    assert stream.count("\x1b[0m") == DEPTH
    assert ESCAPES.sub("", stream) == "abxyzcd"
    assert encode(deep).startswith("```ansi\nab")


def test_apply_style_nests_innermost(deep):
    doc = apply_style(deep, 2, 5, 45)
    spans = list(doc.spans())
    assert len(spans) == DEPTH + 1
    assert spans[-1] == (2, 5, Span(45, (Text("xyz"),)))
    assert len(list(deep.spans())) == DEPTH


def test_apply_style_replaces_outermost_same_band(deep):
    doc = apply_style(deep, 2, 5, 4)
    spans = list(doc.spans())
    assert len(spans) == DEPTH
    assert spans[0][2].style == 4
    assert spans[0][2].node_id == deep.root.children[1].node_id


def test_apply_style_splits_whole_chain(deep):
    doc = apply_style(deep, 0, 3, 44)
    assert doc.text == "abxyzcd"
    assert len(list(doc.spans())) == 1 + 2 * DEPTH
    wrapper, tail, rest = doc.root.children
    assert wrapper.style == 44
    assert wrapper.text == "abx"
    assert tail.text == "yz"
    assert rest == Text("cd")
    assert ESCAPES.sub("", encode_stream(doc)) == "abxyzcd"


def test_replace_text_inside_chain(deep):
    doc = replace_text(deep, 3, 4, "Q")
    assert doc.text == "abxQzcd"
    spans = list(doc.spans())
    assert len(spans) == DEPTH
    assert spans[-1][2] == Span(31, (Text("xQz"),))


def test_replace_text_removes_whole_chain(deep):
    doc = replace_text(deep, 2, 5, "")
    assert doc.root.children == (Text("abcd"),)


def test_reset_all(deep):
    assert reset_all(deep).root.children == (Text("abxyzcd"),)


def test_history_round_trip(deep):
    history = History(deep)
    history.record(apply_style(deep, 2, 5, 45))
    assert history.undo() == deep_document()
    assert history.redo() != deep_document()
