"""Tests for the annotation tree."""

from discansi.model import Document, LineBreak, Span, Text


def test_from_text_plain():
    doc = Document.from_text("hello")
    assert doc.root.children == (Text("hello"),)
    assert doc.text == "hello"
    assert len(doc) == 5


def test_from_text_line_breaks():
    doc = Document.from_text("ab\ncd\n")
    assert doc.root.children == (Text("ab"), LineBreak(), Text("cd"), LineBreak())
    assert doc.text == "ab\ncd\n"
    assert len(doc) == 6


def test_empty_document():
    doc = Document.from_text("")
    assert doc.root.children == ()
    assert len(doc) == 0
    assert doc == Document()


def test_equality_ignores_node_ids():
    a = Span(31, (Text("x"),))
    b = Span(31, (Text("x"),))
    assert a.node_id != b.node_id
    assert a == b
    assert Span(32, (Text("x"),)) != a


def test_with_style_keeps_identity():
    span = Span(31, (Text("x"),))
    restyled = span.with_style(32)
    assert restyled.node_id == span.node_id
    assert restyled.style == 32
    assert span.style == 31


def _nested():
    inner = Span(1, (Text("e"),))
    outer = Span(31, (Text("cd"), inner))
    return Document(Span(None, (Text("ab"), outer, Text("f")))), outer, inner


def test_spans_report_offsets():
    doc, outer, inner = _nested()
    assert list(doc.spans()) == [(2, 5, outer), (4, 5, inner)]
    for start, end, span in doc.spans():
        assert doc.text[start:end] == span.text


def test_find_by_node_id():
    doc, outer, inner = _nested()
    assert doc.find(inner.node_id) == (4, 5, inner)
    assert doc.find(doc.root.node_id) == (0, 6, doc.root)
    assert doc.find(-1) is None
