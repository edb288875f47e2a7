"""Tests for the Textual front end helpers."""

from types import SimpleNamespace

import pytest

from discansi.model import Document
from discansi.samples import WELCOME_TEXT
from discansi.session import FormatterSession
from discansi.textual_app import FormatterApp, location_to_offset, selection_offsets, text_edit


def test_location_to_offset():
    text = "ab\ncd\n\nef"
    assert location_to_offset(text, (0, 0)) == 0
    assert location_to_offset(text, (0, 2)) == 2
    assert location_to_offset(text, (1, 1)) == 4
    assert location_to_offset(text, (3, 0)) == 7


def test_selection_offsets_are_ordered():
    selection = SimpleNamespace(start=(1, 1), end=(0, 1))
    assert selection_offsets("ab\ncd", selection) == (1, 4)


@pytest.mark.parametrize("old,new,edit", [
    ("abc", "abc", None),
    ("abc", "abXc", (2, 2, "X")),
    ("abc", "ac", (1, 2, "")),
    ("abc", "aZZc", (1, 2, "ZZ")),
    ("aa", "aaa", (2, 2, "a")),
    ("", "hi", (0, 0, "hi")),
])
def test_text_edit(old, new, edit):
    assert text_edit(old, new) == edit


def test_text_edit_applies_cleanly():
    old, new = "hello world", "hello brave new world"
    start, end, replacement = text_edit(old, new)
    assert old[:start] + replacement + old[end:] == new


def test_app_defaults_to_welcome_message():
    app = FormatterApp()
    assert app.session.text == WELCOME_TEXT


def test_app_uses_given_session():
    session = FormatterSession(Document.from_text("x"))
    app = FormatterApp(session)
    assert app.session is session
