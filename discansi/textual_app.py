"""Textual front end for the formatter."""

from typing import Optional

from rich.text import Text as RichText
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Header, Static, TextArea

from .encoder import encode_stream
from .model import Document
from .samples import welcome_document
from .session import FormatterSession
from .styles import BACKGROUND_CODES, DECORATION_CODES, FOREGROUND_CODES, RESET, style_name, swatch


def location_to_offset(text: str, location: tuple[int, int]) -> int:
    """Convert a (row, column) editor location into a flat text offset."""
    row, column = location
    lines = text.split("\n")
    return sum(len(line) + 1 for line in lines[:row]) + column


def selection_offsets(text: str, selection) -> tuple[int, int]:
    """Ordered ``(start, end)`` offsets of an editor selection."""
    a = location_to_offset(text, selection.start)
    b = location_to_offset(text, selection.end)
    return min(a, b), max(a, b)


def text_edit(old: str, new: str) -> Optional[tuple[int, int, str]]:
    """Smallest ``(start, end, replacement)`` turning ``old`` into ``new``."""
    if old == new:
        return None
    prefix = 0
    limit = min(len(old), len(new))
    while prefix < limit and old[prefix] == new[prefix]:
        prefix += 1
    suffix = 0
    while (suffix < limit - prefix
           and old[len(old) - 1 - suffix] == new[len(new) - 1 - suffix]):
        suffix += 1
    return prefix, len(old) - suffix, new[prefix:len(new) - suffix]


class FormatterApp(App):
    """Edit text, style selections and copy the result as an ansi block."""

    TITLE = "Discord Colored Text Generator"

    CSS = """
    Horizontal {
        height: auto;
    }
    Button {
        min-width: 6;
        margin: 0 1 0 0;
    }
    TextArea {
        height: 1fr;
    }
    #preview {
        height: auto;
        min-height: 3;
        padding: 0 1;
        background: #2f3136;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+z", "undo", "Undo", priority=True),
        Binding("ctrl+y", "redo", "Redo", priority=True),
        Binding("ctrl+r", "reset_all", "Reset All", priority=True),
        Binding("ctrl+k", "copy", "Copy", priority=True),
        Binding("ctrl+e", "export", "Export", priority=True),
    ]

    def __init__(self, session: Optional[FormatterSession] = None):
        super().__init__()
        if session is None:
            session = FormatterSession(welcome_document())
        self.session = session

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="decorations"):
            for code in DECORATION_CODES:
                if code != RESET:
                    yield Button(style_name(code), id=f"style-{code}")
        for row, codes in (("foreground", FOREGROUND_CODES), ("background", BACKGROUND_CODES)):
            with Horizontal(id=row):
                for code in codes:
                    button = Button(str(code), id=f"style-{code}")
                    button.styles.background = swatch(code)
                    button.tooltip = style_name(code)
                    yield button
        yield TextArea(self.session.text, id="editor")
        yield Static(id="preview")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_preview()
        self.query_one(TextArea).focus()

    @property
    def editor(self) -> TextArea:
        return self.query_one("#editor", TextArea)

    def _refresh_preview(self) -> None:
        self.query_one("#preview", Static).update(
            RichText.from_ansi(encode_stream(self.session.document))
        )

    def _show(self, document: Document) -> None:
        if self.editor.text != document.text:
            self.editor.load_text(document.text)
        self._refresh_preview()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        edit = text_edit(self.session.text, event.text_area.text)
        if edit is not None:
            self.session.replace_text(*edit)
            self._refresh_preview()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if not button_id.startswith("style-"):
            return
        code = int(button_id.split("-", 1)[1])
        start, end = selection_offsets(self.editor.text, self.editor.selection)
        if self.session.apply_style(start, end, code):
            self._refresh_preview()
        else:
            self.notify("Select some text first.", severity="warning")
        self.editor.focus()

    def action_undo(self) -> None:
        self._show(self.session.undo())

    def action_redo(self) -> None:
        self._show(self.session.redo())

    def action_reset_all(self) -> None:
        self.session.reset_all()
        self._show(self.session.document)

    def action_copy(self) -> None:
        if self.session.copy_to_clipboard():
            self.notify(self.session.status_message, title="Copied!")
        else:
            self.notify(self.session.status_message, title="Error", severity="error")

    def action_export(self) -> None:
        if self.session.export():
            self.notify(self.session.status_message, title="Exported")
        else:
            self.notify(self.session.status_message, title="Error", severity="error")
