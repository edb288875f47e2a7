"""Serialize a document into the escape codes of a fenced ``ansi`` block.

The renderer only understands a flat stream of SGR sequences and has no way
to return to a previous style, so closing a span resets everything and then
re-asserts whatever the enclosing spans had set.
"""

import re
from typing import NamedTuple, Optional

from .constants import FormatterConstants
from .model import Document, LineBreak, Text
from .styles import Band, band_of


class EffectiveState(NamedTuple):
    """Style visible at one point of the tree, None meaning unset."""

    decoration: Optional[int] = None
    foreground: Optional[int] = None
    background: Optional[int] = None

    def with_code(self, code: Optional[int]) -> "EffectiveState":
        """Copy of this state with the band of ``code`` overridden."""
        if code is None:
            return self
        band = band_of(code)
        if band is Band.DECORATION:
            return self._replace(decoration=code)
        if band is Band.FOREGROUND:
            return self._replace(foreground=code)
        return self._replace(background=code)

    @property
    def is_unset(self) -> bool:
        return self == UNSET


UNSET = EffectiveState()


def sgr(decoration: Optional[int], color: Optional[int] = None) -> str:
    """Build one ``ESC[<decoration>;<color>m`` sequence."""
    if decoration is None:
        decoration = FormatterConstants.DEFAULT_DECORATION
    if color is None:
        return f"{FormatterConstants.ESCAPE}{decoration}m"
    return f"{FormatterConstants.ESCAPE}{decoration};{color}m"


def opening_sequence(state: EffectiveState, code: int) -> str:
    """Sequence entering a span styled ``code`` whose resolved state is ``state``.

    Colors set by enclosing spans are still active on entry, so one color is
    enough: the background when the span itself sets one, otherwise the
    foreground.
    """
    if band_of(code) is Band.BACKGROUND:
        color = state.background if state.background is not None else state.foreground
    else:
        color = state.foreground if state.foreground is not None else state.background
    return sgr(state.decoration, color)


def restore_sequence(state: EffectiveState) -> str:
    """Sequences re-asserting ``state`` after a full reset.

    Decoration is carried by every emitted sequence, and is restored on its
    own when no color is set.
    """
    if state.is_unset:
        return ""
    parts = []
    if state.foreground is not None:
        parts.append(sgr(state.decoration, state.foreground))
    if state.background is not None:
        parts.append(sgr(state.decoration, state.background))
    if not parts:
        parts.append(sgr(state.decoration))
    return "".join(parts)


def encode_stream(document: Document) -> str:
    """Escape-code stream for a document, without the fence.

    The walk keeps its own stack of ``(node, state)`` frames; the closing
    sequence of a styled span is pushed as a plain string beneath its
    children so it is written once they are done.
    """
    out: list[str] = []
    stack: list = [(document.root, UNSET)]
    while stack:
        frame = stack.pop()
        if isinstance(frame, str):
            out.append(frame)
            continue
        node, state = frame
        if isinstance(node, Text):
            out.append(node.text)
        elif isinstance(node, LineBreak):
            out.append("\n")
        else:
            inner = state
            if node.style is not None:
                inner = state.with_code(node.style)
                out.append(opening_sequence(inner, node.style))
                stack.append(FormatterConstants.RESET_SEQUENCE + restore_sequence(state))
            stack.extend((child, inner) for child in reversed(node.children))
    return "".join(out)


_FENCE_RUN = re.compile(r"`(?=``)")


def fence(stream: str) -> str:
    """Wrap a stream in the renderer's fenced block.

    Runs of three backticks inside the stream would end the block early,
    so each run is broken with a zero-width space.
    """
    body = _FENCE_RUN.sub("`" + FormatterConstants.FENCE_BREAKER, stream)
    return (
        f"{FormatterConstants.FENCE}{FormatterConstants.LANGUAGE_TAG}\n"
        f"{body}\n"
        f"{FormatterConstants.FENCE}"
    )


def encode(document: Document) -> str:
    """Fenced ``ansi`` block for a document, ready to paste into chat."""
    return fence(encode_stream(document))
