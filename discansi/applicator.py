"""Operations that derive a new document revision from an existing one.

All offsets index the flattened text of the document. Every function here
returns a new Document and leaves its input untouched; rejected selections
return the input object itself so callers can detect a no-op with ``is``.

Trees may nest arbitrarily deep, so walks keep an explicit path of
``(span, child_index)`` pairs and rebuild the touched spine bottom-up
instead of recursing.
"""

import logging

from .model import Document, Node, Span, Text, text_nodes
from .styles import band_of, validate

logger = logging.getLogger(__name__)


def _rebuild(path: list, node: Node) -> Node:
    """Replace the child at each ``(span, index)`` of ``path``, innermost first."""
    for span, index in reversed(path):
        children = span.children
        node = span.with_children(children[:index] + (node,) + children[index + 1:])
    return node


def _cut(node: Node, at: int) -> tuple:
    """Split a node at a relative offset into ``(left, right)``.

    Either half is None when the cut falls on the node's edge. The left half
    of a span keeps its identifier; the right half receives a fresh one.
    """
    if at <= 0:
        return None, node
    if at >= node.length:
        return node, None

    levels = []
    while isinstance(node, Span):
        left: list[Node] = []
        right: list[Node] = []
        crossing = None
        offset = 0
        for child in node.children:
            child_end = offset + child.length
            if child_end <= at:
                left.append(child)
            elif offset >= at:
                right.append(child)
            else:
                crossing, crossing_at = child, at - offset
            offset = child_end
        levels.append((node, left, right))
        node, at = crossing, crossing_at

    # Only a text leaf can straddle the cut
    head: Node = Text(node.text[:at])
    tail: Node = Text(node.text[at:])
    for span, left, right in reversed(levels):
        head = span.with_children(left + [head])
        tail = Span(span.style, tuple([tail] + right))
    return head, tail


def _same_band(span: Span, code: int) -> bool:
    return span.style is not None and band_of(span.style) == band_of(code)


def _wrap(span: Span, start: int, end: int, code: int) -> Span:
    """Move ``[start, end)`` of span's children into a new styled span."""
    before: list[Node] = []
    inside: list[Node] = []
    after: list[Node] = []
    offset = 0
    for child in span.children:
        child_end = offset + child.length
        if child_end <= start:
            before.append(child)
        elif offset >= end:
            after.append(child)
        else:
            head, rest = _cut(child, start - offset)
            middle, tail = _cut(rest, end - max(start, offset))
            if head is not None:
                before.append(head)
            inside.append(middle)
            if tail is not None:
                after.append(tail)
        offset = child_end

    return span.with_children(before + [Span(code, tuple(inside))] + after)


def _apply(root: Span, start: int, end: int, code: int) -> Span:
    path = []
    span = root
    while True:
        # Descend while a single child covers the whole selection, so the new
        # span ends up nested as deeply as possible.
        target = None
        offset = 0
        for index, child in enumerate(span.children):
            child_end = offset + child.length
            if offset <= start and end <= child_end:
                if isinstance(child, Span):
                    target = index, child, offset, child_end
                break
            offset = child_end
        if target is None:
            return _rebuild(path, _wrap(span, start, end, code))

        index, child, offset, child_end = target
        path.append((span, index))
        if (offset, child_end) == (start, end) and _same_band(child, code):
            return _rebuild(path, child.with_style(code))
        span, start, end = child, start - offset, end - offset


def apply_style(document: Document, start: int, end: int, code: int) -> Document:
    """Wrap ``[start, end)`` in a new span styled with ``code``.

    Spans crossing either boundary are split. When the selection exactly
    covers an existing span of the same band, that span's style is replaced
    instead of nesting a second one.

    Args:
        document: Revision to derive from
        start: First selected offset
        end: Offset one past the selection
        code: Style code to apply

    Returns:
        The new revision, or ``document`` itself for an empty or
        out-of-range selection

    Raises:
        InvalidStyleError: If ``code`` is not a supported style
    """
    validate(code)
    if start < 0 or end > len(document) or start >= end:
        logger.debug(f"Ignoring selection [{start}, {end}) on document of length {len(document)}")
        return document
    return Document(_apply(document.root, start, end, code))


def reset_all(document: Document) -> Document:
    """Drop every span, keeping only the flattened text."""
    return Document.from_text(document.text)


def _merge_text(nodes: list) -> list[Node]:
    """Join adjacent text leaves and drop empty ones."""
    merged: list[Node] = []
    for node in nodes:
        if isinstance(node, Text):
            if not node.text:
                continue
            if merged and isinstance(merged[-1], Text):
                merged[-1] = Text(merged[-1].text + node.text)
                continue
        merged.append(node)
    return merged


def _remove(root: Span, start: int, end: int) -> Span:
    # Each frame: [span, start, end, next child index, offset of that child, kept children]
    stack = [[root, start, end, 0, 0, []]]
    while True:
        frame = stack[-1]
        span, s, e, index, offset, kept = frame
        children = span.children
        descended = False
        while index < len(children):
            child = children[index]
            child_end = offset + child.length
            index += 1
            if child_end <= s or offset >= e:
                kept.append(child)
            elif s <= offset and child_end <= e:
                pass  # entirely inside the removed range
            elif isinstance(child, Text):
                a = max(s - offset, 0)
                b = min(e, child_end) - offset
                kept.append(Text(child.text[:a] + child.text[b:]))
            else:
                frame[3], frame[4] = index, child_end
                stack.append([child, max(s - offset, 0), min(e, child_end) - offset, 0, 0, []])
                descended = True
                break
            offset = child_end
        if descended:
            continue

        trimmed = span.with_children(_merge_text(kept))
        stack.pop()
        if not stack:
            return trimmed
        if trimmed.length:
            stack[-1][5].append(trimmed)


def _insert(root: Span, at: int, nodes: list[Node]) -> Span:
    path = []
    span = root
    while True:
        children = span.children
        target = None
        offset = 0
        for index, child in enumerate(children):
            child_end = offset + child.length
            if offset < at <= child_end:
                target = index, child, offset
                break
            offset = child_end

        if target is None:
            # Nothing to the left of the caret within this span
            return _rebuild(path, span.with_children(_merge_text(nodes + list(children))))

        index, child, offset = target
        if isinstance(child, Span):
            path.append((span, index))
            span, at = child, at - offset
            continue
        if isinstance(child, Text):
            split = at - offset
            pieces = [Text(child.text[:split])] + nodes + [Text(child.text[split:])]
        else:
            pieces = [child] + nodes
        merged = _merge_text(list(children[:index]) + pieces + list(children[index + 1:]))
        return _rebuild(path, span.with_children(merged))


def replace_text(document: Document, start: int, end: int, text: str) -> Document:
    """Replace ``[start, end)`` with ``text``.

    Inserted characters take the style of the character to their left, the
    way typing continues the current run. Spans left empty by the removal
    disappear.
    """
    if start < 0 or end > len(document) or start > end:
        logger.debug(f"Ignoring edit [{start}, {end}) on document of length {len(document)}")
        return document
    if document.text[start:end] == text:
        return document

    root = document.root
    if start < end:
        root = _remove(root, start, end)
    if text:
        root = _insert(root, start, text_nodes(text))
    return Document(root)
