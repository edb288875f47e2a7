"""Annotation tree for styled text.

A document is a tree of immutable nodes. Leaves are literal text runs and
line breaks; inner nodes are spans carrying at most one style code. Because
nodes never change after construction, a new revision shares every subtree
it did not touch with the revision it was derived from.
"""

import itertools
from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Iterable, Iterator, Optional, Union

_node_ids = itertools.count(1)


def next_node_id() -> int:
    """Allocate a fresh span identifier."""
    return next(_node_ids)


@dataclass(frozen=True)
class Text:
    text: str

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class LineBreak:
    """An explicit line break, flattened to a single newline."""

    @property
    def text(self) -> str:
        return "\n"

    @property
    def length(self) -> int:
        return 1


@dataclass(frozen=True, eq=False)
class Span:
    """A range of the document, optionally carrying one style code.

    ``node_id`` identifies the span across revisions and is ignored by
    equality, so two trees compare equal when their shape, styles and
    text match. Spans may nest to any depth; nothing here recurses.
    """

    style: Optional[int] = None
    children: tuple = ()
    node_id: int = field(default_factory=next_node_id, compare=False)
    length: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Children are built first, so their lengths are already known
        object.__setattr__(self, "length", sum(child.length for child in self.children))

    @cached_property
    def text(self) -> str:
        parts: list[str] = []
        stack = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Span):
                stack.extend(reversed(node.children))
            else:
                parts.append(node.text)
        return "".join(parts)

    def __eq__(self, other):
        if not isinstance(other, Span):
            return NotImplemented
        pairs = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is b:
                continue
            if isinstance(a, Span) and isinstance(b, Span):
                if (a.style != b.style or a.length != b.length
                        or len(a.children) != len(b.children)):
                    return False
                pairs.extend(zip(a.children, b.children))
            elif a != b:
                return False
        return True

    def __hash__(self):
        return hash((self.style, self.length, self.text))

    def with_style(self, style: Optional[int]) -> "Span":
        return replace(self, style=style)

    def with_children(self, children: Iterable["Node"]) -> "Span":
        return replace(self, children=tuple(children))


Node = Union[Text, LineBreak, Span]


def text_nodes(text: str) -> list[Node]:
    """Convert plain text into leaves, one LineBreak per newline."""
    nodes: list[Node] = []
    for i, line in enumerate(text.split("\n")):
        if i > 0:
            nodes.append(LineBreak())
        if line:
            nodes.append(Text(line))
    return nodes


@dataclass(frozen=True)
class Document:
    """One revision of a styled document."""

    root: Span = field(default_factory=Span)

    @classmethod
    def from_text(cls, text: str = "") -> "Document":
        return cls(Span(None, tuple(text_nodes(text))))

    @property
    def text(self) -> str:
        return self.root.text

    def __len__(self) -> int:
        return self.root.length

    def spans(self) -> Iterator[tuple[int, int, Span]]:
        """Yield ``(start, end, span)`` for every span below the root, in pre-order."""
        stack = [(self.root, 0)]
        while stack:
            node, start = stack.pop()
            if node is not self.root:
                yield start, start + node.length, node
            offset = start
            pending = []
            for child in node.children:
                if isinstance(child, Span):
                    pending.append((child, offset))
                offset += child.length
            stack.extend(reversed(pending))

    def find(self, node_id: int) -> Optional[tuple[int, int, Span]]:
        """Locate a span by identifier, returning its offsets and the node."""
        if self.root.node_id == node_id:
            return 0, len(self), self.root
        for start, end, span in self.spans():
            if span.node_id == node_id:
                return start, end, span
        return None
