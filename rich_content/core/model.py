"""Intermediate representation dataclasses for rich content.

WHY: Editor content is a run of plain text interleaved with structured
inline elements (links, emphasis, ...). The live DOM is too heavy and
too mutable to pass around, and serialized markup is too flat to
manipulate. The model is the single well-typed form that conversion,
merging and serialization all agree on.

HOW: Two frozen dataclasses form a tagged union:
  TextRun    - a plain-text fragment
  InlineNode - a structured inline element with attributes and children
A ContentSequence is a plain tuple of these items in reading order.

RULES:
- Everything is immutable; operations return new sequences
- Equality is structural (dataclass equality, tuple equality)
- A bare str is a shorthand for TextRun wherever input items are accepted
- Attributes are kept as ordered (name, value) pairs, in document order
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union


@dataclass(frozen=True)
class TextRun:
    """A plain-text fragment.

    Zero-length values are legal but degenerate: they survive conversion
    and merge into their neighbours under ``concat``.
    """

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class InlineNode:
    """A structured inline element with its own nested content.

    WHY: Links, emphasis and similar elements carry attributes and
    children of their own. The engine passes them through untouched;
    only the collaborators (converter, renderer, text extractor,
    JSON formatter) look inside.

    RULES:
    - tag: lower-case element name, e.g. "strong", "a"
    - attributes: ordered (name, value) pairs
    - children: a ContentSequence (tuple), possibly empty
    """

    tag: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["ContentItem", ...] = field(default=())


ContentItem = Union[TextRun, InlineNode]

ContentSequence = Tuple[ContentItem, ...]

EMPTY: ContentSequence = ()


def is_text_run(item: object) -> bool:
    return isinstance(item, TextRun)


def is_inline_node(item: object) -> bool:
    return isinstance(item, InlineNode)
