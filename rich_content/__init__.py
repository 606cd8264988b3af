"""Rich content - an editor content model for text mixed with inline nodes.

WHY: Editors hold rich text in three shapes (a live DOM tree, an
in-memory value, serialized markup / plain text) that must stay
consistent. This package provides the in-memory model and the only
operations callers need to move between those shapes.

HOW: Convert DOM nodes with from_external_nodes (or a
make_selector_extractor callable), combine values with concat, and
serialize with to_markup / to_plain_text.

RULES:
- The public surface is the six functions exported here
- Callers should not construct or inspect sequence internals
  beyond the TextRun / InlineNode model
"""

from rich_content.core.children import (
    concat,
    from_external_nodes,
    make_selector_extractor,
    serialize_capable,
    to_markup,
    to_plain_text,
)
from rich_content.core.model import ContentItem, ContentSequence, InlineNode, TextRun
from rich_content.errors import ContractViolation, RichContentError, UnsupportedNodeError

__version__ = "0.1.0"

__all__ = [
    "ContentItem",
    "ContentSequence",
    "ContractViolation",
    "InlineNode",
    "RichContentError",
    "TextRun",
    "UnsupportedNodeError",
    "concat",
    "from_external_nodes",
    "make_selector_extractor",
    "serialize_capable",
    "to_markup",
    "to_plain_text",
]
