"""Single external-node conversion and the success/skip boundary.

WHY: Converting a tree into content is total-or-skip: a comment or a
processing instruction in the middle of a paragraph must not abort the
whole conversion. Keeping the skip as an explicit result value (rather
than an exception swallowed deep in a loop) makes the policy visible
and testable.

HOW: convert_node does the strict conversion and raises
UnsupportedNodeError for node kinds it does not handle.
try_convert_node wraps it and returns a Conversion carrying either the
item or the reason the node was skipped.

RULES:
- Text node → TextRun(value), value unchanged (no whitespace handling)
- Element node → InlineNode(lower-cased tag, attributes, children)
- Element children are converted with the same total-or-skip policy
  and are NOT coalesced (same as from_external_nodes)
- Any other node kind → UnsupportedNodeError
- Only UnsupportedNodeError becomes a skip; other adapter errors propagate
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from rich_content.core.model import ContentItem, InlineNode, TextRun
from rich_content.dom.base import NodeAdapter, NodeKind
from rich_content.errors import UnsupportedNodeError


@dataclass(frozen=True)
class Conversion:
    """Outcome of converting one external node.

    Exactly one of ``item`` / ``reason`` is set.
    """

    item: Optional[ContentItem] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


def convert_node(node: Any, adapter: NodeAdapter) -> ContentItem:
    """Convert one external node into a content item.

    Args:
        node: A node of the tree ``adapter`` understands.
        adapter: The NodeAdapter for that tree.

    Returns:
        A TextRun for text nodes, an InlineNode for element nodes.

    Raises:
        UnsupportedNodeError: For any other kind of node.
    """
    kind = adapter.kind(node)

    if kind is NodeKind.TEXT:
        return TextRun(adapter.text_value(node))

    if kind is NodeKind.ELEMENT:
        # Deferred: the engine module imports this one
        from rich_content.core.children import from_external_nodes

        return InlineNode(
            tag=adapter.tag_name(node).lower(),
            attributes=tuple(adapter.attributes(node)),
            children=from_external_nodes(adapter.child_nodes(node), adapter),
        )

    raise UnsupportedNodeError(
        "A content item can only be created from a text or element node, "
        "got a {} node".format(kind.value)
    )


def try_convert_node(node: Any, adapter: NodeAdapter) -> Conversion:
    """Convert one node, reporting unsupported nodes as a skip instead of raising."""
    try:
        return Conversion(item=convert_node(node, adapter))
    except UnsupportedNodeError as exc:
        return Conversion(reason=str(exc))
