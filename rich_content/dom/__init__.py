"""External tree access and node conversion.

WHY: The engine reads caller-supplied DOM trees but must not be tied
to one DOM implementation.

HOW: base.py defines the NodeAdapter contract, lxml_dom.py implements
it for lxml trees, convert.py turns single nodes into content items.

RULES:
- Trees are read, never mutated or retained
- New DOM backends = one NodeAdapter subclass, no engine changes
"""

from rich_content.dom.base import NodeAdapter, NodeKind
from rich_content.dom.lxml_dom import DEFAULT_ADAPTER, LxmlNodeAdapter, parse_document, parse_fragment

__all__ = [
    "DEFAULT_ADAPTER",
    "LxmlNodeAdapter",
    "NodeAdapter",
    "NodeKind",
    "parse_document",
    "parse_fragment",
]
