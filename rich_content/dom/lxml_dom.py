"""NodeAdapter implementation for lxml element trees.

WHY: lxml is the DOM the rest of the toolchain already speaks, and its
HTML parser copes with real-world markup. This adapter lets the engine
read lxml trees as if they were a browser DOM with childNodes and
querySelector.

HOW: lxml keeps character data in ``.text`` / ``.tail`` instead of
separate text nodes. The XPath ``node()`` axis restores the DOM view:
it returns text strings, elements, comments and processing
instructions interleaved in document order. CSS selectors are compiled
with lxml.cssselect (backed by the cssselect package) and cached.

RULES:
- Text nodes are str instances (lxml "smart strings")
- Element tags are reported without namespace (QName.localname)
- query_first never returns the root itself, matching querySelector
- An invalid selector raises cssselect's SelectorError to the caller
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, List, Optional, Sequence, Tuple, Union

import lxml.html
from lxml import etree
from lxml.cssselect import CSSSelector

from rich_content.dom.base import NodeAdapter, NodeKind


@lru_cache(maxsize=256)
def _compile_selector(selector: str) -> CSSSelector:
    return CSSSelector(selector, translator="html")


class LxmlNodeAdapter(NodeAdapter):
    """Reads lxml.etree / lxml.html trees."""

    def kind(self, node: Any) -> NodeKind:
        if isinstance(node, str):
            return NodeKind.TEXT
        if isinstance(node, etree._Comment):
            return NodeKind.COMMENT
        if isinstance(node, etree._Element) and isinstance(node.tag, str):
            return NodeKind.ELEMENT
        return NodeKind.OTHER

    def text_value(self, node: Any) -> str:
        # Drop the smart-string back-reference to the tree
        return str(node)

    def tag_name(self, node: Any) -> str:
        return etree.QName(node).localname

    def attributes(self, node: Any) -> List[Tuple[str, str]]:
        return list(node.attrib.items())

    def child_nodes(self, node: Any) -> Sequence[Any]:
        if not isinstance(node, etree._Element):
            return []
        return node.xpath("node()")

    def query_first(self, root: Any, selector: str) -> Optional[Any]:
        for match in _compile_selector(selector)(root):
            if match is not root:
                return match
        return None


DEFAULT_ADAPTER = LxmlNodeAdapter()


def parse_document(markup: Union[str, bytes]) -> Any:
    """Parse a full HTML document and return its root (``<html>``) element.

    Pass bytes when the source encoding is unknown; lxml then honours an
    XML declaration or meta charset. Raises lxml.etree.ParserError for
    empty input.
    """
    return lxml.html.document_fromstring(markup)


def parse_fragment(markup: str, container: str = "div") -> Any:
    """Parse an HTML fragment into a single ``container`` element.

    The fragment's top-level nodes become the container's child nodes.
    """
    return lxml.html.fragment_fromstring(markup, create_parent=container)
