"""Shared test fixtures for the rich_content test suite.

WHY: Engine tests need DOM input without tying every test to lxml, and
lxml tests need the same small sample page. Centralizing both here
keeps the samples consistent across modules.

HOW: FakeNode / FakeAdapter form a minimal in-memory DOM with text,
element and comment nodes and a class-selector query. Fixtures provide
fake nodes and a parsed lxml sample document.

RULES:
- FakeAdapter.query_first supports ".class" and bare tag selectors only
- The lxml sample page is parsed fresh for each test
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

import pytest

from rich_content.dom.base import NodeAdapter, NodeKind
from rich_content.dom.lxml_dom import parse_document


@dataclass
class FakeNode:
    kind: NodeKind
    name: str = ""
    value: str = ""
    attrs: List[Tuple[str, str]] = field(default_factory=list)
    children: List["FakeNode"] = field(default_factory=list)


def text_node(value: str) -> FakeNode:
    return FakeNode(NodeKind.TEXT, value=value)


def comment_node(value: str = "") -> FakeNode:
    return FakeNode(NodeKind.COMMENT, value=value)


def element(name: str, *children: FakeNode, **attrs: str) -> FakeNode:
    return FakeNode(
        NodeKind.ELEMENT,
        name=name,
        attrs=[(k.rstrip("_"), v) for k, v in attrs.items()],
        children=list(children),
    )


class FakeAdapter(NodeAdapter):
    """NodeAdapter over FakeNode trees."""

    def kind(self, node: Any) -> NodeKind:
        return node.kind

    def text_value(self, node: Any) -> str:
        return node.value

    def tag_name(self, node: Any) -> str:
        return node.name

    def attributes(self, node: Any) -> List[Tuple[str, str]]:
        return list(node.attrs)

    def child_nodes(self, node: Any) -> Sequence[Any]:
        return list(node.children)

    def query_first(self, root: Any, selector: str) -> Optional[Any]:
        for child in root.children:
            if child.kind is NodeKind.ELEMENT and self._matches(child, selector):
                return child
            found = self.query_first(child, selector)
            if found is not None:
                return found
        return None

    @staticmethod
    def _matches(node: FakeNode, selector: str) -> bool:
        if selector.startswith("."):
            classes = dict(node.attrs).get("class", "").split()
            return selector[1:] in classes
        return node.name == selector


SAMPLE_PAGE = (
    "<html><head><title>Sample</title></head><body>"
    "<div class=\"body\">Hello <strong>bold</strong> and "
    "<a href=\"/x\" title=\"X\">a <em>link</em></a><!-- note -->!</div>"
    "<p class=\"other\">Other</p>"
    "</body></html>"
)


@pytest.fixture
def fake_adapter():
    return FakeAdapter()


@pytest.fixture
def sample_document():
    """Parsed lxml root (<html>) of SAMPLE_PAGE."""
    return parse_document(SAMPLE_PAGE)
