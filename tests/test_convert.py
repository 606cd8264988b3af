"""Unit tests for single-node conversion and the success/skip boundary.

WHY: The skip policy is the only error recovery in the package. It must
turn unsupported nodes into skips and nothing else.
"""

import pytest

from conftest import FakeAdapter, FakeNode, comment_node, element, text_node
from rich_content.core.model import InlineNode, TextRun
from rich_content.dom.base import NodeKind
from rich_content.dom.convert import Conversion, convert_node, try_convert_node
from rich_content.errors import UnsupportedNodeError


class TestConvertNode:

    def test_text_node(self, fake_adapter):
        assert convert_node(text_node(" a "), fake_adapter) == TextRun(" a ")

    def test_element_node(self, fake_adapter):
        node = element("STRONG", text_node("x"), text_node("y"), id="s")
        assert convert_node(node, fake_adapter) == InlineNode(
            tag="strong",
            attributes=(("id", "s"),),
            children=(TextRun("x"), TextRun("y")),
        )

    def test_comment_raises(self, fake_adapter):
        with pytest.raises(UnsupportedNodeError, match="comment"):
            convert_node(comment_node(), fake_adapter)

    def test_other_kind_raises(self, fake_adapter):
        with pytest.raises(UnsupportedNodeError):
            convert_node(FakeNode(NodeKind.OTHER), fake_adapter)


class TestTryConvertNode:

    def test_success(self, fake_adapter):
        conversion = try_convert_node(text_node("t"), fake_adapter)
        assert conversion.ok
        assert conversion.item == TextRun("t")

    def test_skip(self, fake_adapter):
        conversion = try_convert_node(comment_node(), fake_adapter)
        assert not conversion.ok
        assert conversion.item is None
        assert "comment" in conversion.reason

    def test_other_adapter_errors_propagate(self):
        class BrokenAdapter(FakeAdapter):
            def text_value(self, node):
                raise RuntimeError("tree is gone")

        with pytest.raises(RuntimeError):
            try_convert_node(text_node("t"), BrokenAdapter())

    def test_conversion_defaults(self):
        assert Conversion(item=TextRun("a")).ok
        assert not Conversion(reason="nope").ok
