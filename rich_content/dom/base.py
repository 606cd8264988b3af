"""Abstract tree adapter for external (DOM-like) nodes.

WHY: The engine converts nodes from a caller-supplied tree, but it must
not depend on one DOM implementation. Every question it asks about a
node goes through a NodeAdapter, so lxml trees, test doubles, or any
other DOM can be plugged in.

HOW: NodeAdapter is an ABC with one method per tree question. NodeKind
classifies a node as text, element, or anything else.

RULES:
- Adapters only read the tree; they never mutate or retain nodes
- child_nodes returns text and element children interleaved, in order
- query_first searches descendants only, never the root itself
- To support a new DOM: subclass NodeAdapter and pass it to
  from_external_nodes / make_selector_extractor
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple


class NodeKind(enum.Enum):
    TEXT = "text"
    ELEMENT = "element"
    COMMENT = "comment"
    OTHER = "other"


class NodeAdapter(ABC):
    """Answers tree questions about external nodes of one DOM implementation."""

    @abstractmethod
    def kind(self, node: Any) -> NodeKind:
        """Classify ``node``."""

    @abstractmethod
    def text_value(self, node: Any) -> str:
        """Return the character data of a text node."""

    @abstractmethod
    def tag_name(self, node: Any) -> str:
        """Return the element name of an element node, as written."""

    @abstractmethod
    def attributes(self, node: Any) -> List[Tuple[str, str]]:
        """Return (name, value) pairs of an element node, in document order."""

    @abstractmethod
    def child_nodes(self, node: Any) -> Sequence[Any]:
        """Return the ordered child nodes of ``node``."""

    @abstractmethod
    def query_first(self, root: Any, selector: str) -> Optional[Any]:
        """Return the first descendant of ``root`` matching ``selector``, or None."""
