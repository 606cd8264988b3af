"""Content-sequence engine: merge, DOM conversion, and serialization.

WHY: Rich content lives in three shapes at once: a live DOM tree, the
in-memory ContentSequence, and serialized markup / plain text. This
module is the one place that moves between them, so the shapes stay
consistent.

HOW: concat flattens heterogeneous inputs to items and coalesces
adjacent text. from_external_nodes converts a node list through the
success/skip conversion boundary. to_markup and to_plain_text hand the
sequence to the rendering and text collaborators via
serialize_capable. make_selector_extractor packages "find the
sub-tree, convert its children" as a reusable callable.

RULES:
- Every function is pure and returns a new tuple
- concat output never has two adjacent TextRuns
- from_external_nodes never fails because of individual nodes, and
  does NOT coalesce (pipe through concat when that is needed)
- InlineNodes are passed through untouched, never merged or inspected
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Union

from rich_content.core.model import (
    EMPTY,
    ContentItem,
    ContentSequence,
    TextRun,
    is_inline_node,
    is_text_run,
)
from rich_content.dom.base import NodeAdapter
from rich_content.dom.convert import try_convert_node
from rich_content.dom.lxml_dom import DEFAULT_ADAPTER
from rich_content.errors import ContractViolation
from rich_content.serialize.markup import render_markup
from rich_content.serialize.text import extract_text_runs

logger = logging.getLogger(__name__)

ContentPart = Union[ContentItem, str, Iterable[Union[ContentItem, str]]]


def serialize_capable(sequence: ContentSequence) -> Any:
    """Return a value the rendering collaborators accept.

    WHY: That a ContentSequence is directly consumable by the markup
    renderer and text extractor is an implementation detail, not a
    guarantee. Callers only get guarantees for the string outputs
    (to_markup, to_plain_text) and DOM input (from_external_nodes);
    they should use concat to build values rather than inspect or
    construct the shape themselves.

    RULES:
    - The returned value is opaque to callers
    - Currently the sequence itself
    """
    return sequence


def _as_item(value: Any) -> ContentItem:
    if is_text_run(value) or is_inline_node(value):
        return value
    if isinstance(value, str):
        return TextRun(value)
    raise ContractViolation(
        "Expected a TextRun, InlineNode or str, got {!r}".format(type(value).__name__)
    )


def _flatten(part: Any) -> List[ContentItem]:
    """Normalize one concat argument to its list of items."""
    if is_text_run(part) or is_inline_node(part) or isinstance(part, str):
        return [_as_item(part)]
    try:
        values = list(part)
    except TypeError:
        raise ContractViolation(
            "Expected a content item or a sequence of them, got {!r}".format(
                type(part).__name__
            )
        ) from None
    return [_as_item(v) for v in values]


def concat(*parts: ContentPart) -> ContentSequence:
    """Concatenate content items and sequences into one sequence.

    WHY: Building content by pieces ("prefix", a link, a sequence taken
    from somewhere else) naturally produces neighbouring text fragments.
    Keeping one TextRun per text stretch keeps equality and rendering
    predictable.

    HOW: Flatten every argument, left to right, into items. A TextRun
    following a TextRun is merged into it by appending its value;
    every other item is appended as is.

    RULES:
    - A single item (or str) counts as a one-element sequence
    - Order of all input items is preserved
    - Only two adjacent TextRuns merge; InlineNodes never merge
    - Empty arguments contribute nothing

    Args:
        *parts: TextRun / InlineNode / str items, or iterables of them.

    Returns:
        A new ContentSequence with no two adjacent TextRuns.

    Raises:
        ContractViolation: If an argument is neither an item nor an
            iterable of items.
    """
    result: List[ContentItem] = []
    for part in parts:
        for item in _flatten(part):
            if is_text_run(item) and result and is_text_run(result[-1]):
                result[-1] = TextRun(result[-1].value + item.value)
            else:
                result.append(item)
    return tuple(result)


def from_external_nodes(
    nodes: Iterable[Any],
    adapter: Optional[NodeAdapter] = None,
) -> ContentSequence:
    """Convert external tree nodes into a content sequence.

    WHY: A live document's child list mixes text, elements, comments and
    other node kinds. Only text and elements are content; the rest must
    be dropped without failing the conversion.

    HOW: Each node goes through try_convert_node. Successful conversions
    are kept in input order, skips are logged at DEBUG and dropped.

    RULES:
    - Never raises because a node cannot be converted
    - Result is not coalesced: two text nodes give two TextRuns

    Args:
        nodes: Ordered child nodes, e.g. adapter.child_nodes(element).
        adapter: Tree adapter for the nodes (default: lxml).

    Returns:
        A new ContentSequence, one item per convertible node.
    """
    adapter = adapter or DEFAULT_ADAPTER
    result: List[ContentItem] = []
    for node in nodes:
        conversion = try_convert_node(node, adapter)
        if conversion.ok:
            result.append(conversion.item)
        else:
            logger.debug("Skipping node %r: %s", node, conversion.reason)
    return tuple(result)


def to_markup(sequence: ContentSequence) -> str:
    """Render a sequence to its HTML string."""
    return render_markup(serialize_capable(sequence))


def to_plain_text(sequence: ContentSequence) -> str:
    """Return the text content of a sequence, nested nodes included.

    Fragments are joined with no separator and whitespace is kept as is.
    """
    return "".join(extract_text_runs(serialize_capable(sequence)))


def make_selector_extractor(
    selector: Optional[str],
    adapter: Optional[NodeAdapter] = None,
) -> Callable[[Any], ContentSequence]:
    """Return a function extracting a sub-tree's children as content.

    WHY: Callers often describe content declaratively ("the children of
    .body inside this element") and want the lookup packaged once and
    reused for many roots.

    HOW: The returned function looks up the first descendant of the root
    matching ``selector`` (or uses the root when ``selector`` is empty)
    and converts that node's child nodes with from_external_nodes.

    RULES:
    - Empty or None selector → the root itself is the match
    - Selector with no match → empty sequence
    - The root itself is never matched by a selector

    Args:
        selector: CSS selector, or None.
        adapter: Tree adapter for the roots (default: lxml).

    Returns:
        Callable taking a root node and returning a ContentSequence.
    """
    adapter = adapter or DEFAULT_ADAPTER

    def extract(root: Any) -> ContentSequence:
        match = root
        if selector:
            match = adapter.query_first(root, selector)

        if match is None:
            return EMPTY
        return from_external_nodes(adapter.child_nodes(match), adapter)

    return extract
