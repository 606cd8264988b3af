"""Text-run extraction from rendered-capable content.

WHY: The plain-text form of rich content is every piece of character
data in reading order, with all structure and attributes stripped.

HOW: Depth-first walk over the value produced by serialize_capable,
yielding each TextRun's value and descending into InlineNode children.

RULES:
- Attributes never contribute text
- Whitespace is yielded exactly as stored
- Empty TextRuns yield empty strings (harmless when joined)
"""

from __future__ import annotations

from typing import Any, Iterator

from rich_content.core.model import is_inline_node, is_text_run


def extract_text_runs(value: Any) -> Iterator[str]:
    for item in value:
        if is_text_run(item):
            yield item.value
        elif is_inline_node(item):
            yield from extract_text_runs(item.children)
