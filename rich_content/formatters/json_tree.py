"""JSON tree formatter with schema validation.

WHY: Tools that are not HTML-aware (diffing, fixtures, other
languages) need the structure of a content sequence, not its markup.
A JSON tree keeps text runs and inline nodes distinct without
re-parsing.

HOW: Each TextRun becomes a JSON string and each InlineNode an object
with "tag", "attributes" (list of [name, value] pairs, to keep order
and duplicates) and "children". The document is validated against
content_sequence.schema.json before it is returned.

RULES:
- Top level: {"version": 1, "children": [...]}
- Schema validation is mandatory - raises on invalid output
- Output suffix: "-content.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from rich_content.core.children import serialize_capable
from rich_content.core.model import ContentSequence, is_inline_node, is_text_run
from rich_content.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_VERSION = 1

_SCHEMA_PATH = Path(__file__).resolve().parent / "content_sequence.schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _to_json_items(value: Any) -> list[Any]:
    items: list[Any] = []
    for item in value:
        if is_text_run(item):
            items.append(item.value)
        elif is_inline_node(item):
            items.append({
                "tag": item.tag,
                "attributes": [[k, v] for k, v in item.attributes],
                "children": _to_json_items(item.children),
            })
    return items


def to_json_tree(sequence: ContentSequence) -> dict[str, Any]:
    """Build the validated JSON document for a sequence.

    Raises:
        jsonschema.ValidationError: If the document does not conform
            to content_sequence.schema.json.
    """
    document = {
        "version": SCHEMA_VERSION,
        "children": _to_json_items(serialize_capable(sequence)),
    }
    jsonschema.validate(instance=document, schema=_get_schema())
    return document


class JsonTreeFormatter(BaseFormatter):
    """Serializes content to a JSON tree."""

    @property
    def name(self) -> str:
        return "JSON tree"

    def format(self, sequence: ContentSequence) -> list[FormatterOutput]:
        content = json.dumps(to_json_tree(sequence), indent=2, ensure_ascii=False)
        return [
            FormatterOutput(
                suffix="-content.json",
                content=content + "\n",
                media_type="application/json",
            )
        ]
