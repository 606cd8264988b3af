"""HTML markup formatter.

WHY: The markup string is the persisted form of rich content; writing
it to a file is the most direct way to inspect what an editor would
store.

RULES:
- Output is exactly to_markup(sequence), no document wrapper added
- Output suffix: "-content.html"
- Media type: "text/html"
"""

from __future__ import annotations

from rich_content.core.children import to_markup
from rich_content.core.model import ContentSequence
from rich_content.formatters.base import BaseFormatter, FormatterOutput


class MarkupFormatter(BaseFormatter):
    """Serializes content to an HTML fragment."""

    @property
    def name(self) -> str:
        return "HTML markup"

    def format(self, sequence: ContentSequence) -> list[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-content.html",
                content=to_markup(sequence),
                media_type="text/html",
            )
        ]
