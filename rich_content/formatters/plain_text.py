"""Plain text formatter.

RULES:
- Output is to_plain_text(sequence) plus one trailing newline when the
  text does not already end with one
- Empty content produces an empty file
- Output suffix: "-content.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from rich_content.core.children import to_plain_text
from rich_content.core.model import ContentSequence
from rich_content.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Plain text"

    def format(self, sequence: ContentSequence) -> list[FormatterOutput]:
        text = to_plain_text(sequence)
        if text and not text.endswith("\n"):
            text += "\n"
        return [
            FormatterOutput(
                suffix="-content.txt",
                content=text,
                media_type="text/plain",
            )
        ]
