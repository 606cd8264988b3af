"""Output formatter registry.

WHY: The CLI needs a single lookup to find a formatter by name. A
central dict makes adding a format trivial: create the formatter class,
import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["markup"]()``.

RULES:
- Keys are short snake_case identifiers (used in CLI flags and config)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich_content.formatters.json_tree import JsonTreeFormatter
from rich_content.formatters.markup import MarkupFormatter
from rich_content.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from rich_content.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "markup": MarkupFormatter,
    "text": PlainTextFormatter,
    "json": JsonTreeFormatter,
}
