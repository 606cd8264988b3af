"""Abstract base formatter and output container.

WHY: The CLI (and any other caller writing files) needs every output
form of a content sequence behind one interface, so it can run any
selection of them generically.

HOW: BaseFormatter is an ABC with two requirements, a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; current formatters return one item
- ``suffix`` starts with a hyphen, e.g. ``"-content.html"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rich_content.core.model import ContentSequence


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-content.html"`` → ``"article-content.html"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"text/html"``.
    """

    suffix: str
    content: str | bytes
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'HTML markup'."""

    @abstractmethod
    def format(self, sequence: ContentSequence) -> list[FormatterOutput]:
        """Convert a content sequence into one or more output files.

        Args:
            sequence: The content to write.

        Returns:
            List of FormatterOutput objects.
        """
