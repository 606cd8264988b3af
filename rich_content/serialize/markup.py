"""HTML markup rendering for rendered-capable content.

WHY: Editors persist rich content as an HTML string. Escaping, void
elements and attribute quoting are all easy to get subtly wrong by
hand, so rendering goes through lxml's HTML serializer, the same
library that parsed the input.

HOW: Build a temporary lxml tree under a wrapper element
(config.RENDER_WRAPPER_TAG). TextRuns become the ``.text`` of their
parent or the ``.tail`` of the preceding element, which is lxml's way
of storing interleaved character data. Serialize the wrapper with the
HTML method and strip the wrapper's own start and end tags.

RULES:
- Text content is escaped (&, <, >)
- Characters markup cannot carry (NUL, C0 controls other than tab,
  newline and carriage return, lone surrogates, U+FFFE, U+FFFF) are
  dropped from text and attribute values
- Void elements (br, img, ...) render without an end tag
- Attributes render in stored order
- Empty sequence renders as ""
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from lxml import etree

from rich_content.config import RENDER_WRAPPER_TAG
from rich_content.core.model import is_inline_node, is_text_run

# Characters libxml2 refuses in text and attribute values.
_UNREPRESENTABLE_RE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _clean(text: str) -> str:
    return _UNREPRESENTABLE_RE.sub("", text)


def _append_items(parent: etree._Element, items: Iterable[Any]) -> None:
    last = None
    for item in items:
        if is_text_run(item):
            if last is None:
                parent.text = (parent.text or "") + _clean(item.value)
            else:
                last.tail = (last.tail or "") + _clean(item.value)
        elif is_inline_node(item):
            attributes = {name: _clean(value) for name, value in item.attributes}
            last = etree.SubElement(parent, item.tag, attributes)
            _append_items(last, item.children)


def render_markup(value: Any) -> str:
    """Render a sequence of content items to an HTML string."""
    wrapper = etree.Element(RENDER_WRAPPER_TAG)
    _append_items(wrapper, value)
    markup = etree.tostring(wrapper, method="html", encoding="unicode")

    start_tag = "<{}>".format(RENDER_WRAPPER_TAG)
    end_tag = "</{}>".format(RENDER_WRAPPER_TAG)
    return markup[len(start_tag):-len(end_tag)]
