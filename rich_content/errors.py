"""Exception types raised by the rich content package.

WHY: Only two things can go wrong here: an external node the converter
does not understand, and a caller handing the engine something that is
not content. The first is routine and recovered locally; the second is
a programming error and must surface.

RULES:
- UnsupportedNodeError is recovered by the conversion boundary (skip)
- ContractViolation always propagates to the caller
- Both subclass TypeError so generic type checks keep working
"""

from __future__ import annotations


class RichContentError(Exception):
    """Base class for all errors raised by this package."""


class UnsupportedNodeError(RichContentError, TypeError):
    """Raised when an external node cannot be converted to a content item.

    WHY: Comments, processing instructions, doctypes and similar nodes
    have no place in a content sequence.

    HOW: Raised by convert_node; try_convert_node turns it into a skip
    result so a whole conversion never fails because of one node.

    RULES:
    - Only text and element nodes convert
    - Message names the node kind that was rejected
    """


class ContractViolation(RichContentError, TypeError):
    """Raised when an argument is neither a content item nor a sequence of them.

    WHY: concat accepts items and sequences interchangeably. Anything
    else is a caller bug, not a recoverable condition.

    RULES:
    - Never caught inside this package
    """
