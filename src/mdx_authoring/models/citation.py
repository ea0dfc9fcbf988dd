"""
Citation models.

A citation only ever exists as matched text; CitationMatch is a snapshot of
one match and is stale as soon as the document changes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .span import Span


class CitationField(str, Enum):
    """Sub-fields of a citation that can be read or rewritten."""

    KEY = "key"
    LOCATORS = "locators"


@dataclass(frozen=True)
class CitationMatch:
    """
    A citation construct found at the cursor.

    Attributes:
        span: Whole construct, from ``<Cite`` to ``/>`` or ``</Cite>``
        key: Bibliography key
        key_span: Position of the key
        locators: Locator list (e.g. "p. 12, l. 3"), None when absent
        locator_span: Position of the locator list, None when absent
        short: Whether the ``short`` attribute is present
        self_closing: True for ``/>``, False for the open/body/close form
    """

    span: Span
    key: str
    key_span: Span
    locators: Optional[str] = None
    locator_span: Optional[Span] = None
    short: bool = False
    self_closing: bool = True

