# Data models for the editing engine

from .span import Span
from .document import TextDocument
from .citation import CitationField, CitationMatch
from .locator import LocatorEntry

__all__ = [
    "Span",
    "TextDocument",
    "CitationField",
    "CitationMatch",
    "LocatorEntry",
]
