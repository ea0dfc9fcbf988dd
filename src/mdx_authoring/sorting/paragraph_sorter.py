"""
Sorting of separator-delimited elements inside a paragraph.

Used for the "Related entries" section of an article, whose single
paragraph lists entries separated by " • ".
"""

import re
from typing import List, Optional

import structlog

from ..config import settings
from ..models.document import TextDocument
from ..models.span import Span
from .collation import normalize, sort_key


logger = structlog.get_logger(__name__)

# Paragraphs are separated by one or more blank lines
PARAGRAPH_SEPARATOR = re.compile(r"\n[ \t]*\n")


def _paragraph_from(document: TextDocument, start: int) -> Optional[Span]:
    text = document.text
    while start < len(text) and text[start].isspace():
        start += 1
    if start >= len(text):
        return None

    separator = document.search_forward(PARAGRAPH_SEPARATOR, start)
    end = separator.start() if separator else len(text)
    while end > start and text[end - 1].isspace():
        end -= 1
    return Span(start, end)


def paragraph_bounds(document: TextDocument, position: int) -> Optional[Span]:
    """
    Find the paragraph containing position.

    Scans backward to the previous blank line (or the top of the document),
    skips leading whitespace, then forward to the next blank line (or the end
    of the document). Trailing whitespace is excluded.

    Args:
        document: Document to scan
        position: Offset inside (or in the blank lines before) the paragraph

    Returns:
        Span of the paragraph text, or None if only whitespace follows position
    """
    previous = document.search_backward(PARAGRAPH_SEPARATOR, position)
    return _paragraph_from(document, previous.end() if previous else 0)


def sort_elements(raw: str, separator: str) -> List[str]:
    """
    Split raw on separator, normalize and trim each element, sort by collation.

    Examples:
        >>> sort_elements("b • a", " • ")
        ['a', 'b']
    """
    if not separator:
        raise ValueError("Separator cannot be empty")
    elements = [normalize(element).strip() for element in raw.split(separator)]
    return sorted(elements, key=sort_key)


def _sort_span(document: TextDocument, span: Span, separator: str) -> List[str]:
    raw = document.substring(span)
    elements = sort_elements(raw, separator)
    sorted_text = separator.join(elements)

    if sorted_text != raw:
        document.delete(span)
        document.insert(span.start, sorted_text, advance=False)

    logger.info(
        "paragraph_sorted",
        start=span.start,
        elements_count=len(elements),
        changed=sorted_text != raw,
    )
    return elements


def sort_paragraph_elements(
    document: TextDocument, separator: str, position: Optional[int] = None
) -> Optional[List[str]]:
    """
    Sort the elements of the paragraph at position (default: the cursor).

    Args:
        document: Document to edit
        separator: Token separating elements, reused to join them back
        position: Offset inside the paragraph

    Returns:
        Sorted element list, or None when there is no paragraph at position
    """
    bounds = paragraph_bounds(
        document, document.cursor if position is None else position
    )
    if bounds is None:
        logger.debug("paragraph_not_found", position=position)
        return None
    return _sort_span(document, bounds, separator)


def sort_related_entries(document: TextDocument) -> bool:
    """
    Sort the paragraph following the "Related entries" heading.

    Args:
        document: Document to edit

    Returns:
        True if a paragraph was sorted, False when the heading (or a
        paragraph after it) is absent
    """
    heading = document.search_forward(
        re.compile(settings.related_entries_heading, re.MULTILINE | re.IGNORECASE)
    )
    if heading is None:
        logger.debug("related_entries_heading_not_found")
        return False

    bounds = _paragraph_from(document, heading.end())
    if bounds is None or document.text.startswith("#", bounds.start):
        logger.debug("related_entries_paragraph_not_found", heading_end=heading.end())
        return False

    _sort_span(document, bounds, settings.related_entries_separator)
    return True
