"""
Citation construct parsing and rewriting.

Grammar (must match previously authored documents exactly):

    <Cite bibKey={"KEY"} />
    <Cite bibKey={"KEY, LOCATORS"} short />
    <Cite bibKey={"KEY, LOCATORS"}>body</Cite>

KEY is a run of characters other than comma and double quote. LOCATORS
follows a literal ", " and runs to the closing quote.
"""

import re
from typing import Optional, Tuple, Union

import structlog

from ..exceptions import MarkupNotSupportedError, UnknownCitationFieldError
from ..models.citation import CitationField, CitationMatch
from ..models.document import TextDocument
from ..models.span import Span
from .pairs import insert_pair


logger = structlog.get_logger(__name__)

CITATION_ELEMENT = "Cite"
CITATION_CLOSE_TAG = f"</{CITATION_ELEMENT}>"

CITATION_PATTERN = re.compile(
    r'<Cite bibKey=\{"([^,"]+)(?:, ([^"]*))?"\}( short)?(?: />|>(.*?)</Cite>)',
    re.DOTALL,
)

# Capture group of each sub-field in CITATION_PATTERN
_FIELD_GROUPS = {
    CitationField.KEY: 1,
    CitationField.LOCATORS: 2,
}
_SHORT_GROUP = 3
_BODY_GROUP = 4


def capture_group(field: Union[CitationField, str]) -> int:
    """
    Map a citation field to its capture group in CITATION_PATTERN.

    Raises:
        UnknownCitationFieldError: If field is not "key" or "locators"
    """
    try:
        return _FIELD_GROUPS[CitationField(field)]
    except ValueError as e:
        raise UnknownCitationFieldError(f"Unknown citation field: {field!r}") from e


def _match_at_point(document: TextDocument) -> Optional[re.Match]:
    # Innermost wins: a body-form citation may wrap another citation.
    text, cursor = document.text, document.cursor
    opener = f"<{CITATION_ELEMENT} "
    found = None
    position = text.find(opener)
    while position != -1 and position <= cursor:
        match = CITATION_PATTERN.match(text, position)
        if match is not None and cursor <= match.end():
            found = match
        position = text.find(opener, position + 1)
    return found


def _group_span(match: re.Match, group: int) -> Optional[Span]:
    if match.group(group) is None:
        return None
    return Span(match.start(group), match.end(group))


def match_citation_at_point(document: TextDocument) -> Optional[CitationMatch]:
    """
    Parse the citation construct under the cursor.

    Args:
        document: Document to inspect

    Returns:
        CitationMatch snapshot, or None when the cursor is not on a citation

    Examples:
        >>> doc = TextDocument('See <Cite bibKey={"doe2020, p. 4"} />.', cursor=8)
        >>> match_citation_at_point(doc).key
        'doe2020'
    """
    match = _match_at_point(document)
    if match is None:
        return None

    key_group = capture_group(CitationField.KEY)
    locator_group = capture_group(CitationField.LOCATORS)
    return CitationMatch(
        span=Span(match.start(), match.end()),
        key=match.group(key_group),
        key_span=_group_span(match, key_group),
        locators=match.group(locator_group),
        locator_span=_group_span(match, locator_group),
        short=match.group(_SHORT_GROUP) is not None,
        self_closing=match.group(_BODY_GROUP) is None,
    )


def get_element(
    document: TextDocument, field: Union[CitationField, str]
) -> Optional[Tuple[str, Span]]:
    """
    Return (text, span) of one citation sub-field under the cursor.

    Args:
        document: Document to inspect
        field: CitationField.KEY or CitationField.LOCATORS

    Returns:
        Tuple of text and span, or None when the cursor is not on a
        citation or the citation has no such field

    Raises:
        UnknownCitationFieldError: If field is outside the closed set
    """
    group = capture_group(field)
    match = _match_at_point(document)
    if match is None or match.group(group) is None:
        return None
    return match.group(group), Span(match.start(group), match.end(group))


def replace_element(document: TextDocument, new_text: str, span: Span) -> None:
    """
    Replace the text covered by span with new_text.

    The span is not re-validated against the content: it must come from a
    match against the current document. The cursor ends after new_text.
    """
    old_text = document.substring(span)
    document.delete(span)
    document.insert(span.start, new_text)
    document.move_to(span.start + len(new_text))
    logger.info(
        "citation_element_replaced",
        start=span.start,
        old_text=old_text,
        new_text=new_text,
    )


def build_citation_tag(key: str, short: bool = False) -> str:
    """
    Render the opening tag of a citation.

    Examples:
        >>> build_citation_tag("doe2020", short=True)
        '<Cite bibKey={"doe2020"} short>'
    """
    if not key or "," in key or '"' in key:
        raise ValueError(f"Invalid citation key: {key!r}")
    tag = f'<{CITATION_ELEMENT} bibKey={{"{key}"}}'
    if short:
        tag += " short"
    return tag + ">"


def insert_citation(
    document: TextDocument, key: str, short: bool = False, body_form: bool = False
) -> Optional[str]:
    """
    Insert a citation for key, or retarget the citation under the cursor.

    When the cursor sits anywhere on an existing citation only its key is
    replaced; locators and the short/long form are kept. Refreshing any
    description attached to the old key is left to the caller, which gets
    the old key back for that purpose.

    Otherwise a new construct is inserted: self-closing by default, the
    open/body/close form when body_form is set (an active selection is
    wrapped either way).

    Args:
        document: Markup-capable document
        key: Bibliography key
        short: Add the ``short`` attribute to a new citation
        body_form: Insert ``<Cite ...></Cite>`` with the cursor inside

    Returns:
        The replaced key, or None when a new citation was inserted

    Raises:
        MarkupNotSupportedError: If the document does not support markup
        ValueError: If key is empty or contains a comma or double quote
    """
    if not document.supports_markup():
        logger.warning("citation_insert_rejected", reason="markup_not_supported")
        raise MarkupNotSupportedError()

    open_tag = build_citation_tag(key, short=short)

    current = get_element(document, CitationField.KEY)
    if current is not None:
        old_key, key_span = current
        replace_element(document, key, key_span)
        logger.info("citation_key_replaced", old_key=old_key, new_key=key)
        return old_key

    insert_pair(document, open_tag, CITATION_CLOSE_TAG, self_closing=not body_form)
    logger.info("citation_inserted", key=key, short=short, body_form=body_form)
    return None
