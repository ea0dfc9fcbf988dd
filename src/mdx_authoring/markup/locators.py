"""
Bibliographic locator table and locator insertion.

The table is a published contract: documents already carry these
abbreviations, so entries are only ever added, never changed.
"""

import re
from typing import Dict, List, Optional, Tuple

import structlog

from ..exceptions import MarkupNotSupportedError, NotInCitationError
from ..models.citation import CitationMatch
from ..models.document import TextDocument
from ..models.locator import LocatorEntry
from ..models.span import Span
from .citations import match_citation_at_point, replace_element


logger = structlog.get_logger(__name__)

# (full name, abbreviation), singular then plural for each unit
_LOCATORS: List[Tuple[str, str]] = [
    ("book", "bk."),
    ("books", "bks."),
    ("chapter", "chap."),
    ("chapters", "chaps."),
    ("column", "col."),
    ("columns", "cols."),
    ("figure", "fig."),
    ("figures", "figs."),
    ("folio", "fol."),
    ("folios", "fols."),
    ("line", "l."),
    ("lines", "ll."),
    ("note", "n."),
    ("notes", "nn."),
    ("number", "no."),
    ("numbers", "nos."),
    ("opus", "op."),
    ("opera", "opp."),
    ("page", "p."),
    ("pages", "pp."),
    ("paragraph", "para."),
    ("paragraphs", "paras."),
    ("part", "pt."),
    ("parts", "pts."),
    ("section", "sec."),
    ("sections", "secs."),
    ("sub verbo", "s.v."),
    ("sub verbis", "s.vv."),
    ("verse", "v."),
    ("verses", "vv."),
    ("volume", "vol."),
    ("volumes", "vols."),
]


def _build_table(pairs: List[Tuple[str, str]]) -> Tuple[LocatorEntry, ...]:
    entries = tuple(LocatorEntry(full_name=name, abbreviation=abbr) for name, abbr in pairs)
    for attribute in ("full_name", "abbreviation"):
        values = [getattr(entry, attribute) for entry in entries]
        duplicates = sorted({v for v in values if values.count(v) > 1})
        if duplicates:
            raise ValueError(f"Duplicate locator {attribute}: {duplicates}")
    return entries


LOCATOR_TABLE: Tuple[LocatorEntry, ...] = _build_table(_LOCATORS)

_BY_NAME: Dict[str, str] = {e.full_name: e.abbreviation for e in LOCATOR_TABLE}
_BY_ABBREVIATION: Dict[str, str] = {e.abbreviation: e.full_name for e in LOCATOR_TABLE}

# Locator tokens: anything between whitespace and commas
_TOKEN = re.compile(r"[^\s,]+")


def locator_names() -> List[str]:
    """Full names offered to the user, in table order."""
    return [entry.full_name for entry in LOCATOR_TABLE]


def abbreviation_for(full_name: str) -> str:
    """Abbreviation of a full locator name, "" when unknown."""
    return _BY_NAME.get(full_name, "")


def full_name_for(abbreviation: str) -> Optional[str]:
    """Full locator name of an abbreviation, None when unknown."""
    return _BY_ABBREVIATION.get(abbreviation)


def locator_at_point(
    document: TextDocument, citation: CitationMatch
) -> Optional[Tuple[str, Span]]:
    """
    Find the locator abbreviation under the cursor.

    Only the citation's locator list is searched.

    Args:
        document: Document with the cursor on citation
        citation: Match returned by match_citation_at_point()

    Returns:
        (abbreviation, span) or None when the cursor is not on a known abbreviation
    """
    if citation.locator_span is None:
        return None

    offset = citation.locator_span.start
    cursor = document.cursor
    for token in _TOKEN.finditer(citation.locators):
        span = Span(offset + token.start(), offset + token.end())
        if span.contains(cursor) and token.group(0) in _BY_ABBREVIATION:
            return token.group(0), span
    return None


def insert_locator(document: TextDocument, full_name: str) -> str:
    """
    Insert or replace a locator in the citation under the cursor.

    If the cursor is on a known abbreviation, that token is replaced.
    Otherwise ", ABBR " is inserted after the locator list, or after the key
    when the citation has no locators yet.

    Args:
        document: Markup-capable document
        full_name: Locator chosen by the user (see locator_names())

    Returns:
        The abbreviation written

    Raises:
        MarkupNotSupportedError: If the document does not support markup
        NotInCitationError: If the cursor is not on a citation
    """
    if not document.supports_markup():
        logger.warning("locator_insert_rejected", reason="markup_not_supported")
        raise MarkupNotSupportedError()

    citation = match_citation_at_point(document)
    if citation is None:
        logger.warning("locator_insert_rejected", reason="not_in_citation", cursor=document.cursor)
        raise NotInCitationError()

    abbreviation = abbreviation_for(full_name)

    current = locator_at_point(document, citation)
    if current is not None:
        old_abbreviation, span = current
        replace_element(document, abbreviation, span)
        logger.info(
            "locator_replaced",
            key=citation.key,
            old_locator=old_abbreviation,
            new_locator=abbreviation,
        )
        return abbreviation

    anchor = citation.locator_span or citation.key_span
    text = f", {abbreviation} "
    document.insert(anchor.end, text)
    document.move_to(anchor.end + len(text))
    logger.info("locator_inserted", key=citation.key, locator=abbreviation, position=anchor.end)
    return abbreviation
