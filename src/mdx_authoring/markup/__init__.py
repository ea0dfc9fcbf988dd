"""
Markdown/MDX embedded markup editing.

Public API:
    - find_region, get_metadata_block, get_local_variables_block: delimited regions
    - parse_local_variables, get_document_language: local variables block contents
    - insert_pair: wrap the selection or insert an element pair
    - match_citation_at_point, get_element, replace_element, insert_citation: citations
    - LOCATOR_TABLE, insert_locator: bibliographic locators

Example usage:
    >>> from mdx_authoring.models import TextDocument
    >>> from mdx_authoring.markup import insert_citation, insert_locator
    >>>
    >>> doc = TextDocument("As shown ")
    >>> doc.move_to(len(doc.text))
    >>> insert_citation(doc, "doe2020")
    >>> doc.move_to(doc.text.index("doe2020"))
    >>> insert_locator(doc, "page")
    'p.'
    >>> doc.text
    'As shown <Cite bibKey={"doe2020, p. "} />'
"""

from .citations import (
    CITATION_PATTERN,
    build_citation_tag,
    capture_group,
    get_element,
    insert_citation,
    match_citation_at_point,
    replace_element,
)
from .locators import (
    LOCATOR_TABLE,
    abbreviation_for,
    full_name_for,
    insert_locator,
    locator_at_point,
    locator_names,
)
from .pairs import insert_pair, make_self_closing
from .regions import (
    find_region,
    get_document_language,
    get_local_variables_block,
    get_metadata_block,
    parse_local_variables,
)

__all__ = [
    # Regions
    "find_region",
    "get_metadata_block",
    "get_local_variables_block",
    "parse_local_variables",
    "get_document_language",
    # Pairs
    "insert_pair",
    "make_self_closing",
    # Citations
    "CITATION_PATTERN",
    "capture_group",
    "match_citation_at_point",
    "get_element",
    "replace_element",
    "build_citation_tag",
    "insert_citation",
    # Locators
    "LOCATOR_TABLE",
    "locator_names",
    "abbreviation_for",
    "full_name_for",
    "locator_at_point",
    "insert_locator",
]
