"""
Delimited region lookup.

Finds regions bounded by marker lines: the metadata block (one delimiter
line used as both top and bottom) and the local variables block
(``<!-- Local Variables: -->`` ... ``<!-- End: -->``). A region exists only
if both bounds are found in one forward scan from the top of the document.
"""

import re
from typing import Dict, Optional

import structlog

from ..config import settings
from ..models.document import PatternLike, TextDocument
from ..models.span import Span


logger = structlog.get_logger(__name__)

# One "<!-- name: value -->" line inside the local variables block
LOCAL_VARIABLE_LINE = re.compile(r"^<!--[ \t]*([^:\s][^:\n]*?)[ \t]*:[ \t]*(.*?)[ \t]*-->[ \t]*$", re.MULTILINE)


def find_region(
    document: TextDocument,
    start_pattern: PatternLike,
    end_pattern: Optional[PatternLike] = None,
) -> Optional[Span]:
    """
    Locate the region bounded by start_pattern and end_pattern.

    Scans from the very beginning of the document for start_pattern, then
    from the end of that match for end_pattern (start_pattern again when
    end_pattern is omitted). Both matches are included in the region.

    Args:
        document: Document to scan (cursor and selection are left untouched)
        start_pattern: Regex for the opening marker
        end_pattern: Regex for the closing marker

    Returns:
        Span of the region, or None if either bound is missing

    Examples:
        >>> doc = TextDocument("---\\ntitle: x\\n---\\nbody")
        >>> find_region(doc, r"^---$")
        Span(0, 16)
    """
    start_match = document.search_forward(start_pattern, 0)
    if start_match is None:
        logger.debug("region_start_not_found", pattern=str(start_pattern))
        return None

    end_match = document.search_forward(
        end_pattern if end_pattern is not None else start_pattern,
        start_match.end(),
    )
    if end_match is None:
        logger.debug("region_end_not_found", start=start_match.start())
        return None

    region = Span(start_match.start(), end_match.end())
    logger.debug("region_found", start=region.start, end=region.end)
    return region


def get_metadata_block(document: TextDocument) -> Optional[str]:
    """
    Return the metadata block text, delimiters included.

    Args:
        document: Document to scan

    Returns:
        Block text, or None when the delimiter does not appear twice
    """
    region = find_region(document, settings.metadata_delimiter)
    return document.substring(region) if region else None


def get_local_variables_block(document: TextDocument) -> Optional[str]:
    """
    Return the local variables block text, markers included.

    Args:
        document: Document to scan

    Returns:
        Block text, or None when either marker is missing
    """
    region = find_region(
        document, settings.local_variables_start, settings.local_variables_end
    )
    return document.substring(region) if region else None


def parse_local_variables(block: str) -> Dict[str, str]:
    """
    Parse ``<!-- name: value -->`` lines of a local variables block.

    The start and end markers themselves are skipped. Values wrapped in
    double quotes are unquoted.

    Args:
        block: Text returned by get_local_variables_block()

    Returns:
        Mapping of variable name to value, in document order

    Examples:
        >>> parse_local_variables('<!-- Local Variables: -->\\n<!-- mode: markdown -->\\n<!-- End: -->')
        {'mode': 'markdown'}
    """
    variables: Dict[str, str] = {}
    for match in LOCAL_VARIABLE_LINE.finditer(block):
        name, value = match.group(1), match.group(2)
        if name in ("Local Variables", "End"):
            continue
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            value = value[1:-1]
        variables[name] = value
    return variables


def get_document_language(document: TextDocument) -> Optional[str]:
    """
    Return the working language declared in the local variables block.

    Reads the variable named by ``settings.language_variable``.
    """
    block = get_local_variables_block(document)
    if block is None:
        return None
    language = parse_local_variables(block).get(settings.language_variable)
    logger.debug("document_language", language=language)
    return language
