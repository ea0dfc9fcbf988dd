"""
Element pair insertion.

Wraps the active selection in an open/close pair, or inserts the pair at
the cursor. Callers check ``document.supports_markup()`` first.
"""

import structlog

from ..models.document import TextDocument


logger = structlog.get_logger(__name__)

SELF_CLOSING_TERMINATOR = " />"


def make_self_closing(open_tag: str) -> str:
    """
    Turn an opening tag into its self-closing form.

    Examples:
        >>> make_self_closing('<Cite bibKey={"doe"}>')
        '<Cite bibKey={"doe"} />'
    """
    if not open_tag.endswith(">"):
        raise ValueError(f"Opening tag must end with '>': {open_tag!r}")
    return open_tag[:-1] + SELF_CLOSING_TERMINATOR


def insert_pair(
    document: TextDocument, open_tag: str, close_tag: str, self_closing: bool = False
) -> None:
    """
    Insert an element pair.

    - Selection active: close_tag goes after the selection, then open_tag
      before it. The cursor ends at the old selection end plus len(open_tag).
    - No selection, self_closing: only the self-closing form of open_tag is
      inserted; the cursor ends after it.
    - No selection: open_tag + close_tag is inserted and the cursor is left
      between them.

    Args:
        document: Markup-capable document
        open_tag: Opening tag, e.g. "<X>"
        close_tag: Closing tag, e.g. "</X>"
        self_closing: Insert a single self-closing element when nothing is selected
    """
    if document.selection is not None:
        selection = document.selection
        # After first: the selection start stays valid for the second insert
        document.insert(selection.end, close_tag, advance=False)
        document.insert(selection.start, open_tag)
        logger.info(
            "selection_wrapped",
            start=selection.start,
            end=selection.end,
            open_tag=open_tag,
        )
        return

    position = document.cursor
    if self_closing:
        element = make_self_closing(open_tag)
        document.insert(position, element)
        logger.info("self_closing_inserted", position=position, element=element)
        return

    document.insert(position, open_tag + close_tag)
    document.move_to(document.cursor - len(close_tag))
    logger.info("pair_inserted", position=position, open_tag=open_tag)
