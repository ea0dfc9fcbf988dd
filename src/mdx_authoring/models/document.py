"""
Text document model (the editing surface).

Holds the text together with a cursor and an optional active selection and
offers the primitives every editing operation is built from: forward and
backward regex search, substring read, span delete and insert, and the
"supports markup" capability check.

Searches return explicit ``re.Match`` objects. There is no remembered
"last match": callers pass spans around as values.
"""

import re
from pathlib import Path
from typing import Optional, Pattern, Union

from .span import Span

PatternLike = Union[str, Pattern[str]]


def _compile(pattern: PatternLike) -> Pattern[str]:
    if isinstance(pattern, str):
        return re.compile(pattern, re.MULTILINE)
    return pattern


class TextDocument:
    """
    Addressable text with a cursor and an optional selection.

    The cursor coincides with ``selection.end`` whenever a selection is
    active. Every mutation clears the selection, sets ``modified`` and
    invalidates spans computed before it.
    """

    def __init__(
        self,
        text: str = "",
        cursor: int = 0,
        selection: Optional[Span] = None,
        markup_capable: bool = True,
    ):
        self.text = text
        self.markup_capable = markup_capable
        self.modified = False
        self.selection: Optional[Span] = None
        self.cursor = 0
        if selection is not None:
            self.select(selection)
        else:
            self.move_to(cursor)

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        markup_extensions=(".md", ".mdx"),
        cursor: int = 0,
        selection: Optional[Span] = None,
    ) -> "TextDocument":
        """
        Load a document from disk.

        The document kind is taken from the file extension: only extensions
        listed in ``markup_extensions`` accept markup commands.
        """
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        return cls(
            text,
            cursor=cursor,
            selection=selection,
            markup_capable=path.suffix.lower() in markup_extensions,
        )

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return (
            f"TextDocument(len={len(self.text)}, cursor={self.cursor}, "
            f"selection={self.selection}, modified={self.modified})"
        )

    # ------------------------------------------------------------------
    # Cursor and selection
    # ------------------------------------------------------------------

    def _check_position(self, position: int) -> None:
        if position < 0 or position > len(self.text):
            raise ValueError(
                f"Position {position} outside document of length {len(self.text)}"
            )

    def _check_span(self, span: Span) -> None:
        self._check_position(span.start)
        self._check_position(span.end)

    def move_to(self, position: int) -> None:
        """Move the cursor, dropping any active selection."""
        self._check_position(position)
        self.cursor = position
        self.selection = None

    def select(self, span: Span) -> None:
        """Activate a selection; the cursor goes to its end."""
        self._check_span(span)
        self.selection = span
        self.cursor = span.end

    def has_selection(self) -> bool:
        return self.selection is not None

    def supports_markup(self) -> bool:
        """Capability check for markup-aware commands."""
        return self.markup_capable

    # ------------------------------------------------------------------
    # Read primitives
    # ------------------------------------------------------------------

    def substring(self, span: Span) -> str:
        """Read the text covered by a span."""
        self._check_span(span)
        return self.text[span.start : span.end]

    def search_forward(
        self, pattern: PatternLike, start: int = 0
    ) -> Optional[re.Match]:
        """
        Find the first match of pattern starting at or after ``start``.

        String patterns are compiled with re.MULTILINE so ``^`` and ``$``
        anchor whole lines.
        """
        self._check_position(start)
        return _compile(pattern).search(self.text, start)

    def search_backward(
        self, pattern: PatternLike, end: Optional[int] = None
    ) -> Optional[re.Match]:
        """Find the last match of pattern that ends at or before ``end``."""
        end = len(self.text) if end is None else end
        self._check_position(end)
        last = None
        for match in _compile(pattern).finditer(self.text, 0, end):
            last = match
        return last

    # ------------------------------------------------------------------
    # Mutation primitives
    # ------------------------------------------------------------------

    def insert(self, position: int, text: str, advance: bool = True) -> None:
        """
        Insert text at position.

        The cursor shifts by ``len(text)`` when it sits after ``position``,
        or exactly on it and ``advance`` is true.
        """
        self._check_position(position)
        self.text = self.text[:position] + text + self.text[position:]
        if self.cursor > position or (self.cursor == position and advance):
            self.cursor += len(text)
        self.selection = None
        self.modified = True

    def delete(self, span: Span) -> None:
        """Delete the text covered by span; the cursor is clamped into what is left."""
        self._check_span(span)
        self.text = self.text[: span.start] + self.text[span.end :]
        if self.cursor >= span.end:
            self.cursor -= span.length()
        elif self.cursor > span.start:
            self.cursor = span.start
        self.selection = None
        self.modified = True
