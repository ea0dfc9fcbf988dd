"""
Span dataclass for position bookkeeping.

A span identifies a substring of a document at one point in time. Spans are
values: they are never updated after a mutation, callers re-query instead.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """
    Half-open character range [start, end) in a document.

    Attributes:
        start: Offset of the first character
        end: Offset just past the last character
    """

    start: int
    end: int

    def __post_init__(self):
        """Validate span positions."""
        if self.start < 0 or self.end < 0:
            raise ValueError("Span positions must be non-negative")
        if self.start > self.end:
            raise ValueError("start must be <= end")

    def __repr__(self) -> str:
        return f"Span({self.start}, {self.end})"

    def length(self) -> int:
        """Number of characters covered."""
        return self.end - self.start

    def contains(self, position: int) -> bool:
        """
        Check whether a cursor position lies on the span.

        Both ends count: a cursor right after the last character is still
        "on" the construct, the same way an editor reports point at the end
        of a word.
        """
        return self.start <= position <= self.end

    def overlaps(self, other: "Span") -> bool:
        """Check if two spans share at least one character."""
        return not (self.end <= other.start or other.end <= self.start)
