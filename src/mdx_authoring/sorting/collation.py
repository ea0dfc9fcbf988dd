"""
Unicode normalization and locale-aware collation.

Two pure functions, composed by the paragraph sorter:

- normalize(): canonical decomposition (NFD by default), so composed and
  decomposed input sort the same way
- sort_key() / compare(): Unicode Collation Algorithm with the root
  (DUCET) locale. The primary level ignores accents and case; secondary and
  tertiary levels only break ties, which gives a < A < á < Á < b.
"""

import unicodedata
from typing import Optional, Tuple

from pyuca import Collator

from ..config import settings

# Locale whose collation rules sort_key() applies
COLLATION_LOCALE = "root"

# Singleton for the collator (loading DUCET takes a moment)
_collator: Optional[Collator] = None


def get_collator() -> Collator:
    """
    Get or initialize the UCA collator (singleton pattern).

    Returns:
        pyuca Collator using the default Unicode collation element table
    """
    global _collator
    if _collator is None:
        _collator = Collator()
    return _collator


def normalize(text: str, form: Optional[str] = None) -> str:
    """
    Normalize text to the configured Unicode form.

    Args:
        text: Input text
        form: Override for settings.normalization_form

    Returns:
        Normalized text

    Examples:
        >>> len(normalize("\\u00c1"))
        2
    """
    return unicodedata.normalize(form or settings.normalization_form, text)


def sort_key(text: str) -> Tuple[int, ...]:
    """
    Collation key of text; sorting by it orders strings for the fixed locale.

    Args:
        text: Input text (normalized or not)

    Returns:
        UCA sort key
    """
    return get_collator().sort_key(normalize(text))


def compare(a: str, b: str) -> int:
    """
    Compare two strings by collation.

    Returns:
        -1 if a sorts before b, 1 if after, 0 if they collate equal
    """
    key_a, key_b = sort_key(a), sort_key(b)
    return (key_a > key_b) - (key_a < key_b)
