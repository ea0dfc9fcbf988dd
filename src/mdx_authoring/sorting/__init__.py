# Paragraph element sorting module

from .collation import COLLATION_LOCALE, compare, get_collator, normalize, sort_key
from .paragraph_sorter import (
    paragraph_bounds,
    sort_elements,
    sort_paragraph_elements,
    sort_related_entries,
)

__all__ = [
    "COLLATION_LOCALE",
    "normalize",
    "sort_key",
    "compare",
    "get_collator",
    "paragraph_bounds",
    "sort_elements",
    "sort_paragraph_elements",
    "sort_related_entries",
]
