"""
Locator entry model.

A locator names a bibliographic sub-reference unit (page, chapter, volume...)
and its canonical abbreviation as written inside citations.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocatorEntry(BaseModel):
    """Immutable (full name, abbreviation) pair."""

    model_config = ConfigDict(frozen=True)

    full_name: str = Field(description="User-facing name", examples=["page"])
    abbreviation: str = Field(description="Form written in citations", examples=["p."])

    @field_validator("full_name", "abbreviation")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank names and abbreviations."""
        if not v.strip():
            raise ValueError("Locator names and abbreviations cannot be blank")
        return v

    @field_validator("abbreviation")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Abbreviations must be single tokens so they can be found at point."""
        if any(ch.isspace() or ch in ',"' for ch in v):
            raise ValueError(f"Abbreviation '{v}' must not contain spaces, commas or quotes")
        return v
