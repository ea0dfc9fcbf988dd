"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Editing engine configuration from environment variables.

    All settings can be overridden via environment variables prefixed with MDX_
    (e.g. MDX_LOG_LEVEL=DEBUG).
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Document kinds that accept markup commands
    markup_extensions: List[str] = [".md", ".mdx"]

    # Delimited regions (one marker line each, matched with re.MULTILINE)
    metadata_delimiter: str = r"^---[ \t]*$"
    local_variables_start: str = r"^<!-- Local Variables: -->[ \t]*$"
    local_variables_end: str = r"^<!-- End: -->[ \t]*$"
    language_variable: str = "ispell-local-dictionary"

    # Related entries sorting
    related_entries_heading: str = r"^#{1,6}[ \t]+Related entries[ \t]*$"
    related_entries_separator: str = " • "

    # Collation: decomposition applied to every element before comparing
    normalization_form: Literal["NFC", "NFD", "NFKC", "NFKD"] = "NFD"

    model_config = SettingsConfigDict(
        env_prefix="MDX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = Settings()
