"""
Version constants for the editing engine.

Bump a component version whenever its observable output changes, so that
documents edited with different releases can be told apart.
"""

ENGINE_VERSION = "1.0.0"

# Component versions
CITATION_GRAMMAR_VERSION = "cite-mdx-1.0.0"
LOCATOR_TABLE_VERSION = "locators-chicago-1.0.0"
COLLATION_VERSION = "uca-ducet-nfd-1.0.0"


def get_version_string() -> str:
    """
    Get a one-line summary of engine and component versions.

    Returns:
        Human readable version string
    """
    return (
        f"mdx-authoring {ENGINE_VERSION} "
        f"(citations {CITATION_GRAMMAR_VERSION}, "
        f"locators {LOCATOR_TABLE_VERSION}, "
        f"collation {COLLATION_VERSION})"
    )
