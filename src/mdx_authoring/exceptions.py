"""
Editing engine exceptions.

Absence (no region, no citation, no locator at point) is never an exception:
lookups return None and only the outermost command decides whether that is
worth telling the user about. What is raised here is:

- PreconditionError: the command cannot run in the current context
  (user-facing, recoverable, nothing was mutated)
- UnknownCitationFieldError: an internal lookup got a field tag outside its
  closed set (programmer error)
"""


class EditingError(Exception):
    """Base exception for the editing engine."""

    error_code: str = "EDITING_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PreconditionError(EditingError):
    """Command invoked in a context that structurally cannot satisfy it."""

    error_code = "PRECONDITION_FAILED"


class NotInCitationError(PreconditionError):
    """Cursor is not on a citation construct."""

    error_code = "NOT_IN_CITATION"

    def __init__(self, message: str = "Not in a citation"):
        super().__init__(message)


class MarkupNotSupportedError(PreconditionError):
    """Markup command run against a document kind without markup support."""

    error_code = "MARKUP_NOT_SUPPORTED"

    def __init__(self, message: str = "Document does not support markup"):
        super().__init__(message)


class UnknownCitationFieldError(EditingError):
    """Citation field tag outside {key, locators}."""

    error_code = "UNKNOWN_CITATION_FIELD"
