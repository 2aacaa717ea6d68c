"""
Exceptions raised by camelintent.
"""


class CamelIntentError(Exception):
    """Base exception for camelintent errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class CatalogLookupFailure(CamelIntentError):
    """Raised when a single component descriptor cannot be retrieved or parsed."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(f"Component '{name}': {message}")


class CatalogLoadError(CamelIntentError):
    """Raised when a catalog file or directory cannot be read at all."""

    pass


class InvalidArtifactName(CamelIntentError):
    """Raised when a library display name does not follow the expected convention."""

    def __init__(self, library_name: str, reason: str):
        self.library_name = library_name
        super().__init__(f"Invalid library name '{library_name}': {reason}")


class InvalidSelection(CamelIntentError):
    """Raised when a chooser returns a name that was not offered."""

    pass


class InvalidCaret(CamelIntentError):
    """Raised when an insertion offset lies outside the document."""

    pass
