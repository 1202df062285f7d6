"""Exceptions raised while building and querying the struct registry."""


class QuarryError(Exception):
    """Base class for all registry errors."""


class TypeNotFoundError(QuarryError, LookupError):
    """Raised when neither the exact path nor its alias is in the registry."""

    def __init__(self, path: str) -> None:
        """Build the message from the requested path."""
        self.path = path
        super().__init__(
            f"Type '{path}' not found. Please provide the full module path "
            "(e.g. 'std::string::String', 'alloc::string::String')"
        )


class MalformedInputError(QuarryError, ValueError):
    """Raised when a rustdoc JSON export cannot be decoded into an index."""


class GenerationFailureError(QuarryError):
    """Raised when the rustdoc JSON export could not be produced or read."""


class MissingExportError(GenerationFailureError):
    """Raised when no rustdoc JSON export exists for a crate."""

    def __init__(self, crate: str, path: object) -> None:
        """Build the message from the crate and the expected export path."""
        self.crate = crate
        super().__init__(f"No rustdoc JSON found for crate '{crate}' at {path}")
