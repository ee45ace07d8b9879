"""Per-document error types collected during a content load"""

from typing import Optional


class ContentError(Exception):
    """Base error for a single content source; carries the offending path."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


class SourceReadError(ContentError):
    """A source file could not be read or decoded."""


class MalformedMetadataError(ContentError, ValueError):
    """Front matter is unterminated, invalid YAML, or missing/mistyped fields."""


class DuplicatePathError(ContentError):
    """Two documents share the same path within one collection."""
