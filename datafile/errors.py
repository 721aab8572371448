"""
Errors raised by the data-file reader, writer and file collaborator.

Each error also subclasses the closest builtin so callers that only know
about OSError / ValueError / TypeError still catch it.
"""

from __future__ import annotations

from typing import Any


class DataFileError(Exception):
    """Base error for this package."""


class BlankPathError(DataFileError, ValueError):
    """Raised when a None or blank path is supplied."""

    def __init__(self, message: str = "Path cannot be blank"):
        super().__init__(message)


class DataFileNotFoundError(DataFileError, FileNotFoundError):
    """Raised when the path does not exist."""

    def __init__(self, path: Any):
        self.path = path
        super().__init__(f"File does not exist: {path}")


class NotReadableError(DataFileError, PermissionError):
    """Raised when the path is not a regular, readable file."""

    def __init__(self, path: Any, reason: str = "cannot be read"):
        self.path = path
        self.reason = reason
        super().__init__(f"File {reason}: {path}")


class PathIsDirectoryError(DataFileError, IsADirectoryError):
    def __init__(self, path: Any):
        self.path = path
        super().__init__(f"File cannot be a directory: {path}")


class MalformedRecordError(DataFileError, ValueError):
    """Raised by strict parsing when a record cannot be read as key:^value~."""

    def __init__(self, record: str, reason: str):
        self.record = record
        self.reason = reason
        super().__init__(f"malformed record ({reason}): {record!r}")


class ReservedCharacterError(DataFileError, ValueError):
    """Raised when a key or value carries a marker the grammar reserves."""

    def __init__(self, field: str, text: str, marker: str):
        self.field = field
        self.text = text
        self.marker = marker
        super().__init__(f"{field} contains reserved marker {marker!r}: {text!r}")


class NullFieldError(DataFileError, TypeError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is None")


class EmptyKeyError(DataFileError, ValueError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"key is empty: {key!r}")


class PaddedFieldError(DataFileError, ValueError):
    """Raised when a key or value has surrounding whitespace the reader would trim off."""

    def __init__(self, field: str, text: str):
        self.field = field
        self.text = text
        super().__init__(f"{field} has leading or trailing whitespace: {text!r}")
