from __future__ import annotations

from .comments import strip_comments
from .document import DataDocument
from .errors import (
    BlankPathError,
    DataFileError,
    DataFileNotFoundError,
    EmptyKeyError,
    MalformedRecordError,
    NotReadableError,
    NullFieldError,
    PaddedFieldError,
    PathIsDirectoryError,
    ReservedCharacterError,
)
from .files import read_data_file, write_data_file, write_example_data_file
from .parser import RecordState, parse, parse_record
from .serializer import render_record, serialize
from .splitter import split_records
from .validator import validate_document, validate_entry

__all__ = [
    "strip_comments",
    "split_records",
    "parse_record",
    "parse",
    "RecordState",
    "validate_entry",
    "validate_document",
    "render_record",
    "serialize",
    "DataDocument",
    "read_data_file",
    "write_data_file",
    "write_example_data_file",
    "DataFileError",
    "BlankPathError",
    "DataFileNotFoundError",
    "NotReadableError",
    "PathIsDirectoryError",
    "MalformedRecordError",
    "ReservedCharacterError",
    "NullFieldError",
    "EmptyKeyError",
    "PaddedFieldError",
]
