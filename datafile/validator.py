from __future__ import annotations

from typing import Any, Mapping

from .errors import EmptyKeyError, NullFieldError, PaddedFieldError, ReservedCharacterError
from .grammar import RESERVED_MARKERS


def _check_reserved(field: str, text: str) -> None:
    for marker in RESERVED_MARKERS:
        if marker in text:
            raise ReservedCharacterError(field, text, marker)


def validate_entry(key: Any, value: Any) -> None:
    """
    Reject an entry the writer cannot render so that it reads back unchanged.

    The reader trims keys and values, so surrounding whitespace is rejected
    too: anything accepted here parses back to the same entry.

    Raises NullFieldError, EmptyKeyError, ReservedCharacterError or
    PaddedFieldError.
    """
    if key is None:
        raise NullFieldError("key")
    if value is None:
        raise NullFieldError("value")
    if not isinstance(key, str) or not isinstance(value, str):
        raise TypeError(f"key and value must be str, got {type(key).__name__}/{type(value).__name__}")
    if not key.strip():
        raise EmptyKeyError(key)
    _check_reserved("key", key)
    _check_reserved("value", value)
    if key != key.strip():
        raise PaddedFieldError("key", key)
    if value != value.strip():
        raise PaddedFieldError("value", value)


def validate_document(doc: Mapping[Any, Any]) -> None:
    if doc is None:
        raise NullFieldError("document")
    for key, value in doc.items():
        validate_entry(key, value)
