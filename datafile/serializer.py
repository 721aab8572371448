from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from .grammar import KEY_DELIMITER, NEWLINE, SEPARATOR, VALUE_END, VALUE_START
from .validator import validate_document

if TYPE_CHECKING:
    from .document import DataDocument


def render_record(key: str, value: str) -> str:
    """Render one entry in canonical form, trailing blank line included."""
    return f"{SEPARATOR}{key}{KEY_DELIMITER}{NEWLINE}{VALUE_START}{value}{VALUE_END}{NEWLINE}{NEWLINE}"


def serialize(doc: Mapping[str, str] | DataDocument) -> str:
    """
    Render a mapping or a DataDocument as canonical data-file text.

    Every entry is validated before anything is rendered; entries are
    emitted in ordinal key order and the result is trimmed.
    """
    # document.py imports this module
    from .document import DataDocument

    entries = doc.as_dict() if isinstance(doc, DataDocument) else doc
    validate_document(entries)
    return "".join(render_record(k, entries[k]) for k in sorted(entries)).strip()
