from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import text_store

from .errors import NullFieldError
from .grammar import EXAMPLE_TEXT
from .parser import parse
from .serializer import serialize

logger = logging.getLogger(__name__)


def read_data_file(path: str | Path | None, *, strict: bool = False) -> dict[str, str]:
    """Read and parse the data file at path."""
    return parse(text_store.read_text(path), strict=strict)


def write_data_file(doc: Mapping[str, str] | None, path: str | Path | None, *, log_created: bool = True) -> None:
    """
    Serialize doc and write it to path, replacing the previous content.

    Nothing is written when validation fails.
    """
    if doc is None:
        raise NullFieldError("document")
    text = serialize(doc)
    text_store.write_text(path, text, log_created=log_created)
    logger.debug("DATAFILE WRITE: %d entries -> %s", len(doc), path)


def write_example_data_file(path: str | Path | None, *, log_created: bool = True) -> None:
    """Write a commented template showing the syntax."""
    text_store.write_text(path, EXAMPLE_TEXT, log_created=log_created)
