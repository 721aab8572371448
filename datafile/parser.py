"""
Record parsing.

A record is the text between two separators, of the shape:
    <key>:<whitespace>^<value>~

Example:
    ¡title:
    ^Hello World~

Two policies:
- strict: the first malformed record raises MalformedRecordError
- lenient: malformed records are dropped and parsing goes on

Duplicate keys: the last occurrence wins.
"""

from __future__ import annotations

import enum
import logging

from .comments import strip_comments
from .errors import MalformedRecordError
from .grammar import KEY_DELIMITER, VALUE_END, VALUE_START
from .splitter import split_records

logger = logging.getLogger(__name__)


class RecordState(enum.Enum):
    SEEK_KEY_DELIM = "seek_key_delim"
    SEEK_VALUE_START = "seek_value_start"
    SEEK_VALUE_END = "seek_value_end"
    ACCEPT = "accept"
    REJECT = "reject"


_REJECT_REASONS = {
    RecordState.SEEK_KEY_DELIM: f"missing {KEY_DELIMITER!r}",
    RecordState.SEEK_VALUE_START: f"missing {VALUE_START!r} after {KEY_DELIMITER!r}",
    RecordState.SEEK_VALUE_END: f"missing {VALUE_END!r} after {VALUE_START!r}",
}


def parse_record(record: str) -> tuple[str, str]:
    """Extract (key, value) from one trimmed record.

    Raises:
        MalformedRecordError: if the record is malformed.
    """
    state = RecordState.SEEK_KEY_DELIM
    failed_in = state
    key_end = value_start = value_end = -1

    while state not in (RecordState.ACCEPT, RecordState.REJECT):
        failed_in = state
        if state is RecordState.SEEK_KEY_DELIM:
            key_end = record.find(KEY_DELIMITER)
            state = RecordState.SEEK_VALUE_START if key_end >= 0 else RecordState.REJECT
        elif state is RecordState.SEEK_VALUE_START:
            value_start = record.find(VALUE_START, key_end + 1)
            state = RecordState.SEEK_VALUE_END if value_start >= 0 else RecordState.REJECT
        else:
            # last '~' in the record, not the first one after '^'
            value_end = record.rfind(VALUE_END)
            state = RecordState.ACCEPT if value_end > value_start else RecordState.REJECT

    if state is RecordState.REJECT:
        raise MalformedRecordError(record, _REJECT_REASONS[failed_in])

    key = record[:key_end].strip()
    if not key:
        raise MalformedRecordError(record, "empty key")
    value = record[value_start + 1 : value_end].strip()
    return key, value


def parse(text: str, *, strict: bool = False) -> dict[str, str]:
    """Parse a whole document into a new dict.

    Raises:
        MalformedRecordError: strict mode only.
    """
    out: dict[str, str] = {}
    for record in split_records(strip_comments(text)):
        try:
            key, value = parse_record(record)
        except MalformedRecordError as e:
            if strict:
                raise
            logger.debug("DATAFILE PARSE: skipped record (%s): %r", e.reason, record)
            continue
        if key in out:
            logger.debug("DATAFILE PARSE: duplicate key %r, keeping last value", key)
        out[key] = value
    return out
