from __future__ import annotations

from .grammar import SEPARATOR, VALUE_END, VALUE_START


def split_records(text: str) -> list[str]:
    """
    Split comment-free text into trimmed candidate records.

    A separator inside a value span (between '^' and its '~') is kept as
    text. A '^' whose '~' never shows up before the next '^' does not open
    a guarding span, so one broken record cannot swallow the ones after it.

    Linear in len(text): the position of the next '~' is cached and only
    looked up again once the scan has passed it.
    """
    out: list[str] = []
    in_value = False
    begin = 0
    next_end = text.find(VALUE_END)

    for i, ch in enumerate(text):
        if in_value:
            if ch == VALUE_END:
                in_value = False
            continue
        if ch == VALUE_START:
            if 0 <= next_end < i:
                next_end = text.find(VALUE_END, i + 1)
            # -1 sticks: no '~' after i means none after any later '^' either
            if next_end < 0:
                continue
            in_value = text.find(VALUE_START, i + 1, next_end) < 0
        elif ch == SEPARATOR:
            out.append(text[begin:i])
            begin = i + 1
    out.append(text[begin:])

    return [s for s in (piece.strip() for piece in out) if s]
