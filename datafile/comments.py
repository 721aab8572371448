from __future__ import annotations

import re

from .grammar import COMMENT_CLOSE, COMMENT_OPEN

# Non-greedy; an unterminated open marker runs to end of text.
_COMMENT_RE = re.compile(re.escape(COMMENT_OPEN) + r".*?(?:" + re.escape(COMMENT_CLOSE) + r"|\Z)", re.DOTALL)


def strip_comments(text: str) -> str:
    """
    Remove every /* ... */ span from text.

    Removing a span can join a '/' and a '*' into a fresh open marker
    (e.g. "//*x*/*"), so passes repeat until no open marker is left.
    The result never contains COMMENT_OPEN, which makes stripping idempotent.
    """
    out = text
    while COMMENT_OPEN in out:
        out = _COMMENT_RE.sub("", out)
    return out
