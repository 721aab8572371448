from __future__ import annotations

SEPARATOR = "¡"
KEY_DELIMITER = ":"
VALUE_START = "^"
VALUE_END = "~"

COMMENT_OPEN = "/*"
COMMENT_CLOSE = "*/"

# Rejected inside keys and values on the write path.
RESERVED_CHARACTERS = (SEPARATOR, KEY_DELIMITER, VALUE_START, VALUE_END)
RESERVED_MARKERS = RESERVED_CHARACTERS + (COMMENT_OPEN, COMMENT_CLOSE)

NEWLINE = "\n"

EXAMPLE_TEXT = """
¡<key>:
^<value>~

/*comment*/
/*
¡ -> Data separator
^ -> Value start
~ -> Value end
*/
""".strip()
