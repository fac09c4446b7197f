"""String utilities for JSON encoding."""

# The complete set of escaped characters; everything else passes through.
ESCAPE_MAP = {
    "\\": "\\\\",
    "/": "\\/",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
    '"': '\\"',
    "\0": "\\u0000",
}


def escape_string(value: str) -> str:
    """
    Escape a string for use in a JSON string literal.

    Only backslash, slash, double quote, NUL and the newline, tab,
    carriage return, backspace and form feed controls are escaped.
    Non-ASCII characters are written as-is.

    Args:
        value: The string to escape.

    Returns:
        The escaped string (without surrounding quotes).
    """
    result = []
    for char in value:
        if char in ESCAPE_MAP:
            result.append(ESCAPE_MAP[char])
        else:
            result.append(char)
    return "".join(result)


def quote_string(value: str) -> str:
    """Escape a string and wrap it in double quotes."""
    return f'"{escape_string(value)}"'
