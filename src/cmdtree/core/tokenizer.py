"""
Field splitting for command lines.

Fields are separated by runs of spaces or tabs. A field starting with a
double quote runs to the next double quote and may contain whitespace; an
unterminated quote swallows the rest of the line.
"""

WHITESPACE = " \t"
QUOTE = '"'


def strip_leading_whitespace(s: str) -> str:
    """Remove leading spaces and tabs (but not other whitespace)."""
    return s.lstrip(WHITESPACE)


def next_field(s: str) -> tuple[str, str]:
    """
    Split the first field off a line of text.

    Params:
        s: Line of text, possibly with leading whitespace

    Returns:
        Tuple of (field, remainder). The remainder has its leading whitespace
        stripped, so an empty remainder means the line is exhausted.
    """
    s = strip_leading_whitespace(s)
    if s.startswith(QUOTE):
        end = s.find(QUOTE, 1)
        if end == -1:
            return s[1:], ""
        return s[1:end], strip_leading_whitespace(s[end + 1 :])

    for i, c in enumerate(s):
        if c in WHITESPACE:
            return s[:i], strip_leading_whitespace(s[i:])
    return s, ""


def split_fields(s: str) -> list[str]:
    """Split a whole line into fields, honoring double-quoted fields."""
    fields = []
    remain = strip_leading_whitespace(s)
    while remain:
        field, remain = next_field(remain)
        fields.append(field)
    return fields
