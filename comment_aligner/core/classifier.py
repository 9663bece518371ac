"""
Comment location and classification.

A comment is located with a plain substring search for the marker, so a
marker inside a string or character literal is indistinguishable from a
real comment start.
"""

from typing import Optional

from ..models import LineComment, LineKind

DEFAULT_MARKER = "//"


def locate_line_comment(line: str, marker: str = DEFAULT_MARKER) -> Optional[int]:
    """Return the index of the first marker in ``line``, or None."""
    index = line.find(marker)
    return index if index != -1 else None


def is_tactical(code: str) -> bool:
    """
    Check whether the code fragment in front of a comment really holds code.

    If it is empty or only whitespace the comment is a strategic comment
    (or a commented out line) rather than a tactical one.
    """
    return any(not ch.isspace() for ch in code)


def remove_trailing_whitespace(text: str) -> str:
    """Strip trailing whitespace only; indentation is kept."""
    return text.rstrip()


def classify_line(line: str, marker: str = DEFAULT_MARKER) -> LineComment:
    """Split a line at its first marker and decide its LineKind"""
    index = locate_line_comment(line, marker)
    if index is None:
        return LineComment(line=line, comment_index=None, kind=LineKind.CODE)

    kind = LineKind.TACTICAL if is_tactical(line[:index]) else LineKind.STRATEGIC
    return LineComment(line=line, comment_index=index, kind=kind)


def find_end_of_code(line: str, marker: str = DEFAULT_MARKER) -> int:
    """
    Index of the last code character on a tactically commented line.

    Lines without a tactical comment return 0 so they never influence the
    column selection.
    """
    parsed = classify_line(line, marker)
    if not parsed.is_tactical:
        return 0

    stripped = parsed.code
    for i in range(len(stripped) - 1, -1, -1):
        if not stripped[i].isspace():
            return i
    return 0
