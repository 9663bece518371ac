from typing import List

from .classifier import DEFAULT_MARKER, classify_line, remove_trailing_whitespace


def align(code: str, comment: str, column: int) -> str:
    """Place ``comment`` at ``column`` after ``code``.

    Code longer than the column is never cut; the comment then directly
    follows it.
    """
    pad = column - len(code)
    return code + " " * max(pad, 0) + comment


def edit_line(line: str, column: int, marker: str = DEFAULT_MARKER) -> str:
    """Move a tactical comment to ``column``; other lines come back unchanged"""
    parsed = classify_line(line, marker)
    if not parsed.is_tactical:
        return line

    code = remove_trailing_whitespace(parsed.code)
    return align(code, parsed.comment, column)


def edit_lines(lines: List[str], column: int, marker: str = DEFAULT_MARKER) -> List[str]:
    return [edit_line(line, column, marker) for line in lines]
