"""
Tactical comment alignment pipeline.

transform() takes source code, finds the best tactical comment column for
the whole text, and re-writes the source to align every tactical comment
at that position.
"""

from typing import List

from ..models import (
    AlignmentResult,
    InvalidColumnError,
    LineEdit,
    LineKind,
)
from ..utils import join_lines, split_source_lines
from .classifier import DEFAULT_MARKER, classify_line
from .rewriter import edit_line, edit_lines
from .selector import DEFAULT_MIN_COLUMN, calculate_optimal_column, select_column


def _check_marker(marker: str):
    if not marker:
        raise InvalidColumnError("comment marker must not be empty")


def transform(
    source: str,
    min_column: int = DEFAULT_MIN_COLUMN,
    marker: str = DEFAULT_MARKER,
    preserve_missing_newline: bool = False,
) -> str:
    """Transform the given source code by aligning its tactical comments.

    Args:
        source: The source code
        min_column: The minimum 0-based column index to use
        marker: Line comment marker
        preserve_missing_newline: Keep the output without a final newline
            when the source has none (by default every line, including
            the last, is followed by a newline)

    Returns:
        Re-formatted source code
    """
    _check_marker(marker)
    lines = split_source_lines(source)
    column = calculate_optimal_column(lines, min_column, marker)
    final_newline = source.endswith("\n") or not preserve_missing_newline
    return join_lines(edit_lines(lines, column, marker), final_newline)


def transform_with_details(
    source: str,
    min_column: int = DEFAULT_MIN_COLUMN,
    marker: str = DEFAULT_MARKER,
    preserve_missing_newline: bool = False,
) -> AlignmentResult:
    """Same as transform(), but also return the column selection and a
    per-line edit record for every commented line."""
    _check_marker(marker)
    lines = split_source_lines(source)
    selection = select_column(lines, min_column, marker)

    out_lines: List[str] = []
    edits: List[LineEdit] = []
    counts = {kind: 0 for kind in LineKind}
    for number, line in enumerate(lines, start=1):
        new_line = edit_line(line, selection.column, marker)
        out_lines.append(new_line)

        parsed = classify_line(line, marker)
        counts[parsed.kind] += 1
        if parsed.kind is LineKind.CODE:
            continue
        edits.append(
            LineEdit(
                line_number=number,
                kind=parsed.kind,
                before=line,
                after=new_line,
                padding=_padding_of(new_line, parsed.kind, marker),
            )
        )

    final_newline = source.endswith("\n") or not preserve_missing_newline
    stats = {
        "total_lines": len(lines),
        "code_lines": counts[LineKind.CODE],
        "tactical_lines": counts[LineKind.TACTICAL],
        "strategic_lines": counts[LineKind.STRATEGIC],
        "changed_lines": sum(1 for e in edits if e.changed),
    }
    return AlignmentResult(
        text=join_lines(out_lines, final_newline),
        selection=selection,
        edits=edits,
        stats=stats,
    )


def _padding_of(line: str, kind: LineKind, marker: str) -> int:
    """Number of spaces between code and comment on a rewritten line"""
    if kind is not LineKind.TACTICAL:
        return 0
    code = classify_line(line, marker).code
    return len(code) - len(code.rstrip(" "))
