import logging
from typing import List, Optional

from ..models import ColumnSelection, InvalidColumnError
from .classifier import DEFAULT_MARKER, classify_line, find_end_of_code

# Column 70 using 1-based numbering
DEFAULT_MIN_COLUMN = 69

# Comments are snapped to multiples of this width (1-based)
COLUMN_BOUNDARY = 10

logger = logging.getLogger(__name__)


def select_column(
    lines: List[str],
    min_column: int = DEFAULT_MIN_COLUMN,
    marker: str = DEFAULT_MARKER,
) -> ColumnSelection:
    """Determine the comment column for a whole text

    The comment must start at least one blank column after the longest
    tactically commented code fragment, never below ``min_column``, and is
    then pushed right onto the next ten-column boundary.

    Args:
        lines: Source lines (without newline characters)
        min_column: Minimum 0-based column index
        marker: Line comment marker

    Returns:
        ColumnSelection holding the chosen column and intermediate values

    Raises:
        InvalidColumnError: min_column is negative
    """
    if min_column < 0:
        raise InvalidColumnError(f"min_column must be non-negative, got {min_column}")

    candidate = min_column
    widest_line: Optional[int] = None
    for idx, line in enumerate(lines):
        needed = find_end_of_code(line, marker) + 2
        if needed > candidate:
            candidate = needed
            if classify_line(line, marker).is_tactical:
                widest_line = idx

    base_one = candidate + 1  # 1-based for the boundary check
    misalignment = base_one % COLUMN_BOUNDARY
    shift = COLUMN_BOUNDARY - misalignment if misalignment != 0 else 0

    selection = ColumnSelection(
        min_column=min_column,
        candidate=candidate,
        base_one=base_one,
        misalignment=misalignment,
        shift=shift,
        column=candidate + shift,
        widest_line=widest_line,
    )
    logger.debug(
        f"Column selection: min_column={min_column} ({min_column + 1}), "
        f"candidate={candidate}, base_one={base_one}, misalignment={misalignment}, "
        f"shift={shift}, column={selection.column}"
    )
    return selection


def calculate_optimal_column(
    lines: List[str],
    min_column: int = DEFAULT_MIN_COLUMN,
    marker: str = DEFAULT_MARKER,
) -> int:
    """Return only the 0-based column chosen by select_column()"""
    return select_column(lines, min_column, marker).column
