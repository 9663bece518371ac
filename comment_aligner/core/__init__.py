"""
Core modules for tactical comment alignment.
"""

from .classifier import (
    DEFAULT_MARKER,
    locate_line_comment,
    is_tactical,
    classify_line,
    find_end_of_code,
    remove_trailing_whitespace,
)
from .selector import (
    DEFAULT_MIN_COLUMN,
    select_column,
    calculate_optimal_column,
)
from .rewriter import align, edit_line, edit_lines
from .tactician import transform, transform_with_details

__all__ = [
    "DEFAULT_MARKER",
    "DEFAULT_MIN_COLUMN",
    "locate_line_comment",
    "is_tactical",
    "classify_line",
    "find_end_of_code",
    "remove_trailing_whitespace",
    "select_column",
    "calculate_optimal_column",
    "align",
    "edit_line",
    "edit_lines",
    "transform",
    "transform_with_details",
]
