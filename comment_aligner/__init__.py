"""
Comment Aligner: line up tactical (end-of-line) comments on a common column.
"""

import logging

from .api import CommentAligner
from .core import (
    DEFAULT_MARKER,
    DEFAULT_MIN_COLUMN,
    transform,
    transform_with_details,
    calculate_optimal_column,
    select_column,
)
from .models import (
    LineKind,
    LineComment,
    ColumnSelection,
    LineEdit,
    AlignmentResult,
    InvalidColumnError,
)
from .output import OutputFormatter
from . import core

__version__ = "0.1.0"
__all__ = [
    "CommentAligner",
    "DEFAULT_MARKER",
    "DEFAULT_MIN_COLUMN",
    "transform",
    "transform_with_details",
    "calculate_optimal_column",
    "select_column",
    "LineKind",
    "LineComment",
    "ColumnSelection",
    "LineEdit",
    "AlignmentResult",
    "InvalidColumnError",
    "OutputFormatter",
    "core",
]

# Configure default logging format to be minimal
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))
_logger = logging.getLogger("comment_aligner")
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)
