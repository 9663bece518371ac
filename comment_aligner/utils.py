"""
Utility functions for the comment aligner.
"""

from typing import List


def split_source_lines(source: str) -> List[str]:
    """Split text on newline characters.

    The empty piece produced by a final newline is dropped, so ``"a\\n"``
    and ``"a"`` both give ``["a"]`` and ``""`` gives no lines at all.
    Carriage returns are left on the line untouched.
    """
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: List[str], final_newline: bool = True) -> str:
    """Join lines with a newline after every line (optionally not the last)"""
    text = "\n".join(lines)
    if lines and final_newline:
        text += "\n"
    return text


def build_config_from_args(args):
    """Build CommentAligner config from an argparse Namespace.

    Returns: config_dict
    """
    config = {
        "min_column": getattr(args, "min_column", None),
        "marker": getattr(args, "marker", None),
        "preserve_missing_newline": getattr(args, "keep_missing_newline", None),
    }

    # Remove None values to avoid overriding defaults
    return {k: v for k, v in config.items() if v is not None}
