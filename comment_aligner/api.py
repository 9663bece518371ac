"""
API module for tactical comment alignment.
Provides high-level interface for easy integration.
"""

from typing import Dict, Any, List, Optional
from datetime import datetime
import json
import logging
import os

from .core.classifier import DEFAULT_MARKER
from .core.selector import DEFAULT_MIN_COLUMN
from .core.tactician import transform, transform_with_details
from .models import AlignmentResult, InvalidColumnError
from .output.formatter import OutputFormatter


class CommentAligner:
    """Configured entry point around the alignment pipeline.

    The object only holds configuration; every call to `align()` is
    independent, so one instance can be shared freely.

    Args:
        min_column: Minimum 0-based comment column (default 69, i.e. column 70)
        marker: Line comment marker
        preserve_missing_newline: Do not add a final newline the source lacked
        **config: Optional overrides for DEFAULT_CONFIG

    Raises:
        InvalidColumnError: min_column is negative or marker is empty

    Example:
        >>> aligner = CommentAligner(min_column=39)
        >>> result = aligner.align_file("Main.java")
        >>> aligner.save_results(result, "Main.aligned.java")
        >>> aligner.print_report(result)
    """

    DEFAULT_CONFIG = {
        "min_column": DEFAULT_MIN_COLUMN,
        "marker": DEFAULT_MARKER,
        "preserve_missing_newline": False,
    }

    def __init__(
        self,
        min_column: Optional[int] = None,
        marker: Optional[str] = None,
        preserve_missing_newline: Optional[bool] = None,
        **config,
    ):
        self.logger = logging.getLogger(__name__)
        overrides = {
            "min_column": min_column,
            "marker": marker,
            "preserve_missing_newline": preserve_missing_newline,
        }
        merged = {**config, **{k: v for k, v in overrides.items() if v is not None}}
        self.config = {**self.DEFAULT_CONFIG, **merged}

        if self.config["min_column"] < 0:
            raise InvalidColumnError(
                f"min_column must be non-negative, got {self.config['min_column']}"
            )
        if not self.config["marker"]:
            raise InvalidColumnError("comment marker must not be empty")

    @property
    def min_column(self) -> int:
        return self.config["min_column"]

    @property
    def marker(self) -> str:
        return self.config["marker"]

    def transform(self, source: str) -> str:
        """Aligned text only"""
        return transform(
            source,
            min_column=self.min_column,
            marker=self.marker,
            preserve_missing_newline=self.config["preserve_missing_newline"],
        )

    def align(self, source: str, source_path: Optional[str] = None) -> AlignmentResult:
        """Align the tactical comments of ``source`` and keep an edit record"""
        result = transform_with_details(
            source,
            min_column=self.min_column,
            marker=self.marker,
            preserve_missing_newline=self.config["preserve_missing_newline"],
        )
        result.source_path = source_path
        self.logger.debug(
            f"{source_path or '<text>'}: column={result.selection.column}, "
            f"changed={result.stats['changed_lines']}/{result.stats['tactical_lines']}"
        )
        return result

    def align_file(self, path: str, encoding: str = "utf-8") -> AlignmentResult:
        """Read ``path`` and align it

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Source file '{path}' does not exist.")

        # newline="" keeps carriage returns on the line, as in the core
        with open(path, "r", encoding=encoding, newline="") as f:
            source = f.read()
        return self.align(source, source_path=path)

    def save_results(
        self,
        result: AlignmentResult,
        output_path: str,
        report_file: Optional[str] = None,
        encoding: str = "utf-8",
    ) -> Dict[str, Any]:
        """Save the aligned text and, optionally, a JSON report.

        Args:
            result: result from `align()` or `align_file()`
            output_path: Where the aligned text is written. Parent
                directories are created as needed.
            report_file: Output path for the JSON report. Relative paths
                are resolved against the directory of output_path.
                None skips the report.

        Returns:
            dict with absolute "aligned_path", "report_path" (or None),
            "output_base" and "generated_at"
        """
        output_path = os.path.normpath(os.path.abspath(output_path))
        output_base = os.path.dirname(output_path)
        os.makedirs(output_base, exist_ok=True)

        with open(output_path, "w", encoding=encoding, newline="") as f:
            f.write(result.text)

        report_path = None
        if report_file is not None:
            if not os.path.isabs(report_file):
                report_file = os.path.join(output_base, report_file)
            report_path = self.write_report([result], report_file)

        return {
            "aligned_path": output_path,
            "report_path": report_path,
            "output_base": output_base,
            "generated_at": datetime.now().isoformat(),
        }

    def write_report(self, results: List[AlignmentResult], report_path: str) -> str:
        """Write a JSON report covering one or more alignment results

        Returns:
            Absolute path of the written report
        """
        report_path = os.path.normpath(os.path.abspath(report_path))
        os.makedirs(os.path.dirname(report_path), exist_ok=True)

        report = {
            "metadata": {
                "generated_at": datetime.now().isoformat(),
                "config": dict(self.config),
            },
            "files": [
                {"summary": OutputFormatter.build_summary(r), **r.to_dict()}
                for r in results
            ],
        }
        with open(report_path, "w", encoding="utf-8") as f:
            json.dump(report, f, ensure_ascii=False, indent=2)
        return report_path

    def print_report(self, result: AlignmentResult, level: str = "normal"):
        """Print a summary report of the alignment

        Args:
            result: Alignment result
            level: Output level (minimal, normal, verbose)
        """
        print(OutputFormatter.format_console(result, level=level))
