"""Unified output formatting for alignment reports and console output"""

from typing import Dict, Any, List

import numpy as np

from ..models import AlignmentResult, LineKind


class OutputFormatter:
    """Formats alignment results into a report schema and console output"""

    # Output levels
    OUTPUT_LEVELS = {"minimal", "normal", "verbose"}
    DEFAULT_LEVEL = "normal"

    # Changed lines shown in verbose output
    MAX_SAMPLE_EDITS = 5

    @staticmethod
    def build_summary(result: AlignmentResult) -> Dict[str, Any]:
        """Build summary layer from an AlignmentResult

        Args:
            result: Result returned by CommentAligner.align()

        Returns:
            Structured summary dict with line counts and the selected column
        """
        stats = result.stats
        return {
            "source_path": result.source_path,
            "column": result.selection.column,
            "column_one_based": result.selection.column + 1,
            "min_column": result.selection.min_column,
            "lines": {
                "total": stats.get("total_lines", 0),
                "code": stats.get("code_lines", 0),
                "tactical": stats.get("tactical_lines", 0),
                "strategic": stats.get("strategic_lines", 0),
                "changed": stats.get("changed_lines", 0),
            },
            "padding": OutputFormatter.compute_padding_statistics(
                [e.padding for e in result.edits if e.kind is LineKind.TACTICAL]
            ),
        }

    @staticmethod
    def compute_padding_statistics(paddings: List[int]) -> Dict[str, Any]:
        """Compute statistics over the spaces inserted before each comment

        Args:
            paddings: Inserted space counts, one per tactical line

        Returns:
            Dict with statistics
        """
        if not paddings:
            return {
                "count": 0,
                "mean": 0.0,
                "stdev": 0.0,
                "min": 0,
                "max": 0,
                "50%_percentile": 0.0,
                "90%_percentile": 0.0,
            }

        values = np.asarray(paddings, dtype=float)
        return {
            "count": int(values.size),
            "mean": round(float(np.mean(values)), 4),
            "stdev": round(float(np.std(values)), 4),
            "min": int(np.min(values)),
            "max": int(np.max(values)),
            "50%_percentile": round(float(np.percentile(values, 50)), 4),
            "90%_percentile": round(float(np.percentile(values, 90)), 4),
        }

    @staticmethod
    def format_console(result: AlignmentResult, level: str = "normal") -> str:
        """Format result as console output

        Args:
            result: Alignment result
            level: Output level (minimal, normal, verbose)

        Returns:
            Formatted console output string
        """
        if level not in OutputFormatter.OUTPUT_LEVELS:
            level = OutputFormatter.DEFAULT_LEVEL

        summary = OutputFormatter.build_summary(result)
        if level == "minimal":
            return OutputFormatter._format_minimal(summary)
        elif level == "normal":
            return OutputFormatter._format_normal(summary)
        else:  # verbose
            return OutputFormatter._format_verbose(result, summary)

    @staticmethod
    def _format_minimal(summary: Dict[str, Any]) -> str:
        """Minimal console output - one line"""
        changed = summary["lines"]["changed"]
        return f"[OK] Aligned at column {summary['column_one_based']}: {changed} lines changed"

    @staticmethod
    def _format_normal(summary: Dict[str, Any]) -> str:
        """Normal console output - compact summary"""
        lines_info = summary["lines"]
        name = summary.get("source_path") or "<text>"

        if lines_info["tactical"] == 0:
            head = f"[OK] {name}: no tactical comments"
        elif lines_info["changed"] == 0:
            head = f"[OK] {name}: already aligned at column {summary['column_one_based']}"
        else:
            head = (
                f"[OK] {name}: {lines_info['changed']}/{lines_info['tactical']} "
                f"tactical comments moved to column {summary['column_one_based']}"
            )

        return "\n".join(
            [
                head,
                f"     Lines: {lines_info['total']} total, {lines_info['tactical']} tactical, "
                f"{lines_info['strategic']} strategic",
            ]
        )

    @staticmethod
    def _format_verbose(result: AlignmentResult, summary: Dict[str, Any]) -> str:
        """Verbose console output - normal + column details + sample edits"""
        lines = [OutputFormatter._format_normal(summary), ""]

        selection = result.selection
        padding = summary["padding"]
        lines.extend(
            [
                "--- DETAILED STATS ---",
                f"  Column: min={selection.min_column}, candidate={selection.candidate}, "
                f"shift={selection.shift}, selected={selection.column} (0-based)",
                f"  Padding: mean={padding['mean']:.2f}, median={padding['50%_percentile']:.2f}, "
                f"range={padding['min']}~{padding['max']}",
                "",
            ]
        )

        changed = result.changed_edits
        if changed:
            lines.append("EDIT DETAILS")
            for edit in changed[: OutputFormatter.MAX_SAMPLE_EDITS]:
                lines.append(f"  [line {edit.line_number}] +{edit.padding} spaces")
                lines.append(f"       bef: {OutputFormatter._truncate(edit.before)}")
                lines.append(f"       aft: {OutputFormatter._truncate(edit.after)}")

            if len(changed) > OutputFormatter.MAX_SAMPLE_EDITS:
                lines.append(
                    f"  ... {len(changed) - OutputFormatter.MAX_SAMPLE_EDITS} more edits"
                )

        return "\n".join(lines)

    @staticmethod
    def _truncate(text: str, width: int = 100) -> str:
        if len(text) > width:
            return text[: width - 3] + "..."
        return text
