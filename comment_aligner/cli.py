import argparse
import logging
import sys

from .api import CommentAligner
from .models import AlignmentResult, InvalidColumnError
from .output.formatter import OutputFormatter
from .utils import build_config_from_args


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="comment-aligner",
        description="Tactical Comment Alignment Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  comment-aligner < Main.java > Main.aligned.java
  comment-aligner --min-column 39 --in-place src/Main.java src/Util.java
  comment-aligner --marker "#" --check script.sh
        """,
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Files to align. Without files, standard input is aligned to standard output",
    )
    parser.add_argument(
        "--min-column",
        type=int,
        default=None,
        help="Minimum 0-based comment column (default: 69, i.e. column 70)",
    )
    parser.add_argument(
        "--marker",
        type=str,
        default=None,
        help='Line comment marker (default: "//")',
    )
    parser.add_argument(
        "--keep-missing-newline",
        action="store_true",
        default=None,
        help="Do not append a final newline when the input has none",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Report comments that would move and exit with status 1; nothing is written",
    )
    mode.add_argument(
        "--in-place",
        "-i",
        action="store_true",
        help="Rewrite the given files instead of printing them",
    )

    parser.add_argument(
        "--report",
        type=str,
        help="Write a JSON report of the selected columns and edits to this path",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output (show debug information)",
    )
    return parser


def _report_violations(result: AlignmentResult, marker: str) -> int:
    """Print one line per comment that is not at its expected column"""
    name = result.source_path or "<stdin>"
    violations = 0
    for edit in result.changed_edits:
        violations += 1
        current_col = edit.before.find(marker) + 1
        expected_col = edit.after.find(marker) + 1
        print(f"{name}:{edit.line_number}: comment at col {current_col}, expected {expected_col}")
        print(f"    {edit.before}")
    return violations


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        package_logger = logging.getLogger("comment_aligner")
        package_logger.setLevel(logging.DEBUG)
        package_logger.propagate = False
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.in_place and not args.files:
        logging.error("Error: --in-place requires at least one file")
        return 1

    config = build_config_from_args(args)
    try:
        aligner = CommentAligner(**config)
    except InvalidColumnError as e:
        logging.error(f"Error: {e}")
        return 1

    level = "verbose" if args.verbose else "normal"
    results = []
    violations = 0

    try:
        if not args.files:
            source = sys.stdin.read()
            result = aligner.align(source)
            results.append(result)
            if args.check:
                violations += _report_violations(result, aligner.marker)
            else:
                sys.stdout.write(result.text)

        for path in args.files:
            result = aligner.align_file(path)
            results.append(result)
            if args.check:
                violations += _report_violations(result, aligner.marker)
            elif args.in_place:
                if result.changed_edits:
                    aligner.save_results(result, path)
                logging.info(OutputFormatter.format_console(result, level=level))
            else:
                sys.stdout.write(result.text)

        if args.report:
            report_path = aligner.write_report(results, args.report)
            logging.info(f"Report written: {report_path}")
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error during alignment: {e}")
        return 1

    if args.check and violations > 0:
        logging.error(f"\n{violations} violation(s) found.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
