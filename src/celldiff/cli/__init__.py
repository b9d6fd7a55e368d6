#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/celldiff/cli/__init__.py
"""Command line interface for celldiff.

Compares two text or CSV files and prints the diff as terminal text, a rich
table, JSON, or a quoted CSV export::

    celldiff before.txt after.txt
    celldiff --mode csv --header --before-after-columns old.csv new.csv
    cat new.csv | celldiff --mode csv old.csv - --format csv -o diff.csv

Settings come from (lowest to highest priority) the built-in defaults, a
discovered or explicit configuration file, and command line flags.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from celldiff import __version__
from celldiff.cli.config import build_diff_config, discover_config_file, load_config_file
from celldiff.cli.output import should_use_color, should_use_rich_output
from celldiff.constants import CONFIG_ENV_VAR, DIFF_MODES, OUTPUT_FORMATS
from celldiff.diff.api import compute_diff, compute_stats, read_text_file
from celldiff.diff.csv_export import export_diff_table_to_csv
from celldiff.diff.models import DiffStats, DiffTable
from celldiff.diff.renderers import JsonDiffRenderer, RichDiffRenderer, TerminalDiffRenderer
from celldiff.exceptions import CellDiffError, DependencyError, FileError, ValidationError
from celldiff.logging_utils import configure_logging
from celldiff.options import DiffConfig

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_DIFFERENCES_FOUND = 5


def _validate_positive_int(value: str) -> int:
    """Parse a strictly positive integer argument.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a positive integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from e

    if ivalue <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {ivalue}")

    return ivalue


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the celldiff command.

    Boolean diff flags default to ``None`` so that an absent flag does not
    override a value from the configuration file.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="celldiff",
        description="Compare two versions of a text or CSV file with word-level highlighting",
    )
    parser.add_argument("before", help="Original file (use '-' for stdin)")
    parser.add_argument("after", help="Modified file (use '-' for stdin)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    diff_group = parser.add_argument_group("diff options")
    diff_group.add_argument("--mode", "-m", choices=list(DIFF_MODES), help="Diff mode: text (default) or csv")
    diff_group.add_argument(
        "--hide-unchanged",
        dest="hide_unchanged_rows",
        action="store_true",
        default=None,
        help="Hide unchanged lines or rows",
    )
    diff_group.add_argument(
        "--before-after-columns",
        dest="before_after_column",
        action="store_true",
        default=None,
        help="CSV: show separate Before/After columns for every changed column",
    )
    diff_group.add_argument(
        "--header",
        dest="first_row_is_header",
        action="store_true",
        default=None,
        help="CSV: treat the first row as column headers",
    )
    diff_group.add_argument("--delimiter", "-d", help="CSV: field delimiter (default: ',')")
    diff_group.add_argument(
        "--max-alignment-cells",
        type=_validate_positive_int,
        help="Largest LCS table built before falling back to heuristic matching",
    )
    diff_group.add_argument("--encoding", default="utf-8", help="Encoding of the input files (default: utf-8)")

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--format",
        "-f",
        choices=list(OUTPUT_FORMATS),
        default="text",
        help="Output format: text (default), json (structured), csv (quoted CSV export, csv mode only)",
    )
    output_group.add_argument("--output", "-o", help="Write diff to file (default: stdout)")
    output_group.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Colorize text output: auto (default, if terminal), always, never",
    )
    output_group.add_argument("--rich", action="store_true", help="Render text output as rich tables")
    output_group.add_argument(
        "--no-word-changes",
        dest="show_word_changes",
        action="store_false",
        default=True,
        help="Do not mark word-level changes in text output",
    )
    output_group.add_argument("--stats", action="store_true", help="Print a change summary to stderr")
    output_group.add_argument(
        "--exit-code",
        action="store_true",
        help=f"Exit with status {EXIT_DIFFERENCES_FOUND} when differences are found",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help=f"Configuration file (default: discovered, or ${CONFIG_ENV_VAR})")
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    config_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    config_group.add_argument("--log-file", help="Also write log output to this file")
    config_group.add_argument(
        "--trace",
        action="store_true",
        help="Include timestamps and logger names in logs, and write DEBUG records to --log-file",
    )

    return parser


def resolve_config(parsed: argparse.Namespace) -> DiffConfig:
    """Build the diff config from config files and command line flags.

    Raises
    ------
    ValidationError
        If the config file or a flag holds an invalid value

    """
    file_values: dict = {}
    if not parsed.no_config:
        config_path = parsed.config or os.environ.get(CONFIG_ENV_VAR) or discover_config_file()
        if config_path:
            logger.info("Using configuration file: %s", config_path)
            file_values = load_config_file(config_path)

    overrides = {
        "mode": parsed.mode,
        "hide_unchanged_rows": parsed.hide_unchanged_rows,
        "before_after_column": parsed.before_after_column,
        "first_row_is_header": parsed.first_row_is_header,
        "delimiter": parsed.delimiter,
        "max_alignment_cells": parsed.max_alignment_cells,
    }
    return build_diff_config(file_values, overrides)


def _read_input(source: str, encoding: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return read_text_file(source, encoding=encoding)


def _format_stats(stats: DiffStats) -> str:
    if stats.mode == "csv":
        return (
            f"{stats.changed_rows} row(s) changed, {stats.unchanged_rows} unchanged, "
            f"{stats.changed_cells} cell(s) changed"
        )
    return f"{stats.added} line(s) added, {stats.removed} removed, {stats.unchanged} unchanged"


def _render_output(parsed: argparse.Namespace, result, config: DiffConfig) -> str | None:
    """Render the result to a string, or print it with rich and return None."""
    if parsed.format == "json":
        return JsonDiffRenderer().render(result, config)

    if parsed.format == "csv":
        if not isinstance(result, DiffTable):
            raise ValidationError(
                "--format csv requires --mode csv", parameter_name="format", parameter_value=parsed.format
            )
        return export_diff_table_to_csv(result, config)

    if should_use_rich_output(parsed, raise_on_missing=True):
        from rich.console import Console

        RichDiffRenderer(show_word_changes=parsed.show_word_changes).render(result, Console())
        return None

    use_color = should_use_color(parsed.color, writing_to_file=bool(parsed.output))
    return TerminalDiffRenderer(use_color=use_color, show_word_changes=parsed.show_word_changes).render(result)


def main(args: list[str] | None = None) -> int:
    """Execute the celldiff command line tool.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (defaults to ``sys.argv[1:]``)

    Returns
    -------
    int
        Exit code

    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_ERROR

    configure_logging(parsed.log_level, log_file=parsed.log_file, trace_mode=parsed.trace)

    if parsed.before == "-" and parsed.after == "-":
        print("Error: Cannot read both before and after from stdin", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        config = resolve_config(parsed)
        before_text = _read_input(parsed.before, parsed.encoding)
        after_text = _read_input(parsed.after, parsed.encoding)

        result = compute_diff(before_text, after_text, config)
        stats = compute_stats(result)
        output = _render_output(parsed, result, config)

        if output is not None:
            if parsed.output:
                output_path = Path(parsed.output)
                output_path.write_text(output, encoding="utf-8")
                print(f"Diff written to: {output_path}", file=sys.stderr)
            elif output:
                print(output)

        if not stats.has_changes:
            print("No differences found.", file=sys.stderr)
        if parsed.stats:
            print(_format_stats(stats), file=sys.stderr)

        if parsed.exit_code and stats.has_changes:
            return EXIT_DIFFERENCES_FOUND
        return EXIT_SUCCESS

    except DependencyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except FileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except (CellDiffError, OSError) as e:
        logger.debug("Diff failed", exc_info=True)
        print(f"Error comparing files: {e}", file=sys.stderr)
        return EXIT_ERROR
