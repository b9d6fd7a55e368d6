#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/api.py
"""Python API for text and CSV comparison.

This module provides the high-level entry points: diff two strings or two
files with a :class:`~celldiff.options.DiffConfig`, summarize the result and
render it in one of the supported output formats.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Union

from celldiff.diff.csv_export import export_diff_table_to_csv
from celldiff.diff.models import DiffLine, DiffStats, DiffTable
from celldiff.diff.table_diff import compute_csv_diff
from celldiff.diff.text_diff import compute_text_diff
from celldiff.exceptions import FileAccessError, FileNotFoundError, ValidationError
from celldiff.options import DiffConfig

logger = logging.getLogger(__name__)

DiffResult = Union[List[DiffLine], DiffTable]


def compute_diff(before_text: str, after_text: str, config: DiffConfig | None = None) -> DiffResult:
    """Compare two texts using the builder selected by ``config.mode``.

    Parameters
    ----------
    before_text : str
        Original text
    after_text : str
        Updated text
    config : DiffConfig, optional
        Diff settings. Defaults to text mode.

    Returns
    -------
    list of DiffLine or DiffTable
        Diff lines in text mode, a diff table in csv mode

    Examples
    --------
        >>> from celldiff import DiffConfig, compute_diff
        >>> table = compute_diff("a,b\\n1,2", "a,b\\n1,3", DiffConfig(mode="csv", first_row_is_header=True))
        >>> table.rows[0].has_changes
        True

    """
    config = config or DiffConfig()
    logger.debug("Computing %s diff: %d / %d characters", config.mode, len(before_text), len(after_text))
    if config.mode == "csv":
        return compute_csv_diff(before_text, after_text, config)
    return compute_text_diff(before_text, after_text, config)


def read_text_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a text file for comparison.

    Newlines are preserved as written (no universal newline translation), so
    CRLF input keeps its carriage returns.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be read or decoded

    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(str(file_path))
    try:
        with open(file_path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(
            str(file_path), message=f"Cannot decode {file_path} as {encoding}: {e}", original_error=e
        ) from e
    except OSError as e:
        raise FileAccessError(str(file_path), original_error=e) from e


def diff_files(
    before_path: Union[str, Path],
    after_path: Union[str, Path],
    config: DiffConfig | None = None,
    encoding: str = "utf-8",
) -> DiffResult:
    """Read two files and compare their contents.

    Parameters
    ----------
    before_path : str or Path
        Path to the original file
    after_path : str or Path
        Path to the updated file
    config : DiffConfig, optional
        Diff settings
    encoding : str, default "utf-8"
        Text encoding of both files

    Returns
    -------
    list of DiffLine or DiffTable
        Result of :func:`compute_diff`

    """
    before_text = read_text_file(before_path, encoding=encoding)
    after_text = read_text_file(after_path, encoding=encoding)
    return compute_diff(before_text, after_text, config)


def compute_stats(result: DiffResult) -> DiffStats:
    """Summarize a diff result."""
    if isinstance(result, DiffTable):
        changed_rows = sum(1 for row in result.rows if row.has_changes)
        return DiffStats(
            mode="csv",
            changed_rows=changed_rows,
            unchanged_rows=len(result.rows) - changed_rows,
            changed_cells=sum(1 for row in result.rows for cell in row.cells if cell.has_change),
        )

    counts = {"added": 0, "removed": 0, "unchanged": 0}
    for line in result:
        counts[line.type] += 1
    return DiffStats(mode="text", **counts)


def render_diff(
    result: DiffResult,
    format: str = "text",
    config: DiffConfig | None = None,
    **kwargs: Any,
) -> str:
    """Render a diff result as a string.

    Parameters
    ----------
    result : list of DiffLine or DiffTable
        Output of :func:`compute_diff`
    format : {"text", "json", "csv"}, default "text"
        Output format:
        - "text": plain or ANSI-colored terminal text
        - "json": structured JSON
        - "csv": quoted CSV export (table results only)
    config : DiffConfig, optional
        The settings the result was built with
    **kwargs : dict
        Additional options passed to the renderer

    Returns
    -------
    str
        Rendered diff output

    Raises
    ------
    ValidationError
        If the format is unknown or does not apply to the result

    """
    from celldiff.diff.renderers import JsonDiffRenderer, TerminalDiffRenderer

    config = config or DiffConfig(mode="csv" if isinstance(result, DiffTable) else "text")

    if format == "text":
        return TerminalDiffRenderer(**kwargs).render(result)
    if format == "json":
        return JsonDiffRenderer(**kwargs).render(result, config)
    if format == "csv":
        if not isinstance(result, DiffTable):
            raise ValidationError(
                "CSV export is only available for csv mode results",
                parameter_name="format",
                parameter_value=format,
            )
        return export_diff_table_to_csv(result, config)
    raise ValidationError(
        f"Invalid format: {format}. Must be one of: text, json, csv",
        parameter_name="format",
        parameter_value=format,
    )
