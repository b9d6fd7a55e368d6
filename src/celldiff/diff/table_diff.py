#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/table_diff.py
"""Cell-level comparison of delimited (CSV) text.

Rows are compared by position: row N of the before text is always compared
to row N of the after text, with no content-based row matching. Inside a row
cells are compared by column index, padding the shorter row with empty
strings, and changed cells get word-level changes.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from celldiff.constants import (
    AFTER_LABEL_SUFFIX,
    BEFORE_LABEL_SUFFIX,
    COLUMN_LABEL_TEMPLATE,
    DEFAULT_MAX_ALIGNMENT_CELLS,
)
from celldiff.diff.models import CSVRow, DiffCell, DiffRow, DiffTable
from celldiff.diff.parsing import parse_csv_to_rows
from celldiff.diff.word_diff import compute_cell_word_changes
from celldiff.options import DiffConfig

logger = logging.getLogger(__name__)


def create_diff_cells(
    before_row: Sequence[str],
    after_row: Sequence[str],
    *,
    max_cells: int = DEFAULT_MAX_ALIGNMENT_CELLS,
) -> list[DiffCell]:
    """Compare two rows cell by cell.

    Cells are compared exactly as given. Rows produced by
    :func:`~celldiff.diff.parsing.parse_csv_to_rows` have already lost their
    syntactic quotes, so a quote left in a value is part of its content.

    Parameters
    ----------
    before_row : sequence of str
        Cells of the original row
    after_row : sequence of str
        Cells of the updated row
    max_cells : int, default DEFAULT_MAX_ALIGNMENT_CELLS
        Alignment budget passed on to the word-level comparison

    Returns
    -------
    list of DiffCell
        One cell per column up to the longer row's length

    """
    cells: list[DiffCell] = []
    for column in range(max(len(before_row), len(after_row))):
        before = before_row[column] if column < len(before_row) else ""
        after = after_row[column] if column < len(after_row) else ""
        has_change = before != after
        word_changes = tuple(compute_cell_word_changes(before, after, max_cells=max_cells)) if has_change else ()
        cells.append(DiffCell(before=before, after=after, has_change=has_change, word_changes=word_changes))
    return cells


def create_diff_rows(
    before_rows: Sequence[CSVRow],
    after_rows: Sequence[CSVRow],
    config: DiffConfig,
    row_offset: int = 0,
) -> list[DiffRow]:
    """Compare two row sets by position.

    Parameters
    ----------
    before_rows : sequence of rows
        Original data rows
    after_rows : sequence of rows
        Updated data rows
    config : DiffConfig
        Diff settings; ``hide_unchanged_rows`` drops rows without changes
    row_offset : int, default 0
        Added to every row number (1 when a header row was consumed)

    Returns
    -------
    list of DiffRow
        Diff rows in input order. Indices where both rows are empty are
        skipped.

    """
    rows: list[DiffRow] = []
    for index in range(max(len(before_rows), len(after_rows))):
        before_row = before_rows[index] if index < len(before_rows) else []
        after_row = after_rows[index] if index < len(after_rows) else []
        if not before_row and not after_row:
            continue

        cells = create_diff_cells(before_row, after_row, max_cells=config.max_alignment_cells)
        has_changes = any(cell.has_change for cell in cells)
        if config.hide_unchanged_rows and not has_changes:
            continue

        rows.append(DiffRow(row_number=index + 1 + row_offset, cells=tuple(cells), has_changes=has_changes))
    return rows


def detect_changed_columns(rows: Iterable[DiffRow]) -> set[int]:
    """Return the indices of columns with at least one changed cell."""
    changed: set[int] = set()
    for row in rows:
        for column, cell in enumerate(row.cells):
            if cell.has_change:
                changed.add(column)
    return changed


def extract_header_labels(before_rows: Sequence[CSVRow], after_rows: Sequence[CSVRow]) -> list[str]:
    """Read column labels from the first row, preferring the after side.

    The before side's first row is used when the after side has no rows or
    an empty first row. Labels are taken as parsed; the reader has already
    removed their formatting quotes.
    """
    source: CSVRow = []
    if after_rows and after_rows[0]:
        source = after_rows[0]
    elif before_rows:
        source = before_rows[0]
    return list(source)


def generate_csv_headers(
    column_count: int,
    changed_columns: Iterable[int],
    config: DiffConfig,
    labels: Optional[Sequence[str]] = None,
) -> list[str]:
    """Build the header list for a diff table.

    Columns without a label get ``"Column N"``. In before/after column mode
    every changed column contributes ``"<label> Before"`` followed by
    ``"<label> After"``; all other columns contribute their label once.

    Parameters
    ----------
    column_count : int
        Number of columns in the widest row
    changed_columns : iterable of int
        Column indices with at least one change
    config : DiffConfig
        Diff settings; only ``before_after_column`` is consulted
    labels : sequence of str, optional
        Labels extracted from a header row

    Returns
    -------
    list of str
        Header labels in display order

    """
    labels = list(labels or [])
    changed = set(changed_columns)
    headers: list[str] = []
    for column in range(max(column_count, len(labels))):
        label = labels[column] if column < len(labels) else COLUMN_LABEL_TEMPLATE.format(index=column + 1)
        if config.before_after_column and column in changed:
            headers.append(f"{label}{BEFORE_LABEL_SUFFIX}")
            headers.append(f"{label}{AFTER_LABEL_SUFFIX}")
        else:
            headers.append(label)
    return headers


def create_csv_diff_table(before_text: str, after_text: str, config: DiffConfig) -> DiffTable:
    """Diff two delimited texts into a table.

    Parameters
    ----------
    before_text : str
        Original delimited text
    after_text : str
        Updated delimited text
    config : DiffConfig
        Diff settings

    Returns
    -------
    DiffTable
        Headers, diff rows and the set of changed columns

    Examples
    --------
        >>> config = DiffConfig(mode="csv", first_row_is_header=True)
        >>> table = create_csv_diff_table("a,b\\n1,2", "a,b\\n1,changed", config)
        >>> table.headers
        ('a', 'b')
        >>> table.rows[0].cells[1].after
        'changed'

    """
    before_rows = parse_csv_to_rows(before_text, config.delimiter)
    after_rows = parse_csv_to_rows(after_text, config.delimiter)

    labels: Optional[list[str]] = None
    row_offset = 0
    before_data: Sequence[CSVRow] = before_rows
    after_data: Sequence[CSVRow] = after_rows

    if config.first_row_is_header and before_rows and after_rows:
        labels = extract_header_labels(before_rows, after_rows)
        before_data = before_rows[1:] if len(before_rows) > 1 else []
        after_data = after_rows[1:] if len(after_rows) > 1 else []
        row_offset = 1

    diff_rows = create_diff_rows(before_data, after_data, config, row_offset=row_offset)

    column_count = max((len(row) for row in [*before_rows, *after_rows]), default=0)
    changed_columns = detect_changed_columns(diff_rows) if config.before_after_column else set()
    headers = generate_csv_headers(column_count, changed_columns, config, labels)

    logger.debug(
        "Built CSV diff table: %d rows, %d columns, %d changed columns",
        len(diff_rows),
        column_count,
        len(changed_columns),
    )
    return DiffTable(headers=tuple(headers), rows=tuple(diff_rows), changed_columns=frozenset(changed_columns))


def compute_csv_diff(before_text: str, after_text: str, config: DiffConfig) -> DiffTable:
    """Diff two delimited texts (alias of :func:`create_csv_diff_table`)."""
    return create_csv_diff_table(before_text, after_text, config)
