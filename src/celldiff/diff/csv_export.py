#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/csv_export.py
"""Serialize a diff table back to CSV text."""

from __future__ import annotations

import csv
import io

from celldiff.constants import CSV_LINE_TERMINATOR
from celldiff.diff.models import DiffRow, DiffTable
from celldiff.options import DiffConfig


def _row_fields(row: DiffRow, table: DiffTable, config: DiffConfig) -> list[str]:
    fields: list[str] = []
    for column, cell in enumerate(row.cells):
        if config.before_after_column and column in table.changed_columns:
            fields.append(cell.before)
            fields.append(cell.after)
        else:
            fields.append(cell.after)
    return fields


def export_diff_table_to_csv(table: DiffTable, config: DiffConfig) -> str:
    """Export a diff table as fully quoted CSV.

    Every field is wrapped in double quotes with inner quotes doubled. Lines
    are joined with ``"\\n"`` and there is no trailing newline. Columns in
    ``table.changed_columns`` are written as a before and an after field when
    ``config.before_after_column`` is set; every other column is written as
    its after value.

    Parameters
    ----------
    table : DiffTable
        Diff table to export
    config : DiffConfig
        The settings the table was built with

    Returns
    -------
    str
        CSV text

    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator=CSV_LINE_TERMINATOR)

    if table.headers:
        writer.writerow(table.headers)
    for row in table.rows:
        writer.writerow(_row_fields(row, table, config))

    output = buffer.getvalue()
    if output.endswith(CSV_LINE_TERMINATOR):
        output = output[: -len(CSV_LINE_TERMINATOR)]
    return output
