#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/__init__.py
"""Text and CSV comparison.

The pipeline turns two raw texts into a structured, renderer-agnostic result:

    raw text -> parsing -> aligner -> text_diff / table_diff -> result
                                         (word_diff inside)      -> csv_export

Key Features
------------
- LCS-based line alignment with independent before/after line numbering
- Modification blocks: paired removed/added lines with word-level changes
- Positional CSV row comparison with per-cell word-level changes
- Optional header row and before/after column expansion
- Quoted CSV export of a diff table

Examples
--------
Compare two texts:
    >>> from celldiff.diff import compute_diff
    >>> from celldiff.options import DiffConfig
    >>> lines = compute_diff("line1\\nline2", "line1\\nline two", DiffConfig())
    >>> [line.type for line in lines]
    ['unchanged', 'removed', 'added']

Compare CSV with a header row and export the result:
    >>> from celldiff.diff import export_diff_table_to_csv
    >>> config = DiffConfig(mode="csv", first_row_is_header=True)
    >>> table = compute_diff("a,b\\n1,2", "a,b\\n1,3", config)
    >>> export_diff_table_to_csv(table, config)
    '"a","b"\\n"1","3"'

"""

from celldiff.diff.aligner import AlignedRun, align_sequences
from celldiff.diff.api import compute_diff, compute_stats, diff_files, render_diff
from celldiff.diff.csv_export import export_diff_table_to_csv
from celldiff.diff.models import CSVRow, DiffCell, DiffLine, DiffRow, DiffStats, DiffTable, WordChange
from celldiff.diff.parsing import parse_csv_line, parse_csv_to_rows, parse_text_to_lines, strip_formatting_quotes
from celldiff.diff.table_diff import (
    compute_csv_diff,
    create_csv_diff_table,
    create_diff_cells,
    create_diff_rows,
    detect_changed_columns,
    generate_csv_headers,
)
from celldiff.diff.text_diff import compute_text_diff, create_diff_lines
from celldiff.diff.word_diff import compute_cell_word_changes, compute_word_changes, tokenize_words

__all__ = [
    "AlignedRun",
    "CSVRow",
    "DiffCell",
    "DiffLine",
    "DiffRow",
    "DiffStats",
    "DiffTable",
    "WordChange",
    "align_sequences",
    "compute_cell_word_changes",
    "compute_csv_diff",
    "compute_diff",
    "compute_stats",
    "compute_text_diff",
    "compute_word_changes",
    "create_csv_diff_table",
    "create_diff_cells",
    "create_diff_lines",
    "create_diff_rows",
    "detect_changed_columns",
    "diff_files",
    "export_diff_table_to_csv",
    "generate_csv_headers",
    "parse_csv_line",
    "parse_csv_to_rows",
    "parse_text_to_lines",
    "render_diff",
    "strip_formatting_quotes",
    "tokenize_words",
]
