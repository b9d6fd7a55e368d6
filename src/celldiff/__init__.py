"""celldiff - Line and cell level differences for text and CSV.

celldiff compares two versions of a text or of delimited (CSV) data and
produces a structured result that any renderer can consume: annotated diff
lines for text, a diff table for CSV, both with word-level changes inside
modified lines and cells.

Key Features
------------
- LCS-based line alignment with separate before/after line numbers
- Word-level highlighting inside modified lines and cells
- Positional CSV row comparison with quote-aware parsing
- Optional header row and before/after column expansion
- Quoted CSV export, JSON output and terminal rendering
- Command line tool: ``celldiff before.txt after.txt``

Requirements
------------
- Python 3.10+
- Optional: ``rich`` for table output in the terminal

Examples
--------
Compare two texts:

    >>> from celldiff import DiffConfig, compute_diff
    >>> lines = compute_diff("line1\\nline2\\nline3", "line1\\nchanged\\nline3", DiffConfig())
    >>> [line.type for line in lines]
    ['unchanged', 'removed', 'added', 'unchanged']

Compare CSV data with a header row:

    >>> config = DiffConfig(mode="csv", first_row_is_header=True)
    >>> table = compute_diff("a,b\\n1,2", "a,b\\n1,changed", config)
    >>> table.headers
    ('a', 'b')

"""

from celldiff.diff import (
    DiffCell,
    DiffLine,
    DiffRow,
    DiffStats,
    DiffTable,
    WordChange,
    compute_diff,
    compute_stats,
    diff_files,
    export_diff_table_to_csv,
    render_diff,
)
from celldiff.exceptions import CellDiffError, ValidationError
from celldiff.options import DiffConfig

__version__ = "0.3.0"

__all__ = [
    "CellDiffError",
    "DiffCell",
    "DiffConfig",
    "DiffLine",
    "DiffRow",
    "DiffStats",
    "DiffTable",
    "ValidationError",
    "WordChange",
    "__version__",
    "compute_diff",
    "compute_stats",
    "diff_files",
    "export_diff_table_to_csv",
    "render_diff",
]
