"""Test utilities for the celldiff test suite.

This module provides helpers for creating input files and for flattening
diff results into plain tuples that are easy to compare in assertions.
"""

import shutil
import tempfile
from pathlib import Path

from celldiff.diff.models import DiffLine, DiffTable, WordChange


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_input(directory: Path, name: str, content: str) -> Path:
    """Write raw text to a file without newline translation."""
    path = directory / name
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    return path


def line_summary(lines: list[DiffLine]) -> list[tuple]:
    """Flatten diff lines into (type, content, before_no, after_no) tuples."""
    return [(line.type, line.content, line.before_line_number, line.after_line_number) for line in lines]


def change_summary(changes) -> list[tuple]:
    """Flatten word changes into (marker, value) tuples using ' ', '-' and '+'."""
    return [("+" if c.added else "-" if c.removed else " ", c.value) for c in changes]


def reconstruct(changes: list[WordChange]) -> tuple[str, str]:
    """Rebuild the (before, after) strings from word changes."""
    before = "".join(c.value for c in changes if not c.added)
    after = "".join(c.value for c in changes if not c.removed)
    return before, after


def table_values(table: DiffTable) -> list[tuple]:
    """Flatten table rows into (row_number, [(before, after), ...]) tuples."""
    return [(row.row_number, [(cell.before, cell.after) for cell in row.cells]) for row in table.rows]
