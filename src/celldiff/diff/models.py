#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/models.py
"""Data classes for diff results.

Every instance is a pure computation output: built fresh per diff
invocation, immutable once built and owned by the caller that requested it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from celldiff.constants import LineType

CSVRow = List[str]


@dataclass(frozen=True)
class WordChange:
    """A maximal run of text tagged as common, added or removed.

    Attributes:
        value: The fragment text
        added: Fragment only exists in the after string
        removed: Fragment only exists in the before string
    """

    value: str
    added: bool = False
    removed: bool = False

    def __post_init__(self) -> None:
        if self.added and self.removed:
            raise ValueError("A word change cannot be both added and removed")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"value": self.value, "added": self.added, "removed": self.removed}


@dataclass(frozen=True)
class DiffLine:
    """A single annotated line in a line diff.

    ``unchanged`` lines carry both line numbers, ``removed`` lines only the
    before number and ``added`` lines only the after number. Lines produced
    from a modification block carry the word changes computed for the pair.
    """

    type: LineType
    content: str
    before_line_number: Optional[int] = None
    after_line_number: Optional[int] = None
    word_changes: Optional[Tuple[WordChange, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {"type": self.type, "content": self.content}
        if self.before_line_number is not None:
            data["before_line_number"] = self.before_line_number
        if self.after_line_number is not None:
            data["after_line_number"] = self.after_line_number
        if self.word_changes is not None:
            data["word_changes"] = [change.to_dict() for change in self.word_changes]
        return data


@dataclass(frozen=True)
class DiffCell:
    """Comparison of one CSV cell between before and after."""

    before: str
    after: str
    has_change: bool
    word_changes: Tuple[WordChange, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "before": self.before,
            "after": self.after,
            "has_change": self.has_change,
            "word_changes": [change.to_dict() for change in self.word_changes],
        }


@dataclass(frozen=True)
class DiffRow:
    """Comparison of one CSV row, numbered from 1 (header row included)."""

    row_number: int
    cells: Tuple[DiffCell, ...]
    has_changes: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "row_number": self.row_number,
            "has_changes": self.has_changes,
            "cells": [cell.to_dict() for cell in self.cells],
        }


@dataclass(frozen=True)
class DiffTable:
    """Result of a CSV diff.

    Attributes:
        headers: Column labels, already expanded for before/after column mode
        rows: Diff rows in input order (hidden rows omitted)
        changed_columns: Column indices with at least one changed cell. Only
            populated in before/after column mode.
    """

    headers: Tuple[str, ...]
    rows: Tuple[DiffRow, ...]
    changed_columns: frozenset = field(default_factory=frozenset)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "headers": list(self.headers),
            "changed_columns": sorted(self.changed_columns),
            "rows": [row.to_dict() for row in self.rows],
        }


@dataclass(frozen=True)
class DiffStats:
    """Summary counts for a diff result.

    For line diffs ``added``/``removed``/``unchanged`` count emitted lines.
    For table diffs ``changed_rows``/``unchanged_rows`` count emitted rows and
    ``changed_cells`` counts cells with a change.
    """

    mode: str
    added: int = 0
    removed: int = 0
    unchanged: int = 0
    changed_rows: int = 0
    unchanged_rows: int = 0
    changed_cells: int = 0

    @property
    def has_changes(self) -> bool:
        """Whether the result contains any difference."""
        return bool(self.added or self.removed or self.changed_rows)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        if self.mode == "csv":
            return {
                "changed_rows": self.changed_rows,
                "unchanged_rows": self.unchanged_rows,
                "changed_cells": self.changed_cells,
            }
        return {
            "lines_added": self.added,
            "lines_removed": self.removed,
            "lines_unchanged": self.unchanged,
            "total_changes": self.added + self.removed,
        }
