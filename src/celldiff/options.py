#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the diff pipeline.

This module defines :class:`DiffConfig`, the immutable settings record passed
explicitly into every builder call. There is no process-wide state: callers
create a config (or derive one with :meth:`DiffConfig.create_updated`) and
hand it to the pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from celldiff.constants import (
    DEFAULT_BEFORE_AFTER_COLUMN,
    DEFAULT_CSV_DELIMITER,
    DEFAULT_DIFF_MODE,
    DEFAULT_FIRST_ROW_IS_HEADER,
    DEFAULT_HIDE_UNCHANGED_ROWS,
    DEFAULT_MAX_ALIGNMENT_CELLS,
    DIFF_MODES,
    CSV_QUOTE_CHAR,
    DiffMode,
)
from celldiff.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffConfig(CloneFrozenMixin):
    """Per-computation settings for a diff.

    Parameters
    ----------
    mode : {"text", "csv"}, default "text"
        Selects the line diff builder or the table diff builder.
    hide_unchanged_rows : bool, default False
        Suppress unchanged lines/rows from the output. Line and row numbers
        still advance past hidden entries.
    before_after_column : bool, default False
        CSV only. Show separate before and after columns for any column that
        changes in at least one row.
    first_row_is_header : bool, default False
        CSV only. Treat the first row of each input as column labels and
        exclude it from the diffed data.
    delimiter : str, default ","
        CSV only. Single-character field delimiter.
    max_alignment_cells : int, default 4_000_000
        Size bound for the exact LCS alignment table. Larger inputs use a
        heuristic matcher instead.

    """

    mode: DiffMode = field(
        default=DEFAULT_DIFF_MODE,
        metadata={"help": "Diff mode: text (line diff) or csv (cell diff)", "choices": list(DIFF_MODES)},
    )
    hide_unchanged_rows: bool = field(
        default=DEFAULT_HIDE_UNCHANGED_ROWS,
        metadata={"help": "Hide unchanged lines or rows (numbering still advances)"},
    )
    before_after_column: bool = field(
        default=DEFAULT_BEFORE_AFTER_COLUMN,
        metadata={"help": "Show separate Before/After columns for every column that changes"},
    )
    first_row_is_header: bool = field(
        default=DEFAULT_FIRST_ROW_IS_HEADER,
        metadata={"help": "Treat the first CSV row as column headers"},
    )
    delimiter: str = field(
        default=DEFAULT_CSV_DELIMITER,
        metadata={"help": "CSV field delimiter (single character)"},
    )
    max_alignment_cells: int = field(
        default=DEFAULT_MAX_ALIGNMENT_CELLS,
        metadata={"help": "Largest LCS table built before falling back to a heuristic matcher", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValidationError
            If any field value has the wrong type or is outside its valid range.

        """
        if self.mode not in DIFF_MODES:
            raise ValidationError(
                f"mode must be one of {', '.join(DIFF_MODES)}, got {self.mode!r}",
                parameter_name="mode",
                parameter_value=self.mode,
            )
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ValidationError(
                f"delimiter must be a single character, got {self.delimiter!r}",
                parameter_name="delimiter",
                parameter_value=self.delimiter,
            )
        if self.delimiter in (CSV_QUOTE_CHAR, "\n", "\r"):
            raise ValidationError(
                f"delimiter cannot be a quote or line break, got {self.delimiter!r}",
                parameter_name="delimiter",
                parameter_value=self.delimiter,
            )
        for name in ("hide_unchanged_rows", "before_after_column", "first_row_is_header"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValidationError(
                    f"{name} must be true or false, got {value!r}",
                    parameter_name=name,
                    parameter_value=value,
                )
        if isinstance(self.max_alignment_cells, bool) or not isinstance(self.max_alignment_cells, int):
            raise ValidationError(
                f"max_alignment_cells must be an integer, got {self.max_alignment_cells!r}",
                parameter_name="max_alignment_cells",
                parameter_value=self.max_alignment_cells,
            )
        if self.max_alignment_cells <= 0:
            raise ValidationError(
                f"max_alignment_cells must be positive, got {self.max_alignment_cells}",
                parameter_name="max_alignment_cells",
                parameter_value=self.max_alignment_cells,
            )

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the names of all configurable fields."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiffConfig":
        """Build a config from a mapping such as a parsed config file.

        Keys may use snake_case or kebab-case.

        Parameters
        ----------
        data : Mapping[str, Any]
            Option names and values

        Returns
        -------
        DiffConfig
            New configuration

        Raises
        ------
        ValidationError
            If the mapping contains unknown keys or invalid values.

        """
        known = set(cls.field_names())
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = str(key).replace("-", "_")
            if name not in known:
                raise ValidationError(
                    f"Unknown diff option: {key!r}. Valid options: {', '.join(sorted(known))}",
                    parameter_name=str(key),
                    parameter_value=value,
                )
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for JSON serialization."""
        return {name: getattr(self, name) for name in self.field_names()}
