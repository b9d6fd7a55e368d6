#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/renderers/terminal.py
"""Plain-text diff renderer with optional ANSI colors.

Line diffs are printed one line per diff line with before/after line numbers
and a ``-``/``+``/`` `` marker. CSV diffs are printed as a pipe-separated
grid. Word-level changes are marked inline: ``[-removed-]`` and
``{+added+}`` without color, red and green highlighting with color.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Union

from celldiff.constants import CELL_CHANGE_ARROW
from celldiff.diff.models import DiffCell, DiffLine, DiffTable, WordChange

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
BOLD = "\033[1m"
REVERSE = "\033[7m"
RESET = "\033[0m"

_MARKERS = {"unchanged": " ", "removed": "-", "added": "+"}


class TerminalDiffRenderer:
    """Render diff results as terminal text.

    Parameters
    ----------
    use_color : bool, default = False
        If True, add ANSI color codes to output
    show_word_changes : bool, default = True
        If True, mark changed words inside modified lines and cells

    Examples
    --------
        >>> from celldiff import DiffConfig, compute_diff
        >>> renderer = TerminalDiffRenderer()
        >>> print(renderer.render(compute_diff("a b", "a c", DiffConfig())))
           1      - a [-b-]
                1 + a {+c+}

    """

    def __init__(self, use_color: bool = False, show_word_changes: bool = True):
        """Initialize the terminal renderer."""
        self.use_color = use_color
        self.show_word_changes = show_word_changes

    def render(self, result: Union[List[DiffLine], DiffTable]) -> str:
        """Render a diff result to a single string."""
        return "\n".join(self.iter_lines(result))

    def iter_lines(self, result: Union[List[DiffLine], DiffTable]) -> Iterator[str]:
        """Yield output lines for a diff result."""
        if isinstance(result, DiffTable):
            yield from self._iter_table(result)
        else:
            yield from self._iter_diff_lines(result)

    def _mark_removed(self, text: str) -> str:
        if self.use_color:
            return f"{REVERSE}{text}{RESET}{RED}"
        return f"[-{text}-]"

    def _mark_added(self, text: str) -> str:
        if self.use_color:
            return f"{REVERSE}{text}{RESET}{GREEN}"
        return f"{{+{text}+}}"

    def _side_text(self, changes: Iterable[WordChange], side: str) -> str:
        """Render one side of a word diff with the changed fragments marked."""
        parts: list[str] = []
        for change in changes:
            if side == "before" and not change.added:
                parts.append(self._mark_removed(change.value) if change.removed else change.value)
            elif side == "after" and not change.removed:
                parts.append(self._mark_added(change.value) if change.added else change.value)
        return "".join(parts)

    def _iter_diff_lines(self, lines: Iterable[DiffLine]) -> Iterator[str]:
        for line in lines:
            before = str(line.before_line_number) if line.before_line_number is not None else ""
            after = str(line.after_line_number) if line.after_line_number is not None else ""
            content = line.content
            if self.show_word_changes and line.word_changes:
                content = self._side_text(line.word_changes, "before" if line.type == "removed" else "after")

            text = f"{before:>4} {after:>4} {_MARKERS[line.type]} {content}"
            if not self.use_color or line.type == "unchanged":
                yield text
            elif line.type == "removed":
                yield f"{RED}{text}{RESET}"
            else:
                yield f"{GREEN}{text}{RESET}"

    def _cell_text(self, cell: DiffCell) -> str:
        if not cell.has_change:
            return cell.after
        if self.show_word_changes and cell.word_changes:
            return (
                self._side_text(cell.word_changes, "before")
                + CELL_CHANGE_ARROW
                + self._side_text(cell.word_changes, "after")
            )
        return f"{cell.before}{CELL_CHANGE_ARROW}{cell.after}"

    def _iter_table(self, table: DiffTable) -> Iterator[str]:
        if table.headers:
            header = "   # | " + " | ".join(table.headers)
            yield f"{BOLD}{header}{RESET}" if self.use_color else header

        for row in table.rows:
            fields: list[str] = []
            for column, cell in enumerate(row.cells):
                if column in table.changed_columns:
                    fields.extend([cell.before, cell.after])
                else:
                    fields.append(self._cell_text(cell))
            marker = "*" if row.has_changes else " "
            text = f"{row.row_number:>3}{marker} | " + " | ".join(fields)
            yield f"{CYAN}{text}{RESET}" if self.use_color and row.has_changes else text
