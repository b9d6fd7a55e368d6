#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/renderers/rich_table.py
"""Rich terminal renderer.

Renders line diffs and table diffs as :class:`rich.table.Table` objects with
word-level highlighting. Requires the optional ``rich`` dependency; callers
should check availability first (see :func:`celldiff.cli.output.check_rich_available`).
"""

from __future__ import annotations

from typing import Any, Iterable, List, Union

from celldiff.diff.models import DiffCell, DiffLine, DiffTable, WordChange

_LINE_STYLES = {"unchanged": "", "removed": "red", "added": "green"}
_MARKERS = {"unchanged": " ", "removed": "-", "added": "+"}


class RichDiffRenderer:
    """Render diff results as rich tables.

    Parameters
    ----------
    show_word_changes : bool, default = True
        If True, highlight changed words inside modified lines and cells
    title : str, optional
        Table title

    """

    def __init__(self, show_word_changes: bool = True, title: str | None = None):
        """Initialize the rich renderer."""
        self.show_word_changes = show_word_changes
        self.title = title

    def _side_text(self, changes: Iterable[WordChange], side: str, base_style: str) -> Any:
        from rich.text import Text

        text = Text(style=base_style)
        for change in changes:
            if side == "before" and not change.added:
                text.append(change.value, style="bold reverse red" if change.removed else None)
            elif side == "after" and not change.removed:
                text.append(change.value, style="bold reverse green" if change.added else None)
        return text

    def build_line_table(self, lines: Iterable[DiffLine]) -> Any:
        """Build a table with one row per diff line."""
        from rich.table import Table
        from rich.text import Text

        table = Table(title=self.title, show_header=True, header_style="bold", box=None, pad_edge=False)
        table.add_column("Before", justify="right", style="dim", no_wrap=True)
        table.add_column("After", justify="right", style="dim", no_wrap=True)
        table.add_column("", no_wrap=True)
        table.add_column("Content", overflow="fold")

        for line in lines:
            style = _LINE_STYLES[line.type]
            if self.show_word_changes and line.word_changes:
                content = self._side_text(line.word_changes, "before" if line.type == "removed" else "after", style)
            else:
                content = Text(line.content, style=style)
            table.add_row(
                str(line.before_line_number) if line.before_line_number is not None else "",
                str(line.after_line_number) if line.after_line_number is not None else "",
                Text(_MARKERS[line.type], style=style),
                content,
            )
        return table

    def _cell_renderable(self, cell: DiffCell) -> Any:
        from rich.text import Text

        if not cell.has_change:
            return Text(cell.after)
        if self.show_word_changes and cell.word_changes:
            text = self._side_text(cell.word_changes, "before", "red")
            text.append(" → ")
            text.append_text(self._side_text(cell.word_changes, "after", "green"))
            return text
        return Text(f"{cell.before} → {cell.after}", style="yellow")

    def build_diff_table(self, diff_table: DiffTable) -> Any:
        """Build a table mirroring the diff table's headers and rows."""
        from rich.table import Table
        from rich.text import Text

        table = Table(title=self.title, show_header=bool(diff_table.headers), header_style="bold cyan")
        table.add_column("#", justify="right", style="dim", no_wrap=True)
        for header in diff_table.headers:
            table.add_column(header, overflow="fold")

        for row in diff_table.rows:
            cells: list[Any] = []
            for column, cell in enumerate(row.cells):
                if column in diff_table.changed_columns:
                    cells.append(Text(cell.before, style="red" if cell.has_change else ""))
                    cells.append(Text(cell.after, style="green" if cell.has_change else ""))
                else:
                    cells.append(self._cell_renderable(cell))
            table.add_row(str(row.row_number), *cells, style="on grey11" if row.has_changes else None)
        return table

    def render(self, result: Union[List[DiffLine], DiffTable], console: Any) -> None:
        """Print a diff result to a rich console.

        Parameters
        ----------
        result : list of DiffLine or DiffTable
            Diff result
        console : rich.console.Console
            Target console

        """
        if isinstance(result, DiffTable):
            console.print(self.build_diff_table(result))
        else:
            console.print(self.build_line_table(result))
