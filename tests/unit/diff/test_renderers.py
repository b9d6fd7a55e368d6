"""Unit tests for the diff renderers."""

import io
import json

import pytest

from celldiff import DiffConfig, compute_diff
from celldiff.diff.renderers import JsonDiffRenderer, RichDiffRenderer, TerminalDiffRenderer
from celldiff.diff.renderers.terminal import GREEN, RED, RESET, REVERSE

BEFORE_CSV = "Name,Value\nA,1\nB,2"
AFTER_CSV = "Name,Value\nA,1\nB,3"


@pytest.mark.unit
class TestTerminalDiffRenderer:
    """Tests for TerminalDiffRenderer."""

    def test_line_diff(self, text_config):
        """Test numbered lines with markers."""
        lines = compute_diff("keep\nold\nkeep", "keep\nnew\nkeep", text_config)
        assert TerminalDiffRenderer().render(lines).splitlines() == [
            "   1    1   keep",
            "   2      - [-old-]",
            "        2 + {+new+}",
            "   3    3   keep",
        ]

    def test_without_word_changes(self, text_config):
        """Test plain content when word marks are disabled."""
        lines = compute_diff("a b", "a c", text_config)
        output = TerminalDiffRenderer(show_word_changes=False).render(lines)
        assert output.splitlines() == ["   1      - a b", "        1 + a c"]

    def test_colored_line_diff(self, text_config):
        """Test ANSI colors for removed and added lines."""
        lines = compute_diff("a b", "a c", text_config)
        removed, added = TerminalDiffRenderer(use_color=True).render(lines).splitlines()
        assert removed.startswith(RED)
        assert added.startswith(GREEN)
        assert f"{REVERSE}b{RESET}" in removed
        assert f"{REVERSE}c{RESET}" in added

    def test_table(self):
        """Test the pipe-separated table layout."""
        config = DiffConfig(mode="csv", first_row_is_header=True)
        table = compute_diff(BEFORE_CSV, AFTER_CSV, config)
        assert TerminalDiffRenderer().render(table).splitlines() == [
            "   # | Name | Value",
            "  2  | A | 1",
            "  3* | B | [-2-] → {+3+}",
        ]

    def test_table_with_before_after_columns(self):
        """Test that expanded columns print both values."""
        config = DiffConfig(mode="csv", first_row_is_header=True, before_after_column=True)
        table = compute_diff(BEFORE_CSV, AFTER_CSV, config)
        assert TerminalDiffRenderer().render(table).splitlines() == [
            "   # | Name | Value Before | Value After",
            "  2  | A | 1 | 1",
            "  3* | B | 2 | 3",
        ]

    def test_empty_line_diff(self):
        """Test rendering an empty result."""
        assert TerminalDiffRenderer().render([]) == ""


@pytest.mark.unit
class TestJsonDiffRenderer:
    """Tests for JsonDiffRenderer."""

    def test_line_diff_payload(self, text_config):
        """Test the JSON structure of a line diff."""
        lines = compute_diff("a\nb", "a\nc", text_config)
        data = json.loads(JsonDiffRenderer().render(lines, text_config))

        assert data["type"] == "line_diff"
        assert data["config"]["mode"] == "text"
        assert data["statistics"] == {"lines_added": 1, "lines_removed": 1, "lines_unchanged": 1, "total_changes": 2}
        assert data["lines"][1] == {
            "type": "removed",
            "content": "b",
            "before_line_number": 2,
            "word_changes": [
                {"value": "b", "added": False, "removed": True},
                {"value": "c", "added": True, "removed": False},
            ],
        }

    def test_table_payload(self):
        """Test the JSON structure of a table diff."""
        config = DiffConfig(mode="csv", first_row_is_header=True, before_after_column=True)
        data = JsonDiffRenderer().build_payload(compute_diff(BEFORE_CSV, AFTER_CSV, config), config)

        assert data["type"] == "table_diff"
        assert data["headers"] == ["Name", "Value Before", "Value After"]
        assert data["changed_columns"] == [1]
        assert data["rows"][1]["row_number"] == 3
        assert data["rows"][1]["cells"][1]["has_change"] is True

    def test_compact_output(self, text_config):
        """Test output without indentation."""
        output = JsonDiffRenderer(pretty_print=False).render(compute_diff("a", "a", text_config), text_config)
        assert "\n" not in output

    def test_non_ascii_is_kept(self, text_config):
        """Test that non-ASCII text is written as is."""
        output = JsonDiffRenderer().render(compute_diff("café", "cafés", text_config), text_config)
        assert "café" in output


@pytest.mark.unit
class TestRichDiffRenderer:
    """Tests for RichDiffRenderer."""

    @pytest.fixture(autouse=True)
    def _require_rich(self):
        pytest.importorskip("rich")

    def _render(self, result) -> str:
        from rich.console import Console

        console = Console(file=io.StringIO(), width=120, color_system=None)
        RichDiffRenderer().render(result, console)
        return console.file.getvalue()

    def test_line_table(self, text_config):
        """Test the line table contents."""
        lines = compute_diff("keep\nold", "keep\nnew", text_config)
        table = RichDiffRenderer().build_line_table(lines)
        assert table.row_count == 3

        output = self._render(lines)
        assert "old" in output
        assert "new" in output

    def test_diff_table(self):
        """Test the table contents for a CSV diff."""
        config = DiffConfig(mode="csv", first_row_is_header=True, before_after_column=True)
        result = compute_diff(BEFORE_CSV, AFTER_CSV, config)
        table = RichDiffRenderer(title="Changes").build_diff_table(result)

        assert table.row_count == 2
        assert [column.header for column in table.columns] == ["#", "Name", "Value Before", "Value After"]
        assert "Value After" in self._render(result)
