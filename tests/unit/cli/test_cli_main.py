"""Unit tests for the celldiff command line entry point.

The CLI is exercised in-process through ``main()`` so stdout, stderr and
exit codes can be inspected with pytest's capture fixtures.
"""

import io
import json

import pytest
from utils import write_input

from celldiff.cli import (
    EXIT_DIFFERENCES_FOUND,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    main,
)
from celldiff.constants import CONFIG_ENV_VAR


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run from an empty directory with no config environment variable."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return tmp_path


@pytest.fixture
def text_files(isolated):
    """Write a before/after text pair."""
    before = write_input(isolated, "before.txt", "line1\nline2\nline3")
    after = write_input(isolated, "after.txt", "line1\nchanged\nline3")
    return str(before), str(after)


@pytest.fixture
def csv_files(isolated):
    """Write a before/after CSV pair."""
    before = write_input(isolated, "before.csv", "Name,Value\nA,1\nB,2\n")
    after = write_input(isolated, "after.csv", "Name,Value\nA,1\nB,3\n")
    return str(before), str(after)


@pytest.mark.unit
@pytest.mark.cli
class TestCreateParser:
    """Tests for the argument parser."""

    def test_unset_flags_are_none(self):
        """Test that diff flags default to None so config files apply."""
        parsed = create_parser().parse_args(["a", "b"])
        assert parsed.mode is None
        assert parsed.hide_unchanged_rows is None
        assert parsed.before_after_column is None
        assert parsed.first_row_is_header is None
        assert parsed.delimiter is None
        assert parsed.format == "text"

    def test_flags_set_values(self):
        """Test that flags map onto config field names."""
        parsed = create_parser().parse_args(
            ["a", "b", "--mode", "csv", "--hide-unchanged", "--before-after-columns", "--header", "-d", ";"]
        )
        assert parsed.mode == "csv"
        assert parsed.hide_unchanged_rows is True
        assert parsed.before_after_column is True
        assert parsed.first_row_is_header is True
        assert parsed.delimiter == ";"


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Tests for main()."""

    def test_text_diff(self, text_files, capsys):
        """Test the default text output."""
        assert main([*text_files, "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines() == [
            "   1    1   line1",
            "   2      - [-line2-]",
            "        2 + {+changed+}",
            "   3    3   line3",
        ]

    def test_csv_diff(self, csv_files, capsys):
        """Test the CSV table output."""
        assert main([*csv_files, "--no-config", "--mode", "csv", "--header", "--hide-unchanged"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines() == ["   # | Name | Value", "  3* | B | [-2-] → {+3+}"]

    def test_json_output(self, text_files, capsys):
        """Test structured JSON output."""
        assert main([*text_files, "--no-config", "--format", "json"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["type"] == "line_diff"
        assert data["statistics"]["total_changes"] == 2

    def test_csv_export(self, csv_files, capsys):
        """Test quoted CSV export with before/after columns."""
        args = [*csv_files, "--no-config", "-m", "csv", "--header", "--before-after-columns", "-f", "csv"]
        assert main(args) == EXIT_SUCCESS
        assert capsys.readouterr().out == '"Name","Value Before","Value After"\n"A","1","1"\n"B","2","3"\n'

    def test_csv_export_requires_csv_mode(self, text_files, capsys):
        """Test that CSV export of a text diff is a validation error."""
        assert main([*text_files, "--no-config", "--format", "csv"]) == EXIT_VALIDATION_ERROR
        assert "--format csv requires --mode csv" in capsys.readouterr().err

    def test_output_file(self, text_files, isolated, capsys):
        """Test writing the diff to a file."""
        output = isolated / "diff.txt"
        assert main([*text_files, "--no-config", "-o", str(output)]) == EXIT_SUCCESS
        assert "{+changed+}" in output.read_text(encoding="utf-8")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Diff written to" in captured.err

    def test_exit_code_with_differences(self, text_files):
        """Test the differences-found exit status."""
        assert main([*text_files, "--no-config", "--exit-code"]) == EXIT_DIFFERENCES_FOUND

    def test_exit_code_without_differences(self, text_files, capsys):
        """Test identical files with --exit-code."""
        before, _ = text_files
        assert main([before, before, "--no-config", "--exit-code"]) == EXIT_SUCCESS
        assert "No differences found." in capsys.readouterr().err

    def test_stats(self, text_files, capsys):
        """Test the summary printed to stderr."""
        assert main([*text_files, "--no-config", "--stats"]) == EXIT_SUCCESS
        assert "1 line(s) added, 1 removed, 2 unchanged" in capsys.readouterr().err

    def test_csv_stats(self, csv_files, capsys):
        """Test the table summary printed to stderr."""
        assert main([*csv_files, "--no-config", "--mode", "csv", "--header", "--stats"]) == EXIT_SUCCESS
        assert "1 row(s) changed, 1 unchanged, 1 cell(s) changed" in capsys.readouterr().err

    def test_stdin_input(self, text_files, monkeypatch, capsys):
        """Test reading the after side from stdin."""
        before, _ = text_files
        monkeypatch.setattr("sys.stdin", io.StringIO("line1\nline2\nline3\nline4"))
        assert main([before, "-", "--no-config"]) == EXIT_SUCCESS
        assert "        4 + line4" in capsys.readouterr().out

    def test_both_sides_stdin(self, isolated, capsys):
        """Test that stdin cannot be used for both sides."""
        assert main(["-", "-", "--no-config"]) == EXIT_FILE_ERROR
        assert "stdin" in capsys.readouterr().err

    def test_missing_file(self, isolated, capsys):
        """Test the file error exit status."""
        assert main(["missing.txt", "other.txt", "--no-config"]) == EXIT_FILE_ERROR
        assert "File not found" in capsys.readouterr().err

    def test_invalid_delimiter(self, csv_files, capsys):
        """Test that an invalid delimiter is a validation error."""
        assert main([*csv_files, "--no-config", "--mode", "csv", "--delimiter", ";;"]) == EXIT_VALIDATION_ERROR
        assert "delimiter" in capsys.readouterr().err

    def test_argparse_error(self, isolated):
        """Test that argument errors return argparse's status."""
        assert main(["a", "b", "--mode", "xml"]) == 2

    def test_explicit_config_file(self, csv_files, isolated, capsys):
        """Test settings from a config file given with --config."""
        config = isolated / "settings.yaml"
        config.write_text("mode: csv\nfirst-row-is-header: true\nhide-unchanged-rows: true\n", encoding="utf-8")
        assert main([*csv_files, "--config", str(config)]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines()[0] == "   # | Name | Value"

    def test_discovered_config_file(self, csv_files, isolated, capsys):
        """Test settings from a config file in the working directory."""
        (isolated / ".celldiff.toml").write_text('mode = "csv"\nfirst_row_is_header = true\n', encoding="utf-8")
        assert main(list(csv_files)) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines()[0] == "   # | Name | Value"

    def test_env_config_file(self, csv_files, isolated, monkeypatch, capsys):
        """Test settings from the config environment variable."""
        config = isolated / "env.json"
        config.write_text(json.dumps({"mode": "csv"}), encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
        assert main(list(csv_files)) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines()[0] == "   # | Column 1 | Column 2"

    def test_flag_overrides_config_file(self, csv_files, isolated, capsys):
        """Test that command line flags win over config values."""
        (isolated / ".celldiff.json").write_text(json.dumps({"mode": "csv"}), encoding="utf-8")
        assert main([*csv_files, "--mode", "text"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines()[0] == "   1    1   Name,Value"

    def test_no_config_ignores_discovered_file(self, csv_files, isolated, capsys):
        """Test that --no-config skips discovery."""
        (isolated / ".celldiff.json").write_text(json.dumps({"mode": "csv"}), encoding="utf-8")
        assert main([*csv_files, "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines()[0] == "   1    1   Name,Value"

    def test_invalid_config_file(self, text_files, isolated, capsys):
        """Test that a broken config file is a validation error."""
        config = isolated / "broken.toml"
        config.write_text("mode = ", encoding="utf-8")
        assert main([*text_files, "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "Invalid TOML" in capsys.readouterr().err

    def test_config_file_with_wrong_value_types(self, csv_files, isolated, capsys):
        """Test that a string where a number is expected is a validation error."""
        config = isolated / "settings.yaml"
        config.write_text('mode: csv\nmax-alignment-cells: "big"\n', encoding="utf-8")
        assert main([*csv_files, "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "max_alignment_cells" in capsys.readouterr().err

    def test_config_file_with_quoted_boolean(self, csv_files, isolated, capsys):
        """Test that a quoted boolean in a config file is rejected."""
        config = isolated / "settings.yaml"
        config.write_text('mode: csv\nhide-unchanged-rows: "false"\n', encoding="utf-8")
        assert main([*csv_files, "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "hide_unchanged_rows" in capsys.readouterr().err

    def test_color_always(self, text_files, capsys):
        """Test forced ANSI colors."""
        assert main([*text_files, "--no-config", "--color", "always"]) == EXIT_SUCCESS
        assert "\033[31m" in capsys.readouterr().out

    def test_rich_output(self, text_files, capsys):
        """Test rich table output."""
        pytest.importorskip("rich")
        assert main([*text_files, "--no-config", "--rich"]) == EXIT_SUCCESS
        output = capsys.readouterr().out
        assert "line2" in output
        assert "changed" in output

    def test_log_file(self, text_files, isolated):
        """Test that --log-file receives log records."""
        log_file = isolated / "celldiff.log"
        assert main([*text_files, "--no-config", "--log-level", "DEBUG", "--log-file", str(log_file)]) == EXIT_SUCCESS
        assert "Computing text diff" in log_file.read_text(encoding="utf-8")

    def test_trace_log_file_gets_debug_records(self, text_files, isolated, capsys):
        """Test that --trace sends DEBUG records to the log file only."""
        log_file = isolated / "trace.log"
        assert main([*text_files, "--no-config", "--trace", "--log-file", str(log_file)]) == EXIT_SUCCESS
        assert "Computing text diff" in log_file.read_text(encoding="utf-8")
        assert "Computing text diff" not in capsys.readouterr().err
