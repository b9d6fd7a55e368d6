#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for celldiff.

This module centralizes the literal types, default option values and label
templates used across the diff pipeline, the renderers and the CLI.

Constants are organized by category:
1. Type Definitions - Literal types shared by models and options
2. Diff Behavior - Defaults for DiffConfig fields
3. CSV Handling - Delimiter, quoting and header label settings
4. CLI - Config file discovery and environment variables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DiffMode = Literal["text", "csv"]
LineType = Literal["unchanged", "added", "removed"]
RunTag = Literal["kept", "removed", "added"]
OutputFormat = Literal["text", "json", "csv"]
ColorMode = Literal["auto", "always", "never"]

DIFF_MODES: tuple[str, ...] = ("text", "csv")
OUTPUT_FORMATS: tuple[str, ...] = ("text", "json", "csv")

# =============================================================================
# Diff Behavior
# =============================================================================

DEFAULT_DIFF_MODE: DiffMode = "text"
DEFAULT_HIDE_UNCHANGED_ROWS = False
DEFAULT_BEFORE_AFTER_COLUMN = False
DEFAULT_FIRST_ROW_IS_HEADER = False

# Upper bound on the LCS table built by the sequence aligner (rows x columns
# after trimming the common prefix and suffix). Larger inputs fall back to
# difflib.SequenceMatcher.
DEFAULT_MAX_ALIGNMENT_CELLS = 4_000_000

# =============================================================================
# CSV Handling
# =============================================================================

DEFAULT_CSV_DELIMITER = ","
CSV_QUOTE_CHAR = '"'
CSV_LINE_TERMINATOR = "\n"

COLUMN_LABEL_TEMPLATE = "Column {index}"
BEFORE_LABEL_SUFFIX = " Before"
AFTER_LABEL_SUFFIX = " After"

# =============================================================================
# Rendering
# =============================================================================

DEFAULT_JSON_INDENT = 2
CELL_CHANGE_ARROW = " → "

# =============================================================================
# CLI
# =============================================================================

CONFIG_ENV_VAR = "CELLDIFF_CONFIG"
CONFIG_FILENAMES = [
    ".celldiff.toml",
    ".celldiff.yaml",
    ".celldiff.yml",
    ".celldiff.json",
    "pyproject.toml",
]
PYPROJECT_TOOL_SECTION = "celldiff"
