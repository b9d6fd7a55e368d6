#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/renderers/__init__.py
"""Diff renderers for various output formats.

Available Renderers
-------------------
- JsonDiffRenderer: Structured JSON output for programmatic access
- TerminalDiffRenderer: Plain or ANSI-colored text for terminals and pipes
- RichDiffRenderer: Rich tables with word highlighting (needs ``rich``)

Examples
--------
Render a CSV diff as text:
    >>> from celldiff import DiffConfig, compute_diff
    >>> from celldiff.diff.renderers import TerminalDiffRenderer
    >>> table = compute_diff("a,b", "a,c", DiffConfig(mode="csv"))
    >>> print(TerminalDiffRenderer().render(table))
       # | Column 1 | Column 2
      1* | a | [-b-] → {+c+}

"""

from celldiff.diff.renderers.json import JsonDiffRenderer
from celldiff.diff.renderers.rich_table import RichDiffRenderer
from celldiff.diff.renderers.terminal import TerminalDiffRenderer

__all__ = [
    "JsonDiffRenderer",
    "RichDiffRenderer",
    "TerminalDiffRenderer",
]
