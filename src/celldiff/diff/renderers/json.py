#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/renderers/json.py
"""JSON diff renderer for structured output.

This renderer serializes diff lines or a diff table, together with summary
statistics and the settings used, into machine-readable JSON.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Union

from celldiff.constants import DEFAULT_JSON_INDENT
from celldiff.diff.models import DiffLine, DiffTable
from celldiff.options import DiffConfig


class JsonDiffRenderer:
    """Render a diff result as structured JSON.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)

    Examples
    --------
    Render a line diff:
        >>> from celldiff import DiffConfig, compute_diff
        >>> from celldiff.diff.renderers import JsonDiffRenderer
        >>> config = DiffConfig()
        >>> output = JsonDiffRenderer().render(compute_diff("a", "b", config), config)

    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = DEFAULT_JSON_INDENT,
    ):
        """Initialize the JSON diff renderer."""
        self.pretty_print = pretty_print
        self.indent = indent

    def build_payload(self, result: Union[List[DiffLine], DiffTable], config: DiffConfig) -> Dict[str, Any]:
        """Build the JSON-ready dictionary for a result."""
        from celldiff.diff.api import compute_stats

        payload: Dict[str, Any] = {
            "type": "table_diff" if isinstance(result, DiffTable) else "line_diff",
            "config": config.to_dict(),
            "statistics": compute_stats(result).to_dict(),
        }
        if isinstance(result, DiffTable):
            payload.update(result.to_dict())
        else:
            payload["lines"] = [line.to_dict() for line in result]
        return payload

    def render(self, result: Union[List[DiffLine], DiffTable], config: DiffConfig) -> str:
        """Render a diff result to a JSON string.

        Parameters
        ----------
        result : list of DiffLine or DiffTable
            Diff result
        config : DiffConfig
            Settings the result was built with

        Returns
        -------
        str
            JSON-formatted diff output

        """
        payload = self.build_payload(result, config)
        if self.pretty_print:
            return json.dumps(payload, indent=self.indent, ensure_ascii=False)
        return json.dumps(payload, ensure_ascii=False)
