#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/text_diff.py
"""Line-level text comparison with word-level highlighting.

Lines are aligned with the LCS-based sequence aligner. A removed run that is
immediately followed by an added run is treated as a modification block: its
lines are paired positionally and each pair gets word-level changes, so the
renderer can highlight what changed inside the line.
"""

from __future__ import annotations

import logging
from typing import Sequence

from celldiff.diff.aligner import align_sequences
from celldiff.diff.models import DiffLine
from celldiff.diff.parsing import parse_text_to_lines
from celldiff.diff.word_diff import compute_word_changes
from celldiff.options import DiffConfig

logger = logging.getLogger(__name__)


class _LineDiffBuilder:
    """Walk aligned runs and emit numbered diff lines."""

    def __init__(self, config: DiffConfig) -> None:
        self.config = config
        self.lines: list[DiffLine] = []
        self.before_number = 0
        self.after_number = 0

    def emit_kept(self, items: Sequence[str]) -> None:
        for content in items:
            self.before_number += 1
            self.after_number += 1
            if not self.config.hide_unchanged_rows:
                self.lines.append(
                    DiffLine(
                        type="unchanged",
                        content=content,
                        before_line_number=self.before_number,
                        after_line_number=self.after_number,
                    )
                )

    def emit_removed(self, items: Sequence[str]) -> None:
        for content in items:
            self.before_number += 1
            self.lines.append(DiffLine(type="removed", content=content, before_line_number=self.before_number))

    def emit_added(self, items: Sequence[str]) -> None:
        for content in items:
            self.after_number += 1
            self.lines.append(DiffLine(type="added", content=content, after_line_number=self.after_number))

    def emit_modification(self, removed: Sequence[str], added: Sequence[str]) -> None:
        """Pair removed and added lines by position and attach word changes."""
        for index in range(max(len(removed), len(added))):
            has_before = index < len(removed)
            has_after = index < len(added)
            before_line = removed[index] if has_before else ""
            after_line = added[index] if has_after else ""
            word_changes = tuple(
                compute_word_changes(before_line, after_line, max_cells=self.config.max_alignment_cells)
            )

            if has_before:
                self.before_number += 1
                self.lines.append(
                    DiffLine(
                        type="removed",
                        content=before_line,
                        before_line_number=self.before_number,
                        word_changes=word_changes,
                    )
                )
            if has_after:
                self.after_number += 1
                self.lines.append(
                    DiffLine(
                        type="added",
                        content=after_line,
                        after_line_number=self.after_number,
                        word_changes=word_changes,
                    )
                )


def create_diff_lines(
    before_lines: Sequence[str],
    after_lines: Sequence[str],
    config: DiffConfig,
) -> list[DiffLine]:
    """Build annotated diff lines from two line sequences.

    Parameters
    ----------
    before_lines : sequence of str
        Lines of the original text
    after_lines : sequence of str
        Lines of the updated text
    config : DiffConfig
        Diff settings; ``hide_unchanged_rows`` suppresses unchanged lines

    Returns
    -------
    list of DiffLine
        Diff lines in output order. Before and after numbering are
        independent, 1-based and count hidden lines too.

    """
    runs = align_sequences(before_lines, after_lines, max_cells=config.max_alignment_cells)
    builder = _LineDiffBuilder(config)

    index = 0
    while index < len(runs):
        run = runs[index]
        if run.tag == "kept":
            builder.emit_kept(run.items)
        elif run.tag == "removed":
            following = runs[index + 1] if index + 1 < len(runs) else None
            if following is not None and following.tag == "added":
                builder.emit_modification(run.items, following.items)
                index += 1
            else:
                builder.emit_removed(run.items)
        else:
            builder.emit_added(run.items)
        index += 1

    logger.debug(
        "Built %d diff lines from %d before / %d after lines",
        len(builder.lines),
        len(before_lines),
        len(after_lines),
    )
    return builder.lines


def compute_text_diff(before_text: str, after_text: str, config: DiffConfig) -> list[DiffLine]:
    """Parse two texts into lines and diff them.

    Examples
    --------
        >>> lines = compute_text_diff("line1\\nline2\\nline3", "line1\\nchanged\\nline3", DiffConfig())
        >>> [(line.type, line.content) for line in lines]
        [('unchanged', 'line1'), ('removed', 'line2'), ('added', 'changed'), ('unchanged', 'line3')]

    """
    before_lines = parse_text_to_lines(before_text)
    after_lines = parse_text_to_lines(after_text)
    return create_diff_lines(before_lines, after_lines, config)
