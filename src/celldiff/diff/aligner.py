#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/aligner.py
"""Generic LCS-based sequence alignment.

The aligner compares two ordered sequences of hashable items (lines, word
tokens, ...) and returns contiguous runs tagged ``kept``, ``removed`` or
``added``. Concatenating the removed and kept runs reconstructs the before
sequence; concatenating the added and kept runs reconstructs the after
sequence. Within a change region removals always precede additions.

The alignment is exact (minimal number of removed plus added items) as long
as the LCS table for the part between the common prefix and suffix fits in
``max_cells``. Beyond that the aligner falls back to
:class:`difflib.SequenceMatcher`, which keeps the reconstruction guarantees
but may report a few more changes than strictly necessary.
"""

from __future__ import annotations

import difflib
import logging
from dataclasses import dataclass
from typing import Hashable, Iterable, Iterator, Sequence

from celldiff.constants import DEFAULT_MAX_ALIGNMENT_CELLS, RunTag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlignedRun:
    """A contiguous run of items sharing one alignment tag."""

    tag: RunTag
    items: tuple

    def __len__(self) -> int:
        return len(self.items)


class _RunBuilder:
    """Collect tagged items, merging neighbours that share a tag."""

    def __init__(self) -> None:
        self._runs: list[tuple[RunTag, list]] = []

    def add(self, tag: RunTag, item: Hashable) -> None:
        if self._runs and self._runs[-1][0] == tag:
            self._runs[-1][1].append(item)
        else:
            self._runs.append((tag, [item]))

    def extend(self, tag: RunTag, items: Iterable[Hashable]) -> None:
        for item in items:
            self.add(tag, item)

    def build(self) -> list[AlignedRun]:
        return [AlignedRun(tag, tuple(items)) for tag, items in self._runs]


def _lcs_operations(before: Sequence[Hashable], after: Sequence[Hashable]) -> Iterator[tuple[RunTag, Hashable]]:
    """Yield an optimal edit script using a suffix LCS table.

    The forward walk takes a match as soon as one is available and prefers
    removing over adding when both keep the LCS length, which places
    removals first and anchors on the earliest matching alignment.
    """
    n, m = len(before), len(after)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row = table[i]
        below = table[i + 1]
        item = before[i]
        for j in range(m - 1, -1, -1):
            if item == after[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = below[j] if below[j] >= row[j + 1] else row[j + 1]

    i = j = 0
    while i < n and j < m:
        if before[i] == after[j]:
            yield "kept", before[i]
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            yield "removed", before[i]
            i += 1
        else:
            yield "added", after[j]
            j += 1

    for item in before[i:]:
        yield "removed", item
    for item in after[j:]:
        yield "added", item


def _matcher_operations(before: Sequence[Hashable], after: Sequence[Hashable]) -> Iterator[tuple[RunTag, Hashable]]:
    """Yield an edit script from difflib opcodes."""
    matcher = difflib.SequenceMatcher(None, before, after, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for item in before[i1:i2]:
                yield "kept", item
            continue
        if tag in ("delete", "replace"):
            for item in before[i1:i2]:
                yield "removed", item
        if tag in ("insert", "replace"):
            for item in after[j1:j2]:
                yield "added", item


def align_sequences(
    before: Sequence[Hashable],
    after: Sequence[Hashable],
    *,
    max_cells: int = DEFAULT_MAX_ALIGNMENT_CELLS,
) -> list[AlignedRun]:
    """Align two sequences into kept/removed/added runs.

    Parameters
    ----------
    before : sequence
        Original items
    after : sequence
        Updated items
    max_cells : int, default DEFAULT_MAX_ALIGNMENT_CELLS
        Largest LCS table to build for the differing middle section

    Returns
    -------
    list of AlignedRun
        Runs in order. Adjacent runs never share a tag.

    Examples
    --------
        >>> [(run.tag, run.items) for run in align_sequences("abc", "abd")]
        [('kept', ('a', 'b')), ('removed', ('c',)), ('added', ('d',))]

    """
    before = list(before)
    after = list(after)
    shortest = min(len(before), len(after))

    prefix = 0
    while prefix < shortest and before[prefix] == after[prefix]:
        prefix += 1

    suffix = 0
    while suffix < shortest - prefix and before[-1 - suffix] == after[-1 - suffix]:
        suffix += 1

    middle_before = before[prefix : len(before) - suffix]
    middle_after = after[prefix : len(after) - suffix]

    builder = _RunBuilder()
    builder.extend("kept", before[:prefix])

    if middle_before or middle_after:
        cells = (len(middle_before) + 1) * (len(middle_after) + 1)
        if middle_before and middle_after and cells > max_cells:
            logger.warning(
                "Alignment of %d x %d items exceeds %d cells; using heuristic matching",
                len(middle_before),
                len(middle_after),
                max_cells,
            )
            operations = _matcher_operations(middle_before, middle_after)
        else:
            operations = _lcs_operations(middle_before, middle_after)
        for tag, item in operations:
            builder.add(tag, item)

    builder.extend("kept", before[len(before) - suffix :])

    runs = builder.build()
    logger.debug(
        "Aligned %d before / %d after items into %d runs (prefix=%d, suffix=%d)",
        len(before),
        len(after),
        len(runs),
        prefix,
        suffix,
    )
    return runs
