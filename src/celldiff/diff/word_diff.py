#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/word_diff.py
"""Word-level change detection inside a changed line or cell."""

from __future__ import annotations

import re
from typing import Optional

from celldiff.constants import DEFAULT_MAX_ALIGNMENT_CELLS
from celldiff.diff.aligner import align_sequences
from celldiff.diff.models import WordChange

# Words, whitespace runs, and single punctuation characters. Every character
# of the input belongs to exactly one token.
_WORD_TOKEN_RE = re.compile(r"\w+|\s+|[^\w\s]")


def tokenize_words(text: str) -> list[str]:
    """Split text into word, whitespace and punctuation tokens.

    Parameters
    ----------
    text : str
        Text to tokenize

    Returns
    -------
    list of str
        Tokens whose concatenation equals ``text``

    """
    return _WORD_TOKEN_RE.findall(text)


def _fold_whitespace_keeps(segments: list[list[str]]) -> list[list[str]]:
    """Merge change segments separated only by whitespace.

    ``segments`` holds ``["kept", text]`` and ``["change", removed, added]``
    entries. A whitespace-only kept segment between two changes is folded
    into both sides of a single change.
    """
    folded: list[list[str]] = []
    index = 0
    while index < len(segments):
        segment = segments[index]
        if (
            segment[0] == "kept"
            and segment[1].isspace()
            and folded
            and folded[-1][0] == "change"
            and index + 1 < len(segments)
            and segments[index + 1][0] == "change"
        ):
            following = segments[index + 1]
            previous = folded[-1]
            previous[1] = previous[1] + segment[1] + following[1]
            previous[2] = previous[2] + segment[1] + following[2]
            index += 2
            continue
        folded.append(list(segment))
        index += 1
    return folded


def compute_word_changes(
    before: str,
    after: str,
    *,
    max_cells: int = DEFAULT_MAX_ALIGNMENT_CELLS,
) -> list[WordChange]:
    """Compute word-level changes between two strings.

    Joining the values of all fragments that are not ``removed`` gives
    ``after``; joining those that are not ``added`` gives ``before``.

    Parameters
    ----------
    before : str
        Original string
    after : str
        Updated string
    max_cells : int, default DEFAULT_MAX_ALIGNMENT_CELLS
        Alignment size bound forwarded to the sequence aligner

    Returns
    -------
    list of WordChange
        Fragments in order; removals precede additions within a change.
        Identical inputs give one unchanged fragment holding the whole string.

    Examples
    --------
        >>> [(c.value, c.added, c.removed) for c in compute_word_changes("hello world", "hi world")]
        [('hello', False, True), ('hi', True, False), (' world', False, False)]

    """
    if before == after:
        return [WordChange(before)]

    runs = align_sequences(tokenize_words(before), tokenize_words(after), max_cells=max_cells)

    segments: list[list[str]] = []
    for run in runs:
        text = "".join(run.items)
        if run.tag == "kept":
            segments.append(["kept", text])
            continue
        if not segments or segments[-1][0] != "change":
            segments.append(["change", "", ""])
        if run.tag == "removed":
            segments[-1][1] += text
        else:
            segments[-1][2] += text

    changes: list[WordChange] = []
    for segment in _fold_whitespace_keeps(segments):
        if segment[0] == "kept":
            changes.append(WordChange(segment[1]))
            continue
        if segment[1]:
            changes.append(WordChange(segment[1], removed=True))
        if segment[2]:
            changes.append(WordChange(segment[2], added=True))
    return changes


def compute_cell_word_changes(
    before: Optional[str],
    after: Optional[str],
    *,
    max_cells: int = DEFAULT_MAX_ALIGNMENT_CELLS,
) -> list[WordChange]:
    """Compute word changes for a pair of cells, treating missing cells as empty."""
    return compute_word_changes(before or "", after or "", max_cells=max_cells)
