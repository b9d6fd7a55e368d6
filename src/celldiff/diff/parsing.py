#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/diff/parsing.py
"""Split raw text into comparable units.

Text is split into lines; delimited text is split into rows of cells. The
CSV reader follows RFC 4180 quoting: a field that starts with a double quote
may contain the delimiter, line breaks and doubled quotes (``""`` for one
literal quote). Unlike :mod:`csv`, the reader never raises: stray carriage
returns, NUL characters and unbalanced quotes are kept as cell content.
"""

from __future__ import annotations

import logging

from celldiff.constants import CSV_QUOTE_CHAR, DEFAULT_CSV_DELIMITER
from celldiff.diff.models import CSVRow

logger = logging.getLogger(__name__)


def parse_text_to_lines(text: str) -> list[str]:
    """Split text on newlines.

    An empty string yields a single empty line and a trailing newline yields
    a trailing empty line, so ``"a\\n"`` becomes ``["a", ""]``.

    Parameters
    ----------
    text : str
        Raw text

    Returns
    -------
    list of str
        Lines without their terminators

    """
    return text.split("\n")


def _scan_fields(line: str, delimiter: str) -> tuple[list[str], bool]:
    """Split one record into fields.

    Returns the fields and whether the record ended inside a quoted field.
    """
    fields: list[str] = []
    buffer: list[str] = []
    in_quotes = False
    field_start = True
    index = 0
    length = len(line)

    while index < length:
        char = line[index]
        if in_quotes:
            if char == CSV_QUOTE_CHAR:
                if index + 1 < length and line[index + 1] == CSV_QUOTE_CHAR:
                    buffer.append(CSV_QUOTE_CHAR)
                    index += 2
                    continue
                in_quotes = False
            else:
                buffer.append(char)
        elif char == delimiter:
            fields.append("".join(buffer))
            buffer = []
            field_start = True
            index += 1
            continue
        elif char == CSV_QUOTE_CHAR and field_start:
            in_quotes = True
        else:
            buffer.append(char)
        field_start = False
        index += 1

    fields.append("".join(buffer))
    return fields, in_quotes


def parse_csv_line(line: str, delimiter: str = DEFAULT_CSV_DELIMITER) -> CSVRow:
    """Parse a single CSV record into cells.

    Parameters
    ----------
    line : str
        One logical record (may contain quoted line breaks)
    delimiter : str, default ","
        Field delimiter

    Returns
    -------
    list of str
        Cell values with syntactic quotes removed. An empty record yields an
        empty row.

    Examples
    --------
        >>> parse_csv_line('"a, b",c')
        ['a, b', 'c']
        >>> parse_csv_line("'x',y")
        ["'x'", 'y']

    """
    if not line:
        return []
    fields, _ = _scan_fields(line, delimiter)
    return fields


def parse_csv_to_rows(text: str, delimiter: str = DEFAULT_CSV_DELIMITER) -> list[CSVRow]:
    """Parse delimited text into rows of cells.

    The text is split into physical lines (a trailing carriage return is
    dropped from each). A physical line that leaves a quoted field open is
    joined with the following lines until the quote closes, so quoted line
    breaks stay inside their cell.

    If the input ends while a quote is still open, the quote is treated as
    stray: the line that opened it becomes a row on its own and reading
    resumes at the next physical line.

    Parameters
    ----------
    text : str
        Raw delimited text
    delimiter : str, default ","
        Field delimiter

    Returns
    -------
    list of list of str
        One row per record. Empty lines produce empty rows.

    """
    lines = [physical[:-1] if physical.endswith("\r") else physical for physical in text.split("\n")]
    rows: list[CSVRow] = []
    start = 0

    while start < len(lines):
        record = lines[start]
        end = start
        fields, open_quote = _scan_fields(record, delimiter)
        while open_quote and end + 1 < len(lines):
            end += 1
            record = f"{record}\n{lines[end]}"
            fields, open_quote = _scan_fields(record, delimiter)

        if open_quote:
            logger.debug("Unterminated quoted field on line %d; reading it as a single line", start + 1)
            rows.append(parse_csv_line(lines[start], delimiter))
            start += 1
            continue

        rows.append(fields if record else [])
        start = end + 1

    return rows


def strip_formatting_quotes(value: str, delimiter: str = DEFAULT_CSV_DELIMITER) -> str:
    """Remove quotes that only exist to satisfy CSV escaping.

    A value wrapped in double quotes is unwrapped when its interior contains
    no delimiter, line break or quote. Otherwise the quotes were needed and
    the value is returned unchanged.

    Values returned by :func:`parse_csv_to_rows` are already unquoted; this
    is for raw field text that did not come through the reader.

    Parameters
    ----------
    value : str
        Cell value or header label
    delimiter : str, default ","
        Field delimiter

    Returns
    -------
    str
        The value without formatting-only quotes

    """
    if len(value) < 2 or not (value.startswith(CSV_QUOTE_CHAR) and value.endswith(CSV_QUOTE_CHAR)):
        return value
    interior = value[1:-1]
    if any(char in interior for char in (delimiter, "\n", "\r", CSV_QUOTE_CHAR)):
        return value
    return interior
