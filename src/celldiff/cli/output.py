"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/celldiff/cli/output.py
import argparse
import sys
from typing import TextIO

from celldiff.constants import ColorMode
from celldiff.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def _stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def should_use_rich_output(args: argparse.Namespace, raise_on_missing: bool = False) -> bool:
    """Determine if Rich output should be used.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when the --rich flag is set, the output is not
    redirected to a file, and the Rich library is available.

    """
    if not args.rich or args.output:
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                feature_name="Rich output",
                missing_packages=[("rich", "")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install celldiff[rich]",
            )
        return False

    return True


def should_use_color(color: ColorMode, writing_to_file: bool, stream: TextIO | None = None) -> bool:
    """Decide whether to emit ANSI colors.

    ``always`` and ``never`` are honored as given. ``auto`` colors only when
    writing to a terminal.
    """
    if color == "always":
        return True
    if color == "never" or writing_to_file:
        return False
    return _stream_is_tty(stream or sys.stdout)
