"""Stable public API surface for SideDiff.

This module is the supported import path for library users.
"""

from __future__ import annotations

from pathlib import Path

from sidediffpack.core import DiffResult, DisplayLine, EditKind, Segment
from sidediffpack.diff import DiffLimits, check_diff_limits, compute_diff
from sidediffpack.explain import ExplainConfig, explain_differences

__version__ = "0.1.0"


def diff_files(
    left: str | Path,
    right: str | Path,
    *,
    encoding: str = "utf-8",
    limits: DiffLimits | None = None,
) -> DiffResult:
    """Read two text files and diff them side by side.

    Args:
        left: Path to the original text.
        right: Path to the modified text.
        encoding: Encoding used to read both files.
        limits: Size limits applied before diffing; defaults to ``DiffLimits()``.

    Returns:
        Side-by-side diff result.

    Raises:
        DiffInputTooLargeError: Either input exceeds ``limits``.
        OSError: Either file cannot be read.
        UnicodeDecodeError: Either file is not valid ``encoding`` text.
    """
    effective_limits = limits or DiffLimits()
    original = Path(left).read_text(encoding=encoding)
    modified = Path(right).read_text(encoding=encoding)
    check_diff_limits(original, modified, effective_limits)
    return compute_diff(original, modified, limits=effective_limits)


__all__ = [
    "__version__",
    "EditKind",
    "Segment",
    "DisplayLine",
    "DiffResult",
    "DiffLimits",
    "ExplainConfig",
    "compute_diff",
    "diff_files",
    "explain_differences",
]
