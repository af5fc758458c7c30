"""Diff subsystem for SideDiff."""

from sidediffpack.diff.charlevel import char_segments, merge_runs
from sidediffpack.diff.engine import compute_diff
from sidediffpack.diff.exceptions import (
    DiffError,
    DiffInputError,
    DiffInputTooLargeError,
    DiffLimitsError,
)
from sidediffpack.diff.formatting import (
    render_diff_summary,
    render_no_changes,
    render_side_by_side,
)
from sidediffpack.diff.limits import DiffLimits, check_diff_limits

__all__ = [
    "compute_diff",
    "char_segments",
    "merge_runs",
    "DiffLimits",
    "check_diff_limits",
    "DiffError",
    "DiffInputError",
    "DiffInputTooLargeError",
    "DiffLimitsError",
    "render_diff_summary",
    "render_no_changes",
    "render_side_by_side",
]
