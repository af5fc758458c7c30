"""Caller-side size policy for the quadratic diff tables."""

from __future__ import annotations

from dataclasses import dataclass

from sidediffpack.core.lines import split_lines
from sidediffpack.diff.exceptions import DiffInputTooLargeError, DiffLimitsError

DEFAULT_MAX_LINES = 20_000
DEFAULT_MAX_LINE_CELLS = 25_000_000
DEFAULT_MAX_CHAR_CELLS = 4_000_000


@dataclass(slots=True)
class DiffLimits:
    """Upper bounds on input size; ``None`` disables a bound."""

    max_lines: int | None = DEFAULT_MAX_LINES
    max_line_cells: int | None = DEFAULT_MAX_LINE_CELLS
    max_char_cells: int | None = DEFAULT_MAX_CHAR_CELLS

    def __post_init__(self) -> None:
        for name in ("max_lines", "max_line_cells", "max_char_cells"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise DiffLimitsError(f"{name} must be a non-negative integer or None")


def check_diff_limits(original: str, modified: str, limits: DiffLimits | None = None) -> None:
    """Raise ``DiffInputTooLargeError`` when inputs exceed ``limits``."""
    effective = limits or DiffLimits()
    original_count = len(split_lines(original))
    modified_count = len(split_lines(modified))

    if effective.max_lines is not None:
        for label, count in (("original", original_count), ("modified", modified_count)):
            if count > effective.max_lines:
                raise DiffInputTooLargeError(
                    f"{label} text has {count} lines; limit is {effective.max_lines}. "
                    "Raise max_lines to diff larger inputs."
                )

    if effective.max_line_cells is not None:
        cells = original_count * modified_count
        if cells > effective.max_line_cells:
            raise DiffInputTooLargeError(
                f"line table would need {cells} cells; limit is {effective.max_line_cells}."
            )
