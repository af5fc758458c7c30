"""Core models and tokenization primitives for SideDiff."""

from sidediffpack.core.lines import split_lines
from sidediffpack.core.models import DiffResult, DisplayLine, EditToken, Segment
from sidediffpack.core.types import ALIGN_KINDS, EDIT_KINDS, EditKind

__all__ = [
    "DiffResult",
    "DisplayLine",
    "EditToken",
    "Segment",
    "EditKind",
    "EDIT_KINDS",
    "ALIGN_KINDS",
    "split_lines",
]
