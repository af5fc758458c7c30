"""Sequence alignment for SideDiff."""

from sidediffpack.align.engine import align_sequences, backtrack, build_lcs_table, lcs_length

__all__ = [
    "align_sequences",
    "backtrack",
    "build_lcs_table",
    "lcs_length",
]
