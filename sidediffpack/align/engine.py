"""Longest-common-subsequence aligner shared by the line and character phases."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sidediffpack.core.models import EditToken

LcsTable = list[list[int]]


def align_sequences(original: Sequence[Any], modified: Sequence[Any]) -> list[EditToken]:
    """Return the minimal edit script turning ``original`` into ``modified``.

    Tokens are compared by equality only. Every element of ``original``
    appears exactly once as ``equal`` or ``delete`` and every element of
    ``modified`` exactly once as ``equal`` or ``insert``, in forward order.
    """
    table = build_lcs_table(original, modified)
    return backtrack(table, original, modified)


def build_lcs_table(original: Sequence[Any], modified: Sequence[Any]) -> LcsTable:
    """Build the ``(n+1) x (m+1)`` table of prefix LCS lengths."""
    n = len(original)
    m = len(modified)
    table: LcsTable = [[0] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        row = table[i]
        above = table[i - 1]
        token = original[i - 1]
        for j in range(1, m + 1):
            if token == modified[j - 1]:
                row[j] = above[j - 1] + 1
            elif above[j] >= row[j - 1]:
                row[j] = above[j]
            else:
                row[j] = row[j - 1]

    return table


def lcs_length(original: Sequence[Any], modified: Sequence[Any]) -> int:
    return build_lcs_table(original, modified)[len(original)][len(modified)]


def backtrack(
    table: LcsTable,
    original: Sequence[Any],
    modified: Sequence[Any],
) -> list[EditToken]:
    """Walk ``table`` from the bottom-right corner back to the origin.

    On a tie between dropping a row and dropping a column, the insert is
    taken first, so in forward order deletions precede insertions.
    """
    i = len(original)
    j = len(modified)
    tokens: list[EditToken] = []

    while i > 0 or j > 0:
        if i > 0 and j > 0 and original[i - 1] == modified[j - 1]:
            tokens.append(
                EditToken("equal", original[i - 1], original_index=i - 1, modified_index=j - 1)
            )
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            tokens.append(EditToken("insert", modified[j - 1], modified_index=j - 1))
            j -= 1
        else:
            tokens.append(EditToken("delete", original[i - 1], original_index=i - 1))
            i -= 1

    tokens.reverse()
    return tokens
