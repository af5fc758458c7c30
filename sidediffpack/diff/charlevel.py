"""Character-level sub-alignment for replaced lines."""

from __future__ import annotations

from collections.abc import Iterable

from sidediffpack.align.engine import align_sequences
from sidediffpack.core.models import Segment

Parts = tuple[Segment, ...]


def char_segments(
    old_line: str,
    new_line: str,
    *,
    max_cells: int | None = None,
) -> tuple[Parts, Parts]:
    """Return ``(original_parts, modified_parts)`` for a replaced line pair.

    Original parts keep ``equal`` and ``delete`` runs, modified parts keep
    ``equal`` and ``insert`` runs. Comparison is per code point.
    When ``len(old_line) * len(new_line)`` exceeds ``max_cells`` each side
    becomes a single whole-line segment instead.
    """
    if max_cells is not None and len(old_line) * len(new_line) > max_cells:
        return _whole_line_parts(old_line, new_line)

    tokens = align_sequences(old_line, new_line)
    original_parts = merge_runs(
        Segment(token.kind, token.value) for token in tokens if token.kind != "insert"
    )
    modified_parts = merge_runs(
        Segment(token.kind, token.value) for token in tokens if token.kind != "delete"
    )
    return original_parts, modified_parts


def merge_runs(segments: Iterable[Segment]) -> Parts:
    """Collapse adjacent segments of the same kind into one."""
    merged: list[Segment] = []
    pending_kind: str | None = None
    pending: list[str] = []

    for segment in segments:
        if segment.kind == pending_kind:
            pending.append(segment.content)
            continue
        if pending_kind is not None:
            merged.append(Segment(pending_kind, "".join(pending)))
        pending_kind = segment.kind
        pending = [segment.content]

    if pending_kind is not None:
        merged.append(Segment(pending_kind, "".join(pending)))
    return tuple(merged)


def _whole_line_parts(old_line: str, new_line: str) -> tuple[Parts, Parts]:
    original_parts = (Segment("delete", old_line),) if old_line else ()
    modified_parts = (Segment("insert", new_line),) if new_line else ()
    return original_parts, modified_parts
