"""Core data models for SideDiff edit scripts and side-by-side results."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from sidediffpack.core.types import ALIGN_KINDS, EDIT_KINDS


@dataclass(frozen=True, slots=True)
class EditToken:
    """A single entry of a raw edit script produced by the aligner.

    ``equal`` tokens carry both indices, ``delete`` tokens only the original
    index and ``insert`` tokens only the modified index. Indices are 0-based.
    """

    kind: str
    value: Any
    original_index: int | None = None
    modified_index: int | None = None

    def __post_init__(self) -> None:
        if self.kind not in ALIGN_KINDS:
            raise ValueError(f"Unsupported edit token kind: {self.kind}")

    @property
    def source_index(self) -> int:
        """Index of the token in the sequence it was taken from."""
        if self.kind == "insert":
            return self.modified_index  # type: ignore[return-value]
        return self.original_index  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of characters sharing one edit kind inside a replaced line."""

    kind: str
    content: str

    def __post_init__(self) -> None:
        if self.kind not in EDIT_KINDS:
            raise ValueError(f"Unsupported segment kind: {self.kind}")


@dataclass(frozen=True, slots=True)
class DisplayLine:
    """One side of a side-by-side row."""

    kind: str
    content: str
    original_line_number: int | None = None
    modified_line_number: int | None = None
    parts: tuple[Segment, ...] | None = None

    def __post_init__(self) -> None:
        if self.kind not in EDIT_KINDS:
            raise ValueError(f"Unsupported display line kind: {self.kind}")

    @property
    def is_padding(self) -> bool:
        return self.kind == "empty"

    @property
    def has_inline_parts(self) -> bool:
        return self.parts is not None


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Side-by-side diff of two texts.

    ``original_lines[i]`` and ``modified_lines[i]`` always form one display
    row; whichever side has no content for that row holds an ``empty`` pad.
    """

    original_lines: tuple[DisplayLine, ...]
    modified_lines: tuple[DisplayLine, ...]
    additions: int = 0
    deletions: int = 0

    def __post_init__(self) -> None:
        if len(self.original_lines) != len(self.modified_lines):
            raise ValueError(
                "original_lines and modified_lines must have the same length "
                f"({len(self.original_lines)} != {len(self.modified_lines)})"
            )

    @property
    def identical(self) -> bool:
        return self.additions == 0 and self.deletions == 0

    @property
    def row_count(self) -> int:
        return len(self.original_lines)

    def rows(self) -> Iterator[tuple[DisplayLine, DisplayLine]]:
        return zip(self.original_lines, self.modified_lines)

    def summary(self) -> dict[str, int]:
        counts = {
            "additions": self.additions,
            "deletions": self.deletions,
            "unchanged": 0,
            "replacements": 0,
        }
        for original, _modified in self.rows():
            if original.kind == "equal":
                counts["unchanged"] += 1
            elif original.has_inline_parts:
                counts["replacements"] += 1
        return counts
