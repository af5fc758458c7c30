"""Type definitions for SideDiff core models."""

from typing import Literal

EditKind = Literal[
    "equal",
    "insert",
    "delete",
    "empty",
]

EDIT_KINDS: tuple[str, ...] = (
    "equal",
    "insert",
    "delete",
    "empty",
)

# "empty" is a display pad only; the aligner never emits it.
ALIGN_KINDS: tuple[str, ...] = (
    "equal",
    "insert",
    "delete",
)
