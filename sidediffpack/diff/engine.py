"""Two-level LCS diff engine producing padded side-by-side rows."""

from __future__ import annotations

from dataclasses import dataclass, field

from sidediffpack.align.engine import align_sequences
from sidediffpack.core.lines import split_lines
from sidediffpack.core.models import DiffResult, DisplayLine, EditToken
from sidediffpack.diff.charlevel import char_segments
from sidediffpack.diff.limits import DiffLimits

_EMPTY_LINE = DisplayLine("empty", "")


def compute_diff(
    original: str,
    modified: str,
    *,
    limits: DiffLimits | None = None,
) -> DiffResult:
    """Diff two texts line by line, with character detail for replaced lines.

    Total over all string inputs. ``additions`` and ``deletions`` count the raw
    line-level insert and delete tokens, regardless of how they are paired.
    ``limits`` only bounds the character phase; size checks on the line phase
    are the caller's job (see ``check_diff_limits``).
    """
    script = align_sequences(split_lines(original), split_lines(modified))
    max_char_cells = limits.max_char_cells if limits is not None else None

    rows = _RowBuilder(max_char_cells=max_char_cells)
    index = 0
    while index < len(script):
        token = script[index]

        if token.kind == "equal":
            rows.add_equal(token)
            index += 1
            continue

        deletes_end = _run_end(script, index, "delete")
        inserts_end = _run_end(script, deletes_end, "insert")
        rows.add_block(script[index:deletes_end], script[deletes_end:inserts_end])
        index = inserts_end

    return DiffResult(
        original_lines=tuple(rows.original_lines),
        modified_lines=tuple(rows.modified_lines),
        additions=sum(1 for token in script if token.kind == "insert"),
        deletions=sum(1 for token in script if token.kind == "delete"),
    )


def _run_end(script: list[EditToken], start: int, kind: str) -> int:
    end = start
    while end < len(script) and script[end].kind == kind:
        end += 1
    return end


@dataclass(slots=True)
class _RowBuilder:
    max_char_cells: int | None = None
    original_lines: list[DisplayLine] = field(default_factory=list)
    modified_lines: list[DisplayLine] = field(default_factory=list)

    def add_equal(self, token: EditToken) -> None:
        self.original_lines.append(
            DisplayLine("equal", token.value, original_line_number=_line_number(token.original_index))
        )
        self.modified_lines.append(
            DisplayLine("equal", token.value, modified_line_number=_line_number(token.modified_index))
        )

    def add_block(self, deletes: list[EditToken], inserts: list[EditToken]) -> None:
        """Pair deletes with the inserts that follow them, one to one in order.

        The whole delete run is zipped with the whole insert run, not only the
        delete directly before the first insert, so ``a,b -> c,d,e`` gives three
        rows rather than four. Surplus deletes, then surplus inserts, are padded.
        """
        paired = min(len(deletes), len(inserts))
        for delete, insert in zip(deletes[:paired], inserts[:paired]):
            self.add_replacement(delete, insert)
        for delete in deletes[paired:]:
            self.add_delete(delete)
        for insert in inserts[paired:]:
            self.add_insert(insert)

    def add_replacement(self, delete: EditToken, insert: EditToken) -> None:
        original_parts, modified_parts = char_segments(
            delete.value,
            insert.value,
            max_cells=self.max_char_cells,
        )
        self.original_lines.append(
            DisplayLine(
                "delete",
                delete.value,
                original_line_number=_line_number(delete.original_index),
                parts=original_parts,
            )
        )
        self.modified_lines.append(
            DisplayLine(
                "insert",
                insert.value,
                modified_line_number=_line_number(insert.modified_index),
                parts=modified_parts,
            )
        )

    def add_delete(self, token: EditToken) -> None:
        self.original_lines.append(
            DisplayLine("delete", token.value, original_line_number=_line_number(token.original_index))
        )
        self.modified_lines.append(_EMPTY_LINE)

    def add_insert(self, token: EditToken) -> None:
        self.original_lines.append(_EMPTY_LINE)
        self.modified_lines.append(
            DisplayLine("insert", token.value, modified_line_number=_line_number(token.modified_index))
        )


def _line_number(index: int | None) -> int | None:
    return index + 1 if index is not None else None
