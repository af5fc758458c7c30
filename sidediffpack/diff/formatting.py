"""CLI-friendly rendering for side-by-side diff results."""

from __future__ import annotations

import typer

from sidediffpack.core.models import DiffResult, DisplayLine

_MARKERS = {
    "equal": " ",
    "delete": "-",
    "insert": "+",
    "empty": " ",
}
_HIGHLIGHT = {
    "delete": typer.colors.RED,
    "insert": typer.colors.GREEN,
}
_SEPARATOR = " | "


def render_diff_summary(diff: DiffResult) -> str:
    summary = diff.summary()
    return (
        f"+{summary['additions']} -{summary['deletions']} "
        f"unchanged={summary['unchanged']} replacements={summary['replacements']}"
    )


def render_no_changes() -> str:
    return "No differences found"


def render_side_by_side(diff: DiffResult, *, width: int = 60, color: bool = False) -> str:
    """Render one text row per display row, original on the left.

    ``width`` is the content width of each column; longer lines are clipped.
    With ``color`` enabled, changed characters of replaced lines are
    highlighted and whole changed lines are coloured.
    """
    column = max(1, width)
    rendered: list[str] = []
    for original, modified in diff.rows():
        left = _render_cell(original, original.original_line_number, column, color=color)
        right = _render_cell(modified, modified.modified_line_number, column, color=color)
        rendered.append(f"{left}{_SEPARATOR}{right}".rstrip())
    return "\n".join(rendered)


def _render_cell(line: DisplayLine, number: int | None, width: int, *, color: bool) -> str:
    gutter = f"{number if number is not None else '':>4} {_MARKERS[line.kind]} "
    if line.is_padding:
        return gutter + " " * width

    pieces = _clip(_pieces(line), width)
    visible = sum(len(text) for _kind, text in pieces)
    # Changed characters of a replaced line are bold on top of the line colour.
    inline = line.has_inline_parts
    body = "".join(
        _style(text, line.kind, emphasise=inline and kind != "equal", color=color)
        for kind, text in pieces
    )
    return gutter + body + " " * (width - visible)


def _pieces(line: DisplayLine) -> list[tuple[str, str]]:
    if line.parts is None:
        return [(line.kind, line.content)]
    return [(part.kind, part.content) for part in line.parts]


def _clip(pieces: list[tuple[str, str]], width: int) -> list[tuple[str, str]]:
    clipped: list[tuple[str, str]] = []
    column = 0
    for kind, text in pieces:
        if column >= width:
            break
        # Tab stops are measured from the start of the line, not of the part.
        text = (" " * column + text).expandtabs(4)[column:width]
        clipped.append((kind, text))
        column += len(text)
    return clipped


def _style(text: str, line_kind: str, *, emphasise: bool, color: bool) -> str:
    fg = _HIGHLIGHT.get(line_kind)
    if not color or not text or fg is None:
        return text
    return typer.style(text, fg=fg, bold=emphasise)
