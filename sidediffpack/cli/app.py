from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path

import typer

from sidediffpack.diff import (
    DiffError,
    DiffInputError,
    DiffLimits,
    check_diff_limits,
    compute_diff,
    render_diff_summary,
    render_no_changes,
    render_side_by_side,
)
from sidediffpack.diff.limits import DEFAULT_MAX_LINES
from sidediffpack.explain import ExplainConfig, ExplainError, request_explanation

app = typer.Typer(help="SideDiff CLI")

_STDIN_PATH = "-"


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("sidediff")
    except PackageNotFoundError:
        from sidediffpack import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show SideDiff version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _read_inputs(left: str, right: str) -> tuple[str, str]:
    if left == _STDIN_PATH and right == _STDIN_PATH:
        raise DiffInputError("only one side can be read from stdin")
    return _read_text(left), _read_text(right)


def _read_text(path: str) -> str:
    if path == _STDIN_PATH:
        try:
            return typer.get_text_stream("stdin", encoding="utf-8", errors="strict").read()
        except UnicodeDecodeError as error:
            raise DiffInputError("stdin is not UTF-8 text") from error

    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as error:
        raise DiffInputError(f"file not found: {path}") from error
    except UnicodeDecodeError as error:
        raise DiffInputError(f"not a UTF-8 text file: {path}") from error
    except OSError as error:
        raise DiffInputError(f"cannot read {path}: {error}") from error


@app.command()
def diff(
    left: str = typer.Argument(..., help="Path to the original text file ('-' for stdin)."),
    right: str = typer.Argument(..., help="Path to the modified text file ('-' for stdin)."),
    width: int = typer.Option(
        60,
        "--width",
        min=1,
        help="Content width of each column in the side-by-side view.",
    ),
    stat: bool = typer.Option(
        False,
        "--stat",
        help="Print only the addition/deletion summary.",
    ),
    max_lines: int = typer.Option(
        DEFAULT_MAX_LINES,
        "--max-lines",
        min=0,
        help="Refuse inputs with more lines than this on either side.",
    ),
    no_limits: bool = typer.Option(
        False,
        "--no-limits",
        help="Disable all input size limits.",
    ),
) -> None:
    """Diff two text files side by side."""
    limits = (
        DiffLimits(max_lines=None, max_line_cells=None, max_char_cells=None)
        if no_limits
        else DiffLimits(max_lines=max_lines)
    )
    try:
        original, modified = _read_inputs(left, right)
        check_diff_limits(original, modified, limits)
    except DiffError as error:
        _echo(f"diff failed: {error}", err=True)
        raise typer.Exit(code=1) from error

    result = compute_diff(original, modified, limits=limits)

    _echo(render_diff_summary(result))
    if stat:
        return
    if result.identical:
        _echo(render_no_changes())
        return
    _echo(render_side_by_side(result, width=width, color=not _OUTPUT_OPTIONS.no_color))


@app.command()
def explain(
    left: str = typer.Argument(..., help="Path to the original text file ('-' for stdin)."),
    right: str = typer.Argument(..., help="Path to the modified text file ('-' for stdin)."),
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        help="Explanation service URL (defaults to SIDEDIFF_EXPLAIN_URL).",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        help="Request timeout in seconds (defaults to SIDEDIFF_EXPLAIN_TIMEOUT).",
    ),
) -> None:
    """Ask the explanation service to describe the differences."""
    try:
        original, modified = _read_inputs(left, right)
    except DiffError as error:
        _echo(f"explain failed: {error}", err=True)
        raise typer.Exit(code=1) from error

    if not original or not modified:
        _echo("explain failed: both texts must be non-empty", err=True)
        raise typer.Exit(code=1)

    try:
        config = ExplainConfig.from_env(endpoint=endpoint, timeout_seconds=timeout)
        explanation = request_explanation(original, modified, config=config)
    except ExplainError as error:
        _echo(f"explain failed: {error}", err=True)
        raise typer.Exit(code=1) from error

    _echo(explanation, force=True)


def main() -> None:
    app()
