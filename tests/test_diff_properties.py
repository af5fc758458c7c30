import random

import pytest

from sidediffpack.align import lcs_length
from sidediffpack.core import split_lines
from sidediffpack.core.models import DiffResult
from sidediffpack.diff import compute_diff

FUZZ_SEED = 20260222
_LINE_POOL = ("", "a", "b", "c", "abc", "abd", "hello world", "hello there", "  indent")


def _random_text(rng: random.Random) -> str:
    count = rng.randint(0, 8)
    lines = [rng.choice(_LINE_POOL) for _ in range(count)]
    separator = "\r\n" if rng.random() < 0.2 else "\n"
    return separator.join(lines)


def _random_pairs(count: int) -> list[tuple[str, str]]:
    rng = random.Random(FUZZ_SEED)
    pairs: list[tuple[str, str]] = []
    for _ in range(count):
        original = _random_text(rng)
        if rng.random() < 0.3:
            modified = original
        else:
            modified = _random_text(rng)
        pairs.append((original, modified))
    return pairs


def _assert_invariants(original: str, modified: str, result: DiffResult) -> None:
    original_lines = split_lines(original)
    modified_lines = split_lines(modified)

    assert len(result.original_lines) == len(result.modified_lines)

    shown_original = [line for line in result.original_lines if line.kind != "empty"]
    shown_modified = [line for line in result.modified_lines if line.kind != "empty"]
    assert [line.content for line in shown_original] == original_lines
    assert [line.content for line in shown_modified] == modified_lines
    assert {line.kind for line in shown_original} <= {"equal", "delete"}
    assert {line.kind for line in shown_modified} <= {"equal", "insert"}
    assert [line.original_line_number for line in shown_original] == list(
        range(1, len(original_lines) + 1)
    )
    assert [line.modified_line_number for line in shown_modified] == list(
        range(1, len(modified_lines) + 1)
    )

    assert result.deletions == sum(1 for line in shown_original if line.kind == "delete")
    assert result.additions == sum(1 for line in shown_modified if line.kind == "insert")
    equal_rows = sum(1 for line in result.original_lines if line.kind == "equal")
    assert equal_rows == lcs_length(original_lines, modified_lines)

    for left, right in result.rows():
        assert left.kind != "empty" or right.kind != "empty"
        if left.kind == "equal":
            assert right.kind == "equal"
            assert left.content == right.content
        if left.has_inline_parts or right.has_inline_parts:
            assert (left.kind, right.kind) == ("delete", "insert")
            assert "".join(part.content for part in left.parts) == left.content
            assert "".join(part.content for part in right.parts) == right.content
            assert {part.kind for part in left.parts} <= {"equal", "delete"}
            assert {part.kind for part in right.parts} <= {"equal", "insert"}
            for parts in (left.parts, right.parts):
                kinds = [part.kind for part in parts]
                assert all(a != b for a, b in zip(kinds, kinds[1:]))
                assert all(part.content for part in parts)


@pytest.mark.parametrize(("original", "modified"), _random_pairs(200))
def test_diff_invariants_hold_for_random_texts(original: str, modified: str) -> None:
    _assert_invariants(original, modified, compute_diff(original, modified))


@pytest.mark.parametrize(("original", "_modified"), _random_pairs(50))
def test_diff_of_text_with_itself_is_identical(original: str, _modified: str) -> None:
    result = compute_diff(original, original)

    assert result.identical is True
    assert all(line.kind == "equal" for line in result.original_lines)
    assert result.row_count == len(split_lines(original))


def test_diff_is_deterministic_across_calls() -> None:
    for original, modified in _random_pairs(20):
        assert compute_diff(original, modified) == compute_diff(original, modified)
