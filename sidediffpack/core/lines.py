"""Line tokenization for the line phase of a diff."""

from __future__ import annotations

import re

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n`` boundaries, tolerating a preceding ``\\r``.

    Empty text has no lines. Otherwise this is a plain split, so a trailing
    line break yields a trailing empty line. A lone ``\\r`` is content.
    """
    if not text:
        return []
    return _LINE_BREAK.split(text)
