"""Display-width helpers for pane cells.

Entry names come straight from the filesystem, so they are sanitized before
they reach the terminal and measured in terminal columns, not code points.
"""

from __future__ import annotations

import re
import unicodedata

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
REPLACEMENT_CHAR = "?"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    return sum(char_display_width(ch) for ch in text)


def sanitize_name(name: str) -> str:
    """Replace C0/C1 control characters so a name cannot move the cursor."""
    if _CONTROL_RE.search(name) is None:
        return name
    return _CONTROL_RE.sub(REPLACEMENT_CHAR, name)


def fit_to_width(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and right-pad it with spaces.

    The result always occupies exactly ``width`` columns. A wide character
    that would straddle the right edge is dropped and replaced by padding.
    """
    if width <= 0:
        return ""

    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > width:
            break
        out.append(ch)
        col += w
    out.append(" " * (width - col))
    return "".join(out)


__all__ = [
    "char_display_width",
    "display_width",
    "sanitize_name",
    "fit_to_width",
]
