"""ANSI-aware text measurement and clipping utilities.

These helpers keep the panel aligned when color codes and wide chars are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks and control characters consume no columns, East Asian
    wide/fullwidth characters consume two.
    """
    if unicodedata.combining(ch) or unicodedata.category(ch) == "Cc":
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the visible column width of ``text``, ignoring ANSI sequences."""
    return sum(char_display_width(ch) for ch in ANSI_ESCAPE_RE.sub("", text))


def clip_text(text: str, max_cols: int, ellipsis: str = "…") -> str:
    """Trim plain ``text`` to ``max_cols`` display columns.

    When clipping happens the last visible column is replaced by ``ellipsis``.
    """
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    budget = max_cols - display_width(ellipsis)
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > budget:
            break
        out.append(ch)
        col += w
    return "".join(out) + ellipsis if budget >= 0 else ""


def pad_text(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces to ``width`` display columns."""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return text + " " * missing


__all__ = ["ANSI_ESCAPE_RE", "char_display_width", "clip_text", "display_width", "pad_text"]
