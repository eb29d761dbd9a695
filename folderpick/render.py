"""Frame rendering for the picker panel.

Draws the filtered folder list into a bordered panel centred on screen.
Rendering is a pure projection of ``PickerState``; only ``render_frame``
touches the terminal.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .ansi import clip_text, display_width, pad_text
from .state import Mode, PickerState
from .ui_theme import UITheme

PANEL_WIDTH_PERCENT = 60
PANEL_HEIGHT_PERCENT = 50
MIN_PANEL_WIDTH = 8
MIN_PANEL_HEIGHT = 3
HIGHLIGHT_SYMBOL = ">> "
TITLE_PREFIX = "Select a Folder"
EMPTY_LABEL = "no matches"

NORMAL_HINT = " NORMAL  / filter  j/k move  q quit "
EDITING_HINT = " EDITING  Esc clear  Enter open "


@dataclass(frozen=True)
class PanelGeometry:
    """Screen placement of the panel in 0-based cells, borders included."""

    left: int
    top: int
    width: int
    height: int

    @property
    def inner_width(self) -> int:
        return max(0, self.width - 2)

    @property
    def list_rows(self) -> int:
        return max(0, self.height - 2)


def _percent_span(total: int, percent: int, minimum: int) -> int:
    return min(total, max(minimum, total * percent // 100))


def panel_geometry(columns: int, rows: int) -> PanelGeometry:
    """Centre a 60%-wide, 50%-tall panel inside a ``columns`` x ``rows`` screen."""
    columns = max(1, columns)
    rows = max(1, rows)
    width = _percent_span(columns, PANEL_WIDTH_PERCENT, MIN_PANEL_WIDTH)
    height = _percent_span(rows, PANEL_HEIGHT_PERCENT, MIN_PANEL_HEIGHT)
    return PanelGeometry(
        left=(columns - width) // 2,
        top=(rows - height) // 2,
        width=width,
        height=height,
    )


def follow_selection(state: PickerState, visible_rows: int) -> None:
    """Scroll ``state.list_start`` so the selected row stays in view."""
    visible_rows = max(1, visible_rows)
    max_start = max(0, len(state.filtered) - visible_rows)
    if state.selected is not None:
        if state.selected < state.list_start:
            state.list_start = state.selected
        elif state.selected >= state.list_start + visible_rows:
            state.list_start = state.selected - visible_rows + 1
    state.list_start = max(0, min(state.list_start, max_start))


def build_title(query: str) -> str:
    return f"{TITLE_PREFIX} (Filter: {query})"


def _top_border(title: str, inner_width: int, theme: UITheme) -> str:
    title = clip_text(title, inner_width)
    fill = "─" * (inner_width - display_width(title))
    return f"{theme.border}┌{theme.reset}{theme.title}{title}{theme.reset}{theme.border}{fill}┐{theme.reset}"


def _bottom_border(state: PickerState, inner_width: int, theme: UITheme) -> str:
    hint = NORMAL_HINT if state.mode is Mode.NORMAL else EDITING_HINT
    hint_style = theme.mode_normal if state.mode is Mode.NORMAL else theme.mode_editing
    count = f" {len(state.filtered)}/{len(state.folders)} "
    if display_width(hint) + display_width(count) > inner_width:
        count = ""
    hint = clip_text(hint, inner_width - display_width(count))
    fill = "─" * (inner_width - display_width(hint) - display_width(count))
    return (
        f"{theme.border}└{theme.reset}{hint_style}{hint}{theme.reset}"
        f"{theme.border}{fill}{theme.reset}{theme.hint}{count}{theme.reset}"
        f"{theme.border}┘{theme.reset}"
    )


def _list_row(state: PickerState, row: int, inner_width: int, theme: UITheme) -> str:
    idx = state.list_start + row
    if not state.filtered:
        if row == 0:
            label = pad_text(clip_text(" " * len(HIGHLIGHT_SYMBOL) + EMPTY_LABEL, inner_width), inner_width)
            return f"{theme.empty}{label}{theme.reset}"
        return " " * inner_width
    if idx >= len(state.filtered):
        return " " * inner_width

    name = state.filtered[idx]
    if idx == state.selected:
        label = pad_text(clip_text(HIGHLIGHT_SYMBOL + name, inner_width), inner_width)
        return f"{theme.selected}{label}{theme.reset}"
    label = pad_text(clip_text(" " * len(HIGHLIGHT_SYMBOL) + name, inner_width), inner_width)
    return f"{theme.item}{label}{theme.reset}"


def build_frame(state: PickerState, columns: int, rows: int, theme: UITheme) -> str:
    """Return the escape-sequence string that paints one full frame.

    Assumes ``follow_selection`` already ran for the panel's list height.
    """
    geometry = panel_geometry(columns, rows)
    inner_width = geometry.inner_width
    lines = [_top_border(build_title(state.query), inner_width, theme)]
    for row in range(geometry.list_rows):
        lines.append(
            f"{theme.border}│{theme.reset}{_list_row(state, row, inner_width, theme)}{theme.border}│{theme.reset}"
        )
    lines.append(_bottom_border(state, inner_width, theme))

    out = ["\033[H\033[2J"]
    for offset, line in enumerate(lines):
        out.append(f"\033[{geometry.top + offset + 1};{geometry.left + 1}H")
        out.append(line)
    return "".join(out)


def render_frame(fd: int, state: PickerState, columns: int, rows: int, theme: UITheme) -> None:
    """Scroll the list to the cursor and write one frame to ``fd``."""
    geometry = panel_geometry(columns, rows)
    follow_selection(state, geometry.list_rows)
    frame = build_frame(state, columns, rows, theme)
    os.write(fd, frame.encode("utf-8", errors="replace"))


__all__ = [
    "PanelGeometry",
    "build_frame",
    "build_title",
    "follow_selection",
    "panel_geometry",
    "render_frame",
]
