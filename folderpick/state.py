"""Selection state machine for the folder picker.

``PickerState`` owns the folder list, the filtered view, the cursor, the
input mode, the filter query and the eventual result. Every transition is
total: it never raises and always leaves the cursor invariant intact
(``selected is None`` exactly when ``filtered`` is empty).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .logger import get_logger

logger = get_logger(__name__)


class Mode(Enum):
    """Input mode governing how keys are interpreted."""

    NORMAL = "normal"
    EDITING = "editing"


def filter_folders(folders: Iterable[str], query: str) -> list[str]:
    """Return folders whose lower-cased name contains lower-cased ``query``.

    Relative order is preserved and an empty query keeps every folder.
    """
    needle = query.lower()
    return [name for name in folders if needle in name.lower()]


def revalidate_selection(selected: int | None, match_count: int) -> int | None:
    """Clamp a cursor after the filtered view changed size.

    An in-bounds cursor is kept so the highlight does not jump when matches
    disappear from the end of the list.
    """
    if match_count <= 0:
        return None
    if selected is None:
        return 0
    if selected >= match_count:
        return match_count - 1
    return selected


@dataclass
class PickerState:
    root: Path
    folders: tuple[str, ...]
    filtered: list[str]
    selected: int | None
    mode: Mode = Mode.NORMAL
    query: str = ""
    result: Path | None = None
    running: bool = True
    list_start: int = 0

    @classmethod
    def create(cls, root: Path, folders: Sequence[str]) -> "PickerState":
        """Build the initial state: everything visible, first row selected."""
        entries = tuple(folders)
        return cls(
            root=root,
            folders=entries,
            filtered=list(entries),
            selected=0 if entries else None,
        )

    @property
    def selected_name(self) -> str | None:
        """Folder name under the cursor, if any."""
        if self.selected is None or not (0 <= self.selected < len(self.filtered)):
            return None
        return self.filtered[self.selected]

    def _apply_filter(self) -> None:
        self.filtered = filter_folders(self.folders, self.query)
        self.selected = revalidate_selection(self.selected, len(self.filtered))

    def enter_editing(self) -> None:
        if self.mode is not Mode.NORMAL:
            return
        self.mode = Mode.EDITING
        logger.debug("Entered editing mode")

    def exit_editing(self) -> None:
        """Return to normal mode, dropping the query and restoring every folder."""
        if self.mode is not Mode.EDITING:
            return
        self.mode = Mode.NORMAL
        self.query = ""
        self._apply_filter()
        logger.debug("Left editing mode")

    def append_char(self, ch: str) -> None:
        if self.mode is not Mode.EDITING:
            return
        self.query += ch
        self._apply_filter()

    def delete_char(self) -> None:
        if self.mode is not Mode.EDITING or not self.query:
            return
        self.query = self.query[:-1]
        self._apply_filter()

    def select_next(self) -> None:
        """Move the cursor down one row, wrapping from the last row to the first."""
        if not self.filtered:
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected + 1) % len(self.filtered)

    def select_previous(self) -> None:
        """Move the cursor up one row, wrapping from the first row to the last."""
        if not self.filtered:
            return
        if self.selected is None or self.selected == 0:
            self.selected = len(self.filtered) - 1
        else:
            self.selected -= 1

    def confirm(self) -> None:
        """Record ``root / <selected folder>`` as the result and stop running.

        With nothing selected the result stays unset, but the picker still stops.
        """
        if not self.running:
            return
        name = self.selected_name
        if name is not None:
            self.result = self.root / name
            logger.info("Confirmed %s", self.result)
        else:
            logger.info("Confirmed with no matching folder")
        self.running = False

    def quit(self) -> None:
        if not self.running:
            return
        self.running = False
        logger.info("Quit without selection")


__all__ = ["Mode", "PickerState", "filter_folders", "revalidate_selection"]
