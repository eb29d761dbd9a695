"""Root resolution and folder scanning.

Resolves the picker root under the home directory and lists its visible
immediate subdirectories in sorted order.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from .config import DEFAULT_ROOT_NAME
from .errors import FolderScanError, HomeNotSetError, NoFoldersError, RootNotFoundError
from .logger import get_logger

HIDDEN_PREFIX = "."

logger = get_logger(__name__)


def resolve_root(folder_name: str = DEFAULT_ROOT_NAME, environ: Mapping[str, str] | None = None) -> Path:
    """Return ``$HOME/<folder_name>`` after checking it is a directory.

    Raises ``HomeNotSetError`` when ``HOME`` is unset or empty and
    ``RootNotFoundError`` when the joined path is not an existing directory.
    """
    env = os.environ if environ is None else environ
    home_dir = env.get("HOME")
    if not home_dir:
        raise HomeNotSetError("HOME")

    root = Path(home_dir) / folder_name
    if not root.is_dir():
        raise RootNotFoundError(root)
    logger.debug("Resolved root %s", root)
    return root.absolute()


def _is_visible_name(name: str) -> bool:
    """Return whether ``name`` is a non-empty, non-hidden, text-decodable name."""
    if not name or name.startswith(HIDDEN_PREFIX):
        return False
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        # Undecodable bytes surface as lone surrogates; such names are skipped.
        return False
    return True


def list_folders(root: Path) -> list[str]:
    """List visible immediate subdirectory names of ``root``, sorted ascending.

    Symlinks pointing at directories count as directories. Entries that
    cannot be stat'ed are skipped. Raises ``RootNotFoundError`` when ``root``
    vanished, ``FolderScanError`` when it cannot be read, and
    ``NoFoldersError`` when nothing visible remains.
    """
    names: set[str] = set()
    try:
        with os.scandir(root) as entries:
            for entry in entries:
                if not _is_visible_name(entry.name):
                    continue
                try:
                    is_dir = entry.is_dir()
                except OSError:
                    continue
                if is_dir:
                    names.add(entry.name)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise RootNotFoundError(root) from exc
    except OSError as exc:
        raise FolderScanError(root, exc.strerror or str(exc)) from exc

    if not names:
        raise NoFoldersError(root)

    folders = sorted(names)
    logger.info("Found %d folders in %s", len(folders), root)
    return folders


__all__ = ["HIDDEN_PREFIX", "list_folders", "resolve_root"]
