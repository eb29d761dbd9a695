"""Exception types for startup and runtime failures.

Every error carries a human-readable message and an optional suggestion.
The CLI turns these into a single stderr line and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class FolderPickError(Exception):
    """Base exception for folderpick failures.

    Attributes:
        message: Human-readable error message
        suggestion: Optional hint for resolving the error
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class HomeNotSetError(FolderPickError):
    """Raised when the home directory cannot be resolved from the environment."""

    def __init__(self, variable: str = "HOME") -> None:
        super().__init__(
            message=f"Could not find {variable} env var",
            suggestion=f"set {variable} to your home directory",
        )
        self.variable = variable


class RootNotFoundError(FolderPickError):
    """Raised when the root folder is missing or is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(message=f"Directory not found at: {path}")
        self.path = path


class FolderScanError(FolderPickError):
    """Raised when the root folder exists but cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(message=f"Could not read {path}: {reason}")
        self.path = path
        self.reason = reason


class NoFoldersError(FolderPickError):
    """Raised when the root folder has no visible subdirectories."""

    def __init__(self, path: Path) -> None:
        super().__init__(message=f"No folders found in {path}")
        self.path = path


class InputClosedError(FolderPickError):
    """Raised when the terminal input stream ends while the picker is running."""

    def __init__(self) -> None:
        super().__init__(message="Terminal input closed before a folder was chosen")


__all__ = [
    "FolderPickError",
    "HomeNotSetError",
    "RootNotFoundError",
    "FolderScanError",
    "NoFoldersError",
    "InputClosedError",
]
