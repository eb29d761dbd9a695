"""Public runtime orchestration entry points.

This package groups the picker bootstrap (`run_picker`) and the
lower-level event loop used by tests and composition code.
"""

from __future__ import annotations


def run_picker(*args, **kwargs):
    """Lazily import picker entrypoint to keep package imports lightweight."""
    from .app import run_picker as _run_picker

    return _run_picker(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = ["run_picker", "run_main_loop"]
