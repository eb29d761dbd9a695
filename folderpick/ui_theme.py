"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the picker panel: border, title, rows,
highlight and the mode hint line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    border: str
    title: str
    query: str
    item: str
    selected: str
    empty: str
    mode_normal: str
    mode_editing: str
    hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;250m",
    title="\033[1;38;5;255m",
    query="\033[1;38;5;81m",
    item="\033[38;5;255m",
    selected="\033[1;48;5;250;38;5;16m",
    empty="\033[2;38;5;250m",
    mode_normal="\033[1;38;5;44m",
    mode_editing="\033[1;38;5;214m",
    hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[38;5;31m",
    title="\033[1;38;5;45m",
    query="\033[1;38;5;153m",
    item="\033[38;5;252m",
    selected="\033[1;48;5;39;38;5;16m",
    empty="\033[2;38;5;110m",
    mode_normal="\033[1;38;5;45m",
    mode_editing="\033[1;38;5;215m",
    hint="\033[2;38;5;110m",
)

# Selection stays visible without color through reverse video.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    border="",
    title="",
    query="",
    item="",
    selected="\033[7m",
    empty="",
    mode_normal="",
    mode_editing="",
    hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
