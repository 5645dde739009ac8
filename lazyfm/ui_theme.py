"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the listing, header and prompt line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reverse: str
    reset: str
    header: str
    directory: str
    file_default: str
    file_source: str
    selection_marker: str
    executable: str
    empty_placeholder: str
    prompt: str
    prompt_cursor: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    header="\033[31m",
    directory="\033[1;34m",
    file_default="\033[38;5;252m",
    file_source="\033[38;5;110m",
    selection_marker="\033[1;38;5;214m",
    executable="\033[38;5;42m",
    empty_placeholder="\033[7m",
    prompt="\033[38;5;252m",
    prompt_cursor="\033[7m",
    status="\033[31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    directory="\033[1;38;5;45m",
    file_default="\033[38;5;252m",
    file_source="\033[38;5;117m",
    selection_marker="\033[38;5;215m",
    executable="\033[38;5;84m",
    empty_placeholder="\033[7;38;5;39m",
    prompt="\033[38;5;153m",
    prompt_cursor="\033[7;38;5;153m",
    status="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    header="",
    directory="",
    file_default="",
    file_source="",
    selection_marker="",
    executable="",
    empty_placeholder="",
    prompt="",
    prompt_cursor="",
    status="",
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
