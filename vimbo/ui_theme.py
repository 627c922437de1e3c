"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (borders, list columns, help, status).
Pygments colouring of the command column remains a separate style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    search_title: str
    search_query: str
    list_title: str
    category: str
    command: str
    description: str
    query_match: str
    selected: str
    help_title: str
    help_key: str
    help_text: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;245m",
    search_title="\033[1;33m",
    search_query="\033[36m",
    list_title="\033[1;36m",
    category="\033[35m",
    command="\033[1;32m",
    description="\033[37m",
    query_match="\033[1;4;38;5;229m",
    selected="\033[1;37;44m",
    help_title="\033[1;33m",
    help_key="\033[38;5;229m",
    help_text="\033[37m",
    status="\033[3;90m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    search_title="\033[1;38;5;45m",
    search_query="\033[38;5;153m",
    list_title="\033[1;38;5;39m",
    category="\033[38;5;117m",
    command="\033[1;38;5;45m",
    description="\033[38;5;252m",
    query_match="\033[1;4;38;5;215m",
    selected="\033[1;38;5;231;48;5;24m",
    help_title="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_text="\033[38;5;252m",
    status="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    search_title="",
    search_query="",
    list_title="",
    category="",
    command="",
    description="",
    query_match="",
    selected="",
    help_title="",
    help_key="",
    help_text="",
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
