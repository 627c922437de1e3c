"""Help panel content and bottom-panel sizing.

The help panel replaces the status line while visible. Rendering helpers here
are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..ui_theme import UITheme

SEARCH_BAR_ROWS = 3
STATUS_ROWS = 1
HELP_PANEL_ROWS = 5
MIN_LIST_ROWS = 2

HELP_PANEL_LINES: tuple[tuple[tuple[str, str], ...], ...] = (
    (("↑/↓", "move"), ("PgUp/PgDn", "scroll"), ("g/G", "top/bottom")),
    (("Typing", "filters cheats"), ("Backspace", "deletes"), ("/", "clears query")),
    (("?", "toggle this help"), ("Esc", "to quit")),
)

HELP_SEPARATOR = "  •  "


def format_help_line(segments: tuple[tuple[str, str], ...], theme: UITheme) -> str:
    """Join ``(key, label)`` pairs into one styled help row."""
    parts = [f"{theme.help_key}{key}{theme.reset}{theme.help_text} {label}{theme.reset}" for key, label in segments]
    return HELP_SEPARATOR.join(parts)


def help_panel_lines(theme: UITheme) -> tuple[str, ...]:
    return tuple(format_help_line(segments, theme) for segments in HELP_PANEL_LINES)


def bottom_panel_row_count(show_help: bool) -> int:
    """Rows used below the list: the bordered help panel or the status line."""
    return HELP_PANEL_ROWS if show_help else STATUS_ROWS


def list_panel_row_count(max_lines: int, show_help: bool) -> int:
    """Rows left for the bordered list panel, including its two border rows."""
    available = max_lines - SEARCH_BAR_ROWS - bottom_panel_row_count(show_help)
    return max(MIN_LIST_ROWS, available)
