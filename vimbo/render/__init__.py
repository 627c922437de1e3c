"""Rendering engine for the cheatsheet terminal view.

Defines render context data and writes fully composed ANSI frames.
Frames are derived from a :class:`~vimbo.engine.ViewSnapshot` alone; nothing
here mutates engine state or remembers anything between frames.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from ..catalog import Entry
from ..engine import ViewSnapshot
from ..ui_theme import DEFAULT_THEME, PLAIN_THEME, UITheme
from .ansi import ANSI_ESCAPE_RE, clip_ansi_line, display_width, fit_ansi_line
from .help import help_panel_lines, list_panel_row_count
from .highlight import DEFAULT_STYLE, colorize_command

SEARCH_TITLE = " Search (type to filter, Esc to quit) "
LIST_TITLE = " Vim Cheatsheet "
HELP_TITLE = " Help "
HIGHLIGHT_SYMBOL = ">> "
COMMAND_COLUMN_WIDTH = 12


@dataclass(frozen=True)
class RenderContext:
    view: ViewSnapshot
    width: int
    height: int
    theme: UITheme = DEFAULT_THEME
    style: str = DEFAULT_STYLE


def build_status_line(total: int, shown: int, width: int) -> str:
    """Return the catalog-size status text clipped to ``width`` columns."""
    text = f"Total: {total}  Shown: {shown}  (? for help)"
    return text[: max(0, width)]


def list_scroll_start(selected: int | None, inner_rows: int) -> int:
    """Return the first visible list row so ``selected`` stays on screen."""
    if selected is None or inner_rows <= 0:
        return 0
    return max(0, selected - inner_rows + 1)


def highlight_query_matches(text: str, query: str, style: str, reset: str, restore: str = "") -> str:
    """Wrap case-insensitive occurrences of ``query`` in ``style``.

    ``text`` must be plain (no escapes). ``restore`` re-applies the
    surrounding style after each match.
    """
    if not text or not query or not style:
        return text
    folded_text = text.lower()
    folded_query = query.lower()
    if len(folded_text) != len(text):
        return text

    out: list[str] = []
    cursor = 0
    while True:
        idx = folded_text.find(folded_query, cursor)
        if idx < 0:
            break
        end = idx + len(folded_query)
        out.append(text[cursor:idx])
        out.append(f"{style}{text[idx:end]}{reset}{restore}")
        cursor = end
    out.append(text[cursor:])
    return "".join(out)


def _padded_command(command: str) -> str:
    return command + " " * max(0, COMMAND_COLUMN_WIDTH - display_width(command))


def plain_entry_text(entry: Entry) -> str:
    return f"[{entry.category}] {_padded_command(entry.command)} {entry.description}"


def format_entry_row(entry: Entry, query: str, theme: UITheme, style: str) -> str:
    """Return one styled, unselected list row (without the marker gutter)."""
    if theme is PLAIN_THEME:
        return plain_entry_text(entry)

    category = f"{theme.category}[{entry.category}] {theme.reset}"
    command = colorize_command(entry.command, style)
    padding = " " * max(0, COMMAND_COLUMN_WIDTH - display_width(entry.command))
    description = highlight_query_matches(
        entry.description,
        query,
        theme.query_match,
        theme.reset,
        restore=theme.description,
    )
    return f"{category}{theme.command}{command}{theme.reset}{padding} {theme.description}{description}{theme.reset}"


def _box_top(title: str, width: int, theme: UITheme, title_style: str) -> str:
    inner = max(0, width - 2)
    title_text = clip_ansi_line(title, inner)
    fill = "─" * max(0, inner - display_width(title_text))
    return f"{theme.border}┌{theme.reset}{title_style}{title_text}{theme.reset}{theme.border}{fill}┐{theme.reset}"


def _box_bottom(width: int, theme: UITheme) -> str:
    return f"{theme.border}└{'─' * max(0, width - 2)}┘{theme.reset}"


def _box_row(content: str, width: int, theme: UITheme) -> str:
    inner = fit_ansi_line(content, max(0, width - 2))
    if ANSI_ESCAPE_RE.search(inner):
        inner += "\033[0m"
    return f"{theme.border}│{theme.reset}{inner}{theme.border}│{theme.reset}"


def compose_search_bar(query: str, width: int, theme: UITheme) -> list[str]:
    return [
        _box_top(SEARCH_TITLE, width, theme, theme.search_title),
        _box_row(f"{theme.search_query}{query}{theme.reset}", width, theme),
        _box_bottom(width, theme),
    ]


def compose_list_panel(view: ViewSnapshot, rows: int, width: int, theme: UITheme, style: str) -> list[str]:
    """Return the bordered list panel, ``rows`` lines tall."""
    inner_rows = max(0, rows - 2)
    inner_width = max(0, width - 2)
    start = list_scroll_start(view.selected, inner_rows)
    gutter = " " * len(HIGHLIGHT_SYMBOL)

    out = [_box_top(LIST_TITLE, width, theme, theme.list_title)]
    for row in range(start, start + inner_rows):
        if row >= view.shown:
            out.append(_box_row("", width, theme))
            continue
        _, entry = view.rows[row]
        if row == view.selected:
            selected_text = fit_ansi_line(HIGHLIGHT_SYMBOL + plain_entry_text(entry), inner_width)
            out.append(_box_row(f"{theme.selected}{selected_text}{theme.reset}", width, theme))
        else:
            out.append(_box_row(gutter + format_entry_row(entry, view.query, theme, style), width, theme))
    out.append(_box_bottom(width, theme))
    return out


def compose_help_panel(width: int, theme: UITheme) -> list[str]:
    out = [_box_top(HELP_TITLE, width, theme, theme.help_title)]
    for line in help_panel_lines(theme):
        out.append(_box_row(line, width, theme))
    out.append(_box_bottom(width, theme))
    return out


def compose_frame(context: RenderContext) -> list[str]:
    """Return every screen row for one frame, top to bottom."""
    view = context.view
    theme = context.theme
    width = max(4, context.width - 1)
    max_lines = max(1, context.height)

    lines = compose_search_bar(view.query, width, theme)
    list_rows = list_panel_row_count(max_lines, view.show_help)
    lines.extend(compose_list_panel(view, list_rows, width, theme, context.style))
    if view.show_help:
        lines.extend(compose_help_panel(width, theme))
    else:
        status = build_status_line(view.total, view.shown, width)
        lines.append(f"{theme.status}{status}{theme.reset}")
    return lines[:max_lines]


def render_frame(context: RenderContext) -> None:
    """Write one full frame directly to stdout."""
    out: list[str] = ["\033[H\033[J"]
    out.append("\r\n".join(compose_frame(context)))
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "build_status_line",
    "compose_frame",
    "format_entry_row",
    "highlight_query_matches",
    "list_scroll_start",
    "plain_entry_text",
    "render_frame",
]
