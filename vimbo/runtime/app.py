"""Runtime bootstrap: build the engine, resolve presentation, run the loop."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from ..catalog import Catalog, default_catalog
from ..engine import FilterEngine, ViewSnapshot
from ..render import RenderContext, render_frame
from ..render.highlight import normalize_style
from ..ui_theme import resolve_theme
from .config import load_no_color, load_style_name, load_theme_name
from .loop import RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def format_listing(view: ViewSnapshot) -> str:
    """Return matching entries as tab-separated lines."""
    return "".join(
        f"{entry.category}\t{entry.command}\t{entry.description}\n" for _, entry in view.rows
    )


def _interactive_terminal() -> bool:
    return os.isatty(sys.stdin.fileno()) and os.isatty(sys.stdout.fileno())


def run_app(
    initial_query: str | None = None,
    *,
    theme: str | None = None,
    style: str | None = None,
    no_color: bool = False,
    list_only: bool = False,
    catalog: Catalog | None = None,
    out: TextIO | None = None,
) -> None:
    """Initialize engine state and either print matches or run the TUI.

    Explicit arguments win over config values. Non-interactive sessions
    (``list_only`` or no tty on stdin/stdout) print the filtered catalog.
    """
    engine = FilterEngine(catalog if catalog is not None else default_catalog(), initial_query or "")
    logger.debug("starting vimbo; query=%r, shown=%d", engine.query, len(engine.filtered))

    if list_only or not _interactive_terminal():
        (out or sys.stdout).write(format_listing(engine.current_view()))
        return

    ui_theme = resolve_theme(theme or load_theme_name(), no_color=no_color or load_no_color())
    pygments_style = normalize_style(style or load_style_name())
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())

    def render(view: ViewSnapshot, columns: int, lines: int) -> None:
        render_frame(
            RenderContext(view=view, width=columns, height=lines, theme=ui_theme, style=pygments_style)
        )

    run_main_loop(engine, terminal, stdin_fd, render, RuntimeLoopTiming())
    logger.debug("exiting vimbo")
