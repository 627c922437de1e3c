"""Pygments colouring for the cheatsheet command column.

Command text such as ``:%s/old/new/g`` is lexed as Vim script and formatted
for 256-colour terminals. Results are cached per (text, style) pair since the
catalog is fixed and every frame re-renders the same commands.
"""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import VimLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"


@lru_cache(maxsize=None)
def normalize_style(style: str | None) -> str:
    """Return ``style`` when pygments knows it, else the default style."""
    if not style:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    return Terminal256Formatter(style=style)


_LEXER = VimLexer(stripnl=False, ensurenl=False)


@lru_cache(maxsize=1024)
def colorize_command(command: str, style: str = DEFAULT_STYLE) -> str:
    """Return ``command`` with ANSI colouring, or unchanged when nothing applies."""
    if not command:
        return command
    rendered = highlight(command, _LEXER, _formatter_for_style(normalize_style(style)))
    return rendered.rstrip("\n")
