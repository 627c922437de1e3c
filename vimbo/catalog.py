"""Built-in Vim cheatsheet catalog.

Entries are immutable and the catalog never changes after construction.
Lookups are positional; callers hold catalog indices, not entry copies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """One cheatsheet row."""

    category: str
    command: str
    description: str

    def haystack(self) -> str:
        """Return the lower-cased text searched by the live filter."""
        return f"{self.category} {self.command} {self.description}".lower()


class Catalog:
    """Read-only ordered sequence of cheatsheet entries."""

    def __init__(self, entries: Iterable[Entry]) -> None:
        self._entries: tuple[Entry, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def entry_at(self, idx: int) -> Entry:
        """Return entry ``idx``; negative or out-of-range indices raise ``IndexError``."""
        if not (0 <= idx < len(self._entries)):
            raise IndexError(f"catalog index out of range: {idx}")
        return self._entries[idx]


DEFAULT_ENTRIES: tuple[Entry, ...] = (
    Entry("Basics", ":q", "quit (fails if there are unsaved changes)"),
    Entry("Basics", ":q!", "quit discarding changes"),
    Entry("Basics", ":w", "write (save) current buffer"),
    Entry("Basics", ":wq / :x / ZZ", "save and quit"),
    Entry("Basics", ":e {file}", "edit / open file"),
    Entry("Basics", ":help {topic}", "open Vim help (e.g. :help motion)"),

    Entry("Modes", "i", "enter insert mode before cursor"),
    Entry("Modes", "a", "enter insert mode after cursor"),
    Entry("Modes", "v", "enter visual mode"),
    Entry("Modes", "V", "enter visual line mode"),
    Entry("Modes", "Ctrl + v", "enter visual block (blockwise) mode"),
    Entry("Modes", "Esc", "return to normal mode"),

    Entry("Navigation - line", "h j k l", "move cursor left / down / up / right"),
    Entry("Navigation - line", "0 / $", "move cursor to start / end of line"),
    Entry("Navigation - line", "^", "move cursor to first non-blank in line"),

    Entry("Navigation - scrolling", "Ctrl + u / Ctrl + d", "move view half-page up / down"),
    Entry("Navigation - scrolling", "Ctrl + b / Ctrl + f", "move view page up / down"),

    Entry("Navigation - file", "gg / G", "move cursor to first / last line of file"),
    Entry("Navigation - file", "{n}G", "move cursor to line {n}"),

    Entry("Navigation - screen", "H / M / L", "move cursor to top / middle / bottom of screen"),
    Entry("Navigation - screen", "zz / zt / zb", "move view to center / top / bottom current line"),

    Entry("Navigation - paragraphs", "{ / }", "move cursor to previous / next paragraph or block"),

    Entry("Navigation - sentences", "( / )", "move cursor to previous / next sentence"),

    Entry("Navigation - matching", "%", "move cursor to matching bracket/brace/paren"),

    Entry("Navigation - word", "w / b / e", "move cursor to next / previous / end of word"),
    Entry("Navigation - word", "W / B / E", "move cursor WORD-wise next / previous / end"),

    Entry("Navigation - find", "f{char} / F{char}", "move cursor to char right / left"),
    Entry("Navigation - find", "t{char} / T{char}", "move cursor till before char right / left"),
    Entry("Navigation - find", "; / ,", "move cursor by repeating / reversing last f/F/t/T"),

    Entry("Editing", "x", "delete character under cursor"),
    Entry("Editing", "dd", "delete (cut) current line"),
    Entry("Editing", "D", "delete from cursor to end of line"),
    Entry("Editing", "cc", "change (replace) entire line"),
    Entry("Editing", "cw / c$", "change to end of word / line"),
    Entry("Editing", "r{char}", "replace a single character"),
    Entry("Editing", "J", "join current line with next"),

    Entry("Yank (copy)", "y{motion}", "yank text covered by a motion (e.g. yw, y$)"),
    Entry("Yank (copy)", "yy / Y", "yank (copy) current line"),
    Entry("Yank (copy)", "yiw / yaw", "yank inner word / a word incl. space"),
    Entry("Yank (copy)", "y0 / y$", "yank from cursor to start / end of line"),

    Entry("Paste", "p / P", "paste after / before cursor or line"),
    Entry("Paste", "gp / gP", "paste and move cursor to end of paste"),

    Entry("Indentation", ">> / <<", "indent / dedent current line"),
    Entry("Indentation", "=", "auto-indent motion or selection"),

    Entry("Visual mode", "v / V / Ctrl + v + motion", "select characters / lines / block"),
    Entry("Visual mode", "y / d / c", "yank / delete / change selection"),
    Entry("Visual mode", "> / <", "indent / dedent selection"),

    Entry("Search", "/pattern", "search forward for pattern"),
    Entry("Search", "n / N", "next / previous search match"),
    Entry("Search", "?pattern", "search backward for pattern"),

    Entry("Search & replace", ":%s/old/new/g", "replace all 'old' with 'new' in file"),
    Entry("Search & replace", ":%s/old/new/gc", "replace with confirmation"),

    Entry("Buffers", ":w / :q / :wq", "write, quit, write & quit"),
    Entry("Buffers", ":ls / :buffers", "list buffers"),
    Entry("Buffers", ":b {n}", "go to buffer {n}"),
    Entry("Buffers", ":bn / :bp", "next / previous buffer"),

    Entry("Windows", ":split / :vsplit", "horizontal / vertical split"),
    Entry("Windows", "Ctrl + w, then h/j/k/l", "move to window left/down/up/right"),
    Entry("Windows", "Ctrl + w, then c / o", "close current / keep only current"),

    Entry("Tabs", ":tabnew {file}", "open file in a new tab"),
    Entry("Tabs", "gt / gT", "next / previous tab"),
    Entry("Tabs", ":tabclose", "close current tab"),

    Entry("Registers", '"{reg}y / "{reg}p', "yank / paste using register {reg}"),
    Entry("Registers", '"+y / "+p / "*y', "use system clipboards (+ or * register)"),

    Entry("Marks", "m{a-z}", "set mark {a-z} on a line"),
    Entry("Marks", "'{a-z} / `{a-z}", "jump to mark line / exact position"),

    Entry("Macros", "q{reg} ... q", "record macro into register {reg}"),
    Entry("Macros", "@{reg} / @@", "play macro / repeat last macro"),

    Entry("Repeat", ".", "repeat last change"),

    Entry("Undo/Redo", "u / Ctrl + r", "undo / redo last change"),
)


def default_catalog() -> Catalog:
    """Return the built-in Vim cheatsheet."""
    return Catalog(DEFAULT_ENTRIES)
