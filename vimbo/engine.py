"""Query filtering and selection state machine.

The engine owns the query text, the filtered index list, the selected row,
and the help flag. Every query change rebuilds the filtered list in full and
then re-clamps the selection onto it. Nothing here knows about keys or the
terminal; renderers read a :class:`ViewSnapshot` and never touch the engine.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .catalog import Catalog, Entry

logger = logging.getLogger(__name__)

PAGE_SIZE = 10


@dataclass(frozen=True)
class ViewSnapshot:
    """Read-only frame state handed to the renderer."""

    rows: tuple[tuple[int, Entry], ...]
    selected: int | None
    query: str
    show_help: bool
    total: int

    @property
    def shown(self) -> int:
        return len(self.rows)


def filter_indices(haystacks: Sequence[str], query: str) -> tuple[int, ...]:
    """Return indices of ``haystacks`` containing ``query`` case-insensitively.

    ``haystacks`` must already be lower-cased. The result keeps catalog order;
    an empty query matches every index.
    """
    needle = query.lower()
    if not needle:
        return tuple(range(len(haystacks)))
    return tuple(idx for idx, haystack in enumerate(haystacks) if needle in haystack)


def clamp_selection(selected: int | None, shown: int) -> int | None:
    """Restore the selection bound after the filtered list changed length.

    An empty list has no selection. A missing selection resolves to the first
    row; a selection past the end snaps to the last row.
    """
    if shown <= 0:
        return None
    if selected is None:
        return 0
    if selected >= shown:
        return shown - 1
    return selected


class FilterEngine:
    """Live substring filter over a fixed catalog with single-row selection."""

    def __init__(self, catalog: Catalog, initial_query: str = "") -> None:
        self.catalog = catalog
        self._haystacks: tuple[str, ...] = tuple(entry.haystack() for entry in catalog)
        self.query = ""
        self.filtered: tuple[int, ...] = ()
        self.selected: int | None = None
        self.show_help = False
        self.set_query(initial_query)

    def set_query(self, text: str) -> None:
        """Replace the query, rebuild matches, and re-clamp selection."""
        self.query = text
        self._apply_filter()

    def push_char(self, ch: str) -> None:
        self.set_query(self.query + ch)

    def pop_char(self) -> None:
        """Drop the last query character; an empty query is left alone."""
        if not self.query:
            return
        self.set_query(self.query[:-1])

    def clear_query(self) -> None:
        self.set_query("")

    def _apply_filter(self) -> None:
        self.filtered = filter_indices(self._haystacks, self.query)
        self.selected = clamp_selection(self.selected, len(self.filtered))
        logger.debug("filter updated; query=%r, shown=%d", self.query, len(self.filtered))

    def move_selection(self, delta: int) -> None:
        """Move selection by ``delta`` rows, saturating at both ends."""
        if not self.filtered or self.selected is None:
            return
        last = len(self.filtered) - 1
        self.selected = max(0, min(last, self.selected + delta))

    def select_first(self) -> None:
        if self.filtered:
            self.selected = 0

    def select_last(self) -> None:
        if self.filtered:
            self.selected = len(self.filtered) - 1

    def toggle_help(self) -> None:
        self.show_help = not self.show_help

    def current_view(self) -> ViewSnapshot:
        """Return everything the renderer needs for one frame."""
        return ViewSnapshot(
            rows=tuple((idx, self.catalog.entry_at(idx)) for idx in self.filtered),
            selected=self.selected,
            query=self.query,
            show_help=self.show_help,
            total=len(self.catalog),
        )
