"""Closed set of engine commands produced by the key map.

Commands are plain frozen values so the key layer and the engine never share
vocabulary: the input side builds a command, ``apply_command`` runs it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .engine import FilterEngine


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class ToggleHelp:
    pass


@dataclass(frozen=True)
class MoveSelection:
    delta: int


@dataclass(frozen=True)
class SelectFirst:
    pass


@dataclass(frozen=True)
class SelectLast:
    pass


@dataclass(frozen=True)
class ClearQuery:
    pass


@dataclass(frozen=True)
class PopChar:
    pass


@dataclass(frozen=True)
class PushChar:
    char: str


Command = Union[Quit, ToggleHelp, MoveSelection, SelectFirst, SelectLast, ClearQuery, PopChar, PushChar]


def apply_command(engine: FilterEngine, command: Command) -> bool:
    """Apply ``command`` to ``engine`` and return ``True`` when the app should quit."""
    if isinstance(command, Quit):
        return True
    if isinstance(command, ToggleHelp):
        engine.toggle_help()
    elif isinstance(command, MoveSelection):
        engine.move_selection(command.delta)
    elif isinstance(command, SelectFirst):
        engine.select_first()
    elif isinstance(command, SelectLast):
        engine.select_last()
    elif isinstance(command, ClearQuery):
        engine.clear_query()
    elif isinstance(command, PopChar):
        engine.pop_char()
    elif isinstance(command, PushChar):
        engine.push_char(command.char)
    return False
