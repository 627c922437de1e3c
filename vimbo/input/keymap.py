"""Key-token to engine-command mapping.

Named keys and the single-character shortcuts (``?``, ``g``, ``G``, ``/``)
are matched exactly; every other printable character edits the query.
Modified chords arrive as ``ALT_*`` tokens and are never bound here.
"""

from __future__ import annotations

from ..commands import (
    ClearQuery,
    Command,
    MoveSelection,
    PopChar,
    PushChar,
    Quit,
    SelectFirst,
    SelectLast,
    ToggleHelp,
)
from ..engine import PAGE_SIZE
from .key_registry import KeyComboBinding, KeyComboRegistry


def build_key_registry() -> KeyComboRegistry:
    """Return the default key bindings."""
    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("ESC",), Quit),
        KeyComboBinding(("?",), ToggleHelp),
        KeyComboBinding(("UP",), lambda: MoveSelection(-1)),
        KeyComboBinding(("DOWN",), lambda: MoveSelection(1)),
        KeyComboBinding(("PAGE_UP",), lambda: MoveSelection(-PAGE_SIZE)),
        KeyComboBinding(("PAGE_DOWN",), lambda: MoveSelection(PAGE_SIZE)),
        KeyComboBinding(("g",), SelectFirst),
        KeyComboBinding(("G",), SelectLast),
        KeyComboBinding(("/",), ClearQuery),
        KeyComboBinding(("BACKSPACE",), PopChar),
    )


DEFAULT_KEY_REGISTRY = build_key_registry()


def command_for_key(key: str, registry: KeyComboRegistry = DEFAULT_KEY_REGISTRY) -> Command | None:
    """Translate one key token into a command; unknown tokens yield ``None``."""
    command = registry.lookup(key)
    if command is not None:
        return command
    if len(key) == 1 and key.isprintable():
        return PushChar(key)
    return None
