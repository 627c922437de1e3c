"""Input-layer public API for key decoding and key-to-command mapping.

Exports are split between low-level terminal decoding (`read_key`) and the
key map consulted by the runtime loop (`command_for_key`).
"""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .keymap import DEFAULT_KEY_REGISTRY, build_key_registry, command_for_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "DEFAULT_KEY_REGISTRY",
    "build_key_registry",
    "command_for_key",
]
