"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..commands import Command


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single command factory."""

    combos: tuple[str, ...]
    build: Callable[[], Command]


class KeyComboRegistry:
    """Small key-to-command table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Initialize empty registry with optional token normalizer."""
        self._normalize = normalize if normalize is not None else self._identity
        self._bindings: dict[str, Callable[[], Command]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        """Return key unchanged for exact-match registries."""
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing entries for same combos."""
        for combo in binding.combos:
            self._bindings[self._normalize(combo)] = binding.build
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: str) -> Command | None:
        """Return the command bound to ``key``, or ``None`` when unbound."""
        build = self._bindings.get(self._normalize(key))
        if build is None:
            return None
        return build()

    def __contains__(self, key: str) -> bool:
        return self._normalize(key) in self._bindings
