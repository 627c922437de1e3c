"""Main interactive event loop for the terminal UI.

Alternates between drawing one frame and a bounded wait for one key.
The wait timeout doubles as the idle redraw tick, so terminal resizes are
picked up without a key press.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..commands import apply_command
from ..engine import FilterEngine, ViewSnapshot
from ..input import command_for_key, read_key
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_timeout_ms: int = 200


def run_main_loop(
    engine: FilterEngine,
    terminal: TerminalController,
    stdin_fd: int,
    render: Callable[[ViewSnapshot, int, int], None],
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
) -> None:
    """Run the interactive loop until a quit command arrives.

    ``render`` receives the current snapshot and terminal columns/lines each
    iteration. Render or input errors propagate after the terminal is restored.
    """
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            render(engine.current_view(), term.columns, term.lines)

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            logger.debug("key: %s", key)
            command = command_for_key(key)
            if command is None:
                continue
            if apply_command(engine, command):
                break
