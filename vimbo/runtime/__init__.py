"""Public runtime orchestration entry points.

This package groups the interactive bootstrap (`run_app`) and the lower-level
event loop used by tests and composition code.
"""

from __future__ import annotations

from .app import run_app
from .loop import RuntimeLoopTiming, run_main_loop

__all__ = [
    "run_app",
    "RuntimeLoopTiming",
    "run_main_loop",
]
