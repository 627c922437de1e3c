from __future__ import annotations

import os
import unittest
from contextlib import contextmanager
from unittest import mock

from vimbo.catalog import default_catalog
from vimbo.engine import FilterEngine, ViewSnapshot
from vimbo.input import reader
from vimbo.runtime import RuntimeLoopTiming, run_main_loop
from vimbo.runtime import loop as loop_mod


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.restored = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.restored += 1


def _key_feed(*keys: object):
    pending = list(keys)

    def fake_read_key(_fd: int, timeout_ms: int | None = None) -> str:
        item = pending.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    return fake_read_key


class RuntimeLoopTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = FilterEngine(default_catalog())
        self.terminal = _FakeTerminal()
        self.frames: list[tuple[ViewSnapshot, int, int]] = []

    def _render(self, view: ViewSnapshot, columns: int, lines: int) -> None:
        self.frames.append((view, columns, lines))

    def _run(self, *keys: object) -> None:
        with mock.patch("vimbo.runtime.loop.read_key", side_effect=_key_feed(*keys)), mock.patch(
            "vimbo.runtime.loop.shutil.get_terminal_size",
            return_value=os.terminal_size((100, 30)),
        ):
            run_main_loop(self.engine, self.terminal, 0, self._render, RuntimeLoopTiming(key_timeout_ms=5))

    def test_typing_filters_and_escape_quits(self) -> None:
        self._run("y", "y", "ESC")

        self.assertEqual(self.engine.query, "yy")
        self.assertEqual(len(self.frames), 3)
        self.assertEqual(self.frames[0][0].shown, 70)
        self.assertEqual(self.frames[-1][0].shown, 1)
        self.assertEqual(self.frames[-1][1:], (100, 30))
        self.assertEqual((self.terminal.entered, self.terminal.restored), (1, 1))

    def test_idle_timeout_redraws_without_changing_state(self) -> None:
        self._run("", "", "ESC")

        self.assertEqual(len(self.frames), 3)
        self.assertEqual(self.frames[0][0], self.frames[2][0])

    def test_keyboard_interrupt_is_ignored(self) -> None:
        self._run(KeyboardInterrupt(), "DOWN", "ESC")

        self.assertEqual(self.engine.selected, 1)
        self.assertEqual(self.terminal.restored, 1)

    def test_unbound_keys_are_ignored(self) -> None:
        self._run("ALT_g", "TAB", "ENTER", "ESC")

        self.assertEqual(self.engine.query, "")
        self.assertEqual(self.engine.selected, 0)

    def test_navigation_keys_drive_selection(self) -> None:
        self._run("PAGE_DOWN", "DOWN", "G", "PAGE_UP", "UP", "g", "?", "ESC")

        self.assertEqual(self.engine.selected, 0)
        self.assertTrue(self.engine.show_help)
        self.assertEqual(self.frames[2][0].selected, 11)
        self.assertEqual(self.frames[3][0].selected, 69)
        self.assertEqual(self.frames[4][0].selected, 59)

    def test_meta_backspace_and_meta_enter_do_not_quit(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            # "y", Alt+Backspace, Alt+Enter, then a lone Esc.
            os.write(write_fd, b"y\x1b\x7f\x1b\r\x1b")
            with mock.patch(
                "vimbo.runtime.loop.shutil.get_terminal_size",
                return_value=os.terminal_size((100, 30)),
            ):
                run_main_loop(
                    self.engine, self.terminal, read_fd, self._render, RuntimeLoopTiming(key_timeout_ms=5)
                )
        finally:
            reader._PENDING_BYTES.clear()
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual([frame[0].query for frame in self.frames], ["", "y", "", ""])
        self.assertEqual(self.engine.query, "")
        self.assertEqual(self.terminal.restored, 1)

    def test_render_failure_restores_terminal_and_propagates(self) -> None:
        def failing_render(_view: ViewSnapshot, _columns: int, _lines: int) -> None:
            raise OSError("stdout closed")

        with mock.patch("vimbo.runtime.loop.read_key", side_effect=_key_feed("ESC")):
            with self.assertRaises(OSError):
                run_main_loop(self.engine, self.terminal, 0, failing_render)

        self.assertEqual((self.terminal.entered, self.terminal.restored), (1, 1))

    def test_package_exports_loop_objects(self) -> None:
        self.assertIs(run_main_loop, loop_mod.run_main_loop)
        self.assertIs(RuntimeLoopTiming, loop_mod.RuntimeLoopTiming)
        self.assertEqual(RuntimeLoopTiming().key_timeout_ms, 200)


if __name__ == "__main__":
    unittest.main()
