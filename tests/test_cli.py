"""CLI argument handling tests.

Verifies how ``vimbo.cli.main`` forwards options to the runtime and how
terminal failures become a clean exit message.
"""

from __future__ import annotations

import contextlib
import io
import termios
import unittest
from unittest import mock

from vimbo import __version__, cli


class CliTests(unittest.TestCase):
    def _main(self, argv: list[str]) -> mock.MagicMock:
        with mock.patch("vimbo.cli.configure_logging") as logging_mock, mock.patch("vimbo.cli.run_app") as run_app:
            cli.main(argv)
        logging_mock.assert_called_once_with()
        return run_app

    def test_main_without_arguments_starts_with_empty_query(self) -> None:
        run_app = self._main([])

        run_app.assert_called_once_with(None, theme=None, style=None, no_color=False, list_only=False)

    def test_main_forwards_all_options(self) -> None:
        run_app = self._main(["-q", "yank", "--theme", "ocean", "--style", "default", "--no-color", "--list"])

        run_app.assert_called_once_with("yank", theme="ocean", style="default", no_color=True, list_only=True)

    def test_long_query_option(self) -> None:
        run_app = self._main(["--query", "visual mode"])

        self.assertEqual(run_app.call_args.args, ("visual mode",))

    def test_terminal_error_exits_with_message(self) -> None:
        for error in (OSError("Input/output error"), termios.error(25, "Inappropriate ioctl for device")):
            with mock.patch("vimbo.cli.configure_logging"), mock.patch("vimbo.cli.run_app", side_effect=error):
                with self.assertRaises(SystemExit) as ctx:
                    cli.main([])
            self.assertIsInstance(ctx.exception.code, str)
            self.assertTrue(ctx.exception.code.startswith("vimbo: terminal error:"))

    def test_version_flag_prints_version(self) -> None:
        out = io.StringIO()
        with mock.patch("vimbo.cli.run_app") as run_app, contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--version"])

        self.assertEqual(ctx.exception.code, 0)
        self.assertEqual(out.getvalue().strip(), f"vimbo {__version__}")
        run_app.assert_not_called()

    def test_unknown_option_is_usage_error(self) -> None:
        with mock.patch("vimbo.cli.run_app") as run_app, contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--bogus"])

        self.assertEqual(ctx.exception.code, 2)
        run_app.assert_not_called()


if __name__ == "__main__":
    unittest.main()
