"""Runtime bootstrap tests.

Covers the plain listing path and how theme, style and colour settings from
arguments and config reach the interactive renderer.
"""

from __future__ import annotations

import io
import unittest
from unittest import mock

from vimbo.catalog import Catalog, Entry
from vimbo.render.highlight import DEFAULT_STYLE
from vimbo.runtime import app
from vimbo.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME


class ListingTests(unittest.TestCase):
    def test_list_only_prints_filtered_entries(self) -> None:
        out = io.StringIO()

        app.run_app("yy", list_only=True, out=out)

        self.assertEqual(out.getvalue(), "Yank (copy)\tyy / Y\tyank (copy) current line\n")

    def test_non_interactive_session_falls_back_to_listing(self) -> None:
        out = io.StringIO()
        catalog = Catalog([Entry("A", "a", "first"), Entry("B", "b", "second")])

        with mock.patch("vimbo.runtime.app._interactive_terminal", return_value=False), mock.patch(
            "vimbo.runtime.app.run_main_loop"
        ) as loop_mock:
            app.run_app(catalog=catalog, out=out)

        loop_mock.assert_not_called()
        self.assertEqual(out.getvalue(), "A\ta\tfirst\nB\tb\tsecond\n")

    def test_listing_with_no_matches_is_empty(self) -> None:
        out = io.StringIO()

        app.run_app("xyz", list_only=True, out=out)

        self.assertEqual(out.getvalue(), "")


class InteractiveBootstrapTests(unittest.TestCase):
    def _run_interactive(self, config: dict[str, object], **kwargs):
        contexts = []

        def fake_loop(engine, terminal, stdin_fd, render, timing):
            render(engine.current_view(), 81, 24)
            return None

        with mock.patch("vimbo.runtime.app._interactive_terminal", return_value=True), mock.patch(
            "vimbo.runtime.app.sys.stdin"
        ) as stdin_mock, mock.patch("vimbo.runtime.app.sys.stdout") as stdout_mock, mock.patch(
            "vimbo.runtime.app.TerminalController"
        ) as terminal_cls, mock.patch(
            "vimbo.runtime.config.load_config", return_value=config
        ), mock.patch(
            "vimbo.runtime.app.render_frame", side_effect=contexts.append
        ), mock.patch(
            "vimbo.runtime.app.run_main_loop", side_effect=fake_loop
        ) as loop_mock:
            stdin_mock.fileno.return_value = 0
            stdout_mock.fileno.return_value = 1
            app.run_app(**kwargs)

        terminal_cls.assert_called_once_with(0, 1)
        loop_mock.assert_called_once()
        self.assertEqual(len(contexts), 1)
        return contexts[0]

    def test_defaults_without_config(self) -> None:
        context = self._run_interactive({}, initial_query="mode")

        self.assertIs(context.theme, DEFAULT_THEME)
        self.assertEqual(context.style, DEFAULT_STYLE)
        self.assertEqual(context.view.query, "mode")
        self.assertEqual((context.width, context.height), (81, 24))

    def test_config_supplies_theme_and_style(self) -> None:
        context = self._run_interactive({"theme": "ocean", "style": "default"})

        self.assertIs(context.theme, OCEAN_THEME)
        self.assertEqual(context.style, "default")

    def test_arguments_override_config(self) -> None:
        context = self._run_interactive({"theme": "ocean", "style": "default"}, theme="default", style="monokai")

        self.assertIs(context.theme, DEFAULT_THEME)
        self.assertEqual(context.style, "monokai")

    def test_no_color_from_argument_or_config(self) -> None:
        self.assertIs(self._run_interactive({}, no_color=True).theme, PLAIN_THEME)
        self.assertIs(self._run_interactive({"no_color": True}).theme, PLAIN_THEME)
        self.assertIs(self._run_interactive({"no_color": "yes"}).theme, DEFAULT_THEME)

    def test_unknown_names_fall_back(self) -> None:
        context = self._run_interactive({}, theme="neon", style="no-such-style")

        self.assertIs(context.theme, DEFAULT_THEME)
        self.assertEqual(context.style, DEFAULT_STYLE)


if __name__ == "__main__":
    unittest.main()
