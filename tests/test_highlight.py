"""Tests for the highlight() public API.

Argument wiring is checked with run_cmd mocked; the end-to-end tests run
the real pygmentize installed with Pygments.
"""

import sys
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

import pygwrap
from pygwrap import (
    HtmlFormatter,
    NotFoundError,
    Terminal256Formatter,
    highlight,
    set_path,
)

posix_only = pytest.mark.skipif(
    sys.platform == "win32", reason="fake tools are POSIX shell wrappers"
)


class TestArgumentWiring:
    def test_language_and_line_numbers(self):
        with patch("pygwrap.highlighter.run_cmd", return_value="<div/>") as mock_run:
            out = highlight("x=1", "python", HtmlFormatter(line_numbers=True))
        assert out == "<div/>"
        mock_run.assert_called_once_with(
            ["-f", "html", "-l", "python", "-O", "linenos=true"],
            "x=1",
            timeout=None,
        )

    def test_guess_without_options(self):
        with patch("pygwrap.highlighter.run_cmd", return_value="") as mock_run:
            highlight("int x;", None, Terminal256Formatter())
        assert mock_run.call_args[0][0] == ["-f", "terminal256", "-g"]

    def test_timeout_forwarded(self):
        with patch("pygwrap.highlighter.run_cmd", return_value="") as mock_run:
            highlight("x", "c", HtmlFormatter(), timeout=2.5)
        assert mock_run.call_args[1] == {"timeout": 2.5}


@posix_only
class TestPathOverride:
    def test_missing_then_working_path(self, tmp_path, echo_tool):
        tool, argv_file = echo_tool

        set_path(tmp_path / "nowhere" / "pygmentize")
        with pytest.raises(NotFoundError):
            highlight("x=1", "python", HtmlFormatter())
        assert not argv_file.exists()

        set_path(tool)
        assert highlight("x=1", "python", HtmlFormatter()) == "x=1"
        assert argv_file.exists()

    def test_concurrent_highlight_and_set_path(self, fake_tool):
        tool_a = fake_tool("import sys; sys.stdout.write('A:' + sys.stdin.read())")
        tool_b = fake_tool("import sys; sys.stdout.write('B:' + sys.stdin.read())")
        set_path(tool_a)

        def work(i):
            if i % 5 == 0:
                set_path(tool_b if i % 10 else tool_a)
            return highlight(f"code {i}", "text", HtmlFormatter())

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, range(40)))

        for i, out in enumerate(results):
            assert out in (f"A:code {i}", f"B:code {i}")


class TestEndToEnd:
    def test_html_with_line_numbers(self, real_pygmentize):
        set_path(real_pygmentize)
        html = highlight("x=1", "python", HtmlFormatter(line_numbers=True))
        assert '<span class="n">x</span>' in html
        assert '<span class="o">=</span>' in html
        assert '<span class="mi">1</span>' in html
        assert "linenos" in html
        assert html.count("<table") == html.count("</table>") == 1

    def test_terminal_output_has_ansi_codes(self, real_pygmentize):
        set_path(real_pygmentize)
        out = Terminal256Formatter().highlight("def f(): pass", "python")
        assert "\x1b[" in out
        assert "def" in out

    def test_guessed_language(self, real_pygmentize):
        set_path(real_pygmentize)
        out = highlight("#!/usr/bin/env python\nprint(1)\n", None, HtmlFormatter())
        assert "print" in out
        assert '<div class="highlight">' in out

    def test_unknown_language_reports_exit_status(self, real_pygmentize):
        set_path(real_pygmentize)
        with pytest.raises(pygwrap.PygmentizeExitError) as excinfo:
            highlight("x", "no-such-language-xyz", HtmlFormatter())
        assert excinfo.value.returncode != 0
        assert "no-such-language-xyz" in excinfo.value.stderr

    def test_large_input(self, real_pygmentize):
        set_path(real_pygmentize)
        code = "value = 12345\n" * 20_000
        out = highlight(code, "python", Terminal256Formatter())
        assert out.count("12345") == 20_000
