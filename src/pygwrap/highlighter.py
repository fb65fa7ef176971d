"""Syntax highlighting through the pygmentize command-line tool."""

from __future__ import annotations

from pygwrap.args import to_args
from pygwrap.formatters import PygmentizeFormatter
from pygwrap.runner import run_cmd


def highlight(
    code: str,
    language: str | None,
    formatter: PygmentizeFormatter,
    *,
    timeout: float | None = None,
) -> str:
    """Highlight *code* written in *language*, rendered by *formatter*.

    If *language* is None the language is guessed from *code*; pygmentize's
    guessing is not very reliable, so pass a name when you know it. See
    https://pygments.org/languages/ for the supported names.

    Example::

        >>> from pygwrap import HtmlFormatter, highlight
        >>> highlight("x=1", "python", HtmlFormatter(line_numbers=True))  # doctest: +SKIP
        '<table class="highlighttable">...'

    Raises:
        PygmentizeError: Any failure to run pygmentize or read its output;
            see :mod:`pygwrap.errors` for the specific subclasses.
    """
    args = to_args(language, formatter.short_name, formatter.options_str())
    return run_cmd(args, code, timeout=timeout)
