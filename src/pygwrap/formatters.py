"""Output formats understood by pygmentize.

Each formatter is a small immutable settings object: it names the
pygmentize formatter to use (``-f``) and renders its settings as the
``-O`` options string. See https://pygments.org/docs/formatters/ for what
each format produces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class PygmentizeFormatter:
    """Settings shared by every output format.

    Attributes:
        line_numbers: Output line numbers (``linenos=true``).
        style: Pygments style name, e.g. ``"monokai"``.
        extra_options: Further ``(key, value)`` pairs passed through to
            pygmentize verbatim, in order.
    """

    short_name: ClassVar[str] = ""

    line_numbers: bool = False
    style: str | None = None
    extra_options: tuple[tuple[str, str], ...] = ()

    def options_str(self) -> str | None:
        """Return the ``-O`` value, or None when no option is set."""
        pairs: list[str] = []
        if self.line_numbers:
            pairs.append("linenos=true")
        if self.style:
            pairs.append(f"style={self.style}")
        pairs.extend(f"{key}={value}" for key, value in self.extra_options)
        return ",".join(pairs) if pairs else None

    def highlight(
        self,
        code: str,
        language: str | None = None,
        *,
        timeout: float | None = None,
    ) -> str:
        """Highlight *code* with this formatter. See :func:`pygwrap.highlight`."""
        from pygwrap.highlighter import highlight

        return highlight(code, language, self, timeout=timeout)


@dataclass(frozen=True)
class HtmlFormatter(PygmentizeFormatter):
    """Tokens as HTML 4 ``<span>`` tags inside ``<div class="highlight">``."""

    short_name: ClassVar[str] = "html"


@dataclass(frozen=True)
class SvgFormatter(PygmentizeFormatter):
    """Tokens as an SVG document, one ``<text>`` element per line.

    Pygments still marks this formatter as experimental.
    """

    short_name: ClassVar[str] = "svg"


@dataclass(frozen=True)
class LatexFormatter(PygmentizeFormatter):
    """Tokens as LaTeX; needs the ``fancyvrb`` and ``color`` packages."""

    short_name: ClassVar[str] = "latex"


@dataclass(frozen=True)
class TerminalFormatter(PygmentizeFormatter):
    """Tokens with ANSI color sequences, terminated at each newline."""

    short_name: ClassVar[str] = "terminal"


@dataclass(frozen=True)
class Terminal256Formatter(PygmentizeFormatter):
    """Like :class:`TerminalFormatter`, for 256-color terminals."""

    short_name: ClassVar[str] = "terminal256"


@dataclass(frozen=True)
class TerminalTrueColorFormatter(PygmentizeFormatter):
    """Like :class:`TerminalFormatter`, for true-color (24-bit) terminals."""

    short_name: ClassVar[str] = "terminal16m"


FORMATTERS: dict[str, type[PygmentizeFormatter]] = {
    cls.short_name: cls
    for cls in (
        HtmlFormatter,
        SvgFormatter,
        LatexFormatter,
        TerminalFormatter,
        Terminal256Formatter,
        TerminalTrueColorFormatter,
    )
}


def get_formatter(name: str, **settings: Any) -> PygmentizeFormatter:
    """Build the formatter registered under short *name* with *settings*."""
    cls = FORMATTERS.get(name)
    if cls is None:
        choices = ", ".join(sorted(FORMATTERS))
        raise ValueError(f"Unknown formatter {name!r} (choose from: {choices})")
    return cls(**settings)
