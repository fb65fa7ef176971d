"""pygwrap – syntax highlighting through the pygmentize command-line tool.

Highlights source in over 500 languages and renders it as HTML, SVG, LaTeX
or ANSI terminal colors. pygwrap builds the pygmentize arguments, pipes the
code through the tool and returns what it prints.

Public API
----------
- highlight(code, language, formatter, *, timeout=None) -> str
- set_path(path) -> None, get_path() -> str, reset_path() -> None
- HtmlFormatter, SvgFormatter, LatexFormatter, TerminalFormatter,
  Terminal256Formatter, TerminalTrueColorFormatter
- PygmentizeError and its subclasses
"""

from pygwrap.config import get_path, reset_path, set_path  # noqa: F401
from pygwrap.errors import (  # noqa: F401
    HighlightTimeoutError,
    InvalidOutputError,
    NotFoundError,
    PipeError,
    ProcessError,
    PygmentizeError,
    PygmentizeExitError,
)
from pygwrap.formatters import (  # noqa: F401
    FORMATTERS,
    HtmlFormatter,
    LatexFormatter,
    PygmentizeFormatter,
    SvgFormatter,
    Terminal256Formatter,
    TerminalFormatter,
    TerminalTrueColorFormatter,
    get_formatter,
)
from pygwrap.highlighter import highlight  # noqa: F401
