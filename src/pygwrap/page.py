"""Standalone HTML documents around pygmentize's html output."""

from __future__ import annotations

import html

from pygments.formatters import HtmlFormatter as _StyleSheet
from pygments.util import ClassNotFound

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en-US">
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
{css}
    </style>
</head>
<body>
{body}
</body>
</html>
"""


def style_css(style: str = "default", css_class: str = "highlight") -> str:
    """Return the CSS rules of Pygments *style* scoped to ``.css_class``."""
    try:
        sheet = _StyleSheet(style=style, cssclass=css_class)
    except ClassNotFound as exc:
        raise ValueError(f"Unknown Pygments style: {style!r}") from exc
    return sheet.get_style_defs(f".{css_class}")


def html_page(
    fragment: str,
    *,
    style: str = "default",
    title: str | None = None,
    css_class: str = "highlight",
) -> str:
    """Wrap an html-formatter *fragment* in a complete HTML document.

    The page embeds the stylesheet for *style*, so it renders with colors
    without any external CSS file.
    """
    return PAGE_TEMPLATE.format(
        title=html.escape(title or "pygwrap"),
        css=style_css(style, css_class),
        body=fragment.rstrip("\n"),
    )
