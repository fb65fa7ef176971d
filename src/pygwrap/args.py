"""Command-line argument construction for pygmentize."""

from __future__ import annotations


def to_args(
    language: str | None,
    format_name: str,
    options: str | None,
) -> list[str]:
    """Build ``-f FORMAT (-l LANG | -g) [-O OPTIONS]`` for pygmentize.

    Without a language, ``-g`` asks pygmentize to guess it from the input,
    which is not very reliable. *format_name* is expected to be one of the
    formatter short names; it is passed through as given.
    """
    args = ["-f", format_name]

    if language:
        args += ["-l", language]
    else:
        args.append("-g")

    if options:
        args += ["-O", options]

    return args
