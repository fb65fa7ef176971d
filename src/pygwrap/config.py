"""Process-wide location of the pygmentize executable.

The path starts as ``pygmentize`` (looked up on PATH when spawned), or as
the value of ``PYGWRAP_PYGMENTIZE`` if that is set when pygwrap is first
imported. It can be replaced any number of times with :func:`set_path`.
Nothing is validated here; a bad path surfaces as
:class:`~pygwrap.errors.NotFoundError` on the next invocation.
"""

from __future__ import annotations

import os
from threading import Lock

DEFAULT_PYGMENTIZE = "pygmentize"
ENV_VAR = "PYGWRAP_PYGMENTIZE"


def _startup_default() -> str:
    return os.environ.get(ENV_VAR) or DEFAULT_PYGMENTIZE


_PATH_LOCK = Lock()
_STARTUP_PATH = _startup_default()
_path = _STARTUP_PATH


def get_path() -> str:
    """Return the executable path every new invocation will spawn."""
    with _PATH_LOCK:
        return _path


def set_path(path: str | os.PathLike[str]) -> None:
    """Replace the pygmentize executable path or name for later invocations."""
    global _path
    value = os.fspath(path)
    with _PATH_LOCK:
        _path = value


def reset_path() -> None:
    """Restore the path pygwrap started with."""
    set_path(_STARTUP_PATH)
