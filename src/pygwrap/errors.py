"""Exception classes raised when invoking pygmentize."""

from __future__ import annotations

import signal


class PygmentizeError(Exception):
    """Base class for every failure of a pygmentize invocation."""


class ProcessError(PygmentizeError):
    """Raised when the OS fails to start pygmentize for a reason other than not-found."""

    def __init__(self, os_error: OSError) -> None:
        self.os_error = os_error
        super().__init__(str(os_error))


class NotFoundError(PygmentizeError):
    """Raised when the pygmentize executable does not exist or is not on PATH."""

    def __init__(self, executable: str, os_error: OSError | None = None) -> None:
        self.executable = executable
        self.os_error = os_error
        super().__init__(
            f"pygmentize was not found or not installed (tried {executable!r}).\n"
            "Install it with:\n"
            "  pip install Pygments\n"
            "or point pygwrap at it:\n"
            "  pygwrap.set_path('/path/to/pygmentize')\n"
            "  PYGWRAP_PYGMENTIZE=/path/to/pygmentize"
        )


class PipeError(PygmentizeError):
    """Raised when writing stdin or reading stdout/stderr of pygmentize fails."""

    def __init__(self, os_error: OSError) -> None:
        self.os_error = os_error
        super().__init__(str(os_error))


def describe_returncode(returncode: int) -> str:
    """Render a Popen return code the way a shell user would read it."""
    if returncode < 0:
        try:
            name = signal.Signals(-returncode).name
        except ValueError:
            return f"terminated by signal {-returncode}"
        return f"terminated by signal {-returncode} ({name})"
    return f"status {returncode}"


class PygmentizeExitError(PygmentizeError):
    """Raised when pygmentize exits unsuccessfully.

    Carries the raw return code (negative when killed by a signal) and
    the text pygmentize wrote to stderr.
    """

    def __init__(self, returncode: int, stderr: str) -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"pygmentize exited with {describe_returncode(returncode)}: {stderr}"
        )


class InvalidOutputError(PygmentizeError):
    """Raised when pygmentize writes bytes to stdout that are not valid UTF-8."""

    def __init__(self, output: bytes, reason: UnicodeDecodeError) -> None:
        self.output = output
        self.reason = reason
        self.lossy = output.decode("utf-8", errors="replace")
        super().__init__(f"pygmentize output is not valid UTF-8: {reason}")


class HighlightTimeoutError(PygmentizeError, TimeoutError):
    """Raised when pygmentize runs past the caller's timeout and is killed."""

    def __init__(self, timeout: float, stderr: str = "") -> None:
        self.timeout = timeout
        self.stderr = stderr
        super().__init__(f"pygmentize did not finish within {timeout:g}s")
