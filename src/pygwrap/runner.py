"""Run pygmentize as a child process and classify the outcome."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence

import structlog

from pygwrap.config import get_path
from pygwrap.errors import (
    HighlightTimeoutError,
    InvalidOutputError,
    NotFoundError,
    PipeError,
    ProcessError,
    PygmentizeExitError,
)

logger = structlog.get_logger(__name__)

_STD_OUTPUT_HANDLE = -11
_STD_ERROR_HANDLE = -12
_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


def run_cmd(
    args: Sequence[str],
    stdin: str | None = None,
    *,
    executable: str | None = None,
    timeout: float | None = None,
) -> str:
    """Run pygmentize with *args*, feeding *stdin*, and return its stdout.

    The executable defaults to :func:`pygwrap.config.get_path`, read at
    call time. When *stdin* is None the child gets no input stream at all.
    With *timeout* set, a child still running after that many seconds is
    killed and :class:`HighlightTimeoutError` raised; by default the call
    blocks until pygmentize exits.

    Raises:
        NotFoundError: The executable does not exist.
        ProcessError: The OS refused to start the executable.
        PipeError: Talking to the child over its pipes failed.
        PygmentizeExitError: pygmentize exited unsuccessfully.
        InvalidOutputError: stdout is not valid UTF-8.
        HighlightTimeoutError: *timeout* elapsed first.
    """
    if timeout is not None and timeout <= 0:
        raise ValueError("timeout must be > 0 when provided")

    exe = executable if executable is not None else get_path()
    argv = [exe, *args]
    payload = stdin.encode("utf-8") if stdin is not None else None

    logger.debug(
        "pygmentize_spawn",
        argv=argv,
        input_bytes=len(payload) if payload is not None else None,
    )

    try:
        proc = subprocess.Popen(
            argv,
            stdin=subprocess.PIPE if payload is not None else subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except FileNotFoundError as exc:
        raise NotFoundError(exe, exc) from exc
    except OSError as exc:
        raise ProcessError(exc) from exc

    with proc:
        # communicate() drains stdout/stderr while writing stdin, then closes
        # stdin, so large inputs and outputs cannot deadlock on full pipes.
        try:
            stdout, stderr = proc.communicate(input=payload, timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            proc.kill()
            _, stderr = proc.communicate()
            logger.debug("pygmentize_killed", pid=proc.pid, timeout=timeout)
            raise HighlightTimeoutError(
                timeout or 0.0, _decode_lossy(stderr)
            ) from exc
        except OSError as exc:
            proc.kill()
            proc.wait()
            raise PipeError(exc) from exc

    # Running pygmentize can switch ENABLE_VIRTUAL_TERMINAL_PROCESSING off.
    _enable_virtual_terminal_processing()

    logger.debug(
        "pygmentize_exited",
        returncode=proc.returncode,
        output_bytes=len(stdout),
    )

    if proc.returncode != 0:
        raise PygmentizeExitError(proc.returncode, _decode_lossy(stderr))

    try:
        return stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidOutputError(stdout, exc) from exc


def _decode_lossy(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def _enable_virtual_terminal_processing() -> None:
    """Turn ANSI escape handling back on for this process's Windows console."""
    if sys.platform != "win32":
        return

    import ctypes

    try:
        from ctypes import wintypes

        kernel32 = ctypes.windll.kernel32
        kernel32.GetStdHandle.restype = wintypes.HANDLE
        kernel32.GetStdHandle.argtypes = [wintypes.DWORD]
        kernel32.GetConsoleMode.argtypes = [
            wintypes.HANDLE,
            ctypes.POINTER(wintypes.DWORD),
        ]
        kernel32.SetConsoleMode.argtypes = [wintypes.HANDLE, wintypes.DWORD]
        for std_handle in (_STD_OUTPUT_HANDLE, _STD_ERROR_HANDLE):
            handle = kernel32.GetStdHandle(std_handle)
            mode = wintypes.DWORD()
            if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
                continue  # not a console
            kernel32.SetConsoleMode(
                handle, mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING
            )
    except (AttributeError, OSError):
        logger.debug("console_mode_restore_failed", exc_info=True)
