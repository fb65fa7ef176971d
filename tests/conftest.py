"""Shared test fixtures for pygwrap tests."""

import shutil
import sys
import textwrap
from pathlib import Path

import pytest
import structlog

from pygwrap.config import reset_path


@pytest.fixture(autouse=True)
def _restore_pygmentize_path():
    """Every test starts and ends with the startup executable path."""
    reset_path()
    yield
    reset_path()


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo logging configuration done by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_tool(tmp_path):
    """Write an executable that stands in for pygmentize.

    Returns a factory taking the Python body of the fake tool and returning
    the path of an executable ``/bin/sh`` wrapper that runs it with the
    current interpreter.  Usage:
        tool = fake_tool("import sys; sys.stdout.write(sys.stdin.read())")
    """
    counter = iter(range(1000))

    def make(body: str, name: str = "pygmentize") -> str:
        n = next(counter)
        script = tmp_path / f"{name}_{n}.py"
        script.write_text(textwrap.dedent(body))
        wrapper = tmp_path / f"{name}_{n}"
        wrapper.write_text(
            "#!/bin/sh\n"
            f'exec "{sys.executable}" "{script}" "$@"\n'
        )
        wrapper.chmod(0o755)
        return str(wrapper)

    return make


@pytest.fixture
def echo_tool(fake_tool, tmp_path):
    """A fake pygmentize that echoes stdin and records its argv as JSON."""
    argv_file = tmp_path / "argv.json"
    tool = fake_tool(f"""\
        import json
        import sys

        with open({str(argv_file)!r}, "w") as fh:
            json.dump(sys.argv[1:], fh)
        sys.stdout.write(sys.stdin.read())
    """)
    return tool, argv_file


@pytest.fixture
def real_pygmentize():
    """Path to the pygmentize script installed with Pygments, or skip."""
    beside_interpreter = Path(sys.executable).parent / "pygmentize"
    if beside_interpreter.exists():
        return str(beside_interpreter)
    found = shutil.which("pygmentize")
    if found is None:
        pytest.skip("pygmentize is not installed")
    return found
