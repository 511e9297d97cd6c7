"""Python wrappers around the external build tools (dart, dart2js, pub, npm).

All functions shell out and block until the tool exits.  Tool output is
captured and re-emitted through logging; a non-zero exit raises
:class:`ToolError` carrying the tool's own diagnostics.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger("validator_build.toolchain")


class ToolError(RuntimeError):
    """An external build tool failed."""

    def __init__(self, cmd: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        message = f"{' '.join(self.cmd)} failed with exit code {returncode}"
        if stderr.strip():
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message)


class ToolNotFoundError(ToolError):
    """An external build tool is not on PATH."""

    def __init__(self, executable: str) -> None:
        super().__init__([executable], 127)
        self.args = (f"{executable} not found on PATH",)


def _log_lines(text: str, level: int) -> None:
    for line in text.splitlines():
        if line.strip():
            logger.log(level, "  %s", line)


def run_tool(
    executable: str,
    *args: str,
    workspace: str | Path | None = None,
) -> str:
    """Run an external tool and return its stdout.

    Args:
        executable: Program name or path.
        *args: Command-line arguments.
        workspace: Working directory for the process.

    Raises:
        ToolNotFoundError: If the executable is not found.
        ToolError: If the tool exits non-zero.
    """
    cmd = [executable, *args]
    cwd = str(workspace) if workspace else None
    logger.info("$ %s%s", " ".join(cmd), f"  (in {cwd})" if cwd else "")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, cwd=cwd)
    except FileNotFoundError:
        raise ToolNotFoundError(executable) from None

    _log_lines(result.stdout, logging.INFO)
    if result.returncode != 0:
        _log_lines(result.stderr, logging.ERROR)
        raise ToolError(cmd, result.returncode, result.stderr)
    _log_lines(result.stderr, logging.WARNING)

    return result.stdout


# ---------------------------------------------------------------------------
# Dart SDK
# ---------------------------------------------------------------------------


def dart_snapshot(
    script: str | Path,
    snapshot: str | Path,
    *,
    dart: str = "dart",
    workspace: str | Path | None = None,
) -> None:
    """Compile ``script`` into a Dart VM snapshot at ``snapshot``."""
    run_tool(dart, f"--snapshot={snapshot}", str(script), workspace=workspace)


def dart2js_compile(
    source: str | Path,
    out_file: str | Path,
    extra_args: Sequence[str] = (),
    *,
    dart2js: str = "dart2js",
    workspace: str | Path | None = None,
) -> None:
    """Compile ``source`` to a single JavaScript file."""
    run_tool(dart2js, *extra_args, f"--out={out_file}", str(source), workspace=workspace)


def pub_build(*, pub: str = "pub", workspace: str | Path | None = None) -> None:
    """Run ``pub build`` for the browser target."""
    run_tool(pub, "build", workspace=workspace)


# ---------------------------------------------------------------------------
# npm
# ---------------------------------------------------------------------------


def npm(*args: str, npm: str = "npm", workspace: str | Path | None = None) -> str:
    """Run an npm subcommand (``install``, ``run docs``, ``publish`` ...)."""
    return run_tool(npm, *args, workspace=workspace)
