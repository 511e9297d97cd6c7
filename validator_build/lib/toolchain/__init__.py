"""Subprocess wrappers for the Dart SDK and npm."""

from validator_build.lib.toolchain.client import (
    ToolError,
    ToolNotFoundError,
    dart2js_compile,
    dart_snapshot,
    npm,
    pub_build,
    run_tool,
)

__all__ = [
    "ToolError",
    "ToolNotFoundError",
    "dart2js_compile",
    "dart_snapshot",
    "npm",
    "pub_build",
    "run_tool",
]
