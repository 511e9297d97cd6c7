"""npm publish of the assembled package."""

from __future__ import annotations

from validator_build.engine.context import BuildContext
from validator_build.lib.toolchain import npm


def publish_npm_package(ctx: BuildContext) -> None:
    npm("publish", npm=ctx.config.npm, workspace=ctx.npm_build_dir)
