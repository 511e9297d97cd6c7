"""Browser drag-n-drop build."""

from __future__ import annotations

from validator_build.engine.context import BuildContext
from validator_build.lib.toolchain import pub_build


def build_web(ctx: BuildContext) -> None:
    with ctx.stamper().stamped():
        pub_build(pub=ctx.config.pub, workspace=ctx.root)
