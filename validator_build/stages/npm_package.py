"""npm package assembly: docs, license and catalog files next to the bundle."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from validator_build.engine.context import BuildContext
from validator_build.lib.toolchain import npm

logger = logging.getLogger("validator_build.stages.npm_package")

# Project files shipped with the package, relative to the project root
PACKAGE_FILES: tuple[str, ...] = (
    "LICENSE",
    "3RD_PARTY",
    "docs/validation.schema.json",
)


def _copy(source: Path, dest_dir: Path) -> None:
    logger.info("copying %s to %s", source, dest_dir)
    shutil.copy2(source, dest_dir)


def assemble_npm_package(ctx: BuildContext) -> None:
    """Copy docs and metadata into ``build/npm`` and generate API docs.

    Expects the bundle and ISSUES.md to be built already.
    """
    template_dir = ctx.npm_template_dir
    dest_dir = ctx.npm_build_dir

    logger.info("Building npm README...")
    _copy(template_dir / "README.md", dest_dir)
    npm("install", npm=ctx.config.npm, workspace=template_dir)
    npm("run", "docs", npm=ctx.config.npm, workspace=template_dir)

    _copy(ctx.issues_file, dest_dir)
    for name in PACKAGE_FILES:
        _copy(ctx.path(name), dest_dir)
