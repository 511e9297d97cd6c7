"""ISSUES.md generation."""

from __future__ import annotations

import logging
from pathlib import Path

from validator_build.engine.context import BuildContext
from validator_build.lib.issues import ERROR_CLASSES, Catalog, render_catalog

logger = logging.getLogger("validator_build.stages.issues")


def generate_issues(ctx: BuildContext) -> Catalog:
    """Write the issue catalog, replacing any previous ISSUES.md."""
    catalog = render_catalog(ERROR_CLASSES)
    write_catalog(catalog, ctx.issues_file)
    logger.info("Total number of issues: %d", catalog.total)
    return catalog


def write_catalog(catalog: Catalog, path: Path) -> None:
    path.write_text(catalog.markdown, encoding="utf-8")
