"""Dart VM snapshot of the validator CLI."""

from __future__ import annotations

import logging
from pathlib import Path

from validator_build.engine.context import BuildContext
from validator_build.lib.toolchain import dart_snapshot

logger = logging.getLogger("validator_build.stages.snapshot")

ENTRY_POINT = "bin/gltf_validator.dart"
SNAPSHOT_NAME = "gltf_validator.snapshot"


def build_snapshot(ctx: BuildContext) -> Path:
    """Compile the CLI entry point into ``build/gltf_validator.snapshot``."""
    ctx.build_dir.mkdir(parents=True, exist_ok=True)
    snapshot = ctx.build_dir / SNAPSHOT_NAME

    with ctx.stamper().stamped():
        dart_snapshot(ENTRY_POINT, snapshot, dart=ctx.config.dart, workspace=ctx.root)

    logger.info("Snapshot written to %s", snapshot)
    return snapshot
