"""npm bundle: dart2js output wrapped for Node.js and browsers."""

from __future__ import annotations

import logging
import shutil
from enum import Enum
from pathlib import Path

from validator_build.engine.context import BuildContext
from validator_build.lib.npm import wrap_compiled_js, write_versioned_manifest
from validator_build.lib.toolchain import dart2js_compile

logger = logging.getLogger("validator_build.stages.npm_bundle")

WRAPPER_SOURCE = "node_wrapper.dart"
OUTPUT_SCRIPT = "gltf_validator.dart.js"
ENTRY_SCRIPT = "index.js"
MANIFEST = "package.json"

RELEASE_ARGS: tuple[str, ...] = (
    "--minify",
    "--no-source-maps",
    "--trust-primitives",
    "--trust-type-annotations",
)
DEBUG_ARGS: tuple[str, ...] = ("-DGLTF_VALIDATOR_DEBUG=true",)


class BundleMode(str, Enum):
    RELEASE = "release"
    DEBUG = "debug"

    @property
    def compiler_args(self) -> tuple[str, ...]:
        return DEBUG_ARGS if self is BundleMode.DEBUG else RELEASE_ARGS


def recreate_dir(path: Path) -> None:
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)


def build_npm_bundle(ctx: BuildContext, mode: BundleMode = BundleMode.RELEASE) -> Path:
    """Compile and assemble the npm bundle in ``build/npm``.

    Returns:
        Path of the wrapped output script.
    """
    template_dir = ctx.npm_template_dir
    dest_dir = ctx.npm_build_dir
    destination = dest_dir / OUTPUT_SCRIPT

    recreate_dir(dest_dir)

    with ctx.stamper().stamped():
        dart2js_compile(
            template_dir / WRAPPER_SOURCE,
            destination,
            mode.compiler_args,
            dart2js=ctx.config.dart2js,
            workspace=ctx.root,
        )

    compiled_js = destination.read_text(encoding="utf-8")
    destination.write_text(wrap_compiled_js(compiled_js, minified=True), encoding="utf-8")

    (dest_dir / f"{OUTPUT_SCRIPT}.deps").unlink(missing_ok=True)

    write_versioned_manifest(template_dir / MANIFEST, dest_dir / MANIFEST, ctx.version)
    shutil.copy2(template_dir / ENTRY_SCRIPT, dest_dir)

    logger.info("npm bundle (%s) ready in %s", mode.value, dest_dir)
    return destination
