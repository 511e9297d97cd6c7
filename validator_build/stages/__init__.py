"""Build pipeline stages, one module per stage."""

from validator_build.stages.issues import generate_issues
from validator_build.stages.npm_bundle import BundleMode, build_npm_bundle
from validator_build.stages.npm_package import assemble_npm_package
from validator_build.stages.publish import publish_npm_package
from validator_build.stages.snapshot import build_snapshot
from validator_build.stages.web import build_web

__all__ = [
    "generate_issues",
    "BundleMode",
    "build_npm_bundle",
    "assemble_npm_package",
    "publish_npm_package",
    "build_snapshot",
    "build_web",
]
