"""Helpers for assembling the npm bundle."""

from validator_build.lib.npm.manifest import (
    read_manifest,
    with_version,
    write_versioned_manifest,
)
from validator_build.lib.npm.preamble import (
    NODE_DETECTOR,
    environment_wrapper,
    get_preamble,
    wrap_compiled_js,
)

__all__ = [
    "read_manifest",
    "with_version",
    "write_versioned_manifest",
    "NODE_DETECTOR",
    "environment_wrapper",
    "get_preamble",
    "wrap_compiled_js",
]
