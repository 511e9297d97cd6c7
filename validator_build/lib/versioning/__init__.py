"""Version loading and placeholder stamping."""

from validator_build.lib.versioning.stamper import (
    DEFAULT_PLACEHOLDER,
    VersionStamper,
    load_version,
)

__all__ = [
    "DEFAULT_PLACEHOLDER",
    "VersionStamper",
    "load_version",
]
