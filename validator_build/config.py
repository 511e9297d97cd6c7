"""Build configuration -- project layout, tool executables, runtime settings."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path


def _default_npm() -> str:
    return "npm.cmd" if sys.platform.startswith("win") else "npm"


@dataclass
class BuildConfig:
    """Top-level configuration for a build run.

    Relative paths are resolved against ``root`` by :class:`BuildContext`.
    """

    root: str = field(
        default_factory=lambda: os.environ.get("VALIDATOR_BUILD_ROOT", os.getcwd())
    )

    # Project layout
    pubspec: str = "pubspec.yaml"
    version_file: str = "lib/gltf.dart"
    version_placeholder: str = "GLTF_VALIDATOR_VERSION"
    build_dir: str = "build"
    npm_template_dir: str = "tool/npm_template"
    npm_build_dir: str = "build/npm"
    issues_file: str = "ISSUES.md"

    # External tools
    dart: str = field(
        default_factory=lambda: os.environ.get("VALIDATOR_BUILD_DART", "dart")
    )
    dart2js: str = field(
        default_factory=lambda: os.environ.get("VALIDATOR_BUILD_DART2JS", "dart2js")
    )
    pub: str = field(
        default_factory=lambda: os.environ.get("VALIDATOR_BUILD_PUB", "pub")
    )
    npm: str = field(
        default_factory=lambda: os.environ.get("VALIDATOR_BUILD_NPM", _default_npm())
    )

    log_level: str = field(
        default_factory=lambda: os.environ.get("VALIDATOR_BUILD_LOG_LEVEL", "INFO")
    )

    @property
    def root_path(self) -> Path:
        return Path(self.root)


# Singleton for convenience
_config: BuildConfig | None = None


def get_config() -> BuildConfig:
    """Get or create the global build configuration."""
    global _config
    if _config is None:
        _config = BuildConfig()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
