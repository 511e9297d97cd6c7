"""Per-run build context: configuration plus the version read at startup."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from validator_build.config import BuildConfig
from validator_build.lib.versioning import VersionStamper, load_version


@dataclass(frozen=True)
class BuildContext:
    """Everything a stage needs, passed explicitly to each stage."""

    config: BuildConfig
    version: str

    @classmethod
    def load(cls, config: BuildConfig) -> BuildContext:
        """Read the version from the project's pubspec.yaml."""
        return cls(config=config, version=load_version(config.root_path / config.pubspec))

    def path(self, *parts: str) -> Path:
        return self.config.root_path.joinpath(*parts)

    @property
    def root(self) -> Path:
        return self.config.root_path

    @property
    def build_dir(self) -> Path:
        return self.path(self.config.build_dir)

    @property
    def npm_template_dir(self) -> Path:
        return self.path(self.config.npm_template_dir)

    @property
    def npm_build_dir(self) -> Path:
        return self.path(self.config.npm_build_dir)

    @property
    def issues_file(self) -> Path:
        return self.path(self.config.issues_file)

    def stamper(self) -> VersionStamper:
        return VersionStamper(
            self.path(self.config.version_file),
            self.version,
            self.config.version_placeholder,
        )
