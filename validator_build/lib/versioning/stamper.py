"""Version placeholder stamping for sources compiled into build artifacts.

The validator's library source carries a placeholder literal instead of its
real version.  Build steps that bake the version into an artifact stamp the
source first and put the placeholder back afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import yaml

logger = logging.getLogger("validator_build.versioning")

DEFAULT_PLACEHOLDER = "GLTF_VALIDATOR_VERSION"


def load_version(pubspec: str | Path) -> str:
    """Read the ``version`` field from a pubspec.yaml document.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the document is not valid YAML or has no string
            ``version`` field.
    """
    path = Path(pubspec)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path} is not a YAML mapping")
    version = data.get("version")
    if not isinstance(version, str) or not version:
        raise ValueError(f"{path} has no string 'version' field")
    return version


class VersionStamper:
    """Swaps a placeholder literal in one file for the real version and back.

    Both directions are whole-file read/replace/write operations.
    """

    def __init__(
        self,
        path: str | Path,
        version: str,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> None:
        if not version:
            raise ValueError("version must not be empty")
        if placeholder in version or version in placeholder:
            raise ValueError(
                f"Version {version!r} collides with placeholder {placeholder!r}"
            )
        self.path = Path(path)
        self.version = version
        self.placeholder = placeholder

    def _replace(self, old: str, new: str) -> int:
        # Line endings are kept byte for byte.
        text = self.path.read_bytes().decode("utf-8")
        count = text.count(old)
        if count:
            self.path.write_bytes(text.replace(old, new).encode("utf-8"))
        return count

    def stamp(self) -> int:
        """Replace every placeholder occurrence with the version.

        Returns:
            Number of replacements made.
        """
        count = self._replace(self.placeholder, self.version)
        if count:
            logger.debug("Stamped %s with %s (%d)", self.path, self.version, count)
        else:
            logger.warning("No %s placeholder found in %s", self.placeholder, self.path)
        return count

    def unstamp(self) -> int:
        """Replace every version occurrence with the placeholder."""
        count = self._replace(self.version, self.placeholder)
        logger.debug("Restored placeholder in %s (%d)", self.path, count)
        return count

    @contextmanager
    def stamped(self) -> Iterator[VersionStamper]:
        """Keep the file stamped for the duration of the block.

        The original bytes are written back on every exit path, so a failing
        build never leaves the real version behind in the source.
        """
        original = self.path.read_bytes()
        try:
            self.stamp()
            yield self
        finally:
            self.path.write_bytes(original)
            logger.debug("Restored %s", self.path)
