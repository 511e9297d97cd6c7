"""package.json handling for the npm bundle."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger("validator_build.npm")

MANIFEST_INDENT = 4


def with_version(manifest: dict[str, Any], version: str) -> dict[str, Any]:
    """Return a copy of ``manifest`` whose ``version`` is ``version``.

    Key order and all other fields are kept as they are.
    """
    patched = dict(manifest)
    patched["version"] = version
    return patched


def read_manifest(path: str | Path) -> dict[str, Any]:
    """Read a package.json file.

    Raises:
        ValueError: If the file is not valid JSON or not a JSON object.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def dump_manifest(manifest: dict[str, Any]) -> str:
    return json.dumps(manifest, indent=MANIFEST_INDENT, ensure_ascii=False)


def write_versioned_manifest(
    template: str | Path, destination: str | Path, version: str
) -> dict[str, Any]:
    """Copy a package.json template to ``destination`` with ``version`` set."""
    manifest = with_version(read_manifest(template), version)
    logger.info("copying package.json to %s", Path(destination).parent)
    Path(destination).write_text(dump_manifest(manifest), encoding="utf-8")
    return manifest
