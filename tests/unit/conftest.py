"""Shared fixtures: a minimal validator project tree."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from validator_build.config import BuildConfig
from validator_build.engine import BuildContext

LIB_SOURCE = (
    "library gltf;\n"
    "\n"
    "const String kGltfValidatorVersion = 'GLTF_VALIDATOR_VERSION';\n"
)

TEMPLATE_MANIFEST = {
    "name": "gltf-validator",
    "version": "0.0.0",
    "description": "Tool to validate glTF assets.",
    "main": "index.js",
    "scripts": {"docs": "jsdoc2md index.js > README.md"},
    "license": "Apache-2.0",
}


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a project root with the files the build tasks touch."""
    (tmp_path / "pubspec.yaml").write_text(
        "name: gltf\nversion: 1.2.3\ndescription: glTF validator\n"
    )
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "gltf.dart").write_text(LIB_SOURCE)
    (tmp_path / "bin").mkdir()
    (tmp_path / "bin" / "gltf_validator.dart").write_text("void main() {}\n")

    template = tmp_path / "tool" / "npm_template"
    template.mkdir(parents=True)
    (template / "node_wrapper.dart").write_text("void main() {}\n")
    (template / "package.json").write_text(json.dumps(TEMPLATE_MANIFEST, indent=2))
    (template / "index.js").write_text("module.exports = require('./gltf_validator.dart.js');\n")
    (template / "README.md").write_text("# gltf-validator\n")

    (tmp_path / "LICENSE").write_text("Apache License\n")
    (tmp_path / "3RD_PARTY").write_text("Third party notices\n")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "validation.schema.json").write_text("{}\n")
    return tmp_path


@pytest.fixture
def config(project: Path) -> BuildConfig:
    return BuildConfig(root=str(project), log_level="DEBUG")


@pytest.fixture
def build_ctx(config: BuildConfig) -> BuildContext:
    return BuildContext.load(config)
