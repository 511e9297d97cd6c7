"""Unit tests for version loading and placeholder stamping."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from validator_build.lib.versioning import (
    DEFAULT_PLACEHOLDER,
    VersionStamper,
    load_version,
)


@pytest.fixture
def source(tmp_path: Path) -> Path:
    path = tmp_path / "gltf.dart"
    path.write_text(
        "// header\nconst String kVersion = 'GLTF_VALIDATOR_VERSION';\n// trailer\n"
    )
    return path


# ---------------------------------------------------------------------------
# load_version
# ---------------------------------------------------------------------------


class TestLoadVersion:
    def test_reads_version(self, tmp_path):
        pubspec = tmp_path / "pubspec.yaml"
        pubspec.write_text("name: gltf\nversion: 1.2.3\n")
        assert load_version(pubspec) == "1.2.3"

    def test_prerelease_version(self, tmp_path):
        pubspec = tmp_path / "pubspec.yaml"
        pubspec.write_text("version: 2.0.0-dev.3.0\n")
        assert load_version(pubspec) == "2.0.0-dev.3.0"

    def test_missing_version(self, tmp_path):
        pubspec = tmp_path / "pubspec.yaml"
        pubspec.write_text("name: gltf\n")
        with pytest.raises(ValueError, match="version"):
            load_version(pubspec)

    def test_non_string_version(self, tmp_path):
        pubspec = tmp_path / "pubspec.yaml"
        pubspec.write_text("version: 2\n")
        with pytest.raises(ValueError):
            load_version(pubspec)

    def test_not_a_mapping(self, tmp_path):
        pubspec = tmp_path / "pubspec.yaml"
        pubspec.write_text("- 1.2.3\n")
        with pytest.raises(ValueError, match="mapping"):
            load_version(pubspec)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_version(tmp_path / "pubspec.yaml")

    def test_malformed_yaml(self, tmp_path):
        pubspec = tmp_path / "pubspec.yaml"
        pubspec.write_text("version: [1.2\n")
        with pytest.raises(ValueError, match="Failed to parse"):
            load_version(pubspec)


# ---------------------------------------------------------------------------
# VersionStamper
# ---------------------------------------------------------------------------


class TestVersionStamper:
    def test_stamp_replaces_placeholder(self, source):
        stamper = VersionStamper(source, "1.2.3")
        assert stamper.stamp() == 1
        text = source.read_text()
        assert text.count("1.2.3") == 1
        assert DEFAULT_PLACEHOLDER not in text

    def test_unstamp_restores_placeholder(self, source):
        stamper = VersionStamper(source, "1.2.3")
        stamper.stamp()
        assert stamper.unstamp() == 1
        text = source.read_text()
        assert text.count(DEFAULT_PLACEHOLDER) == 1
        assert "1.2.3" not in text

    @pytest.mark.parametrize("version", ["1.2.3", "2.0.0-dev.3.0", "10.0.0+build.7"])
    def test_round_trip_is_byte_identical(self, source, version):
        original = source.read_bytes()
        stamper = VersionStamper(source, version)
        stamper.stamp()
        stamper.unstamp()
        assert source.read_bytes() == original

    @pytest.mark.parametrize("newline", [b"\r\n", b"\n", b"\r"])
    def test_round_trip_keeps_line_endings(self, tmp_path, newline):
        path = tmp_path / "gltf.dart"
        original = newline.join(
            [b"library gltf;", b"const v = 'GLTF_VALIDATOR_VERSION';", b""]
        )
        path.write_bytes(original)
        stamper = VersionStamper(path, "1.2.3")
        stamper.stamp()
        assert path.read_bytes() == original.replace(b"GLTF_VALIDATOR_VERSION", b"1.2.3")
        stamper.unstamp()
        assert path.read_bytes() == original

    def test_replaces_every_occurrence(self, tmp_path):
        path = tmp_path / "multi.dart"
        path.write_text("a GLTF_VALIDATOR_VERSION b GLTF_VALIDATOR_VERSION\n")
        stamper = VersionStamper(path, "3.1.4")
        assert stamper.stamp() == 2
        assert path.read_text() == "a 3.1.4 b 3.1.4\n"

    def test_custom_placeholder(self, tmp_path):
        path = tmp_path / "x.txt"
        path.write_text("v=@VERSION@")
        VersionStamper(path, "9.9.9", placeholder="@VERSION@").stamp()
        assert path.read_text() == "v=9.9.9"

    def test_no_placeholder_leaves_file(self, tmp_path, caplog):
        path = tmp_path / "plain.dart"
        path.write_text("nothing here\n")
        assert VersionStamper(path, "1.2.3").stamp() == 0
        assert path.read_text() == "nothing here\n"
        assert "No GLTF_VALIDATOR_VERSION placeholder" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            VersionStamper(tmp_path / "missing.dart", "1.2.3").stamp()

    def test_version_colliding_with_placeholder(self, source):
        with pytest.raises(ValueError, match="collides"):
            VersionStamper(source, "VERSION")

    def test_empty_version(self, source):
        with pytest.raises(ValueError):
            VersionStamper(source, "")


class TestStamped:
    def test_stamped_inside_block(self, source):
        with VersionStamper(source, "1.2.3").stamped():
            assert "1.2.3" in source.read_text()
        assert "1.2.3" not in source.read_text()

    def test_restores_on_failure(self, source):
        original = source.read_bytes()
        with pytest.raises(RuntimeError, match="compiler crashed"):
            with VersionStamper(source, "1.2.3").stamped():
                raise RuntimeError("compiler crashed")
        assert source.read_bytes() == original

    def test_restores_on_interrupt(self, source):
        original = source.read_bytes()
        with pytest.raises(KeyboardInterrupt):
            with VersionStamper(source, "1.2.3").stamped():
                raise KeyboardInterrupt
        assert source.read_bytes() == original

    def test_restores_when_stamp_write_fails(self, source):
        original = source.read_bytes()
        stamper = VersionStamper(source, "1.2.3")

        def partial_write(old, new):
            source.write_bytes(original[:5])
            raise OSError("No space left on device")

        with patch.object(stamper, "_replace", side_effect=partial_write):
            with pytest.raises(OSError, match="No space left"):
                with stamper.stamped():
                    pytest.fail("block must not run")
        assert source.read_bytes() == original

    def test_restores_exact_bytes_when_version_already_present(self, tmp_path):
        # A literal equal to the version elsewhere in the file survives.
        path = tmp_path / "gltf.dart"
        path.write_text("min = '1.2.3';\nversion = 'GLTF_VALIDATOR_VERSION';\n")
        original = path.read_bytes()
        with VersionStamper(path, "1.2.3").stamped():
            pass
        assert path.read_bytes() == original


class TestEndToEnd:
    def test_pubspec_to_stamped_source(self, tmp_path):
        pubspec = tmp_path / "pubspec.yaml"
        pubspec.write_text("version: 1.2.3\n")
        source = tmp_path / "gltf.dart"
        source.write_text("const v = 'GLTF_VALIDATOR_VERSION';\n")

        stamper = VersionStamper(source, load_version(pubspec))
        stamper.stamp()
        assert source.read_text().count("1.2.3") == 1
        assert DEFAULT_PLACEHOLDER not in source.read_text()

        stamper.unstamp()
        assert source.read_text().count(DEFAULT_PLACEHOLDER) == 1
        assert "1.2.3" not in source.read_text()
