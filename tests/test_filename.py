"""
Tests for artiver.versioning.filename module.

Tests version extraction from artifact file names including:
- Maven artifact names with nested dashes and underscores
- Names without a numeric version
- Artifact name splitting
- Timestamped snapshot detection
- Extension stripping
"""

from __future__ import annotations

import pytest

from artiver.logging import DefaultLogger, set_global_logger
from artiver.versioning import (
    extract_version,
    parse,
    parse_timestamped_snapshot,
    split_filename,
    strip_extension,
)


class TestExtractVersion:
    """Tests for extract_version function."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("geronimo-j2ee-connector_1.5_spec-2.0.0", "2.0.0"),
            ("abdera-i18n-0.4.0-incubating", "0.4.0-incubating"),
            ("deployers-4.0-20130129.191029-6", "4.0-20130129.191029-6"),
            ("eclipse-core-runtime-20070801", "20070801"),
            ("geronimo-stax-api_1.0_spec-1.0.1", "1.0.1"),
            ("jackrabbit-api-2.4.2-rev1346887-patch9", "2.4.2-rev1346887-patch9"),
            ("jahia-api-6.7.0.0-SNAPSHOT", "6.7.0.0-SNAPSHOT"),
            ("jodconverter-core-3.0-beta-4-jahia3", "3.0-beta-4-jahia3"),
            ("js-1.7R2", "1.7R2"),
            ("jakarta-slide-webdavlib-2.2pre1-SLIDE-386476", "2.2pre1-SLIDE-386476"),
            ("geocoder-java-0.9-jdk5", "0.9-jdk5"),
        ],
    )
    def test_maven_file_names(self, filename, expected):
        """Test the version found in real-world artifact names."""
        assert extract_version(filename) == parse(expected)

    def test_base_version_of_extracted(self):
        """Test that qualifiers stay out of the base version string."""
        version = extract_version("abdera-i18n-0.4.0-incubating")
        assert version.base_version_string == "0.4.0"
        assert version.qualifiers == ("incubating",)

    @pytest.mark.parametrize("filename", ["guava-r06", "noversion", "foo-", "-"])
    def test_no_version(self, filename):
        """Test names that carry no numeric version."""
        assert extract_version(filename) is None

    def test_debug_logging(self, capsys):
        """Test the debug log line for a match."""
        set_global_logger(DefaultLogger(debug=True))
        extract_version("js-1.7R2")
        assert "[FILENAME] Extracted '1.7R2' from 'js-1.7R2'" in capsys.readouterr().out


class TestSplitFilename:
    """Tests for split_filename function."""

    def test_split(self):
        """Test artifact name and version are both returned."""
        split = split_filename("geronimo-stax-api_1.0_spec-1.0.1")
        assert split.artifact == "geronimo-stax-api_1.0_spec"
        assert split.version == parse("1.0.1")

    def test_split_unversioned(self):
        """Test that names without a version give None."""
        assert split_filename("guava-r06") is None


class TestTimestampedSnapshot:
    """Tests for parse_timestamped_snapshot function."""

    def test_snapshot(self):
        """Test a Maven timestamped snapshot name."""
        snap = parse_timestamped_snapshot("deployers-4.0-20130129.191029-6")
        assert snap.base == "deployers-4.0"
        assert snap.timestamp == "20130129.191029"
        assert snap.build_number == 6

    @pytest.mark.parametrize(
        "filename", ["deployers-4.0", "jahia-api-6.7.0.0-SNAPSHOT", "x-2013.1-6"]
    )
    def test_not_a_snapshot(self, filename):
        """Test that other names are not recognized."""
        assert parse_timestamped_snapshot(filename) is None


class TestStripExtension:
    """Tests for strip_extension function."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("guava-r06.jar", "guava-r06"),
            ("APP-1.0.WAR", "APP-1.0"),
            ("dist-2.0.tar.gz", "dist-2.0"),
            ("js-1.7R2", "js-1.7R2"),
        ],
    )
    def test_strip(self, filename, expected):
        """Test removal of known extensions only."""
        assert strip_extension(filename) == expected
