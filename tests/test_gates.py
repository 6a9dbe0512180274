"""
Tests for artiver.policy.gates module.

Tests minimum version gates including:
- Single version checks (ok, outdated, prerelease, snapshot, unversioned)
- Evaluation against a directory listing
- Picking the highest of several versions of one artifact
"""

from __future__ import annotations

from artiver.logging import DefaultLogger, set_global_logger
from artiver.policy import GateResult, VersionGate, check_version, evaluate_gates
from artiver.versioning import parse

LISTING = [
    "jackrabbit-api-2.4.2-rev1346887-patch9.jar",
    "guava-r06.jar",
    "jahia-api-6.7.0.0-SNAPSHOT.jar",
    "commons-io-2.4.jar",
    "commons-io-2.11.0.jar",
    "deployers-4.0-20130129.191029-6.jar",
    "spring-core-4.0rc1.jar",
]


def gate(artifact: str, minimum: str, **kwargs) -> VersionGate:
    return VersionGate(artifact, parse(minimum), **kwargs)


class TestCheckVersion:
    """Tests for check_version function."""

    def test_ok(self):
        """Test a version at the minimum passes."""
        result = check_version(gate("a", "2.4.2"), parse("2.4.2"))
        assert result.status == "ok"
        assert result.passed

    def test_qualifiers_do_not_lower_version(self):
        """Test that a qualified version satisfies its plain minimum."""
        result = check_version(gate("a", "2.4.2"), parse("2.4.2-rev1346887-patch9"))
        assert result.status == "ok"

    def test_outdated(self):
        """Test a version below the minimum."""
        result = check_version(gate("a", "2.4"), parse("2.2"))
        assert result.status == "outdated"
        assert not result.passed

    def test_prerelease_rejected_by_default(self):
        """Test that release candidates fail unless allowed."""
        assert check_version(gate("a", "3.0"), parse("4.0rc1")).status == "prerelease"

    def test_prerelease_allowed(self):
        """Test allow_prerelease still enforces the minimum."""
        g = gate("a", "3.0", allow_prerelease=True)
        assert check_version(g, parse("4.0rc1")).status == "ok"
        g = gate("a", "4.0", allow_prerelease=True)
        assert check_version(g, parse("4.0rc1")).status == "outdated"

    def test_snapshot_rejected_by_default(self):
        """Test that snapshot qualifiers and suffixes fail unless allowed."""
        assert check_version(gate("a", "1.0"), parse("6.5-SNAPSHOT")).status == (
            "snapshot"
        )
        assert check_version(gate("a", "1.0"), parse("2.0.0.SNAPSHOT")).status == (
            "snapshot"
        )

    def test_snapshot_allowed(self):
        """Test allow_snapshot lets snapshot builds through."""
        g = gate("a", "6.5", allow_snapshot=True)
        assert check_version(g, parse("6.5-SNAPSHOT")).status == "ok"

    def test_timestamped_snapshot_file(self):
        """Test that the file name marks timestamped snapshots."""
        result = check_version(
            gate("deployers", "4.0"),
            parse("4.0-20130129.191029-6"),
            "deployers-4.0-20130129.191029-6.jar",
        )
        assert result.status == "snapshot"

    def test_unversioned(self):
        """Test that no version gives unversioned."""
        result = check_version(gate("guava", "18.0"), None, "guava-r06.jar")
        assert result.status == "unversioned"
        assert result.found is None


class TestEvaluateGates:
    """Tests for evaluate_gates function."""

    def test_listing(self):
        """Test one result per gate, in gate order."""
        results = evaluate_gates(
            [
                gate("jackrabbit-api", "2.4.2"),
                gate("guava", "18.0"),
                gate("jahia-api", "6.7"),
                gate("log4j", "1.2"),
            ],
            LISTING,
        )
        assert [(r.artifact, r.status) for r in results] == [
            ("jackrabbit-api", "ok"),
            ("guava", "unversioned"),
            ("jahia-api", "snapshot"),
            ("log4j", "missing"),
        ]
        assert results[0].filename == "jackrabbit-api-2.4.2-rev1346887-patch9.jar"
        assert results[3] == GateResult("log4j", "", None, "missing")

    def test_highest_version_wins(self):
        """Test that 2.11.0 is picked over 2.4."""
        (result,) = evaluate_gates([gate("commons-io", "2.5")], LISTING)
        assert result.status == "ok"
        assert result.found == parse("2.11.0")
        assert result.filename == "commons-io-2.11.0.jar"

    def test_timestamped_snapshot_in_listing(self):
        """Test a timestamped snapshot found in a listing."""
        (result,) = evaluate_gates([gate("deployers", "4.0")], LISTING)
        assert result.status == "snapshot"
        (result,) = evaluate_gates(
            [gate("deployers", "4.0", allow_snapshot=True)], LISTING
        )
        assert result.status == "ok"

    def test_prerelease_in_listing(self):
        """Test a release candidate found in a listing."""
        (result,) = evaluate_gates([gate("spring-core", "3.2")], LISTING)
        assert result.status == "prerelease"
        assert result.found.release_candidate_number == 1

    def test_artifact_prefix_is_not_a_match(self):
        """Test that "commons" does not match "commons-io" files."""
        (result,) = evaluate_gates([gate("commons", "1.0")], LISTING)
        assert result.status == "missing"

    def test_empty_listing(self):
        """Test that every gate is missing for an empty listing."""
        results = evaluate_gates([gate("a", "1.0"), gate("b", "1.0")], [])
        assert [r.status for r in results] == ["missing", "missing"]

    def test_verbose_logging(self, capsys):
        """Test the per-gate verbose log line."""
        set_global_logger(DefaultLogger(verbose=True))
        evaluate_gates([gate("commons-io", "2.5")], LISTING)
        out = capsys.readouterr().out
        assert "[GATES] commons-io: ok (found 2.11.0, minimum 2.5)" in out
