# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Minimum version gates for artiver.

Decides whether the artifacts found in a directory listing are new enough,
based on a minimum version per artifact name.

Example:
    Check a lib/ directory against two gates:

        from artiver.policy.gates import VersionGate, evaluate_gates
        from artiver.versioning import parse

        results = evaluate_gates(
            [
                VersionGate("jackrabbit-api", parse("2.4.2")),
                VersionGate("guava", parse("18.0")),
            ],
            ["jackrabbit-api-2.4.2-rev1346887-patch9.jar", "guava-r06.jar"],
        )
        for r in results:
            print(r.artifact, r.status)  # jackrabbit-api ok / guava unversioned

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from artiver.logging import get_global_logger
from artiver.versioning import (
    Version,
    compare_versions,
    latest,
    parse_timestamped_snapshot,
    split_filename,
    strip_extension,
)

GateStatus = Literal[
    "ok", "outdated", "prerelease", "snapshot", "unversioned", "missing"
]


@dataclass(frozen=True)
class VersionGate:
    artifact: str
    minimum: Version
    allow_prerelease: bool = False
    allow_snapshot: bool = False


@dataclass(frozen=True)
class GateResult:
    """Outcome of checking one gate.

    Attributes:
        artifact: Gated artifact name.
        filename: File the version came from ("" when none matched).
        found: Version found, None if missing or unversioned.
        status: "ok" when the gate passes, otherwise the reason it failed.

    """

    artifact: str
    filename: str
    found: Version | None
    status: GateStatus

    @property
    def passed(self) -> bool:
        return self.status == "ok"


def _is_snapshot(version: Version, filename: str) -> bool:
    if version.is_snapshot:
        return True
    return parse_timestamped_snapshot(strip_extension(filename)) is not None


def check_version(
    gate: VersionGate, found: Version | None, filename: str = ""
) -> GateResult:
    """Decide whether one found version satisfies a gate.

    Checks run in order: unversioned, snapshot, pre-release, minimum. The
    minimum check uses compare_versions, so qualifiers are ignored:
    "2.4.2-patch9" satisfies a 2.4.2 minimum.

    Args:
        gate: The gate to check against.
        found: Version found for the artifact (None if its file name had no
            version).
        filename: Source file name, used for snapshot detection and reporting.

    Returns:
        GateResult with the decision.

    """
    status: GateStatus
    if found is None:
        status = "unversioned"
    elif not gate.allow_snapshot and _is_snapshot(found, filename):
        status = "snapshot"
    elif not gate.allow_prerelease and not found.is_final:
        status = "prerelease"
    elif compare_versions(found, gate.minimum) < 0:
        status = "outdated"
    else:
        status = "ok"
    return GateResult(
        artifact=gate.artifact, filename=filename, found=found, status=status
    )


def evaluate_gates(
    gates: Iterable[VersionGate], filenames: Iterable[str]
) -> list[GateResult]:
    """Check every gate against a listing of artifact file names.

    Each file name is stripped of a known extension and split into
    artifact name and version. When several files name the same artifact,
    the highest version is checked. Names without a version only count for
    a gate when no versioned file matched it.

    Args:
        gates: Gates to evaluate.
        filenames: File names (with or without extension, no directories).

    Returns:
        One GateResult per gate, in gate order.

    """
    logger = get_global_logger()

    versioned: dict[str, list[tuple[Version, str]]] = {}
    unversioned: set[str] = set()
    for filename in filenames:
        stem = strip_extension(filename)
        split = split_filename(stem)
        if split is None:
            unversioned.add(stem)
            continue
        versioned.setdefault(split.artifact, []).append((split.version, filename))

    results: list[GateResult] = []
    for gate in gates:
        candidates = versioned.get(gate.artifact, [])
        if candidates:
            best = latest(v for v, _ in candidates)
            source = next(name for v, name in candidates if v is best)
            result = check_version(gate, best, source)
        elif any(
            stem == gate.artifact or stem.startswith(f"{gate.artifact}-")
            for stem in unversioned
        ):
            result = check_version(gate, None)
        else:
            result = GateResult(gate.artifact, "", None, "missing")

        logger.verbose(
            "GATES",
            f"{gate.artifact}: {result.status} "
            f"(found {result.found}, minimum {gate.minimum})",
        )
        results.append(result)
    return results
