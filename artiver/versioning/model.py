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

"""Structured version model for artiver.

A ``Version`` is the parsed form of a loose version string such as
``1.6.0_24-b07-334-10M3326``:

    ordered_numbers      (1, 6, 0)
    version_part_suffix  None
    pre_release          final
    update_marker        "24"
    qualifiers           ("b07", "334", "10M3326")

Instances are immutable. Equality and ordering are implemented in
``artiver.versioning.ordering``; the comparison operators on ``Version``
delegate there.

Note:
    ``a == b`` and ``a.compare(b) == 0`` are NOT the same relation.
    Equality looks at qualifiers and the update marker, ordering does not,
    so ``1.5`` and ``1.5-SNAPSHOT`` compare as 0 while being unequal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from functools import cached_property

MAVEN_LATEST_VERSION = "LATEST"
MAVEN_SNAPSHOT_VERSION = "SNAPSHOT"


class PreReleaseKind(IntEnum):
    """Release state of a version, ordered beta < release candidate < final."""

    BETA = 0
    RC = 1
    FINAL = 2


@dataclass(frozen=True)
class PreRelease:
    """Tagged pre-release marker: final, beta(n) or release candidate(n).

    Attributes:
        kind: The release state.
        number: Marker number for beta/RC, None for final releases.

    """

    kind: PreReleaseKind = PreReleaseKind.FINAL
    number: int | None = None

    def __post_init__(self) -> None:
        if self.kind is PreReleaseKind.FINAL:
            if self.number is not None:
                raise ValueError("final releases carry no pre-release number")
        elif self.number is None or self.number < 0:
            raise ValueError(
                f"{self.kind.name} marker needs a non-negative number, "
                f"got {self.number!r}"
            )

    @classmethod
    def final(cls) -> PreRelease:
        return cls(PreReleaseKind.FINAL)

    @classmethod
    def beta(cls, number: int) -> PreRelease:
        return cls(PreReleaseKind.BETA, number)

    @classmethod
    def release_candidate(cls, number: int) -> PreRelease:
        return cls(PreReleaseKind.RC, number)

    def __str__(self) -> str:
        if self.kind is PreReleaseKind.BETA:
            return f"b{self.number}"
        if self.kind is PreReleaseKind.RC:
            return f"rc{self.number}"
        return ""


@dataclass(frozen=True, eq=False, repr=False)
class Version:
    """Parsed product/artifact version.

    Build instances with ``Version.parse()`` (or ``artiver.parse()``);
    the constructor takes already-parsed fields.

    Attributes:
        ordered_numbers: Leading dot-separated numbers, e.g. (1, 6, 0).
            Empty when the string had no leading numeric run.
        version_part_suffix: Text directly attached to the numbers when no
            marker was recognized, e.g. ".GA." in "3.4.0.GA.".
        pre_release: Beta/RC/final marker.
        update_marker: Text after the first underscore, e.g. "24" or "u24".
        qualifiers: Dash-delimited tokens, in input order.

    """

    ordered_numbers: tuple[int, ...] = ()
    version_part_suffix: str | None = None
    pre_release: PreRelease = field(default_factory=PreRelease.final)
    update_marker: str | None = None
    qualifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # store tuples whatever iterable was passed
        object.__setattr__(self, "ordered_numbers", tuple(self.ordered_numbers))
        object.__setattr__(self, "qualifiers", tuple(self.qualifiers))

    @classmethod
    def parse(cls, text: str | None) -> Version:
        """Parse a version string. See ``artiver.versioning.parser.parse``."""
        from artiver.versioning.parser import parse

        return parse(text)

    # ----------------------------
    # Marker predicates
    # ----------------------------

    @property
    def beta_number(self) -> int | None:
        if self.pre_release.kind is PreReleaseKind.BETA:
            return self.pre_release.number
        return None

    @property
    def release_candidate_number(self) -> int | None:
        if self.pre_release.kind is PreReleaseKind.RC:
            return self.pre_release.number
        return None

    @property
    def is_beta(self) -> bool:
        return self.pre_release.kind is PreReleaseKind.BETA

    @property
    def is_release_candidate(self) -> bool:
        return self.pre_release.kind is PreReleaseKind.RC

    @property
    def is_final(self) -> bool:
        """True when the version is neither a beta nor a release candidate."""
        return self.pre_release.kind is PreReleaseKind.FINAL

    @property
    def is_snapshot(self) -> bool:
        """True for Maven-style snapshots ("6.5-SNAPSHOT", "2.0.0.SNAPSHOT")."""
        marker = MAVEN_SNAPSHOT_VERSION.lower()
        if any(q.lower() == marker for q in self.qualifiers):
            return True
        suffix = (self.version_part_suffix or "").lower()
        return suffix.endswith(marker)

    # ----------------------------
    # Numeric accessors
    # ----------------------------

    def _number_at(self, index: int) -> int:
        if len(self.ordered_numbers) > index:
            return self.ordered_numbers[index]
        return 0

    @property
    def major_version(self) -> int:
        return self._number_at(0)

    @property
    def minor_version(self) -> int:
        return self._number_at(1)

    @property
    def service_pack_version(self) -> int:
        return self._number_at(2)

    @property
    def patch_version(self) -> int:
        return self._number_at(3)

    @property
    def base_version_string(self) -> str:
        """Dot-joined numbers only, e.g. "3.4.0" for "3.4.0.GA."."""
        return ".".join(str(n) for n in self.ordered_numbers)

    # ----------------------------
    # Canonical form
    # ----------------------------

    @cached_property
    def canonical(self) -> str:
        """Field-order-fixed string form of this version.

        Numbers, suffix, pre-release marker, "_" + update marker, then
        "-" + each qualifier. Markers come from the lower-cased first token,
        so "6.5B1" renders as "6.5b1"; suffix and qualifiers keep their case.
        """
        parts = [self.base_version_string]
        if self.version_part_suffix is not None:
            parts.append(self.version_part_suffix)
        parts.append(str(self.pre_release))
        if self.update_marker is not None:
            parts.append(f"_{self.update_marker}")
        parts.extend(f"-{q}" for q in self.qualifiers)
        return "".join(parts)

    def __str__(self) -> str:
        return self.canonical

    def __repr__(self) -> str:
        return f"Version({self.canonical!r})"

    # ----------------------------
    # Equality and ordering
    # ----------------------------

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1. See ``artiver.versioning.ordering``."""
        from artiver.versioning.ordering import compare_versions

        return compare_versions(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from artiver.versioning.ordering import versions_equal

        return versions_equal(self, other)

    def __hash__(self) -> int:
        # 1.5 == 1.5.0.0, so trailing zeros must not change the hash.
        numbers = list(self.ordered_numbers)
        while numbers and numbers[-1] == 0:
            numbers.pop()
        return hash(
            (tuple(numbers), self.pre_release, self.update_marker, self.qualifiers)
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0
