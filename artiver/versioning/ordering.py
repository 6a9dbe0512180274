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

"""Equality and ordering of parsed versions.

Two relations are defined over ``Version`` values and they intentionally
disagree in places:

Equality (``versions_equal``, ``==``):
    Numbers compared after zero-padding the shorter list (1.5 == 1.5.0.0),
    plus pre-release marker, update marker and qualifiers. The version part
    suffix is ignored.

Ordering (``compare_versions``, ``<``/``>``):
    1. Equal versions compare as 0.
    2. Numbers compared WITHOUT padding. The first differing number decides;
       if one list is a prefix of the other, the shorter one is lower.
    3. Same numbers: beta < release candidate < final, then marker numbers.
       Update markers and qualifiers are never looked at.

Consequences callers must be aware of:

- ``compare_versions(parse("1.5"), parse("1.5-SNAPSHOT")) == 0`` although
  the two versions are not equal.
- ``compare_versions(parse("1.0"), parse("1.0.0-x")) == -1`` (shorter
  numbers, not equal because of the qualifier) while ``1.0 == 1.0.0``.

Example:
    ```python
    from artiver.versioning import compare_versions, is_newer, parse

    compare_versions(parse("1.0b1"), parse("1.0rc1"))  # -1
    is_newer("4.1.0", "4.0.1")                          # True
    ```
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from itertools import zip_longest
from typing import Any

from artiver.logging import get_global_logger
from artiver.versioning.model import Version
from artiver.versioning.parser import parse

__all__ = [
    "versions_equal",
    "compare_versions",
    "is_newer",
    "version_key",
    "sort_versions",
    "latest",
]

VersionLike = Version | str


def _as_version(value: VersionLike) -> Version:
    return value if isinstance(value, Version) else parse(value)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def versions_equal(a: Version, b: Version) -> bool:
    """Return True if both versions are equal.

    Numbers are zero-padded before comparison; the version part suffix is
    not part of equality.
    """
    if a is b:
        return True
    numbers_equal = all(
        x == y
        for x, y in zip_longest(a.ordered_numbers, b.ordered_numbers, fillvalue=0)
    )
    return (
        numbers_equal
        and a.pre_release == b.pre_release
        and a.update_marker == b.update_marker
        and a.qualifiers == b.qualifiers
    )


def _compare_pre_release(a: Version, b: Version) -> int:
    """Beta < release candidate < final; same kind compares marker numbers."""
    if a.pre_release.kind != b.pre_release.kind:
        return _cmp(a.pre_release.kind, b.pre_release.kind)
    if a.is_final:
        return 0
    return _cmp(a.pre_release.number, b.pre_release.number)


def compare_versions(a: Version, b: Version) -> int:
    """Compare two versions.

    Returns -1 if a < b, 0 if equal, 1 if a > b. A result of 0 does not
    imply ``a == b``: qualifiers and update markers only matter for
    equality.
    """
    if versions_equal(a, b):
        return 0

    left, right = a.ordered_numbers, b.ordered_numbers
    for x, y in zip(left, right):
        if x != y:
            return _cmp(x, y)

    # no padding here: a shorter list matching on its length is lower
    if len(left) != len(right):
        return _cmp(len(left), len(right))

    return _compare_pre_release(a, b)


def is_newer(remote: VersionLike, current: VersionLike | None) -> bool:
    """Decide if 'remote' should be considered newer than 'current'.

    Args:
        remote: Candidate version (string or Version).
        current: Installed version, or None if nothing is installed.

    Returns:
        True iff remote > current. Any version is newer than None.

    Raises:
        InvalidVersion: If a string argument is empty.

    """
    logger = get_global_logger()
    if current is None:
        logger.verbose("VERSION", f"No current version. Treat {remote} as newer")
        return True

    result = compare_versions(_as_version(remote), _as_version(current))
    if result > 0:
        logger.verbose("VERSION", f"{remote} is newer than {current}")
    elif result == 0:
        logger.verbose("VERSION", f"{remote} is the same as {current}")
    else:
        logger.verbose("VERSION", f"{remote} is older than {current}")
    return result > 0


version_key = cmp_to_key(compare_versions)
"""Sort key for Version objects: ``sorted(versions, key=version_key)``."""


def sort_versions(
    versions: Iterable[VersionLike], reverse: bool = False
) -> list[Version]:
    """Sort versions (strings are parsed first), lowest first.

    The sort is stable, so versions comparing as 0 keep their input order.
    """
    return sorted((_as_version(v) for v in versions), key=version_key, reverse=reverse)


def latest(versions: Iterable[VersionLike]) -> Version | None:
    """Return the highest version, or None for an empty iterable.

    Among versions comparing as 0 the first one seen wins.
    """
    best: Version | None = None
    for v in versions:
        candidate = _as_version(v)
        if best is None or compare_versions(candidate, best) > 0:
            best = candidate
    return best
