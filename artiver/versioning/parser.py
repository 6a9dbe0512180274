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

"""Version string parser for artiver.

Turns loose version strings into ``Version`` values. There is no formal
grammar behind the inputs (Maven artifact versions, OSGi bundle versions,
JDK build strings), so parsing is a fixed pipeline of small stages, each
consuming part of the first dash-delimited token:

    split on "-"  ->  numeric prefix  ->  beta scan  ->  rc scan
                  ->  update marker   ->  numeric tokenize

Recognized forms (case-insensitive markers):

    major.minor.servicepack.patch.other...
    1.0b1            beta 1
    1.1.rc1          release candidate 1
    1.6.0_24         update marker "24"
    1.6.0_u24-b07    update marker "u24", qualifier "b07"
    6.5-SNAPSHOT     qualifier "SNAPSHOT"
    3.4.0.GA.        suffix ".GA."
    r06              no numbers, qualifier "r06"

Only absent or empty input is rejected. Anything else degrades gracefully:
unrecognized text becomes a suffix or qualifier instead of an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import re

from artiver.exceptions import InvalidVersion
from artiver.logging import get_global_logger
from artiver.versioning.model import PreRelease, Version

__all__ = ["parse"]

_NUMBERED_PART = re.compile(r"([0-9.]*[0-9]+)(.*)", re.DOTALL)
_DECIMAL = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class _ParseState:
    """Intermediate result threaded through the marker stages.

    Attributes:
        remaining: Lower-cased first token, shortened as markers are found.
        suffix: Version part suffix candidate (original case).
        pre_release: Marker found so far.
        update_marker: Update marker found so far.

    """

    remaining: str
    suffix: str | None
    pre_release: PreRelease = field(default_factory=PreRelease.final)
    update_marker: str | None = None


def _parse_decimal(text: str) -> int | None:
    """Parse a plain decimal integer, None if text is anything else."""
    text = text.strip()
    if _DECIMAL.fullmatch(text) is None:
        return None
    return int(text)


def _split_on_dash(text: str) -> tuple[str, list[str]]:
    """Split into first token and trailing qualifier tokens.

    Empty tokens are skipped, so "1.0--x" has the single qualifier "x".
    """
    tokens = [t for t in text.split("-") if t]
    if not tokens:
        raise InvalidVersion(f"No version token found in {text!r}")
    return tokens[0], tokens[1:]


def _scan_beta(state: _ParseState) -> _ParseState:
    pos = state.remaining.find("b")
    if pos == -1:
        return state
    number = _parse_decimal(state.remaining[pos + 1 :])
    if number is None:
        # not a beta number, the text stays part of the suffix
        return state
    return replace(
        state,
        remaining=state.remaining[:pos],
        suffix=None,
        pre_release=PreRelease.beta(number),
    )


def _scan_release_candidate(state: _ParseState) -> _ParseState:
    pos = state.remaining.find("rc")
    if pos == -1:
        return state
    number = _parse_decimal(state.remaining[pos + 2 :])
    if number is None:
        return state
    return replace(
        state,
        remaining=state.remaining[:pos],
        suffix=None,
        pre_release=PreRelease.release_candidate(number),
    )


def _scan_update_marker(state: _ParseState) -> _ParseState:
    pos = state.remaining.find("_")
    if pos == -1:
        return state
    return replace(
        state,
        remaining=state.remaining[:pos].strip(),
        suffix=None,
        update_marker=state.remaining[pos + 1 :].strip(),
    )


def _tokenize_numbers(numbered_part: str) -> tuple[int, ...]:
    """Split "1.6.0" into (1, 6, 0), skipping tokens that are not numbers."""
    numbers: list[int] = []
    for token in numbered_part.split("."):
        number = _parse_decimal(token)
        if number is not None:
            numbers.append(number)
    return tuple(numbers)


def _scan_markers(first_token: str, suffix: str | None) -> _ParseState:
    """Run the marker stages over the lower-cased first token.

    A token containing "b" anywhere is never examined for "rc", whether or
    not the beta scan succeeded.
    """
    state = _ParseState(remaining=first_token.lower(), suffix=suffix)
    if "b" in state.remaining:
        state = _scan_beta(state)
    else:
        state = _scan_release_candidate(state)
    return _scan_update_marker(state)


def parse(text: str | None) -> Version:
    """Parse a loose version string into a ``Version``.

    Args:
        text: Version string, e.g. "1.6.0_24-b07-334-10M3326". Surrounding
            whitespace is ignored.

    Returns:
        The parsed, immutable Version.

    Raises:
        InvalidVersion: If text is None, empty, whitespace-only, or made
            only of "-" separators.

    Example:
        ```python
        v = parse("6.5b1-B1")
        v.is_beta         # True
        v.qualifiers      # ("B1",)
        str(v)            # "6.5b1-B1"
        ```

    """
    if text is None:
        raise InvalidVersion("Null string passed as version")
    trimmed = text.strip()
    if not trimmed:
        raise InvalidVersion("Empty string passed as version")

    first_token, qualifiers = _split_on_dash(trimmed)

    match = _NUMBERED_PART.fullmatch(first_token)
    if match is None:
        version = Version(qualifiers=[first_token, *qualifiers])
    else:
        numbered_part, suffix = match.group(1), match.group(2) or None
        state = _scan_markers(first_token, suffix)
        version = Version(
            ordered_numbers=_tokenize_numbers(numbered_part),
            version_part_suffix=state.suffix,
            pre_release=state.pre_release,
            update_marker=state.update_marker,
            qualifiers=qualifiers,
        )

    get_global_logger().debug("VERSION", f"Parsed {text!r} -> {version}")
    return version
