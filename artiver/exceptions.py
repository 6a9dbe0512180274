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

"""Exception hierarchy for artiver.

This module defines a small exception hierarchy that allows library users
to distinguish between the error kinds artiver can raise:

- InvalidVersion: An absent or empty version string was passed to the parser
- ConfigError: Gate configuration errors (YAML parse, missing fields,
  unparsable minimum versions)

All exceptions inherit from ArtiverError, allowing users to catch all
artiver errors with a single except clause if needed.

Note:
    Malformed but non-empty version strings never raise. Unrecognized
    fragments are demoted to qualifiers or dropped so that every real-world
    version string still gets a place in the ordering.

Example:
    Catching specific error types:
        ```python
        from artiver import parse
        from artiver.exceptions import InvalidVersion

        try:
            version = parse(user_input)
        except InvalidVersion as e:
            print(f"Invalid version: {e}")
        ```

    Catching all artiver errors:
        ```python
        from artiver.exceptions import ArtiverError

        try:
            gates = build_gates(load_gate_config(Path("gates.yaml")))
        except ArtiverError as e:
            print(f"artiver error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "ArtiverError",
    "InvalidVersion",
    "ConfigError",
]


class ArtiverError(Exception):
    """Base exception for all artiver errors.

    All artiver-specific exceptions inherit from this class, allowing users
    to catch all artiver errors with a single except clause if needed.
    """

    pass


class InvalidVersion(ArtiverError, ValueError):
    """Raised when a version string cannot be parsed at all.

    This only happens for absent (None), empty, or whitespace-only input.
    It also subclasses ValueError, so code written against the usual
    ``except ValueError`` idiom keeps working.

    Example:
        Rejecting empty input:
            ```python
            from artiver.exceptions import InvalidVersion
            from artiver.versioning import parse

            try:
                parse("   ")
            except InvalidVersion as e:
                print(e)  # Empty string passed as version
            ```
    """

    pass


class ConfigError(ArtiverError):
    """Raised for gate configuration errors.

    This exception is raised when there are problems with:

    - Missing gate files
    - YAML parsing (syntax errors, empty files, invalid structure)
    - Missing or invalid gate fields
    - Unsupported apiVersion values
    - Minimum versions that cannot be parsed

    Example:
        Catching configuration errors:
            ```python
            from artiver.config import load_gate_config
            from artiver.exceptions import ConfigError

            try:
                config = load_gate_config(Path("invalid.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
