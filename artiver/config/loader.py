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

"""Version gate files for artiver.

A gate file states, per artifact name, the lowest version a deployment may
ship with. Gate files of one project usually share their policy switches,
so those can be pulled out into a ``defaults/gates.yaml`` higher up in the
tree:

    project/
        defaults/gates.yaml      apiVersion + defaults: shared by all
        gates/webapp.yaml        gates: [...] for one deployable

The gate file is laid over the defaults file. Mappings combine key by key
(the gate file deciding on conflicts); any other value, lists included,
is taken from the gate file whole. A gate list is therefore never a union
of both files.

File Format:
    ```yaml
    apiVersion: artiver/v1
    defaults:
      allow_prerelease: false
      allow_snapshot: false
    gates:
      - artifact: jackrabbit-api
        minimum: 2.4.2
      - artifact: guava
        minimum: "18.0"
        allow_snapshot: true
    ```

    Per-gate keys override the ``defaults`` section. Unquoted minimums that
    YAML reads as numbers are converted back with str(), so quote values
    such as "2.10" that YAML would turn into 2.1.

Errors:
    Every problem (missing or empty file, bad YAML, wrong shape, unknown
    apiVersion, unparsable minimum) surfaces as ConfigError, chained to the
    underlying exception where there is one.

Example:
    ```python
    from pathlib import Path
    from artiver.config import build_gates, load_gate_config

    for gate in build_gates(load_gate_config(Path("gates/webapp.yaml"))):
        print(gate.artifact, gate.minimum)
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from artiver.exceptions import ConfigError, InvalidVersion
from artiver.logging import get_global_logger
from artiver.policy.gates import VersionGate
from artiver.versioning import parse

SUPPORTED_API_VERSIONS = ("artiver/v1",)
DEFAULTS_DIR_NAME = "defaults"
DEFAULTS_FILE_NAME = "gates.yaml"


def _read_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML document that must be a non-empty mapping.

    Raises:
        ConfigError: Missing file, YAML syntax error, empty document, or a
            top-level value other than a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as err:
        raise ConfigError(f"file not found: {path}") from err
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {path}: {err}") from err
    if doc is None:
        raise ConfigError(f"YAML file is empty: {path}")
    if not isinstance(doc, dict):
        raise ConfigError(
            f"top-level YAML must be a mapping, got {type(doc).__name__}: {path}"
        )
    return doc


def _overlay(base: dict[str, Any], top: dict[str, Any]) -> dict[str, Any]:
    """Lay ``top`` over ``base`` without touching either.

    Keys holding a mapping on both sides are combined recursively; for any
    other key the value from ``top`` is used as-is.
    """
    merged = dict(base)
    for key, value in top.items():
        below = merged.get(key)
        if isinstance(below, dict) and isinstance(value, dict):
            value = _overlay(below, value)
        merged[key] = value
    return merged


def _find_defaults_file(gate_dir: Path) -> Path | None:
    """Nearest defaults/gates.yaml in gate_dir or any of its ancestors."""
    for directory in (gate_dir, *gate_dir.parents):
        candidate = directory / DEFAULTS_DIR_NAME / DEFAULTS_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def load_gate_config(
    gate_path: Path,
    *,
    defaults_path: Path | None = None,
) -> dict[str, Any]:
    """Read a gate file and lay it over its shared defaults.

    Args:
        gate_path: The gate YAML file.
        defaults_path: Defaults file to use. When omitted, the nearest
            defaults/gates.yaml above the gate file is used, if any.

    Returns:
        Plain dict ready for build_gates. With no defaults file this is the
        gate file's own content.

    Raises:
        ConfigError: If either file is missing, empty, not valid YAML, or not
            a mapping.
    """
    logger = get_global_logger()
    gate_path = gate_path.resolve()

    logger.verbose("CONFIG", f"Loading gates: {gate_path}")
    gate_doc = _read_mapping(gate_path)

    if defaults_path is None:
        found = _find_defaults_file(gate_path.parent)
        # a file inside defaults/ is never its own defaults
        if found is not None and found.resolve() != gate_path:
            defaults_path = found

    if defaults_path is None:
        logger.verbose("CONFIG", "No shared defaults found")
        return gate_doc

    logger.verbose("CONFIG", f"Loading defaults: {defaults_path}")
    merged = _overlay(_read_mapping(defaults_path), gate_doc)
    logger.debug("CONFIG", f"Merged config: {merged}")
    return merged


def build_gates(config: dict[str, Any]) -> list[VersionGate]:
    """Turns a loaded gate configuration into VersionGate objects.

    Args:
        config: Output of load_gate_config (or an equivalent dict).

    Returns:
        One VersionGate per entry of ``gates``, in file order.

    Raises:
        ConfigError: If apiVersion is unsupported, ``gates`` is not a list,
            an entry lacks ``artifact`` or ``minimum``, or a minimum version
            cannot be parsed.
    """
    api_version = config.get("apiVersion")
    if api_version is not None and api_version not in SUPPORTED_API_VERSIONS:
        raise ConfigError(
            f"Unsupported apiVersion {api_version!r}, "
            f"expected one of {', '.join(SUPPORTED_API_VERSIONS)}"
        )

    defaults = config.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ConfigError("'defaults' must be a mapping")

    entries = config.get("gates")
    if not isinstance(entries, list):
        raise ConfigError("'gates' must be a list of gate entries")

    gates: list[VersionGate] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigError(f"gates[{i}] must be a mapping")
        effective = {**defaults, **entry}

        artifact = effective.get("artifact")
        if not isinstance(artifact, str) or not artifact.strip():
            raise ConfigError(f"gates[{i}] is missing 'artifact'")

        raw_minimum = effective.get("minimum")
        if raw_minimum is None:
            raise ConfigError(f"gates[{i}] ({artifact}) is missing 'minimum'")
        try:
            minimum = parse(str(raw_minimum))
        except InvalidVersion as err:
            raise ConfigError(
                f"gates[{i}] ({artifact}) has an invalid minimum: {raw_minimum!r}"
            ) from err

        gates.append(
            VersionGate(
                artifact=artifact.strip(),
                minimum=minimum,
                allow_prerelease=bool(effective.get("allow_prerelease", False)),
                allow_snapshot=bool(effective.get("allow_snapshot", False)),
            )
        )

    get_global_logger().verbose("CONFIG", f"Loaded {len(gates)} gate(s)")
    return gates
