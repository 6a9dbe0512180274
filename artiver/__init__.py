"""
artiver - artifact version parsing and ordering

A Python library that parses loose product/artifact version strings into a
structured model and orders them consistently.

artiver provides:
  - Tolerant parsing of Maven, OSGi and JDK-style version strings
  - Beta / release candidate / final ordering
  - Update markers (1.6.0_24) and dash qualifiers (-SNAPSHOT, -b07)
  - Version extraction from artifact file names
  - YAML-configured minimum version gates

Quick Start
-----------
    from artiver import parse, extract_version

    parse("1.0b1") < parse("1.0rc1") < parse("1.0")        # True
    extract_version("geronimo-stax-api_1.0_spec-1.0.1")    # Version('1.0.1')

Package Structure
-----------------
versioning : package
    Version model, parser, ordering and file name extraction.
config : package
    YAML loading of version gate files.
policy : package
    Minimum version gate evaluation.
exceptions : module
    ArtiverError, InvalidVersion, ConfigError.
logging : module
    Verbose/debug logger used by library code.

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__description__ = "Artifact version parsing and ordering"

# Re-export commonly used functions for convenience
from artiver.config import build_gates, load_gate_config
from artiver.exceptions import ArtiverError, ConfigError, InvalidVersion
from artiver.policy import VersionGate, evaluate_gates
from artiver.versioning import (
    PreRelease,
    PreReleaseKind,
    Version,
    compare_versions,
    extract_version,
    is_newer,
    latest,
    parse,
    parse_timestamped_snapshot,
    sort_versions,
    split_filename,
    version_key,
    versions_equal,
)

__all__ = [
    "__version__",
    "__description__",
    "ArtiverError",
    "ConfigError",
    "InvalidVersion",
    "PreRelease",
    "PreReleaseKind",
    "Version",
    "VersionGate",
    "build_gates",
    "compare_versions",
    "evaluate_gates",
    "extract_version",
    "is_newer",
    "latest",
    "load_gate_config",
    "parse",
    "parse_timestamped_snapshot",
    "sort_versions",
    "split_filename",
    "version_key",
    "versions_equal",
]
