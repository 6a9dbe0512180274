"""
Version parsing, comparison and extraction for artiver.

This package turns loose, real-world version strings (Maven artifact
versions, OSGi bundle versions, JDK build strings) into structured
``Version`` values and orders them consistently.

Modules
-------
model : module
    The immutable Version value and its PreRelease marker.
parser : module
    The parsing pipeline (split, numeric prefix, beta, rc, update marker).
ordering : module
    Equality, ordering and sort helpers.
filename : module
    Extract versions from artifact file names.

Public API
----------
parse : function
    Parse a version string, raising InvalidVersion on empty input.
Version : dataclass
    Parsed version with numbers, suffix, markers and qualifiers.
versions_equal / compare_versions : function
    Equality (zero-padded numbers) and ordering (-1, 0, 1).
is_newer : function
    Check if a remote version is newer than the current version.
extract_version : function
    Version from a file name such as "jahia-api-6.7.0.0-SNAPSHOT".

Examples
--------
Parsing:

    >>> from artiver.versioning import parse
    >>> v = parse("1.6.0_24-b07-334-10M3326")
    >>> v.ordered_numbers, v.update_marker, v.qualifiers
    ((1, 6, 0), '24', ('b07', '334', '10M3326'))

Comparison:

    >>> parse("1.0b1") < parse("1.0rc1") < parse("1.0")
    True
    >>> parse("1.5") == parse("1.5.0.0")
    True

Notes
-----
- Equality and ordering deliberately disagree on qualifiers and update
  markers: 1.5 and 1.5-SNAPSHOT compare as 0 but are not equal
- No network or file I/O happens in this package
"""

from .filename import (
    ArtifactFilename,
    TimestampedSnapshot,
    extract_version,
    parse_timestamped_snapshot,
    split_filename,
    strip_extension,
)
from .model import (
    MAVEN_LATEST_VERSION,
    MAVEN_SNAPSHOT_VERSION,
    PreRelease,
    PreReleaseKind,
    Version,
)
from .ordering import (
    compare_versions,
    is_newer,
    latest,
    sort_versions,
    version_key,
    versions_equal,
)
from .parser import parse

__all__ = [
    "MAVEN_LATEST_VERSION",
    "MAVEN_SNAPSHOT_VERSION",
    "ArtifactFilename",
    "PreRelease",
    "PreReleaseKind",
    "TimestampedSnapshot",
    "Version",
    "compare_versions",
    "extract_version",
    "is_newer",
    "latest",
    "parse",
    "parse_timestamped_snapshot",
    "sort_versions",
    "split_filename",
    "strip_extension",
    "version_key",
    "versions_equal",
]
