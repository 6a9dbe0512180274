"""
Artifact filename version extraction for artiver.

This module pulls version information out of Maven-style artifact file
names, which encode the version after the first "-" that is followed
by a number:

    geronimo-stax-api_1.0_spec-1.0.1     ->  1.0.1
    abdera-i18n-0.4.0-incubating         ->  0.4.0-incubating
    jodconverter-core-3.0-beta-4-jahia3  ->  3.0-beta-4-jahia3
    guava-r06                            ->  None (no numeric version)

Use Cases
---------
- Checking which version of a dependency sits in a lib/ directory
- Grouping a directory listing by artifact name
- Recognizing timestamped snapshot builds (name-20130129.191029-6)

Functions
---------
extract_version : function
    Extract a Version from a file name without extension.
split_filename : function
    Split a file name into artifact name and Version.
parse_timestamped_snapshot : function
    Recognize Maven timestamped snapshot file names.
strip_extension : function
    Drop a known artifact extension (.jar, .war, ...).

Notes
-----
- This is pure string extraction; no file system access is made
- The name part is matched lazily, so the version starts at the FIRST
  "-<digit>" in the name
- A missing version is reported as None, never as an error
- Eclipse-style names (org.eclipse.foo_1.1.2.v20100824-2220) are not
  handled; the "_" separator is not recognized
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from artiver.logging import get_global_logger
from artiver.versioning.model import Version
from artiver.versioning.parser import parse

__all__ = [
    "ArtifactFilename",
    "TimestampedSnapshot",
    "extract_version",
    "split_filename",
    "parse_timestamped_snapshot",
    "strip_extension",
]

FILE_NAME_VERSION_PATTERN = re.compile(
    r"(?P<artifact>.*?)-(?P<version>[0-9.]*[0-9]+.*)?", re.DOTALL
)
MAVEN_VERSION_FILE_PATTERN = re.compile(
    r"(?P<base>.*)-(?P<timestamp>[0-9]{8}.[0-9]{6})-(?P<build>[0-9]+)", re.DOTALL
)

_KNOWN_EXTENSIONS = (".jar", ".war", ".ear", ".pom", ".zip", ".tar.gz", ".aar")


@dataclass(frozen=True)
class ArtifactFilename:
    """An artifact file name split into its name and version.

    Attributes:
        artifact: Artifact name (e.g., "geronimo-stax-api_1.0_spec").
        version: Parsed version (e.g., 1.0.1).

    """

    artifact: str
    version: Version


@dataclass(frozen=True)
class TimestampedSnapshot:
    """A Maven timestamped snapshot file name.

    Attributes:
        base: Everything before the timestamp (e.g., "deployers-4.0").
        timestamp: Deployment timestamp (e.g., "20130129.191029").
        build_number: Deployment counter for that snapshot (e.g., 6).

    """

    base: str
    timestamp: str
    build_number: int


def strip_extension(filename: str) -> str:
    """Drop a known artifact extension, leaving other names untouched.

    Example:
        >>> strip_extension("guava-r06.jar")
        'guava-r06'
        >>> strip_extension("js-1.7R2")
        'js-1.7R2'
    """
    lowered = filename.lower()
    for ext in _KNOWN_EXTENSIONS:
        if lowered.endswith(ext):
            return filename[: -len(ext)]
    return filename


def split_filename(filename_without_extension: str) -> ArtifactFilename | None:
    """
    Split an artifact file name into artifact name and version.

    Parameters
    ----------
    filename_without_extension : str
        File name with the extension already removed,
        e.g. "jahia-api-6.7.0.0-SNAPSHOT".

    Returns
    -------
    ArtifactFilename or None
        The split name, or None when the name does not end in
        "-<version>" where the version starts with a digit.

    Examples
    --------
        >>> split = split_filename("abdera-i18n-0.4.0-incubating")
        >>> split.artifact
        'abdera-i18n'
        >>> str(split.version)
        '0.4.0-incubating'
    """
    logger = get_global_logger()

    m = FILE_NAME_VERSION_PATTERN.fullmatch(filename_without_extension)
    if not m:
        logger.debug(
            "FILENAME", f"No version pattern in {filename_without_extension!r}"
        )
        return None

    ver = m.group("version")
    if not ver:
        logger.debug(
            "FILENAME", f"Empty version in {filename_without_extension!r}"
        )
        return None

    logger.debug(
        "FILENAME", f"Extracted {ver!r} from {filename_without_extension!r}"
    )
    return ArtifactFilename(artifact=m.group("artifact"), version=parse(ver))


def extract_version(filename_without_extension: str) -> Version | None:
    """Extract the version from an artifact file name.

    Args:
        filename_without_extension: e.g. "geronimo-stax-api_1.0_spec-1.0.1".

    Returns:
        The parsed version, or None if the name carries no version.

    Example:
        ```python
        extract_version("geronimo-stax-api_1.0_spec-1.0.1")  # Version('1.0.1')
        extract_version("guava-r06")                         # None
        ```

    """
    split = split_filename(filename_without_extension)
    return split.version if split is not None else None


def parse_timestamped_snapshot(
    filename_without_extension: str,
) -> TimestampedSnapshot | None:
    """Recognize "<base>-<yyyyMMdd.HHmmss>-<build>" snapshot file names.

    Returns None for any other name.
    """
    m = MAVEN_VERSION_FILE_PATTERN.fullmatch(filename_without_extension)
    if not m:
        return None
    return TimestampedSnapshot(
        base=m.group("base"),
        timestamp=m.group("timestamp"),
        build_number=int(m.group("build")),
    )
