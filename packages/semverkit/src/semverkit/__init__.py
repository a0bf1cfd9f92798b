# SPDX-License-Identifier: MIT
"""Semantic version parsing, formatting and comparison.

This package provides a SemVer 2.0.0 version value type for dependency
resolution and build tooling: parsing from text, canonical rendering,
structural equality and hashing, and precedence ordering.

Example:
    >>> from semverkit import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_identifiers
    ('alpha', '1')
    >>>
    >>> parse_version("1.2") is None
    True
    >>>
    >>> compare_versions(version, Version(1, 2, 3))
    -1
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    InvalidVersionError,
    SEMVER_PATTERN,
)
from .compare import (
    IdentifierKind,
    ClassifiedIdentifier,
    classify_identifier,
    compare_prerelease,
    compare_versions,
    version_key,
)
from .serialization import (
    VersionJSONError,
    VersionNodeTypeError,
    VersionTextError,
    version_to_json,
    version_from_json,
    dumps_version,
    loads_version,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    # Version comparison
    "IdentifierKind",
    "ClassifiedIdentifier",
    "classify_identifier",
    "compare_prerelease",
    "compare_versions",
    "version_key",
    # Serialization
    "VersionJSONError",
    "VersionNodeTypeError",
    "VersionTextError",
    "version_to_json",
    "version_from_json",
    "dumps_version",
    "loads_version",
]
