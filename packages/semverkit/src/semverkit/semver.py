# SPDX-License-Identifier: MIT
"""Semantic version value type and parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.11, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +exp.sha.5114f85

Two construction paths are provided and deliberately kept apart:
:func:`parse_version` returns ``None`` for malformed text, while
:meth:`Version.from_literal` raises for text the caller promised was valid.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .compare import compare_versions

# Strict SemVer 2.0.0 grammar, used by is_valid_semver(strict=True)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

_NUMERIC_COMPONENT = re.compile(r"[0-9]+")

_PRERELEASE_MARKER = "-"
_METADATA_MARKER = "+"
_SEPARATOR = "."

_HASH_MULTIPLIER = 0x9DDFEA08EB382D69
_HASH_MASK = (1 << 64) - 1


class InvalidVersionError(ValueError):
    """Raised when text that must be a version is not one."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"{version} is not a valid version"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """A semantic version.

    Equality and hashing cover all five fields, build metadata included.
    Ordering follows SemVer precedence, which ignores build metadata, so
    ``1.0.0+a`` and ``1.0.0+b`` are unequal yet neither is less than the other.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease_identifiers: Dot-separated pre-release identifiers,
            e.g. ``("alpha", "1")``
        build_metadata_identifiers: Dot-separated build metadata identifiers,
            e.g. ``("exp", "sha", "5114f85")``
    """

    major: int
    minor: int
    patch: int
    prerelease_identifiers: tuple[str, ...] = ()
    build_metadata_identifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.major < 0 or self.minor < 0 or self.patch < 0:
            raise ValueError("Negative versioning is invalid.")
        object.__setattr__(self, "prerelease_identifiers", tuple(self.prerelease_identifiers))
        object.__setattr__(
            self, "build_metadata_identifiers", tuple(self.build_metadata_identifiers)
        )

    @classmethod
    def from_literal(cls, literal: str) -> Version:
        """Create a version from text the caller guarantees is valid.

        Use this for versions written into source code. Text coming from
        users, files or the network belongs in :func:`parse_version`.

        Raises:
            InvalidVersionError: If ``literal`` is not a valid version. This
                indicates a bug at the call site, not bad input.
        """
        version = parse_version(literal)
        if version is None:
            raise InvalidVersionError(str(literal))
        return version

    @classmethod
    def from_json(cls, node: Any) -> Version:
        """Create a version from a decoded JSON node. See :mod:`semverkit.serialization`."""
        from .serialization import version_from_json

        return version_from_json(node)

    def to_json(self) -> str:
        """Return the JSON node for this version: its canonical text."""
        return str(self)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease_identifiers:
            version += _PRERELEASE_MARKER + _SEPARATOR.join(self.prerelease_identifiers)
        if self.build_metadata_identifiers:
            version += _METADATA_MARKER + _SEPARATOR.join(self.build_metadata_identifiers)
        return version

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    def __hash__(self) -> int:
        result = 0
        for part in (
            self.major,
            self.minor,
            self.patch,
            *self.prerelease_identifiers,
            *self.build_metadata_identifiers,
        ):
            result = ((result * _HASH_MULTIPLIER) & _HASH_MASK) ^ (hash(part) & _HASH_MASK)
        return result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) >= 0

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from .serialization import version_core_schema

        return version_core_schema()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease_identifiers)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _split_identifiers(zone: str) -> tuple[str, ...]:
    # Empty segments ("1.0.0-", "1.0.0-a..b") are dropped
    return tuple(part for part in zone.split(_SEPARATOR) if part)


def parse_version(version_string: str) -> Optional[Version]:
    """Parse a semantic version string into a Version object.

    The pre-release zone starts at the first ``-`` and the build metadata
    zone at the first ``+``, both located once against the whole string. A
    ``-`` appearing after the first ``+`` belongs to the build metadata.

    Args:
        version_string: A string of the form
            ``MAJOR.MINOR.PATCH[-prerelease][+build]``

    Returns:
        A Version object, or None if the string is not a valid version

    Examples:
        >>> parse_version("1.2.3")
        Version('1.2.3')

        >>> parse_version("1.2.3-beta+exp.sha.5114f85").build_metadata_identifiers
        ('exp', 'sha', '5114f85')

        >>> parse_version("1.2") is None
        True
    """
    if not isinstance(version_string, str):
        return None

    end = len(version_string)
    prerelease_start = version_string.find(_PRERELEASE_MARKER)
    metadata_start = version_string.find(_METADATA_MARKER)
    if prerelease_start < 0 or (0 <= metadata_start < prerelease_start):
        prerelease_start = None
    if metadata_start < 0:
        metadata_start = None

    if prerelease_start is not None:
        required_end = prerelease_start
    elif metadata_start is not None:
        required_end = metadata_start
    else:
        required_end = end

    components = version_string[:required_end].split(_SEPARATOR)
    if len(components) != 3:
        return None
    if not all(_NUMERIC_COMPONENT.fullmatch(component) for component in components):
        return None
    major, minor, patch = (int(component) for component in components)

    prerelease: tuple[str, ...] = ()
    if prerelease_start is not None:
        prerelease_end = metadata_start if metadata_start is not None else end
        prerelease = _split_identifiers(version_string[prerelease_start + 1 : prerelease_end])

    build: tuple[str, ...] = ()
    if metadata_start is not None:
        build = _split_identifiers(version_string[metadata_start + 1 :])

    return Version(major, minor, patch, prerelease, build)


def is_valid_semver(version_string: str, strict: bool = False) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        strict: Also require the full SemVer 2.0.0 grammar (no leading
            zeros, non-empty alphanumeric identifiers)

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("01.0.0")
        True
        >>> is_valid_semver("01.0.0", strict=True)
        False
    """
    if parse_version(version_string) is None:
        return False
    if strict:
        return SEMVER_PATTERN.match(version_string) is not None
    return True
