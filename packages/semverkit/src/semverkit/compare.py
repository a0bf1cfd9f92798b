# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Precedence is decided by major.minor.patch, then pre-release identifiers:
- A release has higher precedence than any of its pre-releases
- Numeric identifiers compare as integers, others lexically
- Numeric identifiers always have lower precedence than alphanumeric ones
- A longer identifier list wins when all shared positions are equal

Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

import re
from enum import IntEnum
from typing import TYPE_CHECKING, Any, NamedTuple, Sequence, Union

if TYPE_CHECKING:
    from .semver import Version

_NUMERIC_IDENTIFIER = re.compile(r"-?[0-9]+")


class IdentifierKind(IntEnum):
    """Kind of a pre-release identifier; the value is its relative order."""

    NUMERIC = 0
    TEXT = 1


class ClassifiedIdentifier(NamedTuple):
    """A pre-release identifier tagged with its kind."""

    kind: IdentifierKind
    value: Union[int, str]


def classify_identifier(identifier: str) -> ClassifiedIdentifier:
    """Tag a pre-release identifier as numeric or text.

    An identifier is numeric when it is an ASCII integer literal, optionally
    signed with a leading "-"; anything else is text.

    Examples:
        >>> classify_identifier("11")
        ClassifiedIdentifier(kind=<IdentifierKind.NUMERIC: 0>, value=11)
        >>> classify_identifier("-1")
        ClassifiedIdentifier(kind=<IdentifierKind.NUMERIC: 0>, value=-1)
        >>> classify_identifier("rc")
        ClassifiedIdentifier(kind=<IdentifierKind.TEXT: 1>, value='rc')
    """
    if _NUMERIC_IDENTIFIER.fullmatch(identifier):
        return ClassifiedIdentifier(IdentifierKind.NUMERIC, int(identifier))
    return ClassifiedIdentifier(IdentifierKind.TEXT, identifier)


def _sign(lhs: Any, rhs: Any) -> int:
    """Return -1 if lhs sorts before rhs, else 1. Callers rule out equality first."""
    return -1 if lhs < rhs else 1


def _compare_identifiers(lhs: ClassifiedIdentifier, rhs: ClassifiedIdentifier) -> int:
    """Compare two classified identifiers, returning -1, 0 or 1.

    Kinds decide first (numeric before text), then values of the same kind.
    """
    if lhs.kind != rhs.kind:
        # Numeric < alphanumeric regardless of value
        return _sign(lhs.kind, rhs.kind)
    if lhs.value == rhs.value:
        return 0
    return _sign(lhs.value, rhs.value)


def compare_prerelease(lhs: Sequence[str], rhs: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    An empty sequence stands for a release.

    Returns:
        -1 if lhs < rhs
        0 if lhs == rhs
        1 if lhs > rhs
    """
    # No pre-release > any pre-release
    if not lhs and not rhs:
        return 0
    if not lhs:
        return 1
    if not rhs:
        return -1

    for left, right in zip(lhs, rhs):
        if left == right:
            continue
        result = _compare_identifiers(classify_identifier(left), classify_identifier(right))
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    if len(lhs) != len(rhs):
        return _sign(len(lhs), len(rhs))

    return 0


def compare_versions(version1: Version, version2: Version) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version
        version2: Second version

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have the same precedence
        1 if version1 > version2

    Note:
        Build metadata is ignored, so versions differing only in build
        metadata compare as 0 even though they are not equal.

    Examples:
        >>> from semverkit import Version
        >>> compare_versions(Version(1, 0, 0), Version(2, 0, 0))
        -1
        >>> compare_versions(Version.from_literal("1.0.0-rc.1"), Version(1, 0, 0))
        -1
        >>> compare_versions(Version.from_literal("1.0.0+a"), Version.from_literal("1.0.0+b"))
        0
    """
    core1 = (version1.major, version1.minor, version1.patch)
    core2 = (version2.major, version2.minor, version2.patch)
    if core1 != core2:
        return _sign(core1, core2)

    return compare_prerelease(version1.prerelease_identifiers, version2.prerelease_identifiers)


def version_key(version: Version) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Two versions have equal keys exactly when :func:`compare_versions`
    reports the same precedence for them.

    Examples:
        >>> from semverkit import Version
        >>> versions = [Version(2, 0, 0), Version(1, 0, 0, ("alpha",)), Version(1, 0, 0)]
        >>> [str(v) for v in sorted(versions, key=version_key)]
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    # Release sorts after every pre-release: (1,) > (0, ...)
    if not version.prerelease_identifiers:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (
            0,
            tuple(classify_identifier(part) for part in version.prerelease_identifiers),
        )

    return (version.major, version.minor, version.patch, prerelease_key)
