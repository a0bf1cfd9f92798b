# SPDX-License-Identifier: MIT
"""JSON and pydantic integration for versions.

A version is stored in JSON as a single string holding its canonical text:

    >>> from semverkit import Version
    >>> version_to_json(Version(1, 2, 3, ("beta",)))
    '1.2.3-beta'
    >>> version_from_json("1.2.3-beta")
    Version('1.2.3-beta')

Malformed external data is reported through :class:`VersionJSONError` so
callers can tell a wrong node kind apart from an unparsable version string.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic_core import core_schema

from .semver import Version, parse_version

_JSON_KINDS = {
    dict: "object",
    list: "array",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


class VersionJSONError(ValueError):
    """Raised when a JSON value cannot be turned into a version."""

    def __init__(self, node: Any, message: str):
        self.node = node
        self.message = message
        super().__init__(message)


class VersionNodeTypeError(VersionJSONError):
    """Raised when the JSON node holding a version is not a string."""


class VersionTextError(VersionJSONError):
    """Raised when a JSON string does not hold a valid version."""


def version_to_json(version: Version) -> str:
    """Return the JSON node for a version."""
    return str(version)


def version_from_json(node: Any) -> Version:
    """Create a version from a decoded JSON node.

    Args:
        node: A value as produced by ``json.loads``

    Returns:
        The parsed Version

    Raises:
        VersionNodeTypeError: If ``node`` is not a string
        VersionTextError: If ``node`` is not a valid version string
    """
    if not isinstance(node, str):
        kind = _JSON_KINDS.get(type(node), type(node).__name__)
        raise VersionNodeTypeError(node, f"expected string, got {kind}: {node!r}")

    version = parse_version(node)
    if version is None:
        raise VersionTextError(node, f"Invalid version string {node!r}")
    return version


def dumps_version(version: Version) -> str:
    """Serialize a version to a JSON document."""
    return json.dumps(version_to_json(version))


def loads_version(document: str | bytes) -> Version:
    """Deserialize a version from a JSON document.

    Raises:
        VersionJSONError: If the document is not JSON, or does not hold a
            valid version string
    """
    try:
        node = json.loads(document)
    except json.JSONDecodeError as e:
        raise VersionJSONError(document, f"Malformed JSON document: {e.msg}") from e
    return version_from_json(node)


def _validate(value: Any) -> Version:
    if isinstance(value, Version):
        return value
    return version_from_json(value)


def version_core_schema() -> core_schema.CoreSchema:
    """Return the pydantic-core schema for :class:`~semverkit.Version` fields.

    Strings are parsed in both JSON and Python mode, Version instances are
    accepted as-is in Python mode, and values serialize to canonical text.
    """
    from_text = core_schema.no_info_plain_validator_function(_validate)
    return core_schema.json_or_python_schema(
        json_schema=core_schema.chain_schema([core_schema.str_schema(), from_text]),
        python_schema=from_text,
        serialization=core_schema.plain_serializer_function_ser_schema(
            version_to_json, return_schema=core_schema.str_schema()
        ),
    )
