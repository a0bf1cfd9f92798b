# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing, ordering and hashing.

These tests verify that:
- Formatting then parsing returns an equal version
- Precedence is a total preorder consistent with the sort key
- Equality is consistent with hashing
- Build metadata never changes precedence but does change equality
"""

from __future__ import annotations

from hypothesis import assume, given, settings, strategies as st

from semverkit import (
    Version,
    compare_versions,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

components = st.integers(min_value=0, max_value=10**6)

# Identifiers free of ".", "+" and empty strings; "-" allowed after the marker
identifiers = st.one_of(
    st.from_regex(r"[0-9]{1,4}", fullmatch=True),
    st.from_regex(r"[0-9A-Za-z-]{1,8}", fullmatch=True),
    st.sampled_from(["alpha", "beta", "rc", "1", "2", "11", "0"]),
)

identifier_lists = st.lists(identifiers, max_size=4).map(tuple)


@st.composite
def versions(draw, build=identifier_lists):
    """Generate a Version with arbitrary identifiers."""
    return Version(
        draw(components),
        draw(components),
        draw(components),
        draw(identifier_lists),
        draw(build),
    )


@st.composite
def close_versions(draw):
    """Generate versions sharing a small core so pre-release logic is exercised."""
    small = st.integers(min_value=0, max_value=2)
    prerelease = st.lists(st.sampled_from(["alpha", "beta", "1", "2", "10", "01"]), max_size=3)
    return Version(
        draw(small),
        draw(small),
        draw(small),
        draw(prerelease),
        draw(st.lists(st.sampled_from(["a", "b"]), max_size=1)),
    )


# =============================================================================
# Round-trip
# =============================================================================


class TestRoundTrip:
    """Formatting a version and parsing it back is lossless."""

    @given(version=versions())
    @settings(max_examples=100)
    def test_parse_format_round_trip(self, version: Version):
        """parse(str(v)) == v for identifiers free of structural characters."""
        assert parse_version(str(version)) == version

    @given(version=versions())
    @settings(max_examples=100)
    def test_literal_matches_parse(self, version: Version):
        """The literal constructor agrees with the parser on valid text."""
        assert Version.from_literal(str(version)) == parse_version(str(version))


# =============================================================================
# Ordering
# =============================================================================


class TestOrderingProperties:
    """Precedence is a total preorder."""

    @given(a=close_versions(), b=close_versions())
    @settings(max_examples=100)
    def test_antisymmetry(self, a: Version, b: Version):
        """compare(a, b) == -compare(b, a)."""
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(a=close_versions(), b=close_versions(), c=close_versions())
    @settings(max_examples=100)
    def test_transitivity(self, a: Version, b: Version, c: Version):
        """a <= b and b <= c implies a <= c."""
        if a <= b and b <= c:
            assert a <= c

    @given(a=close_versions(), b=close_versions())
    @settings(max_examples=100)
    def test_totality(self, a: Version, b: Version):
        """Any two versions are comparable."""
        assert a <= b or b <= a

    @given(version=versions())
    @settings(max_examples=100)
    def test_reflexive(self, version: Version):
        """A version has the same precedence as itself."""
        assert compare_versions(version, version) == 0
        assert version <= version and version >= version

    @given(a=close_versions(), b=close_versions())
    @settings(max_examples=100)
    def test_key_consistent_with_compare(self, a: Version, b: Version):
        """version_key orders exactly like compare_versions."""
        key_a, key_b = version_key(a), version_key(b)
        expected = (key_a > key_b) - (key_a < key_b)
        assert compare_versions(a, b) == expected

    @given(items=st.lists(close_versions(), max_size=12))
    @settings(max_examples=100)
    def test_sorted_is_ascending(self, items: list[Version]):
        """Sorting yields non-decreasing precedence."""
        ordered = sorted(items)
        for left, right in zip(ordered, ordered[1:]):
            assert compare_versions(left, right) <= 0

    @given(version=versions(build=st.just(())), build=identifier_lists)
    @settings(max_examples=100)
    def test_release_above_prerelease(self, version: Version, build: tuple[str, ...]):
        """A release outranks every pre-release of the same core."""
        assume(version.is_prerelease)
        release = Version(version.major, version.minor, version.patch, (), build)
        assert version < release


# =============================================================================
# Equality and hashing
# =============================================================================


class TestEqualityProperties:
    """Equality is structural and consistent with hashing."""

    @given(version=versions())
    @settings(max_examples=100)
    def test_equal_copies_hash_equal(self, version: Version):
        """Equal versions hash identically."""
        copy = Version(
            version.major,
            version.minor,
            version.patch,
            list(version.prerelease_identifiers),
            list(version.build_metadata_identifiers),
        )
        assert copy == version
        assert hash(copy) == hash(version)

    @given(version=versions(build=st.just(())), a=identifier_lists, b=identifier_lists)
    @settings(max_examples=100)
    def test_metadata_precedence_equal_but_unequal(
        self, version: Version, a: tuple[str, ...], b: tuple[str, ...]
    ):
        """Differing build metadata: same precedence, different values."""
        assume(a != b)
        left = Version(version.major, version.minor, version.patch, version.prerelease_identifiers, a)
        right = Version(version.major, version.minor, version.patch, version.prerelease_identifiers, b)
        assert compare_versions(left, right) == 0
        assert left != right
