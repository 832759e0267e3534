# SPDX-License-Identifier: MIT
"""Property-based tests for version round-trips and ordering.

These tests verify that:
- Text and structured forms round-trip every valid version
- Ordering is a strict total order that ignores build metadata
- The derived operators agree with == and <
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semver_value import (
    Version,
    compare_versions,
    parse_version,
    version_from_data,
    version_key,
    version_to_data,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=10_000)
alphanumeric_tags = st.from_regex(r"[0-9A-Za-z]{1,8}", fullmatch=True)
build_tags = st.from_regex(r"[0-9A-Za-z-]{1,8}", fullmatch=True)
any_tags = st.text(min_size=1, max_size=8)


@st.composite
def versions(draw, tags=alphanumeric_tags, build=None):
    """Generate a Version with small numbers and optional tags."""
    return Version(
        draw(numbers),
        draw(numbers),
        draw(numbers),
        draw(st.lists(tags, max_size=3)),
        draw(st.lists(build or tags, max_size=3)),
    )


class TestRoundTripProperties:
    """Round-trips through text and structured forms."""

    @given(version=versions(build=build_tags))
    @settings(max_examples=100)
    def test_text_round_trip(self, version: Version) -> None:
        restored = parse_version(str(version), strict=True)

        assert restored == version
        assert restored.prerelease == version.prerelease
        assert restored.build == version.build

    @given(version=versions(tags=any_tags))
    @settings(max_examples=100)
    def test_structured_round_trip(self, version: Version) -> None:
        data = version_to_data(version)
        restored = version_from_data(data)

        assert restored == version
        assert restored.build == version.build
        assert ("prerelease" in data) == bool(version.prerelease)
        assert ("build" in data) == bool(version.build)


class TestOrderingProperties:
    """Ordering laws over generated versions."""

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_trichotomy(self, a: Version, b: Version) -> None:
        assert [a < b, a == b, a > b].count(True) == 1

    @given(a=versions(), b=versions(), c=versions())
    @settings(max_examples=200)
    def test_transitivity(self, a: Version, b: Version, c: Version) -> None:
        low, mid, high = sorted([a, b, c])
        assert low <= mid <= high
        assert low <= high

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_derived_operators(self, a: Version, b: Version) -> None:
        assert (a != b) == (not a == b)
        assert (a <= b) == (a == b or a < b)
        assert (a > b) == (not a <= b)
        assert (a >= b) == (not a < b)

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_key_agrees_with_operators(self, a: Version, b: Version) -> None:
        assert (version_key(a) < version_key(b)) == (a < b)
        assert (version_key(a) == version_key(b)) == (a == b)
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(version=versions(), build=st.lists(alphanumeric_tags, max_size=3))
    def test_build_ignored(self, version: Version, build: list[str]) -> None:
        other = Version(version.major, version.minor, version.patch, version.prerelease, build)

        assert other == version
        assert not other < version
        assert not version < other
