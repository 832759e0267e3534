# SPDX-License-Identifier: MIT
"""Version comparison helpers.

Ordering is by MAJOR, MINOR, PATCH, then pre-release:
- A pre-release sorts before the release it precedes (1.0.0-alpha < 1.0.0)
- Pre-release tags are compared element by element as plain strings, and a
  shorter tag list sorts first when it is a prefix of the longer one
Build metadata is ignored.
"""

from __future__ import annotations

from typing import Union

from .semver import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1 == v2:
        return 0
    return -1 if v1 < v2 else 1


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with ``Version.__lt__``.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # Releases get (1,) so they sort after every (0, tags) pre-release key
    if v.prerelease:
        prerelease_key: tuple = (0, tuple(v.prerelease))
    else:
        prerelease_key = (1,)

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(
    versions: list[Union[str, Version]], reverse: bool = False
) -> list[Version]:
    """Parse and sort versions, returning Version objects.

    The sort is stable, so versions differing only in build metadata keep
    their input order.
    """
    return sorted((_coerce(v) for v in versions), key=version_key, reverse=reverse)
