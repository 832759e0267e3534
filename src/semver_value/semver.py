# SPDX-License-Identifier: MIT
"""Semantic version value type and text parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1
- Build metadata: +build, +build.123, +20240101

Tags are separated by dots. Pre-release tags are alphanumeric; build tags may
also contain hyphens (+sha-5114f85). Build metadata is kept for
round-tripping but takes no part in equality or ordering.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable

from .errors import InvalidArgumentError, VersionParseError

_UNEXPECTED_CHARACTER = "unexpected character in version string"


def _check_number(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"semver {name} must be an integer, got {type(value).__name__}", key=name
        )
    if value < 0:
        raise InvalidArgumentError(f"semver {name} may not be negative", key=name)
    return value


def _check_tags(name: str, tags: Iterable[str]) -> list[str]:
    if isinstance(tags, str):
        raise InvalidArgumentError(
            f"semver {name} must be a sequence of strings, not a string", key=name
        )
    try:
        checked = list(tags)
    except TypeError:
        raise InvalidArgumentError(
            f"semver {name} must be a sequence of strings, got {type(tags).__name__}",
            key=name,
        ) from None
    for element in checked:
        if not isinstance(element, str):
            raise InvalidArgumentError(
                f"semver {name} element must be a string, got {type(element).__name__}",
                key=name,
            )
        if not element:
            raise InvalidArgumentError(f"semver {name} element may not be empty", key=name)
    return checked


def _prerelease_less(lhs: list[str], rhs: list[str]) -> bool:
    # A release outranks any pre-release of the same MAJOR.MINOR.PATCH.
    if not lhs:
        return False
    if not rhs:
        return True
    return lhs < rhs


@dataclass(eq=False, slots=True)
class Version:
    """A semantic version, modeled after https://semver.org/.

    Fields are public and may be reassigned after construction; validation
    only happens when the version is built.

    Attributes:
        major: Major version, for incompatible API changes
        minor: Minor version, for backwards-compatible functionality
        patch: Patch version, for backwards-compatible bug fixes
        prerelease: Pre-release tags (e.g. ["alpha", "1"]); compared
            element by element when major, minor and patch are equal
        build: Build metadata tags (e.g. ["build", "456"]); never compared

    Raises:
        InvalidArgumentError: If a number is negative or not an integer, or
            a pre-release or build element is empty or not a string
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: list[str] = field(default_factory=list)
    build: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.major = _check_number("major", self.major)
        self.minor = _check_number("minor", self.minor)
        self.patch = _check_number("patch", self.patch)
        self.prerelease = _check_tags("prerelease", self.prerelease)
        self.build = _check_tags("build", self.build)

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> Version:
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(text, strict=strict)

    @classmethod
    def from_data(cls, data: Any) -> Version:
        """Build a version from its structured (JSON-like) form."""
        from .structured import version_from_data

        return version_from_data(data)

    def to_data(self) -> dict[str, Any]:
        """Return the structured (JSON-like) form of this version."""
        from .structured import version_to_data

        return version_to_data(self)

    def to_string(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    def __str__(self) -> str:
        return self.to_string()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    # Equality and ordering ignore build metadata. Only == and < are
    # implemented directly; the other operators are defined in terms of them.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.patch == other.patch
            and self.prerelease == other.prerelease
        )

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not self == other

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        for attr in ("major", "minor", "patch"):
            lhs = getattr(self, attr)
            rhs = getattr(other, attr)
            if lhs != rhs:
                return lhs < rhs
        return _prerelease_less(self.prerelease, other.prerelease)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not self < other

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]


# Patterns are applied with .match() at a position and carry no "$" anchor, so
# scanning stops at the first character that cannot continue the version.
_NUMBER_PATTERN = re.compile(r"[0-9]+")
_PRERELEASE_PATTERN = re.compile(r"[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*")
_BUILD_PATTERN = re.compile(r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*")


def _read_number(text: str, pos: int, name: str) -> tuple[int, int]:
    match = _NUMBER_PATTERN.match(text, pos)
    if not match:
        raise VersionParseError(
            text, f"expected {name} version number at position {pos}", position=pos
        )
    return int(match.group()), match.end()


def _expect_dot(text: str, pos: int) -> int:
    if pos >= len(text) or text[pos] != ".":
        raise VersionParseError(text, _UNEXPECTED_CHARACTER, position=pos)
    return pos + 1


def _read_tags(
    text: str, pos: int, name: str, pattern: re.Pattern[str]
) -> tuple[list[str], int]:
    match = pattern.match(text, pos)
    if match:
        pos = match.end()
        # A dot the pattern did not consume starts an empty identifier
        if pos >= len(text) or text[pos] != ".":
            return match.group().split("."), pos
        pos += 1
    raise VersionParseError(text, f"empty {name} identifier at position {pos}", position=pos)


def parse_version_prefix(text: str, start: int = 0) -> tuple[Version, int]:
    """Parse a version from the beginning of ``text[start:]``.

    Scanning stops at the first character that cannot continue the version,
    the way a stream extraction would leave the rest of the input unread.

    Args:
        text: String containing a version
        start: Index to start parsing at

    Returns:
        The parsed Version and the index just past the last consumed character

    Raises:
        VersionParseError: If no version can be read at ``start``
    """
    if not isinstance(text, str):
        raise VersionParseError(
            str(text), f"Version must be a string, got {type(text).__name__}"
        )

    major, pos = _read_number(text, start, "major")
    pos = _expect_dot(text, pos)
    minor, pos = _read_number(text, pos, "minor")
    pos = _expect_dot(text, pos)
    patch, pos = _read_number(text, pos, "patch")

    prerelease: list[str] = []
    build: list[str] = []
    if pos < len(text) and text[pos] == "-":
        prerelease, pos = _read_tags(text, pos + 1, "prerelease", _PRERELEASE_PATTERN)
    if pos < len(text) and text[pos] == "+":
        build, pos = _read_tags(text, pos + 1, "build", _BUILD_PATTERN)

    return Version(major, minor, patch, prerelease, build), pos


def parse_version(version_string: str, strict: bool = False) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string of the form MAJOR.MINOR.PATCH[-prerelease][+build]
        strict: Reject trailing characters after the version instead of
            ignoring them

    Returns:
        A Version object with parsed components

    Raises:
        VersionParseError: If the string does not start with a valid version,
            or has trailing characters in strict mode

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=[], build=[])

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=['alpha', '1'], build=[])

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease=['rc', '1'], build=['build', '456'])
    """
    if not isinstance(version_string, str):
        raise VersionParseError(
            str(version_string),
            f"Version must be a string, got {type(version_string).__name__}",
        )

    version_string = version_string.strip()
    if not version_string:
        raise VersionParseError(version_string, "Version string cannot be empty")

    version, end = parse_version_prefix(version_string)
    if strict and end != len(version_string):
        raise VersionParseError(version_string, _UNEXPECTED_CHARACTER, position=end)
    return version


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a complete, valid version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha+build.5")
        True
    """
    try:
        parse_version(version_string, strict=True)
    except VersionParseError:
        return False
    return True
