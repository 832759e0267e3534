# SPDX-License-Identifier: MIT
"""Exceptions raised while building, parsing, or decoding versions."""

from __future__ import annotations

from typing import Optional


class VersionError(Exception):
    """Base exception for version-related errors."""

    pass


class InvalidArgumentError(VersionError, ValueError):
    """Raised when a version is constructed from invalid components.

    Attributes:
        key: Name of the offending field (e.g. "patch" or "prerelease"),
            or None when the problem is with the value as a whole
        message: Human-readable description of the failure
    """

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        self.message = message
        super().__init__(message)


class VersionParseError(VersionError, ValueError):
    """Raised when a version string does not follow the version grammar.

    Attributes:
        text: The string being parsed
        position: Index in ``text`` where parsing failed
        message: Human-readable description of the failure
    """

    def __init__(self, text: str, message: str = "", position: int = 0):
        self.text = text
        self.position = position
        self.message = message or f"Invalid semantic version: {text}"
        super().__init__(self.message)
