# SPDX-License-Identifier: MIT
"""Semantic version value type with text and structured (JSON-like) forms.

Example:
    >>> from semver_value import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    ['alpha', '1']
    >>> version.to_data()
    {'major': 1, 'minor': 2, 'patch': 3, 'prerelease': ['alpha', '1'], 'build': ['build', '456']}
    >>>
    >>> Version(1, 0, 0, ["alpha"]) < Version(1, 0, 0)
    True
    >>> compare_versions("1.0.0+a", "1.0.0+b")
    0
"""

__version__ = "0.1.0"

from .errors import (
    InvalidArgumentError,
    VersionError,
    VersionParseError,
)
from .semver import (
    Version,
    parse_version,
    parse_version_prefix,
    is_valid_semver,
)
from .compare import (
    compare_versions,
    sort_versions,
    version_key,
)
from .schema import (
    VERSION_SCHEMA,
    get_version_schema,
)
from .structured import (
    ValidationErrorDetail,
    ValidationResult,
    validate_version_data,
    version_from_data,
    version_from_json,
    version_to_data,
    version_to_json,
)

__all__ = [
    # Errors
    "VersionError",
    "InvalidArgumentError",
    "VersionParseError",
    # Version parsing
    "Version",
    "parse_version",
    "parse_version_prefix",
    "is_valid_semver",
    # Version comparison
    "compare_versions",
    "sort_versions",
    "version_key",
    # Structured form
    "VERSION_SCHEMA",
    "get_version_schema",
    "version_from_data",
    "version_to_data",
    "version_from_json",
    "version_to_json",
    "validate_version_data",
    "ValidationErrorDetail",
    "ValidationResult",
]
