# SPDX-License-Identifier: MIT
"""Conversion between versions and their structured (JSON-like) form.

The structured form is plain JSON-compatible data: dicts for objects, lists
or tuples for arrays, and str/int/float/bool/None for scalars. An unsigned
integer is a non-negative ``int`` that is not a ``bool``.

Example:
    >>> version_to_data(Version(1, 2, 3, ["beta"]))
    {'major': 1, 'minor': 2, 'patch': 3, 'prerelease': ['beta']}
    >>> version_from_data({"major": 1, "minor": 0, "patch": 0})
    Version(major=1, minor=0, patch=0, prerelease=[], build=[])
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from jsonschema import Draft202012Validator, ValidationError
from jsonschema.validators import extend

from .errors import InvalidArgumentError
from .schema import REQUIRED_FIELDS, TAG_FIELDS, VERSION_SCHEMA
from .semver import Version


def _is_unsigned_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


# Same notion of "array" as the decoder, so tuples validate too
VersionValidator = extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine(
        "array", lambda _checker, value: _is_array(value)
    ),
)


def _read_tags(data: dict, key: str) -> list[str]:
    if key not in data:
        return []

    value = data[key]
    if not _is_array(value):
        raise InvalidArgumentError(f"semver json '{key}' is not an array", key=key)

    tags: list[str] = []
    for element in value:
        if not isinstance(element, str):
            raise InvalidArgumentError(
                f"semver json '{key}' contains a non-string element", key=key
            )
        if not element:
            raise InvalidArgumentError(f"semver json '{key}' element may not be empty", key=key)
        tags.append(element)
    return tags


def version_from_data(data: Any) -> Version:
    """Build a Version from its structured form.

    Args:
        data: An object with ``major``, ``minor`` and ``patch`` unsigned
            integers and optional ``prerelease`` / ``build`` string arrays

    Returns:
        The decoded Version

    Raises:
        InvalidArgumentError: If the value is not an object, a required key is
            missing or not an unsigned integer, or a tag array is malformed.
            The error's ``key`` names the offending field.
    """
    if not isinstance(data, dict):
        raise InvalidArgumentError("semver json is not an object")

    numbers = {}
    for key in REQUIRED_FIELDS:
        if key not in data:
            raise InvalidArgumentError(
                f"semver json does not contain a '{key}' positive integer", key=key
            )
        if not _is_unsigned_integer(data[key]):
            raise InvalidArgumentError(
                f"semver json '{key}' is not a non-negative integer, "
                f"got {type(data[key]).__name__} {data[key]!r}",
                key=key,
            )
        numbers[key] = data[key]

    prerelease, build = (_read_tags(data, key) for key in TAG_FIELDS)
    return Version(prerelease=prerelease, build=build, **numbers)


def version_to_data(version: Version) -> dict[str, Any]:
    """Return the structured form of a version.

    Empty ``prerelease`` and ``build`` lists are left out rather than written
    as empty arrays.
    """
    data: dict[str, Any] = {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
    }
    if version.prerelease:
        data["prerelease"] = list(version.prerelease)
    if version.build:
        data["build"] = list(version.build)
    return data


def version_from_json(text: str) -> Version:
    """Decode a version from a JSON document.

    Raises:
        InvalidArgumentError: If the text is not valid JSON or does not hold
            a valid structured version
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"semver json could not be decoded: {e}") from e
    return version_from_data(data)


def version_to_json(version: Version, indent: Optional[int] = None) -> str:
    """Encode a version as a JSON document."""
    return json.dumps(version_to_data(version), indent=indent)


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """Details about a single validation error.

    Attributes:
        field: Path to the invalid field (e.g. "patch" or "prerelease[1]")
        message: Human-readable error message
        value: The invalid value that caused the error (if available)
    """

    field: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Result of structured version validation.

    Attributes:
        valid: Whether the data describes a valid version
        errors: List of validation errors (empty if valid)
        version: The decoded Version (None if invalid)
    """

    valid: bool
    errors: list[ValidationErrorDetail] = field(default_factory=list)
    version: Optional[Version] = None


def _json_path_from_error(error: ValidationError) -> str:
    """Convert a jsonschema error path to a readable field path."""
    if not error.absolute_path:
        return "<root>"
    parts = []
    for part in error.absolute_path:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        elif parts:
            parts.append(f".{part}")
        else:
            parts.append(str(part))
    return "".join(parts)


def _format_error_message(error: ValidationError) -> str:
    """Format a jsonschema error into a human-readable message."""
    if error.validator == "required":
        missing = [key for key in error.validator_value if key not in error.instance]
        if len(missing) == 1:
            return f"Missing required field: {missing[0]}"
        return f"Missing required fields: {', '.join(missing)}"

    if error.validator == "type":
        return f"Expected {error.validator_value}, got {type(error.instance).__name__}"

    if error.validator == "minimum":
        return f"Value must be at least {error.validator_value}"

    if error.validator == "minLength":
        return "Element may not be empty"

    return error.message


def validate_version_data(data: Any) -> ValidationResult:
    """Validate the structured form of a version without raising.

    Every problem is reported, not just the first one.

    Example:
        >>> result = validate_version_data({"major": 1, "minor": 0})
        >>> result.valid
        False
        >>> result.errors[0].message
        'Missing required field: patch'
    """
    if not isinstance(data, dict):
        return ValidationResult(
            valid=False,
            errors=[
                ValidationErrorDetail(
                    field="<root>",
                    message=f"Version must be an object, got {type(data).__name__}",
                    value=data,
                )
            ],
        )

    validator = VersionValidator(VERSION_SCHEMA)
    errors: list[ValidationErrorDetail] = []

    for error in validator.iter_errors(data):
        detail = ValidationErrorDetail(
            field=_json_path_from_error(error),
            message=_format_error_message(error),
            value=error.instance if error.absolute_path else None,
        )
        # jsonschema reports each missing required key separately
        if detail not in errors:
            errors.append(detail)

    if errors:
        return ValidationResult(valid=False, errors=errors)

    # The schema accepts integral floats such as 1.0; the decoder does not.
    try:
        version = version_from_data(data)
    except InvalidArgumentError as e:
        return ValidationResult(
            valid=False,
            errors=[
                ValidationErrorDetail(
                    field=e.key or "<root>", message=e.message, value=data.get(e.key or "")
                )
            ],
        )

    return ValidationResult(valid=True, version=version)
