# SPDX-License-Identifier: MIT
"""JSON Schema definition for the structured form of a version.

The structured form is an object with integer ``major``, ``minor`` and
``patch`` fields and optional ``prerelease`` / ``build`` arrays of non-empty
strings. Unknown keys are allowed and ignored.
"""

from __future__ import annotations

import copy

REQUIRED_FIELDS = ("major", "minor", "patch")
TAG_FIELDS = ("prerelease", "build")

_TAG_LIST = {
    "type": "array",
    "items": {"type": "string", "minLength": 1},
}

VERSION_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Semantic Version",
    "description": "Structured form of a semantic version",
    "type": "object",
    "required": list(REQUIRED_FIELDS),
    "properties": {
        "major": {
            "type": "integer",
            "minimum": 0,
            "description": "Major version, for incompatible API changes",
        },
        "minor": {
            "type": "integer",
            "minimum": 0,
            "description": "Minor version, for backwards-compatible functionality",
        },
        "patch": {
            "type": "integer",
            "minimum": 0,
            "description": "Patch version, for backwards-compatible bug fixes",
        },
        "prerelease": {**_TAG_LIST, "description": "Pre-release tags, compared in order"},
        "build": {**_TAG_LIST, "description": "Build metadata tags, never compared"},
    },
}


def get_version_schema() -> dict:
    """Return a copy of the version JSON Schema."""
    return copy.deepcopy(VERSION_SCHEMA)
