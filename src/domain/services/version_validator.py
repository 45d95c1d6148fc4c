"""Definition version validation domain service.

A definition may be pinned by an explicit semantic version in
spec.version or by the revision name annotation, never both. When a
version is given it must carry major, minor and patch parts.

Version Constraints:
- Empty version is allowed (version is optional)
- Exactly three dot-separated parts
- Each part is a signed decimal integer that fits in 64 bits
"""

from __future__ import annotations

import re

from src.domain.errors.input_format import (
    InvalidVersionError,
    MultipleDefinitionVersionsError,
)

VERSION_PART_COUNT: int = 3

# Optional sign then ASCII digits; no whitespace, no underscores
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _is_integer(part: str) -> bool:
    if not _INTEGER_PATTERN.fullmatch(part):
        return False
    return _INT64_MIN <= int(part) <= _INT64_MAX


def validate_semantic_version(version: str) -> None:
    """Validate that a definition version has major, minor and patch parts.

    Args:
        version: The spec.version value, possibly empty.

    Raises:
        InvalidVersionError: If the version is non-empty and not three
            integer parts separated by dots.
    """
    if not version:
        return

    parts = version.split(".")
    if len(parts) != VERSION_PART_COUNT:
        raise InvalidVersionError(version)

    for part in parts:
        if not _is_integer(part):
            raise InvalidVersionError(version)


def validate_multiple_def_versions_not_present(
    version: str,
    revision_name: str,
    object_type: str,
) -> None:
    """Validate that spec.version and the revision name annotation are not both set.

    Args:
        version: The spec.version value.
        revision_name: The revision name annotation value.
        object_type: Label used in the error, e.g. "TraitDefinition".

    Raises:
        MultipleDefinitionVersionsError: If both values are non-empty.
    """
    if version and revision_name:
        raise MultipleDefinitionVersionsError(
            object_type=object_type,
            version=version,
            revision_name=revision_name,
        )
