"""Input format errors.

Raised when a definition's metadata is malformed: a version string that
is not major.minor.patch, or both versioning mechanisms supplied at once.
These errors are reported to the caller verbatim and never retried.
"""

from __future__ import annotations

from src.domain.exceptions import DefinitionGuardError


class InputFormatError(DefinitionGuardError):
    """Base class for malformed input errors."""

    pass


class InvalidVersionError(InputFormatError):
    """Error when a definition version is not a three-part numeric version.

    Attributes:
        version: The rejected version string.
    """

    def __init__(self, version: str) -> None:
        """Initialize the error.

        Args:
            version: The rejected version string.
        """
        self.version = version
        super().__init__("Not a valid version")


class MultipleDefinitionVersionsError(InputFormatError):
    """Error when both spec.version and the revision name annotation are set.

    A definition may be pinned by at most one of the two mechanisms.

    Attributes:
        object_type: Label of the definition kind, e.g. "TraitDefinition".
        version: The spec.version value.
        revision_name: The revision name annotation value.
    """

    def __init__(self, object_type: str, version: str, revision_name: str) -> None:
        """Initialize the error.

        Args:
            object_type: Label of the definition kind.
            version: The spec.version value.
            revision_name: The revision name annotation value.
        """
        self.object_type = object_type
        self.version = version
        self.revision_name = revision_name
        super().__init__(
            f"{object_type} has both spec.version and revision name annotation. "
            "Only one can be present"
        )
